# services/occupancy_service.py
"""
Occupancy Service - keeps room capacity and status consistent with the
people living in each room.

Every mutation that changes who occupies a room goes through
assign_occupant / release_occupant, which update current_capacity and
re-derive the room status in the same transaction. Room administration
(create, update, delete, data repair) lives here too because it is bound by
the same invariants:

- 0 <= current_capacity <= max_capacity
- status == MAINTENANCE only while the room is empty
- status == FULL exactly when current_capacity >= max_capacity outside maintenance
"""
import logging
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from database import transaction
from exceptions import InvalidCapacity, NotFound, RoomFull, RoomOccupied, RoomUnavailable
from models import Room, RoomStatus
from schemas.room import RoomCreate, RoomSyncEntry, RoomSyncResponse
from services.repository import EntityStore

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Status derivation
# ---------------------------------------------------------------------------

def derive_room_status(current_capacity: int, max_capacity: int, status: RoomStatus) -> RoomStatus:
     """
     Compute the status a room must have.

     Occupants override a stored MAINTENANCE flag; outside maintenance the
     status follows the head count.
     """
     if status == RoomStatus.MAINTENANCE and current_capacity > 0:
          status = RoomStatus.AVAILABLE

     if status == RoomStatus.MAINTENANCE:
          return RoomStatus.MAINTENANCE
     if status in (RoomStatus.AVAILABLE, RoomStatus.FULL):
          return RoomStatus.FULL if current_capacity >= max_capacity else RoomStatus.AVAILABLE
     raise ValueError(f"Unhandled room status: {status!r}")


def refresh_room_status(room: Room) -> Room:
     room.status = derive_room_status(room.current_capacity, room.max_capacity, room.status)
     return room


def check_status_request(room: Room, requested: RoomStatus) -> None:
     """
     Raises:
          RoomOccupied: If MAINTENANCE is requested while people live in the room
     """
     if requested == RoomStatus.MAINTENANCE and room.current_capacity > 0:
          raise RoomOccupied(
               f"Room {room.name} has {room.current_capacity} occupant(s) and cannot be put under maintenance"
          )


def validate_capacity_change(room: Room, new_max_capacity: int) -> None:
     """
     Raises:
          InvalidCapacity: If the new maximum is not positive or is below the current head count
     """
     if new_max_capacity <= 0:
          raise InvalidCapacity("Maximum capacity must be a positive number")
     if new_max_capacity < room.current_capacity:
          raise InvalidCapacity(
               f"New capacity {new_max_capacity} is smaller than the {room.current_capacity} "
               f"people currently living in room {room.name}"
          )


# ---------------------------------------------------------------------------
# Occupancy primitives (run inside the caller's transaction)
# ---------------------------------------------------------------------------

def _lock_rooms(store: EntityStore, *room_ids: str) -> Dict[str, Optional[Room]]:
     """Select the given rooms FOR UPDATE, always in ascending id order."""
     return {room_id: store.rooms.find(room_id, for_update=True) for room_id in sorted(set(room_ids))}


def _give_back_place(room: Room) -> Room:
     room.current_capacity = max(0, room.current_capacity - 1)
     return refresh_room_status(room)


def assign_occupant(db: Session, target_room_id: str, source_room_id: Optional[str] = None) -> Room:
     """
     Take one place in target room, leaving source room when this is a move.

     A move into the room the occupant already lives in changes nothing.
     Both rooms of a move are locked up front, in id order.

     Raises:
          NotFound: If the target room does not exist
          RoomUnavailable: If the target room is under maintenance
          RoomFull: If the target room has no free place
     """
     store = EntityStore(db)

     if source_room_id is not None and source_room_id == target_room_id:
          return store.rooms.get(target_room_id)

     room_ids = [target_room_id] if source_room_id is None else [target_room_id, source_room_id]
     locked = _lock_rooms(store, *room_ids)

     target = locked[target_room_id]
     if target is None:
          raise NotFound.entity(store.rooms.label, target_room_id)
     if target.status == RoomStatus.MAINTENANCE:
          raise RoomUnavailable(f"Room {target.name} is under maintenance")
     if target.current_capacity >= target.max_capacity:
          raise RoomFull(f"Room {target.name} is full ({target.current_capacity}/{target.max_capacity})")

     if source_room_id is not None:
          source = locked[source_room_id]
          if source is None:
               logger.warning("Released occupant from unknown room %s", source_room_id)
          else:
               _give_back_place(source)

     target.current_capacity += 1
     refresh_room_status(target)
     db.flush()
     return target


def release_occupant(db: Session, room_id: str) -> Optional[Room]:
     """
     Give back one place in a room; the count never drops below zero.

     A missing room is tolerated (the occupant pointed at a room that no
     longer exists) and reported as None.
     """
     room = _lock_rooms(EntityStore(db), room_id)[room_id]
     if room is None:
          logger.warning("Released occupant from unknown room %s", room_id)
          return None

     _give_back_place(room)
     db.flush()
     return room


# ---------------------------------------------------------------------------
# Room administration
# ---------------------------------------------------------------------------

def create_room(db: Session, data: RoomCreate) -> Room:
     """Create an empty room; it starts AVAILABLE unless MAINTENANCE was asked for."""
     with transaction(db):
          store = EntityStore(db)
          store.buildings.get(data.building_id)

          room = Room(
               name=data.name,
               building_id=data.building_id,
               max_capacity=data.max_capacity,
               price_per_month=data.price_per_month,
               current_capacity=0,
               status=data.status,
          )
          refresh_room_status(room)
          db.add(room)
          db.flush()

     logger.info("Room created: id=%s name=%s building=%s", room.id, room.name, room.building_id)
     return room


def update_room(db: Session, room_id: str, changes: dict) -> Room:
     """
     Apply an administrative edit to a room.

     Raises:
          NotFound: If the room or a new building does not exist
          InvalidCapacity: If max_capacity would drop below the head count
          RoomOccupied: If MAINTENANCE is requested for an occupied room
     """
     changes = dict(changes)
     changes.pop("current_capacity", None)

     with transaction(db):
          store = EntityStore(db)
          room = store.rooms.get(room_id, for_update=True)

          if changes.get("building_id") is not None:
               store.buildings.get(changes["building_id"])
          if changes.get("max_capacity") is not None:
               validate_capacity_change(room, changes["max_capacity"])
          if changes.get("status") is not None:
               check_status_request(room, changes["status"])

          room.apply_changes({k: v for k, v in changes.items() if v is not None})
          refresh_room_status(room)
          db.flush()

     logger.info("Room updated: id=%s fields=%s status=%s", room.id, sorted(changes), room.status.value)
     return room


def delete_room(db: Session, room_id: str) -> None:
     """
     Delete a room together with its assets and bills.

     Raises:
          NotFound: If the room does not exist
          RoomOccupied: If any student or guest still lives in the room
     """
     with transaction(db):
          store = EntityStore(db)
          room = store.rooms.get(room_id, for_update=True)

          student_count = store.students.count(room_id=room_id)
          guest_count = store.guests.count(room_id=room_id)
          if student_count or guest_count:
               raise RoomOccupied(
                    f"Room {room.name} still has {student_count} student(s) and {guest_count} guest(s); "
                    f"move them out before deleting the room"
               )

          assets_removed = store.assets.delete_where(room_id=room_id)
          bills_removed = store.bills.delete_where(room_id=room_id)
          db.delete(room)
          db.flush()

     logger.info(
          "Room deleted: id=%s assets_removed=%d bills_removed=%d",
          room_id, assets_removed, bills_removed
     )


def sync_room_capacities(db: Session) -> RoomSyncResponse:
     """
     Recount occupants of every room and repair current_capacity and status.

     Reports one entry per room whose count or status changed. A room holding
     more people than its maximum keeps the real count and is flagged.
     """
     changes: List[RoomSyncEntry] = []
     with transaction(db):
          store = EntityStore(db)
          rooms = store.rooms.list(order_by=Room.name)
          for room in rooms:
               counted = store.students.count(room_id=room.id) + store.guests.count(room_id=room.id)
               previous_capacity = room.current_capacity
               previous_status = room.status

               room.current_capacity = counted
               refresh_room_status(room)

               over_capacity = counted > room.max_capacity
               if over_capacity:
                    logger.warning(
                         "Room %s holds %d occupants but allows %d",
                         room.id, counted, room.max_capacity
                    )

               if previous_capacity != counted or previous_status != room.status or over_capacity:
                    changes.append(RoomSyncEntry(
                         room_id=room.id,
                         room_name=room.name,
                         previous_capacity=previous_capacity,
                         current_capacity=counted,
                         status=room.status,
                         over_capacity=over_capacity,
                    ))
          db.flush()

     logger.info("Room capacities synchronized: %d room(s) changed", len(changes))
     return RoomSyncResponse(rooms_checked=len(rooms), rooms_changed=len(changes), changes=changes)
