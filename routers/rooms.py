# routers/rooms.py
"""
Room API routes.

Room edits run through the occupancy service, which keeps currentCapacity
and status consistent:
- maxCapacity cannot drop below the number of occupants
- MAINTENANCE can only be set on an empty room
- a room with students or guests cannot be deleted; deleting an empty room
  also deletes its assets and bills
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_user, require
from models import Room, Student, Guest, Asset, Bill
from schemas.asset import AssetResponse
from schemas.bill import BillResponse
from schemas.guest import GuestResponse
from schemas.room import RoomCreate, RoomUpdate, RoomResponse, RoomSyncResponse
from schemas.student import StudentResponse
from services import occupancy_service
from services.access_policy import Permission
from services.repository import EntityStore

router = APIRouter(prefix="/api/rooms", tags=["rooms"])


@router.get("", response_model=List[RoomResponse], summary="List rooms")
def list_rooms(db: Session = Depends(get_session), user=Depends(get_current_user)):
     return EntityStore(db).rooms.list(order_by=Room.name)


@router.post(
     "/sync",
     response_model=RoomSyncResponse,
     summary="Recount occupants and repair room capacity"
)
def sync_rooms(db: Session = Depends(get_session), user=Depends(require(Permission.ROOM_SYNC))):
     """
     Recount the students and guests of every room and fix currentCapacity
     and status where they drifted. Returns the rooms that changed.
     """
     return occupancy_service.sync_room_capacities(db)


@router.get("/{room_id}", response_model=RoomResponse, summary="Get room by ID")
def get_room(room_id: str, db: Session = Depends(get_session), user=Depends(get_current_user)):
     return EntityStore(db).rooms.get(room_id)


@router.post(
     "",
     response_model=RoomResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a room"
)
def create_room(
     body: RoomCreate,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.ROOM_WRITE))
):
     """
     Create an empty room.

     - **buildingId**: building the room belongs to (must exist)
     - **maxCapacity**: number of places, must be positive
     - **status**: AVAILABLE (default) or MAINTENANCE
     """
     return occupancy_service.create_room(db, body)


@router.put("/{room_id}", response_model=RoomResponse, summary="Update room")
def update_room(
     room_id: str,
     body: RoomUpdate,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.ROOM_WRITE))
):
     """
     Update an existing room. Only provided fields are changed; status is
     re-derived from the occupancy afterwards.
     """
     return occupancy_service.update_room(db, room_id, body.changes())


@router.delete(
     "/{room_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete room"
)
def delete_room(
     room_id: str,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.ROOM_DELETE))
):
     occupancy_service.delete_room(db, room_id)
     return None


# ---------------------------------------------------------------------------
# Room contents
# ---------------------------------------------------------------------------

@router.get("/{room_id}/students", response_model=List[StudentResponse], summary="Students in a room")
def get_room_students(room_id: str, db: Session = Depends(get_session), user=Depends(get_current_user)):
     store = EntityStore(db)
     store.rooms.get(room_id)
     return store.students.list(order_by=Student.name, room_id=room_id)


@router.get("/{room_id}/guests", response_model=List[GuestResponse], summary="Guests in a room")
def get_room_guests(room_id: str, db: Session = Depends(get_session), user=Depends(get_current_user)):
     store = EntityStore(db)
     store.rooms.get(room_id)
     return store.guests.list(order_by=Guest.name, room_id=room_id)


@router.get("/{room_id}/assets", response_model=List[AssetResponse], summary="Assets in a room")
def get_room_assets(room_id: str, db: Session = Depends(get_session), user=Depends(get_current_user)):
     store = EntityStore(db)
     store.rooms.get(room_id)
     return store.assets.list(order_by=Asset.name, room_id=room_id)


@router.get("/{room_id}/bills", response_model=List[BillResponse], summary="Bills of a room")
def get_room_bills(room_id: str, db: Session = Depends(get_session), user=Depends(get_current_user)):
     store = EntityStore(db)
     store.rooms.get(room_id)
     return store.bills.list(order_by=Bill.month.desc(), room_id=room_id)
