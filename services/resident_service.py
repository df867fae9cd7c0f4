# services/resident_service.py
"""
Resident Service - students and guests moving in, between and out of rooms.

Students and guests both occupy a place in their room: every create, move
and removal is routed through the occupancy service inside one transaction,
so room counters always match the people referencing the room.
"""
import logging

from sqlalchemy.orm import Session

from database import transaction
from exceptions import DuplicateKey, InvalidStay
from models import Student, Guest
from schemas.guest import GuestCreate, stay_is_ordered
from schemas.student import StudentCreate
from services.occupancy_service import assign_occupant, release_occupant
from services.repository import EntityStore

logger = logging.getLogger(__name__)


def _without_nulls(changes: dict, *required) -> dict:
     """Drop explicit nulls sent for columns that cannot be empty."""
     return {k: v for k, v in changes.items() if v is not None or k not in required}


def _move(db: Session, occupant, changes: dict) -> None:
     """Handle a room_id change carried by a partial update."""
     new_room_id = changes.get("room_id")
     if new_room_id is None:
          changes.pop("room_id", None)
          return
     if new_room_id != occupant.room_id:
          assign_occupant(db, new_room_id, source_room_id=occupant.room_id)


# ---------------------------------------------------------------------------
# Students
# ---------------------------------------------------------------------------

def _ensure_unique_code(store: EntityStore, student_code: str) -> None:
     if store.students.exists(student_code=student_code):
          raise DuplicateKey(f"Student code {student_code} already exists")


def create_student(db: Session, data: StudentCreate) -> Student:
     """
     Register a student and take a place in their room.

     Raises:
          NotFound: If the room does not exist
          RoomUnavailable: If the room is under maintenance
          RoomFull: If the room has no free place
          DuplicateKey: If the student code is taken
     """
     with transaction(db):
          store = EntityStore(db)
          assign_occupant(db, data.room_id)
          _ensure_unique_code(store, data.student_code)
          student = store.students.create(**data.model_dump())

     logger.info("Student created: id=%s code=%s room=%s", student.id, student.student_code, student.room_id)
     return student


def update_student(db: Session, student_id: str, changes: dict) -> Student:
     """Partial update; a different room_id moves the student."""
     changes = _without_nulls(changes, "student_code", "name")
     with transaction(db):
          store = EntityStore(db)
          student = store.students.get(student_id)
          old_room_id = student.room_id

          new_code = changes.get("student_code")
          if new_code is not None and new_code != student.student_code:
               _ensure_unique_code(store, new_code)

          _move(db, student, changes)
          student.apply_changes(changes)
          db.flush()

     if student.room_id != old_room_id:
          logger.info("Student moved: id=%s from=%s to=%s", student.id, old_room_id, student.room_id)
     logger.info("Student updated: id=%s fields=%s", student.id, sorted(changes))
     return student


def delete_student(db: Session, student_id: str) -> None:
     with transaction(db):
          store = EntityStore(db)
          student = store.students.get(student_id)
          release_occupant(db, student.room_id)
          db.delete(student)
          db.flush()

     logger.info("Student deleted: id=%s room=%s", student_id, student.room_id)


# ---------------------------------------------------------------------------
# Guests
# ---------------------------------------------------------------------------

def check_in_guest(db: Session, data: GuestCreate) -> Guest:
     """
     Check a guest into a room; guests count toward the room's capacity.

     Raises:
          NotFound: If the room does not exist
          RoomUnavailable: If the room is under maintenance
          RoomFull: If the room has no free place
     """
     with transaction(db):
          store = EntityStore(db)
          assign_occupant(db, data.room_id)
          guest = store.guests.create(**data.model_dump())

     logger.info("Guest checked in: id=%s room=%s", guest.id, guest.room_id)
     return guest


def update_guest(db: Session, guest_id: str, changes: dict) -> Guest:
     """
     Partial update; a different room_id moves the guest.

     Raises:
          InvalidStay: If the resulting check-out date is before the check-in date
     """
     changes = _without_nulls(changes, "name")
     with transaction(db):
          store = EntityStore(db)
          guest = store.guests.get(guest_id)
          check_in_date = changes.get("check_in_date", guest.check_in_date)
          check_out_date = changes.get("check_out_date", guest.check_out_date)
          if not stay_is_ordered(check_in_date, check_out_date):
               raise InvalidStay(f"Check-out date {check_out_date} is before check-in date {check_in_date}")

          _move(db, guest, changes)
          guest.apply_changes(changes)
          db.flush()

     logger.info("Guest updated: id=%s fields=%s", guest.id, sorted(changes))
     return guest


def check_out_guest(db: Session, guest_id: str) -> None:
     """Release the guest's place and remove the guest record."""
     with transaction(db):
          store = EntityStore(db)
          guest = store.guests.get(guest_id)
          release_occupant(db, guest.room_id)
          db.delete(guest)
          db.flush()

     logger.info("Guest checked out: id=%s room=%s", guest_id, guest.room_id)
