from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from exceptions import DuplicateKey, InvalidStay, NotFound
from models import Guest, Student
from schemas.guest import GuestCreate
from schemas.student import StudentCreate
from services import resident_service
from services.repository import Repository


def test_create_student_takes_a_place(db, make_room):
    room = make_room()
    student = resident_service.create_student(
        db, StudentCreate(student_code="SV001", name="Nguyen An", room_id=room.id, gender="Male")
    )

    assert len(student.id) == 32
    db.refresh(room)
    assert room.current_capacity == 1


def test_create_student_in_unknown_room(db):
    with pytest.raises(NotFound):
        resident_service.create_student(db, StudentCreate(student_code="SV001", name="An", room_id="missing"))
    assert db.query(Student).count() == 0


def test_duplicate_student_code_rolls_back_the_assignment(db, make_room):
    room = make_room()
    resident_service.create_student(db, StudentCreate(student_code="SV001", name="An", room_id=room.id))

    with pytest.raises(DuplicateKey):
        resident_service.create_student(db, StudentCreate(student_code="SV001", name="Binh", room_id=room.id))

    db.refresh(room)
    assert room.current_capacity == 1
    assert db.query(Student).count() == 1


def test_update_student_rejects_taken_code(db, make_room):
    room = make_room()
    resident_service.create_student(db, StudentCreate(student_code="SV001", name="An", room_id=room.id))
    other = resident_service.create_student(db, StudentCreate(student_code="SV002", name="Binh", room_id=room.id))

    with pytest.raises(DuplicateKey):
        resident_service.update_student(db, other.id, {"student_code": "SV001"})


def test_update_student_ignores_nulls_for_required_fields(db, make_room):
    room = make_room()
    student = resident_service.create_student(db, StudentCreate(student_code="SV001", name="An", room_id=room.id))

    student = resident_service.update_student(
        db, student.id, {"name": None, "room_id": None, "phone": "0901234567"}
    )

    assert student.name == "An"
    assert student.room_id == room.id
    assert student.phone == "0901234567"


def test_delete_unknown_student(db):
    with pytest.raises(NotFound):
        resident_service.delete_student(db, "missing")


def test_guest_check_in_and_out(db, make_room):
    room = make_room()
    guest = resident_service.check_in_guest(db, GuestCreate(name="Visitor", room_id=room.id, relation="Mother"))
    db.refresh(room)
    assert room.current_capacity == 1

    resident_service.check_out_guest(db, guest.id)

    db.refresh(room)
    assert room.current_capacity == 0
    assert db.query(Guest).count() == 0


def test_guest_move_updates_both_rooms(db, make_room):
    first = make_room(name="101")
    second = make_room(name="102")
    guest = resident_service.check_in_guest(db, GuestCreate(name="Visitor", room_id=first.id))

    resident_service.update_guest(db, guest.id, {"room_id": second.id})

    db.refresh(first)
    db.refresh(second)
    assert first.current_capacity == 0
    assert second.current_capacity == 1


def test_guest_check_out_before_check_in_is_invalid():
    with pytest.raises(ValueError):
        GuestCreate(name="Visitor", room_id="r1", check_in_date="2024-03-10", check_out_date="2024-03-01")


def test_failed_insert_rolls_back_the_assignment(db, make_room, monkeypatch):
    room = make_room()

    def failing_create(self, **fields):
        raise OperationalError("INSERT INTO students", {}, Exception("connection lost"))

    monkeypatch.setattr(Repository, "create", failing_create)

    with pytest.raises(OperationalError):
        resident_service.create_student(db, StudentCreate(student_code="SV001", name="An", room_id=room.id))

    db.refresh(room)
    assert room.current_capacity == 0
    assert db.query(Student).count() == 0


def test_guest_update_checks_dates_against_stored_ones(db, make_room):
    room = make_room()
    guest = resident_service.check_in_guest(
        db, GuestCreate(name="Visitor", room_id=room.id, check_in_date=date(2024, 3, 10))
    )

    with pytest.raises(InvalidStay):
        resident_service.update_guest(db, guest.id, {"check_out_date": date(2024, 3, 1)})

    db.refresh(guest)
    assert guest.check_out_date is None

    guest = resident_service.update_guest(db, guest.id, {"check_out_date": date(2024, 3, 12)})
    assert guest.check_out_date == date(2024, 3, 12)
