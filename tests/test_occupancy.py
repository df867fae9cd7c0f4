import pytest

from exceptions import InvalidCapacity, NotFound, RoomFull, RoomOccupied, RoomUnavailable
from models import Asset, Bill, Room, RoomStatus, Student
from schemas.asset import AssetCreate
from schemas.bill import BillCreate
from schemas.guest import GuestCreate
from schemas.room import RoomCreate
from schemas.student import StudentCreate
from services import BillingService, facility_service, occupancy_service, resident_service
from services.occupancy_service import derive_room_status
from services.repository import Repository


def add_student(db, room, code):
    return resident_service.create_student(
        db, StudentCreate(student_code=code, name=f"Student {code}", room_id=room.id)
    )


@pytest.mark.parametrize("current,maximum,stored,expected", [
    (0, 4, RoomStatus.AVAILABLE, RoomStatus.AVAILABLE),
    (3, 4, RoomStatus.FULL, RoomStatus.AVAILABLE),
    (4, 4, RoomStatus.AVAILABLE, RoomStatus.FULL),
    (5, 4, RoomStatus.FULL, RoomStatus.FULL),
    (0, 4, RoomStatus.MAINTENANCE, RoomStatus.MAINTENANCE),
    (1, 4, RoomStatus.MAINTENANCE, RoomStatus.AVAILABLE),
    (4, 4, RoomStatus.MAINTENANCE, RoomStatus.FULL),
])
def test_derive_room_status(current, maximum, stored, expected):
    assert derive_room_status(current, maximum, stored) == expected


def test_new_room_starts_empty_and_available(make_room):
    room = make_room(max_capacity=2)
    assert room.current_capacity == 0
    assert room.status == RoomStatus.AVAILABLE


def test_create_room_requires_existing_building(db):
    with pytest.raises(NotFound):
        occupancy_service.create_room(db, RoomCreate(name="X", building_id="missing", max_capacity=2))


def test_last_free_place_makes_room_full(db, make_room):
    room = make_room(max_capacity=2)
    add_student(db, room, "S1")
    add_student(db, room, "S2")

    db.refresh(room)
    assert room.current_capacity == 2
    assert room.status == RoomStatus.FULL


def test_assign_to_full_room_is_rejected(db, make_room):
    room = make_room(max_capacity=1)
    add_student(db, room, "S1")

    with pytest.raises(RoomFull):
        add_student(db, room, "S2")

    db.refresh(room)
    assert room.current_capacity == 1
    assert db.query(Student).count() == 1


def test_guests_take_a_place(db, make_room):
    room = make_room(max_capacity=1)
    resident_service.check_in_guest(db, GuestCreate(name="Visitor", room_id=room.id))

    with pytest.raises(RoomFull):
        add_student(db, room, "S1")


def test_removing_student_from_full_room_frees_it(db, make_room):
    room = make_room(max_capacity=4)
    students = [add_student(db, room, f"S{i}") for i in range(4)]
    db.refresh(room)
    assert room.status == RoomStatus.FULL

    resident_service.delete_student(db, students[0].id)

    db.refresh(room)
    assert room.current_capacity == 3
    assert room.status == RoomStatus.AVAILABLE


def test_maintenance_room_rejects_new_occupants(db, make_room):
    room = make_room()
    room = occupancy_service.update_room(db, room.id, {"status": RoomStatus.MAINTENANCE})
    assert room.status == RoomStatus.MAINTENANCE

    with pytest.raises(RoomUnavailable):
        add_student(db, room, "S1")

    db.refresh(room)
    assert room.current_capacity == 0


def test_assign_succeeds_after_maintenance_is_cleared(db, make_room):
    room = make_room()
    occupancy_service.update_room(db, room.id, {"status": RoomStatus.MAINTENANCE})
    occupancy_service.update_room(db, room.id, {"status": RoomStatus.AVAILABLE})

    add_student(db, room, "S1")

    db.refresh(room)
    assert room.current_capacity == 1
    assert room.status == RoomStatus.AVAILABLE


def test_occupied_room_cannot_enter_maintenance(db, make_room):
    room = make_room()
    add_student(db, room, "S1")

    with pytest.raises(RoomOccupied):
        occupancy_service.update_room(db, room.id, {"status": RoomStatus.MAINTENANCE})

    db.refresh(room)
    assert room.status == RoomStatus.AVAILABLE


def test_capacity_cannot_drop_below_occupancy(db, make_room):
    room = make_room(max_capacity=4)
    for i in range(3):
        add_student(db, room, f"S{i}")

    with pytest.raises(InvalidCapacity):
        occupancy_service.update_room(db, room.id, {"max_capacity": 2})
    with pytest.raises(InvalidCapacity):
        occupancy_service.update_room(db, room.id, {"max_capacity": 0})

    room = occupancy_service.update_room(db, room.id, {"max_capacity": 3})
    assert room.max_capacity == 3
    assert room.status == RoomStatus.FULL


def test_raising_capacity_reopens_full_room(db, make_room):
    room = make_room(max_capacity=1)
    add_student(db, room, "S1")

    room = occupancy_service.update_room(db, room.id, {"max_capacity": 2})
    assert room.status == RoomStatus.AVAILABLE


def test_current_capacity_is_not_client_writable(db, make_room):
    room = make_room()
    room = occupancy_service.update_room(db, room.id, {"current_capacity": 3, "name": "102"})
    assert room.current_capacity == 0
    assert room.name == "102"


def test_move_between_rooms(db, make_room):
    source = make_room(name="101", max_capacity=1)
    target = make_room(name="102", max_capacity=2)
    student = add_student(db, source, "S1")

    resident_service.update_student(db, student.id, {"room_id": target.id})

    db.refresh(source)
    db.refresh(target)
    assert (source.current_capacity, source.status) == (0, RoomStatus.AVAILABLE)
    assert (target.current_capacity, target.status) == (1, RoomStatus.AVAILABLE)


def test_move_into_full_room_leaves_everything_unchanged(db, make_room):
    source = make_room(name="101", max_capacity=2)
    target = make_room(name="102", max_capacity=1)
    student = add_student(db, source, "S1")
    add_student(db, target, "S2")

    with pytest.raises(RoomFull):
        resident_service.update_student(db, student.id, {"room_id": target.id})

    db.refresh(source)
    db.refresh(student)
    assert source.current_capacity == 1
    assert student.room_id == source.id


def test_move_into_same_room_changes_nothing(db, make_room):
    room = make_room(max_capacity=1)
    student = add_student(db, room, "S1")

    resident_service.update_student(db, student.id, {"room_id": room.id, "name": "Renamed"})

    db.refresh(room)
    assert room.current_capacity == 1
    assert room.status == RoomStatus.FULL


def test_release_never_goes_negative(db, make_room):
    room = make_room()
    occupancy_service.release_occupant(db, room.id)
    db.commit()

    db.refresh(room)
    assert room.current_capacity == 0


def test_release_from_unknown_room_is_tolerated(db):
    assert occupancy_service.release_occupant(db, "missing") is None


def test_delete_occupied_room_touches_nothing(db, make_room):
    room = make_room()
    add_student(db, room, "S1")
    facility_service.create_asset(db, AssetCreate(name="Bed", room_id=room.id))
    BillingService.create_bill(db, BillCreate(room_id=room.id, month="2024-03"))

    with pytest.raises(RoomOccupied):
        occupancy_service.delete_room(db, room.id)

    assert db.get(Room, room.id) is not None
    assert db.query(Asset).filter_by(room_id=room.id).count() == 1
    assert db.query(Bill).filter_by(room_id=room.id).count() == 1


def test_delete_room_with_guest_is_rejected(db, make_room):
    room = make_room()
    resident_service.check_in_guest(db, GuestCreate(name="Visitor", room_id=room.id))

    with pytest.raises(RoomOccupied):
        occupancy_service.delete_room(db, room.id)


def test_delete_empty_room_removes_assets_and_bills(db, make_room):
    room = make_room()
    other = make_room(name="102")
    facility_service.create_asset(db, AssetCreate(name="Bed", room_id=room.id))
    facility_service.create_asset(db, AssetCreate(name="Desk", room_id=other.id))
    BillingService.create_bill(db, BillCreate(room_id=room.id, month="2024-03"))

    occupancy_service.delete_room(db, room.id)

    assert db.get(Room, room.id) is None
    assert db.query(Asset).count() == 1
    assert db.query(Bill).count() == 0


def test_sync_repairs_drifted_counts(db, make_room):
    room = make_room(name="101", max_capacity=2)
    untouched = make_room(name="102", max_capacity=2)
    add_student(db, room, "S1")

    room.current_capacity = 2
    room.status = RoomStatus.FULL
    db.commit()

    result = occupancy_service.sync_room_capacities(db)

    assert result.rooms_checked == 2
    assert result.rooms_changed == 1
    entry = result.changes[0]
    assert (entry.room_id, entry.previous_capacity, entry.current_capacity) == (room.id, 2, 1)
    assert entry.status == RoomStatus.AVAILABLE
    db.refresh(untouched)
    assert untouched.current_capacity == 0


def test_sync_clears_maintenance_on_occupied_room(db, make_room):
    room = make_room()
    occupancy_service.update_room(db, room.id, {"status": RoomStatus.MAINTENANCE})

    db.add(Student(student_code="S1", name="Imported", room_id=room.id))
    db.commit()

    occupancy_service.sync_room_capacities(db)

    db.refresh(room)
    assert room.current_capacity == 1
    assert room.status == RoomStatus.AVAILABLE


def test_sync_flags_over_capacity_rooms(db, make_room):
    room = make_room(max_capacity=1)
    db.add_all([
        Student(student_code="S1", name="One", room_id=room.id),
        Student(student_code="S2", name="Two", room_id=room.id),
    ])
    db.commit()

    result = occupancy_service.sync_room_capacities(db)

    assert result.changes[0].over_capacity is True
    db.refresh(room)
    assert room.current_capacity == 2
    assert room.status == RoomStatus.FULL


def test_opposite_moves_lock_rooms_in_the_same_order(db, make_room, monkeypatch):
    first = make_room(name="101")
    second = make_room(name="102")
    one = add_student(db, first, "S1")
    two = add_student(db, second, "S2")

    locked = []
    original_find = Repository.find

    def recording_find(self, entity_id, for_update=False):
        if for_update and self.model is Room:
            locked.append(entity_id)
        return original_find(self, entity_id, for_update=for_update)

    monkeypatch.setattr(Repository, "find", recording_find)

    resident_service.update_student(db, one.id, {"room_id": second.id})
    resident_service.update_student(db, two.id, {"room_id": first.id})

    in_id_order = sorted([first.id, second.id])
    assert locked == in_id_order + in_id_order
    db.refresh(first)
    db.refresh(second)
    assert (first.current_capacity, second.current_capacity) == (1, 1)
