from datetime import datetime

from models import RoomStatus
from schemas.bill import BillCreate
from schemas.guest import GuestCreate
from schemas.student import StudentCreate
from services import BillingService, occupancy_service, resident_service, stats_service
from services.stats_service import occupancy_rate


def test_occupancy_rate_rounds_half_up():
    assert occupancy_rate(0, 0) == 0
    assert occupancy_rate(1, 8) == 13
    assert occupancy_rate(1, 3) == 33
    assert occupancy_rate(2, 3) == 67
    assert occupancy_rate(4, 4) == 100


def test_dashboard_stats(db, make_room):
    full = make_room(name="101", max_capacity=1)
    partial = make_room(name="102", max_capacity=4)
    closed = make_room(name="103", max_capacity=3)
    occupancy_service.update_room(db, closed.id, {"status": RoomStatus.MAINTENANCE})

    resident_service.create_student(db, StudentCreate(student_code="S1", name="An", room_id=full.id))
    resident_service.create_student(db, StudentCreate(student_code="S2", name="Binh", room_id=partial.id))
    resident_service.check_in_guest(db, GuestCreate(name="Visitor", room_id=partial.id))

    stats = stats_service.get_dashboard_stats(db)

    assert stats.total_rooms == 3
    assert stats.occupied_rooms == 2
    assert stats.full_rooms == 1
    assert stats.available_rooms == 1
    assert stats.maintenance_rooms == 1
    assert stats.total_students == 2
    assert stats.total_guests == 1
    assert stats.occupancy_rate == 38  # 3 of 8 places


def test_monthly_revenue_counts_paid_bills_only(db, make_room):
    room = make_room()
    march = BillingService.create_bill(db, BillCreate(
        room_id=room.id, month="2024-03",
        electric_index_old=100, electric_index_new=150,
        water_index_old=50, water_index_new=60,
        room_fee=2000000,
    ))
    february = BillingService.create_bill(db, BillCreate(room_id=room.id, month="2024-02", room_fee=1500000))
    BillingService.create_bill(db, BillCreate(room_id=room.id, month="2024-04", room_fee=999))

    BillingService.pay(db, march.id, now=datetime(2024, 3, 5))
    BillingService.pay(db, february.id, now=datetime(2024, 2, 5))

    revenue = stats_service.get_monthly_revenue(db)

    assert [entry.month for entry in revenue] == ["2024-02", "2024-03"]
    assert (revenue[0].electricity, revenue[0].water, revenue[0].room_fee) == (0, 0, 1500000)
    assert (revenue[1].electricity, revenue[1].water, revenue[1].room_fee) == (175000, 100000, 2000000)
