from datetime import date, datetime

import pytest

from exceptions import NotFound
from models import BillStatus
from schemas.bill import BillCreate
from services import BillingService, compute_total, default_due_date, is_overdue
from services.billing_service import electricity_charge, water_charge


def test_worked_example_total():
    assert electricity_charge(100, 150) == 175000
    assert water_charge(50, 60) == 100000
    assert compute_total(100, 150, 50, 60, 2000000) == 2275000


def test_readings_going_backwards_charge_nothing():
    assert electricity_charge(150, 100) == 0
    assert water_charge(60, 50) == 0
    assert compute_total(150, 100, 60, 50, 500) == 500


def test_default_due_date_is_tenth_of_month():
    assert default_due_date("2024-03") == date(2024, 3, 10)


@pytest.fixture
def room(make_room):
    return make_room()


def create_bill(db, room, **fields):
    fields.setdefault("month", "2024-03")
    return BillingService.create_bill(db, BillCreate(room_id=room.id, **fields))


def test_create_bill_computes_total_and_due_date(db, room):
    bill = create_bill(
        db, room,
        electric_index_old=100, electric_index_new=150,
        water_index_old=50, water_index_new=60,
        room_fee=2000000,
    )

    assert bill.total_amount == 2275000
    assert bill.status == BillStatus.UNPAID
    assert bill.due_date == date(2024, 3, 10)
    assert bill.payment_date is None


def test_create_bill_keeps_explicit_due_date(db, room):
    bill = create_bill(db, room, due_date=date(2024, 3, 25))
    assert bill.due_date == date(2024, 3, 25)


def test_create_bill_for_unknown_room(db, building):
    with pytest.raises(NotFound):
        BillingService.create_bill(db, BillCreate(room_id="missing", month="2024-03"))


def test_duplicate_month_bills_are_allowed(db, room):
    first = create_bill(db, room)
    second = create_bill(db, room)
    assert first.id != second.id


def test_update_recomputes_total(db, room):
    bill = create_bill(db, room, electric_index_old=100, electric_index_new=150, room_fee=1000)

    bill = BillingService.update_bill(db, bill.id, {"electric_index_new": 110, "room_fee": None})

    assert bill.total_amount == 10 * 3500 + 1000
    assert bill.due_date == date(2024, 3, 10)


def test_pay_is_idempotent(db, room):
    bill = create_bill(db, room)
    first_payment = datetime(2024, 3, 5, 9, 30)

    BillingService.pay(db, bill.id, now=first_payment)
    bill = BillingService.pay(db, bill.id, now=datetime(2024, 3, 6, 10, 0))

    assert bill.status == BillStatus.PAID
    assert bill.payment_date == first_payment


def test_unpay_clears_payment_date(db, room):
    bill = create_bill(db, room)
    BillingService.pay(db, bill.id)

    bill = BillingService.unpay(db, bill.id)

    assert bill.status == BillStatus.UNPAID
    assert bill.payment_date is None


def test_overdue_only_after_due_date_and_while_unpaid(db, room):
    bill = create_bill(db, room)

    assert not is_overdue(bill, today=date(2024, 3, 10))
    assert is_overdue(bill, today=date(2024, 3, 11))

    BillingService.pay(db, bill.id)
    assert not is_overdue(bill, today=date(2024, 3, 11))


def test_delete_bill(db, room):
    bill = create_bill(db, room)
    BillingService.delete_bill(db, bill.id)

    with pytest.raises(NotFound):
        BillingService.pay(db, bill.id)
