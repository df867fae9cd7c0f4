# services/billing_service.py
"""
Billing Service - utility charges, totals and payment state of room bills.

Charges are computed from meter readings at fixed rates:
- electricity: (electric_index_new - electric_index_old) * ELECTRIC_RATE
- water:       (water_index_new - water_index_old) * WATER_RATE
A reading that goes backwards yields a zero charge for that utility.

The total is recomputed and stored on every create and update.
"""
import logging
from datetime import date, datetime
from typing import Optional

from sqlalchemy.orm import Session

import config
from database import transaction
from models import Bill, BillStatus
from schemas.bill import BillCreate
from services.repository import EntityStore

logger = logging.getLogger(__name__)


def electricity_charge(index_old: int, index_new: int) -> int:
     return max(0, index_new - index_old) * config.ELECTRIC_RATE


def water_charge(index_old: int, index_new: int) -> int:
     return max(0, index_new - index_old) * config.WATER_RATE


def compute_total(
     electric_index_old: int,
     electric_index_new: int,
     water_index_old: int,
     water_index_new: int,
     room_fee: int
) -> int:
     """Total amount of a bill: both utility charges plus the room fee."""
     return (
          electricity_charge(electric_index_old, electric_index_new)
          + water_charge(water_index_old, water_index_new)
          + room_fee
     )


def default_due_date(month: str) -> date:
     """
     Due date used when none is given: the DEFAULT_DUE_DAY of the billing month.

     Args:
          month: Billing month in YYYY-MM format
     """
     year, month_number = (int(part) for part in month.split("-"))
     return date(year, month_number, config.DEFAULT_DUE_DAY)


def is_overdue(bill: Bill, today: Optional[date] = None) -> bool:
     """An unpaid bill is overdue once its due date has fully passed."""
     today = today or date.today()
     return bill.status != BillStatus.PAID and today > bill.due_date


def recompute(bill: Bill) -> Bill:
     bill.total_amount = compute_total(
          bill.electric_index_old,
          bill.electric_index_new,
          bill.water_index_old,
          bill.water_index_new,
          bill.room_fee,
     )
     return bill


class BillingService:
     """Service class for bill-related business logic."""

     @staticmethod
     def create_bill(db: Session, data: BillCreate, now: Optional[datetime] = None) -> Bill:
          """
          Create an unpaid bill for a room.

          Raises:
               NotFound: If the room doesn't exist
          """
          now = now or datetime.now()
          with transaction(db):
               store = EntityStore(db)
               store.rooms.get(data.room_id)

               fields = data.model_dump()
               fields["due_date"] = fields["due_date"] or default_due_date(data.month)
               bill = Bill(**fields, status=BillStatus.UNPAID, created_at=now)
               recompute(bill)
               db.add(bill)
               db.flush()

          logger.info(
               "Bill created: id=%s room=%s month=%s total=%d",
               bill.id, bill.room_id, bill.month, bill.total_amount
          )
          return bill

     @staticmethod
     def update_bill(db: Session, bill_id: str, changes: dict) -> Bill:
          """Merge the provided fields and recompute the total."""
          changes = {k: v for k, v in changes.items() if v is not None}
          with transaction(db):
               store = EntityStore(db)
               bill = store.bills.get(bill_id)
               if "room_id" in changes:
                    store.rooms.get(changes["room_id"])

               bill.apply_changes(changes)
               recompute(bill)
               db.flush()

          logger.info("Bill updated: id=%s fields=%s total=%d", bill.id, sorted(changes), bill.total_amount)
          return bill

     @staticmethod
     def pay(db: Session, bill_id: str, now: Optional[datetime] = None) -> Bill:
          """Mark the bill as paid. Paying a paid bill keeps the first payment date."""
          with transaction(db):
               bill = EntityStore(db).bills.get(bill_id)
               bill.mark_as_paid(now or datetime.now())
               db.flush()

          logger.info("Bill paid: id=%s payment_date=%s", bill.id, bill.payment_date)
          return bill

     @staticmethod
     def unpay(db: Session, bill_id: str) -> Bill:
          """Return the bill to UNPAID and clear its payment date."""
          with transaction(db):
               bill = EntityStore(db).bills.get(bill_id)
               bill.mark_as_unpaid()
               db.flush()

          logger.info("Bill marked unpaid: id=%s", bill.id)
          return bill

     @staticmethod
     def delete_bill(db: Session, bill_id: str) -> None:
          with transaction(db):
               EntityStore(db).bills.delete(bill_id)

          logger.info("Bill deleted: id=%s", bill_id)
