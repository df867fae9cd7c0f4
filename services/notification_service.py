# services/notification_service.py
"""
Notification Service - due-soon and overdue alerts for unpaid bills.

Nothing is stored: the list is rebuilt from the current bills on every call.
"""
import math
from datetime import datetime, time
from typing import List, Optional

from sqlalchemy.orm import Session

import config
from models import Bill, BillStatus, Room
from schemas.stats import Notification

SECONDS_PER_DAY = 24 * 60 * 60


def days_until_due(bill: Bill, now: datetime) -> int:
     """Whole days left until the due date, rounded up; negative once overdue."""
     due_at = datetime.combine(bill.due_date, time.min)
     return math.ceil((due_at - now).total_seconds() / SECONDS_PER_DAY)


def build_notification(bill: Bill, room_name: str, now: datetime) -> Optional[Notification]:
     days = days_until_due(bill, now)

     if days < 0:
          return Notification(
               id=f"notif-overdue-{bill.id}",
               type="danger",
               message=f"Room {room_name}: bill for {bill.month} is overdue by {abs(days)} day(s).",
               bill_id=bill.id,
               room_id=bill.room_id,
               days_until_due=days,
               timestamp=now.isoformat(timespec="seconds"),
          )
     if days <= config.DUE_SOON_DAYS:
          return Notification(
               id=f"notif-warn-{bill.id}",
               type="warning",
               message=f"Room {room_name}: bill for {bill.month} is due in {days} day(s).",
               bill_id=bill.id,
               room_id=bill.room_id,
               days_until_due=days,
               timestamp=now.isoformat(timespec="seconds"),
          )
     return None


def get_notifications(db: Session, now: Optional[datetime] = None) -> List[Notification]:
     now = now or datetime.now()

     unpaid = (
          db.query(Bill)
          .filter(Bill.status == BillStatus.UNPAID)
          .order_by(Bill.due_date, Bill.id)
          .all()
     )
     room_names = {room.id: room.name for room in db.query(Room).all()}

     notifications = []
     for bill in unpaid:
          notification = build_notification(bill, room_names.get(bill.room_id, bill.room_id), now)
          if notification is not None:
               notifications.append(notification)
     return notifications
