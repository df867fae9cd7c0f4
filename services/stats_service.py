# services/stats_service.py
"""
Stats Service - dashboard figures and the monthly revenue series.

Read-only derivations over the current rooms, residents and bills.
"""
from collections import OrderedDict
from typing import List

from sqlalchemy.orm import Session

from models import Bill, BillStatus, Guest, Room, RoomStatus, Student
from schemas.stats import DashboardStats, MonthlyRevenue
from services.billing_service import electricity_charge, water_charge


def occupancy_rate(used_slots: int, total_slots: int) -> int:
     """Percentage of places taken, rounded half up; 0 when there is no capacity."""
     if total_slots <= 0:
          return 0
     return int(100 * used_slots / total_slots + 0.5)


def get_dashboard_stats(db: Session) -> DashboardStats:
     rooms = db.query(Room).all()

     status_counts = {status: 0 for status in RoomStatus}
     for room in rooms:
          status_counts[room.status] += 1

     return DashboardStats(
          total_rooms=len(rooms),
          occupied_rooms=sum(1 for room in rooms if room.current_capacity > 0),
          full_rooms=status_counts[RoomStatus.FULL],
          available_rooms=status_counts[RoomStatus.AVAILABLE],
          maintenance_rooms=status_counts[RoomStatus.MAINTENANCE],
          total_students=db.query(Student).count(),
          total_guests=db.query(Guest).count(),
          occupancy_rate=occupancy_rate(
               sum(room.current_capacity for room in rooms),
               sum(room.max_capacity for room in rooms),
          ),
     )


def get_monthly_revenue(db: Session) -> List[MonthlyRevenue]:
     """
     Paid bills grouped by month, oldest first.

     Utility revenue is recomputed from the stored meter readings rather than
     derived from total_amount.
     """
     paid_bills = (
          db.query(Bill)
          .filter(Bill.status == BillStatus.PAID)
          .order_by(Bill.month)
          .all()
     )

     revenue = OrderedDict()
     for bill in paid_bills:
          entry = revenue.setdefault(bill.month, {"electricity": 0, "water": 0, "room_fee": 0})
          entry["electricity"] += electricity_charge(bill.electric_index_old, bill.electric_index_new)
          entry["water"] += water_charge(bill.water_index_old, bill.water_index_new)
          entry["room_fee"] += bill.room_fee

     return [
          MonthlyRevenue(month=month, **totals)
          for month, totals in sorted(revenue.items())
     ]
