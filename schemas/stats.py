# schemas/stats.py
from typing import Literal

from .base import CamelModel


class DashboardStats(CamelModel):
     total_rooms: int
     occupied_rooms: int
     full_rooms: int
     available_rooms: int
     maintenance_rooms: int
     total_students: int
     total_guests: int
     occupancy_rate: int


class MonthlyRevenue(CamelModel):
     month: str
     electricity: int
     water: int
     room_fee: int


class Notification(CamelModel):
     id: str
     type: Literal["warning", "danger", "info"]
     message: str
     bill_id: str
     room_id: str
     days_until_due: int
     timestamp: str
