# models/__init__.py
from .base import Base
from .building import Building
from .room import Room, RoomStatus
from .student import Student
from .guest import Guest
from .asset import Asset, AssetStatus
from .bill import Bill, BillStatus
from .user import User, Role

__all__ = [
     "Base",
     "Building",
     "Room",
     "RoomStatus",
     "Student",
     "Guest",
     "Asset",
     "AssetStatus",
     "Bill",
     "BillStatus",
     "User",
     "Role",
]
