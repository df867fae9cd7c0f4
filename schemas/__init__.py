# schemas/__init__.py
from .base import CamelModel, CamelResponse, CamelUpdate
from .building import BuildingCreate, BuildingUpdate, BuildingResponse
from .room import RoomCreate, RoomUpdate, RoomResponse, RoomSyncEntry, RoomSyncResponse
from .student import StudentCreate, StudentUpdate, StudentResponse
from .guest import GuestCreate, GuestUpdate, GuestResponse
from .asset import AssetCreate, AssetUpdate, AssetStatusUpdate, AssetResponse
from .bill import BillCreate, BillUpdate, BillResponse
from .user import LoginRequest, LoginResponse, UserCreate, UserUpdate, UserResponse
from .stats import DashboardStats, MonthlyRevenue, Notification

__all__ = [
     "CamelModel",
     "CamelResponse",
     "CamelUpdate",
     "BuildingCreate",
     "BuildingUpdate",
     "BuildingResponse",
     "RoomCreate",
     "RoomUpdate",
     "RoomResponse",
     "RoomSyncEntry",
     "RoomSyncResponse",
     "StudentCreate",
     "StudentUpdate",
     "StudentResponse",
     "GuestCreate",
     "GuestUpdate",
     "GuestResponse",
     "AssetCreate",
     "AssetUpdate",
     "AssetStatusUpdate",
     "AssetResponse",
     "BillCreate",
     "BillUpdate",
     "BillResponse",
     "LoginRequest",
     "LoginResponse",
     "UserCreate",
     "UserUpdate",
     "UserResponse",
     "DashboardStats",
     "MonthlyRevenue",
     "Notification",
]
