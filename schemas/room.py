# schemas/room.py
"""
Pydantic schemas for Room API request/response validation.

current_capacity is never accepted from clients; it only appears in responses.
"""
from typing import Optional, List
from pydantic import Field, ConfigDict
from pydantic.alias_generators import to_camel

from models.room import RoomStatus
from .base import CamelModel, CamelResponse, CamelUpdate


class RoomCreate(CamelModel):
     """Schema for creating a new room."""
     name: str = Field(..., min_length=1, max_length=50)
     building_id: str = Field(..., description="Building ID (must exist)")
     max_capacity: int = Field(..., gt=0, description="Maximum number of occupants")
     price_per_month: int = Field(0, ge=0)
     status: RoomStatus = Field(default=RoomStatus.AVAILABLE, description="AVAILABLE or MAINTENANCE")

     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
          json_schema_extra={
               "example": {
                    "name": "101",
                    "buildingId": "b1",
                    "maxCapacity": 4,
                    "pricePerMonth": 2000000,
                    "status": "AVAILABLE"
               }
          }
     )


class RoomUpdate(CamelUpdate):
     """Schema for updating an existing room. Only provided fields are changed."""
     name: Optional[str] = Field(None, min_length=1, max_length=50)
     building_id: Optional[str] = None
     max_capacity: Optional[int] = None
     price_per_month: Optional[int] = Field(None, ge=0)
     status: Optional[RoomStatus] = None


class RoomResponse(CamelResponse):
     id: str
     name: str
     building_id: str
     status: RoomStatus
     max_capacity: int
     current_capacity: int
     price_per_month: int


class RoomSyncEntry(CamelModel):
     room_id: str
     room_name: str
     previous_capacity: int
     current_capacity: int
     status: RoomStatus
     over_capacity: bool = False


class RoomSyncResponse(CamelModel):
     rooms_checked: int
     rooms_changed: int
     changes: List[RoomSyncEntry]
