# schemas/bill.py
"""
Pydantic schemas for Bill API request/response validation.
"""
from datetime import date, datetime
from typing import Optional
from pydantic import Field, ConfigDict
from pydantic.alias_generators import to_camel

from models.bill import BillStatus
from .base import CamelModel, CamelResponse, CamelUpdate

MONTH_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


class BillCreate(CamelModel):
     """Schema for creating a new bill. total_amount is always computed."""
     room_id: str = Field(..., description="Room ID (must exist)")
     month: str = Field(..., pattern=MONTH_PATTERN, description="Billing month, YYYY-MM")
     electric_index_old: int = Field(0, ge=0)
     electric_index_new: int = Field(0, ge=0)
     water_index_old: int = Field(0, ge=0)
     water_index_new: int = Field(0, ge=0)
     room_fee: int = Field(0, ge=0)
     due_date: Optional[date] = Field(None, description="Defaults to the 10th of the billing month")

     model_config = ConfigDict(
          alias_generator=to_camel,
          populate_by_name=True,
          json_schema_extra={
               "example": {
                    "roomId": "r1",
                    "month": "2024-03",
                    "electricIndexOld": 100,
                    "electricIndexNew": 150,
                    "waterIndexOld": 50,
                    "waterIndexNew": 60,
                    "roomFee": 2000000
               }
          }
     )


class BillUpdate(CamelUpdate):
     """Schema for updating an existing bill. The total is recomputed."""
     room_id: Optional[str] = None
     month: Optional[str] = Field(None, pattern=MONTH_PATTERN)
     electric_index_old: Optional[int] = Field(None, ge=0)
     electric_index_new: Optional[int] = Field(None, ge=0)
     water_index_old: Optional[int] = Field(None, ge=0)
     water_index_new: Optional[int] = Field(None, ge=0)
     room_fee: Optional[int] = Field(None, ge=0)
     due_date: Optional[date] = None


class BillResponse(CamelResponse):
     """Schema for bill response."""
     id: str
     room_id: str
     month: str
     electric_index_old: int
     electric_index_new: int
     water_index_old: int
     water_index_new: int
     room_fee: int
     electricity_charge: int
     water_charge: int
     total_amount: int
     status: BillStatus
     created_at: datetime
     due_date: date
     payment_date: Optional[datetime] = None
     is_overdue: bool
