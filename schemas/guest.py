# schemas/guest.py
"""
Pydantic schemas for Guest API request/response validation.
"""
from datetime import date
from typing import Optional
from pydantic import Field, model_validator

from .base import CamelModel, CamelResponse, CamelUpdate


def stay_is_ordered(check_in_date: Optional[date], check_out_date: Optional[date]) -> bool:
     return not (check_in_date and check_out_date and check_out_date < check_in_date)


class GuestCreate(CamelModel):
     name: str = Field(..., min_length=1, max_length=100)
     room_id: str
     cccd: Optional[str] = Field(None, max_length=20, description="Citizen ID number")
     relation: Optional[str] = Field(None, max_length=50)
     check_in_date: Optional[date] = None
     check_out_date: Optional[date] = None

     @model_validator(mode="after")
     def check_dates(self):
          if not stay_is_ordered(self.check_in_date, self.check_out_date):
               raise ValueError("checkOutDate must not be before checkInDate")
          return self


class GuestUpdate(CamelUpdate):
     """Dates sent alone are checked against the stored ones by the service."""
     name: Optional[str] = Field(None, min_length=1, max_length=100)
     room_id: Optional[str] = None
     cccd: Optional[str] = Field(None, max_length=20)
     relation: Optional[str] = Field(None, max_length=50)
     check_in_date: Optional[date] = None
     check_out_date: Optional[date] = None

     @model_validator(mode="after")
     def check_dates(self):
          if not stay_is_ordered(self.check_in_date, self.check_out_date):
               raise ValueError("checkOutDate must not be before checkInDate")
          return self


class GuestResponse(CamelResponse):
     id: str
     name: str
     room_id: str
     cccd: Optional[str] = None
     relation: Optional[str] = None
     check_in_date: Optional[date] = None
     check_out_date: Optional[date] = None
