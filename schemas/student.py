# schemas/student.py
"""
Pydantic schemas for Student API request/response validation.
"""
from datetime import date
from typing import Optional, Literal
from pydantic import Field

from .base import CamelModel, CamelResponse, CamelUpdate

Gender = Literal["Male", "Female"]


class StudentCreate(CamelModel):
     student_code: str = Field(..., min_length=1, max_length=20, description="Unique student code")
     name: str = Field(..., min_length=1, max_length=100)
     room_id: str = Field(..., description="Room the student moves into")
     dob: Optional[date] = None
     gender: Optional[Gender] = None
     phone: Optional[str] = Field(None, max_length=20)
     university: Optional[str] = Field(None, max_length=150)


class StudentUpdate(CamelUpdate):
     """A changed room_id moves the student to another room."""
     student_code: Optional[str] = Field(None, min_length=1, max_length=20)
     name: Optional[str] = Field(None, min_length=1, max_length=100)
     room_id: Optional[str] = None
     dob: Optional[date] = None
     gender: Optional[Gender] = None
     phone: Optional[str] = Field(None, max_length=20)
     university: Optional[str] = Field(None, max_length=150)


class StudentResponse(CamelResponse):
     id: str
     student_code: str
     name: str
     room_id: str
     dob: Optional[date] = None
     gender: Optional[str] = None
     phone: Optional[str] = None
     university: Optional[str] = None
