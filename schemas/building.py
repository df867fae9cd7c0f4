# schemas/building.py
"""
Pydantic schemas for Building API request/response validation.
"""
from typing import Optional
from pydantic import Field

from .base import CamelModel, CamelResponse, CamelUpdate


class BuildingCreate(CamelModel):
     name: str = Field(..., min_length=1, max_length=100)


class BuildingUpdate(CamelUpdate):
     name: Optional[str] = Field(None, min_length=1, max_length=100)


class BuildingResponse(CamelResponse):
     id: str
     name: str
