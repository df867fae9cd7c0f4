# schemas/asset.py
from typing import Optional
from pydantic import Field

from models.asset import AssetStatus
from .base import CamelModel, CamelResponse, CamelUpdate


class AssetCreate(CamelModel):
     name: str = Field(..., min_length=1, max_length=150)
     room_id: Optional[str] = Field(None, description="Omit to keep the asset in the warehouse")
     status: AssetStatus = AssetStatus.GOOD
     value: int = Field(0, ge=0)


class AssetUpdate(CamelUpdate):
     name: Optional[str] = Field(None, min_length=1, max_length=150)
     room_id: Optional[str] = None
     status: Optional[AssetStatus] = None
     value: Optional[int] = Field(None, ge=0)


class AssetStatusUpdate(CamelModel):
     status: AssetStatus


class AssetResponse(CamelResponse):
     id: str
     name: str
     room_id: Optional[str] = None
     status: AssetStatus
     value: int
