# schemas/user.py
"""
Pydantic schemas for accounts and login. Password hashes never leave the API.
"""
from typing import Optional
from pydantic import Field

from models.user import Role
from .base import CamelModel, CamelResponse, CamelUpdate


class LoginRequest(CamelModel):
     username: str
     password: str


class UserCreate(CamelModel):
     username: str = Field(..., min_length=1, max_length=50)
     password: str = Field(..., min_length=1, max_length=128)
     full_name: str = Field(..., min_length=1, max_length=100)
     role: Role = Role.STAFF


class UserUpdate(CamelUpdate):
     username: Optional[str] = Field(None, min_length=1, max_length=50)
     password: Optional[str] = Field(None, min_length=1, max_length=128)
     full_name: Optional[str] = Field(None, min_length=1, max_length=100)
     role: Optional[Role] = None


class UserResponse(CamelResponse):
     id: str
     username: str
     full_name: str
     role: Role


class LoginResponse(CamelModel):
     token: str
     token_type: str = "bearer"
     user: UserResponse
