# routers/users.py
"""
Account management routes, ADMIN only.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import require
from models import User
from schemas.user import UserCreate, UserUpdate, UserResponse
from services import auth_service
from services.access_policy import Permission
from services.repository import EntityStore

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=List[UserResponse], summary="List accounts")
def list_users(db: Session = Depends(get_session), user=Depends(require(Permission.USER_MANAGE))):
     return EntityStore(db).users.list(order_by=User.username)


@router.get("/{user_id}", response_model=UserResponse, summary="Get account by ID")
def get_user(user_id: str, db: Session = Depends(get_session), user=Depends(require(Permission.USER_MANAGE))):
     return EntityStore(db).users.get(user_id)


@router.post(
     "",
     response_model=UserResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create an account"
)
def create_user(
     body: UserCreate,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.USER_MANAGE))
):
     return auth_service.create_user(db, body)


@router.put("/{user_id}", response_model=UserResponse, summary="Update an account")
def update_user(
     user_id: str,
     body: UserUpdate,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.USER_MANAGE))
):
     """
     Update an account. A new **password** is re-hashed; demoting the last
     ADMIN is rejected with 409.
     """
     return auth_service.update_user(db, user_id, body.changes())


@router.delete(
     "/{user_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete an account"
)
def delete_user(
     user_id: str,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.USER_MANAGE))
):
     auth_service.delete_user(db, user_id)
     return None
