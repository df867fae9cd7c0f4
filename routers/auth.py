# routers/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_user
from models import User
from schemas.user import LoginRequest, LoginResponse, UserResponse
from services import auth_service

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginResponse, summary="Log in")
def login(body: LoginRequest, db: Session = Depends(get_session)):
     """
     Exchange a username and password for a bearer token.
     """
     user = auth_service.authenticate(db, body.username, body.password)
     return LoginResponse(
          token=auth_service.create_access_token(user),
          user=UserResponse.model_validate(user),
     )


@router.get("/me", response_model=UserResponse, summary="Current account")
def me(user: User = Depends(get_current_user)):
     return user
