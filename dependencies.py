# dependencies.py
"""
FastAPI dependencies shared by the routers: bearer-token authentication and
role-based permission gates.
"""
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from database import get_session
from exceptions import Unauthorized
from models import User
from services.access_policy import Permission, check_permission
from services.auth_service import decode_access_token


# Token Auth Dependency
def verify_token(request: Request) -> dict:
     auth = request.headers.get("Authorization")
     if not auth or not auth.startswith("Bearer "):
          raise Unauthorized("Missing token")
     return decode_access_token(auth.split(" ", 1)[1])


def get_current_user(
     token: dict = Depends(verify_token),
     db: Session = Depends(get_session),
) -> User:
     """Load the account behind the token so role changes apply immediately."""
     user = db.query(User).filter(User.id == token.get("sub")).first()
     if user is None:
          raise Unauthorized("Account no longer exists")
     return user


def require(permission: Permission):
     """Dependency factory: reject the request unless the caller's role holds permission."""

     def dependency(user: User = Depends(get_current_user)) -> User:
          check_permission(user.role, permission)
          return user

     return dependency
