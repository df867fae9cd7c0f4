# services/auth_service.py
"""
Auth Service - password hashing, bearer tokens and staff accounts.

Passwords are stored as passlib bcrypt hashes; tokens are HS256 JWTs
carrying the user id and role.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

import config
from database import transaction
from exceptions import DuplicateKey, LastAdmin, Unauthorized
from models import User, Role
from schemas.user import UserCreate
from services.repository import EntityStore

logger = logging.getLogger(__name__)

# Bcrypt
pwd_context = CryptContext(
     schemes=["bcrypt"],
     deprecated="auto",
     bcrypt__rounds=config.PASSWORD_BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
     return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
     return pwd_context.verify(password, hashed)


def create_access_token(user: User, expires_minutes: Optional[int] = None) -> str:
     expires_minutes = expires_minutes or config.ACCESS_TOKEN_EXPIRE_MINUTES
     payload = {
          "sub": user.id,
          "role": user.role.value,
          "exp": datetime.now(timezone.utc) + timedelta(minutes=expires_minutes),
     }
     return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
     """
     Raises:
          Unauthorized: If the token is malformed, forged or expired
     """
     try:
          return jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
     except JWTError:
          raise Unauthorized("Invalid or expired token")


def authenticate(db: Session, username: str, password: str) -> User:
     """
     Raises:
          Unauthorized: If the username is unknown or the password is wrong
     """
     user = db.query(User).filter(User.username == username).first()
     if user is None or not verify_password(password, user.password):
          logger.info("Login rejected for username=%s", username)
          raise Unauthorized("Incorrect username or password")
     logger.info("Login: user=%s role=%s", user.id, user.role.value)
     return user


# ---------------------------------------------------------------------------
# Account management
# ---------------------------------------------------------------------------

def _ensure_unique_username(store: EntityStore, username: str) -> None:
     if store.users.exists(username=username):
          raise DuplicateKey(f"Username {username} already exists")


def _ensure_other_admin(store: EntityStore, user: User) -> None:
     if user.role == Role.ADMIN and store.users.count(role=Role.ADMIN) <= 1:
          raise LastAdmin("The last ADMIN account cannot be removed or demoted")


def create_user(db: Session, data: UserCreate) -> User:
     with transaction(db):
          store = EntityStore(db)
          _ensure_unique_username(store, data.username)
          user = store.users.create(
               username=data.username,
               password=hash_password(data.password),
               full_name=data.full_name,
               role=data.role,
          )

     logger.info("User created: id=%s username=%s role=%s", user.id, user.username, user.role.value)
     return user


def update_user(db: Session, user_id: str, changes: dict) -> User:
     changes = {k: v for k, v in changes.items() if v is not None}
     with transaction(db):
          store = EntityStore(db)
          user = store.users.get(user_id)

          if "username" in changes and changes["username"] != user.username:
               _ensure_unique_username(store, changes["username"])
          if changes.get("role") == Role.STAFF:
               _ensure_other_admin(store, user)
          if "password" in changes:
               changes["password"] = hash_password(changes["password"])

          user.apply_changes(changes)
          db.flush()

     logger.info("User updated: id=%s fields=%s", user.id, sorted(changes))
     return user


def delete_user(db: Session, user_id: str) -> None:
     with transaction(db):
          store = EntityStore(db)
          user = store.users.get(user_id)
          _ensure_other_admin(store, user)
          db.delete(user)
          db.flush()

     logger.info("User deleted: id=%s", user_id)
