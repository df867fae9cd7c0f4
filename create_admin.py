"""
Create the default ADMIN account.

Usage:
    ADMIN_PASSWORD=... python create_admin.py

The password is prompted for when ADMIN_PASSWORD is not set. Nothing is
changed if the account already exists.
"""
import getpass
import logging
import os

from database import get_session_context, init_db
from logging_config import setup_logging
from models import Role, User
from schemas.user import UserCreate
from services.auth_service import create_user

logger = logging.getLogger("create_admin")

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_FULL_NAME = os.getenv("ADMIN_FULL_NAME", "Administrator")


def create_admin(password: str) -> bool:
    """Returns False when the account already exists."""
    with get_session_context() as db:
        if db.query(User).filter(User.username == ADMIN_USERNAME).first():
            logger.warning("Admin account '%s' already exists", ADMIN_USERNAME)
            return False
        create_user(db, UserCreate(
            username=ADMIN_USERNAME,
            password=password,
            full_name=ADMIN_FULL_NAME,
            role=Role.ADMIN,
        ))
    logger.info("Admin account '%s' created", ADMIN_USERNAME)
    return True


if __name__ == "__main__":
    setup_logging()
    init_db()
    password = os.getenv("ADMIN_PASSWORD") or getpass.getpass(f"Password for {ADMIN_USERNAME}: ")
    if not password:
        raise SystemExit("A password is required")
    create_admin(password)
