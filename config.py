# config.py
"""
Runtime configuration for the dormitory backend.

Values come from the process environment, optionally seeded from a .env file.
Business constants (utility rates, due-date defaults) live here too but are
not read from the environment.
"""
import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _as_bool(value: str) -> bool:
     return value.strip().lower() in ("1", "true", "yes", "on")


# Database
DATABASE_URL = os.getenv("DATABASE_URL")
DB_SERVER = os.getenv("DB_SERVER")
DB_PORT = os.getenv("DB_PORT", "1433")
DB_USER = os.getenv("DB_USER")
DB_PASS = os.getenv("DB_PASS")
DB_NAME = os.getenv("DB_NAME")
DB_TIMEOUT = int(os.getenv("DB_TIMEOUT", "10"))
SQL_ECHO = _as_bool(os.getenv("SQL_ECHO", "false"))
AUTO_CREATE_TABLES = _as_bool(os.getenv("AUTO_CREATE_TABLES", "true"))

# Auth
JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me")
JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "480"))
PASSWORD_BCRYPT_ROUNDS = int(os.getenv("PASSWORD_BCRYPT_ROUNDS", "12"))

# HTTP
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
PORT = int(os.getenv("PORT", "10000"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "standard").lower()  # standard, json

# Billing (currency units per meter index unit)
ELECTRIC_RATE = 3500
WATER_RATE = 10000
DEFAULT_DUE_DAY = 10

# Notifications
DUE_SOON_DAYS = 3
