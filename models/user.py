# models/user.py
import enum
from sqlalchemy import Column, String, DateTime, Enum, func
from .base import Base, new_id


class Role(str, enum.Enum):
     ADMIN = "ADMIN"
     STAFF = "STAFF"


class User(Base):
     """
     User model - staff account used to sign in to the management app.
     Only the passlib hash of the password is stored.
     """
     __tablename__ = "users"

     id = Column(String(32), primary_key=True, default=new_id)
     username = Column(String(50), unique=True, nullable=False, index=True)
     password = Column(String(255), nullable=False)  # passlib hash
     full_name = Column(String(100), nullable=False)
     role = Column(
          Enum(Role, name="user_role", create_constraint=True),
          default=Role.STAFF,
          nullable=False
     )
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     def __repr__(self):
          return f"<User(id={self.id}, username='{self.username}', role='{self.role.value}')>"
