# models/base.py
import re
import uuid

from sqlalchemy.orm import DeclarativeBase, declared_attr


def new_id() -> str:
     """Opaque unique identifier for every entity."""
     return uuid.uuid4().hex


class Base(DeclarativeBase):
     """
     Base class for all SQLAlchemy models.
     Provides common configuration and mixins.
     """

     @declared_attr.directive
     def __tablename__(cls) -> str:
          """
          Automatically generate table name from class name.
          Example: Building -> buildings
          """
          name = re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()
          # Pluralize (simple version)
          if name.endswith('y'):
               return name[:-1] + 'ies'
          elif name.endswith('s'):
               return name + 'es'
          return name + 's'

     def apply_changes(self, changes: dict) -> None:
          """Merge a partial update: only the keys present are written."""
          for field, value in changes.items():
               setattr(self, field, value)
