# services/repository.py
"""
Entity store - keyed collections over the relational database.

One Repository per model gives the uniform list/get/create/update/delete
surface the services build on. Repositories never commit; the caller's
transaction decides when writes become visible.
"""
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from exceptions import NotFound
from models import Base, Building, Room, Student, Guest, Asset, Bill, User

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
     """CRUD access to one entity type, keyed by its opaque string id."""

     def __init__(self, db: Session, model: Type[ModelT], label: Optional[str] = None):
          self.db = db
          self.model = model
          self.label = label or model.__name__

     def list(self, order_by=None, **filters) -> List[ModelT]:
          """Full scan, optionally filtered by column equality. Never raises."""
          query = self.db.query(self.model)
          if filters:
               query = query.filter_by(**filters)
          if order_by is not None:
               query = query.order_by(order_by)
          return query.all()

     def find(self, entity_id: str, for_update: bool = False) -> Optional[ModelT]:
          query = self.db.query(self.model).filter(self.model.id == entity_id)
          if for_update:
               query = query.with_for_update()
          return query.first()

     def get(self, entity_id: str, for_update: bool = False) -> ModelT:
          """
          Fetch one entity.

          Raises:
               NotFound: If no entity has this id
          """
          entity = self.find(entity_id, for_update=for_update)
          if entity is None:
               raise NotFound.entity(self.label, entity_id)
          return entity

     def exists(self, **filters) -> bool:
          return self.db.query(self.model).filter_by(**filters).first() is not None

     def count(self, **filters) -> int:
          return self.db.query(self.model).filter_by(**filters).count()

     def create(self, **fields) -> ModelT:
          """Insert a new entity; the id is assigned here."""
          entity = self.model(**fields)
          self.db.add(entity)
          self.db.flush()  # Flush to get defaults without committing
          return entity

     def update(self, entity_id: str, changes: dict) -> ModelT:
          """Merge only the fields present in changes."""
          entity = self.get(entity_id)
          entity.apply_changes(changes)
          self.db.flush()
          return entity

     def delete(self, entity_id: str) -> None:
          entity = self.get(entity_id)
          self.db.delete(entity)
          self.db.flush()

     def delete_where(self, **filters) -> int:
          """Bulk delete by column equality; returns the number of rows removed."""
          return self.db.query(self.model).filter_by(**filters).delete(synchronize_session="fetch")


class EntityStore:
     """Bundle of repositories sharing one session."""

     def __init__(self, db: Session):
          self.db = db
          self.buildings = Repository(db, Building)
          self.rooms = Repository(db, Room)
          self.students = Repository(db, Student)
          self.guests = Repository(db, Guest)
          self.assets = Repository(db, Asset)
          self.bills = Repository(db, Bill)
          self.users = Repository(db, User)
