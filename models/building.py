# models/building.py
from sqlalchemy import Column, String, DateTime, func
from sqlalchemy.orm import relationship
from .base import Base, new_id


class Building(Base):
     """
     Building model - a dormitory block that groups rooms.
     A building cannot be deleted while any room references it.
     """
     __tablename__ = "buildings"

     id = Column(String(32), primary_key=True, default=new_id)
     name = Column(String(100), nullable=False)

     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     rooms = relationship("Room", back_populates="building")

     def __repr__(self):
          return f"<Building(id={self.id}, name='{self.name}')>"
