# models/room.py
import enum
from sqlalchemy import Column, Integer, BigInteger, String, DateTime, ForeignKey, Enum, CheckConstraint, func
from sqlalchemy.orm import relationship
from .base import Base, new_id


class RoomStatus(str, enum.Enum):
     """Occupancy state of a room; FULL and AVAILABLE are derived."""
     AVAILABLE = "AVAILABLE"
     FULL = "FULL"
     MAINTENANCE = "MAINTENANCE"


class Room(Base):
     """
     Room model - a bookable room inside a building.

     current_capacity is maintained by the occupancy service and is never
     written from a client request. status is derived from current_capacity,
     max_capacity and the maintenance flag.
     """
     __tablename__ = "rooms"
     __table_args__ = (
          CheckConstraint("max_capacity > 0", name="ck_rooms_max_capacity_positive"),
          CheckConstraint("current_capacity >= 0", name="ck_rooms_current_capacity_non_negative"),
     )

     id = Column(String(32), primary_key=True, default=new_id)
     building_id = Column(
          String(32),
          ForeignKey("buildings.id", ondelete="NO ACTION"),
          nullable=False,
          index=True
     )

     name = Column(String(50), nullable=False)
     status = Column(
          Enum(RoomStatus, name="room_status", create_constraint=True),
          default=RoomStatus.AVAILABLE,
          nullable=False,
          index=True
     )
     max_capacity = Column(Integer, nullable=False)
     current_capacity = Column(Integer, default=0, nullable=False)
     price_per_month = Column(BigInteger, default=0, nullable=False)

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

     # Relationships
     building = relationship("Building", back_populates="rooms")
     students = relationship("Student", back_populates="room")
     guests = relationship("Guest", back_populates="room")
     assets = relationship("Asset", back_populates="room")
     bills = relationship("Bill", back_populates="room")

     def __repr__(self):
          return (
               f"<Room(id={self.id}, name='{self.name}', status='{self.status.value}', "
               f"capacity={self.current_capacity}/{self.max_capacity})>"
          )

     @property
     def is_empty(self) -> bool:
          return self.current_capacity == 0
