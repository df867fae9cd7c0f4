# models/guest.py
from sqlalchemy import Column, String, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from .base import Base, new_id


class Guest(Base):
     """
     Guest model - short-stay visitor checked into a room.
     Guests take a place in the room exactly like students do.
     """
     __tablename__ = "guests"

     id = Column(String(32), primary_key=True, default=new_id)
     room_id = Column(String(32), ForeignKey("rooms.id", ondelete="NO ACTION"), nullable=False, index=True)

     name = Column(String(100), nullable=False)
     cccd = Column(String(20), nullable=True)  # citizen ID number
     relation = Column(String(50), nullable=True)
     check_in_date = Column(Date, nullable=True)
     check_out_date = Column(Date, nullable=True)

     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     room = relationship("Room", back_populates="guests")

     def __repr__(self):
          return f"<Guest(id={self.id}, name='{self.name}', room_id={self.room_id})>"
