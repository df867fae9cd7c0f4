# models/student.py
from sqlalchemy import Column, String, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from .base import Base, new_id


class Student(Base):
     """
     Student model - a long-term occupant of exactly one room.
     """
     __tablename__ = "students"

     id = Column(String(32), primary_key=True, default=new_id)
     student_code = Column(String(20), nullable=False, unique=True, index=True)
     room_id = Column(String(32), ForeignKey("rooms.id", ondelete="NO ACTION"), nullable=False, index=True)

     # Personal info
     name = Column(String(100), nullable=False)
     dob = Column(Date, nullable=True)
     gender = Column(String(10), nullable=True)  # Male, Female
     phone = Column(String(20), nullable=True)
     university = Column(String(150), nullable=True)

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

     # Relationships
     room = relationship("Room", back_populates="students")

     def __repr__(self):
          return f"<Student(id={self.id}, student_code='{self.student_code}', room_id={self.room_id})>"
