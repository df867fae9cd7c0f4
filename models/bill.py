# models/bill.py
import enum
from sqlalchemy import Column, String, Integer, BigInteger, Date, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from .base import Base, new_id


class BillStatus(str, enum.Enum):
     """Enumeration for bill payment status."""
     UNPAID = "UNPAID"
     PAID = "PAID"


class Bill(Base):
     """
     Bill model - monthly electricity, water and room fee charges of a room.

     total_amount is computed from the meter indices and room fee whenever the
     bill is created or updated, and stored. Several bills may exist for the
     same room and month.
     """
     __tablename__ = "bills"

     id = Column(String(32), primary_key=True, default=new_id)

     # Foreign keys
     room_id = Column(
          String(32),
          ForeignKey("rooms.id", ondelete="CASCADE"),
          nullable=False,
          index=True
     )

     # Billing period, YYYY-MM
     month = Column(String(7), nullable=False, index=True)

     # Meter readings
     electric_index_old = Column(Integer, default=0, nullable=False)
     electric_index_new = Column(Integer, default=0, nullable=False)
     water_index_old = Column(Integer, default=0, nullable=False)
     water_index_new = Column(Integer, default=0, nullable=False)

     # Amounts
     room_fee = Column(BigInteger, default=0, nullable=False)
     total_amount = Column(BigInteger, default=0, nullable=False)

     status = Column(
          Enum(BillStatus, name="bill_status", create_constraint=True),
          default=BillStatus.UNPAID,
          nullable=False,
          index=True
     )
     due_date = Column(Date, nullable=False, index=True)
     payment_date = Column(DateTime, nullable=True)

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     room = relationship("Room", back_populates="bills")

     def __repr__(self):
          return f"<Bill(id={self.id}, room_id={self.room_id}, month='{self.month}', total={self.total_amount}, status='{self.status.value}')>"

     @property
     def electricity_charge(self) -> int:
          from services.billing_service import electricity_charge
          return electricity_charge(self.electric_index_old, self.electric_index_new)

     @property
     def water_charge(self) -> int:
          from services.billing_service import water_charge
          return water_charge(self.water_index_old, self.water_index_new)

     @property
     def is_overdue(self) -> bool:
          """Check if bill is past its due date and unpaid."""
          from services.billing_service import is_overdue
          return is_overdue(self)

     def mark_as_paid(self, when) -> None:
          """Mark the bill as paid; an already paid bill keeps its payment date."""
          if self.status != BillStatus.PAID:
               self.status = BillStatus.PAID
               self.payment_date = when

     def mark_as_unpaid(self) -> None:
          self.status = BillStatus.UNPAID
          self.payment_date = None
