# models/asset.py
import enum
from sqlalchemy import Column, String, BigInteger, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from .base import Base, new_id


class AssetStatus(str, enum.Enum):
     GOOD = "GOOD"
     BROKEN = "BROKEN"
     REPAIRING = "REPAIRING"


class Asset(Base):
     """
     Asset model - furniture and equipment.
     An asset without a room is kept in the warehouse.
     """
     __tablename__ = "assets"

     id = Column(String(32), primary_key=True, default=new_id)
     room_id = Column(String(32), ForeignKey("rooms.id", ondelete="CASCADE"), nullable=True, index=True)

     name = Column(String(150), nullable=False)
     status = Column(
          Enum(AssetStatus, name="asset_status", create_constraint=True),
          default=AssetStatus.GOOD,
          nullable=False
     )
     value = Column(BigInteger, default=0, nullable=False)

     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     room = relationship("Room", back_populates="assets")

     def __repr__(self):
          return f"<Asset(id={self.id}, name='{self.name}', status='{self.status.value}')>"

     @property
     def in_warehouse(self) -> bool:
          return self.room_id is None
