# services/facility_service.py
"""
Facility Service - buildings and the assets kept in rooms or the warehouse.
"""
import logging

from sqlalchemy.orm import Session

from database import transaction
from exceptions import BuildingInUse
from models import Asset, AssetStatus, Building
from schemas.asset import AssetCreate
from services.repository import EntityStore

logger = logging.getLogger(__name__)


def create_building(db: Session, name: str) -> Building:
     with transaction(db):
          building = EntityStore(db).buildings.create(name=name)

     logger.info("Building created: id=%s name=%s", building.id, building.name)
     return building


def rename_building(db: Session, building_id: str, name: str) -> Building:
     with transaction(db):
          building = EntityStore(db).buildings.update(building_id, {"name": name})

     logger.info("Building renamed: id=%s name=%s", building.id, building.name)
     return building


def delete_building(db: Session, building_id: str) -> None:
     """
     Raises:
          NotFound: If the building does not exist
          BuildingInUse: If rooms still belong to the building
     """
     with transaction(db):
          store = EntityStore(db)
          building = store.buildings.get(building_id)
          room_count = store.rooms.count(building_id=building_id)
          if room_count:
               raise BuildingInUse(
                    f"Building {building.name} still has {room_count} room(s) and cannot be deleted"
               )
          db.delete(building)
          db.flush()

     logger.info("Building deleted: id=%s", building_id)


def create_asset(db: Session, data: AssetCreate) -> Asset:
     with transaction(db):
          store = EntityStore(db)
          if data.room_id is not None:
               store.rooms.get(data.room_id)
          asset = store.assets.create(**data.model_dump())

     logger.info("Asset created: id=%s room=%s", asset.id, asset.room_id or "warehouse")
     return asset


def update_asset(db: Session, asset_id: str, changes: dict) -> Asset:
     """Partial update; an explicit null room_id moves the asset to the warehouse."""
     changes = {k: v for k, v in changes.items() if v is not None or k == "room_id"}
     with transaction(db):
          store = EntityStore(db)
          if changes.get("room_id") is not None:
               store.rooms.get(changes["room_id"])
          asset = store.assets.update(asset_id, changes)

     logger.info("Asset updated: id=%s fields=%s", asset.id, sorted(changes))
     return asset


def set_asset_status(db: Session, asset_id: str, status: AssetStatus) -> Asset:
     return update_asset(db, asset_id, {"status": status})


def delete_asset(db: Session, asset_id: str) -> None:
     with transaction(db):
          EntityStore(db).assets.delete(asset_id)

     logger.info("Asset deleted: id=%s", asset_id)
