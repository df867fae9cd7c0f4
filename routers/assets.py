# routers/assets.py
"""
Asset API routes. An asset without a room is kept in the warehouse.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_user, require
from models import Asset
from schemas.asset import AssetCreate, AssetUpdate, AssetStatusUpdate, AssetResponse
from services import facility_service
from services.access_policy import Permission
from services.repository import EntityStore

router = APIRouter(prefix="/api/assets", tags=["assets"])


@router.get("", response_model=List[AssetResponse], summary="List assets")
def list_assets(
     warehouse_only: bool = Query(False, alias="warehouseOnly", description="Only assets not placed in a room"),
     db: Session = Depends(get_session),
     user=Depends(get_current_user)
):
     query = db.query(Asset)
     if warehouse_only:
          query = query.filter(Asset.room_id.is_(None))
     return query.order_by(Asset.name).all()


@router.get("/{asset_id}", response_model=AssetResponse, summary="Get asset by ID")
def get_asset(asset_id: str, db: Session = Depends(get_session), user=Depends(get_current_user)):
     return EntityStore(db).assets.get(asset_id)


@router.post(
     "",
     response_model=AssetResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create an asset"
)
def create_asset(
     body: AssetCreate,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.ASSET_WRITE))
):
     return facility_service.create_asset(db, body)


@router.put("/{asset_id}", response_model=AssetResponse, summary="Update an asset")
def update_asset(
     asset_id: str,
     body: AssetUpdate,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.ASSET_WRITE))
):
     """
     Update an existing asset. Sending **roomId: null** moves it to the warehouse.
     """
     return facility_service.update_asset(db, asset_id, body.changes())


@router.patch("/{asset_id}/status", response_model=AssetResponse, summary="Change asset condition")
def update_asset_status(
     asset_id: str,
     body: AssetStatusUpdate,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.ASSET_WRITE))
):
     return facility_service.set_asset_status(db, asset_id, body.status)


@router.delete(
     "/{asset_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete an asset"
)
def delete_asset(
     asset_id: str,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.ASSET_DELETE))
):
     facility_service.delete_asset(db, asset_id)
     return None
