# routers/buildings.py
"""
Building API routes.

Any signed-in user can read; creating, renaming and deleting buildings is
reserved to ADMIN.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_user, require
from models import Building
from schemas.building import BuildingCreate, BuildingUpdate, BuildingResponse
from services import facility_service
from services.access_policy import Permission
from services.repository import EntityStore

router = APIRouter(prefix="/api/buildings", tags=["buildings"])


@router.get("", response_model=List[BuildingResponse], summary="List buildings")
def list_buildings(db: Session = Depends(get_session), user=Depends(get_current_user)):
     return EntityStore(db).buildings.list(order_by=Building.name)


@router.get("/{building_id}", response_model=BuildingResponse, summary="Get building by ID")
def get_building(building_id: str, db: Session = Depends(get_session), user=Depends(get_current_user)):
     return EntityStore(db).buildings.get(building_id)


@router.post(
     "",
     response_model=BuildingResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a building"
)
def create_building(
     body: BuildingCreate,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.BUILDING_WRITE))
):
     return facility_service.create_building(db, body.name)


@router.put("/{building_id}", response_model=BuildingResponse, summary="Rename a building")
def update_building(
     building_id: str,
     body: BuildingUpdate,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.BUILDING_WRITE))
):
     if body.name is None:
          return EntityStore(db).buildings.get(building_id)
     return facility_service.rename_building(db, building_id, body.name)


@router.delete(
     "/{building_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete a building"
)
def delete_building(
     building_id: str,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.BUILDING_DELETE))
):
     """
     Delete a building. Rejected with 409 while any room belongs to it.
     """
     facility_service.delete_building(db, building_id)
     return None
