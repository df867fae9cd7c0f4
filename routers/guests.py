# routers/guests.py
"""
Guest API routes. Guests take a place in their room like students do.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_user, require
from models import Guest
from schemas.guest import GuestCreate, GuestUpdate, GuestResponse
from services import resident_service
from services.access_policy import Permission
from services.repository import EntityStore

router = APIRouter(prefix="/api/guests", tags=["guests"])


@router.get("", response_model=List[GuestResponse], summary="List guests")
def list_guests(db: Session = Depends(get_session), user=Depends(get_current_user)):
     return EntityStore(db).guests.list(order_by=Guest.name)


@router.get("/{guest_id}", response_model=GuestResponse, summary="Get guest by ID")
def get_guest(guest_id: str, db: Session = Depends(get_session), user=Depends(get_current_user)):
     return EntityStore(db).guests.get(guest_id)


@router.post(
     "",
     response_model=GuestResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Check a guest in"
)
def check_in_guest(
     body: GuestCreate,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.GUEST_WRITE))
):
     return resident_service.check_in_guest(db, body)


@router.put("/{guest_id}", response_model=GuestResponse, summary="Update or move a guest")
def update_guest(
     guest_id: str,
     body: GuestUpdate,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.GUEST_WRITE))
):
     return resident_service.update_guest(db, guest_id, body.changes())


@router.delete(
     "/{guest_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Check a guest out"
)
def check_out_guest(
     guest_id: str,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.GUEST_WRITE))
):
     resident_service.check_out_guest(db, guest_id)
     return None
