# routers/bills.py
"""
Bill API routes.

Totals are always computed server-side from the meter readings and room fee.
Role-based access:
- ADMIN: create, edit and delete bills
- ADMIN / STAFF: record and revert payments
"""
from datetime import date
from typing import Optional, List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_user, require
from models import Bill, BillStatus
from schemas.bill import BillCreate, BillUpdate, BillResponse, MONTH_PATTERN
from services import BillingService
from services.access_policy import Permission
from services.repository import EntityStore

router = APIRouter(prefix="/api/bills", tags=["bills"])


@router.post(
     "",
     response_model=BillResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a new bill"
)
def create_bill(
     bill_data: BillCreate,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.BILL_WRITE))
):
     """
     Create an unpaid bill for a room.

     - **roomId**: room being billed (must exist)
     - **month**: billing month, YYYY-MM
     - **electricIndexOld/New**, **waterIndexOld/New**: meter readings
     - **roomFee**: rent for the month
     - **dueDate**: defaults to the 10th of the billing month
     """
     return BillingService.create_bill(db, bill_data)


@router.get("", response_model=List[BillResponse], summary="List bills with filters")
def list_bills(
     room_id: Optional[str] = Query(None, alias="roomId", description="Filter by room ID"),
     month: Optional[str] = Query(None, pattern=MONTH_PATTERN, description="Filter by billing month"),
     bill_status: Optional[BillStatus] = Query(None, alias="status", description="Filter by payment status"),
     overdue_only: bool = Query(False, alias="overdueOnly", description="Show only overdue bills"),
     db: Session = Depends(get_session),
     user=Depends(get_current_user)
):
     """
     Retrieve bills, newest month first.
     """
     query = db.query(Bill)
     if room_id:
          query = query.filter(Bill.room_id == room_id)
     if month:
          query = query.filter(Bill.month == month)
     if bill_status:
          query = query.filter(Bill.status == bill_status)
     if overdue_only:
          query = query.filter(Bill.status != BillStatus.PAID, Bill.due_date < date.today())

     return query.order_by(Bill.month.desc(), Bill.created_at.desc()).all()


@router.get("/{bill_id}", response_model=BillResponse, summary="Get bill by ID")
def get_bill(bill_id: str, db: Session = Depends(get_session), user=Depends(get_current_user)):
     return EntityStore(db).bills.get(bill_id)


@router.put("/{bill_id}", response_model=BillResponse, summary="Update bill")
def update_bill(
     bill_id: str,
     bill_data: BillUpdate,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.BILL_WRITE))
):
     """
     Update an existing bill. Only provided fields are changed and the total
     is recomputed.
     """
     return BillingService.update_bill(db, bill_id, bill_data.changes())


@router.post("/{bill_id}/pay", response_model=BillResponse, summary="Mark bill as paid")
def pay_bill(
     bill_id: str,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.BILL_PAYMENT))
):
     """
     Mark a bill as PAID. Paying an already paid bill keeps its payment date.
     """
     return BillingService.pay(db, bill_id)


@router.post("/{bill_id}/unpay", response_model=BillResponse, summary="Mark bill as unpaid")
def unpay_bill(
     bill_id: str,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.BILL_PAYMENT))
):
     return BillingService.unpay(db, bill_id)


@router.delete(
     "/{bill_id}",
     status_code=status.HTTP_204_NO_CONTENT,
     summary="Delete bill"
)
def delete_bill(
     bill_id: str,
     db: Session = Depends(get_session),
     user=Depends(require(Permission.BILL_WRITE))
):
     BillingService.delete_bill(db, bill_id)
     return None
