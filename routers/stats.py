# routers/stats.py
"""
Dashboard routes: occupancy summary, revenue per month and bill notifications.
"""
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_session
from dependencies import get_current_user
from schemas.stats import DashboardStats, MonthlyRevenue, Notification
from services import notification_service, stats_service

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats, summary="Occupancy summary")
def get_stats(db: Session = Depends(get_session), user=Depends(get_current_user)):
     return stats_service.get_dashboard_stats(db)


@router.get("/stats/revenue", response_model=List[MonthlyRevenue], summary="Paid revenue per month")
def get_revenue(db: Session = Depends(get_session), user=Depends(get_current_user)):
     """
     Electricity, water and room fee collected per billing month, from PAID
     bills only, oldest month first.
     """
     return stats_service.get_monthly_revenue(db)


@router.get("/notifications", response_model=List[Notification], summary="Bill due notifications")
def get_notifications(db: Session = Depends(get_session), user=Depends(get_current_user)):
     """
     Warnings for unpaid bills due within three days and alerts for overdue
     ones, most urgent first.
     """
     return notification_service.get_notifications(db)
