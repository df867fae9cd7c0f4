# services/__init__.py
from .billing_service import BillingService, compute_total, default_due_date, is_overdue
from .access_policy import Permission, check_permission, is_allowed

__all__ = [
     "BillingService",
     "compute_total",
     "default_due_date",
     "is_overdue",
     "Permission",
     "check_permission",
     "is_allowed",
]
