# services/access_policy.py
"""
Access Policy - which role may perform which mutation.

Checked by the router dependency before any service call, so a denied
request never opens a transaction. Every authenticated role may read
everything except user accounts.
"""
import enum
from typing import Dict, FrozenSet

from exceptions import Forbidden
from models.user import Role


class Permission(str, enum.Enum):
     BUILDING_WRITE = "building:write"
     BUILDING_DELETE = "building:delete"
     ROOM_WRITE = "room:write"
     ROOM_DELETE = "room:delete"
     ROOM_SYNC = "room:sync"
     STUDENT_WRITE = "student:write"
     GUEST_WRITE = "guest:write"
     ASSET_WRITE = "asset:write"
     ASSET_DELETE = "asset:delete"
     BILL_WRITE = "bill:write"
     BILL_PAYMENT = "bill:payment"
     USER_MANAGE = "user:manage"


PERMISSION_MATRIX: Dict[Role, FrozenSet[Permission]] = {
     Role.ADMIN: frozenset(Permission),
     Role.STAFF: frozenset({
          Permission.STUDENT_WRITE,
          Permission.GUEST_WRITE,
          Permission.BILL_PAYMENT,
     }),
}


def is_allowed(role: Role, permission: Permission) -> bool:
     return permission in PERMISSION_MATRIX.get(role, frozenset())


def check_permission(role: Role, permission: Permission) -> None:
     """
     Raises:
          Forbidden: If the role does not hold the permission
     """
     if not is_allowed(role, permission):
          raise Forbidden(f"Role {role.value} is not allowed to perform {permission.value}")
