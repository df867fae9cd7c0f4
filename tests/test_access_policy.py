import pytest

from exceptions import Forbidden
from models import Role
from services import Permission, check_permission, is_allowed


def test_admin_holds_every_permission():
    assert all(is_allowed(Role.ADMIN, permission) for permission in Permission)


@pytest.mark.parametrize("permission", [
    Permission.STUDENT_WRITE,
    Permission.GUEST_WRITE,
    Permission.BILL_PAYMENT,
])
def test_staff_allowed(permission):
    check_permission(Role.STAFF, permission)


@pytest.mark.parametrize("permission", [
    Permission.BUILDING_WRITE,
    Permission.ROOM_WRITE,
    Permission.ROOM_DELETE,
    Permission.ROOM_SYNC,
    Permission.ASSET_DELETE,
    Permission.BILL_WRITE,
    Permission.USER_MANAGE,
])
def test_staff_denied(permission):
    with pytest.raises(Forbidden):
        check_permission(Role.STAFF, permission)
