import re
from datetime import date
from pathlib import Path

import pytest

from models import Base
from schemas.asset import AssetUpdate
from schemas.base import CamelModel
from schemas.guest import GuestUpdate
from schemas.room import RoomSyncResponse, RoomUpdate

MIGRATION = Path(__file__).resolve().parent.parent / "alembic" / "versions" / "20261018_000001_create_dormitory_tables.py"


def test_update_schemas_report_sent_fields_only():
    assert RoomUpdate(name="102").changes() == {"name": "102"}
    assert AssetUpdate.model_validate({"roomId": None}).changes() == {"room_id": None}


def test_sync_response_changes_is_a_plain_field():
    assert not hasattr(CamelModel, "changes")

    response = RoomSyncResponse(rooms_checked=1, rooms_changed=0, changes=[])

    assert response.changes == []
    assert response.model_dump(by_alias=True) == {"roomsChecked": 1, "roomsChanged": 0, "changes": []}


def test_guest_update_rejects_reversed_dates():
    with pytest.raises(ValueError):
        GuestUpdate(check_in_date="2024-03-10", check_out_date="2024-03-01")

    assert GuestUpdate(check_out_date="2024-03-01").changes() == {"check_out_date": date(2024, 3, 1)}


@pytest.mark.parametrize("table,column", [
    ("rooms", "building_id"),
    ("students", "room_id"),
    ("guests", "room_id"),
])
def test_parent_references_match_the_migration(table, column):
    foreign_key = next(iter(Base.metadata.tables[table].c[column].foreign_keys))
    migrated = re.search(rf"name='fk_{table}_{column}',\s*ondelete='([A-Z ]+)'", MIGRATION.read_text())

    assert migrated is not None
    assert foreign_key.ondelete == migrated.group(1) == "NO ACTION"
