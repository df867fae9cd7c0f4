"""
Recount the occupants of every room and repair current capacity and status.

Usage:
    python sync_rooms.py
"""
import logging

from database import get_session_context
from logging_config import setup_logging
from services.occupancy_service import sync_room_capacities

logger = logging.getLogger("sync_rooms")


if __name__ == "__main__":
    setup_logging()
    logger.info("Synchronizing room capacities...")

    with get_session_context() as db:
        result = sync_room_capacities(db)

    for entry in result.changes:
        logger.info(
            " - %s: %d -> %d occupant(s), %s%s",
            entry.room_name,
            entry.previous_capacity,
            entry.current_capacity,
            entry.status.value,
            " (over capacity)" if entry.over_capacity else "",
        )
    logger.info("Done: %d of %d room(s) changed", result.rooms_changed, result.rooms_checked)
