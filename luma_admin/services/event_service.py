"""
Event service.

Admin status changes on events.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, Any

from google.cloud.firestore import AsyncClient

from luma_admin.database import collections
from luma_admin.schemas.admin import EventStatus

logger = logging.getLogger(__name__)


class EventService:
    """Applies status transitions to events/{eventId}."""

    def __init__(self, db: AsyncClient):
        """
        Initialize EventService.

        Args:
            db: Async Firestore client
        """
        self._db = db

    async def update_status(self, event_id: str, status: EventStatus) -> Dict[str, Any]:
        """
        Set an event's status.

        Existence is not checked first; updating a missing document fails
        in Firestore and that error propagates.

        Args:
            event_id: Event document id
            status: New status

        Returns:
            Dict with eventId and status
        """
        status = EventStatus(status)

        await self._db.document(collections.event_path(event_id)).update({
            "status": status.value,
            "updatedAt": datetime.now(timezone.utc).isoformat(),
        })

        logger.info(f"Event {event_id} status set to {status.value}")
        return {"eventId": event_id, "status": status.value}
