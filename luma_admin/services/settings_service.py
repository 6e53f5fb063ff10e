"""
System settings service.

Reads and merge-writes the global settings singleton.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from google.cloud.firestore import AsyncClient

from luma_admin.database import collections

logger = logging.getLogger(__name__)


class SettingsService:
    """Manages the systemSettings singleton document."""

    def __init__(self, db: AsyncClient, document_id: str = "production"):
        """
        Initialize SettingsService.

        Args:
            db: Async Firestore client
            document_id: Id of the singleton inside systemSettings
        """
        self._db = db
        self._settings_ref = db.document(collections.settings_path(document_id))

    async def get_settings(self) -> Dict[str, Any]:
        """
        Get the current settings.

        Returns:
            The stored document verbatim, or {} if it was never created
        """
        snapshot = await self._settings_ref.get()
        if not snapshot.exists:
            return {}
        return snapshot.to_dict() or {}

    async def update_settings(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge-write normalized settings.

        Stored fields missing from the payload are left untouched.

        Args:
            payload: Normalized settings fields

        Returns:
            The payload as written, including updatedAt
        """
        data = {
            **payload,
            "updatedAt": datetime.now(timezone.utc).isoformat(),
        }
        await self._settings_ref.set(data, merge=True)

        logger.info(f"System settings updated: maintenanceMode={data.get('maintenanceMode')}")
        return data
