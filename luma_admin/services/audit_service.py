"""
Audit service.

Best-effort, append-only trail of administrative actions.
"""

import logging
from typing import Any, Dict, Optional

from google.cloud.firestore import AsyncClient, SERVER_TIMESTAMP

from luma_admin.database import collections

logger = logging.getLogger(__name__)


class AuditService:
    """
    Writes audit entries to the auditLogs collection.

    Entries are never read back by this API. A failed write is logged and
    swallowed so it cannot change the outcome of the action being audited.
    """

    def __init__(self, db: AsyncClient):
        """
        Initialize AuditService.

        Args:
            db: Async Firestore client
        """
        self._db = db
        self._audit_collection = db.collection(collections.COLLECTION_AUDIT_LOGS)

    async def log_action(
        self,
        action: str,
        actor_id: str,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """
        Append one audit entry.

        Args:
            action: Action name, e.g. "vendor.status_update"
            actor_id: UID of the admin who performed the action
            metadata: Action-specific details

        Returns:
            True if the entry was written, False if the write failed
        """
        entry = {
            "action": action,
            "actorId": actor_id,
            "metadata": metadata or {},
            "createdAt": SERVER_TIMESTAMP,
        }

        try:
            await self._audit_collection.add(entry)
        except Exception:
            logger.exception(f"Failed to write audit entry {action} for {actor_id}")
            return False

        logger.debug(f"Audit entry written: {action} by {actor_id}")
        return True
