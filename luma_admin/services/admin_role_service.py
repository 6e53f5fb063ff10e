"""
Admin role service.

Looks up the per-user admin record that grants super-admin capability.
"""

import logging
from typing import Optional, Dict, Any

from google.cloud.firestore import AsyncClient

from luma_admin.database import collections

logger = logging.getLogger(__name__)


class AdminRoleService:
    """
    Reads lumaAdmins/{uid} documents.

    The documents are managed outside this API; here they are read-only.
    """

    def __init__(self, db: AsyncClient, super_admin_role: str = "super_admin"):
        """
        Initialize AdminRoleService.

        Args:
            db: Async Firestore client
            super_admin_role: Role value that grants admin access
        """
        self._db = db
        self._super_admin_role = super_admin_role

    async def get_admin_profile(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Fetch the admin record for a user.

        Args:
            user_id: Firebase UID

        Returns:
            Admin record or None if the user has none
        """
        snapshot = await self._db.document(collections.admin_path(user_id)).get()
        if not snapshot.exists:
            return None
        return snapshot.to_dict() or {}

    async def is_super_admin(self, user_id: str) -> bool:
        """
        Check whether a user holds the super-admin capability.

        Lookup errors propagate; the caller decides how to report them.
        """
        profile = await self.get_admin_profile(user_id)
        if profile is None:
            logger.info(f"No admin record for user {user_id}")
            return False

        if profile.get("role") != self._super_admin_role:
            logger.info(f"User {user_id} has role {profile.get('role')!r}, not super admin")
            return False

        return True
