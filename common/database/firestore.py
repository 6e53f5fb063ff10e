"""
Cloud Firestore connection manager.

Wraps the async Firestore client from the Firebase Admin SDK so the
application owns one explicit client object for the life of the process
instead of reaching for SDK globals inside handlers.

Example:
    from common.database import Firestore

    db = Firestore()
    db.connect(app=firebase_app)

    snapshot = await db.client.document("systemSettings/production").get()
"""

import logging
from typing import Optional

import firebase_admin
from firebase_admin import firestore_async
from google.cloud.firestore import AsyncClient

logger = logging.getLogger(__name__)


class Firestore:
    """Firestore connection manager."""

    def __init__(self):
        self._client: Optional[AsyncClient] = None
        self._project_id: Optional[str] = None

    def connect(self, app: Optional[firebase_admin.App] = None) -> None:
        """
        Create the async Firestore client for a Firebase app.

        Args:
            app: Initialized Firebase app (default app when omitted)
        """
        try:
            self._client = firestore_async.client(app=app)
            self._project_id = self._client.project
            logger.info(f"Connected to Firestore project: {self._project_id}")
        except Exception as e:
            logger.error(f"Failed to connect to Firestore: {e}")
            raise

    def disconnect(self) -> None:
        """Release the Firestore client."""
        if self._client:
            logger.info(f"Disconnecting from Firestore project: {self._project_id}")
            self._client = None
            self._project_id = None

    @property
    def client(self) -> AsyncClient:
        """Get the underlying async Firestore client."""
        if self._client is None:
            raise RuntimeError("Database not connected")
        return self._client
