"""
Vendor service.

Admin status changes on vendors, cascading to the vendor's brand.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Dict, Any

from google.cloud.firestore import AsyncClient

from common.utils.exceptions import NotFoundException
from luma_admin.database import collections
from luma_admin.schemas.admin import (
    VendorStatus,
    VENDOR_TO_BRAND_STATUS,
    DEFAULT_REJECTION_REASON,
)

logger = logging.getLogger(__name__)


class VendorService:
    """
    Applies status transitions to events/{eventId}/vendors/{vendorId}.

    The vendor write and the brand write are independent; if the brand
    write fails the vendor keeps its new status.
    """

    def __init__(self, db: AsyncClient):
        """
        Initialize VendorService.

        Args:
            db: Async Firestore client
        """
        self._db = db

    async def update_status(
        self,
        event_id: str,
        vendor_id: str,
        status: VendorStatus,
        rejection_reason: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Set a vendor's status and cascade it to the linked brand.

        Args:
            event_id: Parent event id
            vendor_id: Vendor document id
            status: New vendor status
            rejection_reason: Stored only when rejecting

        Returns:
            Dict with eventId, vendorId, status, rejectionReason, brandId
            and brandStatus (None when the vendor has no brand)

        Raises:
            NotFoundException: If the vendor does not exist
            ValueError: If the stored brandId cannot address a brand document
        """
        status = VendorStatus(status)
        vendor_ref = self._db.document(collections.vendor_path(event_id, vendor_id))

        snapshot = await vendor_ref.get()
        if not snapshot.exists:
            raise NotFoundException("Vendor not found", code="VENDOR_NOT_FOUND")
        vendor = snapshot.to_dict() or {}

        brand_id = vendor.get("brandId")
        if brand_id and (not isinstance(brand_id, str) or "/" in brand_id):
            # Checked before any write so a bad link leaves the vendor untouched
            raise ValueError(f"Vendor {event_id}/{vendor_id} has invalid brandId {brand_id!r}")

        now = datetime.now(timezone.utc).isoformat()
        update: Dict[str, Any] = {"status": status.value, "updatedAt": now}

        reason = None
        if status == VendorStatus.REJECTED:
            reason = rejection_reason or DEFAULT_REJECTION_REASON
            update["rejectionReason"] = reason

        await vendor_ref.update(update)
        logger.info(f"Vendor {event_id}/{vendor_id} status set to {status.value}")

        brand_status = None
        if brand_id:
            brand_status = VENDOR_TO_BRAND_STATUS[status]
            await self._db.document(collections.brand_path(brand_id)).update({
                "status": brand_status.value,
                "updatedAt": now,
            })
            logger.info(f"Brand {brand_id} status set to {brand_status.value}")

        return {
            "eventId": event_id,
            "vendorId": vendor_id,
            "status": status.value,
            "rejectionReason": reason,
            "brandId": brand_id,
            "brandStatus": brand_status.value if brand_status else None,
        }
