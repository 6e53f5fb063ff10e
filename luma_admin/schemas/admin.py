"""
Pydantic models for admin request/response validation.

Status values are closed enumerations; anything else is rejected with a
400 before a handler runs.
"""

from enum import Enum
from typing import Dict, Optional, Union

from pydantic import BaseModel, Field


# Document ids end up in Firestore paths, so a slash would address a
# different document.
DOCUMENT_ID_PATTERN = r"^[^/]+$"


class EventStatus(str, Enum):
    ACTIVE = "active"
    SUSPENDED = "suspended"


class VendorStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SUSPENDED = "suspended"


class BrandStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    SUSPENDED = "suspended"


# Brand status follows its vendor's status
VENDOR_TO_BRAND_STATUS: Dict[VendorStatus, BrandStatus] = {
    VendorStatus.PENDING: BrandStatus.PENDING,
    VendorStatus.APPROVED: BrandStatus.ACTIVE,
    VendorStatus.SUSPENDED: BrandStatus.SUSPENDED,
    VendorStatus.REJECTED: BrandStatus.SUSPENDED,
}

DEFAULT_REJECTION_REASON = "No reason provided"


# =============================================================================
# Request Schemas
# =============================================================================

class EventStatusUpdateRequest(BaseModel):
    """PUT /api/admin/event-status"""
    eventId: str = Field(..., min_length=1, pattern=DOCUMENT_ID_PATTERN)
    status: EventStatus


class VendorStatusUpdateRequest(BaseModel):
    """PUT /api/admin/vendor-status"""
    eventId: str = Field(..., min_length=1, pattern=DOCUMENT_ID_PATTERN)
    vendorId: str = Field(..., min_length=1, pattern=DOCUMENT_ID_PATTERN)
    status: VendorStatus
    rejectionReason: Optional[str] = Field(None, description="Only used when rejecting")


# =============================================================================
# Response Schemas
# =============================================================================

class AdminOverview(BaseModel):
    """Response for GET /api/admin/overview"""
    totalEvents: int
    totalVendors: int
    totalOrders: int
    totalRevenue: Union[int, float]
