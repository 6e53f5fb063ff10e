"""
Request and response schemas.
"""

from luma_admin.schemas.settings import SystemSettingsUpdateRequest, OkResponse
from luma_admin.schemas.admin import (
    EventStatus,
    VendorStatus,
    BrandStatus,
    VENDOR_TO_BRAND_STATUS,
    DEFAULT_REJECTION_REASON,
    EventStatusUpdateRequest,
    VendorStatusUpdateRequest,
    AdminOverview,
)

__all__ = [
    "SystemSettingsUpdateRequest",
    "OkResponse",
    "EventStatus",
    "VendorStatus",
    "BrandStatus",
    "VENDOR_TO_BRAND_STATUS",
    "DEFAULT_REJECTION_REASON",
    "EventStatusUpdateRequest",
    "VendorStatusUpdateRequest",
    "AdminOverview",
]
