"""
Luma admin services.
"""

from luma_admin.services.admin_role_service import AdminRoleService
from luma_admin.services.audit_service import AuditService
from luma_admin.services.settings_service import SettingsService
from luma_admin.services.overview_service import OverviewService, compute_revenue
from luma_admin.services.event_service import EventService
from luma_admin.services.vendor_service import VendorService

__all__ = [
    "AdminRoleService",
    "AuditService",
    "SettingsService",
    "OverviewService",
    "compute_revenue",
    "EventService",
    "VendorService",
]
