"""
FastAPI dependencies for the Luma admin API.

Service instances are created once at startup by init_all_services() and
handed to routes through the get_* accessors.
"""

from typing import Optional

from google.cloud.firestore import AsyncClient

from common.auth.base import AuthProvider
from common.auth.dependencies import create_auth_dependency, create_admin_dependency
from luma_admin.config import settings
from luma_admin.services.admin_role_service import AdminRoleService
from luma_admin.services.audit_service import AuditService
from luma_admin.services.settings_service import SettingsService
from luma_admin.services.overview_service import OverviewService
from luma_admin.services.event_service import EventService
from luma_admin.services.vendor_service import VendorService


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

_auth_provider: Optional[AuthProvider] = None
_admin_role_service: Optional[AdminRoleService] = None
_audit_service: Optional[AuditService] = None
_settings_service: Optional[SettingsService] = None
_overview_service: Optional[OverviewService] = None
_event_service: Optional[EventService] = None
_vendor_service: Optional[VendorService] = None


# ─────────────────────────────────────────────────────────────────
# Initialization
# ─────────────────────────────────────────────────────────────────

def init_all_services(db: AsyncClient, auth_provider: AuthProvider) -> None:
    """
    Initialize all services.

    Called once at application startup.

    Args:
        db: Async Firestore client
        auth_provider: Identity provider used to verify bearer tokens
    """
    global _auth_provider, _admin_role_service, _audit_service
    global _settings_service, _overview_service, _event_service, _vendor_service

    _auth_provider = auth_provider
    _admin_role_service = AdminRoleService(db=db, super_admin_role=settings.SUPER_ADMIN_ROLE)
    _audit_service = AuditService(db=db)
    _settings_service = SettingsService(db=db, document_id=settings.SETTINGS_DOCUMENT_ID)
    _overview_service = OverviewService(db=db)
    _event_service = EventService(db=db)
    _vendor_service = VendorService(db=db)


# ─────────────────────────────────────────────────────────────────
# Getter functions
# ─────────────────────────────────────────────────────────────────

def get_auth_provider() -> AuthProvider:
    """Get the identity provider."""
    if _auth_provider is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _auth_provider


def get_admin_role_service() -> AdminRoleService:
    """Get admin role service instance."""
    if _admin_role_service is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _admin_role_service


def get_audit_service() -> AuditService:
    """Get audit service instance."""
    if _audit_service is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _audit_service


def get_settings_service() -> SettingsService:
    """Get settings service instance."""
    if _settings_service is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _settings_service


def get_overview_service() -> OverviewService:
    """Get overview service instance."""
    if _overview_service is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _overview_service


def get_event_service() -> EventService:
    """Get event service instance."""
    if _event_service is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _event_service


def get_vendor_service() -> VendorService:
    """Get vendor service instance."""
    if _vendor_service is None:
        raise RuntimeError("Services not initialized. Call init_all_services first.")
    return _vendor_service


# ─────────────────────────────────────────────────────────────────
# Auth dependencies
# ─────────────────────────────────────────────────────────────────

async def _is_super_admin(user_id: str) -> bool:
    return await get_admin_role_service().is_super_admin(user_id)


require_auth = create_auth_dependency(get_auth_provider)
"""Any verified caller; resolves to the caller's UID."""

require_super_admin = create_admin_dependency(get_auth_provider, _is_super_admin)
"""Verified caller with the super-admin role; resolves to the caller's UID."""
