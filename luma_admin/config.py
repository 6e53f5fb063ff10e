"""
Luma Events admin settings.

Extends the base settings with admin-API specific configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Luma admin-specific settings."""

    # ==========================================================================
    # Firestore Layout
    # ==========================================================================
    # Document id of the settings singleton inside systemSettings
    SETTINGS_DOCUMENT_ID: str = "production"

    # ==========================================================================
    # Authorization
    # ==========================================================================
    # Role value on lumaAdmins/{uid} that grants admin access
    SUPER_ADMIN_ROLE: str = "super_admin"


# Global settings instance
settings = Settings()
