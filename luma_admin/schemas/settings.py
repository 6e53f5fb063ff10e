"""
Pydantic models for system settings request/response validation.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


# =============================================================================
# Request Schemas
# =============================================================================

class SystemSettingsUpdateRequest(BaseModel):
    """
    PUT /api/system-settings

    Every field is optional. Scalar flags are coerced by truthiness so clients
    sending 1/0 or "yes"/"" still produce strict booleans, and fields the
    API does not recognize are dropped. Lists and objects are rejected.
    """
    model_config = ConfigDict(extra="ignore")

    maintenanceMode: bool = False
    maintenanceMessage: str = ""
    ownerSignupDisabled: bool = False
    brandSignupDisabled: bool = False
    vendorSignupDisabled: bool = False
    posLoginDisabled: bool = False

    @field_validator(
        "maintenanceMode",
        "ownerSignupDisabled",
        "brandSignupDisabled",
        "vendorSignupDisabled",
        "posLoginDisabled",
        mode="before",
    )
    @classmethod
    def coerce_flag(cls, value: Any) -> bool:
        _require_scalar(value)
        return bool(value)

    @field_validator("maintenanceMessage", mode="before")
    @classmethod
    def coerce_message(cls, value: Any) -> str:
        _require_scalar(value)
        if not value:
            return ""
        return value if isinstance(value, str) else str(value)


def _require_scalar(value: Any) -> None:
    # Lists and objects would otherwise be stored as their truthiness or repr
    if value is not None and not isinstance(value, (bool, int, float, str)):
        raise ValueError("must be a boolean, number, string or null")


# =============================================================================
# Response Schemas
# =============================================================================

class OkResponse(BaseModel):
    """Acknowledgement for mutating endpoints."""
    ok: bool = True
