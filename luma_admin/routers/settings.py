"""
FastAPI router for system settings endpoints.

Any signed-in user can read the settings; only super admins can change them.
"""

import logging
from typing import Annotated, Any, Dict, Optional

from fastapi import APIRouter, BackgroundTasks, Depends

from common.utils import ok_response, InternalServerException
from luma_admin.dependencies import (
    require_auth,
    require_super_admin,
    get_settings_service,
    get_audit_service,
)
from luma_admin.schemas.settings import SystemSettingsUpdateRequest, OkResponse
from luma_admin.services.settings_service import SettingsService
from luma_admin.services.audit_service import AuditService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/system-settings", tags=["settings"])


@router.get("", response_model=Dict[str, Any])
async def get_system_settings(
    user_id: Annotated[str, Depends(require_auth)],
    settings_service: Annotated[SettingsService, Depends(get_settings_service)],
):
    """Get the global settings document, or {} if it was never written."""
    try:
        return await settings_service.get_settings()
    except Exception as e:
        logger.error(f"Failed to fetch system settings: {e}")
        raise InternalServerException("Failed to fetch system settings")


@router.put("", response_model=OkResponse)
async def update_system_settings(
    background_tasks: BackgroundTasks,
    user_id: Annotated[str, Depends(require_super_admin)],
    settings_service: Annotated[SettingsService, Depends(get_settings_service)],
    audit_service: Annotated[AuditService, Depends(get_audit_service)],
    request: Optional[SystemSettingsUpdateRequest] = None,
):
    """
    Update the global settings.

    Missing flags are written as false and a missing message as "".
    """
    payload = (request or SystemSettingsUpdateRequest()).model_dump()

    try:
        stored = await settings_service.update_settings(payload)
    except Exception as e:
        logger.error(f"Failed to update system settings: {e}")
        raise InternalServerException("Failed to update system settings")

    background_tasks.add_task(
        audit_service.log_action,
        "system_settings.update",
        user_id,
        stored,
    )

    return ok_response()
