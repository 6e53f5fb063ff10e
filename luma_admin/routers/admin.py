"""
FastAPI router for admin endpoints.

Dashboard totals and status moderation for events and vendors. Every route
requires a super admin.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends

from common.utils import ok_response, APIException, InternalServerException
from luma_admin.dependencies import (
    require_super_admin,
    get_overview_service,
    get_event_service,
    get_vendor_service,
    get_audit_service,
)
from luma_admin.schemas.admin import (
    AdminOverview,
    EventStatusUpdateRequest,
    VendorStatusUpdateRequest,
)
from luma_admin.schemas.settings import OkResponse
from luma_admin.services.overview_service import OverviewService
from luma_admin.services.event_service import EventService
from luma_admin.services.vendor_service import VendorService
from luma_admin.services.audit_service import AuditService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/overview", response_model=AdminOverview)
async def get_admin_overview(
    user_id: Annotated[str, Depends(require_super_admin)],
    overview_service: Annotated[OverviewService, Depends(get_overview_service)],
):
    """Get event, vendor and order counts plus net revenue."""
    try:
        return await overview_service.get_overview()
    except Exception as e:
        logger.error(f"Failed to fetch admin overview: {e}")
        raise InternalServerException("Failed to fetch admin overview")


@router.put("/event-status", response_model=OkResponse)
async def update_event_status(
    request: EventStatusUpdateRequest,
    background_tasks: BackgroundTasks,
    user_id: Annotated[str, Depends(require_super_admin)],
    event_service: Annotated[EventService, Depends(get_event_service)],
    audit_service: Annotated[AuditService, Depends(get_audit_service)],
):
    """Activate or suspend an event."""
    try:
        result = await event_service.update_status(request.eventId, request.status)
    except Exception as e:
        logger.error(f"Failed to update event status for {request.eventId}: {e}")
        raise InternalServerException("Failed to update event status")

    background_tasks.add_task(
        audit_service.log_action,
        "event.status_update",
        user_id,
        {"eventId": result["eventId"], "status": result["status"]},
    )

    return ok_response()


@router.put("/vendor-status", response_model=OkResponse)
async def update_vendor_status(
    request: VendorStatusUpdateRequest,
    background_tasks: BackgroundTasks,
    user_id: Annotated[str, Depends(require_super_admin)],
    vendor_service: Annotated[VendorService, Depends(get_vendor_service)],
    audit_service: Annotated[AuditService, Depends(get_audit_service)],
):
    """
    Moderate a vendor.

    The vendor's brand, if any, follows: approved -> active,
    rejected/suspended -> suspended, pending -> pending.
    """
    try:
        result = await vendor_service.update_status(
            event_id=request.eventId,
            vendor_id=request.vendorId,
            status=request.status,
            rejection_reason=request.rejectionReason,
        )
    except APIException:
        raise
    except Exception as e:
        logger.error(
            f"Failed to update vendor status for {request.eventId}/{request.vendorId}: {e}"
        )
        raise InternalServerException("Failed to update vendor status")

    background_tasks.add_task(
        audit_service.log_action,
        "vendor.status_update",
        user_id,
        {
            "eventId": result["eventId"],
            "vendorId": result["vendorId"],
            "status": result["status"],
            "rejectionReason": result["rejectionReason"],
        },
    )

    return ok_response()
