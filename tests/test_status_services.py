"""Unit tests for EventService and VendorService (status + brand cascade)."""

import pytest

from common.utils.exceptions import NotFoundException
from luma_admin.schemas.admin import EventStatus, VendorStatus
from luma_admin.services.event_service import EventService
from luma_admin.services.vendor_service import VendorService

from tests.conftest import make_snapshot


VENDOR_PATH = "events/E1/vendors/V1"


# ─────────────────────────────────────────────────────────────────
# EventService
# ─────────────────────────────────────────────────────────────────


class TestEventStatus:
    @pytest.mark.asyncio
    async def test_updates_status_field(self, mock_db):
        result = await EventService(mock_db).update_status("E1", EventStatus.SUSPENDED)

        ref = mock_db.document("events/E1")
        ref.update.assert_awaited_once()
        update = ref.update.call_args[0][0]
        assert update["status"] == "suspended"
        assert "updatedAt" in update
        assert result == {"eventId": "E1", "status": "suspended"}

    @pytest.mark.asyncio
    async def test_accepts_raw_status_string(self, mock_db):
        result = await EventService(mock_db).update_status("E1", "active")
        assert result["status"] == "active"

    @pytest.mark.asyncio
    async def test_rejects_unknown_status_without_writing(self, mock_db):
        with pytest.raises(ValueError):
            await EventService(mock_db).update_status("E1", "archived")

        mock_db.document.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_event_error_propagates(self, mock_db):
        mock_db.document("events/missing").update.side_effect = RuntimeError("404 No document to update")

        with pytest.raises(RuntimeError):
            await EventService(mock_db).update_status("missing", EventStatus.ACTIVE)


# ─────────────────────────────────────────────────────────────────
# VendorService
# ─────────────────────────────────────────────────────────────────


class TestVendorStatus:
    @pytest.mark.asyncio
    async def test_missing_vendor_raises_not_found(self, mock_db):
        with pytest.raises(NotFoundException) as exc_info:
            await VendorService(mock_db).update_status("E1", "V1", VendorStatus.APPROVED)

        assert exc_info.value.status_code == 404
        mock_db.document(VENDOR_PATH).update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_approval_activates_brand(self, mock_db):
        mock_db.document(VENDOR_PATH).get.return_value = make_snapshot(
            {"status": "pending", "brandId": "B1"}
        )

        result = await VendorService(mock_db).update_status("E1", "V1", VendorStatus.APPROVED)

        vendor_update = mock_db.document(VENDOR_PATH).update.call_args[0][0]
        assert vendor_update["status"] == "approved"
        assert "rejectionReason" not in vendor_update

        brand_update = mock_db.document("brands/B1").update.call_args[0][0]
        assert brand_update["status"] == "active"

        assert result["brandStatus"] == "active"
        assert result["rejectionReason"] is None

    @pytest.mark.asyncio
    async def test_rejection_suspends_brand_with_default_reason(self, mock_db):
        mock_db.document(VENDOR_PATH).get.return_value = make_snapshot(
            {"status": "pending", "brandId": "B1"}
        )

        result = await VendorService(mock_db).update_status("E1", "V1", VendorStatus.REJECTED)

        vendor_update = mock_db.document(VENDOR_PATH).update.call_args[0][0]
        assert vendor_update["status"] == "rejected"
        assert vendor_update["rejectionReason"] == "No reason provided"
        assert mock_db.document("brands/B1").update.call_args[0][0]["status"] == "suspended"
        assert result["rejectionReason"] == "No reason provided"

    @pytest.mark.asyncio
    async def test_rejection_keeps_given_reason(self, mock_db):
        mock_db.document(VENDOR_PATH).get.return_value = make_snapshot({"status": "pending"})

        result = await VendorService(mock_db).update_status(
            "E1", "V1", VendorStatus.REJECTED, rejection_reason="Missing permit"
        )

        vendor_update = mock_db.document(VENDOR_PATH).update.call_args[0][0]
        assert vendor_update["rejectionReason"] == "Missing permit"
        assert result["rejectionReason"] == "Missing permit"

    @pytest.mark.asyncio
    async def test_reason_ignored_unless_rejecting(self, mock_db):
        mock_db.document(VENDOR_PATH).get.return_value = make_snapshot({"status": "approved"})

        result = await VendorService(mock_db).update_status(
            "E1", "V1", VendorStatus.SUSPENDED, rejection_reason="Spam"
        )

        vendor_update = mock_db.document(VENDOR_PATH).update.call_args[0][0]
        assert "rejectionReason" not in vendor_update
        assert result["rejectionReason"] is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "vendor_status,brand_status",
        [
            (VendorStatus.PENDING, "pending"),
            (VendorStatus.APPROVED, "active"),
            (VendorStatus.SUSPENDED, "suspended"),
            (VendorStatus.REJECTED, "suspended"),
        ],
    )
    async def test_brand_status_mapping(self, mock_db, vendor_status, brand_status):
        mock_db.document(VENDOR_PATH).get.return_value = make_snapshot({"brandId": "B1"})

        await VendorService(mock_db).update_status("E1", "V1", vendor_status)

        assert mock_db.document("brands/B1").update.call_args[0][0]["status"] == brand_status

    @pytest.mark.asyncio
    async def test_vendor_without_brand_skips_cascade(self, mock_db):
        mock_db.document(VENDOR_PATH).get.return_value = make_snapshot({"status": "pending"})

        result = await VendorService(mock_db).update_status("E1", "V1", VendorStatus.APPROVED)

        assert not any(path.startswith("brands/") for path in mock_db.documents)
        assert result["brandId"] is None
        assert result["brandStatus"] is None

    @pytest.mark.asyncio
    async def test_vendor_write_failure_skips_brand(self, mock_db):
        vendor_ref = mock_db.document(VENDOR_PATH)
        vendor_ref.get.return_value = make_snapshot({"brandId": "B1"})
        vendor_ref.update.side_effect = RuntimeError("write failed")

        with pytest.raises(RuntimeError):
            await VendorService(mock_db).update_status("E1", "V1", VendorStatus.APPROVED)

        assert "brands/B1" not in mock_db.documents

    @pytest.mark.asyncio
    async def test_brand_failure_leaves_vendor_updated(self, mock_db):
        mock_db.document(VENDOR_PATH).get.return_value = make_snapshot({"brandId": "B1"})
        mock_db.document("brands/B1").update.side_effect = RuntimeError("brand write failed")

        with pytest.raises(RuntimeError):
            await VendorService(mock_db).update_status("E1", "V1", VendorStatus.APPROVED)

        mock_db.document(VENDOR_PATH).update.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("brand_id", ["B1/secrets/x", "a/b", 42, {"id": "B1"}])
    async def test_invalid_brand_link_fails_before_any_write(self, mock_db, brand_id):
        vendor_ref = mock_db.document(VENDOR_PATH)
        vendor_ref.get.return_value = make_snapshot({"brandId": brand_id})

        with pytest.raises(ValueError, match="invalid brandId"):
            await VendorService(mock_db).update_status("E1", "V1", VendorStatus.APPROVED)

        vendor_ref.update.assert_not_awaited()
        assert not any(path.startswith("brands/") for path in mock_db.documents)

    @pytest.mark.asyncio
    async def test_empty_brand_link_skips_cascade(self, mock_db):
        mock_db.document(VENDOR_PATH).get.return_value = make_snapshot({"brandId": ""})

        result = await VendorService(mock_db).update_status("E1", "V1", VendorStatus.APPROVED)

        mock_db.document(VENDOR_PATH).update.assert_awaited_once()
        assert result["brandStatus"] is None
