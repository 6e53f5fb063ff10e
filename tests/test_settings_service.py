"""Unit tests for SettingsService and the settings request schema."""

import pytest
from pydantic import ValidationError

from luma_admin.schemas.settings import SystemSettingsUpdateRequest
from luma_admin.services.settings_service import SettingsService

from tests.conftest import make_snapshot


SETTINGS_PATH = "systemSettings/production"


@pytest.fixture
def service(mock_db):
    return SettingsService(mock_db)


class TestGetSettings:
    @pytest.mark.asyncio
    async def test_returns_empty_dict_when_never_written(self, service):
        assert await service.get_settings() == {}

    @pytest.mark.asyncio
    async def test_returns_stored_document_verbatim(self, service, mock_db):
        stored = {"maintenanceMode": True, "maintenanceMessage": "Back soon", "extra": 1}
        mock_db.document(SETTINGS_PATH).get.return_value = make_snapshot(stored)

        assert await service.get_settings() == stored

    @pytest.mark.asyncio
    async def test_uses_configured_document_id(self, mock_db):
        service = SettingsService(mock_db, document_id="staging")
        await service.get_settings()

        mock_db.document("systemSettings/staging").get.assert_awaited_once()


class TestUpdateSettings:
    @pytest.mark.asyncio
    async def test_merge_writes_payload_with_timestamp(self, service, mock_db):
        payload = SystemSettingsUpdateRequest(maintenanceMode=True).model_dump()

        stored = await service.update_settings(payload)

        ref = mock_db.document(SETTINGS_PATH)
        ref.set.assert_awaited_once()
        data = ref.set.call_args[0][0]
        assert ref.set.call_args[1] == {"merge": True}
        assert data["maintenanceMode"] is True
        assert data["ownerSignupDisabled"] is False
        assert "updatedAt" in data
        assert stored == data

    @pytest.mark.asyncio
    async def test_repeated_write_is_idempotent_apart_from_timestamp(self, service, mock_db):
        payload = SystemSettingsUpdateRequest(
            maintenanceMode=1, maintenanceMessage="Upgrading"
        ).model_dump()

        await service.update_settings(payload)
        await service.update_settings(payload)

        calls = mock_db.document(SETTINGS_PATH).set.call_args_list
        first, second = (dict(c[0][0]) for c in calls)
        first.pop("updatedAt")
        second.pop("updatedAt")
        assert first == second


class TestSettingsRequest:
    def test_unrecognized_fields_are_dropped(self):
        payload = SystemSettingsUpdateRequest(
            **{"maintenanceMode": True, "isAdmin": True, "role": "super_admin"}
        ).model_dump()

        assert "isAdmin" not in payload
        assert "role" not in payload

    def test_flags_coerced_by_truthiness(self):
        payload = SystemSettingsUpdateRequest(
            maintenanceMode="yes",
            ownerSignupDisabled=0,
            brandSignupDisabled=2.5,
            vendorSignupDisabled="",
            posLoginDisabled=None,
        ).model_dump()

        assert payload["maintenanceMode"] is True
        assert payload["ownerSignupDisabled"] is False
        assert payload["brandSignupDisabled"] is True
        assert payload["vendorSignupDisabled"] is False
        assert payload["posLoginDisabled"] is False

    def test_missing_fields_default_to_safe_values(self):
        assert SystemSettingsUpdateRequest().model_dump() == {
            "maintenanceMode": False,
            "maintenanceMessage": "",
            "ownerSignupDisabled": False,
            "brandSignupDisabled": False,
            "vendorSignupDisabled": False,
            "posLoginDisabled": False,
        }

    def test_falsy_message_becomes_empty_string(self):
        assert SystemSettingsUpdateRequest(maintenanceMessage=None).maintenanceMessage == ""
        assert SystemSettingsUpdateRequest(maintenanceMessage=0).maintenanceMessage == ""

    @pytest.mark.parametrize(
        "field,value",
        [
            ("maintenanceMode", []),
            ("brandSignupDisabled", [1]),
            ("posLoginDisabled", {"a": 1}),
            ("maintenanceMessage", {"a": 1}),
            ("maintenanceMessage", ["Back", "soon"]),
        ],
    )
    def test_lists_and_objects_are_rejected(self, field, value):
        with pytest.raises(ValidationError):
            SystemSettingsUpdateRequest(**{field: value})
