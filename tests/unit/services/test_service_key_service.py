"""Unit tests for ServiceKeyService."""

from datetime import datetime, timezone

import pytest

from megaport.models import CreateServiceKeyRequest, UpdateServiceKeyRequest, ValidFor

KEY_PATH = "/v2/service/key"


class TestServiceKeys:
    """Tests for service key operations."""

    @pytest.mark.asyncio
    async def test_create_returns_key(self, client, fake_api):
        fake_api.reply("POST", KEY_PATH, {"key": "abc-123"})
        key = await client.service_keys.create_service_key(
            CreateServiceKeyRequest(product_uid="p-1", max_speed=100, description="partner")
        )
        assert key == "abc-123"
        assert fake_api.last_json("POST", KEY_PATH) == {
            "productUid": "p-1",
            "singleUse": False,
            "maxSpeed": 100,
            "description": "partner",
        }

    @pytest.mark.asyncio
    async def test_list_for_product(self, client, fake_api):
        """A product uid is passed as productIdOrUid."""
        fake_api.reply("GET", KEY_PATH, [{"key": "abc-123", "productUid": "p-1"}])
        keys = await client.service_keys.list_service_keys("p-1")
        assert [k.key for k in keys] == ["abc-123"]
        [request] = fake_api.sent("GET", KEY_PATH)
        assert request.url.params["productIdOrUid"] == "p-1"

    @pytest.mark.asyncio
    async def test_list_all(self, client, fake_api):
        fake_api.reply("GET", KEY_PATH, [])
        assert await client.service_keys.list_service_keys() == []
        [request] = fake_api.sent("GET", KEY_PATH)
        assert "productIdOrUid" not in request.url.params

    @pytest.mark.asyncio
    async def test_get_by_key(self, client, fake_api):
        fake_api.reply(
            "GET",
            KEY_PATH,
            {"key": "abc-123", "validFor": {"start": 1700000000000}, "singleUse": True},
        )
        key = await client.service_keys.get_service_key("abc-123")
        assert key.single_use
        assert key.valid_for.start == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
        [request] = fake_api.sent("GET", KEY_PATH)
        assert request.url.params["key"] == "abc-123"

    @pytest.mark.asyncio
    async def test_update_sends_epoch_millis(self, client, fake_api):
        """The validity window is serialized as epoch milliseconds."""
        fake_api.reply("PUT", KEY_PATH, None)
        start = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
        await client.service_keys.update_service_key(
            UpdateServiceKeyRequest(key="abc-123", active=False, valid_for=ValidFor(start=start))
        )
        body = fake_api.last_json("PUT", KEY_PATH)
        assert body["key"] == "abc-123"
        assert body["active"] is False
        assert body["validFor"] == {"start": 1700000000000}
