"""Unit tests for IXService."""

import httpx
import pytest

from megaport.exceptions import APIError
from megaport.models import IX, IXOrderConfiguration, IXUpdate
from megaport.waiter import Satisfied


def ix_config():
    return IXOrderConfiguration(
        product_name="ix-syd",
        network_service_type="Sydney IX",
        asn=65000,
        mac_address="00:11:22:33:44:55",
        rate_limit=1000,
        vlan=200,
    )


class TestBuyIX:
    """Tests for ordering IX connections."""

    @pytest.mark.asyncio
    async def test_validates_then_orders(self, client, fake_api):
        """The order is validated before it is placed with the same body."""
        fake_api.reply("POST", "/v3/networkdesign/validate", [{"price": {}}])
        fake_api.reply("POST", "/v3/networkdesign/buy", [{"technicalServiceUid": "ix-1"}])
        result = await client.ix.buy_ix("p-1", ix_config())

        assert result.uid == "ix-1"
        validated = fake_api.last_json("POST", "/v3/networkdesign/validate")
        ordered = fake_api.last_json("POST", "/v3/networkdesign/buy")
        assert validated == ordered
        [order] = ordered
        assert order["productUid"] == "p-1"
        assert order["associatedIxs"][0]["networkServiceType"] == "Sydney IX"
        assert order["associatedIxs"][0]["macAddress"] == "00:11:22:33:44:55"

    @pytest.mark.asyncio
    async def test_failed_validation_does_not_order(self, client, fake_api):
        """A rejected validation stops the order."""
        fake_api.add(
            "POST", "/v3/networkdesign/validate", httpx.Response(400, json={"message": "bad asn"})
        )
        with pytest.raises(APIError):
            await client.ix.buy_ix("p-1", ix_config())
        assert not fake_api.sent("POST", "/v3/networkdesign/buy")


class TestIXLifecycle:
    """Tests for IX update, delete and waits."""

    @pytest.mark.asyncio
    async def test_update_returns_snapshot(self, client, fake_api):
        """Updates PUT only the changed fields."""
        fake_api.reply("PUT", "/v2/product/ix/ix-1", {"productUid": "ix-1", "rateLimit": 500})
        updated = await client.ix.update_ix("ix-1", IXUpdate(rate_limit=500))
        assert isinstance(updated, IX)
        assert updated.rate_limit == 500
        assert fake_api.last_json("PUT", "/v2/product/ix/ix-1") == {"rateLimit": 500}

    @pytest.mark.asyncio
    async def test_update_with_wait(self, client, fake_api):
        """With wait_for_update the IX must be provisioned again."""
        fake_api.reply("PUT", "/v2/product/ix/ix-1", {"productUid": "ix-1"})
        fake_api.reply(
            "GET",
            "/v2/product/ix-1",
            {"provisioningStatus": "DEPLOYABLE"},
            {"provisioningStatus": "LIVE"},
        )
        outcome = await client.ix.update_ix("ix-1", IXUpdate(vlan=300), wait_for_update=True)
        assert isinstance(outcome, Satisfied)
        assert outcome.resource == "ix"

    @pytest.mark.asyncio
    async def test_delete(self, client, fake_api):
        """IX deletion cancels the product."""
        fake_api.reply("POST", "/v3/product/ix-1/action/CANCEL", None)
        assert await client.ix.delete_ix("ix-1") is None
        assert fake_api.sent("POST", "/v3/product/ix-1/action/CANCEL")
