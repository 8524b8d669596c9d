"""Unit tests for VXCService."""

import pytest

from megaport.exceptions import NoResultsError, ValidationError
from megaport.models import VXC, AWSPartnerConfig, VXCOrderEndpoint
from megaport.waiter import Satisfied, TimedOut

BUY = "/v3/networkdesign/buy"


def vxc(name="vxc", rate_limit=100, a_vlan=10, b_vlan=20, status="LIVE"):
    return {
        "productUid": "x-1",
        "productName": name,
        "rateLimit": rate_limit,
        "provisioningStatus": status,
        "aEnd": {"vlan": a_vlan},
        "bEnd": {"vlan": b_vlan},
    }


class TestBuyVXC:
    """Tests for ordering VXCs."""

    @pytest.mark.asyncio
    async def test_order_body(self, client, fake_api):
        """The VXC is ordered from the A-End product with its B-End config."""
        fake_api.reply("POST", BUY, [{"vxcJTechnicalServiceUid": "x-1"}])
        result = await client.vxc.buy_vxc(
            port_uid="p-1",
            name="to-aws",
            rate_limit=500,
            term=12,
            b_end=VXCOrderEndpoint(
                product_uid="aws-port",
                partner_config=AWSPartnerConfig(owner_account="123456789012", asn=64512),
            ),
        )
        assert result.uid == "x-1"
        [order] = fake_api.last_json("POST", BUY)
        assert order["productUid"] == "p-1"
        [config] = order["associatedVxcs"]
        assert config["productName"] == "to-aws"
        assert config["rateLimit"] == 500
        assert config["aEnd"] == {}
        assert config["bEnd"]["partnerConfig"]["connectType"] == "AWS"
        assert config["bEnd"]["partnerConfig"]["ownerAccount"] == "123456789012"

    @pytest.mark.asyncio
    async def test_rejects_bad_term(self, client, fake_api):
        """Terms are validated before ordering."""
        with pytest.raises(ValidationError):
            await client.vxc.buy_vxc(
                port_uid="p-1", name="x", rate_limit=1, term=3, b_end=VXCOrderEndpoint()
            )
        assert not fake_api.requests


class TestUpdateVXC:
    """Tests for VXC updates."""

    @pytest.mark.asyncio
    async def test_update_returns_snapshot(self, client, fake_api):
        """Without waiting the API's VXC is returned."""
        fake_api.reply("PUT", "/v3/product/vxc/x-1", vxc(rate_limit=200))
        updated = await client.vxc.update_vxc("x-1", rate_limit=200, b_end_vlan=0)
        assert isinstance(updated, VXC)
        assert updated.rate_limit == 200
        assert fake_api.last_json("PUT", "/v3/product/vxc/x-1") == {
            "rateLimit": 200,
            "bEndVlan": 0,
        }

    @pytest.mark.asyncio
    async def test_update_waits_for_applied_values(self, client, fake_api):
        """With wait_for_update the wait ends once the values are live."""
        fake_api.reply("PUT", "/v3/product/vxc/x-1", vxc())
        fake_api.reply(
            "GET",
            "/v2/product/x-1",
            vxc(b_vlan=20, status="CONFIGURED"),
            vxc(b_vlan=7, status="CONFIGURED"),
            vxc(b_vlan=7, status="LIVE"),
        )
        outcome = await client.vxc.update_vxc("x-1", b_end_vlan=7, wait_for_update=True)
        assert isinstance(outcome, Satisfied)
        assert outcome.fetches == 3

    @pytest.mark.asyncio
    async def test_update_wait_times_out(self, client, fake_api):
        """An update that never applies times out."""
        fake_api.reply("PUT", "/v3/product/vxc/x-1", vxc())
        fake_api.reply("GET", "/v2/product/x-1", vxc(name="old"))
        outcome = await client.vxc.update_vxc(
            "x-1", name="new", wait_for_update=True, wait_timeout=0.05
        )
        assert isinstance(outcome, TimedOut)
        assert outcome.last_snapshot.product_name == "old"


class TestDeleteVXC:
    """Tests for VXC deletion."""

    @pytest.mark.asyncio
    async def test_delete_and_wait(self, client, fake_api):
        """A hard delete waits for DECOMMISSIONED."""
        fake_api.reply("POST", "/v3/product/x-1/action/CANCEL_NOW", None)
        fake_api.reply("GET", "/v2/product/x-1", vxc(status="DECOMMISSIONED"))
        outcome = await client.vxc.delete_vxc("x-1", delete_now=True, wait_for_delete=True)
        assert isinstance(outcome, Satisfied)


class TestLookupPartnerPorts:
    """Tests for partner port lookup."""

    LOOKUP = {
        "megaports": [
            {"port": 1, "productUid": "busy", "portSpeed": 10000, "vxc": 99},
            {"port": 2, "productUid": "slow", "portSpeed": 500},
            {"port": 3, "productUid": "free-a", "portSpeed": 10000},
            {"port": 4, "productUid": "free-b", "portSpeed": 10000},
        ]
    }

    @pytest.mark.asyncio
    async def test_first_free_port(self, client, fake_api):
        """The first port without a VXC and with enough speed is chosen."""
        fake_api.reply("GET", "/v2/secure/google/pairing-key", self.LOOKUP)
        port = await client.vxc.lookup_partner_ports("pairing-key", "GOOGLE", 1000)
        assert port.product_uid == "free-a"

    @pytest.mark.asyncio
    async def test_restricted_to_product(self, client, fake_api):
        """product_uid narrows the match."""
        fake_api.reply("GET", "/v2/secure/google/pairing-key", self.LOOKUP)
        port = await client.vxc.lookup_partner_ports(
            "pairing-key", "google", 1000, product_uid="free-b"
        )
        assert port.id == 4

    @pytest.mark.asyncio
    async def test_no_qualifying_port(self, client, fake_api):
        """NoResultsError when nothing is fast enough and free."""
        fake_api.reply("GET", "/v2/secure/google/pairing-key", self.LOOKUP)
        with pytest.raises(NoResultsError):
            await client.vxc.lookup_partner_ports("pairing-key", "GOOGLE", 100_000)
