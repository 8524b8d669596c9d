"""Unit tests for ProductService and the shared service helpers."""

import httpx
import pytest

from megaport.exceptions import DecodeError, ValidationError
from megaport.models import ProductType
from megaport.services.base import OrderResult, fuzzy_match, validate_cost_centre, validate_term
from megaport.waiter import Satisfied, TimedOut


class TestHelpers:
    """Tests for service helper functions."""

    @pytest.mark.parametrize(
        "needle,haystack,expected",
        [
            ("Syd", "Equinix Sydney SY1", True),
            ("EqSY", "Equinix Sydney SY1", True),
            ("", "anything", True),
            ("syd", "Equinix Sydney SY1", False),
            ("SYQ", "Equinix Sydney SY1", False),
            ("1YS", "Equinix Sydney SY1", False),
        ],
    )
    def test_fuzzy_match(self, needle, haystack, expected):
        """Characters must appear in order; matching is case-sensitive."""
        assert fuzzy_match(needle, haystack) is expected

    @pytest.mark.parametrize("term", [1, 12, 24, 36])
    def test_valid_terms(self, term):
        """Accepted contract terms pass."""
        validate_term(term)

    @pytest.mark.parametrize("term", [0, 6, 48])
    def test_invalid_terms(self, term):
        """Other terms raise ValidationError naming the argument."""
        with pytest.raises(ValidationError) as exc_info:
            validate_term(term)
        assert exc_info.value.argument == "term"

    def test_cost_centre_length(self):
        """Cost centres longer than 255 characters are rejected."""
        validate_cost_centre("x" * 255)
        validate_cost_centre(None)
        with pytest.raises(ValidationError):
            validate_cost_centre("x" * 256)

    def test_order_result(self):
        """OrderResult exposes the first uid and aggregates outcome success."""
        satisfied = Satisfied(
            resource="port", identifier="a", elapsed=1, fetches=1, last_snapshot=None
        )
        timed_out = TimedOut(
            resource="port", identifier="b", elapsed=1, fetches=1, last_snapshot=None
        )
        assert OrderResult(["a", "b"]).uid == "a"
        assert OrderResult(["a"]).ok
        assert OrderResult(["a"], [satisfied]).ok
        assert not OrderResult(["a", "b"], [satisfied, timed_out]).ok


class TestProductService:
    """Tests for product-generic operations."""

    @pytest.mark.asyncio
    async def test_place_order_decodes_confirmations(self, client, fake_api):
        """Order confirmations are decoded from the data list."""
        fake_api.reply("POST", "/v3/networkdesign/buy", [{"technicalServiceUid": "u-1"}])
        confirmations = await client.products.place_order([{"productName": "x"}])
        assert [c.technical_service_uid for c in confirmations] == ["u-1"]
        assert fake_api.last_json("POST", "/v3/networkdesign/buy") == [{"productName": "x"}]

    @pytest.mark.asyncio
    async def test_place_order_rejects_empty_data(self, client, fake_api):
        """An order that confirms nothing is a DecodeError."""
        fake_api.reply("POST", "/v3/networkdesign/buy", [])
        with pytest.raises(DecodeError):
            await client.products.place_order([])

    @pytest.mark.asyncio
    async def test_place_order_rejects_wrong_shape(self, client, fake_api):
        """Unexpected confirmation shapes are a DecodeError."""
        fake_api.reply("POST", "/v3/networkdesign/buy", {"unexpected": True})
        with pytest.raises(DecodeError):
            await client.products.place_order([])

    @pytest.mark.asyncio
    async def test_validate_order_returns_data(self, client, fake_api):
        """Validation returns the pricing data."""
        fake_api.reply("POST", "/v3/networkdesign/validate", [{"price": {"monthlyRate": 10}}])
        data = await client.products.validate_order([{"productName": "x"}])
        assert data == [{"price": {"monthlyRate": 10}}]

    @pytest.mark.asyncio
    async def test_modify_product(self, client, fake_api):
        """Ports and MCRs are modified with a PUT to their typed path."""
        fake_api.reply("PUT", "/v2/product/mcr2/m-1", {})
        assert await client.products.modify_product("mcr2", "m-1", name="router", cost_centre="cc")
        assert fake_api.last_json("PUT", "/v2/product/mcr2/m-1") == {
            "name": "router",
            "costCentre": "cc",
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("product_type", [ProductType.VXC, ProductType.MVE, "bogus"])
    async def test_modify_product_rejects_other_types(self, client, fake_api, product_type):
        """Only MEGAPORT and MCR2 can be modified through this call."""
        with pytest.raises(ValidationError):
            await client.products.modify_product(product_type, "x", name="n")
        assert not fake_api.requests

    @pytest.mark.asyncio
    @pytest.mark.parametrize("delete_now,action", [(False, "CANCEL"), (True, "CANCEL_NOW")])
    async def test_delete_product(self, client, fake_api, delete_now, action):
        """Soft and hard deletes use different actions."""
        path = f"/v3/product/p-1/action/{action}"
        fake_api.reply("POST", path, None)
        await client.products.delete_product("p-1", delete_now)
        assert len(fake_api.sent("POST", path)) == 1

    @pytest.mark.asyncio
    async def test_restore_product(self, client, fake_api):
        """Restore uses the UN_CANCEL action."""
        fake_api.reply("POST", "/v3/product/p-1/action/UN_CANCEL", None)
        await client.products.restore_product("p-1")
        assert fake_api.sent("POST", "/v3/product/p-1/action/UN_CANCEL")

    @pytest.mark.asyncio
    async def test_manage_product_lock(self, client, fake_api):
        """Locking POSTs and unlocking DELETEs the lock resource."""
        fake_api.reply("POST", "/v2/product/p-1/lock", None)
        fake_api.add("DELETE", "/v2/product/p-1/lock", httpx.Response(200))
        await client.products.manage_product_lock("p-1", True)
        await client.products.manage_product_lock("p-1", False)
        assert fake_api.sent("POST", "/v2/product/p-1/lock")
        assert fake_api.sent("DELETE", "/v2/product/p-1/lock")

    @pytest.mark.asyncio
    async def test_list_products(self, client, fake_api):
        """Products of every type are listed as summaries."""
        fake_api.reply(
            "GET",
            "/v2/products",
            [
                {"productUid": "p-1", "productType": "MEGAPORT"},
                {"productUid": "m-1", "productType": "MCR2"},
            ],
        )
        products = await client.products.list_products()
        assert [p.product_type for p in products] == ["MEGAPORT", "MCR2"]
