"""Unit tests for MCR and prefix filter list models."""

import pytest
from pydantic import ValidationError

from megaport.models import (
    MCR,
    AddressFamily,
    MCROrder,
    MCROrderConfig,
    MCRPrefixFilterList,
    PrefixListAction,
    PrefixListEntry,
)


class TestPrefixListEntry:
    """Tests for a single prefix list rule."""

    def test_valid_entry(self):
        """A well-formed rule validates."""
        entry = PrefixListEntry(action="permit", prefix="10.0.0.0/8", ge=16, le=24)
        assert entry.action is PrefixListAction.PERMIT

    def test_invalid_prefix(self):
        """A prefix that is not a network is rejected."""
        with pytest.raises(ValidationError, match="not a valid network"):
            PrefixListEntry(action="permit", prefix="10.0.0.300/8")

    def test_ge_greater_than_le(self):
        """ge must not exceed le."""
        with pytest.raises(ValidationError, match="ge must be less than or equal to le"):
            PrefixListEntry(action="deny", prefix="10.0.0.0/8", ge=25, le=24)


class TestMCRPrefixFilterList:
    """Tests for address-family checks on whole lists."""

    def test_ipv4_list(self):
        """IPv4 entries within 0..32 validate."""
        prefix_list = MCRPrefixFilterList(
            description="office",
            address_family="IPv4",
            entries=[{"action": "permit", "prefix": "192.168.0.0/16", "le": 32}],
        )
        assert prefix_list.address_family is AddressFamily.IPV4
        assert prefix_list.to_payload()["addressFamily"] == "IPv4"

    def test_ipv4_bound_out_of_range(self):
        """IPv4 bounds above 32 are rejected."""
        with pytest.raises(ValidationError, match="between 0 and 32"):
            MCRPrefixFilterList(
                description="office",
                address_family="IPv4",
                entries=[{"action": "permit", "prefix": "10.0.0.0/8", "le": 64}],
            )

    def test_ipv6_allows_longer_bounds(self):
        """IPv6 bounds may go up to 128."""
        prefix_list = MCRPrefixFilterList(
            description="v6",
            address_family="IPv6",
            entries=[{"action": "permit", "prefix": "2001:db8::/32", "ge": 48, "le": 64}],
        )
        assert prefix_list.entries[0].le == 64

    def test_family_mismatch(self):
        """An IPv6 prefix in an IPv4 list is rejected."""
        with pytest.raises(ValidationError, match="does not belong to IPv4"):
            MCRPrefixFilterList(
                description="office",
                address_family="IPv4",
                entries=[{"action": "deny", "prefix": "2001:db8::/32"}],
            )


class TestMCRModels:
    """Tests for MCR order and snapshot models."""

    def test_order_payload(self):
        """The MCR order carries its ASN under config."""
        order = MCROrder(
            location_id=3,
            product_name="router",
            term=1,
            port_speed=5000,
            config=MCROrderConfig(mcr_asn=64512),
        )
        payload = order.to_payload()
        assert payload["productType"] == "MCR2"
        assert payload["config"] == {"mcrAsn": 64512}

    def test_snapshot_asn(self):
        """The router ASN is read from resources.virtual_router.mcrAsn."""
        mcr = MCR.model_validate(
            {
                "productUid": "m-1",
                "portSpeed": 1000,
                "resources": {"virtual_router": {"mcrAsn": 133937, "speed": 1000}},
            }
        )
        assert mcr.resources.virtual_router.asn == 133937
