"""Unit tests for PartnerService filters."""

import pytest

from megaport.exceptions import NoResultsError
from megaport.models import PartnerMegaport
from megaport.services import PartnerService

PARTNERS = [
    {
        "connectType": "AWS",
        "productUid": "aws-1",
        "title": "AWS Direct Connect (ap-southeast-2)",
        "companyName": "AWS",
        "diversityZone": "blue",
        "locationId": 3,
        "speed": 10000,
        "vxcPermitted": True,
    },
    {
        "connectType": "AWSHC",
        "productUid": "aws-2",
        "title": "AWS Hosted Connection (ap-southeast-2)",
        "companyName": "AWS",
        "diversityZone": "red",
        "locationId": 4,
        "vxcPermitted": True,
    },
    {
        "connectType": "AZURE",
        "productUid": "az-1",
        "title": "Azure ExpressRoute",
        "companyName": "Microsoft Azure",
        "diversityZone": "red",
        "locationId": 3,
        "vxcPermitted": True,
    },
    {
        "connectType": "AWS",
        "productUid": "aws-closed",
        "title": "AWS Direct Connect (closed)",
        "companyName": "AWS",
        "locationId": 3,
        "vxcPermitted": False,
    },
]


@pytest.fixture
def partners():
    return [PartnerMegaport.model_validate(p) for p in PARTNERS]


@pytest.fixture
def service():
    # Filters never touch the client.
    return PartnerService(None)


def uids(ports):
    return [p.product_uid for p in ports]


class TestPartnerFilters:
    """Tests for the individual filters."""

    def test_title_decodes_to_product_name(self, partners):
        assert partners[2].product_name == "Azure ExpressRoute"

    def test_connect_type_fuzzy(self, service, partners):
        """A fuzzy filter matches in-order characters."""
        assert uids(service.filter_by_connect_type(partners, "AWS")) == ["aws-1", "aws-2"]

    def test_connect_type_exact(self, service, partners):
        assert uids(service.filter_by_connect_type(partners, "AWS", exact=True)) == [
            "aws-1"
        ]

    def test_vxc_permitted_required(self, service, partners):
        """Ports that refuse VXCs are never returned."""
        kept = service.filter_by_company_name(partners, "AWS", exact=True)
        assert "aws-closed" not in uids(kept)

    def test_empty_value_matches_all(self, service, partners):
        assert uids(service.filter_by_product_name(partners, "")) == [
            "aws-1",
            "aws-2",
            "az-1",
        ]

    def test_diversity_zone(self, service, partners):
        kept = service.filter_by_diversity_zone(partners, "red", exact=True)
        assert uids(kept) == ["aws-2", "az-1"]

    def test_location(self, service, partners):
        assert uids(service.filter_by_location_id(partners, 3)) == ["aws-1", "az-1"]
        assert len(service.filter_by_location_id(partners, None)) == 3

    def test_no_match_raises(self, service, partners):
        with pytest.raises(NoResultsError):
            service.filter_by_company_name(partners, "Oracle")


class TestFindPartnerMegaports:
    """Tests for the combined lookup."""

    @pytest.mark.asyncio
    async def test_combined_filters(self, client, fake_api):
        fake_api.reply("GET", "/v2/dropdowns/partner/megaports", PARTNERS)
        found = await client.partners.find_partner_megaports(
            connect_type="AWS", diversity_zone="red", location_id=4
        )
        assert uids(found) == ["aws-2"]

    @pytest.mark.asyncio
    async def test_combined_filters_no_result(self, client, fake_api):
        fake_api.reply("GET", "/v2/dropdowns/partner/megaports", PARTNERS)
        with pytest.raises(NoResultsError):
            await client.partners.find_partner_megaports(connect_type="AZURE", location_id=4)
