# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Partner (cloud provider) ports available for VXCs.

Every filter keeps only ports that accept VXCs and raises NoResultsError
instead of returning an empty list. An empty filter value matches every
port. Filters compose:

    >>> ports = await client.partners.list_partner_megaports()
    >>> ports = client.partners.filter_by_connect_type(ports, "AWS", exact=True)
    >>> ports = client.partners.filter_by_location_id(ports, 3)
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..exceptions import NoResultsError
from ..models.partner import PartnerMegaport
from .base import BaseService, fuzzy_match


def _matches(wanted: str, actual: str, exact: bool) -> bool:
    if not wanted:
        return True
    return wanted == actual if exact else fuzzy_match(wanted, actual)


def _keep(
    partners: Iterable[PartnerMegaport],
    predicate: Callable[[PartnerMegaport], bool],
    description: str,
) -> list[PartnerMegaport]:
    kept = [p for p in partners if p.vxc_permitted and predicate(p)]
    if not kept:
        raise NoResultsError(f"no partner ports match {description}")
    return kept


class PartnerService(BaseService):
    resource = "partner"

    async def list_partner_megaports(self) -> list[PartnerMegaport]:
        return await self._client.request_model(
            "GET", "/v2/dropdowns/partner/megaports", list[PartnerMegaport]
        )

    def filter_by_product_name(
        self, partners: Iterable[PartnerMegaport], product_name: str, exact: bool = False
    ) -> list[PartnerMegaport]:
        return _keep(
            partners,
            lambda p: _matches(product_name, p.product_name, exact),
            f"product name {product_name!r}",
        )

    def filter_by_connect_type(
        self, partners: Iterable[PartnerMegaport], connect_type: str, exact: bool = False
    ) -> list[PartnerMegaport]:
        return _keep(
            partners,
            lambda p: _matches(connect_type, p.connect_type, exact),
            f"connect type {connect_type!r}",
        )

    def filter_by_company_name(
        self, partners: Iterable[PartnerMegaport], company_name: str, exact: bool = False
    ) -> list[PartnerMegaport]:
        return _keep(
            partners,
            lambda p: _matches(company_name, p.company_name, exact),
            f"company name {company_name!r}",
        )

    def filter_by_diversity_zone(
        self, partners: Iterable[PartnerMegaport], diversity_zone: str, exact: bool = False
    ) -> list[PartnerMegaport]:
        return _keep(
            partners,
            lambda p: _matches(diversity_zone, p.diversity_zone, exact),
            f"diversity zone {diversity_zone!r}",
        )

    def filter_by_location_id(
        self, partners: Iterable[PartnerMegaport], location_id: int | None
    ) -> list[PartnerMegaport]:
        """``location_id=None`` keeps every location."""
        return _keep(
            partners,
            lambda p: location_id is None or p.location_id == location_id,
            f"location {location_id}",
        )

    async def find_partner_megaports(
        self,
        *,
        product_name: str = "",
        connect_type: str = "",
        company_name: str = "",
        diversity_zone: str = "",
        location_id: int | None = None,
        exact: bool = False,
    ) -> list[PartnerMegaport]:
        """List partner ports and apply every filter in one call."""
        partners = await self.list_partner_megaports()
        partners = self.filter_by_product_name(partners, product_name, exact)
        partners = self.filter_by_connect_type(partners, connect_type, exact)
        partners = self.filter_by_company_name(partners, company_name, exact)
        partners = self.filter_by_diversity_zone(partners, diversity_zone, exact)
        return self.filter_by_location_id(partners, location_id)


__all__ = ["PartnerService"]
