# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""MVE (Megaport Virtual Edge) ordering, lifecycle and image catalog."""

from __future__ import annotations

import asyncio
import logging

from ..models.mve import (
    MVE,
    MVEConfig,
    MVEImage,
    MVEImageCatalog,
    MVENetworkInterface,
    MVEOrder,
    VendorConfig,
)
from ..models.product import MVEUpdate
from ..predicates import is_deleted, is_provisioned, name_is_live
from ..waiter import WaitOutcome
from .base import BaseService, OrderResult, validate_cost_centre, validate_term

logger = logging.getLogger(__name__)


class MVEService(BaseService):
    resource = "mve"

    async def buy_mve(
        self,
        *,
        name: str,
        term: int,
        location_id: int,
        vendor_config: VendorConfig,
        network_interfaces: list[MVENetworkInterface] | None = None,
        diversity_zone: str | None = None,
        cost_centre: str | None = None,
        promo_code: str | None = None,
        wait_for_provision: bool = False,
        wait_timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> OrderResult:
        """
        Order an MVE.

        ``vendor_config`` selects the image and carries vendor-specific boot
        settings; use the matching model (``CiscoConfig``, ``FortinetConfig``,
        ...). Without ``network_interfaces`` the MVE gets a single
        "Data Plane" vNIC.
        """
        validate_term(term)
        validate_cost_centre(cost_centre)
        order = MVEOrder(
            location_id=location_id,
            product_name=name,
            term=term,
            promo_code=promo_code,
            cost_centre=cost_centre,
            network_interfaces=network_interfaces
            or [MVENetworkInterface(description="Data Plane")],
            vendor_config=vendor_config,
            config=MVEConfig(diversity_zone=diversity_zone),
        )
        confirmations = await self._client.products.place_order([order])
        uids = [c.technical_service_uid for c in confirmations]
        logger.info(f"Ordered MVE {name!r} ({vendor_config.vendor}): {', '.join(uids)}")

        if not wait_for_provision:
            return OrderResult(uids)
        outcomes = await self._order_outcomes(
            uids, self._fetch, is_provisioned, timeout=wait_timeout, cancel_event=cancel_event
        )
        return OrderResult(uids, outcomes)

    async def get_mve(self, uid: str) -> MVE:
        return await self._client.request_model("GET", f"/v2/product/{uid}", MVE)

    def _fetch(self, uid: str):
        return lambda: self.get_mve(uid)

    async def modify_mve(
        self,
        uid: str,
        *,
        name: str | None = None,
        cost_centre: str | None = None,
        contract_term_months: int | None = None,
        wait_for_update: bool = False,
        wait_timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WaitOutcome | None:
        """
        Rename an MVE or change its cost centre or term.

        With ``wait_for_update`` (requires ``name``) waits until the MVE is
        LIVE under the new name and returns the outcome.
        """
        if contract_term_months is not None:
            validate_term(contract_term_months)
        validate_cost_centre(cost_centre)
        body = MVEUpdate(
            name=name, cost_centre=cost_centre, contract_term_months=contract_term_months
        )
        await self._client.execute("PUT", f"/v2/product/mve/{uid}", body=body)
        if not wait_for_update or name is None:
            return None
        return await self._wait(
            self._fetch(uid),
            name_is_live(name),
            uid,
            timeout=wait_timeout,
            cancel_event=cancel_event,
        )

    async def delete_mve(
        self,
        uid: str,
        delete_now: bool = True,
        *,
        wait_for_delete: bool = False,
        wait_timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WaitOutcome | None:
        """MVEs are terminated immediately by default."""
        await self._client.products.delete_product(uid, delete_now)
        if not wait_for_delete:
            return None
        return await self._wait(
            self._fetch(uid),
            is_deleted(delete_now),
            uid,
            timeout=wait_timeout,
            cancel_event=cancel_event,
        )

    async def list_images(self) -> list[MVEImage]:
        """Every available MVE image, one entry per image version."""
        catalog = await self._client.request_model(
            "GET", "/v4/product/mve/images", MVEImageCatalog
        )
        return [image for product in catalog.mve_images for image in product.flatten()]

    async def wait_for_mve_provisioning(
        self,
        uid: str,
        *,
        timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WaitOutcome:
        return await self._wait(
            self._fetch(uid), is_provisioned, uid, timeout=timeout, cancel_event=cancel_event
        )


__all__ = ["MVEService"]
