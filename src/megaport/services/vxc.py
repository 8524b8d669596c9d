# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
VXC (virtual cross connect) ordering, updates and partner port lookup.

A VXC joins an A-End product (port, MCR or MVE) to a B-End, which is either
another of the customer's products or a cloud partner port. Partner ends
carry a ``partner_config`` tagged by ``connectType`` (AWS, AZURE, GOOGLE,
...). Cloud B-End uids are usually discovered with
``lookup_partner_ports``.
"""

from __future__ import annotations

import asyncio
import logging

from ..exceptions import NoResultsError
from ..models.vxc import (
    VXC,
    PartnerLookup,
    PartnerLookupItem,
    VXCOrder,
    VXCOrderConfiguration,
    VXCOrderConfirmation,
    VXCOrderEndpoint,
    VXCUpdate,
)
from ..predicates import is_deleted, is_provisioned, vxc_matches
from ..waiter import WaitOutcome
from .base import BaseService, OrderResult, validate_cost_centre, validate_term

logger = logging.getLogger(__name__)


class VXCService(BaseService):
    resource = "vxc"

    async def buy_vxc(
        self,
        *,
        port_uid: str,
        name: str,
        rate_limit: int,
        term: int,
        b_end: VXCOrderEndpoint,
        a_end: VXCOrderEndpoint | None = None,
        shutdown: bool = False,
        promo_code: str | None = None,
        service_key: str | None = None,
        cost_centre: str | None = None,
        wait_for_provision: bool = False,
        wait_timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> OrderResult:
        """
        Order a VXC from the product ``port_uid``.

        Args:
            port_uid: A-End product uid (port, MCR or MVE).
            name: VXC name.
            rate_limit: Bandwidth in Mbps.
            term: Contract term in months.
            b_end: Far end; ``b_end.partner_config`` configures cloud partners.
            a_end: Optional A-End settings (VLAN, vNIC index, MCR partner
                config for BGP peering).
            service_key: Service key when connecting to another company's port.

        Raises:
            ValidationError: If ``term`` or ``cost_centre`` is not accepted.
        """
        validate_term(term)
        validate_cost_centre(cost_centre)
        order = VXCOrder(
            product_uid=port_uid,
            associated_vxcs=[
                VXCOrderConfiguration(
                    product_name=name,
                    rate_limit=rate_limit,
                    term=term,
                    shutdown=shutdown,
                    promo_code=promo_code,
                    service_key=service_key,
                    cost_centre=cost_centre,
                    a_end=a_end or VXCOrderEndpoint(),
                    b_end=b_end,
                )
            ],
        )
        confirmations = await self._client.products.place_order([order], VXCOrderConfirmation)
        uids = [c.technical_service_uid for c in confirmations]
        logger.info(f"Ordered VXC {name!r} from {port_uid}: {', '.join(uids)}")

        if not wait_for_provision:
            return OrderResult(uids)
        outcomes = await self._order_outcomes(
            uids, self._fetch, is_provisioned, timeout=wait_timeout, cancel_event=cancel_event
        )
        return OrderResult(uids, outcomes)

    async def get_vxc(self, uid: str) -> VXC:
        return await self._client.request_model("GET", f"/v2/product/{uid}", VXC)

    def _fetch(self, uid: str):
        return lambda: self.get_vxc(uid)

    async def update_vxc(
        self,
        uid: str,
        *,
        name: str | None = None,
        rate_limit: int | None = None,
        a_end_vlan: int | None = None,
        b_end_vlan: int | None = None,
        a_end_inner_vlan: int | None = None,
        b_end_inner_vlan: int | None = None,
        a_end_product_uid: str | None = None,
        b_end_product_uid: str | None = None,
        cost_centre: str | None = None,
        term: int | None = None,
        shutdown: bool | None = None,
        wait_for_update: bool = False,
        wait_timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> VXC | WaitOutcome:
        """
        Change a VXC. Arguments left as None are not changed.

        A VLAN of ``0`` is a real value (untagged) and is sent as such.

        Returns:
            The updated VXC as reported by the API, or with
            ``wait_for_update`` the outcome of waiting until the VXC shows the
            requested name, rate limit and VLANs and is LIVE again.

        Raises:
            ValidationError: If ``term`` or ``cost_centre`` is not accepted.
        """
        if term is not None:
            validate_term(term)
        validate_cost_centre(cost_centre)
        update = VXCUpdate(
            name=name,
            rate_limit=rate_limit,
            a_end_vlan=a_end_vlan,
            b_end_vlan=b_end_vlan,
            a_end_inner_vlan=a_end_inner_vlan,
            b_end_inner_vlan=b_end_inner_vlan,
            a_end_product_uid=a_end_product_uid,
            b_end_product_uid=b_end_product_uid,
            cost_centre=cost_centre,
            term=term,
            shutdown=shutdown,
        )
        updated = await self._client.request_model(
            "PUT", f"/v3/product/vxc/{uid}", VXC, body=update
        )
        if not wait_for_update:
            return updated
        return await self.wait_for_vxc_update(
            uid,
            name=name,
            rate_limit=rate_limit,
            a_end_vlan=a_end_vlan,
            b_end_vlan=b_end_vlan,
            timeout=wait_timeout,
            cancel_event=cancel_event,
        )

    async def delete_vxc(
        self,
        uid: str,
        delete_now: bool = False,
        *,
        wait_for_delete: bool = False,
        wait_timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WaitOutcome | None:
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

    async def lookup_partner_ports(
        self,
        key: str,
        partner: str,
        port_speed: int,
        product_uid: str | None = None,
    ) -> PartnerLookupItem:
        """
        Find a partner port for a cloud connection.

        ``key`` is the partner's pairing or service key. Returns the first
        port without an existing VXC whose speed is at least ``port_speed``,
        restricted to ``product_uid`` when given.

        Raises:
            NoResultsError: If no port qualifies.
        """
        lookup = await self._client.request_model(
            "GET", f"/v2/secure/{partner.lower()}/{key}", PartnerLookup
        )
        for port in lookup.megaports:
            if port.vxc or port.port_speed < port_speed:
                continue
            if product_uid is None or port.product_uid == product_uid:
                return port
        raise NoResultsError(
            f"no available {partner} ports with at least {port_speed} Mbps for this key"
        )

    async def wait_for_vxc_provisioning(
        self,
        uid: str,
        *,
        timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WaitOutcome:
        return await self._wait(
            self._fetch(uid), is_provisioned, uid, timeout=timeout, cancel_event=cancel_event
        )

    async def wait_for_vxc_update(
        self,
        uid: str,
        *,
        name: str | None = None,
        rate_limit: int | None = None,
        a_end_vlan: int | None = None,
        b_end_vlan: int | None = None,
        timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WaitOutcome:
        """Wait until the given values are applied and the VXC is LIVE."""
        return await self._wait(
            self._fetch(uid),
            vxc_matches(name, rate_limit, a_end_vlan, b_end_vlan, require_live=True),
            uid,
            timeout=timeout,
            cancel_event=cancel_event,
        )


__all__ = ["VXCService"]
