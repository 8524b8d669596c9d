# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Port ordering and lifecycle.

A port order returns one technical service uid per physical port (a LAG
order returns several). Pass ``wait_for_provision=True`` to block until all
of them are CONFIGURED or LIVE.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import InvalidStateError, ValidationError
from ..models.base import ProductType
from ..models.port import Port, PortOrder, PortOrderConfig
from ..predicates import is_deleted, is_provisioned
from ..waiter import WaitOutcome
from .base import BaseService, OrderResult, validate_term

logger = logging.getLogger(__name__)


class PortService(BaseService):
    resource = "port"

    async def buy_port(
        self,
        *,
        name: str,
        term: int,
        port_speed: int,
        location_id: int,
        market: str = "",
        lag_count: int = 0,
        is_private: bool = False,
        diversity_zone: str | None = None,
        cost_centre: str | None = None,
        promo_code: str | None = None,
        wait_for_provision: bool = False,
        wait_timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> OrderResult:
        """
        Order a single port, or a LAG when ``lag_count`` is positive.

        Args:
            name: Port name.
            term: Contract term in months (1, 12, 24 or 36).
            port_speed: Speed in Mbps.
            location_id: Location to deploy in.
            market: Billing market code.
            lag_count: Number of ports in the LAG; 0 orders a single port.
            is_private: Hide the port from the marketplace.
            wait_for_provision: Wait for every ordered port to provision.
            wait_timeout: Override for the configured wait timeout.
            cancel_event: Set to stop waiting early.

        Raises:
            ValidationError: If ``term`` or ``lag_count`` is not accepted.
        """
        validate_term(term)
        if lag_count < 0:
            raise ValidationError("lag_count", "it must not be negative")

        order = PortOrder(
            product_name=name,
            term=term,
            port_speed=port_speed,
            location_id=location_id,
            create_date=datetime.now(timezone.utc),
            market=market,
            lag_port_count=lag_count or None,
            marketplace_visibility=not is_private,
            cost_centre=cost_centre,
            promo_code=promo_code,
            config=PortOrderConfig(diversity_zone=diversity_zone),
        )
        confirmations = await self._client.products.place_order([order])
        uids = [c.technical_service_uid for c in confirmations]
        logger.info(f"Ordered port {name!r}: {', '.join(uids)}")

        if not wait_for_provision:
            return OrderResult(uids)
        outcomes = await self._order_outcomes(
            uids,
            self._fetch,
            is_provisioned,
            timeout=wait_timeout,
            cancel_event=cancel_event,
        )
        return OrderResult(uids, outcomes)

    async def buy_single_port(self, **kwargs) -> OrderResult:
        """``buy_port`` without LAG."""
        kwargs["lag_count"] = 0
        return await self.buy_port(**kwargs)

    async def buy_lag_port(self, *, lag_count: int, **kwargs) -> OrderResult:
        """``buy_port`` for a LAG of ``lag_count`` ports."""
        if lag_count < 1:
            raise ValidationError("lag_count", "a LAG needs at least one port")
        return await self.buy_port(lag_count=lag_count, **kwargs)

    async def list_ports(self) -> list[Port]:
        """
        All ports on the account.

        Entries of other product types are skipped, as are entries that do
        not decode as ports (logged at WARNING).
        """
        products = await self._client.request_json("GET", "/v2/products")
        ports: list[Port] = []
        for entry in (products or {}).get("data") or []:
            if str(entry.get("productType", "")).upper() != ProductType.MEGAPORT.value:
                continue
            try:
                ports.append(Port.model_validate(entry))
            except PydanticValidationError as e:
                logger.warning(f"Skipping undecodable port {entry.get('productUid')}: {e}")
        return ports

    async def get_port(self, uid: str) -> Port:
        return await self._client.request_model("GET", f"/v2/product/{uid}", Port)

    def _fetch(self, uid: str):
        return lambda: self.get_port(uid)

    async def modify_port(
        self,
        uid: str,
        *,
        name: str | None = None,
        cost_centre: str | None = None,
        marketplace_visibility: bool | None = None,
    ) -> bool:
        return await self._client.products.modify_product(
            ProductType.MEGAPORT,
            uid,
            name=name,
            cost_centre=cost_centre,
            marketplace_visibility=marketplace_visibility,
        )

    async def delete_port(
        self,
        uid: str,
        delete_now: bool = False,
        *,
        wait_for_delete: bool = False,
        wait_timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WaitOutcome | None:
        """
        Cancel a port. With ``wait_for_delete`` returns the deletion wait
        outcome, otherwise None.
        """
        await self._client.products.delete_product(uid, delete_now)
        if not wait_for_delete:
            return None
        return await self.wait_for_port_deletion(
            uid, delete_now, timeout=wait_timeout, cancel_event=cancel_event
        )

    async def restore_port(self, uid: str) -> None:
        await self._client.products.restore_product(uid)

    async def lock_port(self, uid: str) -> None:
        """
        Raises:
            InvalidStateError: If the port is already locked.
        """
        port = await self.get_port(uid)
        if port.locked:
            raise InvalidStateError(f"port {uid} is already locked")
        await self._client.products.manage_product_lock(uid, True)

    async def unlock_port(self, uid: str) -> None:
        """
        Raises:
            InvalidStateError: If the port is not locked.
        """
        port = await self.get_port(uid)
        if not port.locked:
            raise InvalidStateError(f"port {uid} is not locked")
        await self._client.products.manage_product_lock(uid, False)

    async def wait_for_port_provisioning(
        self,
        uid: str,
        *,
        timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WaitOutcome:
        return await self._wait(
            self._fetch(uid), is_provisioned, uid, timeout=timeout, cancel_event=cancel_event
        )

    async def wait_for_port_deletion(
        self,
        uid: str,
        delete_now: bool = False,
        *,
        timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WaitOutcome:
        """Wait for CANCELLED, or DECOMMISSIONED when ``delete_now`` was used."""
        return await self._wait(
            self._fetch(uid),
            is_deleted(delete_now),
            uid,
            timeout=timeout,
            cancel_event=cancel_event,
        )


__all__ = ["PortService"]
