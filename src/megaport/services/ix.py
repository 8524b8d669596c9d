# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Internet Exchange (IX) connections."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from ..models.ix import IX, IXOrder, IXOrderConfiguration, IXUpdate
from ..predicates import is_deleted, is_provisioned
from ..waiter import WaitOutcome
from .base import BaseService, OrderResult, validate_cost_centre

logger = logging.getLogger(__name__)


def _ix_order(product_uid: str, configuration: IXOrderConfiguration) -> list[IXOrder]:
    return [IXOrder(product_uid=product_uid, associated_ixs=[configuration])]


class IXService(BaseService):
    resource = "ix"

    async def validate_ix_order(
        self, product_uid: str, configuration: IXOrderConfiguration
    ) -> Any:
        """Dry-run an IX order; returns the API's pricing data."""
        return await self._client.products.validate_order(_ix_order(product_uid, configuration))

    async def buy_ix(
        self,
        product_uid: str,
        configuration: IXOrderConfiguration,
        *,
        wait_for_provision: bool = False,
        wait_timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> OrderResult:
        """
        Connect the port ``product_uid`` to an Internet Exchange.

        The order is validated with the API before it is placed.
        """
        await self.validate_ix_order(product_uid, configuration)
        confirmations = await self._client.products.place_order(
            _ix_order(product_uid, configuration)
        )
        uids = [c.technical_service_uid for c in confirmations]
        logger.info(f"Ordered IX {configuration.product_name!r}: {', '.join(uids)}")

        if not wait_for_provision:
            return OrderResult(uids)
        outcomes = await self._order_outcomes(
            uids, self._fetch, is_provisioned, timeout=wait_timeout, cancel_event=cancel_event
        )
        return OrderResult(uids, outcomes)

    async def get_ix(self, uid: str) -> IX:
        return await self._client.request_model("GET", f"/v2/product/{uid}", IX)

    def _fetch(self, uid: str):
        return lambda: self.get_ix(uid)

    async def update_ix(
        self,
        uid: str,
        update: IXUpdate,
        *,
        wait_for_update: bool = False,
        wait_timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> IX | WaitOutcome:
        """
        Change an IX connection. Fields of ``update`` left as None are unchanged.

        With ``wait_for_update`` returns the outcome of waiting for the IX to
        be CONFIGURED or LIVE again, otherwise the IX reported by the API.
        """
        validate_cost_centre(update.cost_centre)
        updated = await self._client.request_model(
            "PUT", f"/v2/product/ix/{uid}", IX, body=update
        )
        if not wait_for_update:
            return updated
        return await self.wait_for_ix_provisioning(
            uid, timeout=wait_timeout, cancel_event=cancel_event
        )

    async def delete_ix(
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

    async def wait_for_ix_provisioning(
        self,
        uid: str,
        *,
        timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WaitOutcome:
        return await self._wait(
            self._fetch(uid), is_provisioned, uid, timeout=timeout, cancel_event=cancel_event
        )


__all__ = ["IXService"]
