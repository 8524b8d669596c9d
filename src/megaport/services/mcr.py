# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""MCR (Megaport Cloud Router) ordering, lifecycle and prefix filter lists."""

from __future__ import annotations

import asyncio
import logging

from ..exceptions import ValidationError
from ..models.base import ProductType
from ..models.mcr import (
    MCR,
    VALID_MCR_PORT_SPEEDS,
    MCROrder,
    MCROrderConfig,
    MCRPrefixFilterList,
    PrefixFilterList,
)
from ..predicates import has_prefix_filter_list, is_deleted, is_provisioned
from ..waiter import WaitOutcome
from .base import BaseService, OrderResult, validate_term

logger = logging.getLogger(__name__)

# 4-byte ASN range.
_MAX_ASN = 4_294_967_295


class MCRService(BaseService):
    resource = "mcr"

    async def buy_mcr(
        self,
        *,
        name: str,
        term: int,
        port_speed: int,
        location_id: int,
        mcr_asn: int | None = None,
        diversity_zone: str | None = None,
        cost_centre: str | None = None,
        promo_code: str | None = None,
        wait_for_provision: bool = False,
        wait_timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> OrderResult:
        """
        Order an MCR.

        ``port_speed`` must be one of 1000, 2500, 5000 or 10000 Mbps. When
        ``mcr_asn`` is omitted the API assigns the default private ASN.

        Raises:
            ValidationError: For an invalid term, speed or ASN.
        """
        validate_term(term)
        if port_speed not in VALID_MCR_PORT_SPEEDS:
            raise ValidationError(
                "port_speed",
                f"it must be one of {', '.join(str(s) for s in VALID_MCR_PORT_SPEEDS)} Mbps",
            )
        if mcr_asn is not None and not 1 <= mcr_asn <= _MAX_ASN:
            raise ValidationError("mcr_asn", f"it must be between 1 and {_MAX_ASN}")

        order = MCROrder(
            location_id=location_id,
            product_name=name,
            term=term,
            port_speed=port_speed,
            cost_centre=cost_centre,
            promo_code=promo_code,
            config=MCROrderConfig(mcr_asn=mcr_asn, diversity_zone=diversity_zone),
        )
        confirmations = await self._client.products.place_order([order])
        uids = [c.technical_service_uid for c in confirmations]
        logger.info(f"Ordered MCR {name!r}: {', '.join(uids)}")

        if not wait_for_provision:
            return OrderResult(uids)
        outcomes = await self._order_outcomes(
            uids, self._fetch, is_provisioned, timeout=wait_timeout, cancel_event=cancel_event
        )
        return OrderResult(uids, outcomes)

    async def get_mcr(self, uid: str) -> MCR:
        return await self._client.request_model("GET", f"/v2/product/{uid}", MCR)

    def _fetch(self, uid: str):
        return lambda: self.get_mcr(uid)

    async def modify_mcr(
        self,
        uid: str,
        *,
        name: str | None = None,
        cost_centre: str | None = None,
        marketplace_visibility: bool | None = None,
    ) -> bool:
        return await self._client.products.modify_product(
            ProductType.MCR2,
            uid,
            name=name,
            cost_centre=cost_centre,
            marketplace_visibility=marketplace_visibility,
        )

    async def delete_mcr(
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

    async def restore_mcr(self, uid: str) -> None:
        await self._client.products.restore_product(uid)

    async def wait_for_mcr_provisioning(
        self,
        uid: str,
        *,
        timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WaitOutcome:
        return await self._wait(
            self._fetch(uid), is_provisioned, uid, timeout=timeout, cancel_event=cancel_event
        )

    # Prefix filter lists

    async def create_prefix_filter_list(
        self, mcr_uid: str, prefix_list: MCRPrefixFilterList
    ) -> int | None:
        """
        Create a prefix filter list on an MCR.

        Returns the new list's id when the API reports one.
        """
        decoded = await self._client.request_json(
            "POST", f"/v2/product/mcr2/{mcr_uid}/prefixList", body=prefix_list
        )
        data = decoded.get("data") if isinstance(decoded, dict) else None
        if isinstance(data, dict) and data.get("id") is not None:
            return int(data["id"])
        return None

    async def list_prefix_filter_lists(self, mcr_uid: str) -> list[PrefixFilterList]:
        return await self._client.request_model(
            "GET", f"/v2/product/mcr2/{mcr_uid}/prefixLists", list[PrefixFilterList]
        )

    async def get_prefix_filter_list(self, mcr_uid: str, list_id: int) -> MCRPrefixFilterList:
        return await self._client.request_model(
            "GET", f"/v2/product/mcr2/{mcr_uid}/prefixList/{list_id}", MCRPrefixFilterList
        )

    async def modify_prefix_filter_list(
        self, mcr_uid: str, list_id: int, prefix_list: MCRPrefixFilterList
    ) -> None:
        await self._client.execute(
            "PUT", f"/v2/product/mcr2/{mcr_uid}/prefixList/{list_id}", body=prefix_list
        )

    async def delete_prefix_filter_list(self, mcr_uid: str, list_id: int) -> None:
        await self._client.execute("DELETE", f"/v2/product/mcr2/{mcr_uid}/prefixList/{list_id}")

    async def wait_for_prefix_filter_list(
        self,
        mcr_uid: str,
        description: str,
        *,
        timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WaitOutcome:
        """Wait until a prefix filter list named ``description`` shows up on the MCR."""
        return await self._wait(
            lambda: self.list_prefix_filter_lists(mcr_uid),
            has_prefix_filter_list(description),
            mcr_uid,
            timeout=timeout,
            cancel_event=cancel_event,
        )


__all__ = ["MCRService"]
