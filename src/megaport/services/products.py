# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Product-generic operations.

Ordering, renaming, deletion, restore and locking work the same way for
every product type; the typed services (ports, MCR, MVE, VXC, IX) build on
these.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import DecodeError, ValidationError
from ..models.base import Envelope, OrderConfirmation, ProductSummary, ProductType
from ..models.product import ModifyProductRequest
from .base import BaseService

logger = logging.getLogger(__name__)

C = TypeVar("C")

_MODIFIABLE_TYPES = (ProductType.MEGAPORT, ProductType.MCR2)


class ProductService(BaseService):
    """Operations on ``/v2/product`` and ``/v3/networkdesign``."""

    async def execute_order(self, body: Any) -> bytes:
        """
        Submit an order to ``POST /v3/networkdesign/buy``.

        Returns the raw response body; the shape of ``data`` depends on the
        product type ordered.
        """
        logger.debug("Executing product order")
        return await self._client.execute("POST", "/v3/networkdesign/buy", body=body)

    async def place_order(
        self,
        body: Any,
        confirmation: type[C] = OrderConfirmation,  # type: ignore[assignment]
    ) -> list[C]:
        """Submit an order and decode the confirmations in its ``data`` list."""
        raw = await self.execute_order(body)
        try:
            envelope = TypeAdapter(Envelope[list[confirmation]]).validate_json(raw)  # type: ignore[valid-type]
        except PydanticValidationError as e:
            raise DecodeError(f"unexpected order response: {e}") from e
        if not envelope.data:
            raise DecodeError("order response contained no confirmations")
        return envelope.data

    async def validate_order(self, body: Any) -> Any:
        """Dry-run an order with ``POST /v3/networkdesign/validate``; returns pricing data."""
        decoded = await self._client.request_json(
            "POST", "/v3/networkdesign/validate", body=body
        )
        return decoded.get("data") if isinstance(decoded, dict) else decoded

    async def modify_product(
        self,
        product_type: ProductType | str,
        uid: str,
        *,
        name: str | None = None,
        cost_centre: str | None = None,
        marketplace_visibility: bool | None = None,
    ) -> bool:
        """
        Rename a port or MCR, change its cost centre or marketplace visibility.

        Raises:
            ValidationError: For product types other than MEGAPORT and MCR2.
        """
        try:
            ptype = ProductType(str(getattr(product_type, "value", product_type)).upper())
        except ValueError:
            ptype = None
        if ptype is None or ptype not in _MODIFIABLE_TYPES:
            raise ValidationError(
                "product_type", "only MEGAPORT and MCR2 products can be modified this way"
            )
        body = ModifyProductRequest(
            name=name,
            cost_centre=cost_centre,
            marketplace_visibility=marketplace_visibility,
        )
        await self._client.execute("PUT", f"/v2/product/{ptype.path_segment}/{uid}", body=body)
        return True

    async def delete_product(self, uid: str, delete_now: bool = False) -> None:
        """
        Cancel a product.

        ``delete_now=False`` schedules termination at the end of the billing
        period (status becomes CANCELLED); ``True`` terminates immediately
        (DECOMMISSIONED).
        """
        action = "CANCEL_NOW" if delete_now else "CANCEL"
        logger.info(f"Deleting product {uid} ({action})")
        await self._client.execute("POST", f"/v3/product/{uid}/action/{action}")

    async def restore_product(self, uid: str) -> None:
        """Undo a scheduled (not immediate) cancellation."""
        await self._client.execute("POST", f"/v3/product/{uid}/action/UN_CANCEL")

    async def manage_product_lock(self, uid: str, lock: bool) -> None:
        method = "POST" if lock else "DELETE"
        await self._client.execute(method, f"/v2/product/{uid}/lock")

    async def list_products(self) -> list[ProductSummary]:
        return await self._client.request_model("GET", "/v2/products", list[ProductSummary])


__all__ = ["ProductService"]
