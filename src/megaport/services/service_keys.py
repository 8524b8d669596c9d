# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Service keys: let another company connect VXCs to one of your ports."""

from __future__ import annotations

from ..models.service_key import (
    CreatedServiceKey,
    CreateServiceKeyRequest,
    ServiceKey,
    UpdateServiceKeyRequest,
)
from .base import BaseService


class ServiceKeyService(BaseService):
    resource = "service_key"

    async def create_service_key(self, request: CreateServiceKeyRequest) -> str:
        """Create a key and return it."""
        created = await self._client.request_model(
            "POST", "/v2/service/key", CreatedServiceKey, body=request
        )
        return created.key

    async def list_service_keys(self, product_uid: str | None = None) -> list[ServiceKey]:
        """All keys on the account, or only those of ``product_uid``."""
        params = {"productIdOrUid": product_uid} if product_uid else None
        return await self._client.request_model(
            "GET", "/v2/service/key", list[ServiceKey], params=params
        )

    async def get_service_key(self, key: str) -> ServiceKey:
        return await self._client.request_model(
            "GET", "/v2/service/key", ServiceKey, params={"key": key}
        )

    async def update_service_key(self, request: UpdateServiceKeyRequest) -> None:
        """Update a key; ``valid_for`` is sent as epoch milliseconds."""
        await self._client.execute("PUT", "/v2/service/key", body=request)


__all__ = ["ServiceKeyService"]
