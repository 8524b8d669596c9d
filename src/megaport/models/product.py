# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Product-generic request bodies."""

from __future__ import annotations

from .base import APIModel


class ModifyProductRequest(APIModel):
    """Body of ``PUT /v2/product/{type}/{uid}`` for ports and MCRs."""

    name: str | None = None
    cost_centre: str | None = None
    marketplace_visibility: bool | None = None


class MVEUpdate(APIModel):
    """Body of ``PUT /v2/product/mve/{uid}``."""

    name: str | None = None
    cost_centre: str | None = None
    contract_term_months: int | None = None


__all__ = ["MVEUpdate", "ModifyProductRequest"]
