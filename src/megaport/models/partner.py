# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Partner (cloud provider) port models."""

from __future__ import annotations

from pydantic import Field

from .base import APIModel


class PartnerMegaport(APIModel):
    """Entry of ``GET /v2/dropdowns/partner/megaports``."""

    connect_type: str = ""
    product_uid: str = ""
    product_name: str = Field("", alias="title")
    company_uid: str = ""
    company_name: str = ""
    diversity_zone: str = ""
    location_id: int = 0
    speed: int = 0
    rank: int = 0
    vxc_permitted: bool = False


__all__ = ["PartnerMegaport"]
