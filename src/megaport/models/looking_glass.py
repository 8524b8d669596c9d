# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""MCR looking glass models: routing table, BGP sessions and async query jobs."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from .base import APIModel, EpochMillis


class RouteProtocol(str, Enum):
    BGP = "BGP"
    STATIC = "STATIC"
    CONNECTED = "CONNECTED"
    LOCAL = "LOCAL"


class BGPSessionStatus(str, Enum):
    UP = "UP"
    DOWN = "DOWN"
    UNKNOWN = "UNKNOWN"


class RouteDirection(str, Enum):
    """Which side of a BGP session a neighbor route listing covers."""

    ADVERTISED = "advertised"
    RECEIVED = "received"


class AsyncJobStatus(str, Enum):
    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    COMPLETE = "COMPLETE"
    FAILED = "FAILED"


class IPRoute(APIModel):
    """Entry of the MCR routing table (BGP, static, connected or local)."""

    prefix: str = ""
    next_hop: str = ""
    protocol: str = ""
    metric: int | None = None
    local_pref: int | None = None
    as_path: list[int] = Field(default_factory=list)
    age: int | None = None
    interface: str = ""
    vxc_id: int | None = None
    vxc_name: str = ""
    communities: list[str] = Field(default_factory=list)
    origin: str = ""
    med: int | None = None
    best: bool | None = None


class BGPRoute(APIModel):
    prefix: str = ""
    next_hop: str = ""
    as_path: list[int] = Field(default_factory=list)
    local_pref: int | None = None
    med: int | None = None
    origin: str = ""
    communities: list[str] = Field(default_factory=list)
    weight: int | None = None
    valid: bool = False
    best: bool = False
    neighbor_ip: str = ""
    neighbor_asn: int | None = None
    age: int | None = None
    vxc_id: int | None = None
    vxc_name: str = ""


class BGPSession(APIModel):
    session_id: str = ""
    neighbor_address: str = ""
    neighbor_asn: int = 0
    local_asn: int = 0
    status: str = BGPSessionStatus.UNKNOWN.value
    uptime: int | None = None
    prefixes_in: int | None = None
    prefixes_out: int | None = None
    vxc_id: int = 0
    vxc_name: str = ""
    last_state_change: int | None = None
    description: str = ""


class BGPNeighborRoute(APIModel):
    prefix: str = ""
    next_hop: str = ""
    as_path: list[int] = Field(default_factory=list)
    local_pref: int | None = None
    med: int | None = None
    origin: str = ""
    communities: list[str] = Field(default_factory=list)
    valid: bool = False
    best: bool = False


class AsyncJob(APIModel):
    """
    A submitted looking glass query.

    ``status`` is kept as a plain string so statuses added by the API later
    still decode; compare against ``AsyncJobStatus`` values.
    """

    job_id: str = ""
    status: str = ""
    created_at: EpochMillis | None = None
    updated_at: EpochMillis | None = None
    expires_at: EpochMillis | None = None


class AsyncIPRoutes(APIModel):
    """Poll result of an async IP route query; ``routes`` is set once COMPLETE."""

    job_id: str = ""
    status: str = ""
    routes: list[IPRoute] = Field(default_factory=list)


class AsyncBGPNeighborRoutes(APIModel):
    job_id: str = ""
    status: str = ""
    routes: list[BGPNeighborRoute] = Field(default_factory=list)


__all__ = [
    "AsyncBGPNeighborRoutes",
    "AsyncIPRoutes",
    "AsyncJob",
    "AsyncJobStatus",
    "BGPNeighborRoute",
    "BGPRoute",
    "BGPSession",
    "BGPSessionStatus",
    "IPRoute",
    "RouteDirection",
    "RouteProtocol",
]
