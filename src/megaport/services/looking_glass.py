# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
MCR looking glass: the routing table and BGP state of an MCR.

Large queries run as async jobs on the API side. ``*_async`` submits the
query and returns the job; ``wait_for_async_*`` polls the job through the
provisioning-wait engine until it completes, fails or times out:

    >>> job = await client.looking_glass.list_ip_routes_async(mcr_uid)
    >>> outcome = await client.looking_glass.wait_for_async_ip_routes(mcr_uid, job.job_id)
    >>> routes = outcome.unwrap().routes  # WaitFailedError if the job FAILED
"""

from __future__ import annotations

import asyncio
import logging

from ..models.looking_glass import (
    AsyncBGPNeighborRoutes,
    AsyncIPRoutes,
    AsyncJob,
    BGPNeighborRoute,
    BGPRoute,
    BGPSession,
    IPRoute,
    RouteDirection,
    RouteProtocol,
)
from ..predicates import is_job_complete, is_job_failed
from ..waiter import WaitOutcome
from .base import BaseService

logger = logging.getLogger(__name__)

# Diagnostic jobs finish faster than provisioning, so they are polled more often.
LOOKING_GLASS_POLL_INTERVAL = 5.0


def _base(mcr_uid: str) -> str:
    return f"/v2/product/mcr2/{mcr_uid}/lookingGlass"


def _ip_filter(ip_filter: str | None) -> dict[str, str]:
    return {"ip": ip_filter} if ip_filter else {}


class LookingGlassService(BaseService):
    resource = "looking_glass"

    async def list_ip_routes(
        self,
        mcr_uid: str,
        *,
        protocol: RouteProtocol | str | None = None,
        ip_filter: str | None = None,
    ) -> list[IPRoute]:
        """
        The MCR's IP routing table.

        Args:
            protocol: Only routes learned by this protocol.
            ip_filter: Only routes matching this address or prefix.
        """
        params = _ip_filter(ip_filter)
        if protocol:
            params["protocol"] = RouteProtocol(protocol).value
        return await self._client.request_model(
            "GET", f"{_base(mcr_uid)}/routes", list[IPRoute], params=params or None
        )

    async def list_bgp_routes(
        self, mcr_uid: str, *, ip_filter: str | None = None
    ) -> list[BGPRoute]:
        return await self._client.request_model(
            "GET",
            f"{_base(mcr_uid)}/bgp",
            list[BGPRoute],
            params=_ip_filter(ip_filter) or None,
        )

    async def list_bgp_sessions(self, mcr_uid: str) -> list[BGPSession]:
        return await self._client.request_model(
            "GET", f"{_base(mcr_uid)}/bgpSessions", list[BGPSession]
        )

    async def list_bgp_neighbor_routes(
        self,
        mcr_uid: str,
        session_id: str,
        direction: RouteDirection | str,
        *,
        ip_filter: str | None = None,
    ) -> list[BGPNeighborRoute]:
        """Routes advertised to, or received from, one BGP neighbor."""
        direction = RouteDirection(direction)
        return await self._client.request_model(
            "GET",
            f"{_base(mcr_uid)}/bgpSessions/{session_id}/{direction.value}",
            list[BGPNeighborRoute],
            params=_ip_filter(ip_filter) or None,
        )

    async def list_ip_routes_async(self, mcr_uid: str) -> AsyncJob:
        """Submit an IP route query; poll it with ``get_async_ip_routes``."""
        job = await self._client.request_model(
            "GET", f"{_base(mcr_uid)}/routes", AsyncJob, params={"async": "true"}
        )
        logger.debug(f"Submitted IP route query {job.job_id} for MCR {mcr_uid}")
        return job

    async def get_async_ip_routes(self, mcr_uid: str, job_id: str) -> AsyncIPRoutes:
        return await self._client.request_model(
            "GET", f"{_base(mcr_uid)}/routes/async/{job_id}", AsyncIPRoutes
        )

    async def list_bgp_neighbor_routes_async(
        self,
        mcr_uid: str,
        session_id: str,
        direction: RouteDirection | str,
        *,
        ip_filter: str | None = None,
    ) -> AsyncJob:
        direction = RouteDirection(direction)
        job = await self._client.request_model(
            "GET",
            f"{_base(mcr_uid)}/bgpSessions/{session_id}/{direction.value}",
            AsyncJob,
            params={"async": "true", **_ip_filter(ip_filter)},
        )
        logger.debug(
            f"Submitted {direction.value} route query {job.job_id} "
            f"for BGP session {session_id}"
        )
        return job

    async def get_async_bgp_neighbor_routes(
        self, mcr_uid: str, job_id: str
    ) -> AsyncBGPNeighborRoutes:
        return await self._client.request_model(
            "GET",
            f"{_base(mcr_uid)}/bgpSessions/async/{job_id}",
            AsyncBGPNeighborRoutes,
        )

    async def wait_for_async_ip_routes(
        self,
        mcr_uid: str,
        job_id: str,
        *,
        timeout: float | None = None,
        poll_interval: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WaitOutcome:
        """
        Poll an IP route job until it is COMPLETE.

        A FAILED job (or one with a status this SDK does not know) ends the
        wait at once with a Failed outcome.
        """
        return await self._wait(
            lambda: self.get_async_ip_routes(mcr_uid, job_id),
            is_job_complete,
            job_id,
            timeout=timeout,
            poll_interval=poll_interval or LOOKING_GLASS_POLL_INTERVAL,
            cancel_event=cancel_event,
            is_failed=is_job_failed,
        )

    async def wait_for_async_bgp_neighbor_routes(
        self,
        mcr_uid: str,
        job_id: str,
        *,
        timeout: float | None = None,
        poll_interval: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> WaitOutcome:
        """Poll a BGP neighbor route job until it is COMPLETE."""
        return await self._wait(
            lambda: self.get_async_bgp_neighbor_routes(mcr_uid, job_id),
            is_job_complete,
            job_id,
            timeout=timeout,
            poll_interval=poll_interval or LOOKING_GLASS_POLL_INTERVAL,
            cancel_event=cancel_event,
            is_failed=is_job_failed,
        )


__all__ = ["LOOKING_GLASS_POLL_INTERVAL", "LookingGlassService"]
