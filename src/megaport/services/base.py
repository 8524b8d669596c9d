# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Shared plumbing for the resource services."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TypeVar

from ..exceptions import ValidationError
from ..models.base import VALID_TERMS
from ..waiter import FetchFn, Predicate, WaitOutcome

if TYPE_CHECKING:
    from ..client import MegaportClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class OrderResult:
    """
    Result of a buy call.

    Attributes:
        uids: Technical service uids of the ordered products, in order.
        outcomes: One wait outcome per uid when the caller asked to wait
            for provisioning, otherwise empty.
    """

    uids: list[str]
    outcomes: list[WaitOutcome] = field(default_factory=list)

    @property
    def uid(self) -> str:
        """The first (usually only) ordered uid."""
        return self.uids[0]

    @property
    def ok(self) -> bool:
        return all(outcome.ok for outcome in self.outcomes)


def fuzzy_match(needle: str, haystack: str) -> bool:
    """
    True when the characters of ``needle`` appear in ``haystack`` in order.

    Case-sensitive; ``fuzzy_match("Syd", "Equinix Sydney SY1")`` holds.
    """
    remaining = iter(haystack)
    return all(char in remaining for char in needle)


def validate_term(term: int) -> None:
    """Raise ValidationError unless ``term`` is an accepted contract length."""
    if term not in VALID_TERMS:
        raise ValidationError(
            "term", f"it must be one of {', '.join(str(t) for t in VALID_TERMS)} months"
        )


def validate_cost_centre(cost_centre: str | None) -> None:
    if cost_centre is not None and len(cost_centre) > 255:
        raise ValidationError("cost_centre", "it must be at most 255 characters")


class BaseService:
    """A group of related API operations bound to one client."""

    resource: str = "product"

    def __init__(self, client: MegaportClient):
        self._client = client

    async def _wait(
        self,
        fetch: FetchFn[T],
        is_satisfied: Predicate[T],
        identifier: str,
        *,
        timeout: float | None = None,
        poll_interval: float | None = None,
        cancel_event: asyncio.Event | None = None,
        initial_snapshot: Any = None,
        is_failed: Predicate[T] | None = None,
    ) -> WaitOutcome:
        return await self._client.wait_until(
            fetch,
            is_satisfied,
            resource=self.resource,
            identifier=identifier,
            timeout=timeout,
            poll_interval=poll_interval,
            cancel_event=cancel_event,
            initial_snapshot=initial_snapshot,
            is_failed=is_failed,
        )

    async def _order_outcomes(
        self,
        uids: list[str],
        fetch_for: Callable[[str], FetchFn[Any]],
        is_satisfied: Predicate[Any],
        *,
        timeout: float | None = None,
        cancel_event: asyncio.Event | None = None,
    ) -> list[WaitOutcome]:
        """Wait for every ordered uid concurrently; outcomes keep the uid order."""
        logger.info(f"Waiting for {len(uids)} {self.resource}(s) to provision")
        return list(
            await asyncio.gather(
                *(
                    self._wait(
                        fetch_for(uid),
                        is_satisfied,
                        uid,
                        timeout=timeout,
                        cancel_event=cancel_event,
                    )
                    for uid in uids
                )
            )
        )


__all__ = [
    "BaseService",
    "OrderResult",
    "fuzzy_match",
    "validate_cost_centre",
    "validate_term",
]
