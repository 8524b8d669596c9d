# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Target-state predicates for the provisioning-wait engine.

Every predicate is a plain synchronous callable over a snapshot. Predicates
read attributes with ``getattr`` and return False for snapshots that are
missing them, so a partially initialised response never raises.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from .models.base import ProvisioningStatus

Predicate = Callable[[Any], bool]


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def status_of(snapshot: Any) -> str | None:
    """The snapshot's provisioning status as a plain string, or None."""
    status = _plain(getattr(snapshot, "provisioning_status", None))
    return status or None


def status_in(*statuses: str | ProvisioningStatus) -> Predicate:
    """Predicate holding when the snapshot's status is one of ``statuses``."""
    if not statuses:
        raise ValueError("at least one status is required")
    wanted = frozenset(_plain(s) for s in statuses)

    def predicate(snapshot: Any) -> bool:
        return status_of(snapshot) in wanted

    predicate.__name__ = f"status_in({', '.join(sorted(wanted))})"
    return predicate


is_provisioned = status_in(ProvisioningStatus.CONFIGURED, ProvisioningStatus.LIVE)
"""Provisioning complete: CONFIGURED or LIVE."""

is_live = status_in(ProvisioningStatus.LIVE)

is_cancelled = status_in(ProvisioningStatus.CANCELLED)
"""Soft delete complete: the product is scheduled for termination."""

is_decommissioned = status_in(ProvisioningStatus.DECOMMISSIONED)
"""Hard delete complete."""


def is_deleted(delete_now: bool) -> Predicate:
    """Deletion predicate matching how the delete was requested."""
    return is_decommissioned if delete_now else is_cancelled


def _end_vlan(snapshot: Any, end: str) -> Any:
    return getattr(getattr(snapshot, end, None), "vlan", None)


def vxc_matches(
    name: str | None = None,
    rate_limit: int | None = None,
    a_end_vlan: int | None = None,
    b_end_vlan: int | None = None,
    *,
    require_live: bool = False,
) -> Predicate:
    """
    Predicate for "the VXC modification has been applied".

    Each argument left as None is not checked. Given values, ``0`` included,
    must equal the snapshot's value.

    Args:
        name: Expected ``product_name``.
        rate_limit: Expected ``rate_limit`` in Mbps.
        a_end_vlan: Expected ``a_end.vlan``.
        b_end_vlan: Expected ``b_end.vlan``.
        require_live: Also require the VXC to be LIVE again.

    Example:
        >>> check = vxc_matches(name="edge", b_end_vlan=7)
        >>> check(vxc)  # a_end VLAN and rate limit ignored
        True
    """

    def predicate(snapshot: Any) -> bool:
        if snapshot is None:
            return False
        if name is not None and getattr(snapshot, "product_name", None) != name:
            return False
        if rate_limit is not None and getattr(snapshot, "rate_limit", None) != rate_limit:
            return False
        if a_end_vlan is not None and _end_vlan(snapshot, "a_end") != a_end_vlan:
            return False
        if b_end_vlan is not None and _end_vlan(snapshot, "b_end") != b_end_vlan:
            return False
        if require_live and status_of(snapshot) != ProvisioningStatus.LIVE.value:
            return False
        return True

    return predicate


def name_is_live(name: str) -> Predicate:
    """Renamed product is back to LIVE under ``name``."""

    def predicate(snapshot: Any) -> bool:
        return (
            getattr(snapshot, "product_name", None) == name
            and status_of(snapshot) == ProvisioningStatus.LIVE.value
        )

    return predicate


JOB_PENDING_STATES = frozenset({"PENDING", "PROCESSING"})
JOB_COMPLETE = "COMPLETE"


def _job_status(snapshot: Any) -> str | None:
    return _plain(getattr(snapshot, "status", None)) or None


def is_job_complete(snapshot: Any) -> bool:
    """Async job (e.g. a looking glass query) has its results ready."""
    return _job_status(snapshot) == JOB_COMPLETE


def is_job_failed(snapshot: Any) -> bool:
    """
    Async job ended without results: FAILED, or a status this SDK does not
    know. A snapshot without a status is not failed.
    """
    status = _job_status(snapshot)
    return status is not None and status != JOB_COMPLETE and status not in JOB_PENDING_STATES


def has_prefix_filter_list(description: str) -> Predicate:
    """Predicate over a list of prefix filter lists: one has ``description``."""

    def predicate(snapshot: Any) -> bool:
        try:
            entries = list(snapshot or ())
        except TypeError:
            return False
        return any(getattr(e, "description", None) == description for e in entries)

    return predicate


__all__ = [
    "Predicate",
    "has_prefix_filter_list",
    "is_cancelled",
    "is_decommissioned",
    "is_deleted",
    "is_job_complete",
    "is_job_failed",
    "is_live",
    "is_provisioned",
    "name_is_live",
    "status_in",
    "status_of",
    "vxc_matches",
]
