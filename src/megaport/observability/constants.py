# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Metric name constants following Prometheus naming conventions.

This module provides standardized metric names for all observability in
the Megaport SDK. All metric names use the `megaport_` prefix.

Naming Conventions:
    - Counter metrics end with `_total`
    - Histogram metrics for time end with `_seconds`
    - Gauges use present-tense descriptive names

Labels:
    To prevent label cardinality explosion, use only:
    - `method` - HTTP method (GET, POST, PUT, DELETE)
    - `status_class` - HTTP status class (2xx, 4xx, 5xx, error)
    - `resource` - Watched resource kind (port, mcr, mve, vxc, ix, prefix_filter_list)
    - `outcome` - Wait outcome (satisfied, timed_out, canceled, fetch_failed, failed)

    NEVER use:
    - `product_uid` - Unique per product (unbounded!)
    - `path` - Contains product identifiers (unbounded!)

Usage:
    >>> from megaport.observability.constants import WAITS_TOTAL
    >>> print(WAITS_TOTAL)
    'megaport_waits_total'
"""


# =============================================================================
# Global Prefix
# =============================================================================

METRIC_PREFIX = "megaport"
"""Prefix for all Prometheus metrics in this library."""


# =============================================================================
# API Transport Metrics (client.py, auth.py)
# =============================================================================

API_REQUESTS_TOTAL = f"{METRIC_PREFIX}_api_requests_total"
"""Total API requests, by method and status class."""

API_REQUEST_DURATION_SECONDS = f"{METRIC_PREFIX}_api_request_duration_seconds"
"""Latency of API requests, by method."""

API_ERRORS_TOTAL = f"{METRIC_PREFIX}_api_errors_total"
"""Total failed API requests, by method and error type."""

TOKEN_REFRESHES_TOTAL = f"{METRIC_PREFIX}_token_refreshes_total"
"""Total OAuth token exchanges, by result (success, failure)."""


# =============================================================================
# Provisioning Wait Metrics (waiter.py)
# =============================================================================

WAITS_TOTAL = f"{METRIC_PREFIX}_waits_total"
"""Total completed waits, by resource and outcome."""

WAIT_DURATION_SECONDS = f"{METRIC_PREFIX}_wait_duration_seconds"
"""Wall-clock duration of waits, by resource and outcome."""

WAIT_POLLS_TOTAL = f"{METRIC_PREFIX}_wait_polls_total"
"""Total state fetches performed by waits."""

WAIT_FETCH_FAILURES_TOTAL = f"{METRIC_PREFIX}_wait_fetch_failures_total"
"""Total state fetches that raised during a wait."""

WAITS_IN_PROGRESS = f"{METRIC_PREFIX}_waits_in_progress"
"""Number of waits currently polling."""


# =============================================================================
# Histogram Buckets
# =============================================================================

LATENCY_BUCKETS = [0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0]
"""Buckets for API request latency (seconds)."""

WAIT_DURATION_BUCKETS = [1.0, 5.0, 15.0, 30.0, 60.0, 120.0, 300.0, 600.0, 900.0, 1800.0]
"""Buckets for provisioning wait durations (seconds). Waits run for minutes."""


__all__ = [
    "API_ERRORS_TOTAL",
    "API_REQUESTS_TOTAL",
    "API_REQUEST_DURATION_SECONDS",
    "LATENCY_BUCKETS",
    "METRIC_PREFIX",
    "TOKEN_REFRESHES_TOTAL",
    "WAITS_IN_PROGRESS",
    "WAITS_TOTAL",
    "WAIT_DURATION_BUCKETS",
    "WAIT_DURATION_SECONDS",
    "WAIT_FETCH_FAILURES_TOTAL",
    "WAIT_POLLS_TOTAL",
]
