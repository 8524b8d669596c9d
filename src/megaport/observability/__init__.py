# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Observability and metrics for the Megaport SDK.

Classes:
    UnifiedMetricsCollector: Metrics collector backed by prometheus_client.
    MetricDefinition: Schema of a pre-defined metric.

Protocols:
    MetricsCollectorProtocol: Protocol for metrics collection backends.

Functions:
    get_metrics_collector: Get the global metrics collector singleton.
    reset_metrics_collector: Reset the global metrics collector singleton.

Constants:
    All metric name constants from the constants module.
"""

from .collector import (
    METRIC_DEFINITIONS,
    MetricDefinition,
    UnifiedMetricsCollector,
    get_metrics_collector,
    reset_metrics_collector,
)
from .constants import (
    API_ERRORS_TOTAL,
    API_REQUEST_DURATION_SECONDS,
    API_REQUESTS_TOTAL,
    LATENCY_BUCKETS,
    METRIC_PREFIX,
    TOKEN_REFRESHES_TOTAL,
    WAIT_DURATION_BUCKETS,
    WAIT_DURATION_SECONDS,
    WAIT_FETCH_FAILURES_TOTAL,
    WAIT_POLLS_TOTAL,
    WAITS_IN_PROGRESS,
    WAITS_TOTAL,
)
from .protocols import MetricsCollectorProtocol

__all__ = [
    "API_ERRORS_TOTAL",
    "API_REQUESTS_TOTAL",
    "API_REQUEST_DURATION_SECONDS",
    "LATENCY_BUCKETS",
    "METRIC_DEFINITIONS",
    "METRIC_PREFIX",
    "TOKEN_REFRESHES_TOTAL",
    "WAITS_IN_PROGRESS",
    "WAITS_TOTAL",
    "WAIT_DURATION_BUCKETS",
    "WAIT_DURATION_SECONDS",
    "WAIT_FETCH_FAILURES_TOTAL",
    "WAIT_POLLS_TOTAL",
    "MetricDefinition",
    "MetricsCollectorProtocol",
    "UnifiedMetricsCollector",
    "get_metrics_collector",
    "reset_metrics_collector",
]
