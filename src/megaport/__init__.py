# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Megaport SDK - Async Python client for the Megaport REST API.

This library orders and manages Megaport network products (ports, MCRs,
MVEs, VXCs and IX connections) and waits for them to converge on the state
an operation asked for.

Key Features:
    - Async client built on httpx with OAuth2 token caching and refresh
    - Typed request and response models (pydantic v2), including tagged
      unions for cloud partner and MVE vendor configurations
    - A provisioning-wait engine returning tagged outcomes (Satisfied,
      TimedOut, Canceled, FetchFailed, Failed) instead of raising
    - Prometheus metrics for API requests, token refreshes and waits

Quick Start:
    >>> from megaport import ClientConfig, Credentials, Environment, MegaportClient
    >>>
    >>> config = ClientConfig(environment=Environment.STAGING)
    >>> async with MegaportClient(config, credentials=Credentials(key, secret)) as client:
    ...     order = await client.ports.buy_port(
    ...         name="edge-1",
    ...         term=12,
    ...         port_speed=10000,
    ...         location_id=67,
    ...         wait_for_provision=True,
    ...     )
    ...     if not order.ok:
    ...         order.outcomes[0].unwrap()  # raises WaitTimeoutError etc.

Main Exports:
    - MegaportClient: Entry point; services hang off it as attributes
    - ClientConfig, WaitConfig, Environment: Configuration
    - Credentials, OAuthTokenProvider, StaticTokenProvider: Authentication
    - ProvisioningWaiter, WaitSpec, wait_for: The wait engine
    - Satisfied, TimedOut, Canceled, FetchFailed, Failed: Wait outcomes
    - Predicates such as is_provisioned and vxc_matches

Version: 1.0.0
"""

__version__ = "1.0.0"

from .auth import (
    AccessToken,
    Credentials,
    OAuthTokenProvider,
    StaticTokenProvider,
    TokenProvider,
)
from .client import SDK_USER_AGENT, MegaportClient
from .config import ClientConfig, Environment, FetchErrorPolicy, WaitConfig
from .exceptions import (
    APIError,
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    InvalidStateError,
    MegaportError,
    NoResultsError,
    NotFoundError,
    TransportError,
    ValidationError,
    WaitCanceledError,
    WaitError,
    WaitFailedError,
    WaitFetchError,
    WaitTimeoutError,
)
from .predicates import (
    has_prefix_filter_list,
    is_cancelled,
    is_decommissioned,
    is_deleted,
    is_job_complete,
    is_job_failed,
    is_live,
    is_provisioned,
    name_is_live,
    status_in,
    vxc_matches,
)
from .services import OrderResult
from .waiter import (
    Canceled,
    Failed,
    FetchFailed,
    OutcomeKind,
    ProvisioningWaiter,
    Satisfied,
    TimedOut,
    WaitOutcome,
    WaitSpec,
    wait_for,
)

__all__ = [
    "SDK_USER_AGENT",
    # Exceptions
    "APIError",
    "AccessToken",
    "AuthenticationError",
    "Canceled",
    # Configuration
    "ClientConfig",
    "ConfigurationError",
    # Authentication
    "Credentials",
    "DecodeError",
    "Environment",
    "Failed",
    "FetchErrorPolicy",
    "FetchFailed",
    "InvalidStateError",
    # Client
    "MegaportClient",
    "MegaportError",
    "NoResultsError",
    "NotFoundError",
    "OAuthTokenProvider",
    "OrderResult",
    "OutcomeKind",
    # Waiting
    "ProvisioningWaiter",
    "Satisfied",
    "StaticTokenProvider",
    "TimedOut",
    "TokenProvider",
    "TransportError",
    "ValidationError",
    "WaitCanceledError",
    "WaitConfig",
    "WaitError",
    "WaitFailedError",
    "WaitFetchError",
    "WaitOutcome",
    "WaitSpec",
    "WaitTimeoutError",
    # Predicates
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
    "vxc_matches",
    "wait_for",
]
