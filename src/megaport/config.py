# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client and Wait Configuration for the Megaport SDK

This module provides configuration classes for the API client and for the
provisioning-wait engine, including environment selection, HTTP settings,
polling cadence, and fetch-error handling.
"""

from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import urlparse


class Environment(Enum):
    """API environment the client talks to.

    Each environment has its own API host and its own OAuth token endpoint.

    - PRODUCTION: Live environment; orders placed here are billed.
    - STAGING: Mirror of production for integration testing. Orders are
      never provisioned on real hardware.
    - DEVELOPMENT: Internal development environment.
    """

    PRODUCTION = "https://api.megaport.com/"
    STAGING = "https://api-staging.megaport.com/"
    DEVELOPMENT = "https://api-mpone-dev.megaport.com/"

    @property
    def base_url(self) -> str:
        return self.value

    @property
    def token_url(self) -> str:
        """OAuth2 client-credentials endpoint for this environment."""
        return _TOKEN_URLS[self]


_TOKEN_URLS = {
    Environment.PRODUCTION: "https://auth-m2m.megaport.com/oauth2/token",
    Environment.STAGING: "https://auth-m2m-staging.megaport.com/oauth2/token",
    Environment.DEVELOPMENT: "https://auth-m2m-mpone-dev.megaport.com/oauth2/token",
}


class FetchErrorPolicy(Enum):
    """How the wait engine treats a failed state fetch.

    - SWALLOW: Log the error, treat the tick as "not yet satisfied" and keep
      polling until the deadline. A permanently broken fetch (wrong
      identifier, resource deleted out-of-band) spins until timeout.
    - FAIL_FAST: Stop with a FetchFailed outcome once
      ``max_consecutive_failures`` fetches in a row have failed.
    """

    SWALLOW = "swallow"
    FAIL_FAST = "fail_fast"


@dataclass
class WaitConfig:
    """
    Configuration for the provisioning-wait engine.

    Used as the default for every ``wait_for_*`` helper on the services;
    individual calls may override ``timeout`` and ``poll_interval``.
    """

    # === Polling Cadence ===

    poll_interval: float = 30.0
    """Seconds between state fetches. The engine never fetches more often."""

    timeout: float = 300.0
    """Maximum seconds to wait, measured from the start of the wait call."""

    # === Fetch Error Handling ===

    fetch_error_policy: FetchErrorPolicy = FetchErrorPolicy.SWALLOW
    """What to do when a fetch raises."""

    max_consecutive_failures: int = 3
    """Consecutive failed fetches tolerated under FAIL_FAST."""

    # === Cancellation ===

    check_on_cancel: bool = False
    """Perform one last fetch before reporting Canceled.

    Off by default so cancellation is not delayed by a network round trip.
    """

    # === Progress Reporting ===

    progress_log_every: int = 5
    """Emit a progress log line every N ticks. 0 disables progress logs."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.poll_interval <= 0:
            raise ValueError("poll_interval must be positive")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_consecutive_failures < 1:
            raise ValueError("max_consecutive_failures must be at least 1")
        if self.progress_log_every < 0:
            raise ValueError("progress_log_every must be non-negative")


@dataclass
class ClientConfig:
    """
    Configuration for the Megaport API client.

    Credentials are deliberately not part of this object; they are passed
    to the client as an immutable ``Credentials`` value or a token provider.
    """

    # === Endpoint Selection ===

    environment: Environment = Environment.STAGING
    """Target environment. Determines the API host and token endpoint."""

    base_url: str | None = None
    """Override for the API base URL (e.g. a local mock server)."""

    # === HTTP Settings ===

    request_timeout: float = 60.0
    """Per-request timeout in seconds."""

    user_agent: str | None = None
    """Prefix prepended to the SDK user agent."""

    custom_headers: dict[str, str] = field(default_factory=dict)
    """Extra headers sent with every API request."""

    # === Authentication ===

    token_expiry_leeway: float = 30.0
    """Refresh access tokens this many seconds before they expire."""

    # === Logging and Metrics ===

    log_response_body: bool = False
    """Include the base64-encoded response body in request debug logs."""

    metrics_enabled: bool = True
    """Record request and wait metrics in the metrics collector."""

    # === Waiting ===

    wait: WaitConfig = field(default_factory=WaitConfig)
    """Defaults for provisioning waits."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")
        if self.token_expiry_leeway < 0:
            raise ValueError("token_expiry_leeway must be non-negative")
        if self.base_url is not None:
            parsed = urlparse(self.base_url)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                raise ValueError("base_url must be an absolute http(s) URL")

    @property
    def resolved_base_url(self) -> str:
        """Base URL actually used for API requests."""
        return self.base_url or self.environment.base_url


__all__ = [
    "ClientConfig",
    "Environment",
    "FetchErrorPolicy",
    "WaitConfig",
]
