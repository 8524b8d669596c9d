# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Authentication for the Megaport API.

Requests carry ``Authorization: Bearer <token>``. Tokens come from a
``TokenProvider``:

- ``OAuthTokenProvider`` exchanges an API key pair for a token with the
  OAuth2 client-credentials grant and refreshes it before it expires.
- ``StaticTokenProvider`` hands out a token obtained elsewhere.

Tokens are immutable ``AccessToken`` values. A refresh replaces the cached
value as a whole, so concurrent readers see either the old or the new token,
never a mix.
"""

from __future__ import annotations

import asyncio
import base64
import logging
import time
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import httpx

from .exceptions import AuthenticationError, ConfigurationError, TransportError
from .observability.constants import TOKEN_REFRESHES_TOTAL
from .observability.protocols import MetricsCollectorProtocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credentials:
    """API key pair. The secret never appears in ``repr``."""

    access_key: str
    secret_key: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.access_key:
            raise ConfigurationError("access_key must not be empty")
        if not self.secret_key:
            raise ConfigurationError("secret_key must not be empty")

    def basic_auth_header(self) -> str:
        raw = f"{self.access_key}:{self.secret_key}".encode()
        return "Basic " + base64.b64encode(raw).decode()


@dataclass(frozen=True)
class AccessToken:
    """
    An issued bearer token.

    Attributes:
        value: The token itself.
        expires_at: Wall-clock expiry (``time.time()`` seconds), or None if
            the token does not expire.
        token_type: Usually "Bearer".
    """

    value: str = field(repr=False)
    expires_at: float | None = None
    token_type: str = "Bearer"

    def is_expired(self, leeway: float = 0.0, now: float | None = None) -> bool:
        if self.expires_at is None:
            return False
        current = time.time() if now is None else now
        return current >= self.expires_at - leeway


@runtime_checkable
class TokenProvider(Protocol):
    """Source of bearer tokens. Must be safe to call from concurrent tasks."""

    async def get_token(self) -> AccessToken:
        """Return a valid token, refreshing it if needed."""
        ...


class StaticTokenProvider:
    """Serves a pre-issued token unchanged."""

    def __init__(self, token: str, expires_at: float | None = None):
        if not token:
            raise ConfigurationError("token must not be empty")
        self._token = AccessToken(value=token, expires_at=expires_at)

    async def get_token(self) -> AccessToken:
        if self._token.is_expired():
            raise AuthenticationError("the supplied access token has expired")
        return self._token


class OAuthTokenProvider:
    """
    Client-credentials token exchange with caching.

    The first ``get_token()`` call performs the exchange; later calls return
    the cached token until it is within ``leeway`` seconds of expiry. An
    ``asyncio.Lock`` makes concurrent callers share a single refresh.

    Example:
        >>> provider = OAuthTokenProvider(
        ...     Credentials("key", "secret"),
        ...     Environment.STAGING.token_url,
        ...     http_client,
        ... )
        >>> token = await provider.get_token()
    """

    def __init__(
        self,
        credentials: Credentials,
        token_url: str,
        http_client: httpx.AsyncClient,
        leeway: float = 30.0,
        metrics: MetricsCollectorProtocol | None = None,
    ):
        self.credentials = credentials
        self.token_url = token_url
        self.leeway = leeway
        self._http = http_client
        self._metrics = metrics
        self._token: AccessToken | None = None
        self._lock = asyncio.Lock()

    @property
    def current_token(self) -> AccessToken | None:
        return self._token

    async def get_token(self) -> AccessToken:
        token = self._token
        if token is not None and not token.is_expired(self.leeway):
            return token
        async with self._lock:
            # Another task may have refreshed while this one waited.
            token = self._token
            if token is not None and not token.is_expired(self.leeway):
                return token
            try:
                token = await self._exchange()
            except (AuthenticationError, TransportError):
                self._record("failure")
                raise
            self._record("success")
            self._token = token
            return token

    def invalidate(self) -> None:
        """
        Drop the cached token so the next call performs a new exchange.

        ``MegaportClient`` calls this when the API answers 401.
        """
        self._token = None

    def _record(self, result: str) -> None:
        if self._metrics is not None:
            self._metrics.inc_counter(TOKEN_REFRESHES_TOTAL, labels={"result": result})

    async def _exchange(self) -> AccessToken:
        logger.debug(f"Requesting access token from {self.token_url}")
        try:
            response = await self._http.post(
                self.token_url,
                params={"grant_type": "client_credentials"},
                headers={
                    "Authorization": self.credentials.basic_auth_header(),
                    "Content-Type": "application/x-www-form-urlencoded",
                },
            )
        except httpx.HTTPError as e:
            raise TransportError(f"token request to {self.token_url} failed: {e}") from e

        if response.status_code != 200:
            raise AuthenticationError(
                f"token endpoint returned {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        try:
            payload = response.json()
        except ValueError as e:
            raise AuthenticationError(
                "token endpoint returned a non-JSON body",
                status_code=response.status_code,
            ) from e

        if payload.get("error"):
            raise AuthenticationError(
                f"token exchange failed: {payload['error']}",
                status_code=response.status_code,
            )
        value = payload.get("access_token")
        if not value:
            raise AuthenticationError(
                "token response has no access_token", status_code=response.status_code
            )

        expires_in = payload.get("expires_in")
        expires_at = time.time() + float(expires_in) if expires_in else None
        logger.debug(f"Obtained access token, expires in {expires_in}s")
        return AccessToken(
            value=value,
            expires_at=expires_at,
            token_type=payload.get("token_type") or "Bearer",
        )


__all__ = [
    "AccessToken",
    "Credentials",
    "OAuthTokenProvider",
    "StaticTokenProvider",
    "TokenProvider",
]
