# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Megaport API client.

``MegaportClient`` owns the HTTP connection pool, authentication, request
logging and metrics, and exposes one service object per resource family:

    >>> async with MegaportClient(credentials=Credentials("key", "secret")) as client:
    ...     ports = await client.ports.list_ports()
    ...     outcome = await client.ports.wait_for_port_provisioning(ports[0].uid)

The client is safe to share between concurrent tasks.
"""

from __future__ import annotations

import asyncio
import base64
import json
import logging
import time
from collections.abc import Mapping
from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from . import __version__
from .auth import AccessToken, Credentials, OAuthTokenProvider, TokenProvider
from .config import ClientConfig
from .exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    NotFoundError,
    TransportError,
)
from .observability.collector import get_metrics_collector
from .observability.constants import (
    API_ERRORS_TOTAL,
    API_REQUEST_DURATION_SECONDS,
    API_REQUESTS_TOTAL,
)
from .observability.protocols import MetricsCollectorProtocol
from .services import (
    BillingMarketService,
    IXService,
    LocationService,
    LookingGlassService,
    ManagedAccountService,
    MCRService,
    MVEService,
    PartnerService,
    PortService,
    ProductService,
    ServiceKeyService,
    UserService,
    VXCService,
)
from .waiter import FetchFn, Predicate, ProvisioningWaiter, WaitOutcome

logger = logging.getLogger(__name__)

T = TypeVar("T")

SDK_USER_AGENT = f"megaport-sdk-python/{__version__}"
TRACE_ID_HEADER = "Trace-Id"
MEDIA_TYPE = "application/json"

_adapters: dict[Any, TypeAdapter[Any]] = {}


def _adapter(tp: Any) -> TypeAdapter[Any]:
    adapter = _adapters.get(tp)
    if adapter is None:
        adapter = TypeAdapter(tp)
        _adapters[tp] = adapter
    return adapter


def _dump_body(body: Any) -> Any:
    if isinstance(body, (list, tuple)):
        return [_dump_body(item) for item in body]
    return _adapter(type(body)).dump_python(body, mode="json", by_alias=True, exclude_none=True)


def _status_class(status_code: int) -> str:
    return f"{status_code // 100}xx"


class MegaportClient:
    """
    Async client for the Megaport REST API.

    Args:
        config: Client configuration. Defaults to the staging environment.
        credentials: API key pair for the OAuth client-credentials flow.
        token_provider: Alternative to ``credentials``: any TokenProvider,
            e.g. a ``StaticTokenProvider`` for a token obtained elsewhere.
        http_client: Pre-built ``httpx.AsyncClient``. The client does not
            close an injected instance.
        metrics: Metrics sink. Defaults to the global collector when
            ``config.metrics_enabled`` is set.

    Raises:
        ConfigurationError: If neither credentials nor a token provider is given.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        credentials: Credentials | None = None,
        token_provider: TokenProvider | None = None,
        http_client: httpx.AsyncClient | None = None,
        metrics: MetricsCollectorProtocol | None = None,
    ):
        self.config = config or ClientConfig()
        self.base_url = self.config.resolved_base_url.rstrip("/")

        if metrics is None and self.config.metrics_enabled:
            metrics = get_metrics_collector()
        self.metrics = metrics if self.config.metrics_enabled else None

        if token_provider is None and credentials is None:
            raise ConfigurationError("either credentials or token_provider is required")

        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=self.config.request_timeout)

        if token_provider is not None:
            self.token_provider: TokenProvider = token_provider
        else:
            assert credentials is not None
            self.token_provider = OAuthTokenProvider(
                credentials,
                self.config.environment.token_url,
                self._http,
                leeway=self.config.token_expiry_leeway,
                metrics=self.metrics,
            )

        user_agent = SDK_USER_AGENT
        if self.config.user_agent:
            user_agent = f"{self.config.user_agent} {SDK_USER_AGENT}"
        self.user_agent = user_agent

        self.waiter = ProvisioningWaiter(self.config.wait, self.metrics)

        self.products = ProductService(self)
        self.ports = PortService(self)
        self.mcr = MCRService(self)
        self.mve = MVEService(self)
        self.vxc = VXCService(self)
        self.ix = IXService(self)
        self.locations = LocationService(self)
        self.partners = PartnerService(self)
        self.service_keys = ServiceKeyService(self)
        self.users = UserService(self)
        self.looking_glass = LookingGlassService(self)
        self.billing_markets = BillingMarketService(self)
        self.managed_accounts = ManagedAccountService(self)

    async def __aenter__(self) -> MegaportClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP connection pool if this client created it."""
        if self._owns_http:
            await self._http.aclose()

    async def authorize(self) -> AccessToken:
        """Obtain (or return the cached) access token."""
        return await self.token_provider.get_token()

    def _headers(self, token: AccessToken) -> dict[str, str]:
        headers = {
            "Accept": MEDIA_TYPE,
            "Content-Type": MEDIA_TYPE,
            "User-Agent": self.user_agent,
        }
        headers.update(self.config.custom_headers)
        headers["Authorization"] = f"Bearer {token.value}"
        return headers

    async def execute(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> bytes:
        """
        Perform one authenticated request and return the raw response body.

        ``body`` may be a pydantic model, a list of models, or plain JSON data.
        It is ignored for GET requests.

        A 401 also invalidates the cached token when the provider supports it.

        Raises:
            NotFoundError: On 404.
            APIError: On any other non-2xx status.
            TransportError: If the request could not be completed.
        """
        method = method.upper()
        url = f"{self.base_url}/{path.lstrip('/')}"
        token = await self.authorize()

        payload = _dump_body(body) if body is not None and method != "GET" else None

        start = time.perf_counter()
        try:
            response = await self._http.request(
                method,
                url,
                headers=self._headers(token),
                json=payload,
                params=dict(params) if params else None,
            )
        except httpx.HTTPError as e:
            self._record_error(method, type(e).__name__)
            raise TransportError(f"{method} {url} failed: {e}") from e
        duration = time.perf_counter() - start

        trace_id = response.headers.get(TRACE_ID_HEADER)
        content = response.content
        self._record_request(method, response.status_code, duration)

        message = (
            f"Completed API request: {method} {response.url.path} -> "
            f"{response.status_code} in {duration * 1000:.0f}ms (trace {trace_id})"
        )
        if self.config.log_response_body:
            message += f" body_base64={base64.b64encode(content).decode()}"
        logger.debug(message)

        if not response.is_success:
            self._record_error(method, f"http_{response.status_code}")
            if response.status_code == 401:
                self._drop_token()
            raise self._error_from_response(method, url, response, trace_id)
        return content

    def _drop_token(self) -> None:
        """Forget a rejected token so the next request obtains a fresh one."""
        invalidate = getattr(self.token_provider, "invalidate", None)
        if invalidate is not None:
            logger.info("API rejected the access token; it will be refreshed on the next request")
            invalidate()

    async def request_json(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Like ``execute`` but decodes the JSON body. Empty bodies decode to None."""
        content = await self.execute(method, path, body=body, params=params)
        if not content.strip():
            return None
        try:
            return json.loads(content)
        except ValueError as e:
            raise DecodeError(f"{method} {path} returned invalid JSON") from e

    async def request_model(
        self,
        method: str,
        path: str,
        model: type[T] | Any,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        *,
        enveloped: bool = True,
    ) -> T:
        """
        Perform a request and validate the envelope's ``data`` as ``model``.

        ``model`` may be any type pydantic can validate, e.g. ``list[Port]``.
        With ``enveloped=False`` the whole body is validated instead, for the
        few endpoints that answer without an envelope.

        Raises:
            DecodeError: If the body has no ``data`` or it does not fit ``model``.
        """
        decoded = await self.request_json(method, path, body=body, params=params)
        if enveloped:
            if not isinstance(decoded, dict) or "data" not in decoded:
                raise DecodeError(f"{method} {path} returned no data envelope")
            decoded = decoded["data"]
        try:
            return _adapter(model).validate_python(decoded)  # type: ignore[no-any-return]
        except PydanticValidationError as e:
            raise DecodeError(f"{method} {path} returned unexpected data: {e}") from e

    async def wait_until(
        self,
        fetch: FetchFn[T],
        is_satisfied: Predicate[T],
        *,
        resource: str,
        identifier: str | None = None,
        timeout: float | None = None,
        poll_interval: float | None = None,
        cancel_event: asyncio.Event | None = None,
        initial_snapshot: T | None = None,
        is_failed: Predicate[T] | None = None,
    ) -> WaitOutcome:
        """
        Wait for ``is_satisfied`` using this client's WaitConfig and metrics.

        ``timeout`` and ``poll_interval`` default to ``config.wait``.
        """
        spec = self.waiter.spec(
            fetch,
            is_satisfied,
            resource=resource,
            identifier=identifier,
            poll_interval=poll_interval,
            timeout=timeout,
            is_failed=is_failed,
        )
        return await self.waiter.wait(
            spec, cancel_event=cancel_event, initial_snapshot=initial_snapshot
        )

    def _record_request(self, method: str, status_code: int, duration: float) -> None:
        if self.metrics is None:
            return
        self.metrics.inc_counter(
            API_REQUESTS_TOTAL,
            labels={"method": method, "status_class": _status_class(status_code)},
        )
        self.metrics.observe_histogram(
            API_REQUEST_DURATION_SECONDS, duration, labels={"method": method}
        )

    def _record_error(self, method: str, error_type: str) -> None:
        if self.metrics is None:
            return
        self.metrics.inc_counter(
            API_ERRORS_TOTAL, labels={"method": method, "error_type": error_type}
        )

    @staticmethod
    def _error_from_response(
        method: str,
        url: str,
        response: httpx.Response,
        trace_id: str | None,
    ) -> APIError:
        text = response.text
        message = text or f"HTTP {response.status_code}"
        body: Any
        try:
            body = response.json()
        except ValueError:
            body = text
        if isinstance(body, dict):
            message = str(body.get("message") or message)
            if body.get("data") and isinstance(body["data"], str):
                message = f"{message}: {body['data']}"
            trace_id = body.get("trace_id") or body.get("traceId") or trace_id

        error_cls = NotFoundError if response.status_code == 404 else APIError
        return error_cls(
            message,
            status_code=response.status_code,
            method=method,
            url=url,
            trace_id=trace_id,
            response_body=body,
        )


__all__ = ["MegaportClient", "SDK_USER_AGENT"]
