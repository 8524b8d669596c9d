# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the Megaport SDK.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from MegaportError, making it easy to catch
all SDK-related exceptions with a single except clause.

Waiting never raises for expected outcomes (timeout, cancellation); the
Wait* exceptions below are only raised by ``WaitOutcome.unwrap()`` for
callers that prefer exceptions over tagged results.
"""

from typing import Any


class MegaportError(Exception):
    """Base exception for all Megaport SDK errors.

    This is the root exception class for the library. Catch this exception
    to handle any error originating from the SDK.

    Example:
        try:
            port = await client.ports.get_port(port_uid)
        except MegaportError as e:
            logger.error(f"Megaport error: {e}")
    """

    pass


class ConfigurationError(MegaportError):
    """Raised when client configuration is invalid or incomplete.

    Common causes include:
    - No credentials and no token provider supplied
    - An unknown environment for OAuth token exchange
    - A malformed base URL override
    """

    pass


class ValidationError(MegaportError):
    """Raised when a request argument is rejected before any HTTP call.

    Attributes:
        argument: Name of the offending argument.
        reason: Why the value was rejected.

    Example:
        try:
            await client.ports.buy_port(name="edge", term=7, ...)
        except ValidationError as e:
            print(e.argument)  # "term"
    """

    def __init__(self, argument: str, reason: str):
        super().__init__(f"{argument} is invalid because {reason}")
        self.argument = argument
        self.reason = reason


class AuthenticationError(MegaportError):
    """Raised when an access token cannot be obtained.

    Attributes:
        status_code: HTTP status of the token endpoint response, if any.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(MegaportError):
    """Raised when the HTTP request could not be completed at all.

    Wraps the underlying ``httpx.HTTPError`` (connection refused, DNS
    failure, read timeout). The original exception is chained as
    ``__cause__``.
    """

    pass


class APIError(MegaportError):
    """Raised when the API answers with a non-2xx status.

    Attributes:
        status_code: HTTP status code.
        method: HTTP method of the failed request.
        url: Full request URL.
        trace_id: Value of the API trace id, useful for support requests.
        response_body: Decoded JSON body if it was JSON, raw text otherwise.

    Example:
        try:
            await client.vxc.get_vxc("unknown-uid")
        except NotFoundError:
            ...
        except APIError as e:
            logger.error(f"API failed ({e.status_code}, trace {e.trace_id})")
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        method: str = "",
        url: str = "",
        trace_id: str | None = None,
        response_body: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.method = method
        self.url = url
        self.trace_id = trace_id
        self.response_body = response_body

    def __str__(self) -> str:
        if self.trace_id:
            return (
                f"{self.method} {self.url}: {self.status_code} "
                f"(trace {self.trace_id!r}) {self.message}"
            )
        return f"{self.method} {self.url}: {self.status_code} {self.message}"


class NotFoundError(APIError):
    """Raised when the API answers 404 Not Found."""

    pass


class DecodeError(MegaportError):
    """Raised when a response body does not match the expected shape.

    The underlying ``pydantic.ValidationError`` or JSON error is chained
    as ``__cause__``.
    """

    pass


class NoResultsError(MegaportError):
    """Raised when a lookup or filter finds nothing.

    Used by location lookups and partner port filtering, where an empty
    result is reported as an error rather than an empty list.
    """

    pass


class InvalidStateError(MegaportError):
    """Raised when a resource is not in a state that allows the operation.

    Examples: locking a port that is already locked, deleting a user who
    has already logged in.
    """

    pass


class WaitError(MegaportError):
    """Base class for errors raised by ``WaitOutcome.unwrap()``.

    Attributes:
        resource: Label of the resource being waited on (e.g. "vxc").
        identifier: Identifier of the watched resource, if known.
        last_snapshot: Last successfully fetched snapshot, or None.
    """

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        identifier: str | None = None,
        last_snapshot: Any = None,
    ):
        super().__init__(message)
        self.resource = resource
        self.identifier = identifier
        self.last_snapshot = last_snapshot


class WaitTimeoutError(WaitError):
    """Raised when the target condition was not reached before the timeout.

    Callers may retry with a longer timeout.

    Attributes:
        elapsed: Seconds spent waiting.
    """

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        identifier: str | None = None,
        last_snapshot: Any = None,
        elapsed: float | None = None,
    ):
        super().__init__(message, resource, identifier, last_snapshot)
        self.elapsed = elapsed


class WaitCanceledError(WaitError):
    """Raised when the wait was canceled by the caller.

    Unlike a timeout, a cancellation must not be retried.
    """

    pass


class WaitFailedError(WaitError):
    """Raised when the resource reached a terminal failure state.

    Waiting longer cannot help; the operation itself has to be retried.
    """

    pass


class WaitFetchError(WaitError):
    """Raised when fetching the resource failed too many times in a row.

    Only produced under ``FetchErrorPolicy.FAIL_FAST``. The last fetch error
    is chained as ``__cause__``.

    Attributes:
        consecutive_failures: Number of consecutive failed fetches.
    """

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        identifier: str | None = None,
        last_snapshot: Any = None,
        consecutive_failures: int = 0,
    ):
        super().__init__(message, resource, identifier, last_snapshot)
        self.consecutive_failures = consecutive_failures


__all__ = [
    "APIError",
    "AuthenticationError",
    "ConfigurationError",
    "DecodeError",
    "InvalidStateError",
    "MegaportError",
    "NoResultsError",
    "NotFoundError",
    "TransportError",
    "ValidationError",
    "WaitCanceledError",
    "WaitError",
    "WaitFailedError",
    "WaitFetchError",
    "WaitTimeoutError",
]
