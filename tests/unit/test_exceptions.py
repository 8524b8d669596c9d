"""Unit tests for the exceptions module.

Tests all exception classes defined in megaport.exceptions.
"""

import pytest

from megaport.exceptions import (
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
    WaitFetchError,
    WaitTimeoutError,
)


class TestMegaportError:
    """Tests for the base MegaportError exception."""

    def test_can_be_caught_as_exception(self):
        """MegaportError can be caught as a standard Exception."""
        with pytest.raises(Exception):  # noqa: B017
            raise MegaportError("test error")

    def test_message_preserved(self):
        """MegaportError preserves its message."""
        assert str(MegaportError("test message")) == "test message"

    @pytest.mark.parametrize(
        "error_cls",
        [
            ConfigurationError,
            DecodeError,
            InvalidStateError,
            NoResultsError,
            TransportError,
            WaitCanceledError,
        ],
    )
    def test_subclasses_are_megaport_errors(self, error_cls):
        """Every SDK exception can be caught as MegaportError."""
        with pytest.raises(MegaportError):
            raise error_cls("boom")


class TestValidationError:
    """Tests for ValidationError."""

    def test_stores_argument_and_reason(self):
        """ValidationError records the rejected argument and the reason."""
        error = ValidationError("term", "it must be one of 1, 12, 24, 36")
        assert error.argument == "term"
        assert error.reason == "it must be one of 1, 12, 24, 36"
        assert str(error) == "term is invalid because it must be one of 1, 12, 24, 36"


class TestAuthenticationError:
    """Tests for AuthenticationError."""

    def test_status_code_defaults_to_none(self):
        """status_code is None when no response was received."""
        assert AuthenticationError("no token").status_code is None

    def test_stores_status_code(self):
        """status_code of the token endpoint is kept."""
        assert AuthenticationError("denied", status_code=401).status_code == 401


class TestAPIError:
    """Tests for APIError and NotFoundError."""

    def test_str_includes_request_and_trace(self):
        """The string form names method, URL, status and trace id."""
        error = APIError(
            "product not found",
            status_code=400,
            method="GET",
            url="https://api.test/v2/product/x",
            trace_id="abc-123",
        )
        assert str(error) == (
            "GET https://api.test/v2/product/x: 400 (trace 'abc-123') product not found"
        )

    def test_str_without_trace(self):
        """Without a trace id the trace part is omitted."""
        error = APIError("oops", status_code=500, method="POST", url="https://api.test/x")
        assert str(error) == "POST https://api.test/x: 500 oops"

    def test_not_found_is_api_error(self):
        """NotFoundError can be caught as APIError."""
        with pytest.raises(APIError) as exc_info:
            raise NotFoundError("gone", status_code=404)
        assert exc_info.value.status_code == 404

    def test_response_body_preserved(self):
        """The decoded response body is available to callers."""
        error = APIError("bad", status_code=400, response_body={"message": "bad"})
        assert error.response_body == {"message": "bad"}


class TestWaitErrors:
    """Tests for the Wait* exceptions raised by outcome unwrap()."""

    def test_wait_errors_share_base(self):
        """All wait errors can be caught as WaitError."""
        for error_cls in (WaitTimeoutError, WaitCanceledError, WaitFetchError):
            with pytest.raises(WaitError):
                raise error_cls("failed", resource="vxc")

    def test_timeout_stores_context(self):
        """WaitTimeoutError keeps resource, identifier, snapshot and elapsed."""
        error = WaitTimeoutError(
            "timed out", resource="port", identifier="p-1", last_snapshot="snap", elapsed=12.5
        )
        assert error.resource == "port"
        assert error.identifier == "p-1"
        assert error.last_snapshot == "snap"
        assert error.elapsed == 12.5

    def test_fetch_error_stores_failure_count(self):
        """WaitFetchError keeps the consecutive failure count."""
        error = WaitFetchError("failing", consecutive_failures=4)
        assert error.consecutive_failures == 4
        assert error.resource is None
