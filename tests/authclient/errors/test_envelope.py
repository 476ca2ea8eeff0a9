"""
Tests for FailureEnvelope and its rendering.
"""

import dataclasses

import pytest

from authclient.errors.envelope import (
    NO_STATUS_CODE,
    FailureEnvelope,
    describe_cause,
    normalize_service_error_codes,
    render_envelope,
)
from authclient.types import FailureKind


class TestFailureEnvelope:
    def test_defaults(self):
        envelope = FailureEnvelope(error_code="invalid_grant", message="bad token")

        assert envelope.kind == FailureKind.SERVICE_ERROR
        assert envelope.status_code == NO_STATUS_CODE
        assert envelope.service_error_codes is None
        assert envelope.headers is None
        assert envelope.root_cause is None
        assert envelope.has_response is False

    def test_is_frozen(self):
        envelope = FailureEnvelope(error_code="invalid_grant", message="bad token")
        with pytest.raises(dataclasses.FrozenInstanceError):
            envelope.status_code = 500

    def test_service_codes_list_becomes_tuple(self):
        envelope = FailureEnvelope("invalid_grant", "x", service_error_codes=["b", "a"])
        assert envelope.service_error_codes == ("b", "a")

    def test_empty_service_codes_become_none(self):
        envelope = FailureEnvelope("invalid_grant", "x", service_error_codes=[])
        assert envelope.service_error_codes is None

    def test_replace_keeps_invariants(self):
        envelope = FailureEnvelope("invalid_grant", "x", service_error_codes=["a"])
        updated = dataclasses.replace(envelope, message="y")

        assert updated.message == "y"
        assert updated.service_error_codes == ("a",)


class TestNormalizeServiceErrorCodes:
    def test_none(self):
        assert normalize_service_error_codes(None) is None

    def test_empty(self):
        assert normalize_service_error_codes(()) is None

    def test_generator_keeps_order(self):
        codes = (f"AADSTS{n}" for n in (3, 1, 2))
        assert normalize_service_error_codes(codes) == ("AADSTS3", "AADSTS1", "AADSTS2")


class TestDescribeCause:
    def test_none(self):
        assert describe_cause(None) == "None"

    def test_with_text(self):
        assert describe_cause(ConnectionResetError("reset by peer")) == (
            "ConnectionResetError: reset by peer"
        )

    def test_without_text(self):
        assert describe_cause(TimeoutError()) == "TimeoutError"


class TestRenderEnvelope:
    def test_service_error(self):
        envelope = FailureEnvelope(
            error_code="service_unavailable",
            message="down",
            status_code=503,
            service_error_codes=("AADSTS50034", "AADSTS90002"),
            headers={"Retry-After": "30"},
            root_cause=ConnectionResetError("reset by peer"),
        )

        assert render_envelope(envelope) == (
            "ServiceException: service_unavailable: down\n"
            "\tErrorCode: service_unavailable\n"
            "\tServiceErrorCodes: AADSTS50034, AADSTS90002\n"
            "\tRootCause: ConnectionResetError: reset by peer\n"
            "\tStatusCode: 503"
        )

    def test_minimal(self):
        envelope = FailureEnvelope(error_code="invalid_grant", message="bad token")

        assert render_envelope(envelope) == (
            "ServiceException: invalid_grant: bad token\n"
            "\tErrorCode: invalid_grant\n"
            "\tStatusCode: 0"
        )

    def test_timeout_shows_408(self):
        envelope = FailureEnvelope(
            error_code="request_timeout",
            message="timed out",
            kind=FailureKind.TIMEOUT,
            status_code=408,
            root_cause=TimeoutError(),
        )

        lines = render_envelope(envelope).splitlines()

        assert "\tRootCause: TimeoutError" in lines
        assert lines[-1] == "\tStatusCode: 408"

    def test_headers_not_rendered(self):
        envelope = FailureEnvelope(
            error_code="service_unavailable",
            message="down",
            status_code=503,
            headers={"Set-Cookie": "secret"},
        )
        assert "secret" not in render_envelope(envelope)

    def test_custom_type_name(self):
        envelope = FailureEnvelope(error_code="invalid_grant", message="bad token")
        assert render_envelope(envelope, "TokenError").startswith("TokenError: invalid_grant")

    def test_deterministic(self):
        envelope = FailureEnvelope(
            error_code="service_unavailable",
            message="down",
            status_code=503,
            service_error_codes=("z", "a", "m"),
            headers={"b": "2", "a": "1"},
        )
        assert render_envelope(envelope) == render_envelope(envelope)
        assert "ServiceErrorCodes: z, a, m" in render_envelope(envelope)
