"""Parsing of OAuth2 token endpoint error bodies."""

import json
from dataclasses import dataclass
from typing import Any

from authclient.errors.exceptions import ServiceException
from authclient.errors.messages import SERVICE_RETURNED_ERROR
from authclient.transport.exceptions import HttpRequestWrapperError


@dataclass(frozen=True)
class TokenErrorResponse:
    """
    Error body returned by an OAuth2 token endpoint.

    Attributes:
        error: Protocol error code (e.g. "invalid_grant")
        error_description: Service explanation of the error
        error_codes: Service-specific sub-codes, in the order received
        correlation_id: Request correlation id reported by the service
        trace_id: Service-side trace id
    """

    error: str | None = None
    error_description: str | None = None
    error_codes: tuple[str, ...] = ()
    correlation_id: str | None = None
    trace_id: str | None = None

    @classmethod
    def from_body(cls, body: dict[str, Any] | str | None) -> "TokenErrorResponse":
        """
        Parse an error body.

        Args:
            body: Decoded JSON dict or raw response text

        Returns:
            TokenErrorResponse; empty when the body is not a JSON object
        """
        if isinstance(body, str):
            try:
                body = json.loads(body)
            except ValueError:
                return cls()
        if not isinstance(body, dict):
            return cls()

        raw_codes = body.get("error_codes") or ()
        if isinstance(raw_codes, (str, int)):
            raw_codes = (raw_codes,)

        return cls(
            error=body.get("error") or None,
            error_description=body.get("error_description") or None,
            error_codes=tuple(str(code) for code in raw_codes),
            correlation_id=body.get("correlation_id"),
            trace_id=body.get("trace_id"),
        )

    @property
    def is_empty(self) -> bool:
        return self.error is None


def service_exception_from_wrapper(
    wrapper: HttpRequestWrapperError,
    default_error_code: str = SERVICE_RETURNED_ERROR,
) -> ServiceException:
    """
    Build a ServiceException for a failed token request.

    Error code, message and service codes come from the response body when it
    is a token error body; otherwise ``default_error_code`` and its default
    message are used. The wrapper is always passed as the inner failure so
    status and headers are classified as usual.
    """
    body = getattr(wrapper.response, "body", None)
    parsed = TokenErrorResponse.from_body(body)

    if parsed.is_empty:
        return ServiceException(default_error_code, inner=wrapper)

    return ServiceException(
        parsed.error,
        parsed.error_description,
        parsed.error_codes,
        inner=wrapper,
    )


__all__ = [
    "TokenErrorResponse",
    "service_exception_from_wrapper",
]
