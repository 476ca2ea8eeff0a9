"""
Error classification and the public exception type.

Provides:
- ServiceException, the single error type for failed service calls
- FailureEnvelope and its deterministic rendering
- Transport failure classification (unwrapping, status extraction,
  timeout vs cancellation)
- Protocol error codes with default messages
- Token endpoint error body parsing
"""

from authclient.errors.envelope import (
    NO_STATUS_CODE,
    FailureEnvelope,
    render_envelope,
)
from authclient.errors.exceptions import (
    AuthClientError,
    ServiceException,
)
from authclient.errors.messages import (
    AUTHENTICATION_CANCELED,
    FAILED_TO_REFRESH_TOKEN,
    HTTP_REQUEST_FAILED,
    INVALID_GRANT,
    REQUEST_TIMEOUT,
    SERVICE_RETURNED_ERROR,
    SERVICE_UNAVAILABLE,
    UNKNOWN_ERROR,
    get_error_message,
)
from authclient.errors.token_response import (
    TokenErrorResponse,
    service_exception_from_wrapper,
)
from authclient.errors.transport_classifier import (
    TIMEOUT_STATUS_CODE,
    build_envelope,
    disambiguate_cancellation,
    extract_status,
    unwrap_transport_failure,
)

__all__ = [
    # Exceptions
    "AuthClientError",
    "ServiceException",
    # Envelope
    "FailureEnvelope",
    "NO_STATUS_CODE",
    "render_envelope",
    # Classification
    "TIMEOUT_STATUS_CODE",
    "build_envelope",
    "unwrap_transport_failure",
    "extract_status",
    "disambiguate_cancellation",
    # Error codes
    "AUTHENTICATION_CANCELED",
    "FAILED_TO_REFRESH_TOKEN",
    "HTTP_REQUEST_FAILED",
    "INVALID_GRANT",
    "REQUEST_TIMEOUT",
    "SERVICE_RETURNED_ERROR",
    "SERVICE_UNAVAILABLE",
    "UNKNOWN_ERROR",
    "get_error_message",
    # Token responses
    "TokenErrorResponse",
    "service_exception_from_wrapper",
]
