"""
Protocol error codes and their default messages.

Error codes are the stable identifiers callers check in exception handlers.
Messages are only for humans and may change between releases.
"""

AUTHENTICATION_CANCELED = "authentication_canceled"
FAILED_TO_REFRESH_TOKEN = "failed_to_refresh_token"
HTTP_REQUEST_FAILED = "http_request_failed"
INVALID_GRANT = "invalid_grant"
INVALID_REQUEST = "invalid_request"
REQUEST_TIMEOUT = "request_timeout"
SERVICE_RETURNED_ERROR = "service_returned_error"
SERVICE_UNAVAILABLE = "service_unavailable"
UNAUTHORIZED_RESPONSE_EXPECTED = "unauthorized_response_expected"
UNKNOWN_ERROR = "unknown_error"

UNKNOWN_ERROR_MESSAGE = "Unknown error"

ERROR_MESSAGES = {
    AUTHENTICATION_CANCELED: "User canceled authentication",
    FAILED_TO_REFRESH_TOKEN: "Failed to refresh access token",
    HTTP_REQUEST_FAILED: "The HTTP request to the service failed",
    INVALID_GRANT: "The provided grant is invalid or has expired",
    INVALID_REQUEST: "The token request is missing a parameter or is malformed",
    REQUEST_TIMEOUT: "The request to the service timed out",
    SERVICE_RETURNED_ERROR: "Service returned error. Check the root cause for more details",
    SERVICE_UNAVAILABLE: "Service is unavailable to process the request",
    UNAUTHORIZED_RESPONSE_EXPECTED: "Unauthorized HTTP response (status code 401) was expected",
    UNKNOWN_ERROR: UNKNOWN_ERROR_MESSAGE,
}


def get_error_message(error_code: str | None) -> str:
    """
    Default message for an error code.

    Unrecognized codes get the generic unknown-error text.
    """
    if not error_code:
        return UNKNOWN_ERROR_MESSAGE
    return ERROR_MESSAGES.get(error_code, UNKNOWN_ERROR_MESSAGE)


__all__ = [
    "AUTHENTICATION_CANCELED",
    "FAILED_TO_REFRESH_TOKEN",
    "HTTP_REQUEST_FAILED",
    "INVALID_GRANT",
    "INVALID_REQUEST",
    "REQUEST_TIMEOUT",
    "SERVICE_RETURNED_ERROR",
    "SERVICE_UNAVAILABLE",
    "UNAUTHORIZED_RESPONSE_EXPECTED",
    "UNKNOWN_ERROR",
    "UNKNOWN_ERROR_MESSAGE",
    "ERROR_MESSAGES",
    "get_error_message",
]
