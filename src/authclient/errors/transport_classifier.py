"""
Transport failure classification for authentication requests.

Turns whatever the transport layer raised into a FailureEnvelope:
- finds the transport wrapper (at most one level below the failure)
- copies status and headers when a response was received
- tells caller cancellation apart from timeout when it was not
- falls back to an opaque failure with the root cause kept

Classification is a pure function of the failure passed in. It does no I/O,
does not log, and never raises.
"""

import asyncio
from collections.abc import Iterable, Mapping
from http import HTTPStatus

from authclient.errors.envelope import NO_STATUS_CODE, FailureEnvelope
from authclient.errors.messages import get_error_message
from authclient.transport.exceptions import HttpRequestWrapperError, RequestCancelledError
from authclient.types import FailureKind, HttpResponseLike

# Package convention for a transport timeout; no response was received, so
# this status is synthesized rather than observed.
TIMEOUT_STATUS_CODE = int(HTTPStatus.REQUEST_TIMEOUT)


def _direct_cause(failure: BaseException) -> BaseException | None:
    """Explicit cause if set, otherwise the implicit context unless suppressed."""
    if failure.__cause__ is not None:
        return failure.__cause__
    if failure.__suppress_context__:
        return None
    return failure.__context__


def unwrap_transport_failure(failure: BaseException | None) -> HttpRequestWrapperError | None:
    """
    Find the transport wrapper for a failure.

    Checks the failure itself, then its immediate cause. Deeper causes belong
    to the transport layer and are not inspected.

    Args:
        failure: Exception handed to the builder

    Returns:
        The wrapper, or None when no transport detail is available
    """
    if failure is None:
        return None
    if isinstance(failure, HttpRequestWrapperError):
        return failure

    cause = _direct_cause(failure)
    if isinstance(cause, HttpRequestWrapperError):
        return cause
    return None


def extract_status(wrapper: HttpRequestWrapperError) -> tuple[int, Mapping[str, str]] | None:
    """
    Status code and headers from the wrapper's response, copied verbatim.

    Returns:
        (status_code, headers), or None if no response was received
    """
    response: HttpResponseLike | None = wrapper.response
    if response is None:
        return None
    return response.status_code, response.headers


def disambiguate_cancellation(cause: BaseException | None) -> tuple[FailureKind, int] | None:
    """
    Decide whether an abandoned request was a timeout or a caller cancellation.

    Recognized shapes:
        RequestCancelledError: its ``cancellation_requested`` flag decides
        asyncio.CancelledError: the caller cancelled the task
        TimeoutError: the transport gave up (includes asyncio and aiohttp timeouts)

    Args:
        cause: The wrapper's own cause

    Returns:
        (kind, status_code), or None if the cause is not a cancellation
    """
    if isinstance(cause, RequestCancelledError):
        requested = cause.cancellation_requested
    elif isinstance(cause, asyncio.CancelledError):
        requested = True
    elif isinstance(cause, TimeoutError):
        requested = False
    else:
        return None

    if requested:
        # There is no HTTP status for a user cancellation
        return FailureKind.USER_CANCELLATION, NO_STATUS_CODE
    return FailureKind.TIMEOUT, TIMEOUT_STATUS_CODE


def build_envelope(
    error_code: str,
    message: str | None = None,
    service_error_codes: Iterable[str] | None = None,
    inner: BaseException | None = None,
) -> FailureEnvelope:
    """
    Classify a failure into a FailureEnvelope.

    Args:
        error_code: Protocol error code (not inferred)
        message: Explanation; defaults to the catalogue message for error_code
        service_error_codes: Service sub-codes in received order
        inner: Failure raised by the transport layer, if any

    Returns:
        FailureEnvelope. Missing detail is expressed as status 0 and None
        fields, never by raising.
    """
    if message is None:
        message = get_error_message(error_code)

    kind = FailureKind.SERVICE_ERROR
    status_code = NO_STATUS_CODE
    headers = None
    root_cause = inner

    wrapper = unwrap_transport_failure(inner)
    if wrapper is not None:
        cause = _direct_cause(wrapper)
        root_cause = cause if cause is not None else wrapper

        status = extract_status(wrapper)
        if status is not None:
            status_code, headers = status
        else:
            cancellation = disambiguate_cancellation(cause)
            if cancellation is not None:
                kind, status_code = cancellation
            else:
                kind = FailureKind.OPAQUE_TRANSPORT_FAILURE
    elif inner is not None:
        kind = FailureKind.OPAQUE_TRANSPORT_FAILURE

    return FailureEnvelope(
        error_code=error_code,
        message=message,
        kind=kind,
        status_code=status_code,
        service_error_codes=service_error_codes,
        headers=headers,
        root_cause=root_cause,
    )


__all__ = [
    "TIMEOUT_STATUS_CODE",
    "unwrap_transport_failure",
    "extract_status",
    "disambiguate_cancellation",
    "build_envelope",
]
