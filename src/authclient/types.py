"""
Core types and protocols used across modules.

This module provides the enums and protocol definitions shared by the error
classification and transport layers.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Protocol


class FailureKind(Enum):
    """
    Classification of a transport failure.

    Callers branch on this to decide retry, backoff, or what to show the user.
    The classifier itself never decides.

    Kinds:
        SERVICE_ERROR: The service answered with a non-success status, or the
                       error code came from a parsed protocol response
        TIMEOUT: The transport gave up waiting without the caller asking it
                 to (reported as status 408)
        USER_CANCELLATION: The caller cancelled the operation (status 0)
        OPAQUE_TRANSPORT_FAILURE: No response and no recognizable cancellation
                                  shape, e.g. DNS or connection refused (status 0)
    """

    SERVICE_ERROR = "service_error"
    TIMEOUT = "timeout"
    USER_CANCELLATION = "user_cancellation"
    OPAQUE_TRANSPORT_FAILURE = "opaque_transport_failure"


class HttpResponseLike(Protocol):
    """
    Protocol for the response object carried by a transport wrapper.

    Only the status code and headers are read during classification.
    """

    status_code: int
    headers: Mapping[str, str]


__all__ = [
    "FailureKind",
    "HttpResponseLike",
]
