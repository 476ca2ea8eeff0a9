"""Transport-layer failure types."""

from authclient.types import HttpResponseLike


class HttpRequestWrapperError(Exception):
    """
    Failure raised by the transport layer for a single HTTP exchange.

    Carries the response when one was received; any object with
    ``status_code`` and ``headers`` will do. The lower-level failure
    (connection error, timeout, cancellation) is chained as ``__cause__``.
    """

    def __init__(self, message: str, response: HttpResponseLike | None = None):
        super().__init__(message)
        self.response = response


class RequestCancelledError(Exception):
    """
    An HTTP exchange was abandoned before it completed.

    ``cancellation_requested`` is True when the caller asked for the
    cancellation and False when the transport gave up on its own (timeout).
    """

    def __init__(self, message: str = "", cancellation_requested: bool = False):
        super().__init__(message or "The operation was cancelled")
        self.cancellation_requested = cancellation_requested


__all__ = [
    "HttpRequestWrapperError",
    "RequestCancelledError",
]
