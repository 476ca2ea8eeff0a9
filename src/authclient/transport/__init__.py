"""
HTTP transport types and the aiohttp adapter.

The adapter reports failures as HttpRequestWrapperError so the error
classifier can tell service errors, timeouts, cancellations and connection
failures apart.
"""

from authclient.transport.exceptions import HttpRequestWrapperError, RequestCancelledError
from authclient.transport.http_client import create_session, send_request, wrap_transport_failure
from authclient.transport.models import HttpResponse

__all__ = [
    "HttpResponse",
    "HttpRequestWrapperError",
    "RequestCancelledError",
    "create_session",
    "send_request",
    "wrap_transport_failure",
]
