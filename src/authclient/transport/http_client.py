"""
HTTP transport adapter using aiohttp.

Sends a single request and reports every failure as HttpRequestWrapperError,
the shape the error classifier understands:
- non-2xx response: wrapper carries the response (status, headers, body)
- timeout: wrapper chained from the TimeoutError, no response
- connection/client failure: wrapper chained from the aiohttp error

Retries are left to the caller. Task cancellation (asyncio.CancelledError) is
re-raised unchanged; use wrap_transport_failure to turn it into a wrapper when
a ServiceException is wanted instead.
"""

import logging
from collections.abc import Mapping
from typing import Any

import aiohttp

from authclient.config import AuthClientConfig
from authclient.transport.exceptions import HttpRequestWrapperError
from authclient.transport.models import HttpResponse

logger = logging.getLogger(__name__)


def _decode_body(raw: bytes, charset: str | None) -> str:
    """Decode a response body; undecodable bytes become U+FFFD."""
    try:
        return raw.decode(charset or "utf-8", errors="replace")
    except LookupError:
        # Unknown charset label
        return raw.decode("utf-8", errors="replace")


def wrap_transport_failure(
    error: BaseException,
    response: HttpResponse | None = None,
    message: str | None = None,
) -> HttpRequestWrapperError:
    """
    Wrap a lower-level failure as a transport wrapper.

    Args:
        error: Failure to chain as the wrapper's cause
        response: Response received before the failure, if any
        message: Wrapper message (defaults to the error's text)

    Returns:
        HttpRequestWrapperError with ``__cause__`` set to ``error``
    """
    wrapper = HttpRequestWrapperError(message or str(error) or type(error).__name__, response)
    wrapper.__cause__ = error
    return wrapper


async def send_request(
    session: aiohttp.ClientSession,
    method: str,
    url: str,
    *,
    data: Mapping[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> HttpResponse:
    """
    Send one HTTP request and return the response on success.

    Args:
        session: aiohttp ClientSession (caller manages lifecycle)
        method: HTTP method
        url: Request URL
        data: Form fields for the request body
        headers: Extra request headers
        timeout: Total timeout in seconds (None = session default)

    Returns:
        HttpResponse for a 2xx status

    Raises:
        HttpRequestWrapperError: For non-2xx responses, timeouts and client errors
    """
    request_kwargs: dict[str, Any] = {"data": data, "headers": headers}
    if timeout is not None:
        request_kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)

    log_extra = {"http_method": method, "http_url": url}

    try:
        async with session.request(method, url, **request_kwargs) as response:
            body = _decode_body(await response.read(), response.charset)
            result = HttpResponse.from_aiohttp(response, body)

    # aiohttp.ServerTimeoutError is a TimeoutError as well as a ClientError
    except TimeoutError as e:
        logger.warning(
            f"HTTP {method} timed out",
            extra={**log_extra, "error_type": type(e).__name__},
        )
        raise HttpRequestWrapperError(f"{method} {url} timed out") from e
    except aiohttp.ClientError as e:
        logger.warning(
            f"HTTP {method} failed: {e}",
            extra={**log_extra, "error_type": type(e).__name__},
        )
        raise HttpRequestWrapperError(f"{method} {url} failed: {e}") from e

    if not result.is_success:
        logger.warning(
            f"HTTP {method} returned {result.status_code}",
            extra={**log_extra, "status_code": result.status_code},
        )
        raise HttpRequestWrapperError(f"HTTP {result.status_code}", response=result)

    return result


def create_session(config: AuthClientConfig | None = None) -> aiohttp.ClientSession:
    """
    Create aiohttp ClientSession with connection pooling and timeouts from config.

    Args:
        config: Client configuration (defaults used when None)

    Returns:
        Configured aiohttp.ClientSession

    Example:
        async with create_session(config) as session:
            response = await send_request(session, "POST", token_url, data=form)
    """
    config = config or AuthClientConfig()

    connector = aiohttp.TCPConnector(
        limit=config.max_connections,
        limit_per_host=config.max_connections_per_host,
        ssl=config.enable_ssl,
        ttl_dns_cache=300,
    )

    timeout = aiohttp.ClientTimeout(
        total=config.request_timeout_seconds,
        connect=config.connect_timeout_seconds,
    )

    return aiohttp.ClientSession(connector=connector, timeout=timeout)


__all__ = [
    "create_session",
    "send_request",
    "wrap_transport_failure",
]
