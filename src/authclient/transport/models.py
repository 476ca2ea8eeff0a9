"""Data models for HTTP transport responses."""

from collections.abc import Mapping
from dataclasses import dataclass, field

import aiohttp


@dataclass(frozen=True)
class HttpResponse:
    """
    Snapshot of an HTTP response taken by the transport adapter.

    Attributes:
        status_code: Numeric HTTP status
        headers: Response headers exactly as the transport returned them
        body: Decoded response body (empty when not read)
    """

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""

    @classmethod
    def from_aiohttp(cls, response: aiohttp.ClientResponse, body: str = "") -> "HttpResponse":
        """
        Create from an aiohttp response.

        Args:
            response: aiohttp response (headers are kept as the CIMultiDictProxy)
            body: Already-read body text

        Returns:
            HttpResponse instance
        """
        return cls(status_code=response.status, headers=response.headers, body=body)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


__all__ = ["HttpResponse"]
