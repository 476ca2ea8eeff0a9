"""Tests for transport response model and failure types."""

from unittest.mock import MagicMock

import pytest

from authclient.transport.exceptions import HttpRequestWrapperError, RequestCancelledError
from authclient.transport.models import HttpResponse


class TestHttpResponse:
    def test_defaults(self):
        response = HttpResponse(status_code=204)
        assert response.headers == {}
        assert response.body == ""

    @pytest.mark.parametrize(
        "status,expected",
        [(200, True), (201, True), (299, True), (199, False), (300, False), (401, False), (503, False)],
    )
    def test_is_success(self, status, expected):
        assert HttpResponse(status_code=status).is_success is expected

    def test_from_aiohttp_keeps_headers_object(self):
        headers = {"Content-Type": "application/json"}
        raw = MagicMock()
        raw.status = 401
        raw.headers = headers

        response = HttpResponse.from_aiohttp(raw, '{"error": "invalid_client"}')

        assert response.status_code == 401
        assert response.headers is headers
        assert response.body == '{"error": "invalid_client"}'


class TestHttpRequestWrapperError:
    def test_without_response(self):
        wrapper = HttpRequestWrapperError("connection reset")
        assert wrapper.response is None
        assert str(wrapper) == "connection reset"

    def test_with_response(self):
        response = HttpResponse(status_code=500)
        wrapper = HttpRequestWrapperError("HTTP 500", response=response)
        assert wrapper.response is response


class TestRequestCancelledError:
    def test_defaults(self):
        error = RequestCancelledError()
        assert error.cancellation_requested is False
        assert str(error) == "The operation was cancelled"

    def test_requested(self):
        error = RequestCancelledError("user closed the dialog", cancellation_requested=True)
        assert error.cancellation_requested is True
        assert str(error) == "user closed the dialog"
