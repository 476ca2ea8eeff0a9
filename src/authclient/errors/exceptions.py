"""
Exception types for the authentication client.

ServiceException is the single error type raised for failures talking to the
token service. Its ``kind`` says how the failure was classified; there are no
subclasses per failure shape.
"""

from collections.abc import Iterable, Mapping
from dataclasses import replace

from authclient.errors.envelope import NO_STATUS_CODE, FailureEnvelope, render_envelope
from authclient.errors.messages import get_error_message
from authclient.errors.transport_classifier import build_envelope
from authclient.types import FailureKind


class AuthClientError(Exception):
    """
    Base exception for all authentication client errors.

    Attributes:
        error_code: Protocol error code, the value to branch on in handlers
        message: Human-readable error description
    """

    def __init__(self, error_code: str, message: str | None = None):
        self._error_code = error_code
        self._message = message if message is not None else get_error_message(error_code)
        super().__init__(self._message)

    @property
    def error_code(self) -> str:
        return self._error_code

    @error_code.setter
    def error_code(self, value: str) -> None:
        self._error_code = value

    @property
    def message(self) -> str:
        return self._message

    @message.setter
    def message(self, value: str) -> None:
        self._message = value
        self.args = (value,)

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"


class ServiceException(AuthClientError):
    """
    The service returned an error, or the request to it failed.

    Built from a protocol error code and the failure the transport raised.
    The transport wrapper is unwrapped, so ``__cause__`` is the network-level
    failure rather than the generic wrapper.

    Attributes:
        kind: FailureKind of the failure
        status_code: HTTP status, 408 for a transport timeout, 0 when no
                     response was received or the caller cancelled
        service_error_codes: Service-specific sub-codes, None if absent
        headers: Headers of the error response, None if no response
        root_cause: Innermost failure kept for diagnostics
    """

    def __init__(
        self,
        error_code: str,
        message: str | None = None,
        service_error_codes: Iterable[str] | None = None,
        inner: BaseException | None = None,
    ):
        envelope = build_envelope(error_code, message, service_error_codes, inner)
        super().__init__(envelope.error_code, envelope.message)
        self._envelope = envelope
        if envelope.root_cause is not None:
            self.__cause__ = envelope.root_cause

    @classmethod
    def from_envelope(cls, envelope: FailureEnvelope) -> "ServiceException":
        """
        Wrap an envelope produced by ``build_envelope``.

        Hand-built envelopes must keep the same invariant: headers are only
        present together with the status code of a received response.

        Raises:
            ValueError: If the envelope has headers but status code 0
        """
        if envelope.headers is not None and envelope.status_code == NO_STATUS_CODE:
            raise ValueError("FailureEnvelope has response headers but no status code")
        exc = cls(envelope.error_code, envelope.message)
        exc._envelope = envelope
        if envelope.root_cause is not None:
            exc.__cause__ = envelope.root_cause
        return exc

    @property
    def envelope(self) -> FailureEnvelope:
        return self._envelope

    @property
    def error_code(self) -> str:
        return self._envelope.error_code

    @error_code.setter
    def error_code(self, value: str) -> None:
        self._envelope = replace(self._envelope, error_code=value)
        self._error_code = value

    @property
    def message(self) -> str:
        return self._envelope.message

    @message.setter
    def message(self, value: str) -> None:
        self._envelope = replace(self._envelope, message=value)
        self._message = value
        self.args = (value,)

    @property
    def kind(self) -> FailureKind:
        return self._envelope.kind

    @property
    def status_code(self) -> int:
        return self._envelope.status_code

    @property
    def service_error_codes(self) -> tuple[str, ...] | None:
        return self._envelope.service_error_codes

    @property
    def headers(self) -> Mapping[str, str] | None:
        return self._envelope.headers

    @property
    def root_cause(self) -> BaseException | None:
        return self._envelope.root_cause

    def render(self) -> str:
        """Deterministic multi-line description, suitable for logs."""
        return render_envelope(self._envelope, type(self).__name__)


__all__ = [
    "AuthClientError",
    "ServiceException",
]
