"""
Normalized result of classifying a transport failure.

A FailureEnvelope is built once, when the failure is classified, and is not
modified afterwards. ``render_envelope`` turns one into the multi-line text
written to logs.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from authclient.types import FailureKind

# HTTP status reported when no response was received (connection failure,
# caller cancellation, or no inner failure at all).
NO_STATUS_CODE = 0


@dataclass(frozen=True)
class FailureEnvelope:
    """
    Classified transport failure.

    Attributes:
        error_code: Protocol error code chosen by the caller, never None
        message: Human-readable explanation
        kind: Failure classification for retry decisions
        status_code: HTTP status, or 0 when no response was observed
        service_error_codes: Service sub-codes in received order, None if absent
        headers: Response headers, None unless a response was observed
        root_cause: Innermost failure after unwrapping, for diagnostics
    """

    error_code: str
    message: str
    kind: FailureKind = FailureKind.SERVICE_ERROR
    status_code: int = NO_STATUS_CODE
    service_error_codes: tuple[str, ...] | None = None
    headers: Mapping[str, str] | None = None
    root_cause: BaseException | None = None

    def __post_init__(self):
        # An empty list of codes is stored as absent
        codes = normalize_service_error_codes(self.service_error_codes)
        object.__setattr__(self, "service_error_codes", codes)

    @property
    def has_response(self) -> bool:
        """True when the status and headers came from a real HTTP response."""
        return self.headers is not None


def normalize_service_error_codes(
    codes: Iterable[str] | None,
) -> tuple[str, ...] | None:
    """Copy service error codes into a tuple, keeping order. Empty -> None."""
    if codes is None:
        return None
    codes = tuple(codes)
    return codes or None


def describe_cause(cause: BaseException | None) -> str:
    """One-line summary of a root cause, ``TypeName: text``."""
    if cause is None:
        return "None"
    text = str(cause)
    name = type(cause).__name__
    return f"{name}: {text}" if text else name


def render_envelope(envelope: FailureEnvelope, type_name: str = "ServiceException") -> str:
    """
    Render an envelope as deterministic multi-line text.

    The base description (error code, message, service codes, root cause)
    is followed by the status code line. No timestamps or stack traces are
    included, so rendering the same envelope always gives the same string.

    Example:
        ServiceException: service_unavailable: down
        \tErrorCode: service_unavailable
        \tServiceErrorCodes: AADSTS50034
        \tRootCause: ClientConnectionError: reset by peer
        \tStatusCode: 503
    """
    lines = [
        f"{type_name}: {envelope.error_code}: {envelope.message}",
        f"\tErrorCode: {envelope.error_code}",
    ]
    if envelope.service_error_codes:
        lines.append(f"\tServiceErrorCodes: {', '.join(envelope.service_error_codes)}")
    if envelope.root_cause is not None:
        lines.append(f"\tRootCause: {describe_cause(envelope.root_cause)}")
    lines.append(f"\tStatusCode: {envelope.status_code}")
    return "\n".join(lines)


__all__ = [
    "NO_STATUS_CODE",
    "FailureEnvelope",
    "normalize_service_error_codes",
    "describe_cause",
    "render_envelope",
]
