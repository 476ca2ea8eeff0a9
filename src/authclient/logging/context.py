"""Context variables for structured logging."""

from contextvars import ContextVar
from typing import Dict, Optional

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")
_operation: ContextVar[str] = ContextVar("operation", default="")
_client_id: ContextVar[str] = ContextVar("client_id", default="")


def set_log_context(
    correlation_id: Optional[str] = None,
    operation: Optional[str] = None,
    client_id: Optional[str] = None,
) -> None:
    if correlation_id is not None:
        _correlation_id.set(correlation_id)
    if operation is not None:
        _operation.set(operation)
    if client_id is not None:
        _client_id.set(client_id)


def get_log_context() -> Dict[str, str]:
    return {
        "correlation_id": _correlation_id.get(),
        "operation": _operation.get(),
        "client_id": _client_id.get(),
    }


def clear_log_context() -> None:
    _correlation_id.set("")
    _operation.set("")
    _client_id.set("")
