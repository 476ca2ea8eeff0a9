"""Helpers for logging with structured fields."""

import logging
from typing import Any

# LogRecord attributes; logging raises KeyError if extra= tries to overwrite one
_RESERVED_LOG_KEYS = frozenset(
    {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "lineno",
        "funcName",
        "created",
        "asctime",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "message",
        "exc_info",
        "exc_text",
        "stack_info",
    }
)

MAX_ERROR_MESSAGE_LENGTH = 500


def log_with_context(
    logger: logging.Logger,
    level: int,
    msg: str,
    **kwargs: Any,
) -> None:
    """
    Log ``msg`` with keyword arguments passed as ``extra=`` fields.

    Keys that collide with LogRecord attributes are dropped. ``exc_info`` is
    passed through to the logger rather than treated as a field.

    Example:
        log_with_context(
            logger, logging.INFO, "Token acquired",
            correlation_id=correlation_id,
            duration_ms=elapsed,
        )
    """
    exc_info = kwargs.pop("exc_info", None)
    extra = {k: v for k, v in kwargs.items() if k not in _RESERVED_LOG_KEYS}
    logger.log(level, msg, exc_info=exc_info, extra=extra)


def exception_fields(exc: BaseException) -> dict[str, Any]:
    """
    Structured log fields for an exception.

    Pulls error_code, status_code, failure_kind and service_error_codes off
    a ServiceException (or anything exposing the same attributes).
    """
    fields: dict[str, Any] = {"error_type": type(exc).__name__}

    error_code = getattr(exc, "error_code", None)
    if error_code is not None:
        fields["error_code"] = error_code

    status_code = getattr(exc, "status_code", None)
    if status_code is not None:
        fields["status_code"] = status_code

    kind = getattr(exc, "kind", None)
    if kind is not None:
        fields["failure_kind"] = kind.value if hasattr(kind, "value") else str(kind)

    codes = getattr(exc, "service_error_codes", None)
    if codes:
        fields["service_error_codes"] = list(codes)

    root_cause = getattr(exc, "root_cause", None)
    if root_cause is not None:
        fields["root_cause"] = type(root_cause).__name__

    return fields


def log_exception(
    logger: logging.Logger,
    exc: BaseException,
    msg: str,
    level: int = logging.ERROR,
    include_traceback: bool = True,
    **kwargs: Any,
) -> None:
    """
    Log exception with structured classification fields.

    Args:
        logger: Logger instance
        exc: Exception to log
        msg: Context message
        level: Log level (default: ERROR)
        include_traceback: Include full traceback (default: True)
        **kwargs: Additional context fields (override extracted ones)

    Example:
        try:
            await send_request(session, "POST", token_url, data=form)
        except HttpRequestWrapperError as e:
            error = service_exception_from_wrapper(e)
            log_exception(logger, error, "Token request failed")
            raise error
    """
    fields = exception_fields(exc)
    fields.update(kwargs)

    error_msg = str(exc)
    if len(error_msg) > MAX_ERROR_MESSAGE_LENGTH:
        error_msg = error_msg[:MAX_ERROR_MESSAGE_LENGTH] + "..."
    fields["error_message"] = error_msg

    extra = {k: v for k, v in fields.items() if k not in _RESERVED_LOG_KEYS}

    if include_traceback:
        logger.log(level, msg, exc_info=exc, extra=extra)
    else:
        logger.log(level, msg, extra=extra)
