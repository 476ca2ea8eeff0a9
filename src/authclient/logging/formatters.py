"""
Formatters for authentication client logs.

JSONFormatter writes one object per line for log shipping; ConsoleFormatter
writes short tagged lines for people watching a terminal. Both pick up the
correlation id and operation from the logging context.
"""

import json
import logging
import re
import sys
from datetime import UTC, datetime
from typing import Any

from authclient.logging.context import get_log_context
from authclient.utils.json_serializers import json_serializer

# Query parameters that carry credentials or authorization codes
_SECRET_QUERY_PARAMS = re.compile(
    r"([?&])(code|token|access_token|refresh_token|client_secret|assertion|password|sig)=[^&]*",
    re.IGNORECASE,
)

REDACTED = "[REDACTED]"


def redact_url(url: str) -> str:
    """Replace credential-bearing query parameter values with [REDACTED]."""
    return _SECRET_QUERY_PARAMS.sub(rf"\1\2={REDACTED}", url)


class JSONFormatter(logging.Formatter):
    """
    One JSON object per log line.

    Known ``extra=`` keys are copied onto the entry; classification fields of
    a ServiceException (error_code, status_code, failure_kind, ...) land at
    the top level so they can be filtered without parsing the message.
    URLs are redacted before they are written.
    """

    # extra= keys copied onto the entry, in output order
    EXTRA_FIELDS = (
        "correlation_id",
        "operation",
        "attempt",
        "duration_ms",
        "http_method",
        "http_url",
        "token_url",
        "http_status",
        "status_code",
        "error_type",
        "error_code",
        "error_message",
        "failure_kind",
        "service_error_codes",
        "root_cause",
    )

    # Values that cannot be converted are written as null
    FIELD_TYPES = {
        "attempt": int,
        "duration_ms": float,
        "http_status": int,
        "status_code": int,
    }

    URL_FIELDS = frozenset({"http_url", "token_url"})

    def _coerce(self, name: str, value: Any) -> Any:
        cast = self.FIELD_TYPES.get(name)
        if cast is not None:
            try:
                value = cast(value)
            except (TypeError, ValueError):
                return None
        if name in self.URL_FIELDS and isinstance(value, str):
            return redact_url(value)
        return value

    def _exception_block(self, record: logging.LogRecord) -> dict[str, Any]:
        exc_type, exc_value, _ = record.exc_info
        return {
            "type": exc_type.__name__ if exc_type else None,
            "message": str(exc_value) if exc_value else None,
            "stacktrace": self.formatException(record.exc_info),
        }

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update({k: v for k, v in get_log_context().items() if v})

        if record.levelno in (logging.DEBUG, logging.ERROR, logging.CRITICAL):
            entry["file"] = f"{record.filename}:{record.lineno}"

        for name in self.EXTRA_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = self._coerce(name, value)

        if record.exc_info:
            entry["exception"] = self._exception_block(record)

        return json.dumps(entry, default=json_serializer, ensure_ascii=False)


class ConsoleFormatter(logging.Formatter):
    """
    Short single-line format for terminals.

    ``2026-10-19 12:00:00 - WARNING - [refresh_token] [3f2a9c1e] [invalid_grant] [status:400] msg``

    Level names are colored only when stdout is a TTY.
    """

    LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._use_colors = sys.stdout.isatty()

    def _level(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno) if self._use_colors else None
        if color:
            return f"{color}{record.levelname}{self.RESET}"
        return record.levelname

    @staticmethod
    def _tags(record: logging.LogRecord) -> list[str]:
        context = get_log_context()
        correlation_id = getattr(record, "correlation_id", None) or context["correlation_id"]
        error_code = getattr(record, "error_code", None)
        status_code = getattr(record, "status_code", None)

        tags = []
        if context["operation"]:
            tags.append(f"[{context['operation']}]")
        if correlation_id:
            tags.append(f"[{correlation_id[:8]}]")
        if error_code:
            tags.append(f"[{error_code}]")
        # 0 means no response was received
        if status_code is not None:
            tags.append(f"[status:{status_code}]")
        return tags

    def format(self, record: logging.LogRecord) -> str:
        parts = [datetime.now().strftime("%Y-%m-%d %H:%M:%S"), self._level(record)]
        tags = self._tags(record)
        if tags:
            parts.append(" ".join(tags) + " " + record.getMessage())
        else:
            parts.append(record.getMessage())

        line = " - ".join(parts)
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


__all__ = [
    "ConsoleFormatter",
    "JSONFormatter",
    "redact_url",
]
