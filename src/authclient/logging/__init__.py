"""
Structured logging module.

Provides JSON logging with correlation IDs and context propagation.
"""

from authclient.logging.context import (
    clear_log_context,
    get_log_context,
    set_log_context,
)
from authclient.logging.formatters import ConsoleFormatter, JSONFormatter, redact_url
from authclient.logging.setup import (
    generate_correlation_id,
    get_logger,
    setup_logging,
)
from authclient.logging.utilities import exception_fields, log_exception, log_with_context

__all__ = [
    # Setup
    "setup_logging",
    "get_logger",
    "generate_correlation_id",
    # Formatters
    "JSONFormatter",
    "ConsoleFormatter",
    "redact_url",
    # Context
    "set_log_context",
    "get_log_context",
    "clear_log_context",
    # Utilities
    "log_with_context",
    "log_exception",
    "exception_fields",
]
