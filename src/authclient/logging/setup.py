"""Logging setup and configuration."""

import logging
import secrets
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from authclient.config import AuthClientConfig
from authclient.logging.formatters import ConsoleFormatter, JSONFormatter

DEFAULT_LOG_FILE_NAME = "auth_client.log"
DEFAULT_ROTATION_WHEN = "midnight"
DEFAULT_BACKUP_COUNT = 7
DEFAULT_FILE_LEVEL = logging.DEBUG

# Noisy loggers to suppress
NOISY_LOGGERS = [
    "aiohttp",
    "aiohttp.access",
    "aiohttp.client",
    "asyncio",
]


def setup_logging(
    config: AuthClientConfig | None = None,
    name: str = "authclient",
    suppress_noisy: bool = True,
) -> logging.Logger:
    """
    Configure console and (optionally) rotating file logging.

    The console handler uses the human-readable formatter at the configured
    level. When ``config.log_dir`` is set, a daily-rotating file handler is
    added at DEBUG, writing JSON lines (or plain text if ``json_logs`` is off).

    Args:
        config: Client configuration (defaults used when None)
        name: Logger name to return
        suppress_noisy: Quiet down HTTP client loggers

    Returns:
        Configured logger instance
    """
    config = config or AuthClientConfig()
    console_level = logging.getLevelName(config.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all, handlers filter
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(ConsoleFormatter())
    root_logger.addHandler(console_handler)

    log_file = None
    if config.log_dir:
        log_file = Path(config.log_dir) / DEFAULT_LOG_FILE_NAME
        log_file.parent.mkdir(parents=True, exist_ok=True)

        if config.json_logs:
            file_formatter = JSONFormatter()
        else:
            file_formatter = logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
            )

        file_handler = TimedRotatingFileHandler(
            log_file,
            when=DEFAULT_ROTATION_WHEN,
            backupCount=DEFAULT_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(DEFAULT_FILE_LEVEL)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    if suppress_noisy:
        for logger_name in NOISY_LOGGERS:
            logging.getLogger(logger_name).setLevel(logging.WARNING)

    logger = logging.getLogger(name)
    logger.debug(f"Logging initialized: file={log_file}, json={config.json_logs}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Use this instead of logging.getLogger() to ensure consistent naming.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def generate_correlation_id() -> str:
    """
    Generate a request correlation identifier.

    Format: 32 lowercase hex characters.
    """
    return secrets.token_hex(16)
