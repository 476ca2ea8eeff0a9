"""Authentication client configuration from YAML file.

Loads the ``auth_client:`` section of a YAML file:
- HTTP transport timeouts and connection pool limits
- Logging settings

Environment variables ARE supported using ${VAR_NAME} and ${VAR_NAME:-default}
syntax in YAML files. A missing file yields the defaults.
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("config") / "auth_client.yaml"
CONFIG_SECTION = "auth_client"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-(([^}]*))?)?\}")


def load_yaml(path: Path) -> Dict[str, Any]:
    """Load YAML file and return dict."""
    if not path.exists():
        return {}
    with open(path, "r") as f:
        return yaml.safe_load(f) or {}


def _expand_env_vars(data: Any) -> Any:
    """Recursively expand ${VAR_NAME} and ${VAR_NAME:-default} environment variables."""
    if isinstance(data, dict):
        return {key: _expand_env_vars(value) for key, value in data.items()}
    elif isinstance(data, list):
        return [_expand_env_vars(item) for item in data]
    elif isinstance(data, str):

        def replacer(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else match.group(0)
            return os.getenv(var_name, default_value)

        return _ENV_VAR_PATTERN.sub(replacer, data)
    else:
        return data


def _as_bool(value: Any) -> bool:
    # bool("false") would be True
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


@dataclass
class AuthClientConfig:
    """Authentication client configuration.

    Configuration structure:
        auth_client:
          transport:
            request_timeout_seconds: 30
            connect_timeout_seconds: 10
            max_connections: 100
            max_connections_per_host: 10
            enable_ssl: true
          logging:
            level: INFO
            dir: logs
            json: true
    """

    # =========================================================================
    # TRANSPORT
    # =========================================================================
    request_timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 10.0
    max_connections: int = 100
    max_connections_per_host: int = 10
    enable_ssl: bool = True

    # =========================================================================
    # LOGGING
    # =========================================================================
    log_level: str = "INFO"
    log_dir: Optional[str] = None
    json_logs: bool = True

    def __post_init__(self):
        """Ensure proper types from YAML/env vars."""
        self.request_timeout_seconds = float(self.request_timeout_seconds)
        self.connect_timeout_seconds = float(self.connect_timeout_seconds)
        self.max_connections = int(self.max_connections)
        self.max_connections_per_host = int(self.max_connections_per_host)
        self.enable_ssl = _as_bool(self.enable_ssl)
        self.json_logs = _as_bool(self.json_logs)
        self.log_level = str(self.log_level).upper()
        self.log_dir = str(self.log_dir) if self.log_dir else None

    def validate(self) -> None:
        """Validate numeric ranges and enum values.

        Raises:
            ValueError: Listing every problem found
        """
        errors = []
        if self.request_timeout_seconds <= 0:
            errors.append("transport.request_timeout_seconds must be > 0")
        if self.connect_timeout_seconds <= 0:
            errors.append("transport.connect_timeout_seconds must be > 0")
        if self.connect_timeout_seconds > self.request_timeout_seconds:
            errors.append(
                "transport.connect_timeout_seconds must not exceed request_timeout_seconds"
            )
        if self.max_connections < 1:
            errors.append("transport.max_connections must be >= 1")
        if not 1 <= self.max_connections_per_host <= self.max_connections:
            errors.append("transport.max_connections_per_host must be between 1 and max_connections")
        if self.log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"logging.level must be one of {', '.join(VALID_LOG_LEVELS)}, got '{self.log_level}'"
            )

        if errors:
            raise ValueError("Invalid auth_client configuration:\n  - " + "\n  - ".join(errors))


def load_config(config_path: Optional[Path] = None) -> AuthClientConfig:
    """Load authentication client configuration from a YAML file.

    Missing file or missing ``auth_client:`` section gives the defaults.

    Raises:
        ValueError: If the loaded values fail validation
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_FILE
    config_path = Path(config_path)

    if not config_path.exists():
        logger.debug(f"Configuration file not found, using defaults: {config_path}")
        config = AuthClientConfig()
        config.validate()
        return config

    logger.info(f"Loading configuration from file: {config_path}")
    yaml_data = _expand_env_vars(load_yaml(config_path))

    section = yaml_data.get(CONFIG_SECTION) or {}
    transport = section.get("transport") or {}
    logging_section = section.get("logging") or {}

    defaults = AuthClientConfig()
    config = AuthClientConfig(
        request_timeout_seconds=transport.get(
            "request_timeout_seconds", defaults.request_timeout_seconds
        ),
        connect_timeout_seconds=transport.get(
            "connect_timeout_seconds", defaults.connect_timeout_seconds
        ),
        max_connections=transport.get("max_connections", defaults.max_connections),
        max_connections_per_host=transport.get(
            "max_connections_per_host", defaults.max_connections_per_host
        ),
        enable_ssl=transport.get("enable_ssl", defaults.enable_ssl),
        log_level=logging_section.get("level", defaults.log_level),
        log_dir=logging_section.get("dir", defaults.log_dir),
        json_logs=logging_section.get("json", defaults.json_logs),
    )

    config.validate()
    logger.debug("Configuration validation passed")
    return config


__all__ = [
    "AuthClientConfig",
    "DEFAULT_CONFIG_FILE",
    "load_config",
    "load_yaml",
]
