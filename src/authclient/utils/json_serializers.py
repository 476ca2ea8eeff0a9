"""Shared JSON serialization utilities for log output."""

from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any


def _serialize_known_type(obj: Any) -> tuple[bool, Any]:
    """Try to serialize by known type. Returns (handled, result)."""
    if isinstance(obj, (datetime, date)):
        return True, obj.isoformat()
    if isinstance(obj, Enum):
        return True, obj.value
    if isinstance(obj, Path):
        return True, str(obj)
    if isinstance(obj, (set, frozenset)):
        return True, list(obj)
    if isinstance(obj, Mapping):
        # Covers multidict header proxies
        return True, dict(obj)
    return False, None


def json_serializer(obj: Any) -> Any:
    """
    JSON ``default=`` hook that keeps values typed.

    - datetime/date -> ISO 8601 string
    - Enum -> value
    - Path -> string
    - set -> list
    - Mapping -> dict
    - Everything else -> string (fallback)

    Args:
        obj: Object to serialize

    Returns:
        JSON-serializable representation
    """
    handled, result = _serialize_known_type(obj)
    if handled:
        return result
    return str(obj)


__all__ = ["json_serializer"]
