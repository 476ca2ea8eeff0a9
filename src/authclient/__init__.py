"""
Authentication client core: transport failure classification.

Converts failures from the HTTP transport (error responses, connection
failures, timeouts, cancellations) into one ServiceException that callers can
branch on for retry, backoff, or diagnostics.

Modules:
    errors     - ServiceException, FailureEnvelope, classification, error codes
    transport  - Transport wrapper types and the aiohttp adapter
    config     - YAML configuration
    logging    - Structured JSON logging with correlation IDs

Design Principles:
    - Classification is pure: no I/O, no logging, never raises
    - One public error type tagged with a FailureKind
    - status_code 0 means no HTTP status was observed
"""

from .errors import FailureEnvelope, ServiceException
from .types import FailureKind

__version__ = "0.1.0"

__all__ = [
    "FailureEnvelope",
    "FailureKind",
    "ServiceException",
]
