"""
pytest configuration for authclient tests.

Adds src directory to Python path so tests run without an editable install.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add src directory to Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))

from authclient.logging.context import clear_log_context  # noqa: E402


@pytest.fixture(autouse=True)
def clean_log_context():
    """Reset logging context variables between tests."""
    clear_log_context()
    yield
    clear_log_context()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after tests that call setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
