"""
Pytest configuration for the stringlift test suite.

This conftest.py provides:
- Silent logging for clean test output
- Temp directory and sample project fixtures
"""

import shutil
import tempfile
from pathlib import Path

import pytest

from stringlift.logging_config import setup_logging


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """Suppress console logs for clean test output."""
    setup_logging(level="DEBUG", suppress_console=True, force=True)


# ============================================================================
# TEMPORARY DIRECTORY FIXTURES
# ============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory that's cleaned up after the test."""
    tmp = Path(tempfile.mkdtemp(prefix="stringlift_test_"))
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_project(temp_dir):
    """
    Create a temporary project with a couple of Python files.

    Layout:
        app/__init__.py
        app/greeting.py   (safe literals, a logging call, an f-string)
        app/errors.py     (exception message, dictionary keys)
        app/sub/view.py   (a literal shared with greeting.py)

    Returns:
        Path to the project root.
    """
    package = temp_dir / "app"
    (package / "sub").mkdir(parents=True)
    (package / "__init__.py").write_text("")
    (package / "sub" / "__init__.py").write_text("")

    (package / "greeting.py").write_text(
        '"""Greeting helpers."""\n'
        "import logging\n"
        "\n"
        "logger = logging.getLogger(__name__)\n"
        "\n"
        "\n"
        "def greet(name):\n"
        '    logger.info("Greeting user")\n'
        '    title = "Welcome back"\n'
        '    return f"Hello {name}!", title\n'
    )

    (package / "errors.py").write_text(
        "def check(value):\n"
        "    if not value:\n"
        '        raise ValueError("value is required")\n'
        '    return {"status": "Missing value"}\n'
    )

    (package / "sub" / "view.py").write_text(
        "def header():\n"
        "    return 'Welcome back'\n"
    )

    yield temp_dir
