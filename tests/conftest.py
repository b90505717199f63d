"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, integration).
"""

import logging

import pytest

# atlassian-python-api logs expected lookup failures at ERROR level
logging.getLogger("atlassian").setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers the CLI attached to the package logger during a test.

    CliRunner closes its streams after each invocation, so a handler left
    behind would write to a closed stream in later tests.
    """
    app_logger = logging.getLogger("confluence_publisher")
    handlers = list(app_logger.handlers)
    level = app_logger.level
    yield
    for handler in app_logger.handlers[:]:
        if handler not in handlers:
            app_logger.removeHandler(handler)
            handler.close()
    app_logger.setLevel(level)
