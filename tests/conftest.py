"""Root pytest configuration for all tests."""

import logging

import pytest

# atlassian-python-api logs lookup failures at ERROR level; tests provoke
# those on purpose.
logging.getLogger("atlassian").setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers the CLI attaches so they don't outlive CliRunner streams."""
    yield
    app_logger = logging.getLogger("convergence")
    for handler in app_logger.handlers:
        handler.close()
    app_logger.handlers.clear()
    app_logger.setLevel(logging.NOTSET)
