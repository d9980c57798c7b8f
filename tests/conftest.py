# tests/conftest.py
"""Shared test setup for project."""

from collections.abc import Generator

import pytest

import covsettings.logs as mod_logs
from tests.utils import DEFAULT_TEST_LOG_LEVEL
from tests.utils.log_fixtures import module_logger


# These fixtures are intentionally re-exported so pytest can discover them.
__all__ = [
    "module_logger",
]


# ----------------------------------------------------------------------
# Fixtures
# ----------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_logger_level() -> Generator[None, None, None]:
    """Reset the app logger level before and after each test for isolation.

    The app logger is a module-level singleton; tests that drive the CLI
    change its level, so it is put back to DEFAULT_TEST_LOG_LEVEL around
    every test.
    """
    logger = mod_logs.getAppLogger()
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)
    yield
    logger.setLevel(DEFAULT_TEST_LOG_LEVEL)


# ----------------------------------------------------------------------
# Helpers
# ----------------------------------------------------------------------


def _filter_debug_tests(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    # detect if the user is filtering for debug tests
    keywords = config.getoption("-k") or ""
    running_debug = "debug" in keywords.lower()

    if running_debug:
        return  # user explicitly requested them, don't skip

    for item in items:
        if "debug" in item.keywords:
            item.add_marker(
                pytest.mark.skip(reason="Skipped debug test (use -k debug to run)"),
            )


# ----------------------------------------------------------------------
# Hooks
# ----------------------------------------------------------------------


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Automatically skip debug tests unless asked for."""
    _filter_debug_tests(config, items)
