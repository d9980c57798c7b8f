# src/covsettings/logs.py

import logging
from typing import cast

from apathetic_logging import (
    Logger,
    registerDefaultLogLevel,
    registerLogger,
    registerLogLevelEnvVars,
)

from .constants import DEFAULT_ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL
from .meta import PROGRAM_ENV, PROGRAM_PACKAGE


class AppLogger(Logger):
    """App-specific logger class."""

    # for future use if needed, empty for now


# --- Logger initialization ---------------------------------------------------

# Force the logging module to use the Logger class globally.
# This must happen *before* any loggers are created.
# TRACE/DETAIL/BRIEF/SILENT are registered when apathetic_logging is imported;
# extending the logging module a second time for the subclass would swap the
# root logger and leave it with two stream handlers.
logging.setLoggerClass(AppLogger)

# Register log level environment variables and default
# This must happen before any loggers are created so they use the registered values
registerLogLevelEnvVars(
    [f"{PROGRAM_ENV}_{DEFAULT_ENV_LOG_LEVEL}", DEFAULT_ENV_LOG_LEVEL]
)
registerDefaultLogLevel(DEFAULT_LOG_LEVEL)

# Register the logger name so getLogger() can find it
registerLogger(PROGRAM_PACKAGE)

_APP_LOGGER = cast("AppLogger", logging.getLogger(PROGRAM_PACKAGE))


# --- Convenience utils ---------------------------------------------------------


def getAppLogger() -> AppLogger:  # noqa: N802
    """Return the configured app logger."""
    return _APP_LOGGER
