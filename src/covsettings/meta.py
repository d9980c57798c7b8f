# src/covsettings/meta.py
"""Program identity shared by the CLI, logger and error messages."""

from dataclasses import dataclass


__version__ = "0.1.0"

PROGRAM_PACKAGE = "covsettings"
PROGRAM_SCRIPT = "covsettings"
PROGRAM_DISPLAY = "CovSettings"
PROGRAM_ENV = "COVSETTINGS"

# Name the test host knows the collector by; embedded in error messages
DATA_COLLECTOR_NAME = "XPlat Code Coverage"
DATA_COLLECTOR_URI = "datacollector://Microsoft/CoverletCodeCoverage/1.0"


@dataclass(frozen=True)
class Metadata:
    """Lightweight container for version info."""

    version: str
    collector: str

    def __str__(self) -> str:
        return f"{self.version} ({self.collector})"


def get_metadata() -> Metadata:
    return Metadata(version=__version__, collector=DATA_COLLECTOR_NAME)
