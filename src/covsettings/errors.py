# src/covsettings/errors.py
"""Exceptions raised while resolving collector settings."""


class CollectorError(RuntimeError):
    """Base class for failures that should abort a collection run.

    ``code`` is the process exit code the CLI reports for this failure.
    """

    code: int = 1

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class NoTestModuleError(CollectorError):
    """Raised when the test host handed over no test module to instrument."""
