"""SwatchRoll exception classes."""

from __future__ import annotations


class SwatchRollError(RuntimeError):
    """Base exception for SwatchRoll errors."""


class UserError(SwatchRollError):
    """Errors that should be shown to user without traceback."""

    def __init__(self, message: str, rc: int = 2):
        super().__init__(message)
        self.rc = rc
