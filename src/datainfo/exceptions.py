"""
DataInfo Exceptions.

Custom exception hierarchy for descriptor construction.
"""

from typing import Any


class DataInfoError(Exception):
    """Base exception for all datainfo errors."""

    def __init__(self, message: str, code: int | None = None):
        self.message = message
        self.code = code
        super().__init__(message)


class OptionError(DataInfoError):
    """Raised when an option cannot be applied to a descriptor."""

    def __init__(self, message: str, option: Any = None, code: int | None = None):
        self.option = option
        super().__init__(message, code)


class UnknownFieldError(DataInfoError):
    """Raised when a descriptor field name does not exist."""

    def __init__(self, message: str, field: str | None = None, code: int | None = None):
        self.field = field
        super().__init__(message, code)
