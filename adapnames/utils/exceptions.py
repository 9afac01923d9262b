"""
Custom exception definitions.

This module defines the exception hierarchy for adapnames-specific errors.
"""

from typing import Optional


class NamesError(Exception):
    """
    Base exception for all adapnames-related errors.

    This is the root exception class for all errors raised by the
    package, carrying an optional dictionary of error context.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize adapnames error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class IndexOutOfRangeError(NamesError, IndexError):
    """
    Raised when a component index lies outside the valid range.

    The valid range depends on the operation: component access, replacement
    and removal accept ``0 <= index < size``, insertion also accepts
    ``index == size``.
    """

    def __init__(self, index: int, size: int, operation: str = ""):
        """
        Initialize index error.

        Args:
            index: Rejected component index
            size: Number of components at the time of the call
            operation: Name of the operation that rejected the index
        """
        details = {'size': size}
        if operation:
            details['operation'] = operation

        super().__init__(f"index out of bounds: {index}", details)
        self.index = index
        self.size = size
        self.operation = operation
