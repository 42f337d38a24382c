"""Base exceptions for garbageman-embassy.

This module defines the root of the exception hierarchy. Every error raised by
the package carries an error code and structured details so the procedure
layer can hand the host a structured result instead of a traceback.
"""

from typing import Any, Dict, Optional


class EmbassyError(Exception):
    """Base exception for all garbageman-embassy errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: EmbassyError) -> Dict[str, Any]:
    """Create the host-facing error result from an exception.

    Args:
        exception: The garbageman-embassy exception

    Returns:
        Error result dictionary in the host's ``{"error": ...}`` shape
    """
    return {
        "error": exception.message,
        "error-code": exception.error_code,
        "details": exception.details,
    }
