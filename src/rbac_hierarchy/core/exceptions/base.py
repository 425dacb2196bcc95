"""Base exceptions for rbac-hierarchy.

All exceptions inherit from RbacHierarchyError and carry an error code and
structured details for callers that report or log them.
"""

from typing import Any, Dict, Optional


class RbacHierarchyError(Exception):
    """Base exception for all rbac-hierarchy errors."""

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


class ConfigurationError(RbacHierarchyError):
    """Raised when settings are invalid."""
    pass


def create_error_response(exception: RbacHierarchyError) -> Dict[str, Any]:
    """Create a serializable error payload from an exception.

    Args:
        exception: The rbac-hierarchy exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
