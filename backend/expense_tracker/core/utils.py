"""
Utility functions for the application.
"""
from typing import Any, Dict


def format_response(data: Any = None, message: str = "Success") -> Dict[str, Any]:
    """Format API response. ``data`` is omitted when there is nothing to return."""
    response = {"message": message}
    if data is not None:
        response["data"] = data
    return response


def format_error(message: str, error: str) -> Dict[str, Any]:
    """Format error response."""
    return {
        "message": message,
        "error": error
    }
