"""
Standard API response helpers.

Provides consistent response bodies for acknowledgements and errors.

Example:
    from common.utils import ok_response

    @app.put("/settings")
    async def update_settings():
        ...
        return ok_response()
"""

from typing import Any, Optional, Dict


def ok_response() -> Dict[str, Any]:
    """Acknowledgement body returned by mutating endpoints."""
    return {"ok": True}


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Any] = None,
    errors: Optional[list] = None,
) -> Dict[str, Any]:
    """
    Create a standard error body.

    Uses the same ``{"detail": {...}}`` envelope as APIException so clients
    parse one shape regardless of where the error was raised.

    Args:
        message: Human-readable error message
        code: Machine-readable error code (e.g., "VENDOR_NOT_FOUND")
        details: Additional error details
        errors: List of specific errors (for validation errors)

    Returns:
        Dictionary with the error detail
    """
    detail: Dict[str, Any] = {"message": message}

    if code:
        detail["code"] = code

    if details is not None:
        detail["details"] = details

    if errors:
        detail["errors"] = errors

    return {"detail": detail}
