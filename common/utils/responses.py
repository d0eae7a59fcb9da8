"""
JSON envelopes for endpoints that do not return a bare resource.

Error bodies put their payload under "detail", the same key FastAPI uses
when rendering an APIException, so clients read one shape for both.
"""

from typing import Any, Optional, Dict


def success_response(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    """Wrap data as {"success": true, "data": ..., "message": ...}, omitting empty keys."""
    response: Dict[str, Any] = {"success": True}
    if data is not None:
        response["data"] = data
    if message:
        response["message"] = message
    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    errors: Optional[list] = None,
) -> Dict[str, Any]:
    """
    Build a failure body.

    Args:
        message: Human-readable summary, never empty
        code: Machine-readable error code, e.g. "VALIDATION_ERROR"
        errors: Per-field problems

    Returns:
        {"success": false, "detail": {"message", "code"?, "errors"?}}
    """
    detail: Dict[str, Any] = {"message": message}
    if code:
        detail["code"] = code
    if errors:
        detail["errors"] = errors
    return {"success": False, "detail": detail}
