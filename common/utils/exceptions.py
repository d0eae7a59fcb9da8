"""
HTTP exceptions carrying a message and a machine-readable code.

FastAPI renders them as {"detail": {"message": ..., "code": ...}}.
"""

from typing import Optional, Any, Dict
from fastapi import HTTPException


class APIException(HTTPException):
    """HTTPException whose detail is a {message, code, details} dict."""

    def __init__(
        self,
        status_code: int,
        message: str,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        detail: Dict[str, Any] = {"message": message}
        if code:
            detail["code"] = code
        if details is not None:
            detail["details"] = details
        super().__init__(status_code=status_code, detail=detail, headers=headers)

    @property
    def message(self) -> str:
        return self.detail["message"]


class BadRequestException(APIException):
    """400: the client sent something we will not store."""

    def __init__(self, message: str = "Bad request", code: str = "BAD_REQUEST", details: Optional[Any] = None):
        super().__init__(400, message, code, details)


class InternalServerException(APIException):
    """500: the request was fine but we could not complete it."""

    def __init__(self, message: str = "Internal server error", code: str = "INTERNAL_ERROR", details: Optional[Any] = None):
        super().__init__(500, message, code, details)
