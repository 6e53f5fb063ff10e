"""
Utilities module - Common helpers for API responses and exceptions.
"""

from common.utils.responses import ok_response, error_response
from common.utils.exceptions import (
    APIException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    InternalServerException,
)

__all__ = [
    "ok_response",
    "error_response",
    "APIException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "InternalServerException",
]
