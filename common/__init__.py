"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used across projects:

- database: Async Cloud Firestore client management
- auth: Pluggable authentication (Firebase)
- utils: Standard responses and exceptions
- config: Base settings class
"""

from common.database import Firestore
from common.auth import (
    AuthProvider,
    FirebaseAuth,
    create_auth_dependency,
    create_admin_dependency,
)
from common.utils import (
    ok_response,
    error_response,
    APIException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    InternalServerException,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "Firestore",
    # Auth
    "AuthProvider",
    "FirebaseAuth",
    "create_auth_dependency",
    "create_admin_dependency",
    # Utils
    "ok_response",
    "error_response",
    "APIException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "InternalServerException",
    # Config
    "BaseAppSettings",
]
