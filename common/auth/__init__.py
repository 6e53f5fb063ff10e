"""
Authentication module - Pluggable auth providers (Firebase).
"""

from common.auth.base import AuthProvider
from common.auth.firebase_auth import FirebaseAuth, get_firebase_app
from common.auth.dependencies import create_auth_dependency, create_admin_dependency

__all__ = [
    "AuthProvider",
    "FirebaseAuth",
    "get_firebase_app",
    "create_auth_dependency",
    "create_admin_dependency",
]
