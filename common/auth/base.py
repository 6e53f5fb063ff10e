"""
Abstract authentication provider interface.

Defines the contract an identity provider must implement so the request
dependencies can verify callers without knowing which backend issued the
token.

Example:
    from common.auth import AuthProvider, FirebaseAuth

    def get_auth_provider(settings) -> AuthProvider:
        return FirebaseAuth(credentials_path=settings.FIREBASE_CREDENTIALS_PATH)
"""

from abc import ABC, abstractmethod
from typing import Dict, Any


class AuthProvider(ABC):
    """
    Abstract authentication provider.

    All methods are async to support both sync and async implementations.
    """

    @abstractmethod
    async def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify an authentication token.

        Args:
            token: The token to verify

        Returns:
            Dictionary containing decoded token claims (at minimum: sub/uid)

        Raises:
            ValueError: If token is invalid, expired, or revoked. Provider
                outages raise their own errors, not ValueError.
        """
        pass
