"""
FastAPI authentication dependencies.

Provides factory functions to create auth dependencies that can be
injected into route handlers. Works with any AuthProvider implementation.

Example:
    from common.auth import FirebaseAuth, create_auth_dependency

    auth = FirebaseAuth(credentials_path="serviceAccount.json")
    get_current_user_id = create_auth_dependency(lambda: auth)

    @app.get("/profile")
    async def get_profile(user_id: str = Depends(get_current_user_id)):
        return {"user_id": user_id}
"""

import logging
from typing import Awaitable, Callable, Optional

from fastapi import Header

from common.auth.base import AuthProvider
from common.utils.exceptions import (
    UnauthorizedException,
    ForbiddenException,
    InternalServerException,
)

logger = logging.getLogger(__name__)


def create_auth_dependency(
    get_auth_provider: Callable[[], AuthProvider],
    header_name: str = "Authorization",
    scheme: str = "Bearer",
):
    """
    Factory to create FastAPI auth dependencies.

    Every failure (missing header, wrong scheme, bad token) produces the
    same 401 so callers cannot tell a missing credential from a rejected one.

    Args:
        get_auth_provider: Callable that returns the AuthProvider instance
        header_name: Header to extract token from (default: Authorization)
        scheme: Auth scheme prefix (default: Bearer)

    Returns:
        A FastAPI dependency function that extracts and verifies the user ID
    """

    async def get_current_user_id(
        authorization: Optional[str] = Header(None, alias=header_name),
    ) -> str:
        """
        Extract and verify user ID from the authorization header.

        Raises:
            UnauthorizedException: If token is missing, invalid, or expired
            InternalServerException: If the identity provider cannot be reached
        """
        if not authorization:
            logger.debug("Rejected request: missing authorization header")
            raise UnauthorizedException()

        prefix = f"{scheme} "
        if not authorization.startswith(prefix):
            logger.debug(f"Rejected request: expected {scheme} scheme")
            raise UnauthorizedException()

        token = authorization[len(prefix):].strip()
        if not token:
            logger.debug("Rejected request: empty token")
            raise UnauthorizedException()

        auth = get_auth_provider()
        try:
            payload = await auth.verify_token(token)
        except ValueError as e:
            logger.debug(f"Rejected request: {e}")
            raise UnauthorizedException()
        except Exception as e:
            logger.error(f"Token verification unavailable: {e}")
            raise InternalServerException("Failed to verify credentials")

        user_id = payload.get("sub") or payload.get("uid")
        if not user_id:
            logger.debug("Rejected request: token missing user ID")
            raise UnauthorizedException()

        return user_id

    return get_current_user_id


def create_admin_dependency(
    get_auth_provider: Callable[[], AuthProvider],
    is_admin_check: Callable[[str], Awaitable[bool]],
    header_name: str = "Authorization",
    scheme: str = "Bearer",
):
    """
    Factory to create admin-only auth dependency.

    Verifies both authentication and admin status.

    Args:
        get_auth_provider: Callable that returns the AuthProvider instance
        is_admin_check: Async callable that checks if user_id is an admin
        header_name: Header to extract token from
        scheme: Auth scheme prefix

    Returns:
        A FastAPI dependency that returns user_id for admin users only
    """
    get_current_user_id = create_auth_dependency(
        get_auth_provider,
        header_name,
        scheme,
    )

    async def get_admin_user_id(
        authorization: Optional[str] = Header(None, alias=header_name),
    ) -> str:
        """
        Verify user is authenticated and is an admin.

        Raises:
            UnauthorizedException: If not authenticated
            ForbiddenException: If not an admin
            InternalServerException: If the admin lookup itself fails
        """
        user_id = await get_current_user_id(authorization)

        try:
            is_admin = await is_admin_check(user_id)
        except Exception as e:
            logger.error(f"Admin lookup failed for {user_id}: {e}")
            raise InternalServerException("Failed to verify admin access")

        if not is_admin:
            raise ForbiddenException("Admin access required")

        return user_id

    return get_admin_user_id
