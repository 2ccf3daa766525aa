"""
LiftLog API - Authentication Middleware.

JWT verification for protected routes.
"""

from typing import Optional

from fastapi import Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from liftlog.services.auth import get_user_id_from_token
from liftlog.utils.errors import AuthenticationError


class JWTBearer(HTTPBearer):
    """
    JWT Bearer token authentication.

    Custom HTTPBearer that resolves the user ID carried in the token's
    ``sub`` claim.

    Attributes:
        auto_error: Whether to automatically raise errors.
    """

    def __init__(self, auto_error: bool = True):
        super().__init__(auto_error=auto_error)

    async def __call__(self, request: Request) -> Optional[str]:
        """
        Verify JWT token from Authorization header.

        Args:
            request: FastAPI request object.

        Returns:
            Optional[str]: User ID from token if valid.

        Raises:
            AuthenticationError: 401 if the token is invalid or expired.
        """
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)

        if not credentials:
            return None

        user_id = get_user_id_from_token(credentials.credentials)
        if not user_id:
            if self.auto_error:
                raise AuthenticationError("Invalid or expired token")
            return None

        return user_id


# Global JWT bearer instance for dependency injection
jwt_bearer = JWTBearer()
