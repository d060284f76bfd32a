"""
GetUs.Fit API - Authentication Middleware.

JWT bearer verification for protected routes.
"""

from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.services.auth import verify_token
from app.utils.errors import AuthenticationError


class JWTBearer(HTTPBearer):
    """
    JWT Bearer token authentication.

    Custom HTTPBearer that validates JWT tokens on protected routes and
    returns the decoded claim.

    Attributes:
        auto_error: Whether to raise on a missing token instead of returning None.
    """

    def __init__(self, auto_error: bool = True):
        # Missing credentials are reported by us as 401, not by HTTPBearer as 403
        super().__init__(auto_error=False)
        self.require_token = auto_error

    async def __call__(self, request: Request) -> Optional[Dict[str, Any]]:
        """
        Verify JWT token from Authorization header.

        Args:
            request: FastAPI request object.

        Returns:
            Optional[Dict[str, Any]]: Decoded claim (sub, username, role, exp).

        Raises:
            AuthenticationError: Token missing, malformed, invalid or expired.
        """
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)

        if not credentials or credentials.scheme.lower() != "bearer":
            if self.require_token:
                raise AuthenticationError("Authentication required.")
            return None

        return verify_token(credentials.credentials)


# Global JWT bearer instance for dependency injection
jwt_bearer = JWTBearer()
