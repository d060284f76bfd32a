"""GetUs.Fit API - Utilities Package."""

from app.utils.security import (
    sanitize_string,
    is_date_key,
    is_numeric,
    validate_password_strength,
    validate_username,
)
from app.utils.errors import (
    GetUsFitException,
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UpstreamError,
    ValidationError,
)

__all__ = [
    "is_date_key",
    "is_numeric",
    "sanitize_string",
    "validate_password_strength",
    "validate_username",
    "GetUsFitException",
    "AuthenticationError",
    "ConflictError",
    "ForbiddenError",
    "NotFoundError",
    "UpstreamError",
    "ValidationError",
]
