"""
GetUs.Fit API - Authentication Service.

JWT token generation/verification and password hashing utilities.
"""

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Optional, Dict, Any
import logging
import os
import secrets

import bcrypt
from jose import jwt, JWTError

from settings import settings
from app.utils.errors import AuthenticationError

logger = logging.getLogger(__name__)


# Maximum password length for bcrypt (72 bytes)
MAX_PASSWORD_BYTES = 72

CLAIM_FIELDS = ("sub", "username", "role")

_secret_key: Optional[str] = None


def get_secret_key() -> str:
    """
    Return the JWT signing secret.

    Uses SECRET_KEY when configured. Otherwise a random secret is generated
    on first use and persisted to JWT_SECRET_FILE (mode 0600) so tokens
    survive restarts.

    Returns:
        str: Signing secret.
    """
    global _secret_key
    if _secret_key is None:
        if settings.SECRET_KEY:
            _secret_key = settings.SECRET_KEY
        else:
            secret_file = Path(settings.JWT_SECRET_FILE)
            if secret_file.exists():
                _secret_key = secret_file.read_text().strip()
            else:
                _secret_key = secrets.token_hex(48)
                fd = os.open(secret_file, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
                with os.fdopen(fd, "w") as handle:
                    handle.write(_secret_key)
                logger.warning(f"SECRET_KEY not set - generated a new one in {secret_file}")
    return _secret_key


def _prepare_password(password: str) -> bytes:
    """
    Prepare password for bcrypt hashing.

    Bcrypt only uses the first 72 bytes of any password.

    Args:
        password: Plain text password.

    Returns:
        bytes: UTF-8 encoded password, truncated to 72 bytes.
    """
    return password.encode('utf-8')[:MAX_PASSWORD_BYTES]


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password to hash.

    Returns:
        str: Bcrypt hashed password.

    Example:
        >>> hashed = hash_password("mysecurepassword")
        >>> verify_password("mysecurepassword", hashed)
        True
    """
    password_bytes = _prepare_password(password)
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    hashed = bcrypt.hashpw(password_bytes, salt)
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against a hash.

    Args:
        plain_password: Plain text password to verify.
        hashed_password: Bcrypt hashed password to check against.

    Returns:
        bool: True if password matches, False otherwise.
    """
    try:
        password_bytes = _prepare_password(plain_password)
        hashed_bytes = hashed_password.encode('utf-8')
        return bcrypt.checkpw(password_bytes, hashed_bytes)
    except ValueError as e:
        logger.warning(f"Password verification failed: {e}")
        return False


def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a JWT access token.

    Args:
        data: Token payload; must include 'sub', 'username' and 'role'.
        expires_delta: Optional custom expiration time.

    Returns:
        str: Encoded JWT access token.

    Example:
        >>> token = create_access_token({"sub": "1", "username": "alice", "role": "user"})
        >>> len(token) > 0
        True
    """
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )

    to_encode.update({
        "exp": expire,
        "iat": datetime.now(timezone.utc)
    })

    return jwt.encode(
        to_encode,
        get_secret_key(),
        algorithm=settings.ALGORITHM
    )


def issue_token_for(account) -> str:
    """Sign a claim for an account's current id, username and role."""
    return create_access_token({
        "sub": str(account.id),
        "username": account.username,
        "role": account.role,
    })


def verify_token(token: str) -> Dict[str, Any]:
    """
    Verify and decode a JWT access token.

    Args:
        token: JWT access token to verify.

    Returns:
        Dict[str, Any]: Token payload.

    Raises:
        AuthenticationError: Signature, expiry or claim shape is invalid.
    """
    try:
        payload = jwt.decode(
            token,
            get_secret_key(),
            algorithms=[settings.ALGORITHM]
        )
    except JWTError as e:
        logger.info(f"Token verification failed: {e}")
        raise AuthenticationError("Invalid or expired token.")

    if any(field not in payload for field in CLAIM_FIELDS):
        raise AuthenticationError("Invalid or expired token.", detail="Token payload is incomplete")
    try:
        int(payload["sub"])
    except (TypeError, ValueError):
        raise AuthenticationError("Invalid or expired token.", detail="Token subject is malformed")
    return payload
