"""
GetUs.Fit API - FastAPI Dependencies.

Dependency injection helpers for routes.
"""

from typing import Any, Dict

from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth import jwt_bearer
from app.models.account import Role
from app.services.authorization import Caller
from app.stores.accounts import AccountStore
from app.utils.errors import AuthenticationError


def get_current_caller(
    claims: Dict[str, Any] = Depends(jwt_bearer),
    db: Session = Depends(get_db)
) -> Caller:
    """
    Resolve the verified claim into the caller for this request.

    The account is re-read on every request so role changes and deletions
    take effect immediately, even for tokens issued earlier.

    Args:
        claims: Decoded token claim from jwt_bearer.
        db: Request database session.

    Returns:
        Caller: Id, username and current role.

    Raises:
        AuthenticationError: The account behind the token no longer exists.
    """
    account = AccountStore(db).get(int(claims["sub"]))
    if account is None:
        raise AuthenticationError("Invalid or expired token.", detail="Account no longer exists")
    return Caller(id=account.id, username=account.username, role=Role(account.role))
