# app/routes/auth.py
"""
GetUs.Fit API - Authentication Routes.

Register, login and current-account endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from app.database import get_db
from app.dependencies import get_current_caller
from app.schemas.auth import AccountResponse, LoginRequest, RegisterRequest, TokenResponse
from app.services.auth import hash_password, issue_token_for, verify_password
from app.services.authorization import Caller, Operation, authorize, enforce
from app.stores.accounts import AccountStore
from app.utils.errors import AuthenticationError, ValidationError
from app.utils.security import sanitize_string, validate_password_strength, validate_username

logger = logging.getLogger(__name__)
router = APIRouter()


def _token_response(account) -> TokenResponse:
    return TokenResponse(
        token=issue_token_for(account),
        token_type="bearer",
        user_id=account.id,
        username=account.username,
        role=account.role,
    )


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, db: Session = Depends(get_db)):
    """
    Register a new account with the ``user`` role.

    Args:
        request: RegisterRequest with username, password

    Returns:
        TokenResponse with a token for the new account

    Raises:
        ValidationError 400: Username or password format
        ConflictError 409: Username already taken (case-insensitive)
    """
    username = sanitize_string(request.username, max_length=64)

    is_valid, error = validate_username(username)
    if not is_valid:
        raise ValidationError(error)
    is_valid, error = validate_password_strength(request.password)
    if not is_valid:
        raise ValidationError(error)

    account = AccountStore(db).create(username, hash_password(request.password))
    logger.info(f"New account registered: {account.username} (id={account.id})")

    return _token_response(account)


@router.post("/login", response_model=TokenResponse)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    """
    Login and return a token carrying the account's current role.

    Raises:
        AuthenticationError 401: Unknown username or wrong password
    """
    account = AccountStore(db).find_by_username(sanitize_string(request.username, max_length=64))

    if not account or not verify_password(request.password, account.password_hash):
        logger.info(f"Failed login attempt for username: {request.username!r}")
        raise AuthenticationError("Invalid username or password.")

    logger.info(f"Account logged in: {account.username}")
    return _token_response(account)


@router.get("/me", response_model=AccountResponse)
def me(caller: Caller = Depends(get_current_caller)):
    """Return the authenticated account with its current role."""
    enforce(authorize(caller, Operation.READ_ACCOUNT))
    return AccountResponse(id=caller.id, username=caller.username, role=caller.role.value)
