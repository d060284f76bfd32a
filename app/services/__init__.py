"""GetUs.Fit API - Services Package."""

from .auth import (
    hash_password,
    verify_password,
    create_access_token,
    issue_token_for,
    verify_token,
)
from .authorization import (
    Allow,
    Caller,
    Deny,
    Operation,
    Scope,
    ScopeKind,
    Target,
    authorize,
    enforce,
)
from .food_service import FoodService, get_food_service

__all__ = [
    "hash_password",
    "verify_password",
    "create_access_token",
    "issue_token_for",
    "verify_token",
    "Allow",
    "Caller",
    "Deny",
    "Operation",
    "Scope",
    "ScopeKind",
    "Target",
    "authorize",
    "enforce",
    "FoodService",
    "get_food_service",
]
