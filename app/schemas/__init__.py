"""GetUs.Fit API - Pydantic Schemas Package."""

from app.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    TokenResponse,
    AccountResponse,
)
from app.schemas.admin import (
    RoleUpdateRequest,
    AssignmentRequest,
    AssignmentResponse,
)
from app.schemas.plan import (
    PlanCreateRequest,
    PlanAssignRequest,
    OkResponse,
)
from app.schemas.food import FoodItem

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "TokenResponse",
    "AccountResponse",
    "RoleUpdateRequest",
    "AssignmentRequest",
    "AssignmentResponse",
    "PlanCreateRequest",
    "PlanAssignRequest",
    "OkResponse",
    "FoodItem",
]
