"""
GetUs.Fit API - Administration Schemas.

Request/response schemas for role management and trainer assignments.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class RoleUpdateRequest(BaseModel):
    """
    Schema for changing an account's role.

    The value is not restricted here; unknown roles are rejected by the
    authorization engine with a validation error naming the allowed values.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"role": "trainer"}}
    )

    role: str = Field(..., description="New role: user, trainer or admin")


class AssignmentRequest(BaseModel):
    """
    Schema for assigning a user to a trainer.

    Attributes:
        trainer_id: Account holding the trainer role.
        user_id: Account to be coached.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"trainer_id": 3, "user_id": 2}}
    )

    trainer_id: int = Field(..., description="Trainer account ID")
    user_id: int = Field(..., description="User account ID")


class AssignmentResponse(BaseModel):
    """A trainer -> user edge."""

    model_config = ConfigDict(from_attributes=True)

    trainer_id: int
    user_id: int
    trainer_username: Optional[str] = None
    user_username: Optional[str] = None
    created_at: Optional[datetime] = None
