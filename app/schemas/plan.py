"""
GetUs.Fit API - Exercise Plan Schemas.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, ConfigDict


class PlanCreateRequest(BaseModel):
    """
    Schema for creating an exercise plan.

    Unknown fields are kept and stored with the plan.

    Attributes:
        name: Plan name.
        exercises: Ordered list of exercise documents.
        description: Optional free text.
    """

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "name": "Beginner Strength",
                "description": "Three full-body sessions a week",
                "exercises": [
                    {"name": "Squat", "sets": 3, "reps": 8},
                    {"name": "Bench Press", "sets": 3, "reps": 8}
                ]
            }
        }
    )

    name: str = Field(..., min_length=1, max_length=200, description="Plan name")
    exercises: List[Dict[str, Any]] = Field(..., min_length=1, description="Exercises in the plan")
    description: Optional[str] = Field(None, description="Plan description")


class PlanAssignRequest(BaseModel):
    """Schema for assigning a plan to one of the trainer's users."""

    model_config = ConfigDict(
        json_schema_extra={"example": {"user_id": 2}}
    )

    user_id: int = Field(..., description="Assigned user's account ID")


class OkResponse(BaseModel):
    """Acknowledgement of a mutation, with the new resource's id when one was created."""

    ok: bool = True
    id: Optional[Union[int, str]] = None
