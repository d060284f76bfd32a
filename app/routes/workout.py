# app/routes/workout.py
"""
GetUs.Fit API - Workout Routes.

Log, list and delete the caller's workout sessions.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
import logging

from app.database import get_db
from app.dependencies import get_current_caller
from app.schemas.plan import OkResponse
from app.services.authorization import Caller, Operation, authorize, enforce
from app.stores.workouts import WorkoutStore
from app.utils.errors import NotFoundError, ValidationError
from app.utils.security import is_date_key

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
def list_workouts(
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
) -> List[Dict[str, Any]]:
    """List the caller's workouts, newest date first."""
    scope = enforce(authorize(caller, Operation.LIST_WORKOUTS))
    return WorkoutStore(db).list_by_owner(scope.owner_id)


@router.post(
    "",
    response_model=OkResponse,
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True
)
def create_workout(
    session: Dict[str, Any] = Body(...),
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    Log a workout session.

    Requires ``date`` and an ``exercises`` list; everything else is stored
    as sent. A client-supplied ``id`` is kept; when none is sent, or another
    account already uses it, one is generated.

    Raises:
        ValidationError 400: Missing date or exercises
        ConflictError 409: Caller already has a workout with this id
    """
    scope = enforce(authorize(caller, Operation.CREATE_WORKOUT))

    if not is_date_key(session.get("date")) or not isinstance(session.get("exercises"), list):
        raise ValidationError("Invalid workout data.")

    workout_id = session.get("id")
    workout_id = WorkoutStore(db).create(
        scope.owner_id,
        session,
        workout_id=str(workout_id) if workout_id else None
    )
    logger.info(f"Workout {workout_id} logged for account {scope.owner_id}")
    return OkResponse(id=workout_id)


@router.delete("/{workout_id}", response_model=OkResponse, response_model_exclude_none=True)
def delete_workout(
    workout_id: str,
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """Delete one of the caller's workouts; someone else's id reads as not found."""
    scope = enforce(authorize(caller, Operation.DELETE_WORKOUT))
    if not WorkoutStore(db).delete_by_id_and_owner(workout_id, scope.owner_id):
        raise NotFoundError("Workout not found.")
    return OkResponse()
