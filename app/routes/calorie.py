"""
GetUs.Fit API - Calorie Routes.

Meals logged by the caller, each with a sequential id.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session
import logging

from app.database import get_db
from app.dependencies import get_current_caller
from app.schemas.plan import OkResponse
from app.services.authorization import Caller, Operation, authorize, enforce
from app.stores.calories import CalorieStore
from app.utils.errors import NotFoundError, ValidationError
from app.utils.security import is_date_key, is_numeric

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
def list_calories(
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
) -> List[Dict[str, Any]]:
    """List the caller's meals by date then id, each carrying its id."""
    scope = enforce(authorize(caller, Operation.LIST_CALORIES))
    return CalorieStore(db).list_by_owner(scope.owner_id)


@router.post(
    "",
    response_model=OkResponse,
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True
)
def create_calorie(
    entry: Dict[str, Any] = Body(...),
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    Log a meal.

    Raises:
        ValidationError 400: Missing date or food, or calories not a number
    """
    scope = enforce(authorize(caller, Operation.CREATE_CALORIE))
    if not is_date_key(entry.get("date")) or not entry.get("food") or "calories" not in entry:
        raise ValidationError("Date, food and calories are required.")
    if not is_numeric(entry["calories"]):
        raise ValidationError("Calories must be a number.")

    entry_id = CalorieStore(db).create(scope.owner_id, entry)
    return OkResponse(id=entry_id)


@router.delete("/{entry_id}", response_model=OkResponse, response_model_exclude_none=True)
def delete_calorie(
    entry_id: str,
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    scope = enforce(authorize(caller, Operation.DELETE_CALORIE))
    try:
        entry_id = int(entry_id)
    except ValueError:
        raise ValidationError("Invalid id.")
    if not CalorieStore(db).delete_by_id_and_owner(entry_id, scope.owner_id):
        raise NotFoundError("Calorie entry not found.")
    return OkResponse()
