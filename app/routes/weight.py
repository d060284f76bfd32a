"""
GetUs.Fit API - Weight Routes.

One weight entry per caller per date.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_caller
from app.schemas.plan import OkResponse
from app.services.authorization import Caller, Operation, authorize, enforce
from app.stores.weights import WeightStore
from app.utils.errors import NotFoundError, ValidationError
from app.utils.security import is_date_key

router = APIRouter()


@router.get("")
def list_weights(
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
) -> List[Dict[str, Any]]:
    """List the caller's weight entries, oldest date first."""
    scope = enforce(authorize(caller, Operation.LIST_WEIGHTS))
    return WeightStore(db).list_by_owner(scope.owner_id)


@router.post(
    "",
    response_model=OkResponse,
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True
)
def upsert_weight(
    entry: Dict[str, Any] = Body(...),
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """Record the weight for a date, replacing any entry already there."""
    scope = enforce(authorize(caller, Operation.UPSERT_WEIGHT))
    if not is_date_key(entry.get("date")) or not entry.get("weight"):
        raise ValidationError("Date and weight are required.")
    WeightStore(db).upsert_by_owner_and_date(scope.owner_id, entry)
    return OkResponse()


@router.delete("/{date}", response_model=OkResponse, response_model_exclude_none=True)
def delete_weight(
    date: str,
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    scope = enforce(authorize(caller, Operation.DELETE_WEIGHT))
    if not WeightStore(db).delete_by_date_and_owner(date, scope.owner_id):
        raise NotFoundError("Weight entry not found.")
    return OkResponse()
