# app/routes/user.py
"""
GetUs.Fit API - User Data Routes.

Reset of everything the caller has tracked.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_caller
from app.schemas.plan import OkResponse
from app.services.authorization import Caller, Operation, authorize, enforce
from app.stores.reset import reset_owner_data

router = APIRouter()


@router.delete("/data", response_model=OkResponse, response_model_exclude_none=True)
def reset_data(
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    Delete the caller's profile, workouts, weights and calories.

    The account, its role and assignment edges are kept. Runs as one
    transaction: nothing is deleted if any step fails.
    """
    scope = enforce(authorize(caller, Operation.RESET_DATA))
    reset_owner_data(db, scope.owner_id)
    return OkResponse()
