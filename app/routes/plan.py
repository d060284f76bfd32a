"""
GetUs.Fit API - Assigned Plan Routes.

Plans trainers have assigned to the caller.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_caller
from app.services.authorization import Caller, Operation, authorize, enforce
from app.stores.plans import PlanStore

router = APIRouter()


@router.get("")
def list_assigned_plans(
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
) -> List[Dict[str, Any]]:
    """List every plan assigned to the caller, whichever trainer assigned it."""
    scope = enforce(authorize(caller, Operation.LIST_ASSIGNED_PLANS))
    return [plan.to_dict() for plan in PlanStore(db).list_assigned_to(scope.owner_id)]
