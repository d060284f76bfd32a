# app/routes/trainer.py
"""
GetUs.Fit API - Trainer Routes.

Assigned users, their weight history and exercise plans. Requires the
trainer or admin role; admins act on their own assignment edges and plans
like any trainer, except that they see every plan in the plan listing.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from app.database import get_db
from app.dependencies import get_current_caller
from app.schemas.auth import AccountResponse
from app.schemas.plan import OkResponse, PlanAssignRequest, PlanCreateRequest
from app.services.authorization import (
    Caller,
    Operation,
    ScopeKind,
    Target,
    authorize,
    enforce,
)
from app.stores.assignments import AssignmentGraph
from app.stores.plans import PlanStore
from app.stores.weights import WeightStore
from app.utils.errors import ConflictError, NotFoundError

logger = logging.getLogger(__name__)
router = APIRouter()


def _plan_target(caller: Caller, plan, user_id: int, db: Session) -> Target:
    """Facts for operations on an existing plan and one of the caller's users."""
    return Target(
        owner_id=plan.owner_id if plan else None,
        exists=plan is not None,
        assigned=AssignmentGraph(db).is_assigned(caller.id, user_id),
    )


@router.get("/users", response_model=List[AccountResponse])
def list_assigned_users(
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """List the users assigned to the caller."""
    scope = enforce(authorize(caller, Operation.LIST_ASSIGNED_USERS))
    return AssignmentGraph(db).list_users_for(scope.owner_id)


@router.get("/users/{user_id}/weights")
def read_assigned_user_weights(
    user_id: int,
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
) -> List[Dict[str, Any]]:
    """
    Read an assigned user's weight entries, oldest date first.

    Raises:
        ForbiddenError 403: User is not assigned to the caller
    """
    scope = enforce(authorize(caller, Operation.READ_ASSIGNED_USER_WEIGHTS, Target(
        owner_id=user_id,
        assigned=AssignmentGraph(db).is_assigned(caller.id, user_id),
    )))
    return WeightStore(db).list_by_owner(scope.owner_id)


@router.get("/plans")
def list_plans(
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
) -> List[Dict[str, Any]]:
    """List the caller's plans; admins see every plan."""
    scope = enforce(authorize(caller, Operation.LIST_OWN_PLANS))
    store = PlanStore(db)
    if scope.kind is ScopeKind.ALL:
        plans = store.list_all()
    else:
        plans = store.list_by_creator(scope.owner_id)
    return [plan.to_dict() for plan in plans]


@router.post(
    "/plans",
    response_model=OkResponse,
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True
)
def create_plan(
    request: PlanCreateRequest,
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """Create a plan owned by the caller."""
    scope = enforce(authorize(caller, Operation.CREATE_PLAN))
    plan_id = PlanStore(db).create(scope.owner_id, request.model_dump(exclude_none=True))
    logger.info(f"Trainer {caller.username} created plan {plan_id} ({request.name})")
    return OkResponse(id=plan_id)


@router.delete("/plans/{plan_id}", response_model=OkResponse, response_model_exclude_none=True)
def delete_plan(
    plan_id: str,
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    Delete one of the caller's plans along with its assignments.

    Raises:
        NotFoundError 404: No such plan, or it belongs to someone else
    """
    store = PlanStore(db)
    plan = store.get(plan_id)
    scope = enforce(authorize(caller, Operation.DELETE_OWN_PLAN, Target(
        owner_id=plan.owner_id if plan else None,
        exists=plan is not None,
    )))
    store.delete_by_id_and_owner(plan_id, scope.owner_id)
    logger.info(f"Trainer {caller.username} deleted plan {plan_id}")
    return OkResponse()


@router.post(
    "/plans/{plan_id}/assignments",
    response_model=OkResponse,
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True
)
def assign_plan(
    plan_id: str,
    request: PlanAssignRequest,
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    Assign one of the caller's plans to one of the caller's users.

    Raises:
        NotFoundError 404: No such plan, or it belongs to someone else
        ForbiddenError 403: User is not assigned to the caller
        ConflictError 409: Plan already assigned to the user
    """
    store = PlanStore(db)
    plan = store.get(plan_id)
    enforce(authorize(caller, Operation.ASSIGN_PLAN, _plan_target(caller, plan, request.user_id, db)))

    if not store.assign(plan_id, request.user_id):
        raise ConflictError("Plan is already assigned to this user.")
    logger.info(f"Trainer {caller.username} assigned plan {plan_id} to user {request.user_id}")
    return OkResponse()


@router.delete(
    "/plans/{plan_id}/assignments/{user_id}",
    response_model=OkResponse,
    response_model_exclude_none=True
)
def unassign_plan(
    plan_id: str,
    user_id: int,
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """Withdraw one of the caller's plans from one of the caller's users."""
    store = PlanStore(db)
    plan = store.get(plan_id)
    enforce(authorize(caller, Operation.UNASSIGN_PLAN, _plan_target(caller, plan, user_id, db)))

    if not store.unassign(plan_id, user_id):
        raise NotFoundError("Plan is not assigned to this user.")
    logger.info(f"Trainer {caller.username} unassigned plan {plan_id} from user {user_id}")
    return OkResponse()
