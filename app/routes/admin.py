# app/routes/admin.py
"""
GetUs.Fit API - Administration Routes.

Account roles, account deletion and trainer -> user assignments. Every
endpoint requires the admin role.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging

from app.database import get_db
from app.dependencies import get_current_caller
from app.models.assignment import Assignment
from app.schemas.admin import AssignmentRequest, AssignmentResponse, RoleUpdateRequest
from app.schemas.auth import AccountResponse
from app.schemas.plan import OkResponse
from app.services.authorization import Caller, Operation, Target, authorize, enforce
from app.stores.accounts import AccountStore
from app.stores.assignments import AssignmentGraph
from app.utils.errors import NotFoundError

logger = logging.getLogger(__name__)
router = APIRouter()


def _assignment_response(edge: Assignment) -> AssignmentResponse:
    return AssignmentResponse(
        trainer_id=edge.trainer_id,
        user_id=edge.user_id,
        trainer_username=edge.trainer.username,
        user_username=edge.user.username,
        created_at=edge.created_at,
    )


@router.get("/users", response_model=List[AccountResponse])
def list_accounts(
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """List every account with its role."""
    enforce(authorize(caller, Operation.LIST_ACCOUNTS))
    return AccountStore(db).list_all()


@router.put("/users/{account_id}/role", response_model=AccountResponse)
def update_account_role(
    account_id: int,
    request: RoleUpdateRequest,
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    Change an account's role.

    The change applies to the account's next request, including requests
    made with tokens issued before the change. Assignment edges are left in
    place when a trainer is demoted.

    Raises:
        NotFoundError 404: No such account
        ValidationError 400: Unknown role
    """
    store = AccountStore(db)
    account = store.get(account_id)
    enforce(authorize(caller, Operation.UPDATE_ACCOUNT_ROLE, Target(
        owner_id=account_id,
        exists=account is not None,
        requested_role=request.role,
    )))

    previous = account.role
    store.set_role(account, request.role)
    logger.info(
        f"Admin {caller.username} changed role of {account.username}: {previous} -> {account.role}"
    )
    return account


@router.delete("/users/{account_id}", response_model=OkResponse, response_model_exclude_none=True)
def delete_account(
    account_id: int,
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    Delete an account with all of its data, plans and assignment edges.

    Raises:
        NotFoundError 404: No such account
        ValidationError 400: Admin deleting their own account
    """
    store = AccountStore(db)
    account = store.get(account_id)
    enforce(authorize(caller, Operation.DELETE_ACCOUNT, Target(
        owner_id=account_id,
        exists=account is not None,
    )))

    username = account.username
    store.delete(account)
    logger.info(f"Admin {caller.username} deleted account {username} (id={account_id})")
    return OkResponse()


@router.get("/assignments", response_model=List[AssignmentResponse])
def list_assignments(
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    enforce(authorize(caller, Operation.LIST_ASSIGNMENTS))
    return [_assignment_response(edge) for edge in AssignmentGraph(db).list_all()]


@router.post(
    "/assignments",
    response_model=AssignmentResponse,
    status_code=status.HTTP_201_CREATED
)
def create_assignment(
    request: AssignmentRequest,
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """
    Assign a user to a trainer.

    Raises:
        NotFoundError 404: User does not exist
        ValidationError 400: Trainer does not hold the trainer role, or self-assignment
        ConflictError 409: Already assigned
    """
    accounts = AccountStore(db)
    trainer = accounts.get(request.trainer_id)
    user = accounts.get(request.user_id)
    enforce(authorize(caller, Operation.CREATE_ASSIGNMENT, Target(
        owner_id=request.user_id,
        exists=user is not None,
        trainer_id=request.trainer_id,
        trainer_role=trainer.role if trainer else None,
    )))

    edge = AssignmentGraph(db).add(request.trainer_id, request.user_id)
    logger.info(f"Admin {caller.username} assigned {user.username} to trainer {trainer.username}")
    return _assignment_response(edge)


@router.delete(
    "/assignments/{trainer_id}/{user_id}",
    response_model=OkResponse,
    response_model_exclude_none=True
)
def delete_assignment(
    trainer_id: int,
    user_id: int,
    caller: Caller = Depends(get_current_caller),
    db: Session = Depends(get_db)
):
    """Remove a trainer -> user edge. Plans already assigned stay visible to the user."""
    enforce(authorize(caller, Operation.DELETE_ASSIGNMENT))
    if not AssignmentGraph(db).remove(trainer_id, user_id):
        raise NotFoundError("Assignment not found.")
    logger.info(f"Admin {caller.username} removed assignment trainer={trainer_id} user={user_id}")
    return OkResponse()
