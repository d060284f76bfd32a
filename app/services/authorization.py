"""
GetUs.Fit API - Authorization Engine.

Pure decision function deciding whether a caller may perform an operation on
a target, and which scope a listing runs under. Nothing here touches the
database: handlers look up the facts (resource owner, existence, assignment
edges, roles) and pass them in as a ``Target``.

Checks run in a fixed order and the first denial wins:

1. authentication - a verified caller is required
2. self-scope - callers always act on their own profile/workouts/weights/
   calories/assigned plans
3. role gate - admin-only and trainer-or-admin operations
4. ownership / assignment gate - plan ownership, trainer -> user edges,
   target existence
5. business rules - role value validity, no self-delete, trainer designation

Plan ownership failures are masked as NotFound so a trainer cannot probe for
plans created by someone else.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union
import logging

from app.models.account import Role
from app.utils.errors import (
    AuthenticationError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class ResourceKind(str, Enum):
    """Kinds of resources an operation acts on."""

    ACCOUNT = "account"
    ASSIGNMENT = "assignment"
    PROFILE = "profile"
    WORKOUT = "workout"
    WEIGHT = "weight"
    CALORIE = "calorie"
    PLAN = "plan"
    ASSIGNED_PLAN = "assigned_plan"
    FOOD = "food"


class Operation(str, Enum):
    """Every operation the request handlers can ask about."""

    # Any authenticated caller
    READ_ACCOUNT = "read-account"
    SEARCH_FOOD = "search-food"

    # Self-scoped
    READ_PROFILE = "read-profile"
    UPDATE_PROFILE = "update-profile"
    RESET_DATA = "reset-data"
    LIST_WORKOUTS = "list-workouts"
    CREATE_WORKOUT = "create-workout"
    DELETE_WORKOUT = "delete-workout"
    LIST_WEIGHTS = "list-weights"
    UPSERT_WEIGHT = "upsert-weight"
    DELETE_WEIGHT = "delete-weight"
    LIST_CALORIES = "list-calories"
    CREATE_CALORIE = "create-calorie"
    DELETE_CALORIE = "delete-calorie"
    LIST_ASSIGNED_PLANS = "list-assigned-plans"

    # Admin
    LIST_ACCOUNTS = "list-accounts"
    UPDATE_ACCOUNT_ROLE = "update-account-role"
    DELETE_ACCOUNT = "delete-account"
    LIST_ASSIGNMENTS = "list-assignments"
    CREATE_ASSIGNMENT = "create-assignment"
    DELETE_ASSIGNMENT = "delete-assignment"

    # Trainer (admin passes the role gate too)
    LIST_ASSIGNED_USERS = "list-assigned-users"
    CREATE_PLAN = "create-plan"
    LIST_OWN_PLANS = "list-own-plans"
    DELETE_OWN_PLAN = "delete-own-plan"
    ASSIGN_PLAN = "assign-plan-to-user"
    UNASSIGN_PLAN = "unassign-plan-from-user"
    READ_ASSIGNED_USER_WEIGHTS = "read-assigned-user-weights"


OPERATION_KINDS = {
    Operation.READ_ACCOUNT: ResourceKind.ACCOUNT,
    Operation.SEARCH_FOOD: ResourceKind.FOOD,
    Operation.READ_PROFILE: ResourceKind.PROFILE,
    Operation.UPDATE_PROFILE: ResourceKind.PROFILE,
    Operation.RESET_DATA: ResourceKind.PROFILE,
    Operation.LIST_WORKOUTS: ResourceKind.WORKOUT,
    Operation.CREATE_WORKOUT: ResourceKind.WORKOUT,
    Operation.DELETE_WORKOUT: ResourceKind.WORKOUT,
    Operation.LIST_WEIGHTS: ResourceKind.WEIGHT,
    Operation.UPSERT_WEIGHT: ResourceKind.WEIGHT,
    Operation.DELETE_WEIGHT: ResourceKind.WEIGHT,
    Operation.LIST_CALORIES: ResourceKind.CALORIE,
    Operation.CREATE_CALORIE: ResourceKind.CALORIE,
    Operation.DELETE_CALORIE: ResourceKind.CALORIE,
    Operation.LIST_ASSIGNED_PLANS: ResourceKind.ASSIGNED_PLAN,
    Operation.LIST_ACCOUNTS: ResourceKind.ACCOUNT,
    Operation.UPDATE_ACCOUNT_ROLE: ResourceKind.ACCOUNT,
    Operation.DELETE_ACCOUNT: ResourceKind.ACCOUNT,
    Operation.LIST_ASSIGNMENTS: ResourceKind.ASSIGNMENT,
    Operation.CREATE_ASSIGNMENT: ResourceKind.ASSIGNMENT,
    Operation.DELETE_ASSIGNMENT: ResourceKind.ASSIGNMENT,
    Operation.LIST_ASSIGNED_USERS: ResourceKind.ACCOUNT,
    Operation.CREATE_PLAN: ResourceKind.PLAN,
    Operation.LIST_OWN_PLANS: ResourceKind.PLAN,
    Operation.DELETE_OWN_PLAN: ResourceKind.PLAN,
    Operation.ASSIGN_PLAN: ResourceKind.PLAN,
    Operation.UNASSIGN_PLAN: ResourceKind.PLAN,
    Operation.READ_ASSIGNED_USER_WEIGHTS: ResourceKind.WEIGHT,
}

SELF_SCOPED_KINDS = frozenset({
    ResourceKind.PROFILE,
    ResourceKind.WORKOUT,
    ResourceKind.WEIGHT,
    ResourceKind.CALORIE,
    ResourceKind.ASSIGNED_PLAN,
})

AUTHENTICATED_OPERATIONS = frozenset({
    Operation.READ_ACCOUNT,
    Operation.SEARCH_FOOD,
})

ADMIN_OPERATIONS = frozenset({
    Operation.LIST_ACCOUNTS,
    Operation.UPDATE_ACCOUNT_ROLE,
    Operation.DELETE_ACCOUNT,
    Operation.LIST_ASSIGNMENTS,
    Operation.CREATE_ASSIGNMENT,
    Operation.DELETE_ASSIGNMENT,
})

TRAINER_OPERATIONS = frozenset({
    Operation.LIST_ASSIGNED_USERS,
    Operation.CREATE_PLAN,
    Operation.LIST_OWN_PLANS,
    Operation.DELETE_OWN_PLAN,
    Operation.ASSIGN_PLAN,
    Operation.UNASSIGN_PLAN,
    Operation.READ_ASSIGNED_USER_WEIGHTS,
})

TRAINER_ROLES = frozenset({Role.TRAINER, Role.ADMIN})

# Operations on an existing plan; only its creator may see it exists
PLAN_OWNER_OPERATIONS = frozenset({
    Operation.DELETE_OWN_PLAN,
    Operation.ASSIGN_PLAN,
    Operation.UNASSIGN_PLAN,
})

# Operations acting on one specific user, which must be assigned to the caller
ASSIGNED_USER_OPERATIONS = frozenset({
    Operation.READ_ASSIGNED_USER_WEIGHTS,
    Operation.ASSIGN_PLAN,
    Operation.UNASSIGN_PLAN,
})


@dataclass(frozen=True)
class Caller:
    """Verified identity of the account making the request."""

    id: int
    username: str
    role: Role


@dataclass(frozen=True)
class Target:
    """
    Facts about the target of an operation, looked up by the handler.

    Attributes:
        owner_id: Owner of the resource, or the account acted upon.
        exists: Whether the resource/account was found.
        assigned: Whether the edge (caller, subject user) exists.
        requested_role: Role value requested by update-account-role.
        trainer_id: Account designated as trainer by create-assignment.
        trainer_role: That account's current role (None if it does not exist).
    """

    owner_id: Optional[int] = None
    exists: bool = True
    assigned: bool = False
    requested_role: Optional[str] = None
    trainer_id: Optional[int] = None
    trainer_role: Optional[str] = None


class ScopeKind(str, Enum):
    """Implicit filter applied to a permitted read or listing."""

    OWNER = "owner"          # rows owned by owner_id
    CREATOR = "creator"      # plans created by owner_id
    ASSIGNED = "assigned"    # users assigned to trainer owner_id
    ALL = "all"              # no filter (admin)


@dataclass(frozen=True)
class Scope:
    kind: ScopeKind
    owner_id: Optional[int] = None


class DenialKind(str, Enum):
    AUTHENTICATION = "authentication"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"


@dataclass(frozen=True)
class Allow:
    scope: Scope

    @property
    def allowed(self) -> bool:
        return True


@dataclass(frozen=True)
class Deny:
    """
    Denied decision.

    ``masked`` marks a Forbidden that would confirm a resource exists; the
    existence-masking step turns it into NotFound.
    """

    kind: DenialKind
    reason: str
    masked: bool = False

    @property
    def allowed(self) -> bool:
        return False


Decision = Union[Allow, Deny]

FORBIDDEN_REASON = "You do not have permission to perform this action."
PLAN_NOT_FOUND_REASON = "Plan not found."


def _self_scope(caller: Caller, operation: Operation, target: Target) -> Optional[Decision]:
    """Allow callers to act on their own resources, whatever their role."""
    if OPERATION_KINDS[operation] not in SELF_SCOPED_KINDS:
        return None
    owner_id = caller.id if target.owner_id is None else target.owner_id
    if owner_id == caller.id:
        return Allow(Scope(ScopeKind.OWNER, caller.id))
    if operation is Operation.READ_ASSIGNED_USER_WEIGHTS:
        # Someone else's weights: falls through to the trainer gates
        return None
    return Deny(DenialKind.FORBIDDEN, FORBIDDEN_REASON)


def _role_gate(caller: Caller, operation: Operation) -> Optional[Deny]:
    if operation in ADMIN_OPERATIONS and caller.role is not Role.ADMIN:
        return Deny(DenialKind.FORBIDDEN, FORBIDDEN_REASON)
    if operation in TRAINER_OPERATIONS and caller.role not in TRAINER_ROLES:
        return Deny(DenialKind.FORBIDDEN, FORBIDDEN_REASON)
    return None


def _ownership_gate(caller: Caller, operation: Operation, target: Target) -> Optional[Deny]:
    if operation in PLAN_OWNER_OPERATIONS:
        if not target.exists:
            return Deny(DenialKind.NOT_FOUND, PLAN_NOT_FOUND_REASON)
        if target.owner_id != caller.id:
            return Deny(DenialKind.FORBIDDEN, "Plan belongs to another trainer.", masked=True)

    if operation in ASSIGNED_USER_OPERATIONS and not target.assigned:
        return Deny(DenialKind.FORBIDDEN, "User is not assigned to you.")

    if operation in (Operation.UPDATE_ACCOUNT_ROLE, Operation.DELETE_ACCOUNT) and not target.exists:
        return Deny(DenialKind.NOT_FOUND, "User not found.")

    if operation is Operation.CREATE_ASSIGNMENT and not target.exists:
        return Deny(DenialKind.NOT_FOUND, "User not found.")

    return None


def _business_rules(caller: Caller, operation: Operation, target: Target) -> Optional[Deny]:
    if operation is Operation.UPDATE_ACCOUNT_ROLE and target.requested_role not in Role.values():
        return Deny(
            DenialKind.VALIDATION,
            f"Role must be one of: {', '.join(Role.values())}."
        )

    if operation is Operation.DELETE_ACCOUNT and target.owner_id == caller.id:
        return Deny(DenialKind.VALIDATION, "You cannot delete your own account.")

    if operation is Operation.CREATE_ASSIGNMENT:
        if target.trainer_id is not None and target.trainer_id == target.owner_id:
            return Deny(DenialKind.VALIDATION, "A trainer cannot be assigned to themselves.")
        if target.trainer_role != Role.TRAINER.value:
            return Deny(DenialKind.VALIDATION, "Designated trainer does not hold the trainer role.")

    return None


def _scope_for(caller: Caller, operation: Operation, target: Target) -> Scope:
    if operation is Operation.LIST_OWN_PLANS:
        if caller.role is Role.ADMIN:
            return Scope(ScopeKind.ALL)
        return Scope(ScopeKind.CREATOR, caller.id)
    if operation is Operation.LIST_ASSIGNED_USERS:
        return Scope(ScopeKind.ASSIGNED, caller.id)
    if operation in (Operation.LIST_ACCOUNTS, Operation.LIST_ASSIGNMENTS):
        return Scope(ScopeKind.ALL)
    if operation is Operation.READ_ASSIGNED_USER_WEIGHTS:
        return Scope(ScopeKind.OWNER, target.owner_id)
    if operation is Operation.CREATE_PLAN:
        return Scope(ScopeKind.CREATOR, caller.id)
    if target.owner_id is not None:
        return Scope(ScopeKind.OWNER, target.owner_id)
    return Scope(ScopeKind.OWNER, caller.id)


def apply_existence_masking(decision: Decision) -> Decision:
    """Turn masked Forbidden denials into NotFound."""
    if isinstance(decision, Deny) and decision.masked and decision.kind is DenialKind.FORBIDDEN:
        return Deny(DenialKind.NOT_FOUND, PLAN_NOT_FOUND_REASON)
    return decision


def _decide(caller: Optional[Caller], operation: Operation, target: Target) -> Decision:
    if caller is None:
        return Deny(DenialKind.AUTHENTICATION, "Authentication required.")

    if operation in AUTHENTICATED_OPERATIONS:
        return Allow(Scope(ScopeKind.OWNER, caller.id))

    decision = _self_scope(caller, operation, target)
    if decision is not None:
        return decision

    denial = (
        _role_gate(caller, operation)
        or _ownership_gate(caller, operation, target)
        or _business_rules(caller, operation, target)
    )
    if denial is not None:
        return denial

    return Allow(_scope_for(caller, operation, target))


def authorize(
    caller: Optional[Caller],
    operation: Operation,
    target: Optional[Target] = None,
) -> Decision:
    """
    Decide whether ``caller`` may perform ``operation`` on ``target``.

    Args:
        caller: Verified caller, or None for an unauthenticated request.
        operation: Requested operation.
        target: Facts about the target; defaults to "the caller's own data".

    Returns:
        Decision: Allow(scope) or Deny(kind, reason).

    Example:
        >>> alice = Caller(id=1, username="alice", role=Role.USER)
        >>> authorize(alice, Operation.LIST_WEIGHTS).allowed
        True
        >>> authorize(alice, Operation.LIST_ACCOUNTS).kind
        <DenialKind.FORBIDDEN: 'forbidden'>
    """
    decision = apply_existence_masking(_decide(caller, operation, target or Target()))
    if isinstance(decision, Deny):
        logger.debug(
            f"Denied {operation.value} for caller "
            f"{caller.id if caller else 'anonymous'}: {decision.kind.value}"
        )
    return decision


_DENIAL_ERRORS = {
    DenialKind.AUTHENTICATION: AuthenticationError,
    DenialKind.FORBIDDEN: ForbiddenError,
    DenialKind.NOT_FOUND: NotFoundError,
    DenialKind.VALIDATION: ValidationError,
}


def enforce(decision: Decision) -> Scope:
    """
    Return the scope of an allowed decision or raise the matching error.

    Raises:
        AuthenticationError, ForbiddenError, NotFoundError, ValidationError
    """
    if isinstance(decision, Allow):
        return decision.scope
    raise _DENIAL_ERRORS[decision.kind](decision.reason)
