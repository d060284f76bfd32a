"""
GetUs.Fit API - Plan Store.

Exercise plans and plan -> user assignment edges.
"""

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.models.plan import ExercisePlan, PlanAssignment


class PlanStore:
    """Store for trainer-created exercise plans."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, plan_id: str) -> Optional[ExercisePlan]:
        return self.db.get(ExercisePlan, plan_id)

    def create(self, owner_id: int, payload: dict) -> str:
        """Store a plan for its creating trainer and return the generated id."""
        plan = ExercisePlan(owner_id=owner_id, name=payload["name"], data=payload)
        self.db.add(plan)
        self.db.commit()
        return plan.id

    def list_all(self) -> List[ExercisePlan]:
        return list(self.db.scalars(
            select(ExercisePlan).order_by(ExercisePlan.created_at, ExercisePlan.id)
        ))

    def list_by_creator(self, trainer_id: int) -> List[ExercisePlan]:
        return list(self.db.scalars(
            select(ExercisePlan)
            .where(ExercisePlan.owner_id == trainer_id)
            .order_by(ExercisePlan.created_at, ExercisePlan.id)
        ))

    def delete_by_id_and_owner(self, plan_id: str, owner_id: int) -> bool:
        """Delete a plan (and its assignment edges) if owner_id created it."""
        plan = self.get(plan_id)
        if plan is None or plan.owner_id != owner_id:
            return False
        self.db.delete(plan)
        self.db.commit()
        return True

    def assign(self, plan_id: str, user_id: int) -> bool:
        """Make a plan visible to a user; returns False if it already was."""
        if self.db.get(PlanAssignment, (plan_id, user_id)) is not None:
            return False
        self.db.add(PlanAssignment(plan_id=plan_id, user_id=user_id))
        self.db.commit()
        return True

    def unassign(self, plan_id: str, user_id: int) -> int:
        result = self.db.execute(
            delete(PlanAssignment).where(
                PlanAssignment.plan_id == plan_id,
                PlanAssignment.user_id == user_id,
            )
        )
        self.db.commit()
        return result.rowcount

    def list_assigned_to(self, user_id: int) -> List[ExercisePlan]:
        """Plans assigned to a user by any trainer."""
        return list(self.db.scalars(
            select(ExercisePlan)
            .join(PlanAssignment, PlanAssignment.plan_id == ExercisePlan.id)
            .where(PlanAssignment.user_id == user_id)
            .order_by(PlanAssignment.created_at, ExercisePlan.id)
        ))
