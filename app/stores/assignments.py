"""
GetUs.Fit API - Assignment Graph.

Trainer <-> user edges and membership queries.
"""

from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.account import Account, Role
from app.models.assignment import Assignment
from app.utils.errors import ConflictError, NotFoundError, ValidationError


class AssignmentGraph:
    """Many-to-many relation between trainer accounts and user accounts."""

    def __init__(self, db: Session):
        self.db = db

    def add(self, trainer_id: int, user_id: int) -> Assignment:
        """
        Add the edge (trainer_id, user_id).

        The trainer's role is checked now, not kept as a standing constraint:
        demoting a trainer later leaves their edges in place.

        Raises:
            ValidationError: Self-loop, or trainer_id does not hold the trainer role.
            NotFoundError: user_id does not exist.
            ConflictError: Edge already exists.
        """
        if trainer_id == user_id:
            raise ValidationError("A trainer cannot be assigned to themselves.")
        trainer = self.db.get(Account, trainer_id)
        if trainer is None or trainer.role != Role.TRAINER.value:
            raise ValidationError("Designated trainer does not hold the trainer role.")
        if self.db.get(Account, user_id) is None:
            raise NotFoundError("User not found.")
        if self.is_assigned(trainer_id, user_id):
            raise ConflictError("User is already assigned to this trainer.")

        edge = Assignment(trainer_id=trainer_id, user_id=user_id)
        self.db.add(edge)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("User is already assigned to this trainer.")
        return edge

    def remove(self, trainer_id: int, user_id: int) -> int:
        """Remove the edge if present; returns the number of rows removed."""
        result = self.db.execute(
            delete(Assignment).where(
                Assignment.trainer_id == trainer_id,
                Assignment.user_id == user_id,
            )
        )
        self.db.commit()
        return result.rowcount

    def is_assigned(self, trainer_id: int, user_id: int) -> bool:
        return self.db.get(Assignment, (trainer_id, user_id)) is not None

    def list_users_for(self, trainer_id: int) -> List[Account]:
        """Accounts assigned to a trainer, ordered by id."""
        return list(self.db.scalars(
            select(Account)
            .join(Assignment, Assignment.user_id == Account.id)
            .where(Assignment.trainer_id == trainer_id)
            .order_by(Account.id)
        ))

    def list_all(self) -> List[Assignment]:
        return list(self.db.scalars(
            select(Assignment).order_by(Assignment.trainer_id, Assignment.user_id)
        ))
