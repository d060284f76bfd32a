"""GetUs.Fit API - Workout Store."""

from typing import List, Optional
from uuid import uuid4

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.workout import Workout
from app.utils.errors import ConflictError


class WorkoutStore:
    """Owner-scoped store for workout sessions."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, owner_id: int, payload: dict, workout_id: Optional[str] = None) -> str:
        """
        Store a workout session and return its id.

        The id is stamped into the stored document so listings return it.
        A supplied id that belongs to another account is replaced with a
        generated one, so ids never reveal other accounts' workouts.

        Raises:
            ConflictError: The caller already has a workout with the supplied id.
        """
        if workout_id:
            existing = self.db.get(Workout, workout_id)
            if existing is not None and existing.user_id == owner_id:
                raise ConflictError("A workout with this id already exists.")
            if existing is not None:
                workout_id = None
        workout_id = workout_id or str(uuid4())
        document = {**payload, "id": workout_id}
        self.db.add(Workout(
            id=workout_id,
            user_id=owner_id,
            date=document["date"],
            data=document,
        ))
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("A workout with this id already exists.")
        return workout_id

    def list_by_owner(self, owner_id: int) -> List[dict]:
        """Owner's workouts, newest date first."""
        rows = self.db.scalars(
            select(Workout)
            .where(Workout.user_id == owner_id)
            .order_by(Workout.date.desc())
        )
        return [row.data for row in rows]

    def delete_by_id_and_owner(self, workout_id: str, owner_id: int) -> bool:
        result = self.db.execute(
            delete(Workout).where(Workout.id == workout_id, Workout.user_id == owner_id)
        )
        self.db.commit()
        return result.rowcount > 0

    def delete_by_owner(self, owner_id: int) -> int:
        """Delete all of the owner's workouts. Does not commit."""
        return self.db.execute(delete(Workout).where(Workout.user_id == owner_id)).rowcount
