"""Transactional reset of an account's tracked data."""

import logging

from sqlalchemy.orm import Session

from app.stores.calories import CalorieStore
from app.stores.profiles import ProfileStore
from app.stores.weights import WeightStore
from app.stores.workouts import WorkoutStore

logger = logging.getLogger(__name__)


def reset_owner_data(db: Session, owner_id: int) -> None:
    """
    Delete profile, workouts, weights and calories of one owner atomically.

    Either every row goes or, on any failure, none do.
    """
    try:
        removed = (
            ProfileStore(db).delete_by_owner(owner_id)
            + WorkoutStore(db).delete_by_owner(owner_id)
            + WeightStore(db).delete_by_owner(owner_id)
            + CalorieStore(db).delete_by_owner(owner_id)
        )
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(f"Reset data for account {owner_id} ({removed} rows)")
