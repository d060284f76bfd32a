"""GetUs.Fit API - Weight Store."""

from typing import List

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.models.weight import WeightEntry
from app.stores.base import upsert


class WeightStore:
    """Owner-scoped store keyed by (owner, date)."""

    def __init__(self, db: Session):
        self.db = db

    def upsert_by_owner_and_date(self, owner_id: int, payload: dict) -> None:
        """Insert the entry for its date, replacing any existing one."""
        upsert(
            self.db,
            WeightEntry,
            {"user_id": owner_id, "date": payload["date"], "data": payload},
            key_columns=["user_id", "date"],
        )
        self.db.commit()
        # The bulk statement bypasses the identity map
        self.db.expire_all()

    def list_by_owner(self, owner_id: int) -> List[dict]:
        """Owner's entries, oldest date first."""
        rows = self.db.scalars(
            select(WeightEntry)
            .where(WeightEntry.user_id == owner_id)
            .order_by(WeightEntry.date)
        )
        return [row.data for row in rows]

    def delete_by_date_and_owner(self, date: str, owner_id: int) -> bool:
        result = self.db.execute(
            delete(WeightEntry).where(WeightEntry.user_id == owner_id, WeightEntry.date == date)
        )
        self.db.commit()
        return result.rowcount > 0

    def delete_by_owner(self, owner_id: int) -> int:
        """Delete all of the owner's entries. Does not commit."""
        return self.db.execute(delete(WeightEntry).where(WeightEntry.user_id == owner_id)).rowcount
