"""GetUs.Fit API - Calorie Store."""

from typing import List

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.models.calorie import CalorieEntry


class CalorieStore:
    """Owner-scoped store for logged meals."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, owner_id: int, payload: dict) -> int:
        entry = CalorieEntry(user_id=owner_id, date=payload["date"], data=payload)
        self.db.add(entry)
        self.db.commit()
        return entry.id

    def list_by_owner(self, owner_id: int) -> List[dict]:
        """Owner's meals ordered by date then id, each with its id merged in."""
        rows = self.db.scalars(
            select(CalorieEntry)
            .where(CalorieEntry.user_id == owner_id)
            .order_by(CalorieEntry.date, CalorieEntry.id)
        )
        return [row.to_dict() for row in rows]

    def delete_by_id_and_owner(self, entry_id: int, owner_id: int) -> bool:
        result = self.db.execute(
            delete(CalorieEntry).where(CalorieEntry.id == entry_id, CalorieEntry.user_id == owner_id)
        )
        self.db.commit()
        return result.rowcount > 0

    def delete_by_owner(self, owner_id: int) -> int:
        """Delete all of the owner's meals. Does not commit."""
        return self.db.execute(delete(CalorieEntry).where(CalorieEntry.user_id == owner_id)).rowcount
