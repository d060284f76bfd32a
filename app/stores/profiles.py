"""GetUs.Fit API - Profile Store."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete
from sqlalchemy.orm import Session

from app.models.profile import Profile
from app.stores.base import upsert


class ProfileStore:
    """Store for the single free-form profile document of each account."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, owner_id: int) -> Optional[dict]:
        """Return the profile document, or None when never saved."""
        profile = self.db.get(Profile, owner_id)
        return profile.data if profile else None

    def upsert(self, owner_id: int, data: dict) -> None:
        """Create or replace the owner's profile."""
        upsert(
            self.db,
            Profile,
            {"user_id": owner_id, "data": data, "updated_at": datetime.now(timezone.utc)},
            key_columns=["user_id"],
        )
        self.db.commit()
        # The bulk statement bypasses the identity map
        self.db.expire_all()

    def delete_by_owner(self, owner_id: int) -> int:
        """Delete the owner's profile. Does not commit."""
        return self.db.execute(delete(Profile).where(Profile.user_id == owner_id)).rowcount
