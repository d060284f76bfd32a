"""GetUs.Fit API - Profile ORM Model."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Integer
from sqlalchemy.orm import relationship

from app.database import Base


class Profile(Base):
    """
    One optional free-form profile document per account, upserted in place.

    Attributes:
        user_id: Owning account (also the primary key).
        data: Caller-supplied attributes, stored verbatim.
        updated_at: Last upsert timestamp.
    """

    __tablename__ = "profiles"

    user_id = Column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True
    )
    data = Column(JSON, nullable=False)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc)
    )

    account = relationship("Account", back_populates="profile")

    def __repr__(self) -> str:
        return f"<Profile(user_id={self.user_id})>"
