"""
GetUs.Fit API - Workout ORM Model.

Logged workout sessions with their exercise entries.
"""

from sqlalchemy import JSON, Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from app.database import Base


class Workout(Base):
    """
    Workout session owned by one account.

    Attributes:
        id: Opaque id, client-supplied or a generated UUID.
        user_id: Owning account.
        date: Calendar date (YYYY-MM-DD) used for ordering.
        data: Full session document (date, exercises, notes...), stored verbatim.
    """

    __tablename__ = "workouts"
    __table_args__ = (
        Index("ix_workouts_user_id_date", "user_id", "date"),
    )

    id = Column(String(64), primary_key=True)
    user_id = Column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False
    )
    date = Column(String(32), nullable=False)
    data = Column(JSON, nullable=False)

    account = relationship("Account", back_populates="workouts")

    def __repr__(self) -> str:
        return f"<Workout(id={self.id}, date={self.date})>"
