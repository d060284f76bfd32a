"""GetUs.Fit API - Weight Entry ORM Model."""

from sqlalchemy import JSON, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.database import Base


class WeightEntry(Base):
    """
    Body-weight entry; at most one per account per calendar date.

    Attributes:
        user_id: Owning account.
        date: Calendar date, part of the primary key.
        data: Entry document (weight, goal, notes), stored verbatim.
    """

    __tablename__ = "weights"

    user_id = Column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True
    )
    date = Column(String(32), primary_key=True)
    data = Column(JSON, nullable=False)

    account = relationship("Account", back_populates="weights")

    def __repr__(self) -> str:
        return f"<WeightEntry(user_id={self.user_id}, date={self.date})>"
