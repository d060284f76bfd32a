"""
GetUs.Fit API - Assignment ORM Model.

Directed trainer -> user edges granting the trainer read access to the user's
weight entries.
"""

from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship

from app.database import Base


class Assignment(Base):
    """
    Trainer-to-user assignment edge.

    Attributes:
        trainer_id: Account holding the trainer role when the edge was made.
        user_id: Assigned account.
        created_at: Assignment timestamp.
    """

    __tablename__ = "assignments"
    __table_args__ = (
        CheckConstraint("trainer_id <> user_id", name="ck_assignments_no_self_loop"),
        Index("ix_assignments_user_id", "user_id"),
    )

    trainer_id = Column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True
    )
    user_id = Column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    trainer = relationship("Account", foreign_keys=[trainer_id], back_populates="trainer_edges")
    user = relationship("Account", foreign_keys=[user_id], back_populates="client_edges")

    def __repr__(self) -> str:
        return f"<Assignment(trainer_id={self.trainer_id}, user_id={self.user_id})>"
