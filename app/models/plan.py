"""
GetUs.Fit API - Exercise Plan ORM Models.

Trainer-authored exercise plans and the plan -> user assignment edges.
"""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from app.database import Base


class ExercisePlan(Base):
    """
    Exercise plan created by a trainer.

    Attributes:
        id: Generated UUID string.
        owner_id: Creating trainer; immutable.
        name: Plan name.
        data: Plan document (name, exercises, description...), stored verbatim.
        created_at: Creation timestamp.
    """

    __tablename__ = "plans"
    __table_args__ = (
        Index("ix_plans_owner_id", "owner_id"),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    owner_id = Column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False
    )
    name = Column(String(200), nullable=False)
    data = Column(JSON, nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    owner = relationship("Account", back_populates="plans")
    assignments = relationship(
        "PlanAssignment",
        back_populates="plan",
        cascade="all, delete-orphan"
    )

    def to_dict(self) -> dict:
        return {
            **self.data,
            "id": self.id,
            "name": self.name,
            "trainer_id": self.owner_id,
        }

    def __repr__(self) -> str:
        return f"<ExercisePlan(id={self.id}, name={self.name})>"


class PlanAssignment(Base):
    """Edge making a plan visible to an assigned user."""

    __tablename__ = "plan_assignments"
    __table_args__ = (
        Index("ix_plan_assignments_user_id", "user_id"),
    )

    plan_id = Column(
        String(36),
        ForeignKey("plans.id", ondelete="CASCADE"),
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

    plan = relationship("ExercisePlan", back_populates="assignments")
    account = relationship("Account", back_populates="plan_assignments")

    def __repr__(self) -> str:
        return f"<PlanAssignment(plan_id={self.plan_id}, user_id={self.user_id})>"
