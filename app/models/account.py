"""
GetUs.Fit API - Account ORM Model.

Account model with credentials, role, and relationships to every owned entity.
"""

from datetime import datetime, timezone
import enum

from sqlalchemy import Column, DateTime, Index, Integer, String, func
from sqlalchemy.orm import relationship

from app.database import Base


class Role(str, enum.Enum):
    """Account roles. New accounts always start as USER."""

    USER = "user"
    TRAINER = "trainer"
    ADMIN = "admin"

    @classmethod
    def values(cls) -> list:
        return [role.value for role in cls]


class Account(Base):
    """
    Account model representing application users.

    Attributes:
        id: Sequential identifier, never reused.
        username: Display name, unique regardless of case.
        password_hash: Bcrypt-hashed password (never exposed).
        role: One of Role values; re-read on every request.
        created_at: Account creation timestamp.
    """

    __tablename__ = "accounts"
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted account
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Authentication
    username = Column(String(30), nullable=False)
    password_hash = Column(String(255), nullable=False)

    role = Column(String(20), nullable=False, default=Role.USER.value)

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    # Relationships
    profile = relationship(
        "Profile",
        back_populates="account",
        uselist=False,
        cascade="all, delete-orphan"
    )
    workouts = relationship(
        "Workout",
        back_populates="account",
        cascade="all, delete-orphan"
    )
    weights = relationship(
        "WeightEntry",
        back_populates="account",
        cascade="all, delete-orphan"
    )
    calories = relationship(
        "CalorieEntry",
        back_populates="account",
        cascade="all, delete-orphan"
    )
    plans = relationship(
        "ExercisePlan",
        back_populates="owner",
        cascade="all, delete-orphan"
    )
    plan_assignments = relationship(
        "PlanAssignment",
        back_populates="account",
        cascade="all, delete-orphan"
    )
    # Assignment edges where this account is the trainer / the assigned user
    trainer_edges = relationship(
        "Assignment",
        foreign_keys="Assignment.trainer_id",
        back_populates="trainer",
        cascade="all, delete-orphan"
    )
    client_edges = relationship(
        "Assignment",
        foreign_keys="Assignment.user_id",
        back_populates="user",
        cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        """String representation of Account."""
        return f"<Account(id={self.id}, username={self.username}, role={self.role})>"


Index("ux_accounts_username_lower", func.lower(Account.username), unique=True)
