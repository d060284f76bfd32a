"""GetUs.Fit API - Calorie Entry ORM Model."""

from sqlalchemy import JSON, Column, ForeignKey, Index, Integer, String
from sqlalchemy.orm import relationship

from app.database import Base


class CalorieEntry(Base):
    """
    Logged meal with nutrient values.

    Attributes:
        id: Sequential identifier.
        user_id: Owning account.
        date: Calendar date of the meal.
        data: Meal document (meal, food, calories, protein, carbs, fat, target).
    """

    __tablename__ = "calories"
    __table_args__ = (
        Index("ix_calories_user_id_date", "user_id", "date"),
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False
    )
    date = Column(String(32), nullable=False)
    data = Column(JSON, nullable=False)

    account = relationship("Account", back_populates="calories")

    def to_dict(self) -> dict:
        return {**self.data, "id": self.id}

    def __repr__(self) -> str:
        return f"<CalorieEntry(id={self.id}, date={self.date})>"
