"""GetUs.Fit API - Routes Package."""

from app.routes import (
    auth,
    profile,
    user,
    workout,
    weight,
    calorie,
    plan,
    food,
    admin,
    trainer,
)

__all__ = [
    "auth",
    "profile",
    "user",
    "workout",
    "weight",
    "calorie",
    "plan",
    "food",
    "admin",
    "trainer",
]
