"""
GetUs.Fit API - ORM Models Package.

Export all SQLAlchemy models so they register on the declarative Base.
"""

from app.models.account import Account, Role
from app.models.assignment import Assignment
from app.models.profile import Profile
from app.models.workout import Workout
from app.models.weight import WeightEntry
from app.models.calorie import CalorieEntry
from app.models.plan import ExercisePlan, PlanAssignment

__all__ = [
    "Account",
    "Role",
    "Assignment",
    "Profile",
    "Workout",
    "WeightEntry",
    "CalorieEntry",
    "ExercisePlan",
    "PlanAssignment",
]
