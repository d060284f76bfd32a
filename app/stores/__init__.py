"""GetUs.Fit API - Data access layer."""

from app.stores.accounts import AccountStore
from app.stores.assignments import AssignmentGraph
from app.stores.calories import CalorieStore
from app.stores.plans import PlanStore
from app.stores.profiles import ProfileStore
from app.stores.reset import reset_owner_data
from app.stores.weights import WeightStore
from app.stores.workouts import WorkoutStore

__all__ = [
    "AccountStore",
    "AssignmentGraph",
    "CalorieStore",
    "PlanStore",
    "ProfileStore",
    "reset_owner_data",
    "WeightStore",
    "WorkoutStore",
]
