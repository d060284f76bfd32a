"""Tests for the resource stores and the assignment graph."""

import pytest
from sqlalchemy import func, select

from app.models import Assignment, CalorieEntry, PlanAssignment, Profile, WeightEntry, Workout
from app.stores import (
    AccountStore,
    AssignmentGraph,
    CalorieStore,
    PlanStore,
    ProfileStore,
    WeightStore,
    WorkoutStore,
    reset_owner_data,
)
from app.utils.errors import ConflictError, NotFoundError, ValidationError


def _count(db, model, **filters):
    query = select(func.count()).select_from(model)
    for column, value in filters.items():
        query = query.where(getattr(model, column) == value)
    return db.scalar(query)


@pytest.fixture
def accounts(db):
    """alice (user), bob (user), carol (trainer)."""
    store = AccountStore(db)
    alice = store.create("alice", "hash")
    bob = store.create("bob", "hash")
    carol = store.create("carol", "hash")
    store.set_role(carol, "trainer")
    return alice, bob, carol


class TestAccountStore:
    """Tests for account records."""

    def test_new_accounts_are_users(self, accounts):
        alice, _, _ = accounts
        assert alice.role == "user"

    def test_ids_are_sequential(self, accounts):
        alice, bob, carol = accounts
        assert alice.id < bob.id < carol.id

    def test_username_is_case_insensitive(self, db, accounts):
        store = AccountStore(db)
        assert store.find_by_username("ALICE").id == accounts[0].id
        with pytest.raises(ConflictError):
            store.create("Alice", "hash")

    def test_unknown_role_is_rejected(self, db, accounts):
        with pytest.raises(ValidationError):
            AccountStore(db).set_role(accounts[0], "owner")

    def test_ids_are_not_reused(self, db, accounts):
        store = AccountStore(db)
        carol = accounts[2]
        store.delete(carol)
        dave = store.create("dave", "hash")
        assert dave.id > carol.id


class TestWeightStore:
    """Tests for the (owner, date) keyed weight store."""

    def test_upsert_twice_leaves_one_row(self, db, accounts):
        alice = accounts[0]
        store = WeightStore(db)
        entry = {"date": "2024-01-01", "weight": 80}
        store.upsert_by_owner_and_date(alice.id, entry)
        store.upsert_by_owner_and_date(alice.id, entry)
        assert _count(db, WeightEntry, user_id=alice.id) == 1

    def test_upsert_replaces_payload(self, db, accounts):
        alice = accounts[0]
        store = WeightStore(db)
        store.upsert_by_owner_and_date(alice.id, {"date": "2024-01-01", "weight": 80})
        store.upsert_by_owner_and_date(alice.id, {"date": "2024-01-01", "weight": 79.5, "note": "am"})
        assert store.list_by_owner(alice.id) == [{"date": "2024-01-01", "weight": 79.5, "note": "am"}]

    def test_same_date_for_different_owners(self, db, accounts):
        alice, bob, _ = accounts
        store = WeightStore(db)
        store.upsert_by_owner_and_date(alice.id, {"date": "2024-01-01", "weight": 80})
        store.upsert_by_owner_and_date(bob.id, {"date": "2024-01-01", "weight": 90})
        assert store.list_by_owner(alice.id)[0]["weight"] == 80
        assert store.list_by_owner(bob.id)[0]["weight"] == 90

    def test_list_is_ordered_by_date(self, db, accounts):
        alice = accounts[0]
        store = WeightStore(db)
        for date in ("2024-03-01", "2024-01-01", "2024-02-01"):
            store.upsert_by_owner_and_date(alice.id, {"date": date, "weight": 80})
        assert [e["date"] for e in store.list_by_owner(alice.id)] == [
            "2024-01-01", "2024-02-01", "2024-03-01"
        ]

    def test_delete_is_owner_scoped(self, db, accounts):
        alice, bob, _ = accounts
        store = WeightStore(db)
        store.upsert_by_owner_and_date(alice.id, {"date": "2024-01-01", "weight": 80})
        assert store.delete_by_date_and_owner("2024-01-01", bob.id) is False
        assert store.delete_by_date_and_owner("2024-01-01", alice.id) is True
        assert store.list_by_owner(alice.id) == []


class TestWorkoutStore:
    """Tests for workout sessions."""

    def test_generated_id_is_stamped_into_document(self, db, accounts):
        alice = accounts[0]
        store = WorkoutStore(db)
        workout_id = store.create(alice.id, {"date": "2024-01-01", "exercises": []})
        assert store.list_by_owner(alice.id) == [
            {"date": "2024-01-01", "exercises": [], "id": workout_id}
        ]

    def test_client_id_is_kept(self, db, accounts):
        alice = accounts[0]
        assert WorkoutStore(db).create(alice.id, {"date": "2024-01-01", "exercises": []}, "w-1") == "w-1"

    def test_duplicate_id_conflicts(self, db, accounts):
        alice = accounts[0]
        store = WorkoutStore(db)
        store.create(alice.id, {"date": "2024-01-01", "exercises": []}, "w-1")
        with pytest.raises(ConflictError):
            store.create(alice.id, {"date": "2024-01-02", "exercises": []}, "w-1")

    def test_id_owned_by_someone_else_is_replaced(self, db, accounts):
        alice, bob, _ = accounts
        store = WorkoutStore(db)
        store.create(alice.id, {"date": "2024-01-01", "exercises": []}, "w-1")

        workout_id = store.create(bob.id, {"id": "w-1", "date": "2024-01-02", "exercises": []}, "w-1")
        assert workout_id != "w-1"
        assert store.list_by_owner(bob.id) == [
            {"id": workout_id, "date": "2024-01-02", "exercises": []}
        ]
        assert [w["id"] for w in store.list_by_owner(alice.id)] == ["w-1"]

    def test_newest_first(self, db, accounts):
        alice = accounts[0]
        store = WorkoutStore(db)
        store.create(alice.id, {"date": "2024-01-01", "exercises": []})
        store.create(alice.id, {"date": "2024-02-01", "exercises": []})
        assert [w["date"] for w in store.list_by_owner(alice.id)] == ["2024-02-01", "2024-01-01"]

    def test_delete_other_owners_workout_changes_nothing(self, db, accounts):
        alice, bob, _ = accounts
        store = WorkoutStore(db)
        workout_id = store.create(alice.id, {"date": "2024-01-01", "exercises": []})
        assert store.delete_by_id_and_owner(workout_id, bob.id) is False
        assert _count(db, Workout) == 1


class TestCalorieStore:
    """Tests for logged meals."""

    def test_ids_are_merged_into_listing(self, db, accounts):
        alice = accounts[0]
        store = CalorieStore(db)
        first = store.create(alice.id, {"date": "2024-01-02", "food": "Oats", "calories": 300})
        second = store.create(alice.id, {"date": "2024-01-01", "food": "Eggs", "calories": 150})
        assert second > first
        listed = store.list_by_owner(alice.id)
        assert [(e["id"], e["food"]) for e in listed] == [(second, "Eggs"), (first, "Oats")]


class TestAssignmentGraph:
    """Tests for trainer -> user edges."""

    def test_add_and_query(self, db, accounts):
        alice, bob, carol = accounts
        graph = AssignmentGraph(db)
        graph.add(carol.id, bob.id)
        assert graph.is_assigned(carol.id, bob.id)
        assert not graph.is_assigned(carol.id, alice.id)
        assert [a.username for a in graph.list_users_for(carol.id)] == ["bob"]

    def test_trainer_role_is_checked(self, db, accounts):
        alice, bob, _ = accounts
        with pytest.raises(ValidationError):
            AssignmentGraph(db).add(alice.id, bob.id)

    def test_self_loop_is_rejected(self, db, accounts):
        carol = accounts[2]
        with pytest.raises(ValidationError):
            AssignmentGraph(db).add(carol.id, carol.id)

    def test_missing_user(self, db, accounts):
        carol = accounts[2]
        with pytest.raises(NotFoundError):
            AssignmentGraph(db).add(carol.id, 999)

    def test_duplicate_edge_conflicts(self, db, accounts):
        _, bob, carol = accounts
        graph = AssignmentGraph(db)
        graph.add(carol.id, bob.id)
        with pytest.raises(ConflictError):
            graph.add(carol.id, bob.id)

    def test_remove_is_safe_when_absent(self, db, accounts):
        _, bob, carol = accounts
        graph = AssignmentGraph(db)
        assert graph.remove(carol.id, bob.id) == 0
        graph.add(carol.id, bob.id)
        assert graph.remove(carol.id, bob.id) == 1
        assert not graph.is_assigned(carol.id, bob.id)

    def test_demotion_keeps_edges(self, db, accounts):
        _, bob, carol = accounts
        graph = AssignmentGraph(db)
        graph.add(carol.id, bob.id)
        AccountStore(db).set_role(carol, "user")
        assert graph.is_assigned(carol.id, bob.id)


class TestPlanStore:
    """Tests for plans and plan assignments."""

    def test_create_and_list(self, db, accounts):
        _, bob, carol = accounts
        store = PlanStore(db)
        plan_id = store.create(carol.id, {"name": "Beginner", "exercises": [{"name": "Squat"}]})
        assert [p.id for p in store.list_by_creator(carol.id)] == [plan_id]
        assert store.list_by_creator(bob.id) == []
        assert [p.id for p in store.list_all()] == [plan_id]

    def test_assign_is_idempotent_at_store_level(self, db, accounts):
        _, bob, carol = accounts
        store = PlanStore(db)
        plan_id = store.create(carol.id, {"name": "Beginner", "exercises": [{"name": "Squat"}]})
        assert store.assign(plan_id, bob.id) is True
        assert store.assign(plan_id, bob.id) is False
        assert [p.to_dict()["name"] for p in store.list_assigned_to(bob.id)] == ["Beginner"]

    def test_delete_requires_owner_and_cascades(self, db, accounts):
        alice, bob, carol = accounts
        store = PlanStore(db)
        plan_id = store.create(carol.id, {"name": "Beginner", "exercises": [{"name": "Squat"}]})
        store.assign(plan_id, bob.id)
        assert store.delete_by_id_and_owner(plan_id, alice.id) is False
        assert store.delete_by_id_and_owner(plan_id, carol.id) is True
        assert _count(db, PlanAssignment) == 0


class TestCascades:
    """Account deletion and data reset."""

    def _populate(self, db, owner_id):
        ProfileStore(db).upsert(owner_id, {"name": "Alice"})
        WorkoutStore(db).create(owner_id, {"date": "2024-01-01", "exercises": []})
        WeightStore(db).upsert_by_owner_and_date(owner_id, {"date": "2024-01-01", "weight": 70})
        CalorieStore(db).create(owner_id, {"date": "2024-01-01", "food": "Oats", "calories": 300})

    def test_account_deletion_removes_everything(self, db, accounts):
        alice, bob, carol = accounts
        self._populate(db, bob.id)
        graph = AssignmentGraph(db)
        graph.add(carol.id, bob.id)
        plan_id = PlanStore(db).create(carol.id, {"name": "P", "exercises": [{"name": "Row"}]})
        PlanStore(db).assign(plan_id, bob.id)

        AccountStore(db).delete(bob)

        for model in (Profile, Workout, WeightEntry, CalorieEntry):
            assert _count(db, model, user_id=bob.id) == 0
        assert _count(db, Assignment) == 0
        assert _count(db, PlanAssignment) == 0
        assert PlanStore(db).get(plan_id) is not None

    def test_trainer_deletion_removes_plans(self, db, accounts):
        _, bob, carol = accounts
        plan_id = PlanStore(db).create(carol.id, {"name": "P", "exercises": [{"name": "Row"}]})
        PlanStore(db).assign(plan_id, bob.id)
        AccountStore(db).delete(carol)
        db.expire_all()
        assert PlanStore(db).get(plan_id) is None
        assert PlanStore(db).list_assigned_to(bob.id) == []

    def test_reset_clears_only_tracked_data(self, db, accounts):
        alice, bob, carol = accounts
        self._populate(db, alice.id)
        self._populate(db, bob.id)
        AssignmentGraph(db).add(carol.id, alice.id)

        reset_owner_data(db, alice.id)

        assert ProfileStore(db).get(alice.id) is None
        assert WorkoutStore(db).list_by_owner(alice.id) == []
        assert WeightStore(db).list_by_owner(alice.id) == []
        assert CalorieStore(db).list_by_owner(alice.id) == []
        assert AccountStore(db).get(alice.id) is not None
        assert AssignmentGraph(db).is_assigned(carol.id, alice.id)
        assert ProfileStore(db).get(bob.id) == {"name": "Alice"}

    def test_reset_rolls_back_on_failure(self, db, accounts, monkeypatch):
        alice = accounts[0]
        self._populate(db, alice.id)

        def explode(self, owner_id):
            raise RuntimeError("disk full")

        monkeypatch.setattr(CalorieStore, "delete_by_owner", explode)
        with pytest.raises(RuntimeError):
            reset_owner_data(db, alice.id)

        db.expire_all()
        assert ProfileStore(db).get(alice.id) == {"name": "Alice"}
        assert len(WorkoutStore(db).list_by_owner(alice.id)) == 1
        assert len(WeightStore(db).list_by_owner(alice.id)) == 1
