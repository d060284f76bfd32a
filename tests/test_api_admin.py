"""Tests for the admin endpoints."""

import pytest


class TestAdminAccess:
    """Only admins reach /api/admin."""

    @pytest.mark.parametrize("method, path", [
        ("get", "/api/admin/users"),
        ("get", "/api/admin/assignments"),
        ("delete", "/api/admin/users/1"),
        ("delete", "/api/admin/assignments/1/2"),
    ])
    def test_user_and_trainer_are_forbidden(self, client, alice, trainer, method, path):
        for caller in (alice, trainer):
            response = getattr(client, method)(path, headers=caller["headers"])
            assert response.status_code == 403
            assert response.json()["kind"] == "forbidden"

    def test_forbidden_role_change(self, client, alice):
        response = client.put(
            f"/api/admin/users/{alice['id']}/role",
            json={"role": "admin"},
            headers=alice["headers"]
        )
        assert response.status_code == 403


class TestAccounts:
    """Tests for account listing, role changes and deletion."""

    def test_list_accounts(self, client, admin, alice):
        response = client.get("/api/admin/users", headers=admin["headers"])
        assert response.status_code == 200
        assert {a["username"]: a["role"] for a in response.json()} == {
            "root_admin": "admin",
            "alice": "user",
        }
        assert all("password_hash" not in a for a in response.json())

    def test_change_role(self, client, admin, alice):
        response = client.put(
            f"/api/admin/users/{alice['id']}/role",
            json={"role": "trainer"},
            headers=admin["headers"]
        )
        assert response.status_code == 200
        assert response.json() == {"id": alice["id"], "username": "alice", "role": "trainer"}

    def test_unknown_role(self, client, admin, alice):
        response = client.put(
            f"/api/admin/users/{alice['id']}/role",
            json={"role": "superuser"},
            headers=admin["headers"]
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Role must be one of: user, trainer, admin."

    def test_role_change_on_missing_account(self, client, admin):
        response = client.put(
            "/api/admin/users/999/role",
            json={"role": "trainer"},
            headers=admin["headers"]
        )
        assert response.status_code == 404

    def test_delete_account(self, client, admin, alice):
        response = client.delete(f"/api/admin/users/{alice['id']}", headers=admin["headers"])
        assert response.status_code == 200
        usernames = [a["username"] for a in client.get("/api/admin/users", headers=admin["headers"]).json()]
        assert usernames == ["root_admin"]

    def test_delete_missing_account(self, client, admin):
        assert client.delete("/api/admin/users/999", headers=admin["headers"]).status_code == 404

    def test_admin_cannot_delete_self(self, client, admin):
        response = client.delete(f"/api/admin/users/{admin['id']}", headers=admin["headers"])
        assert response.status_code == 400
        assert response.json()["error"] == "You cannot delete your own account."


class TestAssignments:
    """Tests for trainer -> user assignment management."""

    def test_create_list_delete(self, client, admin, trainer, alice):
        response = client.post(
            "/api/admin/assignments",
            json={"trainer_id": trainer["id"], "user_id": alice["id"]},
            headers=admin["headers"]
        )
        assert response.status_code == 201
        assert response.json()["trainer_username"] == "coach"
        assert response.json()["user_username"] == "alice"

        listed = client.get("/api/admin/assignments", headers=admin["headers"]).json()
        assert [(e["trainer_id"], e["user_id"]) for e in listed] == [(trainer["id"], alice["id"])]

        response = client.delete(
            f"/api/admin/assignments/{trainer['id']}/{alice['id']}",
            headers=admin["headers"]
        )
        assert response.status_code == 200
        assert client.get("/api/admin/assignments", headers=admin["headers"]).json() == []

    def test_remove_absent_edge(self, client, admin, trainer, alice):
        response = client.delete(
            f"/api/admin/assignments/{trainer['id']}/{alice['id']}",
            headers=admin["headers"]
        )
        assert response.status_code == 404

    def test_designated_trainer_must_hold_trainer_role(self, client, admin, alice, register):
        bob = register("bob")
        response = client.post(
            "/api/admin/assignments",
            json={"trainer_id": bob["id"], "user_id": alice["id"]},
            headers=admin["headers"]
        )
        assert response.status_code == 400
        assert response.json()["kind"] == "validation"

    def test_missing_user(self, client, admin, trainer):
        response = client.post(
            "/api/admin/assignments",
            json={"trainer_id": trainer["id"], "user_id": 999},
            headers=admin["headers"]
        )
        assert response.status_code == 404

    def test_self_assignment(self, client, admin, trainer):
        response = client.post(
            "/api/admin/assignments",
            json={"trainer_id": trainer["id"], "user_id": trainer["id"]},
            headers=admin["headers"]
        )
        assert response.status_code == 400

    def test_duplicate(self, client, admin, trainer, alice):
        body = {"trainer_id": trainer["id"], "user_id": alice["id"]}
        client.post("/api/admin/assignments", json=body, headers=admin["headers"])
        response = client.post("/api/admin/assignments", json=body, headers=admin["headers"])
        assert response.status_code == 409

    def test_deleting_user_removes_edges(self, client, admin, trainer, alice):
        client.post(
            "/api/admin/assignments",
            json={"trainer_id": trainer["id"], "user_id": alice["id"]},
            headers=admin["headers"]
        )
        client.delete(f"/api/admin/users/{alice['id']}", headers=admin["headers"])
        assert client.get("/api/admin/assignments", headers=admin["headers"]).json() == []
        assert client.get("/api/trainer/users", headers=trainer["headers"]).json() == []
