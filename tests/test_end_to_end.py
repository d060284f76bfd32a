"""End-to-end walk through registration, roles, assignments and plans."""

from conftest import auth_headers, set_role


class TestCoachingScenario:
    """alice becomes admin, carol becomes bob's trainer and gives him a plan."""

    def _register(self, client, username):
        response = client.post(
            "/api/auth/register",
            json={"username": username, "password": "password123"}
        )
        assert response.status_code == 201
        body = response.json()
        assert body["role"] == "user"
        return body["user_id"], auth_headers(body["token"])

    def test_scenario(self, client):
        alice_id, alice = self._register(client, "alice")
        bob_id, bob = self._register(client, "bob")
        carol_id, carol = self._register(client, "carol")

        # Bootstrap the first admin out of band, then use the API
        set_role("alice", "admin")
        accounts = client.get("/api/admin/users", headers=alice).json()
        assert len(accounts) >= 3

        response = client.put(f"/api/admin/users/{carol_id}/role", json={"role": "trainer"}, headers=alice)
        assert response.status_code == 200
        response = client.post(
            "/api/admin/assignments",
            json={"trainer_id": carol_id, "user_id": bob_id},
            headers=alice
        )
        assert response.status_code == 201

        users = client.get("/api/trainer/users", headers=carol).json()
        assert [u["id"] for u in users] == [bob_id]

        client.post("/api/weights", json={"date": "2024-01-01", "weight": 90}, headers=bob)
        client.post("/api/weights", json={"date": "2024-01-01", "weight": 60}, headers=alice)
        response = client.get(f"/api/trainer/users/{bob_id}/weights", headers=carol)
        assert response.status_code == 200
        assert response.json() == [{"date": "2024-01-01", "weight": 90}]
        response = client.get(f"/api/trainer/users/{alice_id}/weights", headers=carol)
        assert response.status_code == 403

        response = client.post(
            "/api/trainer/plans",
            json={
                "name": "Beginner Strength",
                "exercises": [
                    {"name": "Squat", "sets": 3, "reps": 5},
                    {"name": "Bench Press", "sets": 3, "reps": 5},
                ],
            },
            headers=carol
        )
        assert response.status_code == 201
        plan_id = response.json()["id"]
        assert plan_id

        response = client.post(
            f"/api/trainer/plans/{plan_id}/assignments",
            json={"user_id": bob_id},
            headers=carol
        )
        assert response.status_code == 201

        plans = client.get("/api/plans", headers=bob).json()
        assert len(plans) == 1
        assert plans[0]["name"] == "Beginner Strength"
        assert len(plans[0]["exercises"]) == 2
        assert client.get("/api/plans", headers=alice).json() == []

        response = client.delete(f"/api/admin/assignments/{carol_id}/{bob_id}", headers=alice)
        assert response.status_code == 200
        assert client.get("/api/trainer/users", headers=carol).json() == []
        response = client.get(f"/api/trainer/users/{bob_id}/weights", headers=carol)
        assert response.status_code == 403
