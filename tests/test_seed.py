"""
Task API - Sample Data Tests
"""

from taskapi.database import database
from taskapi.seed import SAMPLE_PASSWORD, SAMPLE_TASKS, seed_database


def _login(client, email):
    response = client.post("/api/login", json={"email": email, "password": SAMPLE_PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


class TestSeed:

    def test_seed_creates_all_tasks(self, client):
        total = client.portal.call(seed_database, database)
        assert total == len(SAMPLE_TASKS) == 10

    def test_sample_users_see_only_their_tasks(self, client):
        client.portal.call(seed_database, database)

        counts = {
            email: client.get("/api/tasks", headers=_login(client, email)).json()["total"]
            for email in ("john@example.com", "jane@example.com", "mike@example.com")
        }
        assert counts == {"john@example.com": 3, "jane@example.com": 3, "mike@example.com": 4}

    def test_seed_resets_existing_data(self, client, registered_user):
        client.portal.call(seed_database, database)

        response = client.post(
            "/api/login",
            json={"email": registered_user["email"], "password": registered_user["password"]},
        )
        assert response.status_code == 401
