"""Tests for profile endpoints and app-level routes."""


class TestProfile:
    def test_create_then_read(self, client):
        headers = {"X-User-Id": "new-user"}

        assert client.get("/api/v1/profile/", headers=headers).status_code == 404
        response = client.put(
            "/api/v1/profile/", json={"email": "new@example.com", "full_name": "New User"}, headers=headers
        )

        assert response.status_code == 200
        data = client.get("/api/v1/profile/", headers=headers).json()
        assert data["email"] == "new@example.com"
        assert data["country"] == "United States"

    def test_email_required_on_create(self, client):
        response = client.put("/api/v1/profile/", json={"full_name": "No Email"}, headers={"X-User-Id": "x"})
        assert response.status_code == 400

    def test_partial_update_keeps_email(self, client, headers, user):
        response = client.put("/api/v1/profile/", json={"phone": "555-0100"}, headers=headers)

        assert response.status_code == 200
        assert response.json()["phone"] == "555-0100"
        assert response.json()["email"] == "alice@example.com"

    def test_cannot_grant_admin(self, client, headers, db, user):
        client.put("/api/v1/profile/", json={"is_admin": True}, headers=headers)

        db.expire_all()
        assert user.is_admin is False

    def test_missing_header(self, client):
        assert client.get("/api/v1/profile/").status_code == 401


class TestAppRoutes:
    def test_health(self, client):
        response = client.get("/health")
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        assert "Welcome" in client.get("/").json()["message"]
