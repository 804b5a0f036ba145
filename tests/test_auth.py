"""
Unit tests for authentication endpoints.

Tests:
- Login (token issue)
- Registration
"""

from app.core.security import decode_token


class TestLogin:
    """Test POST /auth/token"""

    def test_login_admin(self, client, test_users):
        response = client.post("/auth/token", json={"username": "admin", "password": "password2"})

        assert response.status_code == 200
        payload = decode_token(response.json()["token"])
        assert payload["username"] == "admin"
        assert payload["is_admin"] is True

    def test_login_user(self, client, test_users):
        response = client.post("/auth/token", json={"username": "u1", "password": "password1"})

        assert response.status_code == 200
        assert decode_token(response.json()["token"])["is_admin"] is False

    def test_admin_token_from_login_can_create_job(self, client, test_users):
        token = client.post("/auth/token", json={"username": "admin", "password": "password2"}).json()["token"]

        response = client.post(
            "/jobs",
            json={"title": "from-login", "companyHandle": "c1"},
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 201

    def test_wrong_password(self, client, test_users):
        response = client.post("/auth/token", json={"username": "u1", "password": "wrong"})

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid username/password"

    def test_unknown_user(self, client, test_users):
        response = client.post("/auth/token", json={"username": "nope", "password": "password1"})

        assert response.status_code == 401

    def test_missing_fields(self, client):
        response = client.post("/auth/token", json={"username": "u1"})

        assert response.status_code == 400


class TestRegister:
    """Test POST /auth/register"""

    new_user = {
        "username": "new",
        "password": "password",
        "firstName": "first",
        "lastName": "last",
        "email": "new@email.com",
    }

    def test_register(self, client):
        response = client.post("/auth/register", json=self.new_user)

        assert response.status_code == 201
        payload = decode_token(response.json()["token"])
        assert payload["username"] == "new"
        assert payload["is_admin"] is False

    def test_registered_user_can_login(self, client):
        client.post("/auth/register", json=self.new_user)

        response = client.post("/auth/token", json={"username": "new", "password": "password"})

        assert response.status_code == 200

    def test_register_cannot_become_admin(self, client):
        response = client.post("/auth/register", json={**self.new_user, "isAdmin": True})

        assert response.status_code == 400

    def test_duplicate_username(self, client, test_users):
        response = client.post("/auth/register", json={**self.new_user, "username": "u1"})

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Duplicate username: u1"

    def test_invalid_email(self, client):
        response = client.post("/auth/register", json={**self.new_user, "email": "not-an-email"})

        assert response.status_code == 400
