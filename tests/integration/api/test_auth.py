"""Integration tests for auth endpoints."""

import pytest
from httpx import AsyncClient

from tenantgate.modules.users.models import User


pytestmark = pytest.mark.integration

PASSWORD = "AdminPass123!"


class TestLogin:
    """Tests for POST /api/auth/login."""

    async def test_login_success(self, client: AsyncClient, admin_user: User):
        response = await client.post(
            "/api/auth/login",
            json={"email": admin_user.email, "password": PASSWORD},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Login successful"
        assert data["user"]["email"] == admin_user.email
        assert data["user"]["role"] == "super_admin"

        cookie = response.headers["set-cookie"]
        assert cookie.startswith("admin-auth-token=")
        assert "HttpOnly" in cookie
        assert "SameSite=strict" in cookie
        assert admin_user.last_login_at is not None

    async def test_login_email_is_case_insensitive(
        self, client: AsyncClient, admin_user: User
    ):
        response = await client.post(
            "/api/auth/login",
            json={"email": admin_user.email.upper(), "password": PASSWORD},
        )

        assert response.status_code == 200

    async def test_login_wrong_password(self, client: AsyncClient, admin_user: User):
        response = await client.post(
            "/api/auth/login",
            json={"email": admin_user.email, "password": "wrong-password"},
        )

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid credentials"
        assert "set-cookie" not in response.headers

    async def test_login_unknown_email(self, client: AsyncClient):
        response = await client.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": PASSWORD},
        )

        assert response.status_code == 401
        assert response.json()["error"] == "Invalid credentials"

    @pytest.mark.parametrize(
        "body",
        [{}, {"email": "admin@example.com"}, {"password": PASSWORD}, {"email": "", "password": ""}],
    )
    async def test_login_missing_fields(self, client: AsyncClient, body: dict):
        response = await client.post("/api/auth/login", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "Email and password are required"

    async def test_issued_cookie_opens_admin_routes(
        self, client: AsyncClient, admin_user: User
    ):
        login = await client.post(
            "/api/auth/login",
            json={"email": admin_user.email, "password": PASSWORD},
        )
        token = login.headers["set-cookie"].split(";", 1)[0]

        response = await client.get("/api/admin/tenants", headers={"Cookie": token})

        assert response.status_code == 200


class TestSessionCheck:
    """Tests for GET /api/auth/check."""

    async def test_check_without_session(self, client: AsyncClient):
        response = await client.get("/api/auth/check")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "role": None}

    async def test_check_with_admin_session(self, admin_client: AsyncClient):
        response = await admin_client.get("/api/auth/check")

        assert response.json() == {"authenticated": True, "role": "super_admin"}


class TestLogout:
    """Tests for POST /api/auth/logout."""

    async def test_logout_clears_cookie(self, admin_client: AsyncClient):
        response = await admin_client.post("/api/auth/logout")

        assert response.status_code == 200
        assert response.json() == {"message": "Logout successful"}
        cookie = response.headers["set-cookie"]
        assert cookie.startswith("admin-auth-token=")
        assert "Max-Age=0" in cookie
