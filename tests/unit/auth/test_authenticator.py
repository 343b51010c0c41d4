"""Tests for the cookie session authenticator."""

from types import SimpleNamespace
from uuid import uuid4

import pytest
from fastapi import Response
from starlette.requests import Request

from tenantgate.core.auth import CookieSessionAuthenticator


SECRET = "unit-test-secret-key-with-32-plus-chars"


def make_request(cookie: str | None = None) -> Request:
    headers = []
    if cookie is not None:
        headers.append((b"cookie", cookie.encode()))
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


@pytest.fixture
def authenticator() -> CookieSessionAuthenticator:
    return CookieSessionAuthenticator(secret_key=SECRET, max_age=600)


@pytest.fixture
def user() -> SimpleNamespace:
    return SimpleNamespace(id=uuid4(), email="admin@example.com", role="super_admin")


class TestCookieSessionAuthenticator:
    """Tests for CookieSessionAuthenticator."""

    def test_issue_sets_hardened_cookie(self, authenticator, user):
        response = Response()
        authenticator.issue(response, user)

        cookie = response.headers["set-cookie"]
        assert cookie.startswith("admin-auth-token=")
        assert "HttpOnly" in cookie
        assert "SameSite=strict" in cookie
        assert "Max-Age=600" in cookie
        assert "Path=/" in cookie
        assert "Secure" not in cookie

    def test_secure_flag(self, user):
        authenticator = CookieSessionAuthenticator(secret_key=SECRET, secure=True)
        response = Response()
        authenticator.issue(response, user)

        assert "Secure" in response.headers["set-cookie"]

    async def test_authenticate_reads_issued_cookie(self, authenticator, user):
        response = Response()
        authenticator.issue(response, user)
        token = response.headers["set-cookie"].split(";", 1)[0]

        session = await authenticator.authenticate(make_request(token))

        assert session is not None
        assert session.user_id == user.id
        assert session.role == "super_admin"

    async def test_authenticate_without_cookie(self, authenticator):
        assert await authenticator.authenticate(make_request()) is None

    async def test_authenticate_with_tampered_cookie(self, authenticator):
        request = make_request("admin-auth-token=tampered")
        assert await authenticator.authenticate(request) is None

    def test_clear_expires_cookie(self, authenticator):
        response = Response()
        authenticator.clear(response)

        cookie = response.headers["set-cookie"]
        assert cookie.startswith('admin-auth-token=""')
        assert "Max-Age=0" in cookie

    def test_from_settings(self, settings):
        authenticator = CookieSessionAuthenticator.from_settings(settings)

        assert authenticator.cookie_name == settings.session_cookie_name
        assert authenticator.max_age == settings.session_max_age
        assert authenticator.secure is False
