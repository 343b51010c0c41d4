"""Unit tests for auth backend (session tokens and password handling)."""

from uuid import uuid4

from jose import jwt

from tenantgate.core.auth.backend import (
    create_session_token,
    decode_session_token,
    hash_password,
    verify_password,
)


SECRET = "unit-test-secret-key-with-32-plus-chars"


class TestPasswordHashing:
    """Tests for password hashing functions."""

    def test_hash_password_returns_hash(self):
        """hash_password should return a bcrypt hash."""
        password = "mysecretpassword"
        hashed = hash_password(password)

        assert hashed != password
        assert hashed.startswith("$2b$")  # bcrypt prefix

    def test_verify_password_correct(self):
        hashed = hash_password("mysecretpassword")
        assert verify_password("mysecretpassword", hashed) is True

    def test_verify_password_incorrect(self):
        hashed = hash_password("mysecretpassword")
        assert verify_password("wrongpassword", hashed) is False

    def test_verify_password_malformed_hash(self):
        """A hash in an unknown format never verifies."""
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestSessionTokens:
    """Tests for session token functions."""

    def test_round_trip(self):
        user_id = uuid4()
        token = create_session_token(
            user_id=user_id,
            email="admin@example.com",
            role="super_admin",
            secret_key=SECRET,
            algorithm="HS256",
            max_age=3600,
        )

        session = decode_session_token(token, SECRET, "HS256")

        assert session is not None
        assert session.user_id == user_id
        assert session.email == "admin@example.com"
        assert session.role == "super_admin"
        assert session.is_admin is True

    def test_token_claims(self):
        token = create_session_token(
            user_id=uuid4(),
            email="admin@example.com",
            role="admin",
            secret_key=SECRET,
            algorithm="HS256",
            max_age=3600,
        )

        claims = jwt.get_unverified_claims(token)

        assert claims["type"] == "session"
        assert claims["exp"] - claims["iat"] == 3600

    def test_wrong_secret_is_rejected(self):
        token = create_session_token(
            user_id=uuid4(),
            email="admin@example.com",
            role="admin",
            secret_key=SECRET,
            algorithm="HS256",
            max_age=3600,
        )

        assert decode_session_token(token, "another-secret-key-of-enough-length", "HS256") is None

    def test_expired_token_is_rejected(self):
        token = create_session_token(
            user_id=uuid4(),
            email="admin@example.com",
            role="admin",
            secret_key=SECRET,
            algorithm="HS256",
            max_age=-10,
        )

        assert decode_session_token(token, SECRET, "HS256") is None

    def test_wrong_token_type_is_rejected(self):
        token = jwt.encode(
            {"sub": str(uuid4()), "type": "access", "exp": 9999999999},
            SECRET,
            algorithm="HS256",
        )

        assert decode_session_token(token, SECRET, "HS256") is None

    def test_garbage_is_rejected(self):
        assert decode_session_token("not.a.jwt", SECRET, "HS256") is None

    def test_non_admin_role(self):
        token = create_session_token(
            user_id=uuid4(),
            email="viewer@example.com",
            role="viewer",
            secret_key=SECRET,
            algorithm="HS256",
            max_age=3600,
        )

        session = decode_session_token(token, SECRET, "HS256")

        assert session is not None
        assert session.is_admin is False
