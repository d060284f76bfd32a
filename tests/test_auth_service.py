"""Tests for password hashing and token issuing."""

from datetime import timedelta
from types import SimpleNamespace

import pytest
from jose import jwt

from app.services.auth import (
    create_access_token,
    get_secret_key,
    hash_password,
    issue_token_for,
    verify_password,
    verify_token,
)
from app.utils.errors import AuthenticationError
from app.utils.security import is_date_key, is_numeric, validate_password_strength, validate_username
from settings import settings


class TestPasswords:
    """Tests for bcrypt hashing."""

    def test_hash_round_trip(self):
        hashed = hash_password("password123")
        assert hashed != "password123"
        assert verify_password("password123", hashed)
        assert not verify_password("password124", hashed)

    def test_hashes_are_salted(self):
        assert hash_password("password123") != hash_password("password123")

    def test_malformed_hash_does_not_raise(self):
        assert verify_password("password123", "not-a-bcrypt-hash") is False


class TestTokens:
    """Tests for JWT issue and verification."""

    def test_issued_claim_carries_identity_and_role(self):
        account = SimpleNamespace(id=7, username="alice", role="trainer")
        claims = verify_token(issue_token_for(account))
        assert claims["sub"] == "7"
        assert claims["username"] == "alice"
        assert claims["role"] == "trainer"
        assert "exp" in claims

    def test_expired_token_is_rejected(self):
        token = create_access_token(
            {"sub": "1", "username": "alice", "role": "user"},
            expires_delta=timedelta(seconds=-10)
        )
        with pytest.raises(AuthenticationError):
            verify_token(token)

    def test_wrong_signature_is_rejected(self):
        token = jwt.encode(
            {"sub": "1", "username": "alice", "role": "admin"},
            "some-other-secret",
            algorithm=settings.ALGORITHM
        )
        with pytest.raises(AuthenticationError):
            verify_token(token)

    def test_garbage_is_rejected(self):
        with pytest.raises(AuthenticationError) as excinfo:
            verify_token("not.a.token")
        assert excinfo.value.status_code == 401

    def test_incomplete_claim_is_rejected(self):
        token = create_access_token({"sub": "1"})
        with pytest.raises(AuthenticationError):
            verify_token(token)

    def test_non_numeric_subject_is_rejected(self):
        token = create_access_token({"sub": "abc", "username": "alice", "role": "user"})
        with pytest.raises(AuthenticationError):
            verify_token(token)

    def test_configured_secret_is_used(self):
        assert get_secret_key() == settings.SECRET_KEY


class TestInputValidation:
    """Tests for credential format rules."""

    @pytest.mark.parametrize("username", ["al", "alice_1", "A" * 30, "Bob_Smith"])
    def test_valid_usernames(self, username):
        assert validate_username(username) == (True, "")

    @pytest.mark.parametrize("username", ["a", "A" * 31, "alice!", "al ice", ""])
    def test_invalid_usernames(self, username):
        is_valid, error = validate_username(username)
        assert not is_valid
        assert "2-30 characters" in error

    def test_password_length(self):
        assert validate_password_strength("1234567")[0] is False
        assert validate_password_strength("12345678")[0] is True

    @pytest.mark.parametrize("value, expected", [
        (400, True),
        (12.5, True),
        ("350", True),
        ("lots", False),
        (None, False),
        (True, False),
        ([], False),
    ])
    def test_is_numeric(self, value, expected):
        assert is_numeric(value) is expected

    @pytest.mark.parametrize("value, expected", [
        ("2024-01-01", True),
        ("x" * 32, True),
        ("x" * 33, False),
        ("   ", False),
        (["2024-01-01"], False),
        ({"y": 2024}, False),
        (20240101, False),
        (None, False),
    ])
    def test_is_date_key(self, value, expected):
        assert is_date_key(value) is expected
