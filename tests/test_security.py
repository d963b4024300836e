"""
Task API - Password Hashing, Token and Startup Check Tests
"""

import warnings
from datetime import timedelta

import pytest

from taskapi.config import settings
from taskapi.auth.models import Identity, User
from taskapi.auth.service import (
    create_access_token,
    hash_password,
    verify_password,
    verify_token,
)
from taskapi.errors import ExpiredTokenError, InvalidTokenError, MissingTokenError
from taskapi.security import DEFAULT_JWT_SECRET, validate_security_config


class TestPasswordHashing:

    def test_hash_is_salted(self):
        first = hash_password("pw1", rounds=4)
        second = hash_password("pw1", rounds=4)
        assert first != second
        assert verify_password("pw1", first)
        assert verify_password("pw1", second)

    def test_long_password_is_truncated_to_72_bytes(self):
        hashed = hash_password("p" * 80, rounds=4)
        assert verify_password("p" * 80, hashed)
        assert verify_password("p" * 72, hashed)
        assert not verify_password("p" * 71, hashed)

    def test_wrong_password_fails(self):
        hashed = hash_password("pw1", rounds=4)
        assert not verify_password("pw2", hashed)


class TestVerifyToken:

    def test_round_trip_identity(self):
        token = create_access_token(User(id=7, name="A", email="a@x.com"))
        assert verify_token(token) == Identity(id=7, name="A", email="a@x.com")

    @pytest.mark.parametrize("token", [None, ""])
    def test_missing(self, token):
        with pytest.raises(MissingTokenError):
            verify_token(token)

    def test_expired(self):
        token = create_access_token(
            User(id=7, name="A", email="a@x.com"),
            expires_delta=timedelta(seconds=-1),
        )
        with pytest.raises(ExpiredTokenError):
            verify_token(token)

    def test_malformed(self):
        with pytest.raises(InvalidTokenError):
            verify_token("not.a.token")

    def test_tampered_signature(self):
        header, payload, _ = create_access_token(User(id=7, name="A", email="a@x.com")).split(".")
        with pytest.raises(InvalidTokenError):
            verify_token(f"{header}.{payload}.{'A' * 43}")


class TestSecurityConfig:

    def test_default_secret_warns_in_production(self, monkeypatch):
        monkeypatch.setattr(settings, "ENVIRONMENT", "production")
        monkeypatch.setattr(settings, "JWT_SECRET_KEY", DEFAULT_JWT_SECRET)
        with pytest.warns(UserWarning, match="default JWT_SECRET_KEY"):
            validate_security_config()

    def test_strong_secret_is_quiet(self, monkeypatch):
        monkeypatch.setattr(settings, "ENVIRONMENT", "production")
        monkeypatch.setattr(settings, "JWT_SECRET_KEY", "x" * 48)
        monkeypatch.setattr(settings, "CORS_ORIGINS", ["https://tasks.example.com"])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            validate_security_config()

    def test_cors_wildcard_warns(self, monkeypatch):
        monkeypatch.setattr(settings, "CORS_ORIGINS", ["*"])
        with pytest.warns(UserWarning, match="CORS wildcard"):
            validate_security_config()

    def test_short_secret_warns_in_production(self, monkeypatch):
        monkeypatch.setattr(settings, "ENVIRONMENT", "production")
        monkeypatch.setattr(settings, "JWT_SECRET_KEY", "too-short")
        with pytest.warns(UserWarning, match="shorter than 32"):
            validate_security_config()
