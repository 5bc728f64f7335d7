"""Tests for the bcrypt credential service and JWT token service."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from tasklists.domain.shared.errors import InvalidTokenError
from tasklists.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from tasklists.infrastructure.security.jwt_token_service import JwtTokenService

SECRET = "unit-secret"


class TestBcryptPasswordHasher:
    @pytest.fixture
    def hasher(self):
        return BcryptPasswordHasher(rounds=4)

    def test_hash_differs_from_plaintext(self, hasher):
        hashed = hasher.hash("s3cret")

        assert hashed != "s3cret"
        assert hashed.startswith("$2")

    def test_same_password_gets_fresh_salt(self, hasher):
        assert hasher.hash("s3cret") != hasher.hash("s3cret")

    def test_verify(self, hasher):
        hashed = hasher.hash("s3cret")

        assert hasher.verify("s3cret", hashed) is True
        assert hasher.verify("wrong", hashed) is False

    def test_verify_rejects_non_bcrypt_value(self, hasher):
        assert hasher.verify("s3cret", "plaintext") is False

    def test_only_first_72_bytes_count(self, hasher):
        long_password = "a" * 72
        hashed = hasher.hash(long_password + "tail")

        assert hasher.verify(long_password, hashed) is True

    def test_work_factor_is_encoded_in_hash(self):
        hashed = BcryptPasswordHasher(rounds=5).hash("s3cret")

        assert hashed.split("$")[2] == "05"


class TestJwtTokenService:
    @pytest.fixture
    def tokens(self):
        return JwtTokenService(SECRET)

    def test_round_trip(self, tokens):
        token = tokens.issue("665f1c2e9b1e8a0012345678")

        assert tokens.resolve(token) == "665f1c2e9b1e8a0012345678"

    def test_claims(self, tokens):
        token = tokens.issue("user-1")

        payload = jwt.decode(token, SECRET, algorithms=["HS256"])
        assert payload["id"] == "user-1"
        assert payload["exp"] - payload["iat"] == int(timedelta(days=30).total_seconds())

    def test_custom_ttl(self):
        tokens = JwtTokenService(SECRET, ttl=timedelta(hours=1))

        payload = jwt.decode(tokens.issue("user-1"), SECRET, algorithms=["HS256"])
        assert payload["exp"] - payload["iat"] == 3600

    def test_expired_token(self, tokens):
        past = datetime.now(timezone.utc) - timedelta(days=31)
        token = jwt.encode(
            {"id": "user-1", "iat": past, "exp": past + timedelta(days=1)},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(InvalidTokenError, match="expired"):
            tokens.resolve(token)

    def test_wrong_secret(self, tokens):
        token = JwtTokenService("other-secret").issue("user-1")

        with pytest.raises(InvalidTokenError):
            tokens.resolve(token)

    def test_tampered_token(self, tokens):
        header, _, signature = tokens.issue("user-1").split(".")
        _, forged_payload, _ = tokens.issue("user-2").split(".")
        tampered = ".".join([header, forged_payload, signature])

        with pytest.raises(InvalidTokenError):
            tokens.resolve(tampered)

    def test_garbage_token(self, tokens):
        with pytest.raises(InvalidTokenError):
            tokens.resolve("not-a-jwt")

    def test_token_without_id_claim_resolves_to_none(self, tokens):
        token = jwt.encode({"sub": "user-1"}, SECRET, algorithm="HS256")

        assert tokens.resolve(token) is None

    def test_empty_secret_rejected(self):
        with pytest.raises(ValueError):
            JwtTokenService("")
