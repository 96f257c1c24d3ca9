"""Unit tests for the hashing, token and clock adapters."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from account_service.infra.jwt.flask_jwt_token_encryptor import JWTTokenEncryptor
from account_service.infra.system.clock import SystemClock
from account_service.infra.system.token_generator import UUIDTokenGenerator
from account_service.infra.werkzeug.werkzeug_hash_provider import WerkzeugHashProvider
from flask_jwt_extended import decode_token
from freezegun import freeze_time


class TestWerkzeugHashProvider:
    @pytest.fixture()
    def hasher(self) -> WerkzeugHashProvider:
        return WerkzeugHashProvider(iterations=1_000)

    def test_hash_is_salted_and_verifies(self, hasher):
        h1 = hasher.hash("s3cret")
        h2 = hasher.hash("s3cret")

        assert h1 != h2
        assert "s3cret" not in h1
        assert hasher.compare("s3cret", h1) is True
        assert hasher.compare("wrong", h1) is False

    def test_iterations_are_appended_to_pbkdf2(self, hasher):
        assert hasher.method_spec() == "pbkdf2:sha256:1000"
        assert hasher.hash("x").startswith("pbkdf2:sha256:1000$")

    @pytest.mark.parametrize(
        ("method", "expected"),
        [("pbkdf2:sha256:5000", "pbkdf2:sha256:5000"), ("scrypt", "scrypt")],
    )
    def test_explicit_methods_are_left_alone(self, method, expected):
        assert WerkzeugHashProvider(method=method, iterations=1_000).method_spec() == expected

    def test_compare_against_garbage_hash_is_false(self, hasher):
        assert hasher.compare("x", "not-a-hash") is False


class TestJWTTokenEncryptor:
    def test_subject_becomes_sub_claim(self, app):
        with app.app_context():
            token = JWTTokenEncryptor(expires_delta=timedelta(minutes=5)).encrypt("acc-1")
            claims = decode_token(token)

        assert claims["sub"] == "acc-1"
        assert claims["type"] == "access"
        assert claims["exp"] - claims["iat"] == 300


class TestSystemAdapters:
    @freeze_time("2024-03-01 10:00:00")
    def test_clock_returns_aware_utc(self):
        now = SystemClock().now()

        assert now == datetime(2024, 3, 1, 10, 0, tzinfo=UTC)
        assert now.tzinfo is not None

    def test_generated_tokens_are_unique_hex(self):
        gen = UUIDTokenGenerator()
        values = {gen.generate() for _ in range(200)}

        assert len(values) == 200
        assert all(len(v) == 32 and int(v, 16) >= 0 for v in values)
