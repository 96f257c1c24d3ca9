"""Pytest fixtures configuring an isolated transactional database layer.

Each test runs inside an outer transaction against an in-memory SQLite
database, rolled back afterwards, so data changes never leak between cases.
Use-case tests get in-memory port doubles instead.
"""

from __future__ import annotations

import os
from datetime import UTC, datetime

import pytest
from account_service.core.extensions import db as _db  # Flask-SQLAlchemy instance
from account_service.factory import create_app  # application factory under test
from account_service.services._shared.ports import (
    FixedClock,
    InMemoryAccountStore,
    InMemoryRefreshTokenStore,
    PlainHashProvider,
    SequentialTokenGenerator,
    StubTokenEncryptor,
)
from sqlalchemy.orm import scoped_session, sessionmaker

T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


class TestConfig:
    """Testing configuration for creating the Flask app.

    Notes
    -----
    - Uses an in-memory SQLite database for speed.
    - Keeps PBKDF2 cheap and refresh tokens in SQL (no Redis).
    """

    TESTING = True
    DEBUG = False
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    JWT_ACCESS_TOKEN_EXPIRES = 300
    REFRESH_TOKEN_TTL = 3600
    REFRESH_TOKEN_BACKEND = "sql"
    REDIS_URL = None
    PASSWORD_HASH_METHOD = "pbkdf2:sha256"
    PASSWORD_HASH_ITERATIONS = 1_000
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    API_BASE_PREFIX = "/api"
    LOG_LEVEL = "WARNING"
    CORS_ORIGINS = "*"


@pytest.fixture(scope="session")
def app():
    """Create a Flask application configured for testing."""
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    app = create_app(TestConfig)
    app.logger.setLevel("WARNING")
    return app


@pytest.fixture(scope="session")
def db(app):
    """Create database tables once per test session.

    No app context stays pushed between tests: each request or CLI call
    pushes its own, so ``g`` never carries over.
    """
    with app.app_context():
        _db.create_all()
    yield _db
    with app.app_context():
        _db.drop_all()


@pytest.fixture(scope="session")
def connection(app, db):
    """Keep a dedicated DBAPI connection open for the whole session."""
    with app.app_context():
        conn = db.engine.connect()
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(scope="function")
def session(db, connection):
    """Provide a SQLAlchemy session joined to an outer transaction.

    Notes
    -----
    The session is bound with ``join_transaction_mode="create_savepoint"``:
    its ``commit``/``rollback``/``close`` only act on a SAVEPOINT, so app
    context teardown (``db.session.remove()``) never discards committed test
    data. The outer transaction is rolled back after each test.
    """
    top_trans = connection.begin()
    # pysqlite emits no BEGIN for the outer transaction; holding a SAVEPOINT
    # keeps the session's RELEASEs from committing to the database
    connection.begin_nested()

    SessionFactory = sessionmaker(
        bind=connection,
        join_transaction_mode="create_savepoint",
        expire_on_commit=False,
    )
    scoped = scoped_session(SessionFactory)

    # Monkey-patch db.session so app code uses this scoped session
    original_session = db.session
    db.session = scoped

    try:
        yield scoped
    finally:
        scoped.remove()
        db.session = original_session
        top_trans.rollback()


@pytest.fixture()
def client(app, session):
    """Flask test client sharing the transactional session."""
    return app.test_client()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


# -- Hook up Factory Boy to pytest SQLAlchemy session --------------------------
@pytest.fixture(autouse=True)
def _factories_session(session):
    """Wire Factory Boy's session helper to the transactional session fixture."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(session)
    yield


# -- In-memory port doubles for use-case tests ---------------------------------
@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(T0)


@pytest.fixture()
def hasher() -> PlainHashProvider:
    return PlainHashProvider()


@pytest.fixture()
def encryptor() -> StubTokenEncryptor:
    return StubTokenEncryptor()


@pytest.fixture()
def generator() -> SequentialTokenGenerator:
    return SequentialTokenGenerator()


@pytest.fixture()
def accounts() -> InMemoryAccountStore:
    return InMemoryAccountStore()


@pytest.fixture()
def refresh_tokens() -> InMemoryRefreshTokenStore:
    return InMemoryRefreshTokenStore()


@pytest.fixture()
def t0() -> datetime:
    """The instant ``clock`` starts at."""
    return T0
