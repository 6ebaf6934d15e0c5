"""
Shared fixtures: a fresh SQLite-backed app per test.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event
from healthtrack.core.config import Settings
from healthtrack.main import create_app
from healthtrack.models.user import User


class PoolCounter:
    """Counts connections handed out by and returned to an engine's pool."""

    def __init__(self, engine):
        self.checkouts = 0
        self.checkins = 0
        event.listen(engine, "checkout", self._on_checkout)
        event.listen(engine, "checkin", self._on_checkin)

    def _on_checkout(self, dbapi_connection, connection_record, connection_proxy):
        self.checkouts += 1

    def _on_checkin(self, dbapi_connection, connection_record):
        self.checkins += 1

    @property
    def outstanding(self):
        return self.checkouts - self.checkins


@pytest.fixture
def settings(tmp_path):
    return Settings(
        SECRET_KEY="test-secret-key",
        DATABASE_URL=f"sqlite:///{tmp_path / 'healthtrack.db'}",
        DB_POOL_SIZE=2,
        DB_MAX_OVERFLOW=0,
        DB_POOL_TIMEOUT=0.5,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.state.database.init_db()
    yield app
    app.state.database.dispose()


@pytest.fixture
def database(app):
    return app.state.database


@pytest.fixture
def codec(app):
    return app.state.token_codec


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def pool_counter(database):
    return PoolCounter(database.engine)


@pytest.fixture
def register(client):
    """Register a user through the API and return its token."""
    def _register(username, password="pw1"):
        response = client.post(
            "/api/auth/register",
            json={"username": username, "password": password}
        )
        assert response.status_code == 201
        return response.json()["jwt"]
    return _register


@pytest.fixture
def headers_for(register):
    """Register a user and return the Authorization header for it."""
    def _headers_for(username):
        return {"Authorization": f"Bearer {register(username)}"}
    return _headers_for


@pytest.fixture
def user_ids(database):
    """Two users created directly in storage, for service-level tests."""
    with database.request_scope() as db:
        alice = User(user_name="alice", user_password="not-a-real-hash")
        bob = User(user_name="bob", user_password="not-a-real-hash")
        db.add_all([alice, bob])
        db.commit()
        return alice.id, bob.id
