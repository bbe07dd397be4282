"""Shared fixtures: an app wired to an in-memory Redis and a fixed clock."""

from datetime import datetime, timedelta, timezone

import fakeredis
import pytest
from flask_jwt_extended import create_access_token

from sitecontent import create_app
from sitecontent.services.users import UserRepository
from sitecontent.store.kv import KeyValueStore

ADMIN = "admin"
ADMIN_PASSWORD = "correct-horse-battery"


class SteppingClock:
    """Returns a new instant, one second later, on every call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        moment = self.current
        self.current += timedelta(seconds=1)
        return moment


@pytest.fixture
def redis_client():
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture
def store(redis_client) -> KeyValueStore:
    return KeyValueStore(redis_client)


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def app(redis_client, clock):
    app = create_app("testing", store=redis_client)
    app.extensions["history_clock"] = clock
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_user(store):
    return UserRepository(store).create(ADMIN, ADMIN_PASSWORD)


@pytest.fixture
def auth_client(app, admin_user):
    """Test client carrying a valid session cookie for the admin user."""
    with app.app_context():
        token = create_access_token(identity=ADMIN)

    client = app.test_client()
    client.set_cookie("auth_token", token)
    return client
