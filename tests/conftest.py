"""
Test configuration and fixtures.

Provides:
- A controllable clock for expiry checks
- A fresh, seeded store per test
- A FastAPI TestClient bound to an app serving that store
"""
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from identity_api.app.core.store import Store
from identity_api.app.main import create_app


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self) -> None:
        self.current = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **delta: float) -> None:
        self.current += timedelta(**delta)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> Store:
    return Store(clock=clock)


@pytest.fixture
def app(store: Store):
    return create_app(store)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def user(client: TestClient) -> dict:
    response = client.post(
        "/users",
        json={"email": "ada@example.com", "username": "ada", "password": "s3cret", "role_id": "role-2"},
    )
    assert response.status_code == 201
    return response.json()
