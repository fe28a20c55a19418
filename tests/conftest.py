import os
from typing import Callable, Generator

import pytest
from fastapi.testclient import TestClient

os.environ["DATABASE_URL"] = "sqlite:///./test_crewhub.db"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["ADMIN_USERNAME"] = "admin@crewhub.com"
os.environ["ADMIN_PASSWORD"] = "admin"
os.environ["SESSION_SECRET"] = "test-secret"

from crewhub.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from sqlmodel import SQLModel, Session  # noqa: E402

from crewhub.database import engine  # noqa: E402
from crewhub.main import app  # noqa: E402

ADMIN_CREDENTIALS = {"username": "admin@crewhub.com", "password": "admin"}


@pytest.fixture(autouse=True, scope="function")
def _create_test_database() -> Generator[None, None, None]:
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield
    SQLModel.metadata.drop_all(engine)


@pytest.fixture()
def db_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture()
def make_client() -> Generator[Callable[[], TestClient], None, None]:
    """
    Factory for independent clients: each has its own cookie jar, so one
    test can act as several logged-in identities at once.
    """
    clients: list[TestClient] = []

    def _make() -> TestClient:
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture()
def client(make_client) -> TestClient:
    return make_client()


def customer_payload(username: str = "alice", password: str = "pw1", **overrides) -> dict:
    payload = {
        "username": username,
        "password": password,
        "fullName": username.capitalize(),
        "mobile": "5550001",
        "address": "1 Main St",
        "pincode": "10001",
        "role": "customer",
    }
    payload.update(overrides)
    return payload


def worker_payload(
    username: str = "bob",
    password: str = "pw2",
    worker_type: str = "Plumber",
    visiting_charge: int = 40,
    **overrides,
) -> dict:
    payload = {
        "username": username,
        "password": password,
        "fullName": username.capitalize(),
        "mobile": "5550002",
        "address": "2 Side St",
        "pincode": "10001",
        "role": "worker",
        "workerType": worker_type,
        "visitingCharge": visiting_charge,
        "isAvailable": True,
    }
    payload.update(overrides)
    return payload


@pytest.fixture()
def register(make_client) -> Callable[[dict], tuple[TestClient, dict]]:
    """Register an identity on a fresh client; returns (client, user json)."""

    def _register(payload: dict) -> tuple[TestClient, dict]:
        c = make_client()
        response = c.post("/api/register", json=payload)
        assert response.status_code == 201, response.text
        return c, response.json()

    return _register


@pytest.fixture()
def admin_client(make_client) -> TestClient:
    c = make_client()
    response = c.post("/api/login", json=ADMIN_CREDENTIALS)
    assert response.status_code == 200, response.text
    return c


@pytest.fixture()
def alice(register):
    return register(customer_payload())


@pytest.fixture()
def bob(register):
    return register(worker_payload())
