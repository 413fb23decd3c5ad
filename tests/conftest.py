"""
Shared fixtures: an in-memory database recreated per test and HTTP clients.
"""

import os

# Must be set before blog reads its settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from blog import models
from blog.database import SessionLocal, engine
from blog.main import app

DEFAULT_PASSWORD = "trailmix"


@pytest.fixture(autouse=True)
def reset_database():
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_client():
    """Factory for extra clients, each with its own session cookie."""
    clients = []

    def _make(raise_server_exceptions=True):
        test_client = TestClient(app, raise_server_exceptions=raise_server_exceptions)
        clients.append(test_client)
        return test_client

    yield _make
    for test_client in clients:
        test_client.close()


def register(client, username, password=DEFAULT_PASSWORD):
    return client.post(
        "/register",
        data={"username": username, "password": password},
        follow_redirects=False,
    )


def login(client, username, password=DEFAULT_PASSWORD):
    return client.post(
        "/login",
        data={"username": username, "password": password},
        follow_redirects=False,
    )


@pytest.fixture
def logged_in_client(client):
    """Client with user 'hiker' registered and logged in."""
    register(client, "hiker")
    login(client, "hiker")
    return client
