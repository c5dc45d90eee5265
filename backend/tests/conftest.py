"""
Shared fixtures: in-memory SQLite database, test client and user helpers
"""

import os

# Settings are read once at import time, so configure them first
os.environ["DB_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_TO_CONSOLE"] = "false"
os.environ["LOG_TO_FILE"] = "false"

import itertools
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import event

from skip2love.database import engine, SessionLocal
from skip2love.main import app
from skip2love.models.base import Base

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(client):
    counter = itertools.count(1)

    def _make(username=None, **extra):
        username = username or f"user{next(counter)}"
        payload = {
            "username": username,
            "email": f"{username}@skip2love.io",
            "password": PASSWORD,
            **extra,
        }
        response = client.post("/api/register", json=payload)
        assert response.status_code == 200, response.text
        data = response.json()
        return SimpleNamespace(
            id=data["user"]["id"],
            username=username,
            email=payload["email"],
            token=data["token"],
            headers={"Authorization": f"Bearer {data['token']}"},
        )

    return _make


@pytest.fixture
def make_post(client):
    def _make(owner, **overrides):
        payload = {
            "title": "Sunny apartment",
            "description": "Looking for someone to share weekend hikes with.",
            "city": "Arcata",
            **overrides,
        }
        response = client.post("/api/posts", json=payload, headers=owner.headers)
        assert response.status_code == 200, response.text
        return response.json()

    return _make


@pytest.fixture
def commit_before_flush():
    """
    Register a callback that runs in its own committed session right before
    the first flush that inserts an instance of the given model, mimicking a
    concurrent request that wins the insert.
    """
    hooks = []

    def _register(model, callback):
        state = {"fired": False}

        def before_flush(session, flush_context, instances):
            if state["fired"]:
                return
            pending = [obj for obj in session.new if isinstance(obj, model)]
            if not pending:
                return
            state["fired"] = True
            other = SessionLocal()
            try:
                callback(other, pending[0])
                other.commit()
            finally:
                other.close()

        event.listen(SessionLocal, "before_flush", before_flush)
        hooks.append(before_flush)

    yield _register

    for hook in hooks:
        event.remove(SessionLocal, "before_flush", hook)
