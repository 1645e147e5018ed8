import os

# must be set before dtt_server.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FILE", "")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SEED_CATALOG", "0")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from dtt_server.database import get_db
from dtt_server.main import app
from dtt_server.models import Base
from dtt_server.services.catalog import seed_catalog


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    """Session bound to a fresh in-memory database with the catalog loaded."""
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = Session()
    seed_catalog(session)
    yield session
    session.close()


@pytest.fixture
def client(engine, db):
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = Session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # no context manager: the lifespan (real engine + seeding) stays out of tests
    yield TestClient(app)
    app.dependency_overrides.clear()


def _register_and_login(client, username, password="secret123", nickname=None):
    body = {"username": username, "password": password}
    if nickname:
        body["nickname"] = nickname
    r = client.post("/api/user/register", json=body)
    assert r.status_code == 200, r.text
    r = client.post("/api/user/login", json={"username": username, "password": password})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['data']['token']}"}


@pytest.fixture
def make_user(client):
    """Registers a user and returns auth headers for it."""
    def _make(username, password="secret123", nickname=None):
        return _register_and_login(client, username, password, nickname)
    return _make


@pytest.fixture
def alice(make_user):
    return make_user("alice", nickname="Alice")


@pytest.fixture
def bob(make_user):
    return make_user("bob", nickname="Bob")
