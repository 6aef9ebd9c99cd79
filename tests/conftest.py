import pytest
from fastapi.testclient import TestClient

from tasktracker.config import Settings
from tasktracker.main import create_app

TEST_SECRET = "test-signing-secret"
PASSWORD = "secret1"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        secret_key=TEST_SECRET,
        database_url=f"sqlite:///{tmp_path / 'tasktracker.db'}",
        log_level="WARNING",
    )


# Fresh app and database file for each test
@pytest.fixture
def app(settings):
    app = create_app(settings)
    yield app
    app.state.engine.dispose()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


def sign_up(client, username, password=PASSWORD):
    return client.post("/auth/sign-up", data={"username": username, "password": password})


def sign_in(client, username, password=PASSWORD):
    return client.post("/auth/sign-in", data={"username": username, "password": password})


def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register(client):
    """Sign up and sign in ``username``; returns (user_id, headers)."""

    def _register(username, password=PASSWORD):
        assert sign_up(client, username, password).status_code == 200
        r = sign_in(client, username, password)
        assert r.status_code == 200
        data = r.json()["data"]
        return data["user_id"], auth_header(data["token"])

    return _register
