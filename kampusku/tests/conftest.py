import datetime as dt

import pytest

from kampusku import create_app
from kampusku.core.auth.constants import ROLE_ADMIN, ROLE_STUDENT
from kampusku.core.auth.password import hash_password
from kampusku.core.users.models import User
from kampusku.domains.activities.models import Activity
from kampusku.extensions import db


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")


@pytest.fixture()
def app(tmp_path):
    """Per-test app bound to its own file-backed SQLite database."""
    app = create_app(
        "testing",
        overrides={"SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'test.db'}"},
    )
    ctx = app.app_context()
    ctx.push()
    db.create_all()
    try:
        yield app
    finally:
        db.session.remove()
        db.drop_all()
        db.engine.dispose()
        ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_user(app):
    def _make(username: str, role: str = ROLE_STUDENT, password: str = "secret1", email: str | None = None) -> User:
        user = User(
            username=username,
            email=email or f"{username}@kampus.ac.id",
            password_hash=hash_password(password),
            role=role,
        )
        db.session.add(user)
        db.session.commit()
        return user

    return _make


@pytest.fixture()
def login_as(app, make_user):
    """Return a fresh test client logged in as a newly created user."""

    def _login(username: str, role: str = ROLE_STUDENT, password: str = "secret1"):
        make_user(username, role=role, password=password)
        client = app.test_client()
        resp = client.post("/login", json={"username": username, "password": password})
        assert resp.status_code == 200, resp.get_json()
        return client

    return _login


@pytest.fixture()
def admin_client(login_as):
    return login_as("admin", role=ROLE_ADMIN)


@pytest.fixture()
def student_client(login_as):
    return login_as("alice", role=ROLE_STUDENT)


@pytest.fixture()
def open_activity(app):
    today = dt.date.today()
    activity = Activity(
        name="Seminar AI",
        description="Seminar kecerdasan buatan",
        start_date=today - dt.timedelta(days=1),
        end_date=today + dt.timedelta(days=7),
    )
    db.session.add(activity)
    db.session.commit()
    return activity


@pytest.fixture()
def closed_activity(app):
    today = dt.date.today()
    activity = Activity(
        name="Lomba Debat",
        description="",
        start_date=today - dt.timedelta(days=10),
        end_date=today - dt.timedelta(days=1),
    )
    db.session.add(activity)
    db.session.commit()
    return activity
