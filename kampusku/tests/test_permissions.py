import pytest
from flask import Blueprint

pytestmark = pytest.mark.integration

from kampusku.core.utils.decorators import require_login, require_role


@pytest.fixture
def protected_app(app):
    bp = Blueprint("perm_test", __name__)

    @bp.get("/only-login")
    @require_login
    def only_login(session_user):
        return {"success": True, "username": session_user.username}

    @bp.get("/only-role")
    @require_role("admin")
    def only_role(session_user):
        return {"success": True}

    @bp.get("/login-and-role")
    @require_login
    @require_role("admin")
    def login_and_role(session_user):
        return {"success": True}

    app.register_blueprint(bp)
    return app


def _client_for(protected_app, make_user, username, role):
    make_user(username, role=role)
    client = protected_app.test_client()
    resp = client.post("/login", json={"username": username, "password": "secret1"})
    assert resp.status_code == 200
    return client


def test_require_login_without_session(protected_app):
    resp = protected_app.test_client().get("/only-login")
    assert resp.status_code == 401
    assert resp.get_json() == {"success": False, "error": "unauthorized", "message": "Unauthorized"}


def test_require_login_passes_session_user(protected_app, make_user):
    client = _client_for(protected_app, make_user, "budi", "mahasiswa")
    resp = client.get("/only-login")
    assert resp.status_code == 200
    assert resp.get_json()["username"] == "budi"


def test_require_role_alone_without_session_is_forbidden(protected_app):
    resp = protected_app.test_client().get("/only-role")
    assert resp.status_code == 403


def test_stacked_gate_without_session_is_unauthorized(protected_app):
    resp = protected_app.test_client().get("/login-and-role")
    assert resp.status_code == 401


def test_wrong_role_is_forbidden(protected_app, make_user):
    client = _client_for(protected_app, make_user, "budi", "mahasiswa")
    assert client.get("/only-role").status_code == 403
    assert client.get("/login-and-role").status_code == 403


def test_matching_role_passes(protected_app, make_user):
    client = _client_for(protected_app, make_user, "root", "admin")
    assert client.get("/only-role").status_code == 200
    assert client.get("/login-and-role").status_code == 200


def test_forged_cookie_is_rejected(protected_app):
    client = protected_app.test_client()
    client.set_cookie(protected_app.config["AUTH_COOKIE_NAME"], "forged-token")
    assert client.get("/only-login").status_code == 401
