from __future__ import annotations

from datetime import datetime, timedelta

from kampusku.core.auth.models import AuthSession
from kampusku.core.users.models import User
from kampusku.extensions import db


def test_create_admin_command(app):
    runner = app.test_cli_runner()
    result = runner.invoke(
        args=["create-admin", "--username", "root", "--email", "root@kampus.ac.id", "--password", "rahasia1"]
    )
    assert result.exit_code == 0, result.output
    assert "Created admin root" in result.output
    assert User.query.filter_by(username="root").one().role == "admin"


def test_create_admin_rejects_duplicate_email(app, make_user):
    make_user("root", email="root@kampus.ac.id")
    runner = app.test_cli_runner()
    result = runner.invoke(
        args=["create-admin", "--username", "root2", "--email", "root@kampus.ac.id", "--password", "rahasia1"]
    )
    assert result.exit_code != 0
    assert "Email sudah terdaftar" in result.output


def test_purge_sessions_command(app, make_user):
    user = make_user("eka")
    now = datetime.utcnow()
    for token, expires_at in (("old", now - timedelta(hours=1)), ("new", now + timedelta(hours=1))):
        db.session.add(
            AuthSession(
                session_id=token,
                user_id=user.id,
                username=user.username,
                email=user.email,
                role=user.role,
                expires_at=expires_at,
            )
        )
    db.session.commit()

    result = app.test_cli_runner().invoke(args=["purge-sessions"])
    assert result.exit_code == 0
    assert "Removed 1 expired session(s)" in result.output
    assert [s.session_id for s in AuthSession.query.all()] == ["new"]
