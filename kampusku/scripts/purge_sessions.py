"""Delete expired server-side sessions.

Usage:
    flask --app kampusku.wsgi purge-sessions
"""

from __future__ import annotations

import click
from flask import current_app
from flask.cli import with_appcontext


@click.command("purge-sessions")
@with_appcontext
def purge_sessions_command() -> None:
    """Remove sessions whose absolute expiry has passed."""
    removed = current_app.extensions["session_store"].purge_expired()
    click.echo(f"Removed {removed} expired session(s)")
