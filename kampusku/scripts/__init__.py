"""Flask CLI commands."""

from kampusku.scripts.create_admin import create_admin_command
from kampusku.scripts.purge_sessions import purge_sessions_command


def register_commands(app):
    """Register CLI commands with the app."""
    app.cli.add_command(create_admin_command)
    app.cli.add_command(purge_sessions_command)
