"""Create an administrator account.

Usage:
    flask --app kampusku.wsgi create-admin --username admin --email admin@kampus.ac.id --password secret123
"""

from __future__ import annotations

import click
from flask.cli import with_appcontext

from kampusku.core.auth.auth_service import register_user
from kampusku.core.auth.constants import ROLE_ADMIN
from kampusku.core.auth.schemas import RegisterRequest
from kampusku.core.errors import ServiceError


@click.command("create-admin")
@click.option("--username", required=True, help="Admin username")
@click.option("--email", required=True, help="Admin email")
@click.option("--password", required=True, help="Admin password")
@with_appcontext
def create_admin_command(username: str, email: str, password: str) -> None:
    """Register an account with the admin role."""
    payload = RegisterRequest(username=username, email=email, password=password, role=ROLE_ADMIN)
    try:
        user = register_user(payload)
    except ServiceError as exc:
        click.echo(exc.message, err=True)
        raise click.Abort()
    click.echo(f"Created admin {user.username} <{user.email}>")
