"""Authentication service layer."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from kampusku.core.auth.constants import ROLES
from kampusku.core.auth.password import hash_password, verify_password
from kampusku.core.auth.schemas import LoginRequest, RegisterRequest, SessionUser
from kampusku.core.auth.session_store import SessionStore
from kampusku.core.errors import AuthError, ConflictError, InvalidRequest, NotFoundError
from kampusku.core.users.models import User
from kampusku.extensions import db

logger = logging.getLogger(__name__)


def register_user(payload: RegisterRequest) -> User:
    """Create an account; the caller still has to log in."""
    if payload.role not in ROLES:
        raise InvalidRequest("Role tidak dikenal", code="invalid_role")

    existing = User.query.filter(func.lower(User.email) == payload.email).first()
    if existing:
        raise ConflictError("Email sudah terdaftar", code="email_already_exists")
    if User.query.filter_by(username=payload.username).first():
        raise ConflictError("Username sudah digunakan", code="username_already_exists")

    user = User(
        username=payload.username,
        email=payload.email,
        password_hash=hash_password(payload.password),
        role=payload.role,
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError as exc:
        # A concurrent registration claimed the email or username first.
        db.session.rollback()
        raise ConflictError("Email atau username sudah terdaftar", code="account_already_exists") from exc

    logger.info("Registered user %s with role %s", user.username, user.role)
    return user


def authenticate_user(username: str, password: str) -> User:
    """Return the user if credentials are valid, else raise."""
    user = User.query.filter_by(username=username).first()
    if not user:
        raise NotFoundError("User tidak ditemukan", code="user_not_found")
    if not verify_password(password, user.password_hash):
        logger.info("Rejected login for %s: bad password", username)
        raise AuthError("Password salah", code="invalid_password")
    return user


def login_user(
    store: SessionStore, payload: LoginRequest, *, previous_token: Optional[str] = None
) -> Tuple[SessionUser, str, datetime]:
    """Verify credentials and open a session.

    Returns the session user snapshot, the opaque token for the cookie and its
    absolute expiry.
    """
    user = authenticate_user(payload.username, payload.password)
    if previous_token:
        store.destroy(previous_token)
    session_user = SessionUser(id=user.id, username=user.username, email=user.email, role=user.role)
    token, expires_at = store.create(session_user)
    logger.info("User %s logged in", user.username)
    return session_user, token, expires_at


def logout_user(store: SessionStore, token: Optional[str]) -> None:
    """Drop the session behind ``token``; a no-op when there is none."""
    if token:
        store.destroy(token)
