"""Server-side session stores keyed by an opaque cookie token.

Every store exposes the same small contract (``get``/``set``/``destroy``) plus
``create`` and ``purge_expired`` helpers. The active store lives in
``app.extensions["session_store"]`` and is handed to views through the
authorization decorators; nothing reads it as a module global.
"""

from __future__ import annotations

import logging
import secrets
import threading
from datetime import datetime, timedelta
from typing import Dict, Optional, Protocol, Tuple

from kampusku.core.auth.constants import (
    DEFAULT_SESSION_TTL_SECONDS,
    SESSION_STORE_DATABASE,
    SESSION_STORE_MEMORY,
)
from kampusku.core.auth.models import AuthSession
from kampusku.core.auth.schemas import SessionUser
from kampusku.extensions import db

logger = logging.getLogger(__name__)


def new_session_token() -> str:
    return secrets.token_urlsafe(32)


class SessionStore(Protocol):
    ttl: timedelta

    def get(self, token: str) -> Optional[SessionUser]: ...

    def set(self, token: str, user: SessionUser, expires_at: datetime) -> None: ...

    def destroy(self, token: str) -> None: ...

    def create(self, user: SessionUser) -> Tuple[str, datetime]: ...

    def purge_expired(self) -> int: ...


class _BaseSessionStore:
    def __init__(self, ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS):
        self.ttl = timedelta(seconds=ttl_seconds)

    def create(self, user: SessionUser) -> Tuple[str, datetime]:
        """Persist a fresh session and return ``(token, expires_at)``.

        The expiry is absolute: later requests never extend it.
        """
        token = new_session_token()
        expires_at = datetime.utcnow() + self.ttl
        self.set(token, user, expires_at)  # type: ignore[attr-defined]
        return token, expires_at


class DatabaseSessionStore(_BaseSessionStore):
    """Sessions persisted in the ``auth_session`` table."""

    def __init__(self, ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS, session=None):
        super().__init__(ttl_seconds)
        self._session = session

    @property
    def session(self):
        return self._session or db.session

    def get(self, token: str) -> Optional[SessionUser]:
        if not token:
            return None
        record = self.session.query(AuthSession).filter_by(session_id=token).first()
        if not record:
            return None
        if record.expires_at <= datetime.utcnow():
            return None
        return SessionUser(id=record.user_id, username=record.username, email=record.email, role=record.role)

    def set(self, token: str, user: SessionUser, expires_at: datetime) -> None:
        record = self.session.query(AuthSession).filter_by(session_id=token).first()
        if record is None:
            record = AuthSession(session_id=token, user_id=user.id)
            self.session.add(record)
        record.user_id = user.id
        record.username = user.username
        record.email = user.email
        record.role = user.role
        record.expires_at = expires_at
        self.session.commit()

    def destroy(self, token: str) -> None:
        if not token:
            return
        self.session.query(AuthSession).filter_by(session_id=token).delete()
        self.session.commit()

    def purge_expired(self) -> int:
        removed = (
            self.session.query(AuthSession)
            .filter(AuthSession.expires_at <= datetime.utcnow())
            .delete()
        )
        self.session.commit()
        return removed


class MemorySessionStore(_BaseSessionStore):
    """Process-local store for single-worker development and tests."""

    def __init__(self, ttl_seconds: int = DEFAULT_SESSION_TTL_SECONDS):
        super().__init__(ttl_seconds)
        self._entries: Dict[str, Tuple[SessionUser, datetime]] = {}
        self._lock = threading.Lock()

    def get(self, token: str) -> Optional[SessionUser]:
        with self._lock:
            entry = self._entries.get(token)
        if not entry:
            return None
        user, expires_at = entry
        if expires_at <= datetime.utcnow():
            with self._lock:
                self._entries.pop(token, None)
            return None
        return user

    def set(self, token: str, user: SessionUser, expires_at: datetime) -> None:
        with self._lock:
            self._entries[token] = (user, expires_at)

    def destroy(self, token: str) -> None:
        with self._lock:
            self._entries.pop(token, None)

    def purge_expired(self) -> int:
        now = datetime.utcnow()
        with self._lock:
            expired = [token for token, (_, expires_at) in self._entries.items() if expires_at <= now]
            for token in expired:
                del self._entries[token]
        return len(expired)


def build_session_store(app):
    """Instantiate the store named by ``SESSION_STORE``."""
    kind = (app.config.get("SESSION_STORE") or SESSION_STORE_DATABASE).lower()
    ttl = int(app.config.get("SESSION_TTL_SECONDS", DEFAULT_SESSION_TTL_SECONDS))
    if kind == SESSION_STORE_MEMORY:
        return MemorySessionStore(ttl)
    if kind != SESSION_STORE_DATABASE:
        logger.warning("Unknown SESSION_STORE %r, falling back to database", kind)
    return DatabaseSessionStore(ttl)


__all__ = [
    "SessionStore",
    "DatabaseSessionStore",
    "MemorySessionStore",
    "build_session_store",
    "new_session_token",
]
