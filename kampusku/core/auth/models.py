"""Server-side session records."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Mapped, mapped_column

from kampusku.extensions import db


class AuthSession(db.Model):
    """Snapshot of the account taken at login; never re-read from ``users``."""

    __tablename__ = "auth_session"
    __table_args__ = (
        db.UniqueConstraint("session_id", name="uq_auth_session_session_id"),
        db.Index("ix_auth_session_user", "user_id"),
        db.Index("ix_auth_session_expires_at", "expires_at"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    session_id: Mapped[str] = mapped_column(db.String(128), nullable=False)
    user_id: Mapped[int] = mapped_column(db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    username: Mapped[str] = mapped_column(db.String(80), nullable=False)
    email: Mapped[str] = mapped_column(db.String(255), nullable=False)
    role: Mapped[str] = mapped_column(db.String(32), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=datetime.utcnow)
