"""Enrollment (pendaftaran) model."""

from __future__ import annotations

import datetime as dt

from sqlalchemy.orm import Mapped, mapped_column, relationship

from kampusku.domains.activities.models import Activity
from kampusku.extensions import db


class Enrollment(db.Model):
    """A student's registration for one activity.

    ``nama`` and ``email`` are copied from the session at enrollment time and
    are not kept in sync with ``users``.
    """

    __tablename__ = "pendaftaran"
    __table_args__ = (
        db.UniqueConstraint("user_id", "kegiatan_id", name="uq_pendaftaran_user_kegiatan"),
        db.Index("ix_pendaftaran_kegiatan", "kegiatan_id"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)
    user_id: Mapped[int] = mapped_column(db.ForeignKey("users.id"), nullable=False)
    name: Mapped[str] = mapped_column("nama", db.String(80), nullable=False)
    student_number: Mapped[str] = mapped_column("nim", db.String(32), nullable=False)
    program: Mapped[str] = mapped_column("prodi", db.String(128), nullable=False)
    email: Mapped[str] = mapped_column(db.String(255), nullable=False)
    activity_id: Mapped[int] = mapped_column(
        "kegiatan_id", db.ForeignKey("kegiatan.id", ondelete="CASCADE"), nullable=False
    )
    registered_at: Mapped[dt.datetime] = mapped_column(
        "tanggal_daftar", db.DateTime, nullable=False, server_default=db.func.now()
    )

    activity: Mapped[Activity] = relationship("Activity", lazy="joined")
