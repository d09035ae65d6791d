"""Activity (kegiatan) model."""

from __future__ import annotations

import datetime as dt

from sqlalchemy.orm import Mapped, mapped_column

from kampusku.extensions import db


class Activity(db.Model):
    __tablename__ = "kegiatan"
    # Deleted ids are never handed out again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column("nama_kegiatan", db.String(255), nullable=False)
    description: Mapped[str] = mapped_column("deskripsi", db.Text, nullable=False, default="")
    start_date: Mapped[dt.date] = mapped_column("tanggal_mulai", db.Date, nullable=False, index=True)
    end_date: Mapped[dt.date] = mapped_column("tanggal_akhir", db.Date, nullable=False)
    created_at: Mapped[dt.datetime] = mapped_column(default=dt.datetime.utcnow)
