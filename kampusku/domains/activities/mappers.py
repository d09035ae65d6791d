"""DTO mappers for activities."""

from __future__ import annotations

from kampusku.domains.activities.models import Activity


def map_activity(activity: Activity) -> dict:
    return {
        "id": activity.id,
        "nama_kegiatan": activity.name,
        "deskripsi": activity.description or "",
        "tanggal_mulai": activity.start_date.isoformat() if activity.start_date else None,
        "tanggal_akhir": activity.end_date.isoformat() if activity.end_date else None,
    }
