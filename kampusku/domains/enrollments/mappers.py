"""DTO mappers for enrollments."""

from __future__ import annotations

from kampusku.domains.enrollments.models import Enrollment


def map_enrollment(enrollment: Enrollment, *, include_email: bool = True) -> dict:
    data = {
        "id": enrollment.id,
        "nama": enrollment.name,
        "nim": enrollment.student_number,
        "prodi": enrollment.program,
        "kegiatan_id": enrollment.activity_id,
        "nama_kegiatan": enrollment.activity.name if enrollment.activity else None,
        "tanggal_daftar": enrollment.registered_at.isoformat() if enrollment.registered_at else None,
    }
    if include_email:
        data["email"] = enrollment.email
    return data
