"""Activity API controllers."""

from __future__ import annotations

from flask import Blueprint, jsonify

from kampusku.core.auth.constants import ROLE_ADMIN
from kampusku.core.auth.schemas import SessionUser
from kampusku.core.utils.decorators import require_login, require_role
from kampusku.core.utils.validation import parse_payload, request_payload
from kampusku.domains.activities import services
from kampusku.domains.activities.mappers import map_activity
from kampusku.domains.activities.schemas import ActivityWrite

activity_api_bp = Blueprint("activity_api", __name__)

_MISSING_MESSAGE = "Lengkapi data kegiatan"


@activity_api_bp.get("/kegiatan")
def list_activities():
    items = services.list_activities()
    return jsonify({"success": True, "kegiatan": [map_activity(a) for a in items]})


@activity_api_bp.post("/kegiatan")
@require_login
@require_role(ROLE_ADMIN)
def create_activity(session_user: SessionUser):
    data = parse_payload(ActivityWrite, request_payload(), missing_message=_MISSING_MESSAGE)
    activity = services.create_activity(
        name=data.name,
        description=data.description,
        start_date=data.start_date,
        end_date=data.end_date,
    )
    return jsonify({"success": True, "message": "Kegiatan dibuat", "kegiatan": map_activity(activity)})


@activity_api_bp.put("/kegiatan/<int:activity_id>")
@require_login
@require_role(ROLE_ADMIN)
def update_activity(activity_id: int, session_user: SessionUser):
    data = parse_payload(ActivityWrite, request_payload(), missing_message=_MISSING_MESSAGE)
    services.update_activity(
        activity_id,
        name=data.name,
        description=data.description,
        start_date=data.start_date,
        end_date=data.end_date,
    )
    return jsonify({"success": True, "message": "Kegiatan diperbarui"})


@activity_api_bp.delete("/kegiatan/<int:activity_id>")
@require_login
@require_role(ROLE_ADMIN)
def delete_activity(activity_id: int, session_user: SessionUser):
    services.delete_activity(activity_id)
    return jsonify({"success": True, "message": "Kegiatan dihapus"})
