"""Enrollment API controllers."""

from __future__ import annotations

from flask import Blueprint, jsonify, request

from kampusku.core.auth.constants import ROLE_ADMIN, ROLE_STUDENT
from kampusku.core.auth.schemas import SessionUser
from kampusku.core.utils.decorators import require_login, require_role
from kampusku.core.utils.validation import parse_payload, request_payload
from kampusku.domains.enrollments import services
from kampusku.domains.enrollments.mappers import map_enrollment
from kampusku.domains.enrollments.schemas import EnrollmentCreate, EnrollmentFilter

enrollment_api_bp = Blueprint("enrollment_api", __name__)


@enrollment_api_bp.post("/daftar")
@require_login
@require_role(ROLE_STUDENT, message="Hanya mahasiswa yang dapat mendaftar")
def enroll(session_user: SessionUser):
    data = parse_payload(EnrollmentCreate, request_payload(), missing_message="Lengkapi data pendaftaran")
    enrollment = services.enroll_student(session_user, data)
    return jsonify({"success": True, "message": "Pendaftaran berhasil", "pendaftaran": map_enrollment(enrollment)})


@enrollment_api_bp.get("/pendaftaran/admin")
@require_login
@require_role(ROLE_ADMIN)
def list_for_admin(session_user: SessionUser):
    args = {k: v for k, v in request.args.items() if v != ""}
    params = parse_payload(EnrollmentFilter, args, missing_message="Filter tidak valid")
    items = services.list_enrollments_for_admin(params.activity_id)
    return jsonify({"success": True, "pendaftar": [map_enrollment(e) for e in items]})


@enrollment_api_bp.get("/pendaftaran/mahasiswa")
@require_login
@require_role(ROLE_STUDENT)
def list_for_student(session_user: SessionUser):
    items = services.list_enrollments_for_student(session_user.id)
    return jsonify(
        {"success": True, "daftar": [map_enrollment(e, include_email=False) for e in items]}
    )
