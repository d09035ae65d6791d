"""Auth HTTP controllers."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from kampusku.core.auth.auth_service import login_user, logout_user, register_user
from kampusku.core.auth.schemas import LoginRequest, RegisterRequest, SessionUser
from kampusku.core.utils.decorators import get_session_store, require_login, session_token
from kampusku.core.utils.validation import parse_payload, request_payload
from kampusku.extensions import limiter

auth_bp = Blueprint("auth_api", __name__)


@auth_bp.post("/register")
@limiter.limit("5/minute")
def register():
    data = parse_payload(RegisterRequest, request_payload(), missing_message="Semua field wajib diisi")
    register_user(data)
    return jsonify({"success": True, "message": "Register berhasil. Silakan login."})


@auth_bp.post("/login")
@limiter.limit("10/minute")
def login():
    data = parse_payload(LoginRequest, request_payload(), missing_message="Masukkan username & password")
    user, token, expires_at = login_user(get_session_store(), data, previous_token=session_token())
    resp = jsonify({"success": True, "message": "Login sukses", "user": user.to_dict()})
    resp.set_cookie(
        current_app.config["AUTH_COOKIE_NAME"],
        token,
        max_age=int(current_app.config["SESSION_TTL_SECONDS"]),
        expires=expires_at,
        httponly=True,
        secure=current_app.config.get("SESSION_COOKIE_SECURE", False),
        samesite=current_app.config.get("SESSION_COOKIE_SAMESITE", "Lax"),
    )
    return resp


@auth_bp.post("/logout")
def logout():
    logout_user(get_session_store(), session_token())
    resp = jsonify({"success": True, "message": "Logout sukses"})
    resp.delete_cookie(current_app.config["AUTH_COOKIE_NAME"])
    return resp


@auth_bp.get("/me")
@require_login
def me(session_user: SessionUser):
    return jsonify({"success": True, "user": session_user.to_dict()})
