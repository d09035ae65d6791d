"""Service-level error taxonomy mapped onto the JSON error envelope."""

from __future__ import annotations

from typing import Optional


class ServiceError(ValueError):
    """Business-rule failure reported to the caller with ``success=false``."""

    status_code = 400
    code = "bad_request"
    default_message = "Permintaan tidak valid"

    def __init__(self, message: Optional[str] = None, *, code: Optional[str] = None):
        self.message = message or self.default_message
        if code:
            self.code = code
        super().__init__(self.code)

    def to_dict(self) -> dict:
        return {"success": False, "error": self.code, "message": self.message}


class InvalidRequest(ServiceError):
    code = "validation_error"
    default_message = "Data tidak lengkap"


class ConflictError(ServiceError):
    code = "conflict"
    default_message = "Data sudah ada"


class NotFoundError(ServiceError):
    code = "not_found"
    default_message = "Data tidak ditemukan"


class AuthError(ServiceError):
    code = "invalid_password"
    default_message = "Password salah"


class DeadlineError(ServiceError):
    code = "registration_closed"
    default_message = "Pendaftaran sudah ditutup (deadline terlewati)"


class Unauthorized(ServiceError):
    status_code = 401
    code = "unauthorized"
    default_message = "Unauthorized"


class Forbidden(ServiceError):
    status_code = 403
    code = "forbidden"
    default_message = "Forbidden"


__all__ = [
    "ServiceError",
    "InvalidRequest",
    "ConflictError",
    "NotFoundError",
    "AuthError",
    "DeadlineError",
    "Unauthorized",
    "Forbidden",
]
