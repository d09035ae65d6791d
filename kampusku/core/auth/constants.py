"""Role codes and session defaults."""

from __future__ import annotations

ROLE_ADMIN = "admin"
ROLE_STUDENT = "mahasiswa"

# Roles accepted at registration.
ROLES = (ROLE_ADMIN, ROLE_STUDENT)

DEFAULT_SESSION_TTL_SECONDS = 24 * 60 * 60

SESSION_STORE_DATABASE = "database"
SESSION_STORE_MEMORY = "memory"

__all__ = [
    "ROLE_ADMIN",
    "ROLE_STUDENT",
    "ROLES",
    "DEFAULT_SESSION_TTL_SECONDS",
    "SESSION_STORE_DATABASE",
    "SESSION_STORE_MEMORY",
]
