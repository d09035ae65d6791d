"""Authorization gate for controllers.

``require_login`` and ``require_role`` resolve the session from the auth
cookie and pass it to the view as the ``session_user`` keyword argument.
When stacked, the inner decorator reuses the user the outer one resolved.
"""

from __future__ import annotations

from functools import wraps
from typing import Callable, Optional, TypeVar

from flask import current_app, jsonify, request

from kampusku.core.auth.schemas import SessionUser
from kampusku.core.errors import Forbidden, Unauthorized

F = TypeVar("F", bound=Callable)


def get_session_store():
    return current_app.extensions["session_store"]


def session_token() -> Optional[str]:
    return request.cookies.get(current_app.config["AUTH_COOKIE_NAME"])


def current_session_user() -> Optional[SessionUser]:
    """Look up the session user behind the auth cookie, if any."""
    token = session_token()
    return get_session_store().get(token) if token else None


def _deny(error) -> tuple:
    return jsonify(error.to_dict()), error.status_code


def require_login(fn: F) -> F:
    """Reject requests without an active session with 401."""

    @wraps(fn)
    def wrapper(*args, **kwargs):  # type: ignore[misc]
        user = kwargs.get("session_user") or current_session_user()
        if user is None:
            return _deny(Unauthorized())
        kwargs["session_user"] = user
        return fn(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def require_role(role: str, message: Optional[str] = None):
    """Reject requests whose session role is not exactly ``role`` with 403.

    A missing session is also answered with 403; stack ``require_login`` on top
    to get 401 for anonymous callers.
    """

    def decorator(fn: F) -> F:
        @wraps(fn)
        def wrapper(*args, **kwargs):  # type: ignore[misc]
            user = kwargs.get("session_user") or current_session_user()
            if user is None or user.role != role:
                return _deny(Forbidden(message) if message else Forbidden())
            kwargs["session_user"] = user
            return fn(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator
