"""Input validation helpers."""

from __future__ import annotations

from typing import Type, TypeVar

from flask import request
from pydantic import BaseModel, ValidationError

from kampusku.core.errors import InvalidRequest

M = TypeVar("M", bound=BaseModel)

_MISSING_TYPES = {"missing", "string_too_short"}


def request_payload() -> dict:
    """Return the request body as a dict, accepting JSON or url-encoded forms."""
    payload = request.get_json(silent=True)
    if isinstance(payload, dict):
        return payload
    return request.form.to_dict()


def _is_missing(err: dict) -> bool:
    return err.get("type") in _MISSING_TYPES or err.get("input") in (None, "")


def parse_payload(schema_cls: Type[M], payload: dict, *, missing_message: str) -> M:
    """Validate ``payload`` or raise ``InvalidRequest``.

    Absent or blank fields produce ``missing_message``; any other failure reports
    the first offending field.
    """
    try:
        return schema_cls.model_validate(payload)
    except ValidationError as exc:
        errors = exc.errors()
        if any(_is_missing(err) for err in errors):
            raise InvalidRequest(missing_message) from exc
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "body"
        raise InvalidRequest(f"Field {field} tidak valid", code="invalid_field") from exc
