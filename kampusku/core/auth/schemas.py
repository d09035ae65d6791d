"""Schemas for auth flows (register, login) and the session user envelope."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Annotated

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints, field_validator

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class RegisterRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    username: NonBlankStr = Field(max_length=80)
    email: EmailStr
    password: str = Field(min_length=1, max_length=72)
    role: NonBlankStr = Field(max_length=32)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("password")
    @classmethod
    def fits_bcrypt(cls, v: str) -> str:
        # bcrypt only accepts 72 bytes, not 72 characters
        if len(v.encode("utf-8")) > 72:
            raise ValueError("password must be at most 72 bytes")
        return v


class LoginRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    username: NonBlankStr
    password: str = Field(min_length=1)


@dataclass(frozen=True)
class SessionUser:
    """Identity snapshot carried by a session; the password is never part of it."""

    id: int
    username: str
    email: str
    role: str

    def to_dict(self) -> dict:
        return asdict(self)
