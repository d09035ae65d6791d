"""Enrollment schemas."""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StringConstraints

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class EnrollmentCreate(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    activity_id: int = Field(gt=0, validation_alias=AliasChoices("kegiatan_id", "activity_id"))
    student_number: NonBlankStr = Field(
        max_length=32, validation_alias=AliasChoices("nim", "student_number")
    )
    program: NonBlankStr = Field(max_length=128, validation_alias=AliasChoices("prodi", "program"))


class EnrollmentFilter(BaseModel):
    activity_id: Optional[int] = Field(
        default=None, gt=0, validation_alias=AliasChoices("kegiatan_id", "activity_id")
    )
