"""Activity schemas."""

from __future__ import annotations

import datetime as dt
from typing import Annotated, Optional

from pydantic import AliasChoices, BaseModel, Field, StringConstraints

NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class ActivityWrite(BaseModel):
    """Body of both create and update; wire names follow the kegiatan table."""

    name: NonBlankStr = Field(validation_alias=AliasChoices("nama_kegiatan", "name"))
    description: Optional[str] = Field(
        default=None, max_length=4096, validation_alias=AliasChoices("deskripsi", "description")
    )
    start_date: dt.date = Field(validation_alias=AliasChoices("tanggal_mulai", "start"))
    end_date: dt.date = Field(validation_alias=AliasChoices("tanggal_akhir", "end"))
