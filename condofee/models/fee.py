from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class FeeType(str, Enum):
    AREA = "area"
    VEHICLE = "vehicle"
    PER_UNIT = "per-unit"

    @classmethod
    def from_tag(cls, tag: str | None) -> FeeType:
        """Map a free-form type tag onto a known type; anything unrecognised bills per unit."""
        normalized = (tag or "").strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return cls.PER_UNIT


class Fee(BaseModel):
    id: int | None = None
    uuid: str = ""
    fee_type: FeeType = FeeType.PER_UNIT
    amount: int = Field(default=0, ge=0)  # whole dong per unit
    year: int = Field(ge=1900, le=9999)
    month: int = Field(ge=1, le=12)
    description: str = ""
    compulsory: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def period(self) -> str:
        return f"{self.year}-{self.month:02d}"
