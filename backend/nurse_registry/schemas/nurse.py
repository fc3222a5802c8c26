"""Nurse Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - NurseCreate/NurseUpdate: all four editable fields required and non-blank; strings stored exactly as submitted
    - dob must be an ISO 8601 calendar date (YYYY-MM-DD); the submitted text is kept as-is
    - age coerced to int (lax mode accepts "34"), must be >= 0, never checked against dob
    - NurseResponse is the fixed-shape wire record (built from ORM attributes)

Design Decisions:
    - Blank check strips only to test; the value itself is never trimmed, so " RN-1" and "RN-1" are distinct licenses
    - NurseUpdate subclasses NurseCreate: PUT is a full replace, same payload shape
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class NurseCreate(BaseModel):
    """Create payload — the four editable fields."""
    name: str = Field(min_length=1, max_length=255)
    license_number: str = Field(min_length=1, max_length=64)
    dob: str = Field(min_length=1, pattern=r"^\d{4}-\d{2}-\d{2}$")
    age: int = Field(ge=0, le=150)

    @field_validator("name", "license_number")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("dob")
    @classmethod
    def dob_is_calendar_date(cls, v: str) -> str:
        try:
            date.fromisoformat(v)
        except ValueError:
            raise ValueError("dob must be a valid date (YYYY-MM-DD)")
        return v

    def to_fields(self) -> dict:
        return self.model_dump()


class NurseUpdate(NurseCreate):
    """Update payload — full replace of all four editable fields."""


class NurseResponse(BaseModel):
    """Nurse record as returned by every endpoint."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    license_number: str
    dob: str
    age: int
    created_at: datetime
    updated_at: datetime


class NurseDeleted(BaseModel):
    """DELETE acknowledgement."""
    message: str
    id: int
