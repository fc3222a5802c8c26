"""Nurse Record — fixed-shape client-side view of one nurse as returned by the API.

Invariants:
    - Frozen: a record is replaced by id, never mutated in place
    - from_payload() rejects any payload missing a required field
    - dob stays the raw ISO string the server returned (filter matches against it)

Design Decisions:
    - Plain dataclass, not the pydantic wire schema: core stays free of api/schemas imports
"""

from dataclasses import dataclass
from datetime import date

from nurse_registry.core.errors import RecordValidationError

_REQUIRED = ("id", "name", "license_number", "dob", "age")


@dataclass(frozen=True)
class NurseRecord:
    """One nurse as held by the client state."""

    id: int
    name: str
    license_number: str
    dob: str
    age: int
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_payload(cls, payload: dict) -> "NurseRecord":
        """Build a record from an API JSON object. Pure."""
        for key in _REQUIRED:
            if payload.get(key) in (None, ""):
                raise RecordValidationError(
                    f"Nurse payload is missing '{key}'", key,
                )
        try:
            nurse_id = int(payload["id"])
            age = int(payload["age"])
        except (TypeError, ValueError) as e:
            raise RecordValidationError(
                f"Nurse payload has a non-integer field: {e}", "age",
            )
        return cls(
            id=nurse_id,
            name=str(payload["name"]),
            license_number=str(payload["license_number"]),
            dob=str(payload["dob"]),
            age=age,
            created_at=payload.get("created_at"),
            updated_at=payload.get("updated_at"),
        )

    @property
    def dob_date(self) -> date:
        return date.fromisoformat(self.dob)

    def to_form_fields(self) -> dict:
        """The four editable fields, as the create/edit form submits them."""
        return {
            "name": self.name,
            "license_number": self.license_number,
            "dob": self.dob,
            "age": self.age,
        }
