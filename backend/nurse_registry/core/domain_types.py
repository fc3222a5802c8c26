"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - NurseId wraps the integer primary key — ids are never reused or mutated
    - Sortable columns and directions are Enums — no raw string matching
    - EDITABLE_FIELDS is the single source of truth for PUT/POST payload shape
    - EXPORT_COLUMNS fixes the export header order

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and click choices without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

NurseId = NewType("NurseId", int)


# ─── Enums ───────────────────────────────────────────────────────

class SortColumn(str, Enum):
    """Columns the table view can be sorted by."""
    NAME = "name"
    LICENSE_NUMBER = "license_number"
    DOB = "dob"
    AGE = "age"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class ExportFormat(str, Enum):
    """Export document types produced by the client."""
    CSV = "csv"
    XLSX = "xlsx"


# ─── Constants ───────────────────────────────────────────────────

EDITABLE_FIELDS: tuple[str, ...] = ("name", "license_number", "dob", "age")

EXPORT_COLUMNS: tuple[str, ...] = (
    "Name", "License Number", "Date of Birth", "Age",
)
