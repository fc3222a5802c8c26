"""Sort/Filter Engine — pure ordering and substring search over the client collection.

Invariants:
    - Every function returns a NEW list; inputs are never mutated
    - age compares as int, dob as calendar date, other columns as casefolded strings
    - Ties keep input order in both directions (sorted() is stable, reverse=True keeps it)
    - Empty/whitespace query returns every record in the same relative order
    - Never touches the record store

Design Decisions:
    - SortState is a frozen value: toggle() returns the next state instead of mutating
    - Unparseable dob sorts as date.min: keeps sort total over whatever the server returned
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable

from nurse_registry.core.domain_types import SortColumn, SortDirection
from nurse_registry.core.nurse_record import NurseRecord


@dataclass(frozen=True)
class SortState:
    """Current sort column (None = server order) and direction."""

    column: SortColumn | None = None
    direction: SortDirection = SortDirection.ASC

    def toggle(self, column: SortColumn) -> "SortState":
        """Same column flips direction; a new column resets to ascending."""
        if self.column == column:
            return SortState(column, self.direction.flipped())
        return SortState(column, SortDirection.ASC)

    def indicator(self, column: SortColumn) -> str:
        if self.column != column:
            return "↕"
        return "↑" if self.direction is SortDirection.ASC else "↓"


def _sort_key(column: SortColumn):
    if column is SortColumn.AGE:
        return lambda r: int(r.age)
    if column is SortColumn.DOB:
        return _dob_key
    return lambda r: str(getattr(r, column.value)).casefold()


def _dob_key(record: NurseRecord) -> date:
    try:
        return record.dob_date
    except ValueError:
        return date.min


def sort_nurses(
    records: Iterable[NurseRecord],
    column: SortColumn,
    direction: SortDirection = SortDirection.ASC,
) -> list[NurseRecord]:
    """Return records ordered by column. Pure."""
    return sorted(
        records,
        key=_sort_key(SortColumn(column)),
        reverse=SortDirection(direction) is SortDirection.DESC,
    )


def matches_query(record: NurseRecord, query: str) -> bool:
    """Case-insensitive substring match on name, license, raw dob, and age."""
    needle = query.strip().casefold()
    if not needle:
        return True
    haystacks = (record.name, record.license_number, record.dob, str(record.age))
    return any(needle in h.casefold() for h in haystacks)


def filter_nurses(records: Iterable[NurseRecord], query: str) -> list[NurseRecord]:
    """Return the records matching query, preserving order. Pure."""
    return [r for r in records if matches_query(r, query or "")]


def visible_nurses(
    records: Iterable[NurseRecord], sort_state: SortState, query: str = "",
) -> list[NurseRecord]:
    """The sorted-then-filtered sequence the table view renders."""
    ordered = list(records)
    if sort_state.column is not None:
        ordered = sort_nurses(ordered, sort_state.column, sort_state.direction)
    return filter_nurses(ordered, query)
