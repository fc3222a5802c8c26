"""Nurse Collection — explicit client-side mirror of the server's record collection.

Invariants:
    - Mutated ONLY through four points: replace_all (initial load), prepend (after create),
      replace (after update, by id), remove (after delete, by id)
    - Never re-fetches after a mutation — may diverge from server order if another client writes
    - records returns an immutable snapshot (callers cannot mutate the mirror)

Design Decisions:
    - Pure in-memory container, no IO: the view controller owns it and calls the API
    - replace() on an unknown id is a no-op (record deleted elsewhere; nothing to patch)
"""

from dataclasses import dataclass, field
from typing import Iterable

from nurse_registry.core.nurse_record import NurseRecord


@dataclass
class NurseCollection:
    """Ordered records, newest-first as loaded from the server."""

    _records: list[NurseRecord] = field(default_factory=list)

    @property
    def records(self) -> tuple[NurseRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def find(self, nurse_id: int) -> NurseRecord | None:
        return next((r for r in self._records if r.id == nurse_id), None)

    # ─── Mutation points ────────────────────────────────────────

    def replace_all(self, records: Iterable[NurseRecord]) -> None:
        self._records = list(records)

    def prepend(self, record: NurseRecord) -> None:
        self._records.insert(0, record)

    def replace(self, record: NurseRecord) -> bool:
        """Swap the element with record.id in place. Returns False if absent."""
        for i, existing in enumerate(self._records):
            if existing.id == record.id:
                self._records[i] = record
                return True
        return False

    def remove(self, nurse_id: int) -> bool:
        before = len(self._records)
        self._records = [r for r in self._records if r.id != nurse_id]
        return len(self._records) != before

    # ─── Derived ────────────────────────────────────────────────

    def stats(self) -> dict:
        """Header statistics: total count and rounded average age."""
        total = len(self._records)
        if not total:
            return {"total": 0, "average_age": 0}
        return {
            "total": total,
            "average_age": round(sum(r.age for r in self._records) / total),
        }
