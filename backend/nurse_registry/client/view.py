"""Table View Controller — owns client state and turns user intents into API calls.

Invariants:
    - NurseCollection is mutated ONLY here, through its four mutation points
    - One network call per intent; busy is set until it resolves and intents are refused meanwhile
    - Modal bound to one record (edit) or none (create); closed on successful submit
    - Delete requires request_delete → confirm_delete; the confirm step closes either way
    - Every failure (application or network) surfaces as an error Notification with the
      server's message verbatim; nothing is retried
    - Derived age is a suggestion: submit sends whatever the form holds

Design Decisions:
    - Controller is UI-agnostic: the CLI (and tests) drive it; render_table() builds a rich Table
    - rows() recomputes sorted-then-filtered from the collection on every call (no cached order)
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path

from rich.table import Table

from nurse_registry.client.api_client import ApiError, NurseApiClient
from nurse_registry.client.export import write_export
from nurse_registry.core.age import derive_age
from nurse_registry.core.domain_types import ExportFormat, SortColumn
from nurse_registry.core.nurse_collection import NurseCollection
from nurse_registry.core.nurse_record import NurseRecord
from nurse_registry.core.sort_filter import SortState, visible_nurses

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "All fields are required"


@dataclass(frozen=True)
class Notification:
    """Transient message shown after an action."""
    message: str
    kind: str = "success"

    @property
    def is_error(self) -> bool:
        return self.kind == "error"


@dataclass
class NurseForm:
    """Raw form values as typed by the user."""
    name: str = ""
    license_number: str = ""
    dob: str = ""
    age: str = ""

    @classmethod
    def from_record(cls, record: NurseRecord) -> "NurseForm":
        return cls(record.name, record.license_number, record.dob, str(record.age))

    def set_dob(self, dob: str, today: date | None = None) -> None:
        """Update dob and fill in a candidate age derived from it."""
        self.dob = dob
        if dob:
            derived = derive_age(dob, today)
            self.age = str(derived) if derived else ""

    def validate(self) -> str | None:
        values = (self.name.strip(), self.license_number.strip(), self.dob, self.age.strip())
        if not all(values):
            return REQUIRED_MESSAGE
        try:
            int(self.age)
        except ValueError:
            return "Age must be a whole number"
        return None

    def payload(self) -> dict:
        return {
            "name": self.name.strip(),
            "license_number": self.license_number.strip(),
            "dob": self.dob,
            "age": int(self.age),
        }


class ModalMode(str, Enum):
    CLOSED = "closed"
    CREATE = "create"
    EDIT = "edit"


@dataclass
class ModalState:
    mode: ModalMode = ModalMode.CLOSED
    editing: NurseRecord | None = None
    form: NurseForm = field(default_factory=NurseForm)
    error: str | None = None

    @property
    def is_open(self) -> bool:
        return self.mode is not ModalMode.CLOSED


class NurseTableView:
    """View-controller for the nurse table."""

    def __init__(self, api: NurseApiClient):
        self.api = api
        self.collection = NurseCollection()
        self.sort_state = SortState()
        self.query = ""
        self.modal = ModalState()
        self.pending_delete: NurseRecord | None = None
        self.notification: Notification | None = None
        self.busy = False

    # ─── Helpers ────────────────────────────────────────────────

    def _notify(self, message: str, kind: str = "success") -> None:
        self.notification = Notification(message, kind)

    @asynccontextmanager
    async def _in_flight(self):
        self.busy = True
        try:
            yield
        finally:
            self.busy = False

    def _refuse_if_busy(self) -> bool:
        if self.busy:
            logger.debug("Intent ignored: a request is in flight")
        return self.busy

    # ─── Loading ────────────────────────────────────────────────

    async def load(self) -> bool:
        """Initial full fetch; replaces the whole collection."""
        if self._refuse_if_busy():
            return False
        async with self._in_flight():
            try:
                records = await self.api.list_nurses()
            except ApiError as e:
                self._notify(e.message, "error")
                return False
        self.collection.replace_all(records)
        return True

    # ─── Create / edit modal ────────────────────────────────────

    def open_create(self) -> None:
        self.modal = ModalState(mode=ModalMode.CREATE)

    def open_edit(self, nurse_id: int) -> bool:
        record = self.collection.find(nurse_id)
        if record is None:
            self._notify("Nurse not found", "error")
            return False
        self.modal = ModalState(
            mode=ModalMode.EDIT, editing=record, form=NurseForm.from_record(record),
        )
        return True

    def close_modal(self) -> None:
        self.modal = ModalState()

    async def submit(self) -> bool:
        """Create or update from the modal form."""
        if self._refuse_if_busy() or not self.modal.is_open:
            return False
        error = self.modal.form.validate()
        if error:
            self.modal.error = error
            self._notify(error, "error")
            return False

        payload = self.modal.form.payload()
        editing = self.modal.editing
        async with self._in_flight():
            try:
                if editing is not None:
                    record = await self.api.update_nurse(editing.id, payload)
                else:
                    record = await self.api.create_nurse(payload)
            except ApiError as e:
                self.modal.error = e.message
                self._notify(e.message, "error")
                return False

        if editing is not None:
            self.collection.replace(record)
            self._notify("Nurse updated successfully")
        else:
            self.collection.prepend(record)
            self._notify("Nurse added successfully")
        self.close_modal()
        return True

    # ─── Delete confirmation ────────────────────────────────────

    def request_delete(self, nurse_id: int) -> bool:
        record = self.collection.find(nurse_id)
        if record is None:
            self._notify("Nurse not found", "error")
            return False
        self.pending_delete = record
        return True

    def cancel_delete(self) -> None:
        self.pending_delete = None

    async def confirm_delete(self) -> bool:
        if self._refuse_if_busy() or self.pending_delete is None:
            return False
        target = self.pending_delete
        try:
            async with self._in_flight():
                await self.api.delete_nurse(target.id)
        except ApiError as e:
            self._notify(e.message, "error")
            return False
        finally:
            self.pending_delete = None
        self.collection.remove(target.id)
        self._notify("Nurse deleted successfully")
        return True

    # ─── Sort / search ──────────────────────────────────────────

    def toggle_sort(self, column: SortColumn | str) -> SortState:
        self.sort_state = self.sort_state.toggle(SortColumn(column))
        return self.sort_state

    def set_query(self, query: str) -> None:
        self.query = query or ""

    def clear_query(self) -> None:
        self.query = ""

    def rows(self) -> list[NurseRecord]:
        return visible_nurses(self.collection.records, self.sort_state, self.query)

    # ─── Export ─────────────────────────────────────────────────

    def export(
        self,
        fmt: ExportFormat | str,
        directory: Path | str = ".",
        today: date | None = None,
    ) -> Path | None:
        """Write the visible rows to a CSV/XLSX file."""
        rows = self.rows()
        if not rows:
            self._notify("No data to download", "error")
            return None
        fmt = ExportFormat(fmt)
        path = write_export(rows, fmt, directory, today)
        self._notify(f"Downloaded as {fmt.value.upper()}!")
        return path


# ─── Rendering ──────────────────────────────────────────────────

_COLUMN_TITLES = (
    (SortColumn.NAME, "Name"),
    (SortColumn.LICENSE_NUMBER, "License Number"),
    (SortColumn.DOB, "Date of Birth"),
    (SortColumn.AGE, "Age"),
)


def format_dob(dob: str) -> str:
    """Display form of an ISO date, e.g. 'Mar 5, 1985'. Unparseable input shown as-is."""
    try:
        d = date.fromisoformat(dob)
    except ValueError:
        return dob
    return f"{d:%b} {d.day}, {d.year}"


def render_table(rows: list[NurseRecord], sort_state: SortState) -> Table:
    table = Table(show_lines=False)
    table.add_column("ID", justify="right", style="dim")
    for column, title in _COLUMN_TITLES:
        table.add_column(
            f"{title} {sort_state.indicator(column)}",
            justify="right" if column is SortColumn.AGE else "left",
        )
    for r in rows:
        table.add_row(str(r.id), r.name, r.license_number, format_dob(r.dob), str(r.age))
    return table
