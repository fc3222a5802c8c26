"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Record store operations accessed through the NurseRepository Protocol
    - Failures are signalled with core/errors.py types, never driver exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; routes await them
"""

from typing import Protocol, runtime_checkable

from nurse_registry.core.domain_types import NurseId


class NurseLike(Protocol):
    """Structural contract for a persisted nurse row."""
    id: int
    name: str
    license_number: str
    dob: str
    age: int


@runtime_checkable
class NurseRepository(Protocol):
    """Contract for nurse persistence — implemented by services/nurse_store.py."""
    async def list(self) -> list[NurseLike]: ...
    async def get(self, nurse_id: NurseId) -> NurseLike: ...
    async def insert(self, fields: dict) -> NurseLike: ...
    async def update(self, nurse_id: NurseId, fields: dict) -> NurseLike: ...
    async def delete(self, nurse_id: NurseId) -> None: ...
    async def count(self) -> int: ...
