"""Record Store — SQL-backed implementation of the NurseRepository protocol.

Invariants:
    - list() returns every row, newest id first
    - Each successful write commits immediately (no multi-record transactions)
    - UNIQUE(license_number) violations roll back and raise DuplicateLicenseError
    - Operations on a missing id raise NurseNotFoundError and leave the table unchanged
    - update() replaces all four editable fields and refreshes updated_at; created_at never changes
    - No application-level locking: concurrent updates to one id are last-write-wins

Design Decisions:
    - One NurseStore per AsyncSession (request-scoped via FastAPI dependency)
    - latency_ms reproduces the demo's artificial delay; 0 disables it
    - Integrity errors other than the license constraint become StoreError
"""

import asyncio
import logging
from datetime import datetime, timezone

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from nurse_registry.core.domain_types import EDITABLE_FIELDS, NurseId
from nurse_registry.core.repository_protocols import NurseRepository
from nurse_registry.core.errors import (
    DuplicateLicenseError, NurseNotFoundError, StoreError,
)
from nurse_registry.models.nurse import Nurse

logger = logging.getLogger(__name__)

SAMPLE_NURSES: tuple[dict, ...] = (
    {"name": "Sarah Johnson", "license_number": "RN-2024-001", "dob": "1985-03-15", "age": 39},
    {"name": "Michael Chen", "license_number": "RN-2024-002", "dob": "1990-07-22", "age": 34},
    {"name": "Emily Williams", "license_number": "RN-2024-003", "dob": "1988-11-08", "age": 36},
    {"name": "David Martinez", "license_number": "RN-2024-004", "dob": "1992-05-30", "age": 32},
    {"name": "Jessica Brown", "license_number": "RN-2024-005", "dob": "1987-09-12", "age": 37},
)


def _is_license_conflict(exc: IntegrityError) -> bool:
    detail = str(exc.orig).lower()
    return "unique" in detail and "license_number" in detail


class NurseStore:
    """Durable table of nurse records keyed by id."""

    def __init__(self, db: AsyncSession, latency_ms: int = 0):
        self.db = db
        self.latency_ms = latency_ms

    async def _delay(self) -> None:
        if self.latency_ms > 0:
            await asyncio.sleep(self.latency_ms / 1000)

    async def list(self) -> list[Nurse]:
        await self._delay()
        result = await self.db.execute(select(Nurse).order_by(Nurse.id.desc()))
        return list(result.scalars().all())

    async def get(self, nurse_id: NurseId) -> Nurse:
        await self._delay()
        nurse = await self.db.get(Nurse, nurse_id)
        if nurse is None:
            raise NurseNotFoundError(nurse_id)
        return nurse

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(Nurse))
        return int(result.scalar_one())

    async def insert(self, fields: dict) -> Nurse:
        await self._delay()
        nurse = Nurse(**{k: fields[k] for k in EDITABLE_FIELDS})
        self.db.add(nurse)
        await self._commit(fields["license_number"], "create nurse")
        await self.db.refresh(nurse)
        logger.info(
            f"Nurse {nurse.id} created",
            extra={"nurse_id": nurse.id, "license_number": nurse.license_number},
        )
        return nurse

    async def update(self, nurse_id: NurseId, fields: dict) -> Nurse:
        nurse = await self.get(nurse_id)
        for key in EDITABLE_FIELDS:
            setattr(nurse, key, fields[key])
        nurse.updated_at = datetime.now(timezone.utc)
        await self._commit(fields["license_number"], "update nurse")
        await self.db.refresh(nurse)
        logger.info(f"Nurse {nurse_id} updated", extra={"nurse_id": nurse_id})
        return nurse

    async def delete(self, nurse_id: NurseId) -> None:
        nurse = await self.get(nurse_id)
        await self.db.delete(nurse)
        await self.db.commit()
        logger.info(f"Nurse {nurse_id} deleted", extra={"nurse_id": nurse_id})

    async def _commit(self, license_number: str, operation: str) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if _is_license_conflict(e):
                logger.warning(
                    f"Duplicate license number on {operation}",
                    extra={"license_number": license_number},
                )
                raise DuplicateLicenseError(license_number)
            logger.error(f"Integrity error on {operation}: {e}")
            raise StoreError("integrity constraint violated", operation)


async def seed_sample_nurses(store: NurseRepository) -> int:
    """Insert the sample nurses when the table is empty. Returns rows inserted."""
    if await store.count() > 0:
        return 0
    for fields in SAMPLE_NURSES:
        await store.insert(fields)
    logger.info("Sample data inserted", extra={"count": len(SAMPLE_NURSES)})
    return len(SAMPLE_NURSES)
