"""Nurse Routes — the five REST operations over the record store.

Invariants:
    - Request bodies validated by Pydantic before any write reaches the store (400 on failure)
    - PUT checks the id exists before validating the body: unknown id → 404 even with a bad body
    - Missing id → 404 (NurseNotFoundError), duplicate license → 400 (DuplicateLicenseError)
    - Unexpected store failures → 500 (StoreError via global handler)
    - list returns the full table (no pagination), newest id first

Design Decisions:
    - Routes never catch domain errors: the global handlers map them to status codes
    - NurseStore built per request from the request-scoped AsyncSession
"""

import logging

from fastapi import APIRouter, Body, Depends, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from nurse_registry.config import get_settings
from nurse_registry.core.domain_types import NurseId
from nurse_registry.core.repository_protocols import NurseRepository
from nurse_registry.infrastructure.database import get_db
from nurse_registry.schemas.nurse import (
    NurseCreate, NurseDeleted, NurseResponse, NurseUpdate,
)
from nurse_registry.services.nurse_store import NurseStore

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/nurses", tags=["nurses"])


def get_nurse_store(db: AsyncSession = Depends(get_db)) -> NurseRepository:
    """FastAPI dependency for the request-scoped record store."""
    return NurseStore(db, latency_ms=get_settings().store_latency_ms)


@router.get("", response_model=list[NurseResponse])
async def list_nurses(store: NurseRepository = Depends(get_nurse_store)):
    """Every nurse, newest first."""
    return await store.list()


@router.get("/{nurse_id}", response_model=NurseResponse)
async def get_nurse(nurse_id: int, store: NurseRepository = Depends(get_nurse_store)):
    return await store.get(NurseId(nurse_id))


@router.post(
    "", response_model=NurseResponse, status_code=status.HTTP_201_CREATED,
)
async def create_nurse(
    body: NurseCreate, store: NurseRepository = Depends(get_nurse_store),
):
    """Create a nurse. 400 if the license number is taken."""
    return await store.insert(body.to_fields())


@router.put("/{nurse_id}", response_model=NurseResponse)
async def update_nurse(
    nurse_id: int,
    payload: dict = Body(...),
    store: NurseRepository = Depends(get_nurse_store),
):
    """Replace all editable fields of a nurse. 404 wins over a bad body."""
    await store.get(NurseId(nurse_id))
    try:
        body = NurseUpdate.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(
            [{**err, "loc": ("body", *err["loc"])} for err in e.errors()],
        )
    return await store.update(NurseId(nurse_id), body.to_fields())


@router.delete("/{nurse_id}", response_model=NurseDeleted)
async def delete_nurse(nurse_id: int, store: NurseRepository = Depends(get_nurse_store)):
    """Hard-delete a nurse."""
    await store.delete(NurseId(nurse_id))
    return NurseDeleted(message="Nurse deleted successfully", id=nurse_id)
