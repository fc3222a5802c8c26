"""API Client — async httpx wrapper over the five nurse endpoints.

Invariants:
    - Every non-2xx response raises ApiError carrying the server's error.message verbatim
    - Transport failures (server unreachable, timeout) raise ApiError too, with status_code None
    - Successful payloads are returned as fixed-shape NurseRecord values (partial payloads rejected)
    - No retries: the user re-triggers the action

Design Decisions:
    - transport injectable: tests drive the real FastAPI app through httpx.ASGITransport
    - Per-operation fallback messages used only when the response body has no message
"""

import logging
from typing import Any

import httpx

from nurse_registry.core.errors import RecordValidationError
from nurse_registry.core.nurse_record import NurseRecord

logger = logging.getLogger(__name__)

NURSES_PATH = "/api/nurses"
UNREACHABLE_MESSAGE = "Unable to reach the server. Please try again."


class ApiError(Exception):
    """API call failed — application error or network failure."""

    def __init__(
        self, message: str, status_code: int | None = None, code: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code


def _error_message(data: Any, fallback: str) -> tuple[str, str | None]:
    """Pull (message, code) out of an error body."""
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return error["message"], error.get("code")
        if isinstance(error, str) and error:
            return error, None
        detail = data.get("detail")
        if isinstance(detail, str) and detail:
            return detail, None
    return fallback, None


class NurseApiClient:
    """Async client for the Nurse Registry REST API."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "NurseApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self, method: str, path: str, fallback: str, json: dict | None = None,
    ) -> Any:
        try:
            response = await self._http.request(method, path, json=json)
        except httpx.TransportError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise ApiError(UNREACHABLE_MESSAGE) from e

        try:
            data = response.json()
        except ValueError:
            data = None

        if response.is_success:
            return data
        message, code = _error_message(data, fallback)
        raise ApiError(message, response.status_code, code)

    @staticmethod
    def _record(data: Any) -> NurseRecord:
        try:
            return NurseRecord.from_payload(data or {})
        except RecordValidationError as e:
            raise ApiError(e.message) from e

    async def list_nurses(self) -> list[NurseRecord]:
        data = await self._request("GET", NURSES_PATH, "Failed to fetch nurses")
        return [self._record(item) for item in data or []]

    async def get_nurse(self, nurse_id: int) -> NurseRecord:
        data = await self._request(
            "GET", f"{NURSES_PATH}/{nurse_id}", "Failed to fetch nurse",
        )
        return self._record(data)

    async def create_nurse(self, fields: dict) -> NurseRecord:
        data = await self._request(
            "POST", NURSES_PATH, "Failed to create nurse", json=fields,
        )
        return self._record(data)

    async def update_nurse(self, nurse_id: int, fields: dict) -> NurseRecord:
        data = await self._request(
            "PUT", f"{NURSES_PATH}/{nurse_id}", "Failed to update nurse", json=fields,
        )
        return self._record(data)

    async def delete_nurse(self, nurse_id: int) -> None:
        await self._request(
            "DELETE", f"{NURSES_PATH}/{nurse_id}", "Failed to delete nurse",
        )
