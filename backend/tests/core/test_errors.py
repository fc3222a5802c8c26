"""Error Hierarchy — taxonomy codes, HTTP statuses, and REST envelope."""

from nurse_registry.core.errors import (
    DuplicateLicenseError, ErrorCategory, NurseNotFoundError,
    NurseRegistryError, RecordValidationError, StoreError,
)


def test_taxonomy_status_codes():
    assert RecordValidationError("bad", "name").http_status == 400
    assert DuplicateLicenseError("RN-1").http_status == 400
    assert NurseNotFoundError(3).http_status == 404
    assert StoreError("disk", "create nurse").http_status == 500


def test_all_errors_share_base():
    for exc in (
        RecordValidationError("bad", "name"),
        DuplicateLicenseError("RN-1"),
        NurseNotFoundError(1),
        StoreError("disk", "x"),
    ):
        assert isinstance(exc, NurseRegistryError)


def test_duplicate_license_response_envelope():
    body = DuplicateLicenseError("RN-1").to_response()["error"]
    assert body["code"] == "DUPLICATE_LICENSE"
    assert body["message"] == "License number already exists"
    assert body["category"] == ErrorCategory.CONFLICT.value
    assert body["context"]["license_number"] == "RN-1"
    assert body["timestamp"]


def test_not_found_carries_id_in_context():
    body = NurseNotFoundError(12).to_response()["error"]
    assert body["code"] == "NOT_FOUND"
    assert body["context"]["nurse_id"] == 12


def test_store_error_message_names_operation():
    assert StoreError("disk full", "create nurse").message == (
        "Failed to create nurse: disk full"
    )
