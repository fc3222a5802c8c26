"""NurseRecord — fixed-shape boundary record built from API payloads."""

import pytest

from nurse_registry.core.errors import RecordValidationError
from nurse_registry.core.nurse_record import NurseRecord

PAYLOAD = {
    "id": 7,
    "name": "Ann Lee",
    "license_number": "RN-1",
    "dob": "1990-01-01",
    "age": 34,
    "created_at": "2024-01-01T00:00:00",
    "updated_at": "2024-01-02T00:00:00",
}


def test_from_payload_builds_record():
    record = NurseRecord.from_payload(PAYLOAD)
    assert record.id == 7
    assert record.age == 34
    assert record.updated_at == "2024-01-02T00:00:00"


def test_from_payload_coerces_numeric_strings():
    record = NurseRecord.from_payload({**PAYLOAD, "age": "34", "id": "7"})
    assert record.age == 34
    assert record.id == 7


@pytest.mark.parametrize("missing", ["id", "name", "license_number", "dob", "age"])
def test_from_payload_rejects_missing_field(missing):
    payload = {k: v for k, v in PAYLOAD.items() if k != missing}
    with pytest.raises(RecordValidationError) as exc:
        NurseRecord.from_payload(payload)
    assert exc.value.field == missing


def test_from_payload_rejects_non_integer_age():
    with pytest.raises(RecordValidationError):
        NurseRecord.from_payload({**PAYLOAD, "age": "old"})


def test_to_form_fields_has_editable_fields_only():
    assert NurseRecord.from_payload(PAYLOAD).to_form_fields() == {
        "name": "Ann Lee", "license_number": "RN-1", "dob": "1990-01-01", "age": 34,
    }
