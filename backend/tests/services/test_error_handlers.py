"""Validation error envelope — message selection and field details."""

from nurse_registry.api.error_handlers import (
    INVALID_DATA_MESSAGE, MISSING_FIELDS_MESSAGE, build_validation_error_response,
)


def _error(type_, loc, input_="x"):
    return {"type": type_, "loc": loc, "msg": "bad", "input": input_}


def test_missing_field_uses_required_message():
    body = build_validation_error_response([_error("missing", ("body", "dob"))])
    assert body["error"]["message"] == MISSING_FIELDS_MESSAGE
    assert body["error"]["details"][0]["field"] == "body.dob"


def test_empty_age_counts_as_missing():
    body = build_validation_error_response([_error("int_parsing", ("body", "age"), "")])
    assert body["error"]["message"] == MISSING_FIELDS_MESSAGE


def test_malformed_value_uses_generic_message():
    body = build_validation_error_response([_error("int_parsing", ("body", "age"), "old")])
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["message"] == INVALID_DATA_MESSAGE


def test_whitespace_only_value_counts_as_missing():
    body = build_validation_error_response([_error("value_error", ("body", "name"), "   ")])
    assert body["error"]["message"] == MISSING_FIELDS_MESSAGE
