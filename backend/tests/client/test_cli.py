"""CLI — commands drive the view controller against a mocked API."""

import json

import httpx
import pytest
from click.testing import CliRunner

import nurse_registry.cli as cli_module
from nurse_registry.cli import cli
from nurse_registry.client.api_client import NurseApiClient

NURSES = [
    {"id": 2, "name": "Michael Chen", "license_number": "RN-2", "dob": "1990-07-22", "age": 34},
    {"id": 1, "name": "Sarah Johnson", "license_number": "RN-1", "dob": "1985-03-15", "age": 39},
]


@pytest.fixture
def api_log(monkeypatch):
    """Route CLI API calls to an in-memory handler; returns the request log."""
    log = []

    def handler(request: httpx.Request) -> httpx.Response:
        log.append((request.method, request.url.path))
        if request.method == "GET" and request.url.path == "/api/nurses":
            return httpx.Response(200, json=NURSES)
        if request.method == "DELETE":
            return httpx.Response(200, json={"message": "Nurse deleted successfully", "id": 1})
        if request.method == "POST":
            body = json.loads(request.content)
            if body["license_number"] == "RN-1":
                return httpx.Response(400, json={"error": {
                    "code": "DUPLICATE_LICENSE", "message": "License number already exists",
                }})
            return httpx.Response(201, json={"id": 3, **body})
        return httpx.Response(404, json={"error": {"message": "Nurse not found"}})

    monkeypatch.setattr(
        cli_module, "_api",
        lambda ctx: NurseApiClient("http://test", transport=httpx.MockTransport(handler)),
    )
    return log


def test_list_prints_table_and_stats(api_log):
    result = CliRunner().invoke(cli, ["list", "--sort", "name"])
    assert result.exit_code == 0, result.output
    assert "2 of 2 Nurses" in result.output
    assert result.output.index("Michael Chen") < result.output.index("Sarah Johnson")


def test_list_search_without_matches(api_log):
    result = CliRunner().invoke(cli, ["list", "--search", "zzz"])
    assert result.exit_code == 0
    assert "No nurses match" in result.output


def test_list_search_shows_matched_count_against_total(api_log):
    result = CliRunner().invoke(cli, ["list", "--search", "chen"])
    assert result.exit_code == 0, result.output
    assert "1 of 2 Nurses" in result.output
    assert "Sarah Johnson" not in result.output


def test_show_missing_nurse_exits_with_error(api_log):
    result = CliRunner().invoke(cli, ["show", "99"])
    assert result.exit_code == 1
    assert "Nurse not found" in result.output


def test_delete_with_yes_skips_prompt(api_log):
    result = CliRunner().invoke(cli, ["delete", "1", "--yes"])
    assert result.exit_code == 0, result.output
    assert ("DELETE", "/api/nurses/1") in api_log
    assert "Nurse deleted successfully" in result.output


def test_add_reports_duplicate_license(api_log):
    result = CliRunner().invoke(
        cli, ["add"], input="Ann Lee\nRN-1\n1990-01-01\n34\n",
    )
    assert result.exit_code == 1
    assert "License number already exists" in result.output


def test_add_creates_nurse(api_log):
    result = CliRunner().invoke(
        cli, ["add"], input="Ann Lee\nRN-9\n1990-01-01\n34\n",
    )
    assert result.exit_code == 0, result.output
    assert "Nurse added successfully" in result.output


def test_export_writes_csv(api_log, tmp_path):
    result = CliRunner().invoke(
        cli, ["export", "--format", "csv", "--output-dir", str(tmp_path), "--search", "chen"],
    )
    assert result.exit_code == 0, result.output
    files = list(tmp_path.glob("nurses_*.csv"))
    assert len(files) == 1
    lines = files[0].read_text().splitlines()
    assert lines[0] == "Name,License Number,Date of Birth,Age"
    assert lines[1:] == ["Michael Chen,RN-2,1990-07-22,34"]


def test_age_command_derives_age():
    result = CliRunner().invoke(cli, ["age", "1900-01-01"])
    assert result.exit_code == 0
    assert int(result.output.strip()) > 100
