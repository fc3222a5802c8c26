"""Command-line interface — serve the API or manage nurses from a terminal table view.

Invariants:
    - Every client command loads the full collection once, then acts through NurseTableView
    - Notifications printed green (success) or red (error); errors exit with status 1
    - Delete asks for confirmation unless --yes

Design Decisions:
    - click for commands/prompts, rich for tables and confirmation
    - asyncio.run per command: the API client is async, the CLI is not
"""

import asyncio
from datetime import date
from pathlib import Path

import click
import uvicorn
from rich.console import Console
from rich.prompt import Confirm

from nurse_registry.client.api_client import ApiError, NurseApiClient
from nurse_registry.client.view import (
    NurseTableView, format_dob, render_table,
)
from nurse_registry.config import get_settings
from nurse_registry.core.age import derive_age
from nurse_registry.core.domain_types import ExportFormat, SortColumn, SortDirection
from nurse_registry.core.nurse_record import NurseRecord
from nurse_registry.core.sort_filter import SortState
from nurse_registry.infrastructure.observability import setup_logging

console = Console()

SORT_CHOICES = click.Choice([c.value for c in SortColumn])


def _api(ctx: click.Context) -> NurseApiClient:
    settings = get_settings()
    return NurseApiClient(
        ctx.obj["api_url"], timeout=settings.client_timeout_seconds,
    )


def _finish(view: NurseTableView) -> None:
    note = view.notification
    if note is None:
        return
    if note.is_error:
        console.print(f"[red]✕ {note.message}[/]")
        raise click.exceptions.Exit(1)
    console.print(f"[green]✓ {note.message}[/]")


def _apply_sort(view: NurseTableView, sort: str | None, desc: bool) -> None:
    if sort:
        direction = SortDirection.DESC if desc else SortDirection.ASC
        view.sort_state = SortState(SortColumn(sort), direction)


def _prompt_form(view: NurseTableView, current: NurseRecord | None = None) -> None:
    """Fill the open modal's form interactively; age defaults to the dob-derived value."""
    form = view.modal.form
    form.name = click.prompt("Name", default=current.name if current else None)
    form.license_number = click.prompt(
        "License number", default=current.license_number if current else None,
    )
    dob = click.prompt(
        "Date of birth (YYYY-MM-DD)", default=current.dob if current else None,
    )
    if current is None or dob != current.dob:
        form.set_dob(dob)
    form.age = str(click.prompt("Age", default=form.age or None, type=int))


def _show(record: NurseRecord) -> None:
    console.print(f"[bold]{record.name}[/] (#{record.id})")
    console.print(f"  License number: {record.license_number}")
    console.print(f"  Date of birth:  {format_dob(record.dob)}")
    console.print(f"  Age:            {record.age}")


@click.group(help="Nurse Registry: REST API server and terminal client")
@click.option(
    "--api-url", default=None, envvar="API_BASE_URL",
    help="Base URL of the Nurse Registry API",
)
@click.pass_context
def cli(ctx: click.Context, api_url: str | None) -> None:
    settings = get_settings()
    ctx.ensure_object(dict)
    ctx.obj["api_url"] = api_url or settings.api_base_url


@cli.command(help="Run the API server")
@click.option("--host", default=None)
@click.option("--port", default=None, type=int)
def serve(host: str | None, port: int | None) -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    uvicorn.run(
        "nurse_registry.main:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        log_level=settings.log_level.lower(),
    )


@cli.command("list", help="Show the nurse table")
@click.option("--sort", type=SORT_CHOICES, default=None)
@click.option("--desc", is_flag=True, help="Sort descending")
@click.option("--search", default="", help="Filter by name, license, DOB, or age")
@click.pass_context
def list_cmd(ctx: click.Context, sort: str | None, desc: bool, search: str) -> None:
    async def run() -> None:
        async with _api(ctx) as api:
            view = NurseTableView(api)
            if not await view.load():
                _finish(view)
            _apply_sort(view, sort, desc)
            view.set_query(search)
            rows = view.rows()
            stats = view.collection.stats()
            console.print(
                f"[bold]{len(rows)}[/] of [bold]{stats['total']}[/] Nurses   "
                f"Average age: [bold]{stats['average_age']}[/]",
            )
            if not len(view.collection):
                console.print("No nurses yet. Add the first one with `add`.")
            elif not rows:
                console.print(f"No nurses match '{search}'.")
            else:
                console.print(render_table(rows, view.sort_state))

    asyncio.run(run())


@cli.command(help="Show one nurse")
@click.argument("nurse_id", type=int)
@click.pass_context
def show(ctx: click.Context, nurse_id: int) -> None:
    async def run() -> None:
        async with _api(ctx) as api:
            try:
                record = await api.get_nurse(nurse_id)
            except ApiError as e:
                console.print(f"[red]✕ {e.message}[/]")
                raise click.exceptions.Exit(1)
            _show(record)

    asyncio.run(run())


@cli.command(help="Add a nurse")
@click.pass_context
def add(ctx: click.Context) -> None:
    async def run() -> None:
        async with _api(ctx) as api:
            view = NurseTableView(api)
            view.open_create()
            _prompt_form(view)
            await view.submit()
            _finish(view)

    asyncio.run(run())


@cli.command(help="Edit a nurse")
@click.argument("nurse_id", type=int)
@click.pass_context
def edit(ctx: click.Context, nurse_id: int) -> None:
    async def run() -> None:
        async with _api(ctx) as api:
            view = NurseTableView(api)
            if not await view.load() or not view.open_edit(nurse_id):
                _finish(view)
            _prompt_form(view, view.modal.editing)
            await view.submit()
            _finish(view)

    asyncio.run(run())


@cli.command(help="Delete a nurse")
@click.argument("nurse_id", type=int)
@click.option("--yes", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete(ctx: click.Context, nurse_id: int, yes: bool) -> None:
    async def run() -> None:
        async with _api(ctx) as api:
            view = NurseTableView(api)
            if not await view.load() or not view.request_delete(nurse_id):
                _finish(view)
            target = view.pending_delete
            if not yes and not Confirm.ask(
                f"Are you sure you want to delete [bold]{target.name}[/]?",
            ):
                view.cancel_delete()
                return
            await view.confirm_delete()
            _finish(view)

    asyncio.run(run())


@cli.command(help="Export the (filtered, sorted) table to CSV or XLSX")
@click.option(
    "--format", "fmt", type=click.Choice([f.value for f in ExportFormat]),
    default=ExportFormat.CSV.value,
)
@click.option(
    "--output-dir", type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
)
@click.option("--sort", type=SORT_CHOICES, default=None)
@click.option("--desc", is_flag=True)
@click.option("--search", default="")
@click.pass_context
def export(
    ctx: click.Context,
    fmt: str,
    output_dir: Path,
    sort: str | None,
    desc: bool,
    search: str,
) -> None:
    async def run() -> None:
        async with _api(ctx) as api:
            view = NurseTableView(api)
            if not await view.load():
                _finish(view)
            _apply_sort(view, sort, desc)
            view.set_query(search)
            path = view.export(fmt, output_dir, date.today())
            _finish(view)
            console.print(f"Saved {path}")

    asyncio.run(run())


@cli.command("age", help="Suggest an age from a date of birth")
@click.argument("dob")
def age_cmd(dob: str) -> None:
    derived = derive_age(dob)
    if derived is None:
        console.print("[red]✕ Could not derive an age from that date[/]")
        raise click.exceptions.Exit(1)
    console.print(str(derived))


if __name__ == "__main__":
    cli()
