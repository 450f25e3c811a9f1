"""CLI: opentok archives list|get|start|stop|delete"""

import json

import click
from rich.console import Console
from rich.table import Table

from opentok_sdk.models.enums import LayoutType, OutputMode
from opentok_sdk.models.options import ArchiveLayout

console = Console()


def _get_client():
    from opentok_sdk.cli.main import _get_client
    return _get_client()


def _run(coro):
    from opentok_sdk.cli.main import _run
    return _run(coro)


@click.group()
def archives():
    """Archive management."""


@archives.command("list")
@click.option("--offset", default=0, type=int)
@click.option("--count", default=None, type=int)
@click.option("--session-id", default=None)
@click.option("--json-output", "--json", is_flag=True)
def archives_list(offset, count, session_id, json_output):
    """List archives."""

    async def _list():
        client = _get_client()
        try:
            result = await client.archives.list(offset=offset, count=count, session_id=session_id)
        finally:
            await client.close()
        if json_output:
            click.echo(json.dumps(result.model_dump(mode="json", by_alias=True), indent=2))
            return
        table = Table(title=f"Archives ({result.count} total)")
        table.add_column("ID", style="bold")
        table.add_column("Status")
        table.add_column("Name")
        table.add_column("Duration")
        for a in result.items:
            table.add_row(a.id, a.status.value, a.name or "", f"{a.duration}s")
        console.print(table)

    _run(_list())


@archives.command("get")
@click.argument("archive_id")
def archives_get(archive_id):
    """Show one archive as JSON."""

    async def _get():
        client = _get_client()
        try:
            archive = await client.archives.get(archive_id)
        finally:
            await client.close()
        click.echo(json.dumps(archive.model_dump(mode="json", by_alias=True), indent=2))

    _run(_get())


@archives.command("start")
@click.argument("session_id")
@click.option("--name", default=None)
@click.option("--individual", is_flag=True, help="One file per stream instead of a composed file")
@click.option("--resolution", type=click.Choice(["640x480", "1280x720"]), default=None)
@click.option("--layout", "layout_type", type=click.Choice([t.value for t in LayoutType]), default=None)
@click.option("--stylesheet", default=None, help="CSS for the custom layout")
def archives_start(session_id, name, individual, resolution, layout_type, stylesheet):
    """Start archiving SESSION_ID."""

    async def _start():
        layout = ArchiveLayout(type=LayoutType(layout_type), stylesheet=stylesheet) if layout_type else None
        client = _get_client()
        try:
            with console.status("Starting archive..."):
                archive = await client.archives.start(
                    session_id,
                    name=name,
                    output_mode=OutputMode.INDIVIDUAL if individual else OutputMode.COMPOSED,
                    resolution=resolution,
                    layout=layout,
                )
        finally:
            await client.close()
        console.print(f"[green]Archive started: {archive.id}[/green]")

    _run(_start())


@archives.command("stop")
@click.argument("archive_id")
def archives_stop(archive_id):
    """Stop a running archive."""

    async def _stop():
        client = _get_client()
        try:
            with console.status("Stopping..."):
                archive = await client.archives.stop(archive_id)
        finally:
            await client.close()
        console.print(f"[green]Archive {archive.id} is {archive.status.value}.[/green]")

    _run(_stop())


@archives.command("delete")
@click.argument("archive_id")
def archives_delete(archive_id):
    """Delete an archive."""

    async def _delete():
        client = _get_client()
        try:
            with console.status("Deleting..."):
                await client.archives.delete(archive_id)
        finally:
            await client.close()
        console.print(f"[green]Archive {archive_id} deleted.[/green]")

    _run(_delete())
