"""CLI: opentok sessions create"""

import click
from rich.console import Console

from opentok_sdk.models.enums import ArchiveMode, MediaMode

console = Console()


def _get_client():
    from opentok_sdk.cli.main import _get_client
    return _get_client()


def _run(coro):
    from opentok_sdk.cli.main import _run
    return _run(coro)


@click.group()
def sessions():
    """Session management."""


@sessions.command("create")
@click.option("--routed", is_flag=True, help="Route media through the OpenTok media servers")
@click.option("--always-archive", is_flag=True, help="Archive automatically (requires --routed)")
@click.option("--location", default=None, help="IPv4 address hint for server location")
def sessions_create(routed, always_archive, location):
    """Create a new session."""

    async def _create():
        client = _get_client()
        try:
            with console.status("Creating session..."):
                session = await client.create_session(
                    media_mode=MediaMode.ROUTED if routed else MediaMode.RELAYED,
                    archive_mode=ArchiveMode.ALWAYS if always_archive else ArchiveMode.MANUAL,
                    location=location,
                )
        finally:
            await client.close()
        console.print(f"[green]Session created: {session.id}[/green]")

    _run(_create())
