"""CLI: opentok auth login|status|logout"""

from typing import Optional

import click
from rich.console import Console

from opentok_sdk.transport.http import DEFAULT_BASE_URL

console = Console()


def _load_config() -> dict:
    from opentok_sdk.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from opentok_sdk.cli.main import _save_config
    _save_config(cfg)


@click.group()
def auth():
    """Credential commands."""


@auth.command("login")
@click.option("--base-url", default=None, help="OpenTok API base URL")
def auth_login(base_url: Optional[str]):
    """Store the project API key and secret."""
    cfg = _load_config()
    api_key = click.prompt("API key", type=click.IntRange(min=1))
    api_secret = click.prompt("API secret", hide_input=True)
    url = base_url or cfg.get("base_url", DEFAULT_BASE_URL)
    _save_config({**cfg, "api_key": api_key, "api_secret": api_secret, "base_url": url})
    console.print(f"[green]Credentials saved for project {api_key}.[/green]")
    console.print("[dim]Stored in ~/.opentok/config.json[/dim]")


@auth.command("status")
def auth_status():
    """Show the configured project."""
    cfg = _load_config()
    if cfg.get("api_key"):
        console.print(f"[green]Configured[/green] for project {cfg['api_key']} ({cfg.get('base_url', DEFAULT_BASE_URL)})")
    else:
        console.print("[yellow]No credentials. Run `opentok auth login`.[/yellow]")


@auth.command("logout")
def auth_logout():
    """Clear saved credentials."""
    _save_config({})
    console.print("[green]Credentials cleared.[/green]")
