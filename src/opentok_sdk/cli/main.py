"""
OpenTok CLI: `opentok` command.

Commands:
  opentok auth login|status|logout   Store API credentials
  opentok token <session-id>         Generate a client token
  opentok sessions create            Create a session
  opentok archives <cmd>             Archive lifecycle
"""

import asyncio
import json
import logging
from pathlib import Path

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install opentok-sdk[cli]")

from opentok_sdk.client import AsyncOpenTok
from opentok_sdk.errors import OpenTokError
from opentok_sdk.models.options import Credentials
from opentok_sdk.transport.http import DEFAULT_BASE_URL

console = Console()
CONFIG_FILE = Path.home() / ".opentok" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))
    CONFIG_FILE.chmod(0o600)


def _require_config() -> dict:
    cfg = _load_config()
    if not cfg.get("api_key") or not cfg.get("api_secret"):
        console.print("[red]No credentials. Run `opentok auth login` first.[/red]")
        raise SystemExit(1)
    return cfg


def _get_credentials() -> Credentials:
    cfg = _require_config()
    return Credentials(api_key=int(cfg["api_key"]), api_secret=cfg["api_secret"])


def _get_client() -> AsyncOpenTok:
    cfg = _require_config()
    return AsyncOpenTok(
        api_key=int(cfg["api_key"]),
        api_secret=cfg["api_secret"],
        base_url=cfg.get("base_url", DEFAULT_BASE_URL),
    )


def _run(coro):
    try:
        return asyncio.run(coro)
    except OpenTokError as e:
        console.print(f"[red]{e.code}: {e.message}[/red]")
        raise SystemExit(1)


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Log HTTP requests")
def main(verbose):
    """OpenTok CLI: tokens, sessions and archives from the terminal."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(message)s", handlers=[RichHandler(console=console, show_path=False)],
        )


# Register subcommands from separate modules
from opentok_sdk.cli.auth import auth
from opentok_sdk.cli.token import token_cmd
from opentok_sdk.cli.sessions import sessions
from opentok_sdk.cli.archives import archives

main.add_command(auth)
main.add_command(token_cmd)
main.add_command(sessions)
main.add_command(archives)


if __name__ == "__main__":
    main()
