"""CLI: opentok token <session-id>"""

import time

import click
from rich.console import Console

from opentok_sdk.errors import OpenTokError
from opentok_sdk.tokens import Role, TokenClaims, build_token

console = Console()


def _get_credentials():
    from opentok_sdk.cli.main import _get_credentials
    return _get_credentials()


@click.command("token")
@click.argument("session_id")
@click.option("--role", type=click.Choice([r.value for r in Role]), default=Role.PUBLISHER.value)
@click.option("--expire-in", type=int, default=None, help="Lifetime in seconds (default 24h)")
@click.option("--data", default=None, help="Connection data, at most 1000 bytes")
@click.option("--layout-class", "layout_classes", multiple=True, help="Initial layout class, repeatable")
def token_cmd(session_id, role, expire_in, data, layout_classes):
    """Generate a client token for SESSION_ID."""
    credentials = _get_credentials()
    now = time.time()
    claims = TokenClaims(
        session_id=session_id,
        role=Role(role),
        expire_time=int(now) + expire_in if expire_in else None,
        data=data,
        initial_layout_class_list=list(layout_classes) or None,
    )
    try:
        token = build_token(credentials, claims, now=now)
    except OpenTokError as e:
        console.print(f"[red]{e.message}[/red]")
        raise SystemExit(1)
    click.echo(token)
