"""CLI commands for anigraph.

This module implements the user-facing commands that wrap the AniList user
API: profile, stats, all, activity, viewer, update, login, logout and version.
- Uses Typer for declarative CLI structure and option parsing.
- All output is routed through Rich Console; results are printed as JSON.

Design:
- Typer app and Console are instantiated at module level for reuse across
  commands.
- Each command builds one AniList client, awaits a single facade call and
  closes the client.
- Library errors are reported in red and mapped to ExitCode.ERROR.
"""

import asyncio
import json
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Annotated, Any, List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from anigraph.client import AniList
from anigraph.errors import AniGraphError
from anigraph.settings import Settings
from anigraph.user import User
from anigraph.utils.config import clear_token, resolve_setting, set_token
from anigraph.utils.debug import error

app = typer.Typer(
    name="anigraph",
    help="Query AniList user profiles, statistics and activity.",
    no_args_is_help=True,
)
console = Console()


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1


TokenOption = Annotated[
    Optional[str],
    typer.Option(
        "--token",
        help="AniList access token. Falls back to ANIGRAPH_TOKEN, then the stored token.",
    ),
]
UserArgument = Annotated[
    str, typer.Argument(help="AniList username, or numeric id if all digits.")
]


def parse_user(value: str) -> int | str:
    """Treat purely numeric user arguments as AniList ids."""
    return int(value) if value.isdigit() else value


def parse_option(pair: str) -> tuple[str, Any]:
    """Split a KEY=VALUE pair, decoding VALUE as JSON when possible.

    Raises:
        typer.BadParameter: If the pair has no ``=`` or an empty key.
    """
    key, sep, raw = pair.partition("=")
    if not sep or not key:
        raise typer.BadParameter(f"Expected KEY=VALUE, got {pair!r}")
    try:
        value = json.loads(raw)
    except ValueError:
        value = raw
    return key, value


def _run(token: Optional[str], call: Callable[[User], Awaitable[Any]]) -> None:
    resolved = resolve_setting(
        "auth.token", default=None, cli_value=token, env_var="ANIGRAPH_TOKEN"
    )

    async def _call() -> Any:
        async with AniList(resolved, settings=Settings()) as anilist:
            return await call(anilist.user)

    try:
        result = asyncio.run(_call())
    except AniGraphError as exc:
        error(f"{type(exc).__name__}: {exc}")
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(ExitCode.ERROR) from exc
    console.print_json(data=result)


@app.command()
def profile(user: UserArgument, token: TokenOption = None) -> None:
    """Show a user's profile."""
    _run(token, lambda api: api.profile(parse_user(user)))


@app.command()
def stats(user: UserArgument, token: TokenOption = None) -> None:
    """Show a user's anime and manga statistics."""
    _run(token, lambda api: api.stats(parse_user(user)))


@app.command("all")
def all_(user: UserArgument, token: TokenOption = None) -> None:
    """Show a user's profile together with statistics."""
    _run(token, lambda api: api.all(parse_user(user)))


@app.command()
def activity(
    user_id: Annotated[int, typer.Argument(help="Numeric AniList user id.")],
    token: TokenOption = None,
) -> None:
    """Show a user's 25 most recent activities."""
    _run(token, lambda api: api.recent_activity(user_id))


@app.command()
def viewer(token: TokenOption = None) -> None:
    """Show the profile of the authorized user."""
    _run(token, lambda api: api.authorized_profile())


@app.command()
def update(
    options: Annotated[
        Optional[List[str]],
        typer.Argument(help="Settings to change as KEY=VALUE (VALUE may be JSON)."),
    ] = None,
    token: TokenOption = None,
) -> None:
    """Update the authorized user's settings."""
    values = dict(parse_option(pair) for pair in options or [])
    _run(token, lambda api: api.update_settings(values))


@app.command()
def login(token: Annotated[str, typer.Argument(help="AniList access token.")]) -> None:
    """Store an access token for later commands."""
    set_token(token)
    console.print("[green]Token saved.[/green]")


@app.command()
def logout() -> None:
    """Remove the stored access token."""
    if clear_token():
        console.print("[green]Token removed.[/green]")
    else:
        console.print("No stored token.")


@app.command()
def version() -> None:
    """Show the version of anigraph."""
    from anigraph.__about__ import __version__

    console.print(f"anigraph version: [bold]{__version__}[/bold]")


def main() -> None:
    """Main entry point for the CLI."""
    app()
