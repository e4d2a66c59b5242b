"""CLI handling for swaystate.

This module provides the command-line interface for swaystate, handling
argument parsing via click, logging configuration, and running the client
in one-shot or watch mode.

Usage:
    swaystate --once [--show VIEW] [--socket PATH] [--verbose]
    swaystate --watch [--show VIEW] [--socket PATH] [--reconnect] [--verbose]
"""

import json
import sys

import click

from swaystate.main_logging import configure_logging
from swaystate.main_options import ExclusiveFlagOption
from swaystate.state import StateStore

VIEWS = ("active", "monitors", "workspaces", "clients")


def render_view(store: StateStore, view: str) -> str:
    """Render one view of the store as a single line of JSON.

    Args:
        store: The state store to read.
        view: One of VIEWS.

    Returns:
        JSON text for the active state or for the nodes of one map.
    """
    if view == "active":
        return json.dumps(store.active().to_dict())
    nodes = getattr(store, view)()
    return json.dumps([node.to_dict() for node in nodes])


@click.command()
@click.option(
    "--once",
    is_flag=True,
    cls=ExclusiveFlagOption,
    exclusive_with=["watch"],
    help="Print the state after the initial snapshot and exit",
)
@click.option(
    "--watch",
    is_flag=True,
    cls=ExclusiveFlagOption,
    exclusive_with=["once"],
    help="Print the state every time it changes",
)
@click.option(
    "--socket",
    "socket_path",
    envvar=["SWAYSOCK", "I3SOCK"],
    type=click.Path(),
    help="sway IPC socket path [env: SWAYSOCK, I3SOCK]",
)
@click.option(
    "--show",
    type=click.Choice(VIEWS),
    default="active",
    show_default=True,
    help="Which part of the state to print",
)
@click.option(
    "--reconnect",
    is_flag=True,
    help="Reconnect with backoff when sway closes the connection",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Enable DEBUG-level logging",
)
def main(
    once: bool,
    watch: bool,
    socket_path: str | None,
    show: str,
    reconnect: bool,
    verbose: bool,
) -> None:
    """Mirror sway's outputs, workspaces and windows over its IPC socket."""
    if not once and not watch:
        raise click.UsageError("Either --once or --watch must be specified")
    if not socket_path:
        raise click.UsageError("No socket path: pass --socket or set SWAYSOCK")

    configure_logging(verbose)

    _run_mode(once, socket_path, show, reconnect)


def _run_mode(once: bool, socket_path: str, show: str, reconnect: bool) -> None:
    """Run the client in one-shot or watch mode.

    Args:
        once: True to exit after the first full snapshot.
        socket_path: Path to the Unix domain socket.
        show: The view to print.
        reconnect: Reconnect when sway closes the connection.
    """
    import asyncio

    store = StateStore()
    try:
        if once:
            asyncio.run(_run_once(socket_path, store, show))
        else:
            asyncio.run(_run_watch(socket_path, store, show, reconnect))
    except ConnectionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if once and store.tree_generation == 0:
        click.echo("Error: connection closed before the tree was received", err=True)
        sys.exit(1)


async def _run_once(socket_path: str, store: StateStore, show: str) -> None:
    """Print one view after the first tree sync, then stop the client."""
    import asyncio

    from swaystate.client import run_client

    stop_event = asyncio.Event()

    def on_changed() -> None:
        if store.tree_generation and not stop_event.is_set():
            click.echo(render_view(store, show))
            stop_event.set()

    await run_client(socket_path, store, on_changed, stop_event)


async def _run_watch(
    socket_path: str, store: StateStore, show: str, reconnect: bool
) -> None:
    """Print one view every time the state changes."""
    from swaystate.client import run_client

    def on_changed() -> None:
        click.echo(render_view(store, show))

    await run_client(socket_path, store, on_changed, reconnect=reconnect)
