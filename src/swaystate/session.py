#!/usr/bin/env python3
"""Single connection to the sway IPC socket.

This module opens the socket, sends the initial GET_TREE and SUBSCRIBE
requests and runs the read loop for the lifetime of one connection.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING

from swaystate.message_types import SUBSCRIBED_EVENTS, MessageType
from swaystate.protocol import send_message
from swaystate.read_loop import run_read_loop

if TYPE_CHECKING:
    from swaystate.dispatcher import ChangedCallback
    from swaystate.state import StateStore

logger = logging.getLogger(__name__)


async def connect_to_sway(
    socket_path: str,
) -> tuple[asyncio.StreamReader, asyncio.StreamWriter]:
    """Open a stream pair on sway's IPC socket.

    sway listens on a per-session Unix socket whose path it exports as
    $SWAYSOCK. A missing file usually means sway is not running or the
    variable belongs to an earlier session.

    Args:
        socket_path: Filesystem path of the IPC socket.

    Returns:
        The (reader, writer) pair; requests go out on the writer and
        replies and events come back on the reader.

    Raises:
        ConnectionError: If the socket is missing, refuses the connection
            or is not accessible.
    """
    try:
        reader, writer = await asyncio.open_unix_connection(socket_path)
    except OSError as e:
        raise ConnectionError(f"Cannot reach sway at {socket_path}: {e}") from e
    return reader, writer


async def request_initial_state(writer: asyncio.StreamWriter) -> None:
    """Ask for the full tree, then subscribe to window and workspace events.

    Args:
        writer: The asyncio StreamWriter for the socket connection.
    """
    await send_message(writer, MessageType.GET_TREE)
    await send_message(writer, MessageType.SUBSCRIBE, json.dumps(SUBSCRIBED_EVENTS))
    logger.debug("Requested tree and subscribed to %s", ", ".join(SUBSCRIBED_EVENTS))


async def run_session(
    store: StateStore,
    reader: asyncio.StreamReader,
    writer: asyncio.StreamWriter,
    on_changed: ChangedCallback | None = None,
) -> None:
    """Run one connection until sway closes it.

    Args:
        store: The state store to keep in sync.
        reader: The asyncio StreamReader for the socket connection.
        writer: The asyncio StreamWriter for the socket connection.
        on_changed: Called after each dispatched message.

    Raises:
        ConnectionError: If a request cannot be written.
    """
    await request_initial_state(writer)
    await run_read_loop(store, reader, on_changed)


async def run_connection(
    socket_path: str,
    store: StateStore,
    on_changed: ChangedCallback | None = None,
) -> None:
    """Connect once and run the session, closing the socket afterwards.

    Args:
        socket_path: Path to the Unix domain socket.
        store: The state store to keep in sync.
        on_changed: Called after each dispatched message.

    Raises:
        ConnectionError: If the connection cannot be established.
    """
    reader, writer = await connect_to_sway(socket_path)
    logger.debug("Connected to sway at %s", socket_path)
    try:
        await run_session(store, reader, writer, on_changed)
    finally:
        writer.close()
        await writer.wait_closed()
