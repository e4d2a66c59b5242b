#!/usr/bin/env python3
"""Client entry point for swaystate.

This module provides run_client, which keeps a StateStore in sync with
sway until the connection ends or a stop is requested (SIGINT, SIGTERM or
the caller setting the stop event).

See session.py for a single connection and client_retry.py for
reconnecting.
"""

from __future__ import annotations

import asyncio
import logging
import signal
from contextlib import suppress
from typing import TYPE_CHECKING

from swaystate.client_retry import run_client_with_retry
from swaystate.session import run_connection

if TYPE_CHECKING:
    from swaystate.dispatcher import ChangedCallback
    from swaystate.state import StateStore

logger = logging.getLogger(__name__)


async def run_client(
    socket_path: str,
    store: StateStore,
    on_changed: ChangedCallback | None = None,
    stop_event: asyncio.Event | None = None,
    reconnect: bool = False,
    handle_signals: bool = True,
) -> None:
    """Keep store in sync with sway until disconnected or stopped.

    Args:
        socket_path: Path to the Unix domain socket.
        store: The state store to keep in sync.
        on_changed: Called after each dispatched message.
        stop_event: Set to end the client; created here if not given.
        reconnect: Reconnect with backoff instead of returning when sway
            closes the connection.
        handle_signals: Stop on SIGINT and SIGTERM. Only possible when the
            event loop runs in the main thread.

    Raises:
        ConnectionError: If the connection fails and reconnect is off.
    """
    if stop_event is None:
        stop_event = asyncio.Event()

    loop = asyncio.get_running_loop()
    if handle_signals:
        loop.add_signal_handler(signal.SIGINT, stop_event.set)
        loop.add_signal_handler(signal.SIGTERM, stop_event.set)

    if reconnect:
        session = asyncio.create_task(run_client_with_retry(socket_path, store, on_changed))
    else:
        session = asyncio.create_task(run_connection(socket_path, store, on_changed))
    stop_task = asyncio.create_task(stop_event.wait())
    try:
        done, _ = await asyncio.wait(
            {session, stop_task}, return_when=asyncio.FIRST_COMPLETED
        )
        if session in done:
            # Propagates ConnectionError from a failed connect
            session.result()
        else:
            logger.debug("Stop requested")
    finally:
        for task in (session, stop_task):
            if task.done():
                continue
            task.cancel()
            with suppress(asyncio.CancelledError):
                await task
        if handle_signals:
            loop.remove_signal_handler(signal.SIGINT)
            loop.remove_signal_handler(signal.SIGTERM)
