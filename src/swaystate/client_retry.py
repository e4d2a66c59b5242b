#!/usr/bin/env python3
"""Reconnect logic for swaystate.

This module wraps a single connection with tenacity for exponential
backoff. Every attempt starts from an empty store so the new connection
rebuilds all state from its own full-tree snapshot.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tenacity import retry, retry_if_exception_type, stop_never, wait_exponential

from swaystate.client_constants import INITIAL_WAIT, MAX_WAIT, WAIT_MULTIPLIER
from swaystate.session import connect_to_sway, run_session

if TYPE_CHECKING:
    from swaystate.dispatcher import ChangedCallback
    from swaystate.state import StateStore

logger = logging.getLogger(__name__)


@retry(
    wait=wait_exponential(
        multiplier=WAIT_MULTIPLIER,
        min=INITIAL_WAIT,
        max=MAX_WAIT,
    ),
    retry=retry_if_exception_type((ConnectionError, OSError)),
    stop=stop_never,
)
async def run_client_with_retry(
    socket_path: str,
    store: StateStore,
    on_changed: ChangedCallback | None = None,
) -> None:
    """Connect to sway with retry and keep the store in sync.

    A connection that sway closes is treated like a failed one and
    retried.

    Args:
        socket_path: Path to the Unix domain socket.
        store: The state store to keep in sync.
        on_changed: Called after each dispatched message.

    Note:
        This function never returns normally - it either runs forever
        or raises an exception that doesn't trigger retry.
    """
    store.reset()

    logger.debug("Connecting to sway at %s", socket_path)
    try:
        reader, writer = await connect_to_sway(socket_path)
    except ConnectionError:
        logger.warning("Connection to %s failed, will retry", socket_path)
        raise

    logger.debug("Connected to sway at %s", socket_path)
    try:
        await run_session(store, reader, writer, on_changed)
    except (ConnectionError, OSError) as e:
        logger.warning("Connection lost: %s, will retry", e)
        raise
    finally:
        writer.close()
        await writer.wait_closed()

    logger.warning("Sway closed the connection, will retry")
    raise ConnectionError(f"Connection to {socket_path} closed")
