#!/usr/bin/env python3
"""Frame read loop.

This module provides run_read_loop, which reads frames from the sway
socket one at a time and hands each decoded message to the dispatcher.
Header and payload reads are strictly sequential; the next frame is not
requested until the previous message has been dispatched.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from swaystate.dispatcher import dispatch
from swaystate.protocol import PayloadError, ProtocolError, decode_payload, read_message

if TYPE_CHECKING:
    import asyncio

    from swaystate.dispatcher import ChangedCallback
    from swaystate.state import StateStore

logger = logging.getLogger(__name__)


async def run_read_loop(
    store: StateStore,
    reader: asyncio.StreamReader,
    on_changed: ChangedCallback | None = None,
) -> None:
    """
    Read and dispatch messages until the connection closes.

    Returns normally when the peer closes the stream, including when it
    does so partway through a frame (logged as a warning). A payload that
    cannot be decoded is logged and skipped.

    Args:
        store: The state store updated by dispatched messages.
        reader: The asyncio StreamReader for the socket connection.
        on_changed: Called after each dispatched message.
    """
    while True:
        try:
            message = await read_message(reader)
        except ProtocolError as e:
            logger.warning("Connection closed mid-frame: %s", e)
            return
        if message is None:
            logger.debug("Connection closed")
            return

        message_type, raw_payload = message
        try:
            payload = decode_payload(raw_payload)
        except PayloadError as e:
            logger.warning("Skipping message of type %#x: %s", message_type, e)
            continue

        dispatch(store, message_type, payload, on_changed)
