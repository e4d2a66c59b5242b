#!/usr/bin/env python3
"""Routing of decoded messages to state handlers.

A GET_TREE reply goes to the tree synchronizer, workspace and window
events go to their incremental handlers and every other message type is
ignored. Handler failures are logged here and never reach the read loop,
so one bad event cannot end the connection.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from swaystate.event_handlers import handle_window_event, handle_workspace_event
from swaystate.events import parse_window_event, parse_workspace_event
from swaystate.message_types import MessageType
from swaystate.protocol import PayloadError
from swaystate.tree_sync import sync_tree

if TYPE_CHECKING:
    from swaystate.state import StateStore

logger = logging.getLogger(__name__)

# Callback invoked with no arguments after each dispatched message.
ChangedCallback = Callable[[], None]


def _apply(store: StateStore, message_type: int, payload: Any) -> None:
    if message_type == MessageType.GET_TREE:
        sync_tree(store, payload)
    elif message_type == MessageType.EVENT_WORKSPACE:
        handle_workspace_event(store, parse_workspace_event(payload))
    elif message_type == MessageType.EVENT_WINDOW:
        handle_window_event(store, parse_window_event(payload))
    else:
        logger.debug("Ignoring message type %#x", message_type)


def dispatch(
    store: StateStore,
    message_type: int,
    payload: Any,
    on_changed: ChangedCallback | None = None,
) -> None:
    """
    Apply one decoded message to the store and signal the change.

    The store lock is held while the handler runs. on_changed is called
    exactly once afterwards, whether the message was applied, ignored or
    failed.

    Args:
        store: The state store to update.
        message_type: Type code from the frame header.
        payload: Decoded JSON payload.
        on_changed: Called with no arguments after the message is handled.
    """
    try:
        with store.lock:
            _apply(store, message_type, payload)
    except PayloadError as e:
        logger.warning("Dropping malformed message of type %#x: %s", message_type, e)
    except Exception:
        logger.exception("Failed to apply message of type %#x", message_type)

    if on_changed is None:
        return
    try:
        on_changed()
    except Exception:
        logger.exception("State change callback failed")
