#!/usr/bin/env python3
"""Message type codes for the sway/i3 IPC protocol.

Request codes are small integers and are echoed back as the type of the
matching reply. Event codes live in a separate range with the high bit set,
so a reply can never be mistaken for an event.
"""

from enum import IntEnum

# High bit marks asynchronous events pushed by the window manager.
EVENT_FLAG: int = 0x80000000

# Event classes requested from sway on every connection.
SUBSCRIBED_EVENTS: list[str] = ["window", "workspace"]


class MessageType(IntEnum):
    """Request, reply and event codes."""

    RUN_COMMAND = 0
    GET_WORKSPACES = 1
    SUBSCRIBE = 2
    GET_OUTPUTS = 3
    GET_TREE = 4
    GET_MARKS = 5
    GET_BAR_CONFIG = 6
    GET_VERSION = 7
    GET_BINDING_MODES = 8
    GET_CONFIG = 9
    SEND_TICK = 10
    SYNC = 11
    GET_BINDING_STATE = 12
    GET_INPUTS = 100
    GET_SEATS = 101
    EVENT_WORKSPACE = 0x80000000
    EVENT_MODE = 0x80000002
    EVENT_WINDOW = 0x80000003
    EVENT_BARCONFIG_UPDATE = 0x80000004
    EVENT_BINDING = 0x80000005
    EVENT_SHUTDOWN = 0x80000006
    EVENT_TICK = 0x80000007
    EVENT_BAR_STATE_UPDATE = 0x80000014
    EVENT_INPUT = 0x80000015


def is_event(message_type: int) -> bool:
    """Return True if the code belongs to the asynchronous event range."""
    return bool(message_type & EVENT_FLAG)
