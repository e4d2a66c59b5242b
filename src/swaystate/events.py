#!/usr/bin/env python3
"""Typed variants of the workspace and window event payloads.

Event payloads arrive as untyped JSON. Each parser checks the fields its
handler depends on and raises PayloadError instead of letting a missing
key surface later as a KeyError inside the state update.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from swaystate.nodes import Node
from swaystate.protocol import PayloadError


@dataclass
class WorkspaceEvent:
    """
    A workspace event.

    Attributes:
        change: init, empty, focus, move, rename, urgent, reload, ...
        current: The workspace the event is about; None for reload, which
            sway sends with null current and old.
        old: The previously focused workspace for focus events, else None.
    """

    change: str
    current: Node | None
    old: Node | None = None


@dataclass
class WindowEvent:
    """
    A window event.

    Attributes:
        change: new, close, focus, title, fullscreen_mode, move, floating,
            urgent, mark, ...
        container: The client the event is about.
    """

    change: str
    container: Node


def _require_change(payload: Any) -> str:
    if not isinstance(payload, dict):
        raise PayloadError(f"Expected event object, got {type(payload).__name__}")
    change = payload.get("change")
    if not isinstance(change, str):
        raise PayloadError("Event has no change tag")
    return change


def parse_workspace_event(payload: Any) -> WorkspaceEvent:
    """
    Parse a workspace event payload.

    Args:
        payload: Decoded JSON payload of an EVENT_WORKSPACE message.

    Returns:
        The parsed WorkspaceEvent.

    Raises:
        PayloadError: If change is missing, or current is missing or
            malformed on anything but a reload.
    """
    change = _require_change(payload)
    if change == "reload":
        return WorkspaceEvent(change=change, current=None)
    if payload.get("current") is None:
        raise PayloadError(f"Workspace {change} event has no current workspace")
    current = Node.from_dict(payload["current"])
    old_data = payload.get("old")
    old = Node.from_dict(old_data) if old_data is not None else None
    return WorkspaceEvent(change=change, current=current, old=old)


def parse_window_event(payload: Any) -> WindowEvent:
    """
    Parse a window event payload.

    Args:
        payload: Decoded JSON payload of an EVENT_WINDOW message.

    Returns:
        The parsed WindowEvent.

    Raises:
        PayloadError: If change or container is missing or malformed.
    """
    change = _require_change(payload)
    if payload.get("container") is None:
        raise PayloadError(f"Window {change} event has no container")
    return WindowEvent(change=change, container=Node.from_dict(payload["container"]))
