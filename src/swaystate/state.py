#!/usr/bin/env python3
"""State store for the mirrored window manager state.

This module provides the StateStore class that owns the three entity maps
(monitors, workspaces, clients) and the ActiveState record, plus the
read-only accessors consumers use.

Only the tree synchronizer and the event handlers write to the store, and
they always run on the single read loop. Accessors may be called from
other threads, so writers hold the store lock for the whole of one message
and readers take it to copy out a consistent view.
"""

from __future__ import annotations

import copy
import threading
from dataclasses import dataclass, field

from swaystate.active_state import ActiveState
from swaystate.nodes import Node


@dataclass
class StateStore:
    """
    Mirror of sway's outputs, workspaces and windows.

    Attributes:
        monitors_by_id: Output nodes keyed by id.
        workspaces_by_id: Workspace nodes keyed by id.
        clients_by_id: Window nodes (con and floating_con) keyed by id.
        active_state: What currently has focus.
        tree_generation: Number of full-tree snapshots applied so far.
        lock: Held by the writer for each applied message and by readers
            while copying.
    """

    monitors_by_id: dict[int, Node] = field(default_factory=dict)
    workspaces_by_id: dict[int, Node] = field(default_factory=dict)
    clients_by_id: dict[int, Node] = field(default_factory=dict)
    active_state: ActiveState = field(default_factory=ActiveState)
    tree_generation: int = 0
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    def clear_maps(self) -> None:
        """Empty all three entity maps, leaving ActiveState untouched."""
        with self.lock:
            self.monitors_by_id.clear()
            self.workspaces_by_id.clear()
            self.clients_by_id.clear()

    def reset(self) -> None:
        """
        Return to the initial empty state.

        Used before each reconnect so the new connection starts from its
        own full snapshot.
        """
        with self.lock:
            self.clear_maps()
            self.active_state = ActiveState()
            self.tree_generation = 0

    # Node accessors hand out shallow copies; handlers replace nodes or
    # set scalar fields and never mutate a stored node's lists in place.

    def monitors(self) -> list[Node]:
        """Return all outputs."""
        with self.lock:
            return [copy.copy(node) for node in self.monitors_by_id.values()]

    def workspaces(self) -> list[Node]:
        """Return all workspaces."""
        with self.lock:
            return [copy.copy(node) for node in self.workspaces_by_id.values()]

    def clients(self) -> list[Node]:
        """Return all windows."""
        with self.lock:
            return [copy.copy(node) for node in self.clients_by_id.values()]

    def get_monitor(self, monitor_id: int) -> Node | None:
        """Return the output with the given id, or None."""
        with self.lock:
            return _copy_or_none(self.monitors_by_id.get(monitor_id))

    def get_workspace(self, workspace_id: int) -> Node | None:
        """Return the workspace with the given id, or None."""
        with self.lock:
            return _copy_or_none(self.workspaces_by_id.get(workspace_id))

    def get_client(self, client_id: int) -> Node | None:
        """Return the window with the given id, or None."""
        with self.lock:
            return _copy_or_none(self.clients_by_id.get(client_id))

    def active(self) -> ActiveState:
        """Return a copy of the current ActiveState."""
        with self.lock:
            return copy.deepcopy(self.active_state)


def _copy_or_none(node: Node | None) -> Node | None:
    if node is None:
        return None
    return copy.copy(node)
