#!/usr/bin/env python3
"""Full-tree synchronization.

This module rebuilds the state store from a GET_TREE reply. The walk is a
pre-order depth-first traversal driven by an explicit stack, so a very deep
tree cannot exhaust the interpreter's recursion limit.
"""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any

from swaystate.active_state import ActiveClient, ActiveWorkspace
from swaystate.nodes import (
    CLIENT_TYPES,
    OUTPUT_TYPE,
    ROOT_TYPE,
    WORKSPACE_TYPE,
    Node,
    derived_class,
    iter_children,
)
from swaystate.protocol import PayloadError

if TYPE_CHECKING:
    from swaystate.state import StateStore

logger = logging.getLogger(__name__)


def has_focused_descendant(data: dict[str, Any]) -> bool:
    """
    Check whether any node below data, at any depth, is focused.

    The node itself is not considered.

    Args:
        data: Raw tree node object.

    Returns:
        True if a focused descendant exists.
    """
    stack = list(iter_children(data))
    while stack:
        child = stack.pop()
        if not isinstance(child, dict):
            continue
        if child.get("focused"):
            return True
        stack.extend(iter_children(child))
    return False


def sync_tree(store: StateStore, root: Any) -> None:
    """
    Rebuild the entity maps and ActiveState from a full tree snapshot.

    Visits nodes in document order. A root node starts from empty maps;
    outputs, workspaces and clients are inserted into their maps. The
    active output sets ActiveState.monitor, a workspace with a focused
    descendant sets ActiveState.workspace and a focused client sets
    ActiveState.client. Each is an unconditional overwrite, so if a
    malformed tree has several candidates the last one visited wins.

    The new maps and ActiveState are built aside and installed together
    once the whole tree has been read. If any node is malformed the store
    keeps its previous contents.

    Args:
        store: The state store to rebuild.
        root: Decoded GET_TREE payload.

    Raises:
        PayloadError: If the payload or any visited node is malformed.
    """
    if not isinstance(root, dict):
        raise PayloadError(f"Expected tree object, got {type(root).__name__}")

    monitors = dict(store.monitors_by_id)
    workspaces = dict(store.workspaces_by_id)
    clients = dict(store.clients_by_id)
    active = copy.deepcopy(store.active_state)

    stack: list[Any] = [root]
    while stack:
        data = stack.pop()
        node = Node.from_dict(data)

        if node.type == ROOT_TYPE:
            monitors.clear()
            workspaces.clear()
            clients.clear()
        elif node.type == OUTPUT_TYPE:
            monitors[node.id] = node
            if node.active:
                active.monitor = node.name
        elif node.type == WORKSPACE_TYPE:
            workspaces[node.id] = node
            if has_focused_descendant(data):
                active.workspace = ActiveWorkspace(id=node.id, name=node.name)
        elif node.type in CLIENT_TYPES:
            clients[node.id] = node
            if node.focused:
                active.client = ActiveClient(
                    id=node.id, title=node.name, class_name=derived_class(node)
                )
        else:
            logger.debug("Skipping node %d of type %s", node.id, node.type)

        # Reversed so the first child is popped, and visited, first
        stack.extend(reversed(list(iter_children(data))))

    with store.lock:
        store.monitors_by_id = monitors
        store.workspaces_by_id = workspaces
        store.clients_by_id = clients
        store.active_state = active
        store.tree_generation += 1
    logger.debug(
        "Tree synced: %d monitors, %d workspaces, %d clients",
        len(monitors),
        len(workspaces),
        len(clients),
    )
