#!/usr/bin/env python3
"""Incremental workspace and window event handlers.

This module provides the handlers that apply a single event to the state
store:
- handle_workspace_event: insert, remove or refresh one workspace
- handle_window_event: insert, remove or refresh one client

Both also keep ActiveState in step with focus and title changes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from swaystate.active_state import ActiveClient, ActiveWorkspace
from swaystate.nodes import derived_class

if TYPE_CHECKING:
    from swaystate.events import WindowEvent, WorkspaceEvent
    from swaystate.state import StateStore

logger = logging.getLogger(__name__)


def handle_workspace_event(store: StateStore, event: WorkspaceEvent) -> None:
    """
    Apply a workspace event to the state store.

    init inserts the workspace, empty removes it, focus makes it active and
    refreshes both it and the previously focused one, rename renames the
    active workspace if it is this one, reload is ignored. Any other change
    refreshes the workspace.

    Args:
        store: The state store to update.
        event: The parsed workspace event.
    """
    change = event.change
    workspace = event.current
    if change == "reload" or workspace is None:
        logger.debug("Workspace %s: nothing to apply", change)
        return
    if change == "init":
        store.workspaces_by_id[workspace.id] = workspace
    elif change == "empty":
        store.workspaces_by_id.pop(workspace.id, None)
    elif change == "focus":
        store.active_state.workspace = ActiveWorkspace(id=workspace.id, name=workspace.name)
        store.active_state.monitor = workspace.output
        store.workspaces_by_id[workspace.id] = workspace
        # old is null on the first focus after sway starts
        if event.old is not None:
            store.workspaces_by_id[event.old.id] = event.old
    elif change == "rename":
        if store.active_state.workspace.id == workspace.id:
            store.active_state.workspace.name = workspace.name
        store.workspaces_by_id[workspace.id] = workspace
    else:
        store.workspaces_by_id[workspace.id] = workspace
    logger.debug("Workspace %s: %d (%s)", change, workspace.id, workspace.name)


def handle_window_event(store: StateStore, event: WindowEvent) -> None:
    """
    Apply a window event to the state store.

    new inserts the client and close removes it. focus moves ActiveState
    to the client and clears the focused flag of the previously active
    one; repeating a focus for the already active client does nothing.
    title updates the active title when the client is focused. Every
    other change, title included, refreshes the client.

    Closing the active client does not touch ActiveState.

    Args:
        store: The state store to update.
        event: The parsed window event.
    """
    client = event.container
    client_id = client.id
    change = event.change
    active = store.active_state
    if change == "new":
        store.clients_by_id[client_id] = client
    elif change == "close":
        store.clients_by_id.pop(client_id, None)
    elif change == "focus":
        if active.client.id == client_id:
            logger.debug("Client %d already active", client_id)
            return
        previous = store.clients_by_id.get(active.client.id)
        if previous is not None:
            previous.focused = False
        active.client = ActiveClient(
            id=client_id, title=client.name, class_name=derived_class(client)
        )
    elif change == "title":
        if client.focused:
            active.client.title = client.name
        store.clients_by_id[client_id] = client
    else:
        store.clients_by_id[client_id] = client
    logger.debug("Window %s: %d", change, client_id)
