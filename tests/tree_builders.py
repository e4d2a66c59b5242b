#!/usr/bin/env python3
"""Builders for sway tree nodes, events and frames used across tests."""
import asyncio
import copy
import json

from swaystate.protocol import encode_message


def make_con(
    con_id: int,
    name: str | None = "term",
    app_id: str | None = "term",
    shell: str = "xdg_shell",
    focused: bool = False,
    node_type: str = "con",
    nodes: list | None = None,
    window_properties: dict | None = None,
) -> dict:
    """Create a window container object."""
    con = {
        "id": con_id,
        "type": node_type,
        "name": name,
        "app_id": app_id,
        "shell": shell,
        "pid": 1000 + con_id,
        "focused": focused,
        "urgent": False,
        "visible": True,
        "rect": {"x": 0, "y": 0, "width": 800, "height": 600},
        "nodes": nodes or [],
        "floating_nodes": [],
    }
    if window_properties is not None:
        con["window_properties"] = window_properties
    return con


def make_workspace(
    ws_id: int,
    name: str,
    output: str = "HDMI-1",
    nodes: list | None = None,
    floating_nodes: list | None = None,
    focused: bool = False,
) -> dict:
    """Create a workspace object."""
    return {
        "id": ws_id,
        "type": "workspace",
        "name": name,
        "output": output,
        "focused": focused,
        "nodes": nodes or [],
        "floating_nodes": floating_nodes or [],
    }


def make_output(
    out_id: int, name: str, nodes: list | None = None, active: bool = False
) -> dict:
    """Create an output object."""
    return {
        "id": out_id,
        "type": "output",
        "name": name,
        "active": active,
        "focused": False,
        "nodes": nodes or [],
        "floating_nodes": [],
    }


def make_root(outputs: list, root_id: int = 100) -> dict:
    """Create the root object of a tree."""
    return {
        "id": root_id,
        "type": "root",
        "name": "root",
        "focused": False,
        "nodes": outputs,
        "floating_nodes": [],
    }


def make_frame(message_type: int, payload: object) -> bytes:
    """Encode a JSON payload as one frame."""
    return encode_message(message_type, json.dumps(payload))


def make_reader(data: bytes) -> asyncio.StreamReader:
    """Create a StreamReader with the given data followed by EOF."""
    reader = asyncio.StreamReader()
    reader.feed_data(data)
    reader.feed_eof()
    return reader


def snapshot_state(store) -> tuple:
    """Deep copy of the four state structures, for before/after comparison."""
    return copy.deepcopy(
        (
            store.monitors_by_id,
            store.workspaces_by_id,
            store.clients_by_id,
            store.active_state,
        )
    )
