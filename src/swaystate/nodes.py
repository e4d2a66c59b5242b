#!/usr/bin/env python3
"""Node model for entities in the sway layout tree.

A Node holds one entity's own attributes. Children are referenced by id
rather than nested, so the flat maps in the state store act as an arena
and no code path has to recurse through the tree.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from swaystate.protocol import PayloadError

# Node types mapped into each entity map.
OUTPUT_TYPE = "output"
WORKSPACE_TYPE = "workspace"
CLIENT_TYPES = frozenset({"con", "floating_con"})
ROOT_TYPE = "root"

# Child collections, in traversal order.
CHILD_KEYS = ("nodes", "floating_nodes")


@dataclass
class Rect:
    """Geometry rectangle in layout coordinates."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> Rect:
        if not data:
            return cls()
        return cls(
            x=data.get("x", 0),
            y=data.get("y", 0),
            width=data.get("width", 0),
            height=data.get("height", 0),
        )


@dataclass
class WindowProperties:
    """X11 window properties, present only for xwayland clients."""

    title: str | None = None
    class_name: str | None = None
    instance: str | None = None
    window_role: str | None = None
    window_type: str | None = None
    transient_for: int | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> WindowProperties:
        return cls(
            title=data.get("title"),
            class_name=data.get("class"),
            instance=data.get("instance"),
            window_role=data.get("window_role"),
            window_type=data.get("window_type"),
            transient_for=data.get("transient_for"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "class": self.class_name,
            "instance": self.instance,
            "window_role": self.window_role,
            "window_type": self.window_type,
            "transient_for": self.transient_for,
        }


@dataclass
class Node:
    """
    One output, workspace or window container.

    Which attributes are meaningful depends on type: active only for
    outputs, output only for workspaces, app_id/pid/shell and
    window_properties only for clients.

    Attributes:
        id: Identifier, unique across the whole tree.
        name: Output name, workspace name or window title (may be None).
        type: One of root, output, workspace, con, floating_con.
        node_ids: Ids of tiled children, in order.
        floating_node_ids: Ids of floating children, in order.
    """

    id: int
    type: str
    name: str | None = None
    border: str | None = None
    current_border_width: int = 0
    layout: str | None = None
    orientation: str | None = None
    percent: float | None = None
    rect: Rect = field(default_factory=Rect)
    window_rect: Rect = field(default_factory=Rect)
    deco_rect: Rect = field(default_factory=Rect)
    geometry: Rect = field(default_factory=Rect)
    urgent: bool = False
    sticky: bool = False
    marks: list[str] = field(default_factory=list)
    focused: bool = False
    active: bool = False
    focus: list[int] = field(default_factory=list)
    fullscreen_mode: int = 0
    representation: str | None = None
    app_id: str | None = None
    pid: int | None = None
    visible: bool = False
    shell: str | None = None
    output: str | None = None
    window: int | None = None
    inhibit_idle: bool = False
    window_properties: WindowProperties | None = None
    node_ids: list[int] = field(default_factory=list)
    floating_node_ids: list[int] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Node:
        """
        Build a Node from one decoded JSON object, without descending.

        Args:
            data: Decoded JSON object for a single tree node.

        Returns:
            The parsed Node; children appear only as ids.

        Raises:
            PayloadError: If data is not an object or lacks an integer id
                or a string type.
        """
        if not isinstance(data, dict):
            raise PayloadError(f"Expected node object, got {type(data).__name__}")
        node_id = data.get("id")
        node_type = data.get("type")
        if not isinstance(node_id, int) or isinstance(node_id, bool):
            raise PayloadError(f"Node has no integer id: {node_id!r}")
        if not isinstance(node_type, str):
            raise PayloadError(f"Node {node_id} has no type")
        window_properties = data.get("window_properties")
        return cls(
            id=node_id,
            type=node_type,
            name=data.get("name"),
            border=data.get("border"),
            current_border_width=data.get("current_border_width") or 0,
            layout=data.get("layout"),
            orientation=data.get("orientation"),
            percent=data.get("percent"),
            rect=Rect.from_dict(data.get("rect")),
            window_rect=Rect.from_dict(data.get("window_rect")),
            deco_rect=Rect.from_dict(data.get("deco_rect")),
            geometry=Rect.from_dict(data.get("geometry")),
            urgent=bool(data.get("urgent", False)),
            sticky=bool(data.get("sticky", False)),
            marks=list(data.get("marks") or []),
            focused=bool(data.get("focused", False)),
            active=bool(data.get("active", False)),
            focus=list(data.get("focus") or []),
            fullscreen_mode=data.get("fullscreen_mode") or 0,
            representation=data.get("representation"),
            app_id=data.get("app_id"),
            pid=data.get("pid"),
            visible=bool(data.get("visible", False)),
            shell=data.get("shell"),
            output=data.get("output"),
            window=data.get("window"),
            inhibit_idle=bool(data.get("inhibit_idle", False)),
            window_properties=(
                WindowProperties.from_dict(window_properties)
                if isinstance(window_properties, dict)
                else None
            ),
            node_ids=[_child_id(c) for c in data.get("nodes") or []],
            floating_node_ids=[_child_id(c) for c in data.get("floating_nodes") or []],
        )

    def to_dict(self) -> dict[str, Any]:
        """Render the node as a JSON-ready dict using sway's field names."""
        result: dict[str, Any] = {
            "id": self.id,
            "type": self.type,
            "name": self.name,
            "focused": self.focused,
            "urgent": self.urgent,
            "sticky": self.sticky,
            "visible": self.visible,
            "layout": self.layout,
            "border": self.border,
            "fullscreen_mode": self.fullscreen_mode,
            "rect": vars(self.rect).copy(),
            "marks": list(self.marks),
            "nodes": list(self.node_ids),
            "floating_nodes": list(self.floating_node_ids),
        }
        if self.type == OUTPUT_TYPE:
            result["active"] = self.active
        elif self.type == WORKSPACE_TYPE:
            result["output"] = self.output
        elif self.type in CLIENT_TYPES:
            result["app_id"] = self.app_id
            result["pid"] = self.pid
            result["shell"] = self.shell
            result["class"] = derived_class(self)
            if self.window_properties is not None:
                result["window_properties"] = self.window_properties.to_dict()
        return result


def _child_id(child: Any) -> int | None:
    if isinstance(child, dict):
        return child.get("id")
    return None


def derived_class(node: Node) -> str:
    """
    Return the effective application class of a client.

    Xwayland clients carry their class in the X11 window properties;
    native Wayland clients use app_id.

    Args:
        node: A con or floating_con node.

    Returns:
        The class string, or "" when none is known.
    """
    if node.shell == "xwayland":
        if node.window_properties is None:
            return ""
        return node.window_properties.class_name or ""
    return node.app_id or ""


def iter_children(data: dict[str, Any]) -> Iterator[dict[str, Any]]:
    """Yield the raw child objects of a tree node, tiled before floating."""
    for key in CHILD_KEYS:
        for child in data.get(key) or []:
            yield child
