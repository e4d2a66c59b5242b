#!/usr/bin/env python3
"""
Record of what currently has focus.

ActiveState is a denormalized cache: it is not recomputed from the entity
maps on read. Every handler that can move focus updates it directly, so it
stays correct only as long as each of them does.

Known gap: closing the focused window leaves ActiveState.client pointing at
it until the next window focus event arrives.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ActiveClient:
    """
    The focused window.

    Attributes:
        id: Container id, 0 when nothing has been focused yet.
        title: Window title.
        class_name: Derived application class (see nodes.derived_class).
    """

    id: int = 0
    title: str | None = ""
    class_name: str = ""


@dataclass
class ActiveWorkspace:
    """The focused workspace."""

    id: int = 0
    name: str | None = ""


@dataclass
class ActiveState:
    """
    Focused client, output name and workspace.

    Attributes:
        client: The focused window.
        monitor: Name of the focused output.
        workspace: The focused workspace.
    """

    client: ActiveClient = field(default_factory=ActiveClient)
    monitor: str | None = ""
    workspace: ActiveWorkspace = field(default_factory=ActiveWorkspace)

    def to_dict(self) -> dict[str, Any]:
        """
        Render in the shape consumers expect.

        Returns:
            {"client": {"id", "title", "class"}, "monitor",
            "workspace": {"id", "name"}}
        """
        return {
            "client": {
                "id": self.client.id,
                "title": self.client.title,
                "class": self.client.class_name,
            },
            "monitor": self.monitor,
            "workspace": {
                "id": self.workspace.id,
                "name": self.workspace.name,
            },
        }
