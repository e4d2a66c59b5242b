#!/usr/bin/env python3
"""Pytest fixtures for swaystate tests.

Provides a fresh state store, a sample layout tree and a temporary
socket path.
"""

from collections.abc import Generator
from pathlib import Path

import pytest

from swaystate.state import StateStore
from tree_builders import make_con, make_output, make_root, make_workspace


@pytest.fixture
def store() -> StateStore:
    """Create an empty StateStore."""
    return StateStore()


@pytest.fixture
def sample_tree() -> dict:
    """One active output with workspace 1 holding focused client 10."""
    return make_root(
        [
            make_output(
                3,
                "HDMI-1",
                active=True,
                nodes=[
                    make_workspace(
                        1,
                        "1",
                        output="HDMI-1",
                        nodes=[make_con(10, name="vim", app_id="term", focused=True)],
                    )
                ],
            )
        ]
    )


@pytest.fixture
def temp_socket_path(tmp_path: Path) -> Generator[Path, None, None]:
    """Provide a temporary path for Unix domain socket testing."""
    socket_path = tmp_path / "sway.sock"
    yield socket_path
    if socket_path.exists():
        socket_path.unlink()
