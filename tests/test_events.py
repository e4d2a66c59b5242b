#!/usr/bin/env python3
"""Tests for workspace and window event parsing."""
import pytest

from swaystate.events import parse_window_event, parse_workspace_event
from swaystate.protocol import PayloadError
from tree_builders import make_con, make_workspace


def test_parse_workspace_event_focus() -> None:
    """Test a focus event carries current and old workspaces."""
    event = parse_workspace_event(
        {"change": "focus", "current": make_workspace(2, "2"), "old": make_workspace(1, "1")}
    )
    assert event.change == "focus"
    assert event.current.id == 2
    assert event.old is not None
    assert event.old.id == 1


def test_parse_workspace_event_null_old() -> None:
    """Test a null old workspace is kept as None."""
    event = parse_workspace_event(
        {"change": "focus", "current": make_workspace(2, "2"), "old": None}
    )
    assert event.old is None


@pytest.mark.parametrize(
    "payload",
    [
        None,
        "focus",
        {"current": {"id": 1, "type": "workspace"}},
        {"change": "init"},
        {"change": "init", "current": None},
        {"change": "init", "current": {"type": "workspace"}},
    ],
)
def test_parse_workspace_event_malformed(payload: object) -> None:
    """Test PayloadError raised for payloads missing required fields."""
    with pytest.raises(PayloadError):
        parse_workspace_event(payload)


def test_parse_window_event() -> None:
    """Test a window event carries its container."""
    event = parse_window_event({"change": "new", "container": make_con(10)})
    assert event.change == "new"
    assert event.container.id == 10


@pytest.mark.parametrize(
    "payload",
    [
        {"container": make_con(10)},
        {"change": "close"},
        {"change": 3, "container": make_con(10)},
    ],
)
def test_parse_window_event_malformed(payload: object) -> None:
    """Test PayloadError raised for payloads missing required fields."""
    with pytest.raises(PayloadError):
        parse_window_event(payload)


def test_parse_workspace_event_reload_with_null_workspaces() -> None:
    """Test a reload event needs no current workspace."""
    event = parse_workspace_event({"change": "reload", "current": None, "old": None})
    assert event.change == "reload"
    assert event.current is None
    assert event.old is None
