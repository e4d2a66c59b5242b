#!/usr/bin/env python3
"""Tests for the Node model and derived class."""
import pytest

from swaystate.nodes import Node, derived_class, iter_children
from swaystate.protocol import PayloadError
from tree_builders import make_con, make_workspace


def test_from_dict_reads_own_fields() -> None:
    """Test scalar fields and geometry are parsed."""
    node = Node.from_dict(make_con(10, name="vim", app_id="term", focused=True))
    assert node.id == 10
    assert node.type == "con"
    assert node.name == "vim"
    assert node.app_id == "term"
    assert node.focused is True
    assert node.rect.width == 800
    assert node.pid == 1010


def test_from_dict_keeps_children_as_ids() -> None:
    """Test nested children become id lists, tiled and floating apart."""
    ws = make_workspace(
        1,
        "1",
        nodes=[make_con(10), make_con(11)],
        floating_nodes=[make_con(12, node_type="floating_con")],
    )
    node = Node.from_dict(ws)
    assert node.node_ids == [10, 11]
    assert node.floating_node_ids == [12]


def test_from_dict_defaults_for_missing_fields() -> None:
    """Test a minimal node gets defaults."""
    node = Node.from_dict({"id": 5, "type": "con"})
    assert node.name is None
    assert node.focused is False
    assert node.node_ids == []
    assert node.window_properties is None


@pytest.mark.parametrize(
    "data",
    [
        None,
        [],
        {"type": "con"},
        {"id": "5", "type": "con"},
        {"id": True, "type": "con"},
        {"id": 5},
    ],
)
def test_from_dict_rejects_malformed(data: object) -> None:
    """Test PayloadError raised without an object, integer id or type."""
    with pytest.raises(PayloadError):
        Node.from_dict(data)


def test_derived_class_native_uses_app_id() -> None:
    """Test native wayland clients use app_id."""
    node = Node.from_dict(make_con(1, app_id="foot", shell="xdg_shell"))
    assert derived_class(node) == "foot"


def test_derived_class_xwayland_uses_window_class() -> None:
    """Test xwayland clients use window_properties.class."""
    node = Node.from_dict(
        make_con(1, app_id=None, shell="xwayland", window_properties={"class": "Gimp"})
    )
    assert derived_class(node) == "Gimp"


def test_derived_class_xwayland_without_properties() -> None:
    """Test xwayland clients without properties get an empty class."""
    node = Node.from_dict(make_con(1, app_id=None, shell="xwayland"))
    assert derived_class(node) == ""


def test_derived_class_native_without_app_id() -> None:
    """Test a missing app_id gives an empty class."""
    node = Node.from_dict(make_con(1, app_id=None))
    assert derived_class(node) == ""


def test_to_dict_uses_sway_field_names() -> None:
    """Test to_dict restores the class key and child ids."""
    node = Node.from_dict(
        make_con(
            7,
            shell="xwayland",
            window_properties={"class": "Steam", "title": "Steam"},
        )
    )
    result = node.to_dict()
    assert result["class"] == "Steam"
    assert result["window_properties"]["class"] == "Steam"
    assert result["nodes"] == []
    assert result["rect"] == {"x": 0, "y": 0, "width": 800, "height": 600}


def test_iter_children_tiled_then_floating() -> None:
    """Test children come tiled first, then floating."""
    ws = make_workspace(
        1,
        "1",
        nodes=[make_con(10)],
        floating_nodes=[make_con(12, node_type="floating_con")],
    )
    assert [child["id"] for child in iter_children(ws)] == [10, 12]
