#!/usr/bin/env python3
"""Tests for message type codes."""
from swaystate.message_types import MessageType, is_event


def test_event_codes_have_high_bit() -> None:
    """Test every EVENT_ code is in the event range."""
    for message_type in MessageType:
        assert is_event(message_type) == message_type.name.startswith("EVENT_")


def test_reply_codes_match_requests() -> None:
    """Test the codes the client relies on."""
    assert MessageType.GET_TREE == 4
    assert MessageType.SUBSCRIBE == 2
    assert MessageType.EVENT_WORKSPACE == 0x80000000
    assert MessageType.EVENT_WINDOW == 0x80000003
