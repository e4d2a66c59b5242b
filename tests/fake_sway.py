#!/usr/bin/env python3
"""A minimal sway IPC server for client tests.

Replies to GET_TREE with a given tree and to SUBSCRIBE with success, then
pushes the given event frames and closes the connection.
"""
import asyncio
import json

from swaystate.message_types import MessageType
from swaystate.protocol import read_message
from tree_builders import make_frame


class FakeSway:
    """Records requests and serves canned replies to one client at a time."""

    def __init__(self, tree: dict, events: list[bytes] | None = None, hold_open: bool = False):
        self.tree = tree
        self.events = events or []
        self.hold_open = hold_open
        self.requests: list[tuple[int, object]] = []
        self.connections = 0

    async def handle(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        self.connections += 1
        try:
            while True:
                message = await read_message(reader)
                if message is None:
                    break
                message_type, payload = message
                self.requests.append((message_type, payload.decode("utf-8")))
                if message_type == MessageType.GET_TREE:
                    writer.write(make_frame(MessageType.GET_TREE, self.tree))
                elif message_type == MessageType.SUBSCRIBE:
                    writer.write(make_frame(MessageType.SUBSCRIBE, {"success": True}))
                    for event in self.events:
                        writer.write(event)
                    await writer.drain()
                    if not self.hold_open:
                        break
                await writer.drain()
        finally:
            writer.close()


def subscribe_payload() -> str:
    return json.dumps(["window", "workspace"])
