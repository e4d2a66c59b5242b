#!/usr/bin/env python3
"""
Binary framing for the sway IPC socket.

Every message in either direction is a 14-byte header followed by a UTF-8
payload (JSON in practice):

    magic "i3-ipc" (6 bytes) | payload length (u32 LE) | type (u32 LE)

Example: a GET_TREE request with an empty payload is
b"i3-ipc" + b"\\x00\\x00\\x00\\x00" + b"\\x04\\x00\\x00\\x00".

This module provides frame encoding, header decoding, reading a single
frame from an asyncio stream and decoding its payload.
"""
import asyncio
import json
import logging
import struct

logger = logging.getLogger(__name__)

# Fixed magic literal at the start of every frame.
MAGIC: bytes = b"i3-ipc"

# Length and type follow the magic as little-endian unsigned 32-bit ints.
_LENGTH_AND_TYPE = struct.Struct("<II")

# Total header size: magic(6) + length(4) + type(4).
HEADER_SIZE: int = len(MAGIC) + _LENGTH_AND_TYPE.size


class ProtocolError(Exception):
    """
    Exception raised for framing errors.

    Raised when a header is too short or the stream ends in the middle of
    a frame.
    """

    pass


class PayloadError(ValueError):
    """
    Exception raised when a payload cannot be decoded or lacks the fields
    its message type requires.
    """

    pass


def encode_message(message_type: int, payload: str = "") -> bytes:
    """
    Encode a message type and payload string as one frame.

    Args:
        message_type: Numeric message type code.
        payload: Text payload, encoded as UTF-8.

    Returns:
        Header followed by the payload bytes.
    """
    body = payload.encode("utf-8")
    return MAGIC + _LENGTH_AND_TYPE.pack(len(body), message_type) + body


def decode_header(header: bytes) -> tuple[int, int]:
    """
    Extract payload length and message type from a frame header.

    The magic bytes are not checked here; see has_valid_magic().

    Args:
        header: At least HEADER_SIZE bytes starting at a frame boundary.

    Returns:
        Tuple of (payload_length, message_type).

    Raises:
        ProtocolError: If fewer than HEADER_SIZE bytes are given.
    """
    if len(header) < HEADER_SIZE:
        raise ProtocolError(f"Header too short: {len(header)} of {HEADER_SIZE} bytes")
    length, message_type = _LENGTH_AND_TYPE.unpack_from(header, len(MAGIC))
    return length, message_type


def has_valid_magic(header: bytes) -> bool:
    """Return True if the header starts with the protocol magic."""
    return header[: len(MAGIC)] == MAGIC


async def read_message(reader: asyncio.StreamReader) -> tuple[int, bytes] | None:
    """
    Read exactly one frame from an async stream.

    The header and payload are read strictly one after the other; never
    call this concurrently on the same reader.

    Args:
        reader: asyncio StreamReader to read from.

    Returns:
        Tuple of (message_type, payload_bytes), or None if the stream
        ended cleanly before a new frame started.

    Raises:
        ProtocolError: If the stream ends partway through a frame.
    """
    try:
        header = await reader.readexactly(HEADER_SIZE)
    except asyncio.IncompleteReadError as e:
        if not e.partial:
            return None
        raise ProtocolError(
            f"Connection closed after {len(e.partial)} header bytes"
        ) from e
    length, message_type = decode_header(header)
    if not has_valid_magic(header):
        logger.warning("Unexpected frame magic %r, reading on", header[: len(MAGIC)])
    try:
        payload = await reader.readexactly(length)
    except asyncio.IncompleteReadError as e:
        raise ProtocolError(
            f"Connection closed after {len(e.partial)} of {length} payload bytes"
        ) from e
    return message_type, payload


def decode_payload(payload: bytes) -> object:
    """
    Decode a frame payload as UTF-8 JSON.

    Args:
        payload: Raw payload bytes.

    Returns:
        The decoded JSON value (dict, list or scalar).

    Raises:
        PayloadError: If the bytes are not valid UTF-8 or not valid JSON.
    """
    try:
        return json.loads(payload.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise PayloadError(f"Undecodable payload: {e}") from e


async def send_message(
    writer: asyncio.StreamWriter, message_type: int, payload: str = ""
) -> None:
    """
    Encode and send one frame, waiting for the write buffer to drain.

    Args:
        writer: asyncio StreamWriter for the socket connection.
        message_type: Numeric message type code.
        payload: Text payload.
    """
    writer.write(encode_message(message_type, payload))
    await writer.drain()
