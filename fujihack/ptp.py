"""Host-side helpers for talking to a camera running the PTP hijack."""

from __future__ import annotations

import struct
from enum import IntEnum

FUJI_CREATE_FILE = 0x900C
FUJI_UNKNOWN1 = 0x900D
FUJI_WRITE_FILE = 0x901D
FUJI_HIJACK = 0x9805
"""Vendor opcode taken over by the hijack; its two parameters are an op and a value."""

OBJECT_FORMAT_SCRIPT = 0x3002
OBJECT_INFO_SIZE = 256
DEFAULT_UPLOAD_NAME = "AUTO_ACT.SCR"

_ZERO_BYTE_PARAM = 255
_INFO_PREFIX = struct.Struct("<III")
_INFO_RESERVED = 40
_NAME_OFFSET = _INFO_PREFIX.size + _INFO_RESERVED


class HijackOp(IntEnum):
    """Operations understood by the hijacked PTP opcode."""

    ZERO = 4
    WRITE = 5
    EXEC = 6
    RESET = 7
    SETADDR = 8
    GET = 9


def hijack_commands(data: bytes) -> list[tuple[HijackOp, int]]:
    """Return the ``(op, value)`` commands that upload ``data`` and run it.

    Each byte is sent as its own command: zero bytes use the ZERO op, others
    WRITE; a final EXEC starts the uploaded code.
    """
    commands = [
        (HijackOp.ZERO, _ZERO_BYTE_PARAM) if byte == 0 else (HijackOp.WRITE, byte)
        for byte in bytes(data)
    ]
    commands.append((HijackOp.EXEC, 0))
    return commands


def build_object_info(
    storage_id: int, size: int, filename: str = DEFAULT_UPLOAD_NAME
) -> bytes:
    """Pack the ObjectInfo block sent before uploading a file of ``size`` bytes.

    The file name is written as a PTP string: a length byte counting the
    terminator, then UTF-16LE characters and a zero terminator.
    """
    if not 0 <= storage_id <= 0xFFFFFFFF:
        raise ValueError(f"storage id is not a 32-bit value: {storage_id}")
    if not 0 <= size <= 0xFFFFFFFF:
        raise ValueError(f"file size is not a 32-bit value: {size}")
    try:
        filename.encode("ascii")
    except UnicodeEncodeError:
        raise ValueError(f"file name must be ASCII: {filename!r}") from None
    name = filename.encode("utf-16-le") + b"\0\0"
    if _NAME_OFFSET + 1 + len(name) > OBJECT_INFO_SIZE:
        raise ValueError(f"file name too long: {filename!r}")

    info = bytearray(OBJECT_INFO_SIZE)
    _INFO_PREFIX.pack_into(info, 0, storage_id, OBJECT_FORMAT_SCRIPT, size)
    info[_NAME_OFFSET] = len(filename) + 1
    info[_NAME_OFFSET + 1 : _NAME_OFFSET + 1 + len(name)] = name
    return bytes(info)