"""Runtime symbol tables: name-to-address lookup for loaded code."""

from __future__ import annotations

import struct
from functools import partial
from itertools import chain
from typing import Callable, Optional

_ENTRY_HEADER = struct.Struct("<IHBB")
_ADDRESS = struct.Struct("<I")

ENTRY_HEADER_SIZE = _ENTRY_HEADER.size
MAX_NAME_LENGTH = 0xFFFF


def encode_entry(name: str, address: int) -> bytes:
    """Encode one table entry: address, name length, type, spare byte, then the name."""
    raw = name.encode("utf-8")
    if not raw:
        raise ValueError("symbol name must not be empty")
    if len(raw) > MAX_NAME_LENGTH:
        raise ValueError(f"symbol name too long: {len(raw)} bytes")
    if not 0 < address <= 0xFFFFFFFF:
        # A zero address marks the end of a table, so it cannot be stored.
        raise ValueError(f"address must be a non-zero 32-bit value: {address:#x}")
    return _ENTRY_HEADER.pack(address, len(raw), 0, 0) + raw


def decode_entries(data: bytes) -> list[tuple[str, int]]:
    """Decode a packed table into ``(name, address)`` pairs.

    Decoding stops at an entry whose address is zero or at the end of the data.
    """
    view = bytes(data)
    entries: list[tuple[str, int]] = []
    offset = 0
    while offset < len(view):
        remaining = len(view) - offset
        if remaining < _ADDRESS.size:
            if any(view[offset:]):
                raise ValueError(f"truncated symbol entry at offset {offset}")
            break
        (address,) = _ADDRESS.unpack_from(view, offset)
        if address == 0:
            break
        if remaining < ENTRY_HEADER_SIZE:
            raise ValueError(f"truncated symbol entry at offset {offset}")
        address, length, _type, _spare = _ENTRY_HEADER.unpack_from(view, offset)
        start = offset + ENTRY_HEADER_SIZE
        end = start + length
        if end > len(view):
            raise ValueError(f"truncated symbol name at offset {start}")
        entries.append((view[start:end].decode("utf-8"), address))
        offset = end
    return entries


class SymbolTable:
    """A built-in symbol table followed by symbols added at run time.

    Lookups search the built-in table first, then added symbols in the order
    they were added. An entry matches any name that begins with it.
    """

    def __init__(self) -> None:
        self._builtin: list[tuple[str, int]] = []
        self._added: list[tuple[str, int]] = []

    def __len__(self) -> int:
        return len(self._builtin) + len(self._added)

    def load_table(self, data: bytes) -> None:
        """Replace the built-in table with the packed entries in ``data``."""
        self._builtin = decode_entries(data)

    def add(self, name: str, address: int) -> None:
        """Add a symbol at run time."""
        encode_entry(name, address)
        self._added.append((name, address))

    def lookup(self, name: str) -> Optional[int]:
        """Return the address of the first matching symbol, or None."""
        for entry_name, address in chain(self._builtin, self._added):
            if name.startswith(entry_name):
                return address
        return None


def _runtime_support(*_args: object, result: int, message: Optional[str] = None) -> int:
    """Announce ``message`` if one is given and report ``result`` to the caller."""
    if message is not None:
        print(message)
    return result


_ML_SYMBOLS: dict[str, Callable[..., int]] = {
    "menu_add": partial(_runtime_support, result=0, message="menu_add"),
    "task_create": partial(_runtime_support, result=-1),
    "__mem_malloc": partial(_runtime_support, result=-1),
}


def ml_symbol(name: str) -> Optional[Callable[..., int]]:
    """Return the built-in runtime-support function called ``name``, or None."""
    return _ML_SYMBOLS.get(name)