"""Camera firmware data structures: keys, input state, files, PTP, text, EEPROM."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum


class FujiKey(IntEnum):
    """Key codes reported in the firmware input map."""

    OK = 0x1
    UP = 0x2
    DOWN = 0x3
    LEFT = 0x4
    RIGHT = 0x5
    POWER = 0x6
    SHUTTER1 = 0x7
    SHUTTER2 = 0x8
    DISPBACK = 0x9
    PLAY = 0xB
    # These may differ between models.
    Q = 0x32
    REC = 0x34
    EFN = 0x36
    SCROLL_DOWN = 0x3A
    FN = 0x2F


class FujiFileError(IntEnum):
    """Error codes passed to file operation handlers."""

    OK = 0
    TOO_MANY_HANDLES = 8
    EOF = 14


class TaskMode(IntEnum):
    """How a timer task started by the firmware repeats."""

    TIMEOUT = 0
    REPEAT = 1


class SyslogMsgType(IntEnum):
    """Message types found in the firmware syslog."""

    SIG = 0xF
    STR = 0x72


class SqliteResult(IntEnum):
    """Result codes of the embedded SQLite library."""

    OK = 0
    ERROR = 1
    INTERNAL = 2
    PERM = 3
    ABORT = 4
    BUSY = 5
    LOCKED = 6
    NOMEM = 7
    READONLY = 8
    INTERRUPT = 9
    IOERR = 10
    CORRUPT = 11
    NOTFOUND = 12
    FULL = 13
    CANTOPEN = 14
    PROTOCOL = 15
    EMPTY = 16
    SCHEMA = 17
    TOOBIG = 18
    CONSTRAINT = 19
    MISMATCH = 20
    MISUSE = 21
    NOLFS = 22
    AUTH = 23
    FORMAT = 24
    RANGE = 25
    NOTADB = 26
    ROW = 100
    DONE = 101


# Screen text colours
TEXT_BLACK = 7
TEXT_BLUE = 1
TEXT_WHITE = 0

# File seek origins and open modes
FILE_SEEK_SET = 0
FILE_SEEK_CURRENT = 1
FILE_READ = 0
FILE_WRITE = 1

# EEPROM offsets
EEP_MODEL_NUMBER = 0x11B
EEP_FIRM_NUM = 0x1C0
EEP_BOOTLOADER_PID = 0x13A
EEP_PTP_PID = 0x13E
EEP_MODEL_NAME = 0x15C
EEP_VENDOR = 0x16F
_VENDOR_LENGTH = 8

TEXT_SEPARATOR = 0xE1
_TEXT_LENGTH = 66

_INPUT_MAP = struct.Struct("<IIIiiIII")
_FILE_STATS = struct.Struct("<48sIII72s72s")
_PTP_RESPONSE = struct.Struct("<7I")
_TEXT_ENTRY = struct.Struct(f"<BBBB{_TEXT_LENGTH}s")

INPUT_MAP_SIZE = _INPUT_MAP.size
FILE_STATS_SIZE = _FILE_STATS.size
PTP_RESPONSE_SIZE = _PTP_RESPONSE.size
TEXT_ENTRY_SIZE = _TEXT_ENTRY.size


def _unpack(layout: struct.Struct, data: bytes, what: str) -> tuple:
    if len(data) < layout.size:
        raise ValueError(f"{what} needs {layout.size} bytes, got {len(data)}")
    return layout.unpack_from(data, 0)


def _pack(layout: struct.Struct, what: str, *values: object) -> bytes:
    try:
        return layout.pack(*values)
    except struct.error as exc:
        raise ValueError(f"cannot encode {what}: {exc}") from None


def _c_string(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("latin-1")


@dataclass
class InputMap:
    """The firmware's record of the most recent key event."""

    key_code: int = 0
    x: int = 0
    key_status: int = 0
    gyro: int = 0
    accel: int = 0
    a: int = 0
    b: int = 0
    c: int = 0

    def to_bytes(self) -> bytes:
        """Encode the map in its in-memory layout."""
        return _pack(
            _INPUT_MAP,
            "input map",
            self.key_code,
            self.x,
            self.key_status,
            self.gyro,
            self.accel,
            self.a,
            self.b,
            self.c,
        )


def parse_input_map(data: bytes) -> InputMap:
    """Decode an input map from its in-memory layout."""
    return InputMap(*_unpack(_INPUT_MAP, data, "input map"))


@dataclass(frozen=True)
class FileStats:
    """File information returned by the firmware's stat call."""

    filename: str
    a: int
    size: int
    b: int
    created: str
    modified: str


def parse_file_stats(data: bytes) -> FileStats:
    """Decode a file stats record."""
    filename, a, size, b, created, modified = _unpack(_FILE_STATS, data, "file stats")
    return FileStats(
        filename=_c_string(filename),
        a=a,
        size=size,
        b=b,
        created=_c_string(created),
        modified=_c_string(modified),
    )


@dataclass(frozen=True)
class PtpResponse:
    """A PTP response block as built by the firmware."""

    code: int
    transid: int
    sessionid: int
    nparam: int
    param1: int
    param2: int
    param3: int

    @property
    def params(self) -> tuple[int, ...]:
        """The parameters actually carried, as counted by ``nparam``."""
        return (self.param1, self.param2, self.param3)[: min(self.nparam, 3)]


def parse_ptp_response(data: bytes) -> PtpResponse:
    """Decode a PTP response block."""
    return PtpResponse(*_unpack(_PTP_RESPONSE, data, "PTP response"))


@dataclass
class TextEntry:
    """One line of on-screen text in the rasterizer's text layer."""

    x: int
    y: int
    bg: int
    fg: int
    text: str

    def to_bytes(self) -> bytes:
        """Encode the entry; each character is followed by a separator byte."""
        try:
            raw = self.text.encode("ascii")
        except UnicodeEncodeError:
            raise ValueError(f"text must be ASCII: {self.text!r}") from None
        encoded = b"".join(bytes((ch, TEXT_SEPARATOR)) for ch in raw)
        if len(encoded) > _TEXT_LENGTH:
            raise ValueError(
                f"text too long: at most {_TEXT_LENGTH // 2} characters, got {len(raw)}"
            )
        return _pack(_TEXT_ENTRY, "text entry", self.x, self.y, self.bg, self.fg, encoded)


def _eeprom_string(eeprom: bytes, offset: int, limit: int, what: str) -> str:
    if len(eeprom) < offset + limit:
        raise ValueError(
            f"EEPROM image too short for {what}: need {offset + limit} bytes, "
            f"got {len(eeprom)}"
        )
    return _c_string(bytes(eeprom[offset : offset + limit]))


def eeprom_model_name(eeprom: bytes) -> str:
    """Return the model name stored in an EEPROM image, such as ``"X-A2"``."""
    return _eeprom_string(eeprom, EEP_MODEL_NAME, EEP_VENDOR - EEP_MODEL_NAME, "model name")


def eeprom_vendor(eeprom: bytes) -> str:
    """Return the vendor string stored in an EEPROM image."""
    return _eeprom_string(eeprom, EEP_VENDOR, _VENDOR_LENGTH, "vendor")