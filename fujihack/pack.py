"""Build tool: append symbol tables to OS images and pack app metadata."""

from __future__ import annotations

import json
import shlex
import struct
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Union

from fujihack.symbols import encode_entry

DEFAULT_READELF = "arm-none-eabi-readelf"
DEFAULT_INPUT = "os.elf"
DEFAULT_OUTPUT = "os.bin"

HELP = (
    "Frontier build system utility\n"
    "-i <file>    Specify input file\n"
    "-o <file>   Specify output file\n"
    "-s Append symbols from single relocatable file\n"
    "-a <file> Pack JSON data into app\n"
)

_METADATA = struct.Struct("<II20s20s40s")
_NAME_LIMIT = 20
_AUTHOR_LIMIT = 20
_URL_LIMIT = 40


@dataclass(frozen=True)
class AppMetadata:
    """Header placed in front of an app."""

    name: str
    author: str
    url: str
    api_version: int = 0
    header_size: int = 0

    def to_bytes(self) -> bytes:
        """Encode the header; text fields are zero padded."""
        return _METADATA.pack(
            self.api_version,
            self.header_size,
            _fixed(self.name, _NAME_LIMIT, "name"),
            _fixed(self.author, _AUTHOR_LIMIT, "author"),
            _fixed(self.url, _URL_LIMIT, "url"),
        )


def _fixed(text: str, limit: int, what: str) -> bytes:
    raw = text.encode("utf-8")
    # One byte is kept for the terminator.
    if len(raw) >= limit:
        raise ValueError(f"{what} too long: at most {limit - 1} bytes, got {len(raw)}")
    return raw


def parse_readelf_line(line: str) -> Optional[tuple[str, int]]:
    """Return ``(name, address)`` for a function row of ``readelf -s``, else None."""
    fields = line.split()
    if len(fields) < 7 or not fields[0].endswith(":"):
        return None
    try:
        int(fields[0][:-1])
        address = int(fields[1], 16)
    except ValueError:
        return None
    if fields[3] != "FUNC":
        return None
    name = fields[7] if len(fields) > 7 else ""
    if not name:
        return None
    return name, address


def add_syms(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    readelf: Union[str, Sequence[str]] = DEFAULT_READELF,
) -> int:
    """Append the function symbols of ``input_path`` to ``output_path``.

    The output file must already exist. Returns the number of entries written.
    """
    command = shlex.split(readelf) if isinstance(readelf, str) else list(readelf)
    with open(output_path, "r+b") as out:
        result = subprocess.run(
            [*command, "-s", str(input_path)],
            stdout=subprocess.PIPE,
            text=True,
            check=False,
        )
        entries = [
            encode_entry(name, address)
            for name, address in filter(
                None, map(parse_readelf_line, result.stdout.splitlines())
            )
        ]
        out.seek(0, 2)
        out.write(b"".join(entries))
    return len(entries)


def gen_app_meta(content: str) -> AppMetadata:
    """Build app metadata from a JSON description with name, url and author."""
    data = json.loads(content)
    if not isinstance(data, dict):
        raise ValueError("app description must be a JSON object")
    try:
        name, url, author = (str(data[key]) for key in ("name", "url", "author"))
    except KeyError as exc:
        raise ValueError(f"app description lacks {exc.args[0]!r}") from None
    metadata = AppMetadata(name=name, author=author, url=url)
    metadata.to_bytes()
    return metadata


def _help() -> int:
    print(HELP, end="")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the build tool with command-line arguments ``argv``."""
    args = iter(sys.argv[1:] if argv is None else argv)
    input_path = DEFAULT_INPUT
    output_path = DEFAULT_OUTPUT
    for arg in args:
        if not arg.startswith("-") or len(arg) < 2:
            continue
        option = arg[1]
        if option in "ioa":
            value = next(args, None)
            if value is None:
                print(f"Option -{option} needs a file", file=sys.stderr)
                return 1
            if option == "i":
                input_path = value
            elif option == "o":
                output_path = value
            else:
                try:
                    metadata = gen_app_meta(Path(value).read_text())
                except (OSError, ValueError) as exc:
                    print(f"Error reading app description: {exc}", file=sys.stderr)
                    return 1
                print(f"Name: {metadata.name}")
        elif option == "s":
            try:
                add_syms(input_path, output_path)
            except OSError:
                print("Error opening file")
                return 1
            return 0
        elif option == "h":
            return _help()

    print("No valid args")
    _help()
    return 0


if __name__ == "__main__":
    sys.exit(main())