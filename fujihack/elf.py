"""Structures and parsers for 32-bit ARM ELF files."""

from __future__ import annotations

import struct
from dataclasses import dataclass

ELF_32_BIT = 1
ELF_64_BIT = 2
ELF_LITTLE_ENDIAN = 1
ELF_BIG_ENDIAN = 2

ELF_MACHINE_ARM = 0x28

ELF_RELOCATABLE = 1
ELF_EXECUTABLE = 2
ELF_SHARED = 3
ELF_CORE = 4

SHT_PROGBITS = 1
SHT_NOBITS = 8
SHT_REL = 9

PT_NULL = 0
PT_LOAD = 1
PT_DYNAMIC = 2
PT_INTERP = 3

ELF_MAGIC = 0x464C457F

SHN_UNDEF = 0
SHN_LOPROC = 0xFF00
SHN_HIPROC = 0xFF1F
SHN_LOOS = 0xFF20
SHN_HIOS = 0xFF3F
SHN_ABS = 0xFFF1
SHN_COMMON = 0xFFF2

R_ARM_NONE = 0
R_ARM_PC24 = 1
R_ARM_ABS32 = 2
R_ARM_REL32 = 3
R_ARM_THM_CALL = 10
R_ARM_CALL = 28
R_ARM_JUMP24 = 29
R_ARM_THM_JUMP24 = 30
R_ARM_TARGET1 = 38
R_ARM_V4BX = 40
R_ARM_TARGET2 = 41
R_ARM_PREL31 = 42
R_ARM_MOVW_ABS_NC = 43
R_ARM_MOVT_ABS = 44
R_ARM_THM_MOVW_ABS_NC = 47
R_ARM_THM_MOVT_ABS = 48

_HEADER = struct.Struct("<IBBBBB7sHHIIIIIHHHHHH")
_SECTION = struct.Struct("<10I")
_SYMBOL = struct.Struct("<IIIBBH")
_REL = struct.Struct("<II")

HEADER_SIZE = _HEADER.size
SECTION_HEADER_SIZE = _SECTION.size
SYMBOL_SIZE = _SYMBOL.size
REL_SIZE = _REL.size


@dataclass(frozen=True)
class ElfHeader:
    """The ELF file header."""

    magic: int
    bits: int
    endian: int
    version: int
    abi: int
    abi2: int
    padding: bytes
    type: int
    machine: int
    version2: int
    entry: int
    phoff: int
    shoff: int
    flags: int
    ehsize: int
    phentsize: int
    phnum: int
    shentsize: int
    shnum: int
    shstrndx: int


@dataclass(frozen=True)
class SectionHeader:
    """One entry of the section header table."""

    name: int
    type: int
    flags: int
    addr: int
    offset: int
    size: int
    link: int
    info: int
    addralign: int
    entsize: int


@dataclass(frozen=True)
class ElfSymbol:
    """One entry of a symbol table section."""

    name: int
    value: int
    size: int
    info: int
    other: int
    shndx: int


@dataclass(frozen=True)
class ElfRel:
    """One entry of a ``SHT_REL`` relocation section."""

    offset: int
    info: int

    @property
    def symbol_index(self) -> int:
        return self.info >> 8

    @property
    def type(self) -> int:
        return self.info & 0xFF


def _unpack(layout: struct.Struct, data: bytes, offset: int) -> tuple:
    if offset < 0 or offset + layout.size > len(data):
        raise ValueError(
            f"truncated ELF data: need {layout.size} bytes at offset {offset}, "
            f"have {len(data)} in total"
        )
    return layout.unpack_from(data, offset)


def _entry_count(section: SectionHeader) -> int:
    if section.entsize == 0:
        raise ValueError("section has zero entry size")
    return section.size // section.entsize


def parse_header(data: bytes) -> ElfHeader:
    """Parse the ELF header at the start of ``data``."""
    return ElfHeader(*_unpack(_HEADER, data, 0))


def parse_section_headers(data: bytes, header: ElfHeader) -> list[SectionHeader]:
    """Parse every section header described by ``header``."""
    return [
        SectionHeader(*_unpack(_SECTION, data, header.shoff + index * header.shentsize))
        for index in range(header.shnum)
    ]


def parse_symbols(data: bytes, section: SectionHeader) -> list[ElfSymbol]:
    """Parse the symbols held in a symbol table section."""
    return [
        ElfSymbol(*_unpack(_SYMBOL, data, section.offset + index * SYMBOL_SIZE))
        for index in range(_entry_count(section))
    ]


def parse_relocations(data: bytes, section: SectionHeader) -> list[ElfRel]:
    """Parse the entries of a ``SHT_REL`` relocation section."""
    return [
        ElfRel(*_unpack(_REL, data, section.offset + index * REL_SIZE))
        for index in range(_entry_count(section))
    ]