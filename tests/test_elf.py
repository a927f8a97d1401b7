import struct

import pytest

from fujihack.elf import (
    ELF_32_BIT,
    ELF_LITTLE_ENDIAN,
    ELF_MACHINE_ARM,
    ELF_MAGIC,
    ELF_RELOCATABLE,
    R_ARM_ABS32,
    R_ARM_CALL,
    SHN_UNDEF,
    SHT_REL,
    ElfRel,
    ElfSymbol,
    parse_header,
    parse_relocations,
    parse_section_headers,
    parse_symbols,
)

_SYMBOLS = [(1, 0x10, 4, 0x12, 0, 1), (6, 0, 0, 0x10, 0, SHN_UNDEF)]
_RELS = [(0x8, (1 << 8) | R_ARM_CALL), (0xC, (0 << 8) | R_ARM_ABS32)]


def _header(shoff, shnum):
    return struct.pack(
        "<IBBBBB7sHHIIIIIHHHHHH",
        ELF_MAGIC, ELF_32_BIT, ELF_LITTLE_ENDIAN, 1, 0, 0, bytes(7),
        ELF_RELOCATABLE, ELF_MACHINE_ARM, 1, 0, 0, shoff, 0,
        52, 0, 0, 40, shnum, 0,
    )


def _section(type_=0, offset=0, size=0, link=0, info=0, entsize=0):
    return struct.pack("<10I", 0, type_, 0, 0, offset, size, link, info, 0, entsize)


def _image():
    symbols = b"".join(struct.pack("<IIIBBH", *s) for s in _SYMBOLS)
    rels = b"".join(struct.pack("<II", *r) for r in _RELS)
    body_offset = 52
    rel_offset = body_offset + len(symbols)
    shoff = rel_offset + len(rels)
    sections = (
        _section()
        + _section(type_=2, offset=body_offset, size=len(symbols), entsize=16)
        + _section(type_=SHT_REL, offset=rel_offset, size=len(rels), link=1, entsize=8)
    )
    return _header(shoff, 3) + symbols + rels + sections


def test_parse_header_fields():
    header = parse_header(_image())
    assert header.magic == ELF_MAGIC
    assert header.bits == ELF_32_BIT
    assert header.endian == ELF_LITTLE_ENDIAN
    assert header.machine == ELF_MACHINE_ARM
    assert header.type == ELF_RELOCATABLE
    assert header.shnum == 3
    assert header.shentsize == 40


def test_magic_matches_elf_signature_bytes():
    data = _image()
    assert data[:4] == b"\x7fELF"
    assert parse_header(data).magic == ELF_MAGIC


def test_parse_header_truncated():
    with pytest.raises(ValueError):
        parse_header(_image()[:51])


def test_parse_section_headers():
    data = _image()
    sections = parse_section_headers(data, parse_header(data))
    assert len(sections) == 3
    assert sections[2].type == SHT_REL
    assert sections[2].link == 1
    assert sections[1].offset == 52
    assert sections[1].entsize == 16


def test_parse_section_headers_out_of_range():
    data = _image()
    header = parse_header(data)
    with pytest.raises(ValueError):
        parse_section_headers(data[:-10], header)


def test_parse_symbols_round_trip():
    data = _image()
    sections = parse_section_headers(data, parse_header(data))
    assert parse_symbols(data, sections[1]) == [ElfSymbol(*s) for s in _SYMBOLS]


def test_parse_relocations_round_trip():
    data = _image()
    sections = parse_section_headers(data, parse_header(data))
    rels = parse_relocations(data, sections[2])
    assert rels == [ElfRel(*r) for r in _RELS]
    assert rels[0].symbol_index == 1
    assert rels[0].type == R_ARM_CALL
    assert rels[1].symbol_index == 0
    assert rels[1].type == R_ARM_ABS32


def test_zero_entry_size_is_rejected():
    data = _image()
    section = parse_section_headers(data, parse_header(data))[0]
    with pytest.raises(ValueError):
        parse_symbols(data, section)
    with pytest.raises(ValueError):
        parse_relocations(data, section)