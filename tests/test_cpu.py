import pytest

from fujihack.cpu import decode_cpu_id


def test_decode_arm926_id():
    info = decode_cpu_id(0x41069265)
    assert info.implementer == ord("A")
    assert info.implementer_name == "ARM Limited"
    assert info.architecture == 0x6
    assert info.architecture_name == "ARMv5T"
    assert info.part_number == 0x926
    assert info.revision == 0x5


def test_describe_format():
    assert decode_cpu_id(0x41069265).describe() == (
        "Impl: ARM Limited\nArch: ARMv5T\nPart number: 926\nRevision: 5"
    )


def test_bit_31_is_ignored_for_implementer():
    assert decode_cpu_id(0xC1000000).implementer == decode_cpu_id(0x41000000).implementer


@pytest.mark.parametrize(
    "code,name",
    [
        ("D", "Digital Equipment Corporation"),
        ("M", "Motorola - Freescale Semiconductor Inc."),
        ("V", "Marvell Semiconductor Inc."),
        ("i", "Intel Corporation"),
    ],
)
def test_known_implementers(code, name):
    assert decode_cpu_id(ord(code) << 24).implementer_name == name


def test_unknown_implementer_is_reserved():
    assert decode_cpu_id(0x00000000).implementer_name == "Reserved by ARM Limited"


def test_architecture_table_ends_with_armv7_then_custom():
    assert decode_cpu_id(0xE << 16).architecture_name == "ARMv7"
    assert decode_cpu_id(0xF << 16).architecture_name == "Custom/Reserved"


@pytest.mark.parametrize("value", [-1, 1 << 32])
def test_out_of_range_value(value):
    with pytest.raises(ValueError):
        decode_cpu_id(value)