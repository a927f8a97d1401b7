"""Decoding of the ARM Main ID register (CP15 c0)."""

from __future__ import annotations

from dataclasses import dataclass

_IMPLEMENTERS = {
    "A": "ARM Limited",
    "D": "Digital Equipment Corporation",
    "M": "Motorola - Freescale Semiconductor Inc.",
    "V": "Marvell Semiconductor Inc.",
    "i": "Intel Corporation",
}
_RESERVED_IMPLEMENTER = "Reserved by ARM Limited"

_ARCHITECTURES = (
    "ARMv1",
    "ARMv2",
    "ARMv3",
    "ARMv4",
    "ARMv4T",
    "ARMv5",
    "ARMv5T",
    "ARMv5TE",
    "ARMv5TEJ",
    "ARMv6",
    "ARMv6K",
    "ARMv6T2",
    "ARMv6Z",
    "ARMv6KZ",
    "ARMv7",
)
_CUSTOM_ARCHITECTURE = "Custom/Reserved"


def _bits(value: int, high: int, low: int) -> int:
    return (value & ((1 << (high + 1)) - 1)) >> low


@dataclass(frozen=True)
class CpuInfo:
    """Fields of a decoded Main ID register."""

    implementer: int
    architecture: int
    part_number: int
    revision: int

    @property
    def implementer_name(self) -> str:
        return _IMPLEMENTERS.get(chr(self.implementer), _RESERVED_IMPLEMENTER)

    @property
    def architecture_name(self) -> str:
        if self.architecture < len(_ARCHITECTURES):
            return _ARCHITECTURES[self.architecture]
        return _CUSTOM_ARCHITECTURE

    def describe(self) -> str:
        """Return a human-readable, multi-line summary."""
        return "\n".join(
            (
                f"Impl: {self.implementer_name}",
                f"Arch: {self.architecture_name}",
                f"Part number: {self.part_number:X}",
                f"Revision: {self.revision:X}",
            )
        )


def decode_cpu_id(value: int) -> CpuInfo:
    """Split a 32-bit Main ID register value into its fields."""
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"not a 32-bit register value: {value:#x}")
    return CpuInfo(
        implementer=_bits(value, 30, 24),
        architecture=_bits(value, 19, 16),
        part_number=_bits(value, 15, 4),
        revision=_bits(value, 3, 0),
    )