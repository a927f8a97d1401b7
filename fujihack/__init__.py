"""Host-side tools for Fujifilm firmware research and the Frontier app runtime."""

__version__ = "0.1.0"

__all__ = [
    "cpu",
    "elf",
    "font",
    "framebuffer",
    "fuji",
    "models",
    "pack",
    "ptp",
    "symbols",
    "ui",
]