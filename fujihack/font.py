"""Built-in 5x7 monochrome bitmap font."""

from __future__ import annotations

GLYPH_WIDTH = 5
GLYPH_HEIGHT = 7

DESCENDERS = frozenset("pgj")
"""Characters drawn shifted down to leave room for their tails."""

_BLANK = "|".join(["     "] * GLYPH_HEIGHT)

# Each glyph is its seven rows joined with "|". Where a character appears
# twice, the first definition is the one that is used.
_TABLE = (
    (" ", _BLANK),
    ("A", " ### |#   #|#   #|#   #|#####|#   #|#   #"),
    ("B", "#### |#   #|#   #|#### |#   #|#   #|#### "),
    ("C", " ####|#    |#    |#    |#    |#    | ####"),
    ("D", "#### |#   #|#   #|#   #|#   #|#   #|#### "),
    ("E", "#####|#    |#    |#####|#    |#    |#####"),
    ("F", "#####|#    |#    |#####|#    |#    |#    "),
    ("G", " ####|#    |#    |#  ##|#   #|#   #| ####"),
    ("H", "#   #|#   #|#   #|#####|#   #|#   #|#   #"),
    ("I", "#    |#    |#    |#    |#    |#    |#    "),
    ("J", "    #|    #|    #|    #|    #|    #|#### "),
    ("K", "#   #|#  # |# #  |##   |# #  |#  # |#   #"),
    ("L", "#    |#    |#    |#    |#    |#    |#####"),
    ("M", "#   #|## ##|# # #|#   #|#   #|#   #|#   #"),
    ("N", "#   #|##  #|# # #|#  ##|#   #|#   #|#   #"),
    ("O", " ### |#   #|#   #|#   #|#   #|#   #| ### "),
    ("P", "#### |#   #|#   #|#### |#    |#    |#    "),
    ("Q", " ### |#   #|#   #|#   #|#   #|#  ##| ####"),
    ("R", "#### |#   #|#   #|#   #|#### |#   #|#   #"),
    ("S", " ####|#    |#    | ### |    #|    #|#### "),
    ("T", "#####|  #  |  #  |  #  |  #  |  #  |  #  "),
    ("U", "#   #|#   #|#   #|#   #|#   #|#   #| ### "),
    ("V", "#   #|#   #|#   #|#   #|#   #| # # |  #  "),
    ("W", "#   #|#   #|#   #|#   #|# # #|## ##|#   #"),
    ("X", "#   #|#   #| # # |  #  | # # |#   #|#   #"),
    ("Y", "#   #|#   #|#   #| ### |  #  |  #  |  #  "),
    ("Z", "#####|    #|   # |  #  | #   |#    |#####"),
    ("a", "     |     | ### |    #| ####|#   #| ####"),
    ("b", "#    |#    |#### |#   #|#   #|#   #|#### "),
    ("c", "     |     | ### |#   #|#    |#   #| ### "),
    ("d", "    #|    #| ####|#   #|#   #|#   #| ####"),
    ("e", "     |     | ### |#   #|#####|#    | ####"),
    ("f", "  ## | #  #| #   |###  | #   | #   | #   "),
    ("g", "     | ####|#   #|#   #| ####|    #|#### "),
    ("h", "#    |#    |#### |#   #|#   #|#   #|#   #"),
    ("i", "#    |     |#    |#    |#    |#    |#    "),
    ("j", "    #|     |   ##|    #|    #|#   #| ### "),
    ("k", "#    |#    |#   #|#  # |###  |#  # |#   #"),
    ("l", "#    |#    |#    |#    |#    |#    |##   "),
    ("m", "     |     |#### |# # #|# # #|# # #|# # #"),
    ("n", "     |     |#### |#   #|#   #|#   #|#   #"),
    ("o", "     |     | ### |#   #|#   #|#   #| ### "),
    ("p", "     | ### | #  #| #  #| ### | #   | #   "),
    ("q", "     |     |  ###| #  #|  ###|    #|    #"),
    ("r", "     |     |# ###|##   |#    |#    |#    "),
    ("s", "     |     | ####|#    | ### |    #|#### "),
    ("t", " #   | #   |###  | #   | #   | #   |  ## "),
    ("u", "     |     |#   #|#   #|#   #|#   #| ### "),
    ("v", "     |     |#   #|#   #|#   #| # # |  #  "),
    ("w", "     |     |#   #|#   #|# # #|# # #| # # "),
    ("x", "     |     |#   #| # # |  #  | # # |#   #"),
    ("y", "     |     |#   #|#   #| ####|    #|#### "),
    ("z", "     |     |#####|   # |  #  | #   |#####"),
    ("0", " ### |#   #|#  ##|# # #|##  #|#   #| ### "),
    ("1", "##   | #   | #   | #   | #   | #   | #   "),
    ("2", " ### |#   #|    #|  ## | #   |#    |#####"),
    ("3", "#### |    #|    #| ### |    #|    #|#### "),
    ("4", "#   #|#   #|#   #|#####|    #|    #|    #"),
    ("5", "#####|#    |#    |#### |    #|    #|#### "),
    ("6", " ####|#    |#    | ### |#   #|#   #| ### "),
    ("7", "#####|    #|    #|  ## | #   | #   | #   "),
    ("8", " ### |#   #|#   #| ### |#   #|#   #| ### "),
    ("9", " ### |#   #|#   #| ####|    #|    #| ### "),
    ("!", "#    |#    |#    |#    |#    |     |#    "),
    (".", "     |     |     |     |     |     |#    "),
    (",", "     |     |     |     |     |  #  | #   "),
    ("?", " ##  |#  # |   # |  #  | #   |     | #   "),
    ("\x01", "     | # # | # # |     |  #  |#   #| ### "),
    ("%", "    #| #  #|   # |  #  | #   |#  # |#    "),
    ("#", " # # | # # |#####| # # |#####| # # | # # "),
    ("_", "     |     |     |     |     |     |#####"),
    ("-", "     |     |     | ### |     |     |     "),
    (";", "     | #   |     | #   | #   |#    |     "),
    ("`", " #   | #   |     |     |     |     |     "),
    ("=", "     |#####|     |     |#####|     |     "),
    (":", "     | #   |     |     | #   |     |     "),
    ("<", "   # |  #  | #   |#    | #   |  #  |   # "),
    (">", " #   |  #  |   # |    #|   # |  #  | #   "),
    ("~", "     |     |# # #| # # |     |     |     "),
    ("*", "  #  | ### |  #  | # # |     |     |     "),
    ("/", "    #|    #|   # |  #  | #   | #   |#    "),
    ("'", "#    |#    |#    |     |     |     |     "),
    ('"', "# #  |# #  |# #  |     |     |     |     "),
    ("[", "###  |#    |#    |#    |#    |#    |###  "),
    ("]", "###  |  #  |  #  |  #  |  #  |  #  |###  "),
    ("(", "  #  | #   |#    |#    |#    | #   |  #  "),
    (")", "#    | #   |  #  |  #  |  #  | #   |#    "),
    ("}", "#    | #   | #   |  #  | #   | #   |#    "),
    ("{", "  #  | #   | #   |#    | #   | #   |  #  "),
    ("+", "     |     |  #  |  #  |#####|  #  |  #  "),
)


def _build() -> dict[str, tuple[str, ...]]:
    glyphs: dict[str, tuple[str, ...]] = {}
    for char, encoded in _TABLE:
        rows = tuple(encoded.split("|"))
        if len(rows) != GLYPH_HEIGHT or any(len(row) != GLYPH_WIDTH for row in rows):
            raise ValueError(f"malformed glyph for {char!r}")
        glyphs.setdefault(char, rows)
    return glyphs


GLYPHS: dict[str, tuple[str, ...]] = _build()


def glyph(char: str) -> tuple[str, ...]:
    """Return the seven rows of ``char``; characters without a glyph draw blank."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return GLYPHS.get(char, GLYPHS[" "])


def glyph_width(char: str) -> int:
    """Return the rightmost lit column of ``char``, or 0 when nothing is lit."""
    return max(
        (column for row in glyph(char) for column, cell in enumerate(row) if cell == "#"),
        default=0,
    )