"""Bitmap fonts for an 8-pixel-high LED matrix.

A font is a table of glyphs that all take the same number of bytes, the
stride. A glyph is one width byte followed by ``stride - 1`` column bytes.
Each column byte holds eight vertical pixels with bit 0 at the top.
Only the first ``width`` columns are drawn.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Font:
    """A fixed-stride glyph table."""

    stride: int
    data: bytes

    def __post_init__(self) -> None:
        if self.stride < 2:
            raise ValueError("stride must leave room for a width byte and a column")
        if len(self.data) % self.stride:
            raise ValueError("table length is not a multiple of the stride")

    @classmethod
    def from_table(cls, table: Iterable[int]) -> Font:
        """Build a font from a raw table whose first byte is the stride."""
        raw = bytes(table)
        if not raw:
            raise ValueError("empty font table")
        return cls(raw[0], raw[1:])

    def __len__(self) -> int:
        return len(self.data) // self.stride

    def _row(self, index: int) -> bytes:
        if not 0 <= index < len(self):
            raise IndexError(f"glyph index {index} out of range")
        start = index * self.stride
        return self.data[start : start + self.stride]

    def width(self, index: int) -> int:
        """Number of columns the glyph occupies."""
        return self._row(index)[0]

    def glyph(self, index: int) -> bytes:
        """The visible column bytes of a glyph."""
        row = self._row(index)
        return row[1 : 1 + row[0]]

    def text_width(self, indices: Iterable[int]) -> int:
        """Total number of columns of a run of glyphs."""
        return sum(self.width(index) for index in indices)


def _hex_font(stride: int, rows: Iterable[str]) -> Font:
    """Build a font from hex rows; each row is zero-padded to the stride."""
    data = bytearray()
    for row in rows:
        glyph = bytes.fromhex(row)
        if len(glyph) > stride:
            raise ValueError(f"glyph {row!r} is longer than the stride {stride}")
        data += glyph.ljust(stride, b"\0")
    return Font(stride, bytes(data))


DIG3X8 = _hex_font(4, (
    "03 FF81FF", "02 02FF", "03 F9898F", "03 8189FF", "03 1F10FC",
    "03 8F89F9", "03 FF89F9", "03 01F10F", "03 FF89FF", "03 9F91FF",
))

# Ten digits followed by a blank glyph of the same width.
DIG6X8 = _hex_font(7, (
    "06 7EFF8181FF7E", "06 0082FFFF80", "06 C2E3B1998F86", "06 42C38989FF76",
    "06 383C2623FFFF", "06 4FCF8989F971", "06 7EFF8989FB72", "06 0101F1F90F07",
    "06 76FF8989FF76", "06 4EDF9191FF7E", "06",
))

DIG4X8 = _hex_font(5, (
    "04 FF8181FF", "04 0402FF", "04 F989898F", "04 818989FF", "04 1F1010FE",
    "04 8F8989F9", "04 FF8989F8", "04 01C1310F", "04 FF8989FF", "04 1F9191FF",
))

DIG3X7 = _hex_font(4, (
    "03 FE82FE", "03 0804FE", "03 F2929E", "03 8292FE", "03 3E20FC",
    "03 9E92F2", "03 FE92F2", "03 02E21E", "03 FE92FE", "03 9E92FE",
))

DIG3X6 = _hex_font(4, (
    "03 FC84FC", "03 1008FC", "03 F4949C", "03 8494FC", "03 3C20F8",
    "03 9C94F4", "03 FC94F4", "03 04E41C", "03 FC94FC", "03 BCA4FC",
))

DIG3X5 = _hex_font(4, (
    "03 F888F8", "02 10F8", "03 E8A8B8", "03 88A8F8", "03 3820F8",
    "03 B8A8E8", "03 F8A8E8", "03 0808F8", "03 F8A8F8", "03 B8A8F8",
))

DIG5X8RN = _hex_font(6, (
    "05 7E8181FF7E", "05 0402FFFF", "05 F189898F86", "05 818989FF76",
    "05 1F1010FEFE", "05 8F8989F971", "05 7E8989F970", "05 01C1F13F0F",
    "05 768989FF76", "05 0E9191FF7E",
))

DIG5X8SQ = _hex_font(6, (
    "05 FF8181FFFF", "04 0402FFFF", "05 F989898F8F", "05 818989FFFF",
    "05 1F1010FEFE", "05 8F8989F9F9", "05 FF8989F9F9", "05 010101FFFF",
    "05 FF8989FFFF", "05 9F9191FFFF",
))

# Day-of-week abbreviations, Sunday first, followed by a degrees-Celsius sign.
DWEEK_PL = _hex_font(11, (
    "0A FC0810FC00FC00FC9484", "09 FC24243C00FC8484FC",
    "09 FC80F080FC0004FC04", "09 DC9496F500FC2464BC",
    "09 FC8484CC00C4A4948C", "0A FC24243C00FC00FC24FC",
    "09 DC9494F400FC8484FC", "09 07050700FFFF818181",
))

DWEEK_EN = _hex_font(11, (
    "09 9C9494F400FC8080FC", "0A FC043C04FC00FC8484FC",
    "0A 0404FC040400FC8080FC", "0A FC80F080FC00FC949484",
    "0A 0404FC040400FC1010FC", "09 FC24240400FC2464BC",
    "09 9C9494F400FC2424FC", "09 07050700FFFF818181",
))

SMILE = "\u263a"
FROWN = "\u2639"
SURPRISE = "\U0001f62e"
HEART = "\u2665"
ARROW_UP = "\u2191"
ARROW_DOWN = "\u2193"
DEGREE = "\u00b0"

_FONT_GLYPHS: tuple[tuple[str, str], ...] = (
    (" ", "02"), ("!", "01 5F"), ('"', "03 030003"), ("#", "05 143E143E14"),
    ("$", "04 246A2B12"), ("%", "05 6313086463"), ("&", "05 3649562050"),
    ("'", "01 03"), ("(", "03 1C2241"), (")", "03 41221C"),
    ("*", "05 28180E1828"), ("+", "05 08083E0808"), (",", "02 B070"),
    ("-", "04 08080808"), (".", "01 40"), ("/", "03 601C03"),
    ("0", "04 3E41413E"), ("1", "03 427F40"), ("2", "04 62514946"),
    ("3", "04 22414936"), ("4", "04 1814127F"), ("5", "04 27454539"),
    ("6", "04 3E494932"), ("7", "04 61110907"), ("8", "04 36494936"),
    ("9", "04 2649493E"), (":", "01 44"), (";", "02 8050"),
    ("<", "03 102844"), ("=", "03 141414"), (">", "03 442810"),
    ("?", "04 02590906"), ("@", "05 3E49555D0E"), ("A", "04 7E11117E"),
    ("B", "04 7F494936"), ("C", "04 3E414122"), ("D", "04 7F41413E"),
    ("E", "04 7F494941"), ("F", "04 7F090901"), ("G", "04 3E41497A"),
    ("H", "04 7F08087F"), ("I", "03 417F41"), ("J", "04 3040413F"),
    ("K", "04 7F081463"), ("L", "04 7F404040"), ("M", "05 7F020C027F"),
    ("N", "05 7F0408107F"), ("O", "04 3E41413E"), ("P", "04 7F090906"),
    ("Q", "04 3E4141BE"), ("R", "04 7F090976"), ("S", "04 26494932"),
    ("T", "05 01017F0101"), ("U", "04 3F40403F"), ("V", "05 0F3040300F"),
    ("W", "05 3F4038403F"), ("X", "05 6314081463"), ("Y", "05 0708700807"),
    ("Z", "04 61514947"), ("[", "02 7F41"), ("\\", "04 01061860"),
    ("]", "02 417F"), ("^", "03 020102"), ("_", "04 40404040"),
    ("`", "02 0102"), ("a", "04 20545478"), ("b", "04 7F444438"),
    ("c", "04 38444428"), ("d", "04 3844447F"), ("e", "04 38545418"),
    ("f", "03 047E05"), ("g", "04 98A4A478"), ("h", "04 7F040478"),
    ("i", "03 447D40"), ("j", "04 4080847D"), ("k", "04 7F102844"),
    ("l", "03 417F40"), ("m", "05 7C047C0478"), ("n", "04 7C040478"),
    ("o", "04 38444438"), ("p", "04 FC242418"), ("q", "04 182424FC"),
    ("r", "04 7C080404"), ("s", "04 48545424"), ("t", "03 043F44"),
    ("u", "04 3C40407C"), ("v", "05 1C2040201C"), ("w", "05 3C403C403C"),
    ("x", "05 4428102844"), ("y", "04 9CA0A07C"), ("z", "03 64544C"),
    ("{", "03 083641"), ("|", "01 7F"), ("}", "03 413608"),
    ("~", "04 08040804"),
    ("ą", "05 205454F880"), ("ć", "04 38444629"), ("ę", "04 3854D498"),
    ("ł", "03 517F44"), ("ń", "04 7C040679"), ("ó", "04 38444639"),
    ("ś", "04 48545625"), ("ź", "03 64564D"), ("ż", "03 64554C"),
    ("Ą", "05 7E1111FE80"), ("Ć", "04 3C424325"), ("Ę", "05 7F4949C180"),
    ("Ł", "04 7F484440"), ("Ń", "05 7E040A117E"), ("Ó", "04 3C46433C"),
    ("Ś", "04 244A4B30"), ("Ź", "04 62564B46"), ("Ż", "04 69594D4B"),
    (SMILE, "05 3E5561553E"), (FROWN, "05 3E6551653E"),
    (SURPRISE, "05 3E4551453E"), (HEART, "05 061F7E1F06"),
    (ARROW_UP, "05 04027F0204"), (ARROW_DOWN, "05 10207F2010"),
    (DEGREE, "03 020502"),
)

FONT = _hex_font(6, (row for _, row in _FONT_GLYPHS))

_CHAR_INDEX = {char: index for index, (char, _) in enumerate(_FONT_GLYPHS)}


def char_index(char: str) -> int:
    """Index of a character's glyph in ``FONT``."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    try:
        return _CHAR_INDEX[char]
    except KeyError:
        raise ValueError(f"no glyph for {char!r}") from None