# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Glyph widths of the Standard 14 fonts, from the Adobe AFM files.

The text fonts list their widths in WinAnsiEncoding code order, Symbol and
ZapfDingbats in the order of their built-in encodings. Rows hold 16 codes;
0 marks a code without a glyph. :func:`standard_14_widths` re-keys a table
by Unicode scalar so that any resolved encoding can be laid over it.

Courier and its variants are monospaced (600 for every glyph) and rely on
the default width alone.
"""

from types import MappingProxyType

from .constants import SYMBOL, WINANSI_ENCODING, ZAPFDINGBATS
from .conversion import DECODING_TABLES

_HELVETICA_ROWS = {
    0x20: (278, 278, 355, 556, 556, 889, 667, 191,
           333, 333, 389, 584, 278, 333, 278, 278),
    0x30: (556, 556, 556, 556, 556, 556, 556, 556,
           556, 556, 278, 278, 584, 584, 584, 556),
    0x40: (1015, 667, 667, 722, 722, 611, 556, 778,
           722, 278, 500, 667, 556, 833, 722, 778),
    0x50: (667, 778, 722, 667, 611, 722, 667, 944,
           667, 667, 611, 278, 278, 278, 469, 556),
    0x60: (333, 556, 556, 500, 556, 556, 278, 556,
           556, 222, 222, 500, 222, 833, 556, 556),
    0x70: (556, 556, 333, 500, 278, 556, 500, 722,
           500, 500, 500, 334, 260, 334, 584, 0),
    0x80: (556, 0, 222, 556, 333, 1000, 556, 556,
           333, 1000, 667, 333, 1000, 0, 611, 0),
    0x90: (0, 222, 222, 333, 333, 350, 556, 1000,
           333, 1000, 500, 333, 944, 0, 500, 667),
    0xA0: (278, 333, 556, 556, 556, 556, 260, 556,
           333, 737, 370, 556, 584, 333, 737, 333),
    0xB0: (400, 584, 333, 333, 333, 556, 537, 278,
           333, 333, 365, 556, 834, 834, 834, 611),
    0xC0: (667, 667, 667, 667, 667, 667, 1000, 722,
           611, 611, 611, 611, 278, 278, 278, 278),
    0xD0: (722, 722, 778, 778, 778, 778, 778, 584,
           778, 722, 722, 722, 722, 667, 667, 611),
    0xE0: (556, 556, 556, 556, 556, 556, 889, 500,
           556, 556, 556, 556, 278, 278, 278, 278),
    0xF0: (556, 556, 556, 556, 556, 556, 556, 584,
           611, 556, 556, 556, 556, 500, 556, 500),
}  # fmt: skip

_HELVETICA_BOLD_ROWS = {
    0x20: (278, 333, 474, 556, 556, 889, 722, 238,
           333, 333, 389, 584, 278, 333, 278, 278),
    0x30: (556, 556, 556, 556, 556, 556, 556, 556,
           556, 556, 333, 333, 584, 584, 584, 611),
    0x40: (975, 722, 722, 722, 722, 667, 611, 778,
           722, 278, 556, 722, 611, 833, 722, 778),
    0x50: (667, 778, 722, 667, 611, 722, 667, 944,
           667, 667, 611, 333, 278, 333, 584, 556),
    0x60: (333, 556, 611, 556, 611, 556, 333, 611,
           611, 278, 278, 556, 278, 889, 611, 611),
    0x70: (611, 611, 389, 556, 333, 611, 556, 778,
           556, 556, 500, 389, 280, 389, 584, 0),
    0x80: (556, 0, 278, 556, 500, 1000, 556, 556,
           333, 1000, 667, 333, 1000, 0, 611, 0),
    0x90: (0, 278, 278, 500, 500, 350, 556, 1000,
           333, 1000, 556, 333, 944, 0, 500, 667),
    0xA0: (278, 333, 556, 556, 556, 556, 280, 556,
           333, 737, 370, 556, 584, 333, 737, 333),
    0xB0: (400, 584, 333, 333, 333, 611, 556, 278,
           333, 333, 365, 556, 834, 834, 834, 611),
    0xC0: (722, 722, 722, 722, 722, 722, 1000, 722,
           667, 667, 667, 667, 278, 278, 278, 278),
    0xD0: (722, 722, 778, 778, 778, 778, 778, 584,
           778, 722, 722, 722, 722, 667, 667, 611),
    0xE0: (556, 556, 556, 556, 556, 556, 889, 556,
           556, 556, 556, 556, 278, 278, 278, 278),
    0xF0: (611, 611, 611, 611, 611, 611, 611, 584,
           611, 611, 611, 611, 611, 556, 611, 556),
}  # fmt: skip

_TIMES_ROMAN_ROWS = {
    0x20: (250, 333, 408, 500, 500, 833, 778, 180,
           333, 333, 500, 564, 250, 333, 250, 278),
    0x30: (500, 500, 500, 500, 500, 500, 500, 500,
           500, 500, 278, 278, 564, 564, 564, 444),
    0x40: (921, 722, 667, 667, 722, 611, 556, 722,
           722, 333, 389, 722, 611, 889, 722, 722),
    0x50: (556, 722, 667, 556, 611, 722, 722, 944,
           722, 722, 611, 333, 278, 333, 469, 500),
    0x60: (333, 444, 500, 444, 500, 444, 333, 500,
           500, 278, 278, 500, 278, 778, 500, 500),
    0x70: (500, 500, 333, 389, 278, 500, 500, 722,
           500, 500, 444, 480, 200, 480, 541, 0),
    0x80: (500, 0, 333, 500, 444, 1000, 500, 500,
           333, 1000, 556, 333, 889, 0, 611, 0),
    0x90: (0, 333, 333, 444, 444, 350, 500, 1000,
           333, 980, 389, 333, 722, 0, 444, 722),
    0xA0: (250, 333, 500, 500, 500, 500, 200, 500,
           333, 760, 276, 500, 564, 333, 760, 333),
    0xB0: (400, 564, 300, 300, 333, 500, 453, 250,
           333, 300, 310, 500, 750, 750, 750, 444),
    0xC0: (722, 722, 722, 722, 722, 722, 889, 667,
           611, 611, 611, 611, 333, 333, 333, 333),
    0xD0: (722, 722, 722, 722, 722, 722, 722, 564,
           722, 722, 722, 722, 722, 722, 556, 500),
    0xE0: (444, 444, 444, 444, 444, 444, 667, 444,
           444, 444, 444, 444, 278, 278, 278, 278),
    0xF0: (500, 500, 500, 500, 500, 500, 500, 564,
           500, 500, 500, 500, 500, 500, 500, 500),
}  # fmt: skip

_TIMES_BOLD_ROWS = {
    0x20: (250, 333, 555, 500, 500, 1000, 833, 278,
           333, 333, 500, 570, 250, 333, 250, 278),
    0x30: (500, 500, 500, 500, 500, 500, 500, 500,
           500, 500, 333, 333, 570, 570, 570, 500),
    0x40: (930, 722, 667, 722, 722, 667, 611, 778,
           778, 389, 500, 778, 667, 944, 722, 778),
    0x50: (611, 778, 722, 556, 667, 722, 722, 1000,
           722, 722, 667, 333, 278, 333, 581, 500),
    0x60: (333, 500, 556, 444, 556, 444, 333, 500,
           556, 278, 333, 556, 278, 833, 556, 500),
    0x70: (556, 556, 444, 389, 333, 556, 500, 722,
           500, 500, 444, 394, 220, 394, 520, 0),
    0x80: (500, 0, 333, 500, 500, 1000, 500, 500,
           333, 1000, 556, 333, 1000, 0, 667, 0),
    0x90: (0, 333, 333, 500, 500, 350, 500, 1000,
           333, 1000, 389, 333, 722, 0, 444, 722),
    0xA0: (250, 333, 500, 500, 500, 500, 220, 500,
           333, 747, 300, 500, 570, 333, 747, 333),
    0xB0: (400, 570, 300, 300, 333, 556, 540, 250,
           333, 300, 330, 500, 750, 750, 750, 500),
    0xC0: (722, 722, 722, 722, 722, 722, 1000, 722,
           667, 667, 667, 667, 389, 389, 389, 389),
    0xD0: (722, 722, 778, 778, 778, 778, 778, 570,
           778, 722, 722, 722, 722, 722, 611, 556),
    0xE0: (500, 500, 500, 500, 500, 500, 722, 444,
           444, 444, 444, 444, 278, 278, 278, 278),
    0xF0: (500, 556, 500, 500, 500, 500, 500, 570,
           500, 556, 556, 556, 556, 500, 556, 500),
}  # fmt: skip

_TIMES_ITALIC_ROWS = {
    0x20: (250, 333, 420, 500, 500, 833, 778, 214,
           333, 333, 500, 675, 250, 333, 250, 278),
    0x30: (500, 500, 500, 500, 500, 500, 500, 500,
           500, 500, 333, 333, 675, 675, 675, 500),
    0x40: (920, 611, 611, 667, 722, 611, 611, 722,
           722, 333, 444, 667, 556, 833, 667, 722),
    0x50: (611, 722, 611, 500, 556, 722, 611, 833,
           611, 556, 556, 389, 278, 389, 422, 500),
    0x60: (333, 500, 500, 444, 500, 444, 278, 500,
           500, 278, 278, 444, 278, 722, 500, 500),
    0x70: (500, 500, 389, 389, 278, 500, 444, 667,
           444, 444, 389, 400, 275, 400, 541, 0),
    0x80: (500, 0, 333, 500, 556, 889, 500, 500,
           333, 1000, 500, 333, 944, 0, 556, 0),
    0x90: (0, 333, 333, 556, 556, 350, 500, 889,
           333, 980, 389, 333, 722, 0, 389, 556),
    0xA0: (250, 389, 500, 500, 500, 500, 275, 500,
           333, 760, 276, 500, 675, 333, 760, 333),
    0xB0: (400, 675, 300, 300, 333, 500, 523, 250,
           333, 300, 310, 500, 750, 750, 750, 500),
    0xC0: (611, 611, 611, 611, 611, 611, 889, 667,
           611, 611, 611, 611, 333, 333, 333, 333),
    0xD0: (722, 667, 722, 722, 722, 722, 722, 675,
           722, 722, 722, 722, 722, 556, 611, 500),
    0xE0: (500, 500, 500, 500, 500, 500, 667, 444,
           444, 444, 444, 444, 278, 278, 278, 278),
    0xF0: (500, 500, 500, 500, 500, 500, 500, 675,
           500, 500, 500, 500, 500, 444, 500, 444),
}  # fmt: skip

_TIMES_BOLD_ITALIC_ROWS = {
    0x20: (250, 389, 555, 500, 500, 833, 778, 278,
           333, 333, 500, 570, 250, 333, 250, 278),
    0x30: (500, 500, 500, 500, 500, 500, 500, 500,
           500, 500, 333, 333, 570, 570, 570, 500),
    0x40: (832, 667, 667, 667, 722, 667, 667, 722,
           778, 389, 500, 667, 611, 889, 722, 722),
    0x50: (611, 722, 667, 556, 611, 722, 667, 889,
           667, 611, 611, 333, 278, 333, 570, 500),
    0x60: (333, 500, 500, 444, 500, 444, 333, 500,
           556, 278, 278, 500, 278, 778, 556, 500),
    0x70: (556, 500, 389, 389, 278, 556, 444, 667,
           500, 444, 389, 348, 220, 348, 570, 0),
    0x80: (500, 0, 333, 500, 500, 1000, 500, 500,
           333, 1000, 556, 333, 944, 0, 611, 0),
    0x90: (0, 333, 333, 500, 500, 350, 500, 1000,
           333, 1000, 389, 333, 722, 0, 389, 611),
    0xA0: (250, 389, 500, 500, 500, 500, 220, 500,
           333, 747, 266, 500, 606, 333, 747, 333),
    0xB0: (400, 570, 300, 300, 333, 576, 500, 250,
           333, 300, 300, 500, 750, 750, 750, 500),
    0xC0: (667, 667, 667, 667, 667, 667, 944, 667,
           667, 667, 667, 667, 389, 389, 389, 389),
    0xD0: (722, 722, 722, 722, 722, 722, 722, 570,
           722, 722, 722, 722, 722, 611, 611, 500),
    0xE0: (500, 500, 500, 500, 500, 500, 722, 444,
           444, 444, 444, 444, 278, 278, 278, 278),
    0xF0: (500, 556, 500, 500, 500, 500, 500, 570,
           500, 556, 556, 556, 556, 444, 500, 444),
}  # fmt: skip

_SYMBOL_ROWS = {
    0x20: (250, 333, 713, 500, 549, 833, 778, 439,
           333, 333, 500, 549, 250, 549, 250, 278),
    0x30: (500, 500, 500, 500, 500, 500, 500, 500,
           500, 500, 278, 278, 549, 549, 549, 444),
    0x40: (0, 722, 667, 722, 612, 611, 763, 603,
           722, 333, 631, 722, 686, 889, 722, 722),
    0x50: (768, 741, 556, 592, 611, 690, 439, 768,
           645, 795, 611, 0, 0, 0, 0, 0),
    0x60: (0, 611, 611, 549, 611, 549, 611, 556,
           603, 329, 603, 549, 549, 576, 521, 549),
    0x70: (549, 521, 549, 603, 439, 576, 713, 686,
           493, 686, 494, 0, 0, 0, 0, 0),
}  # fmt: skip

_ZAPFDINGBATS_ROWS = {
    0x20: (278, 974, 961, 974, 980, 719, 789, 790,
           791, 690, 960, 939, 549, 855, 911, 933),
    0x30: (911, 945, 974, 755, 846, 762, 761, 571,
           677, 763, 760, 759, 754, 494, 552, 537),
    0x40: (577, 692, 786, 788, 788, 790, 793, 794,
           816, 823, 789, 841, 823, 833, 816, 831),
    0x50: (923, 744, 723, 749, 790, 792, 695, 776,
           768, 792, 759, 707, 708, 682, 701, 826),
    0x60: (815, 789, 789, 707, 687, 696, 689, 786,
           787, 713, 791, 785, 791, 873, 761, 762),
    0x70: (762, 759, 759, 892, 892, 788, 784, 438,
           138, 277, 415, 0, 0, 0, 0, 0),
}  # fmt: skip

# Font name -> (encoding the rows are laid out in, width rows)
_WIDTH_TABLES: dict[str, tuple[str, dict[int, tuple[int, ...]]]] = {
    "Helvetica": (WINANSI_ENCODING, _HELVETICA_ROWS),
    "Helvetica-Oblique": (WINANSI_ENCODING, _HELVETICA_ROWS),
    "Helvetica-Bold": (WINANSI_ENCODING, _HELVETICA_BOLD_ROWS),
    "Helvetica-BoldOblique": (WINANSI_ENCODING, _HELVETICA_BOLD_ROWS),
    "Times-Roman": (WINANSI_ENCODING, _TIMES_ROMAN_ROWS),
    "Times-Bold": (WINANSI_ENCODING, _TIMES_BOLD_ROWS),
    "Times-Italic": (WINANSI_ENCODING, _TIMES_ITALIC_ROWS),
    "Times-BoldItalic": (WINANSI_ENCODING, _TIMES_BOLD_ITALIC_ROWS),
    SYMBOL: (SYMBOL, _SYMBOL_ROWS),
    ZAPFDINGBATS: (ZAPFDINGBATS, _ZAPFDINGBATS_ROWS),
}


def _widths_by_unicode(
    encoding: str, rows: dict[int, tuple[int, ...]]
) -> MappingProxyType:
    """Re-keys code-ordered width rows by the Unicode value of each code."""
    decoding = DECODING_TABLES[encoding]
    widths: dict[int, int] = {}
    for start, row in rows.items():
        for offset, width in enumerate(row):
            if width:
                widths.setdefault(ord(decoding[start + offset]), width)
    return MappingProxyType(widths)


_EMPTY: MappingProxyType = MappingProxyType({})

STANDARD_14_WIDTHS = MappingProxyType(
    {
        name: _widths_by_unicode(encoding, rows)
        for name, (encoding, rows) in _WIDTH_TABLES.items()
    }
)


def standard_14_widths(font_name: str) -> MappingProxyType:
    """Returns the glyph widths of a Standard 14 font keyed by Unicode scalar.

    Args:
        font_name: Base font name (e.g. 'Helvetica-Bold').

    Returns:
        Read-only mapping from Unicode scalar to advance width; empty for
        Courier and for fonts outside the Standard 14.
    """
    return STANDARD_14_WIDTHS.get(font_name, _EMPTY)
