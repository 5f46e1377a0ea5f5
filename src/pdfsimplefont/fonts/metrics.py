# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Glyph metrics and text measurement for simple fonts.

Widths, ascents and descents are in glyph space units (1/1000 em for
Type1 and TrueType fonts).
"""

import logging
from dataclasses import dataclass, field
from typing import Protocol

import pikepdf

from ..utils import is_number
from ..utils import resolve_indirect as _resolve_indirect
from .constants import CODE_SPACE, STANDARD_14_METRICS
from .encoding_table import EncodingTable
from .standard_14 import standard_14_widths

logger = logging.getLogger(__name__)


@dataclass
class GlyphMetricsSummary:
    """Font-wide metrics, mostly taken from the font descriptor.

    Attributes:
        typo_ascender: Ascent above the baseline, used for glyphs without
            a bounding box.
        typo_descender: Descent below the baseline (negative).
        cap_height: Height of flat capital letters.
        italic_angle: Angle of the dominant vertical strokes.
        stem_v: Thickness of the dominant vertical stems.
        x_height: Height of flat lowercase letters.
        missing_width: Width used for codes without a width entry.
        bbox: Font bounding box (llx, lly, urx, ury), always ordered.
    """

    typo_ascender: int = 0
    typo_descender: int = 0
    cap_height: int = 0
    italic_angle: int = 0
    stem_v: int = 0
    x_height: int = 0
    missing_width: int = 0
    bbox: tuple[int, int, int, int] = (0, 0, 0, 0)

    def set_bbox(self, llx: int, lly: int, urx: int, ury: int) -> None:
        """Stores a bounding box, swapping corners that come inverted."""
        if llx > urx:
            llx, urx = urx, llx
        if lly > ury:
            lly, ury = ury, lly
        self.bbox = (llx, lly, urx, ury)


@dataclass
class FontIdentification:
    """Identification data of a font.

    Attributes:
        font_name: PostScript name of the font, as given by /BaseFont.
        panose: Raw /Panose bytes of the descriptor's /Style dictionary,
            as a latin-1 string.
    """

    font_name: str | None = None
    panose: str | None = None


class GlyphMetricsProvider(Protocol):
    """Per-code glyph metrics queried by the text measurement functions."""

    summary: GlyphMetricsSummary

    def get_width(self, code: int) -> int:
        """Returns the advance width of a code, or the default width."""
        ...

    def get_char_bbox(self, code: int) -> tuple[int, int] | None:
        """Returns the (lly, ury) extent of a code's glyph, if known."""
        ...


@dataclass
class FontMetrics:
    """Glyph metrics fed from a font dictionary's /Widths array.

    Attributes:
        summary: Font-wide metrics.
        widths: Advance width per character code.
        char_bboxes: Vertical glyph extent (lly, ury) per character code.
    """

    summary: GlyphMetricsSummary = field(default_factory=GlyphMetricsSummary)
    widths: dict[int, int] = field(default_factory=dict)
    char_bboxes: dict[int, tuple[int, int]] = field(default_factory=dict)

    @classmethod
    def for_standard_14(
        cls, font_name: str, encoding: EncodingTable | None = None
    ) -> "FontMetrics":
        """Creates metrics seeded with a Standard 14 font's built-in values.

        The summary comes from the font's AFM header. When ``encoding`` is
        given, every code whose character has a glyph in the font also gets
        that glyph's width.

        Args:
            font_name: Base font name; unknown names give empty metrics.
            encoding: Resolved encoding of the font.
        """
        metrics = cls()
        std = STANDARD_14_METRICS.get(font_name)
        if std is None:
            return metrics
        summary = metrics.summary
        summary.typo_ascender = std["ascent"]
        summary.typo_descender = std["descent"]
        summary.cap_height = std["cap_height"]
        summary.x_height = std["x_height"]
        summary.missing_width = std["default_width"]
        summary.set_bbox(*std["bbox"])

        if encoding is not None:
            glyph_widths = standard_14_widths(font_name)
            for code in CODE_SPACE:
                width = glyph_widths.get(encoding.get_unicode(code))
                if width is not None:
                    metrics.widths[code] = width
        return metrics

    def set_widths(self, widths_array, first_char: int) -> None:
        """Reads a /Widths array starting at ``first_char``.

        Non-numeric entries are skipped; their codes keep the default width.

        Args:
            widths_array: pikepdf Array (or any sequence) of widths.
            first_char: Character code of the first entry.
        """
        for i, width in enumerate(widths_array):
            width = _resolve_indirect(width)
            if not is_number(width):
                logger.debug("Non-numeric width %r for code %d", width, first_char + i)
                continue
            self.widths[first_char + i] = int(width)

    def set_char_bbox(self, code: int, lly: int, ury: int) -> None:
        if lly > ury:
            lly, ury = ury, lly
        self.char_bboxes[code] = (lly, ury)

    def get_width(self, code: int) -> int:
        return self.widths.get(code, self.summary.missing_width)

    def get_char_bbox(self, code: int) -> tuple[int, int] | None:
        return self.char_bboxes.get(code)


def get_width(
    table: EncodingTable, metrics: GlyphMetricsProvider, text: str | int
) -> int:
    """Returns the advance width of text.

    Args:
        table: Resolved encoding of the font.
        metrics: Glyph metrics of the font.
        text: Text, or a single Unicode scalar given as an int. Characters
            the encoding cannot represent contribute nothing.

    Returns:
        Sum of the widths of the encoded character codes.
    """
    return sum(metrics.get_width(code) for code in table.convert_to_bytes(text))


def get_ascent(
    table: EncodingTable, metrics: GlyphMetricsProvider, text: str | int
) -> int:
    """Returns the highest glyph extent of text above the baseline.

    Each code contributes the top of its glyph bounding box, or the font's
    typographic ascender when the glyph has no box. The result is never
    below 0.
    """
    ascent = 0
    for code in table.convert_to_bytes(text):
        char_bbox = metrics.get_char_bbox(code)
        value = char_bbox[1] if char_bbox is not None else metrics.summary.typo_ascender
        ascent = max(ascent, value)
    return ascent


def get_descent(
    table: EncodingTable, metrics: GlyphMetricsProvider, text: str | int
) -> int:
    """Returns the lowest glyph extent of text below the baseline.

    Counterpart of :func:`get_ascent`; the result is never above 0.
    """
    descent = 0
    for code in table.convert_to_bytes(text):
        char_bbox = metrics.get_char_bbox(code)
        value = (
            char_bbox[0] if char_bbox is not None else metrics.summary.typo_descender
        )
        descent = min(descent, value)
    return descent


def read_widths(font_dict: pikepdf.Dictionary, metrics: FontMetrics) -> bool:
    """Fills ``metrics`` from /FirstChar and /Widths of a font dictionary.

    Returns:
        True if the font dictionary had a usable widths description.
    """
    first_char = _resolve_indirect(font_dict.get("/FirstChar"))
    last_char = _resolve_indirect(font_dict.get("/LastChar"))
    widths = _resolve_indirect(font_dict.get("/Widths"))
    if not (is_number(first_char) and is_number(last_char)):
        return False
    if not isinstance(widths, pikepdf.Array):
        return False
    metrics.set_widths(widths, int(first_char))
    return True
