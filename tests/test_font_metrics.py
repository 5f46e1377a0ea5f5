# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Tests for fonts/metrics.py: glyph metrics and text measurement."""

from decimal import Decimal

import pytest
from conftest import make_simple_font, new_pdf
from pikepdf import Array, Name

from pdfsimplefont.fonts.metrics import (
    FontMetrics,
    GlyphMetricsSummary,
    get_ascent,
    get_descent,
    get_width,
    read_widths,
)
from pdfsimplefont.fonts.resolver import resolve_encoding


@pytest.fixture
def standard_table():
    return resolve_encoding(None, False)


class _FixedMetrics:
    """Provider returning the same extent for every glyph."""

    def __init__(self, width=0, char_bbox=None, ascender=0, descender=0):
        self.summary = GlyphMetricsSummary(
            typo_ascender=ascender, typo_descender=descender
        )
        self._width = width
        self._char_bbox = char_bbox

    def get_width(self, code):
        return self._width

    def get_char_bbox(self, code):
        return self._char_bbox


class TestGlyphMetricsSummary:
    """Font-wide summary values."""

    def test_defaults(self):
        summary = GlyphMetricsSummary()
        assert summary.bbox == (0, 0, 0, 0)
        assert summary.missing_width == 0

    def test_set_bbox_ordered(self):
        summary = GlyphMetricsSummary()
        summary.set_bbox(-100, -200, 1000, 900)
        assert summary.bbox == (-100, -200, 1000, 900)

    def test_set_bbox_swaps_inverted_box(self):
        summary = GlyphMetricsSummary()
        summary.set_bbox(10, 5, 2, 8)
        assert summary.bbox == (2, 5, 10, 8)

    def test_set_bbox_swaps_both_axes(self):
        summary = GlyphMetricsSummary()
        summary.set_bbox(10, 8, 2, 5)
        assert summary.bbox == (2, 5, 10, 8)


class TestFontMetrics:
    """Concrete metrics provider."""

    def test_set_widths(self):
        metrics = FontMetrics()
        metrics.set_widths(Array([500, 600]), 65)
        assert metrics.get_width(65) == 500
        assert metrics.get_width(66) == 600

    def test_missing_width_default(self):
        metrics = FontMetrics()
        metrics.summary.missing_width = 250
        assert metrics.get_width(65) == 250

    def test_real_widths_truncated(self):
        metrics = FontMetrics()
        metrics.set_widths(Array([Decimal("500.7")]), 65)
        assert metrics.get_width(65) == 500

    def test_non_numeric_width_skipped(self):
        metrics = FontMetrics()
        metrics.summary.missing_width = 111
        metrics.set_widths(Array([500, Name.Foo, 700]), 65)
        assert metrics.get_width(66) == 111
        assert metrics.get_width(67) == 700

    def test_char_bbox(self):
        metrics = FontMetrics()
        metrics.set_char_bbox(65, 700, -10)
        assert metrics.get_char_bbox(65) == (-10, 700)
        assert metrics.get_char_bbox(66) is None

    def test_standard_14_seed(self):
        metrics = FontMetrics.for_standard_14("Helvetica")
        assert metrics.summary.typo_ascender == 718
        assert metrics.summary.typo_descender == -207
        assert metrics.summary.missing_width == 278
        assert metrics.summary.bbox == (-166, -225, 1000, 931)

    def test_unknown_font_seed(self):
        assert FontMetrics.for_standard_14("Arial").summary == GlyphMetricsSummary()

    def test_standard_14_seed_without_encoding_has_no_widths(self):
        assert FontMetrics.for_standard_14("Helvetica").widths == {}

    def test_standard_14_glyph_widths(self):
        table = resolve_encoding("WinAnsiEncoding", False)
        metrics = FontMetrics.for_standard_14("Helvetica-Bold", table)
        assert metrics.get_width(ord("i")) == 278
        assert metrics.get_width(ord("m")) == 889
        assert metrics.get_width(0x80) == 556
        # 0x81 has no glyph in WinAnsiEncoding
        assert 0x81 not in metrics.widths
        assert metrics.get_width(0x81) == 278

    def test_standard_14_widths_follow_code_layout(self):
        """StandardEncoding puts quoteright at 0x27, WinAnsi at 0x92."""
        table = resolve_encoding(None, False)
        metrics = FontMetrics.for_standard_14("Times-Roman", table)
        assert metrics.get_width(0x27) == 333
        assert metrics.get_width(0xD0) == 1000

    def test_courier_relies_on_default_width(self):
        table = resolve_encoding(None, False)
        metrics = FontMetrics.for_standard_14("Courier", table)
        assert metrics.widths == {}
        assert metrics.get_width(ord("W")) == 600


class TestReadWidths:
    """Reading /FirstChar, /LastChar and /Widths."""

    def test_reads_widths(self):
        pdf = new_pdf()
        font = make_simple_font(
            pdf, FirstChar=65, LastChar=66, Widths=Array([500, 600])
        )
        metrics = FontMetrics()
        assert read_widths(font, metrics)
        assert metrics.widths == {65: 500, 66: 600}

    def test_indirect_widths(self):
        pdf = new_pdf()
        font = make_simple_font(
            pdf,
            FirstChar=32,
            LastChar=32,
            Widths=pdf.make_indirect(Array([250])),
        )
        metrics = FontMetrics()
        assert read_widths(font, metrics)
        assert metrics.get_width(32) == 250

    def test_missing_last_char(self):
        pdf = new_pdf()
        font = make_simple_font(pdf, FirstChar=65, Widths=Array([500]))
        metrics = FontMetrics()
        assert not read_widths(font, metrics)
        assert metrics.widths == {}

    def test_missing_widths(self):
        pdf = new_pdf()
        font = make_simple_font(pdf, FirstChar=65, LastChar=66)
        assert not read_widths(font, FontMetrics())


class TestGetWidth:
    """Text width."""

    def test_sums_widths(self, standard_table):
        metrics = FontMetrics()
        metrics.set_widths([500, 600], 65)
        assert get_width(standard_table, metrics, "AB") == 1100

    def test_single_scalar(self, standard_table):
        metrics = FontMetrics()
        metrics.set_widths([500], 65)
        assert get_width(standard_table, metrics, 0x41) == 500

    def test_missing_codes_use_default(self, standard_table):
        metrics = FontMetrics()
        metrics.summary.missing_width = 300
        metrics.set_widths([500], 65)
        assert get_width(standard_table, metrics, "AC") == 800

    def test_unencodable_characters_ignored(self, standard_table):
        metrics = FontMetrics()
        metrics.set_widths([500], 65)
        assert get_width(standard_table, metrics, "A中") == 500

    def test_empty(self, standard_table):
        assert get_width(standard_table, FontMetrics(), "") == 0


class TestAscentDescent:
    """Ascent and descent of text."""

    def test_uses_char_bbox(self, standard_table):
        metrics = FontMetrics()
        metrics.set_char_bbox(65, -10, 700)
        metrics.set_char_bbox(103, -200, 500)
        assert get_ascent(standard_table, metrics, "Ag") == 700
        assert get_descent(standard_table, metrics, "Ag") == -200

    def test_falls_back_to_typo_values(self, standard_table):
        metrics = FontMetrics()
        metrics.summary.typo_ascender = 800
        metrics.summary.typo_descender = -250
        metrics.set_char_bbox(65, -10, 700)
        assert get_ascent(standard_table, metrics, "AB") == 800
        assert get_descent(standard_table, metrics, "AB") == -250

    def test_ascent_never_negative(self, standard_table):
        metrics = _FixedMetrics(char_bbox=(-500, -100))
        assert get_ascent(standard_table, metrics, "ABC") == 0

    def test_descent_never_positive(self, standard_table):
        metrics = _FixedMetrics(char_bbox=(100, 500))
        assert get_descent(standard_table, metrics, "ABC") == 0

    def test_single_scalar(self, standard_table):
        metrics = _FixedMetrics(ascender=750, descender=-250)
        assert get_ascent(standard_table, metrics, 0x41) == 750
        assert get_descent(standard_table, metrics, 0x41) == -250

    def test_empty(self, standard_table):
        metrics = _FixedMetrics(ascender=750, descender=-250)
        assert get_ascent(standard_table, metrics, "") == 0
        assert get_descent(standard_table, metrics, "") == 0

    def test_unencodable_text(self, standard_table):
        metrics = _FixedMetrics(ascender=750, descender=-250)
        assert get_ascent(standard_table, metrics, "中") == 0
