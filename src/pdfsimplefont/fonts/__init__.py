# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Encoding resolution and text metrics for simple PDF fonts."""

from ..exceptions import CMapParseError, EncodingError, FontDescriptorError
from .constants import STANDARD_14_FONTS
from .conversion import convert_to_string
from .descriptor import project_font_descriptor
from .encoding_table import EncodingTable
from .glyph_mapping import glyph_name_to_unicode, symbol_glyph_to_unicode
from .metrics import (
    FontIdentification,
    FontMetrics,
    GlyphMetricsProvider,
    GlyphMetricsSummary,
    get_ascent,
    get_descent,
    get_width,
)
from .resolver import is_symbolic_font, resolve_encoding, resolve_font_encoding
from .simple_font import SimpleFont
from .standard_14 import standard_14_widths
from .tounicode import ToUnicodeCMap

__all__ = [
    # Exceptions
    "CMapParseError",
    "EncodingError",
    "FontDescriptorError",
    # Encodings
    "EncodingTable",
    "STANDARD_14_FONTS",
    "ToUnicodeCMap",
    "convert_to_string",
    "glyph_name_to_unicode",
    "is_symbolic_font",
    "resolve_encoding",
    "resolve_font_encoding",
    "symbol_glyph_to_unicode",
    # Metrics
    "FontIdentification",
    "FontMetrics",
    "GlyphMetricsProvider",
    "GlyphMetricsSummary",
    "get_ascent",
    "get_descent",
    "get_width",
    "standard_14_widths",
    # Fonts
    "SimpleFont",
    "project_font_descriptor",
]
