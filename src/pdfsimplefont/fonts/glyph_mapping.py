# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Glyph name to Unicode lookup.

Glyph names from /Differences arrays and the built-in encoding vectors are
resolved against the Adobe Glyph List (via fontTools), then against the
ZapfDingbats names (a1-a206), and finally against the ``uniXXXX`` and
``uXXXX[XX]`` naming conventions.

The glyphs of the Symbol font's built-in encoding go through
:func:`symbol_glyph_to_unicode`, which consults the Symbol exceptions first.
"""

from fontTools.agl import AGL2UV

from .encodings import SYMBOL_GLYPH_TO_UNICODE, ZAPFDINGBATS_GLYPH_TO_UNICODE

# Unicode surrogate code points (U+D800-U+DFFF) are not scalar values
_SURROGATE_RANGE = range(0xD800, 0xE000)

_MAX_UNICODE = 0x10FFFF


def _parse_hex_scalar(digits: str) -> int | None:
    """Parses uppercase hex digits into a Unicode scalar value."""
    if not digits or digits != digits.upper():
        return None
    try:
        val = int(digits, 16)
    except ValueError:
        return None
    if val in _SURROGATE_RANGE or val > _MAX_UNICODE:
        return None
    return val


def glyph_name_to_unicode(glyph_name: str) -> int | None:
    """Resolves a glyph name to its Unicode codepoint.

    Args:
        glyph_name: Glyph name without the leading slash (e.g. 'A', 'a1',
            'uni20AC').

    Returns:
        Unicode codepoint, or None if the name is unknown or maps to a
        sequence of several codepoints.
    """
    unicode_val = AGL2UV.get(glyph_name)
    # AGL2UV stores tuples for names that expand to several codepoints
    if isinstance(unicode_val, int):
        return unicode_val

    if glyph_name in ZAPFDINGBATS_GLYPH_TO_UNICODE:
        return ZAPFDINGBATS_GLYPH_TO_UNICODE[glyph_name]

    # Handle uniXXXX format (e.g., uni0041 = 'A')
    if glyph_name.startswith("uni") and len(glyph_name) == 7:
        return _parse_hex_scalar(glyph_name[3:])

    # Handle uXXXX or uXXXXX format
    if glyph_name.startswith("u") and len(glyph_name) in (5, 6, 7):
        return _parse_hex_scalar(glyph_name[1:])

    return None


def symbol_glyph_to_unicode(glyph_name: str) -> int | None:
    """Resolves a glyph name of the Symbol font's built-in encoding.

    Checks SYMBOL_GLYPH_TO_UNICODE first (Greek letters, bracket pieces and
    other Symbol-specific glyphs), then falls back to
    :func:`glyph_name_to_unicode`.
    """
    if glyph_name in SYMBOL_GLYPH_TO_UNICODE:
        return SYMBOL_GLYPH_TO_UNICODE[glyph_name]
    return glyph_name_to_unicode(glyph_name)
