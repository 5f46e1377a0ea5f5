# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Encoding resolution for simple (single-byte) fonts.

The resolver builds an :class:`EncodingTable` in tiers:

1. No base encoding and a symbolic font: identity mapping.
2. One of the named encodings (WinAnsi, MacRoman, Symbol, ZapfDingbats):
   the 256 codes decoded through that encoding.
3. Anything else: StandardEncoding.
4. Fonts without any /Encoding entry that are neither symbolic nor one
   of the Standard 14: the ToUnicode CMap overrides the StandardEncoding
   guess.

A /Differences array is applied last and always wins over the base tier.
"""

import logging
from collections.abc import Iterable
from typing import Any

import pikepdf

from ..utils import is_number
from ..utils import resolve_indirect as _resolve_indirect
from .constants import (
    CODE_SPACE,
    FLAG_SYMBOLIC,
    IDENTITY,
    NAMED_ENCODINGS,
    STANDARD_14_FONTS,
    STANDARD_ENCODING_NAME,
)
from .conversion import STANDARD_ENCODING_UNICODE, convert_to_string
from .encoding_table import EncodingTable
from .glyph_mapping import glyph_name_to_unicode
from .tounicode import ToUnicodeCMap
from .utils import get_array, get_dictionary, get_name, get_number, name_value

logger = logging.getLogger(__name__)

_ALL_CODES = bytes(CODE_SPACE)

# Marks an omitted to_unicode argument; None means the font has no usable CMap
_UNSET: Any = object()


def _encoding_name(base_encoding: Any) -> str | None:
    """Normalizes a base encoding selector to a name without slash."""
    if base_encoding is None:
        return None
    if isinstance(base_encoding, pikepdf.Name):
        return name_value(base_encoding)
    return str(base_encoding).lstrip("/")


def _fill_base_encoding(name: str | None, is_symbolic: bool) -> EncodingTable:
    """Creates a table populated with the base tier (tiers 1-3)."""
    if name is None and is_symbolic:
        table = EncodingTable(IDENTITY)
        table.fill_base(tuple(CODE_SPACE))
    elif name in NAMED_ENCODINGS:
        table = EncodingTable(name)
        decoded = convert_to_string(_ALL_CODES, name)
        table.fill_base(tuple(ord(ch) for ch in decoded))
    else:
        if name is not None and name != STANDARD_ENCODING_NAME:
            logger.debug("Unknown base encoding /%s, using StandardEncoding", name)
        table = EncodingTable(STANDARD_ENCODING_NAME)
        table.fill_base(STANDARD_ENCODING_UNICODE)
    return table


def _apply_to_unicode_defaults(table: EncodingTable, to_unicode: ToUnicodeCMap) -> None:
    """Lets ToUnicode entries override the StandardEncoding guess."""
    applied = 0
    for unicode_val, code in to_unicode.reverse_mapping().items():
        if code not in CODE_SPACE:
            continue
        table.set_difference(code, unicode_val)
        applied += 1
    logger.debug("Applied %d ToUnicode entries over StandardEncoding", applied)


def _apply_differences(
    table: EncodingTable, differences: Iterable, to_unicode: ToUnicodeCMap
) -> None:
    """Applies a /Differences array left to right.

    Numbers set the current code; each glyph name is assigned to the
    current code, which then advances by one whether or not the name
    could be resolved.
    """
    code = 0
    for item in differences:
        item = _resolve_indirect(item)
        if isinstance(item, pikepdf.Name):
            _apply_glyph_name(table, code, name_value(item), to_unicode)
            code += 1
        elif isinstance(item, str):
            _apply_glyph_name(table, code, item.lstrip("/"), to_unicode)
            code += 1
        elif is_number(item):
            code = int(item)
        else:
            logger.debug("Ignoring %r in /Differences", item)


def _apply_glyph_name(
    table: EncodingTable, code: int, glyph_name: str, to_unicode: ToUnicodeCMap
) -> None:
    if code not in CODE_SPACE:
        logger.warning(
            "/Differences assigns /%s to code %d outside 0-255; entry ignored",
            glyph_name,
            code,
        )
        return

    unicode_val = glyph_name_to_unicode(glyph_name)
    if unicode_val is None:
        text = to_unicode.lookup(bytes([code]))
        if text is None or len(text) != 1:
            logger.debug("Unresolvable glyph name /%s at code %d", glyph_name, code)
            return
        # The CMap character stands in for the unknown glyph name
        unicode_val = ord(text)
        glyph_name = text

    table.set_difference(code, unicode_val, glyph_name)


def resolve_encoding(
    base_encoding: str | pikepdf.Name | None,
    is_symbolic: bool,
    differences: Iterable | None = None,
    to_unicode: ToUnicodeCMap | None = None,
    *,
    use_to_unicode_defaults: bool = False,
) -> EncodingTable:
    """Builds the encoding table of a simple font.

    Args:
        base_encoding: Base encoding name (with or without leading slash),
            or None when the font specifies none.
        is_symbolic: Whether the font is flagged symbolic.
        differences: Optional /Differences array (numbers and names).
        to_unicode: Parsed ToUnicode CMap of the font, if any.
        use_to_unicode_defaults: Let ToUnicode entries override the
            StandardEncoding default. Only meaningful for fonts without any
            /Encoding entry.

    Returns:
        The frozen encoding table.
    """
    name = _encoding_name(base_encoding)
    table = _fill_base_encoding(name, is_symbolic)

    if (
        use_to_unicode_defaults
        and to_unicode is not None
        and table.base_encoding == STANDARD_ENCODING_NAME
    ):
        _apply_to_unicode_defaults(table, to_unicode)

    if differences is not None:
        _apply_differences(
            table,
            differences,
            to_unicode if to_unicode is not None else ToUnicodeCMap(),
        )

    return table.freeze()


def is_symbolic_font(font_dict: pikepdf.Dictionary) -> bool:
    """Checks if a font is symbolic via FontDescriptor Flags.

    The Symbolic flag is bit 3 (value 4) in the FontDescriptor Flags.

    Args:
        font_dict: pikepdf font dictionary.

    Returns:
        True if the font has the Symbolic flag set.
    """
    font_descriptor = get_dictionary(font_dict, "/FontDescriptor")
    if font_descriptor is None:
        return False
    flags = get_number(font_descriptor, "/Flags")
    if flags is None:
        return False
    return bool(int(flags) & FLAG_SYMBOLIC)


def resolve_font_encoding(
    font_dict: pikepdf.Dictionary, to_unicode: ToUnicodeCMap | None = _UNSET
) -> EncodingTable:
    """Resolves the encoding of a simple font dictionary.

    Args:
        font_dict: pikepdf font dictionary (Type1, TrueType, MMType1 or
            Type3).
        to_unicode: Already parsed ToUnicode CMap, or None if the font has
            none. Parsed from the font dictionary when omitted.

    Returns:
        The frozen encoding table.
    """
    font_dict = _resolve_indirect(font_dict)
    if to_unicode is _UNSET:
        to_unicode = ToUnicodeCMap.from_font(font_dict)
    is_symbolic = is_symbolic_font(font_dict)
    base_font = name_value(get_name(font_dict, "/BaseFont"))
    encoding = _resolve_indirect(font_dict.get("/Encoding"))

    if isinstance(encoding, pikepdf.Name):
        return resolve_encoding(encoding, is_symbolic)

    if isinstance(encoding, pikepdf.Dictionary):
        return resolve_encoding(
            get_name(encoding, "/BaseEncoding"),
            is_symbolic,
            get_array(encoding, "/Differences"),
            to_unicode,
        )

    if encoding is not None:
        logger.debug("Ignoring /Encoding of unexpected type for font %s", base_font)

    if base_font in STANDARD_14_FONTS:
        # Built-in encoding: Symbol and ZapfDingbats have their own,
        # the others use StandardEncoding
        builtin = base_font if base_font in NAMED_ENCODINGS else STANDARD_ENCODING_NAME
        return resolve_encoding(builtin, is_symbolic)

    return resolve_encoding(
        None, is_symbolic, to_unicode=to_unicode, use_to_unicode_defaults=not is_symbolic
    )
