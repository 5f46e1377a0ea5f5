# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Byte to Unicode conversion for the built-in simple-font encodings.

Every encoding is represented by a 256-character decoding table so that
conversion is total: codes an encoding leaves undefined decode to the
character with the same value (identity fallback). Tables are built once
at import time and never modified.
"""

import codecs

from .constants import (
    CODE_SPACE,
    MACROMAN_ENCODING,
    STANDARD_ENCODING_NAME,
    SYMBOL,
    WINANSI_ENCODING,
)
from .encodings import ENCODING_VECTORS
from .glyph_mapping import glyph_name_to_unicode, symbol_glyph_to_unicode


def _table_from_codec(codec_name: str) -> str:
    """Builds a decoding table from a Python codec."""
    chars = []
    for code in CODE_SPACE:
        try:
            chars.append(bytes([code]).decode(codec_name))
        except UnicodeDecodeError:
            # cp1252 leaves 0x81, 0x8D, 0x8F, 0x90 and 0x9D undefined
            chars.append(chr(code))
    return "".join(chars)


def _table_from_vector(vector, resolve=glyph_name_to_unicode) -> str:
    """Builds a decoding table from a code -> glyph name vector.

    Args:
        vector: Mapping from character code to glyph name.
        resolve: Glyph name -> Unicode lookup for this vector.
    """
    chars = []
    for code in CODE_SPACE:
        glyph_name = vector.get(code)
        unicode_val = resolve(glyph_name) if glyph_name else None
        chars.append(chr(code if unicode_val is None else unicode_val))
    return "".join(chars)


# Vectors whose glyph names need more than the generic lookup
_VECTOR_LOOKUPS = {SYMBOL: symbol_glyph_to_unicode}

DECODING_TABLES: dict[str, str] = {
    WINANSI_ENCODING: _table_from_codec("cp1252"),
    MACROMAN_ENCODING: _table_from_codec("mac_roman"),
    **{
        name: _table_from_vector(
            vector, _VECTOR_LOOKUPS.get(name, glyph_name_to_unicode)
        )
        for name, vector in ENCODING_VECTORS.items()
    },
}

# StandardEncoding as 256 fixed Unicode values indexed by code
STANDARD_ENCODING_UNICODE: tuple[int, ...] = tuple(
    ord(ch) for ch in DECODING_TABLES[STANDARD_ENCODING_NAME]
)


def convert_to_string(data: bytes, encoding: str) -> str:
    """Decodes single-byte character codes through a built-in encoding.

    Args:
        data: Character codes.
        encoding: One of the keys of ``DECODING_TABLES``.

    Returns:
        Decoded text, one character per input byte.

    Raises:
        KeyError: If the encoding is not a built-in encoding.
    """
    text, _consumed = codecs.charmap_decode(bytes(data), "strict", DECODING_TABLES[encoding])
    return text
