# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""ToUnicode CMap parsing.

A ToUnicode CMap maps byte sequences (character codes) to Unicode text.
Only the ``bfchar`` and ``bfrange`` operators carry mapping data; the rest
of the PostScript program is ignored.
"""

import logging
import re

import pikepdf

from ..exceptions import CMapParseError
from .utils import get_stream

logger = logging.getLogger(__name__)

_BFCHAR_PATTERN = re.compile(
    rb"(\d+)\s+beginbfchar\s*(.*?)\s*endbfchar", re.DOTALL
)
_BFRANGE_PATTERN = re.compile(
    rb"(\d+)\s+beginbfrange\s*(.*?)\s*endbfrange", re.DOTALL
)
_BFCHAR_ENTRY = re.compile(rb"<([0-9A-Fa-f\s]*)>\s*<([0-9A-Fa-f\s]*)>")
_BFRANGE_ENTRY = re.compile(
    rb"<([0-9A-Fa-f\s]*)>\s*<([0-9A-Fa-f\s]*)>\s*"
    rb"(?:<([0-9A-Fa-f\s]*)>|\[([^\]]*)\])"
)
_ARRAY_ELEMENT = re.compile(rb"<([0-9A-Fa-f\s]*)>")
_WHITESPACE = re.compile(rb"\s+")

# A bfrange may not cross a 256-code boundary in its last byte, but some
# producers ignore that; cap the expansion instead of trusting the input.
_MAX_RANGE_SIZE = 0x10000


def _hex_bytes(hex_data: bytes) -> bytes:
    """Decodes the contents of a ``<...>`` hex string.

    Raises:
        CMapParseError: If the string has an odd number of digits.
    """
    digits = _WHITESPACE.sub(b"", hex_data)
    if len(digits) % 2 != 0:
        raise CMapParseError(f"Odd number of hex digits in <{digits.decode()}>")
    return bytes.fromhex(digits.decode("ascii"))


def _decode_destination(data: bytes) -> str:
    """Decodes a UTF-16BE destination string, surrogate pairs included.

    Some producers write one-byte destinations; those are read as Latin-1.
    """
    if len(data) % 2 != 0:
        return data.decode("latin-1")
    return data.decode("utf-16-be", errors="surrogatepass")


def _increment_destination(data: bytes, offset: int) -> bytes:
    """Adds ``offset`` to a bfrange destination, wrapping within its length."""
    if offset == 0:
        return data
    value = int.from_bytes(data, "big") + offset
    return (value % (1 << (8 * len(data)))).to_bytes(len(data), "big")


class ToUnicodeCMap:
    """Byte sequence to Unicode lookup parsed from a ToUnicode stream.

    An instance created without arguments is the empty table: it never
    resolves a lookup.
    """

    def __init__(self, mapping: dict[bytes, str] | None = None) -> None:
        self._mapping: dict[bytes, str] = dict(mapping or {})
        self._reverse = self._build_reverse_mapping()

    @classmethod
    def parse(cls, data: bytes) -> "ToUnicodeCMap":
        """Parses ToUnicode CMap data.

        Args:
            data: Raw (decoded) CMap stream bytes.

        Returns:
            The parsed table.

        Raises:
            CMapParseError: If a block is malformed or the data contains
                no CMap structure at all.
        """
        data = bytes(data)
        if b"begincmap" not in data and b"beginbf" not in data:
            raise CMapParseError("Data does not look like a CMap")
        if data.count(b"beginbfchar") != data.count(b"endbfchar"):
            raise CMapParseError("Unbalanced beginbfchar/endbfchar")
        if data.count(b"beginbfrange") != data.count(b"endbfrange"):
            raise CMapParseError("Unbalanced beginbfrange/endbfrange")

        mapping: dict[bytes, str] = {}

        for block in _BFCHAR_PATTERN.finditer(data):
            declared = int(block.group(1))
            entries = _BFCHAR_ENTRY.findall(block.group(2))
            if len(entries) != declared:
                logger.debug(
                    "bfchar block declares %d entries but contains %d",
                    declared,
                    len(entries),
                )
            for src_hex, dst_hex in entries:
                mapping[_hex_bytes(src_hex)] = _decode_destination(_hex_bytes(dst_hex))

        for block in _BFRANGE_PATTERN.finditer(data):
            for src_lo, src_hi, dst_hex, dst_array in _BFRANGE_ENTRY.findall(
                block.group(2)
            ):
                lo = _hex_bytes(src_lo)
                hi = _hex_bytes(src_hi)
                if len(lo) != len(hi):
                    raise CMapParseError(
                        f"bfrange bounds differ in length: <{lo.hex()}> <{hi.hex()}>"
                    )
                start = int.from_bytes(lo, "big")
                end = int.from_bytes(hi, "big")
                if end < start or end - start >= _MAX_RANGE_SIZE:
                    logger.debug("Skipping bfrange <%s> <%s>", lo.hex(), hi.hex())
                    continue
                if dst_array:
                    elements = _ARRAY_ELEMENT.findall(dst_array)
                    for offset, elem_hex in enumerate(elements[: end - start + 1]):
                        code = (start + offset).to_bytes(len(lo), "big")
                        mapping[code] = _decode_destination(_hex_bytes(elem_hex))
                else:
                    dst = _hex_bytes(dst_hex)
                    for offset in range(end - start + 1):
                        code = (start + offset).to_bytes(len(lo), "big")
                        mapping[code] = _decode_destination(
                            _increment_destination(dst, offset)
                        )

        return cls(mapping)

    @classmethod
    def from_stream(cls, stream: pikepdf.Object | None) -> "ToUnicodeCMap | None":
        """Parses a ToUnicode stream, degrading to None on any failure.

        Args:
            stream: The /ToUnicode value of a font dictionary (may be None
                or a non-stream object such as /Identity-H).

        Returns:
            The parsed table, or None if there is no usable stream.
        """
        if not isinstance(stream, pikepdf.Stream):
            return None
        try:
            return cls.parse(stream.read_bytes())
        except (CMapParseError, pikepdf.PdfError, ValueError) as e:
            logger.debug("Ignoring unreadable ToUnicode CMap: %s", e)
            return None

    @classmethod
    def from_font(cls, font_dict: pikepdf.Dictionary) -> "ToUnicodeCMap | None":
        """Parses the /ToUnicode entry of a font dictionary, if any."""
        return cls.from_stream(get_stream(font_dict, "/ToUnicode"))

    def __len__(self) -> int:
        return len(self._mapping)

    def __repr__(self) -> str:
        return f"<ToUnicodeCMap entries={len(self._mapping)}>"

    def lookup(self, code: bytes) -> str | None:
        """Returns the Unicode text for a byte sequence, or None."""
        return self._mapping.get(bytes(code))

    def items(self):
        """Iterates over (byte sequence, Unicode text) pairs."""
        return self._mapping.items()

    def _build_reverse_mapping(self) -> dict[int, int]:
        # Ascending source order: the highest code wins on duplicates
        reverse: dict[int, int] = {}
        for code in sorted(self._mapping, key=lambda c: (len(c), c)):
            text = self._mapping[code]
            if len(text) == 1:
                reverse[ord(text)] = int.from_bytes(code, "big")
        return reverse

    def reverse_mapping(self) -> dict[int, int]:
        """Returns the Unicode scalar -> character code mapping.

        Only entries whose destination is exactly one character take part.
        When several codes map to the same character, the highest code
        wins; the choice is stable for a given table.
        """
        return dict(self._reverse)
