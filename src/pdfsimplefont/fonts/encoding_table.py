# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Bidirectional character code / Unicode / glyph name table of a simple font."""

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from ..exceptions import EncodingError
from .constants import CODE_SPACE


class EncodingTable:
    """Resolved encoding of a simple font.

    The table is filled in two stages: a base tier that assigns a Unicode
    value to every code 0-255, followed by overrides (Differences entries
    and ToUnicode hints) applied in order. Both stages write the reverse
    ("special") index with last-write-wins semantics, so several codes may
    decode to the same character while only the most recently written one
    is returned by :meth:`get_code`.

    Once resolution is complete the table is frozen and any further write
    raises :class:`EncodingError`.
    """

    def __init__(self, base_encoding: str) -> None:
        self.base_encoding = base_encoding
        self._code_to_unicode: dict[int, int] = {}
        self._code_to_glyph_name: dict[int, str] = {}
        self._unicode_to_code: dict[int, int] = {}
        self._base: tuple[int, ...] = ()
        self._overrides: list[tuple[int, int]] = []
        self._frozen = False

    def __repr__(self) -> str:
        return (
            f"<EncodingTable base={self.base_encoding} "
            f"differences={len(self._code_to_glyph_name)}>"
        )

    # -- construction ---------------------------------------------------

    def _check_writable(self) -> None:
        if self._frozen:
            raise EncodingError("Encoding table is read-only after resolution")

    def fill_base(self, unicode_values: Sequence[int]) -> None:
        """Assigns the base tier: one Unicode value per code 0-255.

        The reverse index is written in ascending code order, so when two
        codes decode to the same character the higher code wins.

        Args:
            unicode_values: 256 Unicode scalars indexed by code.

        Raises:
            EncodingError: If the table is frozen or the sequence does not
                cover the code space.
        """
        self._check_writable()
        if len(unicode_values) != len(CODE_SPACE):
            raise EncodingError(
                f"Base encoding needs {len(CODE_SPACE)} values, "
                f"got {len(unicode_values)}"
            )
        self._base = tuple(unicode_values)
        for code in CODE_SPACE:
            unicode_val = self._base[code]
            self._code_to_unicode[code] = unicode_val
            self._unicode_to_code[unicode_val] = code

    def set_difference(
        self, code: int, unicode_val: int, glyph_name: str | None = None
    ) -> None:
        """Overrides a single code, e.g. from a /Differences entry.

        Args:
            code: Character code (0-255).
            unicode_val: Unicode scalar the code decodes to.
            glyph_name: Glyph name assigned to the code, if any.

        Raises:
            EncodingError: If the table is frozen or the code is outside
                the single-byte code space.
        """
        self._check_writable()
        if code not in CODE_SPACE:
            raise EncodingError(f"Character code {code} outside 0-255")
        self._unicode_to_code[unicode_val] = code
        self._code_to_unicode[code] = unicode_val
        if glyph_name is not None:
            self._code_to_glyph_name[code] = glyph_name
        self._overrides.append((unicode_val, code))

    def freeze(self) -> "EncodingTable":
        """Marks resolution as complete; returns the table itself."""
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def rebuild_reverse_index(self) -> dict[int, int]:
        """Recomputes the Unicode -> code index from its inputs.

        Replays the ascending pass over the base tier followed by every
        override in the order it was applied. The result equals
        :attr:`unicode_to_code` as built incrementally.
        """
        index: dict[int, int] = {}
        for code, unicode_val in enumerate(self._base):
            index[unicode_val] = code
        for unicode_val, code in self._overrides:
            index[unicode_val] = code
        return index

    # -- read access ----------------------------------------------------

    @property
    def code_to_unicode(self) -> Mapping[int, int]:
        return MappingProxyType(self._code_to_unicode)

    @property
    def code_to_glyph_name(self) -> Mapping[int, str]:
        return MappingProxyType(self._code_to_glyph_name)

    @property
    def unicode_to_code(self) -> Mapping[int, int]:
        return MappingProxyType(self._unicode_to_code)

    def get_unicode(self, code: int) -> int | None:
        return self._code_to_unicode.get(code)

    def get_glyph_name(self, code: int) -> str | None:
        return self._code_to_glyph_name.get(code)

    def get_code(self, unicode_val: int) -> int | None:
        return self._unicode_to_code.get(unicode_val)

    def can_encode(self, char: str | int) -> bool:
        """Returns True if the character has a code in this encoding.

        Strings that are not exactly one character are never encodable.
        """
        if isinstance(char, int):
            return char in self._unicode_to_code
        if len(char) != 1:
            return False
        return ord(char) in self._unicode_to_code

    def convert_to_bytes(self, text: str | int) -> bytes:
        """Encodes text as single-byte character codes.

        Characters without a code are dropped.

        Args:
            text: A string, or a single Unicode scalar given as an int.

        Returns:
            The character codes, one byte per encodable character.
        """
        if isinstance(text, int):
            code = self._unicode_to_code.get(text)
            return b"" if code is None else bytes([code])

        codes = bytearray()
        for ch in text:
            code = self._unicode_to_code.get(ord(ch))
            if code is not None:
                codes.append(code)
        return bytes(codes)

    def decode(self, data: bytes) -> str:
        """Decodes character codes to text via the code -> Unicode map."""
        return "".join(
            chr(self._code_to_unicode[code])
            for code in bytes(data)
            if code in self._code_to_unicode
        )
