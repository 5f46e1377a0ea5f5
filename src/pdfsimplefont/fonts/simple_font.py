# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Simple (single-byte) font objects loaded from existing font dictionaries."""

import logging

import pikepdf

from ..utils import resolve_indirect as _resolve_indirect
from .constants import STANDARD_14_FONTS
from .descriptor import project_font_descriptor
from .encoding_table import EncodingTable
from .metrics import (
    FontIdentification,
    FontMetrics,
    get_ascent,
    get_descent,
    get_width,
    read_widths,
)
from .resolver import is_symbolic_font, resolve_font_encoding
from .tounicode import ToUnicodeCMap
from .utils import (
    clone_stream,
    get_array,
    get_dictionary,
    get_name,
    get_stream,
    name_value,
)

logger = logging.getLogger(__name__)


def _copy_array(array: pikepdf.Array) -> pikepdf.Array:
    """Copies an array of scalars so it can be stored in any document."""
    return pikepdf.Array([_resolve_indirect(item) for item in array])


class SimpleFont:
    """A Type1, TrueType or Type3 font addressed with single-byte codes.

    The font dictionary is copied into ``pdf`` as a new indirect object with
    a normalized /Encoding, and its encoding and metrics are resolved for
    text measurement.

    Attributes:
        encoding: Resolved encoding table.
        metrics: Glyph metrics (widths and summary values).
        identification: Font name and Panose data from the descriptor.
        pdf_object: The new font dictionary owned by ``pdf``.
    """

    def __init__(self, pdf: pikepdf.Pdf, font_dict: pikepdf.Dictionary) -> None:
        font_dict = _resolve_indirect(font_dict)
        self.pdf = pdf
        self.identification = FontIdentification(
            font_name=name_value(get_name(font_dict, "/BaseFont"))
        )
        self.is_symbolic = is_symbolic_font(font_dict)

        target = pikepdf.Dictionary(Type=pikepdf.Name.Font)
        subtype = get_name(font_dict, "/Subtype")
        if subtype is not None:
            target["/Subtype"] = subtype
        base_font = get_name(font_dict, "/BaseFont")
        if base_font is not None:
            target["/BaseFont"] = base_font

        to_unicode = ToUnicodeCMap.from_font(font_dict)
        self.encoding: EncodingTable = resolve_font_encoding(font_dict, to_unicode)
        encoding_obj = self._normalized_encoding(font_dict)
        if encoding_obj is not None:
            target["/Encoding"] = encoding_obj

        self.metrics = FontMetrics.for_standard_14(self.font_name or "", self.encoding)
        if read_widths(font_dict, self.metrics):
            target["/FirstChar"] = int(_resolve_indirect(font_dict.FirstChar))
            target["/LastChar"] = int(_resolve_indirect(font_dict.LastChar))
            target["/Widths"] = _copy_array(get_array(font_dict, "/Widths"))

        tounicode_stream = get_stream(font_dict, "/ToUnicode")
        if tounicode_stream is not None:
            target["/ToUnicode"] = clone_stream(pdf, tounicode_stream)

        self.pdf_object = pdf.make_indirect(target)

        descriptor = get_dictionary(font_dict, "/FontDescriptor")
        if descriptor is not None:
            self.pdf_object["/FontDescriptor"] = project_font_descriptor(
                pdf, descriptor, self.metrics, self.identification
            )

        logger.debug(
            "Loaded simple font %s (%s, %d differences)",
            self.font_name,
            self.encoding.base_encoding,
            len(self.encoding.code_to_glyph_name),
        )

    def __repr__(self) -> str:
        return f"<SimpleFont {self.font_name} encoding={self.encoding.base_encoding}>"

    @staticmethod
    def _normalized_encoding(font_dict: pikepdf.Dictionary) -> pikepdf.Object | None:
        encoding = _resolve_indirect(font_dict.get("/Encoding"))
        if isinstance(encoding, pikepdf.Name):
            return encoding
        if not isinstance(encoding, pikepdf.Dictionary):
            return None

        normalized = pikepdf.Dictionary(Type=pikepdf.Name.Encoding)
        base_encoding = get_name(encoding, "/BaseEncoding")
        if base_encoding is not None:
            normalized["/BaseEncoding"] = base_encoding
        differences = get_array(encoding, "/Differences")
        if differences is not None:
            normalized["/Differences"] = _copy_array(differences)
        return normalized

    @property
    def font_name(self) -> str | None:
        return self.identification.font_name

    @property
    def is_standard_14(self) -> bool:
        return self.font_name in STANDARD_14_FONTS

    def width(self, text: str | int) -> int:
        """Returns the advance width of text (or one Unicode scalar)."""
        return get_width(self.encoding, self.metrics, text)

    def ascent(self, text: str | int) -> int:
        return get_ascent(self.encoding, self.metrics, text)

    def descent(self, text: str | int) -> int:
        return get_descent(self.encoding, self.metrics, text)

    def convert_to_bytes(self, text: str | int) -> bytes:
        return self.encoding.convert_to_bytes(text)

    def decode(self, data: bytes) -> str:
        return self.encoding.decode(data)

