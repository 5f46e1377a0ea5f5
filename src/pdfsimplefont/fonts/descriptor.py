# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Font descriptor projection.

Copies the well-typed subset of a font descriptor into a new indirect
dictionary and keeps the font's metrics summary in sync with it.
"""

import logging

import pikepdf

from ..exceptions import FontDescriptorError
from ..utils import is_number
from ..utils import resolve_indirect as _resolve_indirect
from .metrics import FontIdentification, GlyphMetricsSummary
from .utils import clone_stream, get_dictionary, get_string

logger = logging.getLogger(__name__)

# Numeric descriptor keys and the summary attribute each one updates
_NUMERIC_FIELDS: dict[str, str | None] = {
    "/Ascent": "typo_ascender",
    "/Descent": "typo_descender",
    "/CapHeight": "cap_height",
    "/ItalicAngle": "italic_angle",
    "/StemV": "stem_v",
    "/FontWeight": None,
    "/Flags": None,
    "/Leading": None,
    "/MissingWidth": "missing_width",
    "/XHeight": "x_height",
}

_NAME_FIELDS = ("/FontName", "/Subtype", "/FontStretch")

_FONT_FILE_KEYS = ("/FontFile", "/FontFile2", "/FontFile3")


def _copy_numbers(
    source: pikepdf.Dictionary,
    target: pikepdf.Dictionary,
    summary: GlyphMetricsSummary,
) -> None:
    for key, attribute in _NUMERIC_FIELDS.items():
        value = _resolve_indirect(source.get(key))
        if value is None:
            continue
        if not is_number(value):
            logger.debug("Skipping non-numeric descriptor entry %s: %r", key, value)
            continue
        target[key] = value
        if attribute is not None:
            setattr(summary, attribute, int(value))


def _copy_font_bbox(
    source: pikepdf.Dictionary,
    target: pikepdf.Dictionary,
    summary: GlyphMetricsSummary,
) -> None:
    bbox = _resolve_indirect(source.get("/FontBBox"))
    if bbox is None:
        return
    if not isinstance(bbox, pikepdf.Array) or len(bbox) != 4:
        logger.debug("Skipping malformed /FontBBox %r", bbox)
        return
    values = [_resolve_indirect(v) for v in bbox]
    if not all(is_number(v) for v in values):
        logger.debug("Skipping /FontBBox with non-numeric entries")
        return
    # The descriptor keeps the box as given; only the summary is normalized
    target["/FontBBox"] = pikepdf.Array(values)
    summary.set_bbox(*(int(v) for v in values))


def _copy_style(
    source: pikepdf.Dictionary,
    target: pikepdf.Dictionary,
    identification: FontIdentification,
) -> None:
    style = get_dictionary(source, "/Style")
    if style is None:
        return
    panose = get_string(style, "/Panose")
    if panose is None:
        logger.debug("Font descriptor /Style has no /Panose string")
        return
    target["/Style"] = pikepdf.Dictionary(Panose=pikepdf.String(bytes(panose)))
    identification.panose = bytes(panose).decode("latin-1")


def project_font_descriptor(
    pdf: pikepdf.Pdf,
    source: pikepdf.Object,
    metrics,
    identification: FontIdentification | None = None,
) -> pikepdf.Dictionary:
    """Projects a font descriptor into a new indirect object of ``pdf``.

    Only recognized entries of the expected type are carried over. Numeric
    entries and /FontBBox also update ``metrics.summary``. Embedded font
    programs are duplicated without being decoded.

    Args:
        pdf: Document that will own the new descriptor.
        source: Source /FontDescriptor dictionary.
        metrics: Glyph metrics provider whose summary is updated.
        identification: Record receiving /Panose, if given. Its font name
            is left alone; a subset-tagged /FontName does not replace it.

    Returns:
        The new indirect font descriptor.

    Raises:
        FontDescriptorError: If ``source`` is not a dictionary.
    """
    source = _resolve_indirect(source)
    if not isinstance(source, pikepdf.Dictionary):
        raise FontDescriptorError(
            f"Font descriptor must be a dictionary, got {type(source).__name__}"
        )
    if identification is None:
        identification = FontIdentification()

    target = pikepdf.Dictionary(Type=pikepdf.Name.FontDescriptor)

    for key in _NAME_FIELDS:
        value = _resolve_indirect(source.get(key))
        if value is None:
            continue
        if isinstance(value, pikepdf.Name):
            target[key] = value
        else:
            logger.debug("Skipping descriptor entry %s: not a name", key)

    family = get_string(source, "/FontFamily")
    if family is not None:
        target["/FontFamily"] = family

    _copy_numbers(source, target, metrics.summary)
    _copy_font_bbox(source, target, metrics.summary)
    _copy_style(source, target, identification)

    for key in _FONT_FILE_KEYS:
        font_file = _resolve_indirect(source.get(key))
        if font_file is None:
            continue
        if isinstance(font_file, pikepdf.Stream):
            target[key] = clone_stream(pdf, font_file)
        else:
            logger.debug("Skipping descriptor entry %s: not a stream", key)

    return pdf.make_indirect(target)
