# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Typed accessors for font dictionaries."""

from typing import Any

import pikepdf

from ..utils import is_number
from ..utils import resolve_indirect as _resolve_indirect


def safe_str(obj: pikepdf.Object, fallback: str = "Unknown") -> str:
    """Converts a pikepdf object to string, handling non-UTF-8 bytes.

    Args:
        obj: pikepdf object to convert.
        fallback: Value to return if conversion fails entirely.

    Returns:
        String representation of the object.
    """
    try:
        return str(obj)
    except (UnicodeDecodeError, UnicodeEncodeError):
        try:
            return bytes(obj).decode("latin-1")
        except Exception:
            return fallback


def name_value(obj: Any) -> str | None:
    """Returns a Name's value without the leading slash, or None."""
    if not isinstance(obj, pikepdf.Name):
        return None
    return safe_str(obj)[1:]


def get_name(dictionary: pikepdf.Dictionary, key: str) -> pikepdf.Name | None:
    """Returns ``dictionary[key]`` if it is a Name, otherwise None."""
    value = _resolve_indirect(dictionary.get(key))
    if isinstance(value, pikepdf.Name):
        return value
    return None


def get_number(dictionary: pikepdf.Dictionary, key: str) -> Any:
    """Returns ``dictionary[key]`` if it is numeric, otherwise None."""
    value = _resolve_indirect(dictionary.get(key))
    if is_number(value):
        return value
    return None


def get_string(dictionary: pikepdf.Dictionary, key: str) -> pikepdf.String | None:
    """Returns ``dictionary[key]`` if it is a String, otherwise None."""
    value = _resolve_indirect(dictionary.get(key))
    if isinstance(value, pikepdf.String):
        return value
    return None


def get_array(dictionary: pikepdf.Dictionary, key: str) -> pikepdf.Array | None:
    """Returns ``dictionary[key]`` if it is an Array, otherwise None."""
    value = _resolve_indirect(dictionary.get(key))
    if isinstance(value, pikepdf.Array):
        return value
    return None


def get_dictionary(
    dictionary: pikepdf.Dictionary, key: str
) -> pikepdf.Dictionary | None:
    """Returns ``dictionary[key]`` if it is a Dictionary, otherwise None."""
    value = _resolve_indirect(dictionary.get(key))
    if isinstance(value, pikepdf.Dictionary):
        return value
    return None


def get_stream(dictionary: pikepdf.Dictionary, key: str) -> pikepdf.Stream | None:
    """Returns ``dictionary[key]`` if it is a Stream, otherwise None."""
    value = _resolve_indirect(dictionary.get(key))
    if isinstance(value, pikepdf.Stream):
        return value
    return None


def clone_stream(pdf: pikepdf.Pdf, stream: pikepdf.Stream) -> pikepdf.Stream:
    """Duplicates a stream into ``pdf`` without decoding its contents.

    The raw (still filtered) bytes are carried over together with the
    stream dictionary. Streams owned by another document are copied with
    ``copy_foreign``.

    Args:
        pdf: Target document.
        stream: Stream to duplicate.

    Returns:
        A new indirect stream owned by ``pdf``.
    """
    if not stream.is_owned_by(pdf):
        return pdf.copy_foreign(stream)

    clone = pdf.make_stream(b"")
    clone.write(
        bytes(stream.read_raw_bytes()),
        filter=stream.get("/Filter"),
        decode_parms=stream.get("/DecodeParms"),
    )
    for key in stream.keys():
        if key in ("/Length", "/Filter", "/DecodeParms"):
            continue
        clone[key] = stream[key]
    return clone
