# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""pdfsimplefont - Encoding resolution and metrics for simple PDF fonts."""

from importlib.metadata import PackageNotFoundError, version

from .exceptions import (
    CMapParseError,
    EncodingError,
    FontDescriptorError,
    PDFSimpleFontError,
)
from .fonts import (
    EncodingTable,
    FontMetrics,
    SimpleFont,
    ToUnicodeCMap,
    project_font_descriptor,
    resolve_encoding,
    resolve_font_encoding,
)
from .utils import setup_logging

try:
    __version__ = version("pdfsimplefont")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "__version__",
    "setup_logging",
    "SimpleFont",
    "EncodingTable",
    "FontMetrics",
    "ToUnicodeCMap",
    "resolve_encoding",
    "resolve_font_encoding",
    "project_font_descriptor",
    "PDFSimpleFontError",
    "EncodingError",
    "CMapParseError",
    "FontDescriptorError",
]
