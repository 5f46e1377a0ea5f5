# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Custom exceptions for pdfsimplefont."""


class PDFSimpleFontError(Exception):
    """Base exception for all pdfsimplefont errors."""


class EncodingError(PDFSimpleFontError):
    """Encoding table could not be built or was modified after resolution."""


class CMapParseError(PDFSimpleFontError):
    """ToUnicode CMap data is malformed."""


class FontDescriptorError(PDFSimpleFontError):
    """Font descriptor could not be projected."""
