# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Font constants shared by the encoding and metrics modules."""

# Simple fonts address glyphs with one byte
CODE_SPACE = range(256)

# Symbolic bit of the FontDescriptor /Flags (ISO 32000-1, Table 123)
FLAG_SYMBOLIC = 4

# Encoding names recognised as a base encoding with their own
# byte-to-Unicode conversion. Anything else falls back to StandardEncoding.
WINANSI_ENCODING = "WinAnsiEncoding"
MACROMAN_ENCODING = "MacRomanEncoding"
STANDARD_ENCODING_NAME = "StandardEncoding"
SYMBOL = "Symbol"
ZAPFDINGBATS = "ZapfDingbats"
IDENTITY = "Identity"

NAMED_ENCODINGS = frozenset({WINANSI_ENCODING, MACROMAN_ENCODING, SYMBOL, ZAPFDINGBATS})

# Standard 14 PDF fonts (not embedded in standard PDFs)
STANDARD_14_FONTS = frozenset(
    {
        "Courier",
        "Courier-Bold",
        "Courier-BoldOblique",
        "Courier-Oblique",
        "Helvetica",
        "Helvetica-Bold",
        "Helvetica-BoldOblique",
        "Helvetica-Oblique",
        "Times-Roman",
        "Times-Bold",
        "Times-BoldItalic",
        "Times-Italic",
        "Symbol",
        "ZapfDingbats",
    }
)

# Summary metrics of the Standard 14 fonts, from the Adobe AFM files.
# Values in 1/1000 em.
_COURIER = {"ascent": 629, "descent": -157, "cap_height": 562, "default_width": 600}
_HELVETICA = {"ascent": 718, "descent": -207, "cap_height": 718, "default_width": 278}

STANDARD_14_METRICS: dict[str, dict] = {
    "Courier": {**_COURIER, "x_height": 426, "bbox": (-23, -250, 715, 805)},
    "Courier-Bold": {**_COURIER, "x_height": 439, "bbox": (-113, -250, 749, 801)},
    "Courier-Oblique": {**_COURIER, "x_height": 426, "bbox": (-27, -250, 849, 805)},
    "Courier-BoldOblique": {
        **_COURIER,
        "x_height": 439,
        "bbox": (-57, -250, 869, 801),
    },
    "Helvetica": {**_HELVETICA, "x_height": 523, "bbox": (-166, -225, 1000, 931)},
    "Helvetica-Bold": {
        **_HELVETICA,
        "x_height": 532,
        "bbox": (-170, -228, 1003, 962),
    },
    "Helvetica-Oblique": {
        **_HELVETICA,
        "x_height": 523,
        "bbox": (-170, -225, 1116, 931),
    },
    "Helvetica-BoldOblique": {
        **_HELVETICA,
        "x_height": 532,
        "bbox": (-174, -228, 1114, 962),
    },
    "Times-Roman": {
        "ascent": 683,
        "descent": -217,
        "cap_height": 662,
        "x_height": 450,
        "bbox": (-168, -218, 1000, 898),
        "default_width": 250,
    },
    "Times-Bold": {
        "ascent": 683,
        "descent": -217,
        "cap_height": 676,
        "x_height": 461,
        "bbox": (-168, -218, 1000, 935),
        "default_width": 250,
    },
    "Times-Italic": {
        "ascent": 683,
        "descent": -217,
        "cap_height": 653,
        "x_height": 441,
        "bbox": (-169, -217, 1010, 883),
        "default_width": 250,
    },
    "Times-BoldItalic": {
        "ascent": 683,
        "descent": -217,
        "cap_height": 669,
        "x_height": 462,
        "bbox": (-200, -218, 996, 921),
        "default_width": 250,
    },
    "Symbol": {
        "ascent": 800,
        "descent": -200,
        "cap_height": 700,
        "x_height": 0,
        "bbox": (-180, -293, 1090, 1010),
        "default_width": 500,
    },
    "ZapfDingbats": {
        "ascent": 800,
        "descent": -200,
        "cap_height": 700,
        "x_height": 0,
        "bbox": (-1, -143, 981, 820),
        "default_width": 278,
    },
}
