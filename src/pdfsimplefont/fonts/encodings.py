# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Glyph-name vectors of the built-in simple-font encodings.

Each vector maps a character code (0-255) to an Adobe glyph name. Codes
the encoding leaves undefined are absent. The vectors follow ISO 32000-1
Annex D and the built-in encodings of the Symbol and ZapfDingbats AFM
files.
"""

from types import MappingProxyType


def _build_vector(rows: dict[int, tuple]) -> MappingProxyType:
    """Builds a read-only code -> glyph name mapping from 16-code rows.

    Args:
        rows: Mapping from the first code of a row to a tuple of up to
            16 glyph names (None for undefined codes).

    Returns:
        Read-only mapping from character code to glyph name.
    """
    vector: dict[int, str] = {}
    for start, names in rows.items():
        for offset, name in enumerate(names):
            if name is not None:
                vector[start + offset] = name
    return MappingProxyType(vector)


STANDARD_ENCODING = _build_vector(
    {
        0x20: ("space", "exclam", "quotedbl", "numbersign", "dollar", "percent",
               "ampersand", "quoteright", "parenleft", "parenright", "asterisk",
               "plus", "comma", "hyphen", "period", "slash"),
        0x30: ("zero", "one", "two", "three", "four", "five", "six", "seven",
               "eight", "nine", "colon", "semicolon", "less", "equal",
               "greater", "question"),
        0x40: ("at", "A", "B", "C", "D", "E", "F", "G", "H", "I", "J", "K",
               "L", "M", "N", "O"),
        0x50: ("P", "Q", "R", "S", "T", "U", "V", "W", "X", "Y", "Z",
               "bracketleft", "backslash", "bracketright", "asciicircum",
               "underscore"),
        0x60: ("quoteleft", "a", "b", "c", "d", "e", "f", "g", "h", "i", "j",
               "k", "l", "m", "n", "o"),
        0x70: ("p", "q", "r", "s", "t", "u", "v", "w", "x", "y", "z",
               "braceleft", "bar", "braceright", "asciitilde", None),
        0xA0: (None, "exclamdown", "cent", "sterling", "fraction", "yen",
               "florin", "section", "currency", "quotesingle", "quotedblleft",
               "guillemotleft", "guilsinglleft", "guilsinglright", "fi", "fl"),
        0xB0: (None, "endash", "dagger", "daggerdbl", "periodcentered", None,
               "paragraph", "bullet", "quotesinglbase", "quotedblbase",
               "quotedblright", "guillemotright", "ellipsis", "perthousand",
               None, "questiondown"),
        0xC0: (None, "grave", "acute", "circumflex", "tilde", "macron",
               "breve", "dotaccent", "dieresis", None, "ring", "cedilla", None,
               "hungarumlaut", "ogonek", "caron"),
        0xD0: ("emdash",),
        0xE0: (None, "AE", None, "ordfeminine", None, None, None, None,
               "Lslash", "Oslash", "OE", "ordmasculine"),
        0xF0: (None, "ae", None, None, None, "dotlessi", None, None, "lslash",
               "oslash", "oe", "germandbls"),
    }
)  # fmt: skip

SYMBOL_ENCODING = _build_vector(
    {
        0x20: ("space", "exclam", "universal", "numbersign", "existential",
               "percent", "ampersand", "suchthat", "parenleft", "parenright",
               "asteriskmath", "plus", "comma", "minus", "period", "slash"),
        0x30: ("zero", "one", "two", "three", "four", "five", "six", "seven",
               "eight", "nine", "colon", "semicolon", "less", "equal",
               "greater", "question"),
        0x40: ("congruent", "Alpha", "Beta", "Chi", "Delta", "Epsilon", "Phi",
               "Gamma", "Eta", "Iota", "theta1", "Kappa", "Lambda", "Mu", "Nu",
               "Omicron"),
        0x50: ("Pi", "Theta", "Rho", "Sigma", "Tau", "Upsilon", "sigma1",
               "Omega", "Xi", "Psi", "Zeta", "bracketleft", "therefore",
               "bracketright", "perpendicular", "underscore"),
        0x60: ("radicalex", "alpha", "beta", "chi", "delta", "epsilon", "phi",
               "gamma", "eta", "iota", "phi1", "kappa", "lambda", "mu", "nu",
               "omicron"),
        0x70: ("pi", "theta", "rho", "sigma", "tau", "upsilon", "omega1",
               "omega", "xi", "psi", "zeta", "braceleft", "bar", "braceright",
               "similar", None),
        0xA0: ("Euro", "Upsilon1", "minute", "lessequal", "fraction",
               "infinity", "florin", "club", "diamond", "heart", "spade",
               "arrowboth", "arrowleft", "arrowup", "arrowright", "arrowdown"),
        0xB0: ("degree", "plusminus", "second", "greaterequal", "multiply",
               "proportional", "partialdiff", "bullet", "divide", "notequal",
               "equivalence", "approxequal", "ellipsis", "arrowvertex",
               "arrowhorizex", "carriagereturn"),
        0xC0: ("aleph", "Ifraktur", "Rfraktur", "weierstrass",
               "circlemultiply", "circleplus", "emptyset", "intersection",
               "union", "propersuperset", "reflexsuperset", "notsubset",
               "propersubset", "reflexsubset", "element", "notelement"),
        0xD0: ("angle", "gradient", "registerserif", "copyrightserif",
               "trademarkserif", "product", "radical", "dotmath", "logicalnot",
               "logicaland", "logicalor", "arrowdblboth", "arrowdblleft",
               "arrowdblup", "arrowdblright", "arrowdbldown"),
        0xE0: ("lozenge", "angleleft", "registersans", "copyrightsans",
               "trademarksans", "summation", "parenlefttp", "parenleftex",
               "parenleftbt", "bracketlefttp", "bracketleftex",
               "bracketleftbt", "bracelefttp", "braceleftmid", "braceleftbt",
               "braceex"),
        0xF0: (None, "angleright", "integral", "integraltp", "integralex",
               "integralbt", "parenrighttp", "parenrightex", "parenrightbt",
               "bracketrighttp", "bracketrightex", "bracketrightbt",
               "bracerighttp", "bracerightmid", "bracerightbt", None),
    }
)  # fmt: skip

ZAPFDINGBATS_ENCODING = _build_vector(
    {
        0x20: ("space", "a1", "a2", "a202", "a3", "a4", "a5", "a119", "a118",
               "a117", "a11", "a12", "a13", "a14", "a15", "a16"),
        0x30: ("a105", "a17", "a18", "a19", "a20", "a21", "a22", "a23", "a24",
               "a25", "a26", "a27", "a28", "a6", "a7", "a8"),
        0x40: ("a9", "a10", "a29", "a30", "a31", "a32", "a33", "a34", "a35",
               "a36", "a37", "a38", "a39", "a40", "a41", "a42"),
        0x50: ("a43", "a44", "a45", "a46", "a47", "a48", "a49", "a50", "a51",
               "a52", "a53", "a54", "a55", "a56", "a57", "a58"),
        0x60: ("a59", "a60", "a61", "a62", "a63", "a64", "a65", "a66", "a67",
               "a68", "a69", "a70", "a71", "a72", "a73", "a74"),
        0x70: ("a203", "a75", "a204", "a76", "a77", "a78", "a79", "a81", "a82",
               "a83", "a84", "a97", "a98", "a99", "a100", None),
        0x80: ("a89", "a90", "a93", "a94", "a91", "a92", "a205", "a85", "a206",
               "a86", "a87", "a88", "a95", "a96"),
        0xA0: (None, "a101", "a102", "a103", "a104", "a106", "a107", "a108",
               "a112", "a111", "a110", "a109", "a120", "a121", "a122", "a123"),
        0xB0: ("a124", "a125", "a126", "a127", "a128", "a129", "a130", "a131",
               "a132", "a133", "a134", "a135", "a136", "a137", "a138", "a139"),
        0xC0: ("a140", "a141", "a142", "a143", "a144", "a145", "a146", "a147",
               "a148", "a149", "a150", "a151", "a152", "a153", "a154", "a155"),
        0xD0: ("a156", "a157", "a158", "a159", "a160", "a161", "a163", "a164",
               "a196", "a165", "a192", "a166", "a167", "a168", "a169", "a170"),
        0xE0: ("a171", "a172", "a173", "a162", "a174", "a175", "a176", "a177",
               "a178", "a179", "a193", "a180", "a199", "a181", "a200", "a182"),
        0xF0: (None, "a201", "a183", "a184", "a197", "a185", "a194", "a198",
               "a186", "a195", "a187", "a188", "a189", "a190", "a191", None),
    }
)  # fmt: skip

# Unicode values of the ZapfDingbats built-in encoding, code 0x20 onwards.
# Zero marks an undefined code.
_ZAPFDINGBATS_UNICODE_ROWS: dict[int, tuple] = {
    0x20: (0x0020, 0x2701, 0x2702, 0x2703, 0x2704, 0x260E, 0x2706, 0x2707,
           0x2708, 0x2709, 0x261B, 0x261E, 0x270C, 0x270D, 0x270E, 0x270F),
    0x30: (0x2710, 0x2711, 0x2712, 0x2713, 0x2714, 0x2715, 0x2716, 0x2717,
           0x2718, 0x2719, 0x271A, 0x271B, 0x271C, 0x271D, 0x271E, 0x271F),
    0x40: (0x2720, 0x2721, 0x2722, 0x2723, 0x2724, 0x2725, 0x2726, 0x2727,
           0x2605, 0x2729, 0x272A, 0x272B, 0x272C, 0x272D, 0x272E, 0x272F),
    0x50: (0x2730, 0x2731, 0x2732, 0x2733, 0x2734, 0x2735, 0x2736, 0x2737,
           0x2738, 0x2739, 0x273A, 0x273B, 0x273C, 0x273D, 0x273E, 0x273F),
    0x60: (0x2740, 0x2741, 0x2742, 0x2743, 0x2744, 0x2745, 0x2746, 0x2747,
           0x2748, 0x2749, 0x274A, 0x274B, 0x25CF, 0x274D, 0x25A0, 0x274F),
    0x70: (0x2750, 0x2751, 0x2752, 0x25B2, 0x25BC, 0x25C6, 0x2756, 0x25D7,
           0x2758, 0x2759, 0x275A, 0x275B, 0x275C, 0x275D, 0x275E, 0),
    0x80: (0x2768, 0x2769, 0x276A, 0x276B, 0x276C, 0x276D, 0x276E, 0x276F,
           0x2770, 0x2771, 0x2772, 0x2773, 0x2774, 0x2775, 0, 0),
    0xA0: (0, 0x2761, 0x2762, 0x2763, 0x2764, 0x2765, 0x2766, 0x2767,
           0x2663, 0x2666, 0x2665, 0x2660, 0x2460, 0x2461, 0x2462, 0x2463),
    0xB0: (0x2464, 0x2465, 0x2466, 0x2467, 0x2468, 0x2469, 0x2776, 0x2777,
           0x2778, 0x2779, 0x277A, 0x277B, 0x277C, 0x277D, 0x277E, 0x277F),
    0xC0: (0x2780, 0x2781, 0x2782, 0x2783, 0x2784, 0x2785, 0x2786, 0x2787,
           0x2788, 0x2789, 0x278A, 0x278B, 0x278C, 0x278D, 0x278E, 0x278F),
    0xD0: (0x2790, 0x2791, 0x2792, 0x2793, 0x2794, 0x2192, 0x2194, 0x2195,
           0x2798, 0x2799, 0x279A, 0x279B, 0x279C, 0x279D, 0x279E, 0x279F),
    0xE0: (0x27A0, 0x27A1, 0x27A2, 0x27A3, 0x27A4, 0x27A5, 0x27A6, 0x27A7,
           0x27A8, 0x27A9, 0x27AA, 0x27AB, 0x27AC, 0x27AD, 0x27AE, 0x27AF),
    0xF0: (0, 0x27B1, 0x27B2, 0x27B3, 0x27B4, 0x27B5, 0x27B6, 0x27B7,
           0x27B8, 0x27B9, 0x27BA, 0x27BB, 0x27BC, 0x27BD, 0x27BE, 0),
}  # fmt: skip

# ZapfDingbats: Adobe glyph names (a1-a206) -> Unicode codepoints
ZAPFDINGBATS_GLYPH_TO_UNICODE = MappingProxyType(
    {
        ZAPFDINGBATS_ENCODING[start + offset]: unicode_val
        for start, row in _ZAPFDINGBATS_UNICODE_ROWS.items()
        for offset, unicode_val in enumerate(row)
        if unicode_val
    }
)

# Symbol font glyphs whose Unicode value differs from the Adobe Glyph List
# entry (Greek letters the AGL maps to math symbols), or that the AGL lacks
# (bracket and integral pieces, serif and sans-serif marks). Construction
# glyphs without any Unicode equivalent map to None.
SYMBOL_GLYPH_TO_UNICODE: MappingProxyType = MappingProxyType(
    {
        "Delta": 0x0394,
        "Omega": 0x03A9,
        "mu": 0x03BC,
        "fraction": 0x2215,
        "radicalex": None,
        "arrowvertex": None,
        "arrowhorizex": 0x23AF,
        "integralex": None,
        "registerserif": 0x00AE,
        "copyrightserif": 0x00A9,
        "trademarkserif": 0x2122,
        "registersans": 0x00AE,
        "copyrightsans": 0x00A9,
        "trademarksans": 0x2122,
        "parenlefttp": 0x239B,
        "parenleftex": 0x239C,
        "parenleftbt": 0x239D,
        "parenrighttp": 0x239E,
        "parenrightex": 0x239F,
        "parenrightbt": 0x23A0,
        "bracketlefttp": 0x23A1,
        "bracketleftex": 0x23A2,
        "bracketleftbt": 0x23A3,
        "bracketrighttp": 0x23A4,
        "bracketrightex": 0x23A5,
        "bracketrightbt": 0x23A6,
        "bracelefttp": 0x23A7,
        "braceleftmid": 0x23A8,
        "braceleftbt": 0x23A9,
        "braceex": 0x23AA,
        "bracerighttp": 0x23AB,
        "bracerightmid": 0x23AC,
        "bracerightbt": 0x23AD,
    }
)

ENCODING_VECTORS = MappingProxyType(
    {
        "StandardEncoding": STANDARD_ENCODING,
        "Symbol": SYMBOL_ENCODING,
        "ZapfDingbats": ZAPFDINGBATS_ENCODING,
    }
)
