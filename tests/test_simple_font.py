# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Tests for fonts/simple_font.py: simple font loading."""

import logging

from conftest import (
    make_cmap,
    make_descriptor,
    make_simple_font,
    new_pdf,
    save_and_reopen,
)
from pikepdf import Array, Dictionary, Name

from pdfsimplefont import SimpleFont


class TestFontDictionary:
    """The copied font dictionary."""

    def test_basic_entries(self):
        pdf = new_pdf()
        font = SimpleFont(pdf, make_simple_font(pdf, "Helvetica"))
        obj = font.pdf_object
        assert obj.is_indirect
        assert obj.Type == Name.Font
        assert obj.Subtype == Name.Type1
        assert obj.BaseFont == Name.Helvetica
        assert font.font_name == "Helvetica"

    def test_new_object(self):
        pdf = new_pdf()
        source = make_simple_font(pdf)
        font = SimpleFont(pdf, source)
        assert font.pdf_object.objgen != source.objgen

    def test_encoding_name_copied(self):
        pdf = new_pdf()
        font = SimpleFont(pdf, make_simple_font(pdf, Encoding=Name.WinAnsiEncoding))
        assert font.pdf_object.Encoding == Name.WinAnsiEncoding
        assert font.encoding.base_encoding == "WinAnsiEncoding"

    def test_encoding_dictionary_normalized(self):
        pdf = new_pdf()
        source = make_simple_font(
            pdf,
            Encoding=Dictionary(
                BaseEncoding=Name.WinAnsiEncoding,
                Differences=Array([65, Name.Euro]),
                Junk=1,
            ),
        )
        encoding = SimpleFont(pdf, source).pdf_object.Encoding
        assert encoding.Type == Name.Encoding
        assert encoding.BaseEncoding == Name.WinAnsiEncoding
        assert list(encoding.Differences) == [65, Name.Euro]
        assert "/Junk" not in encoding

    def test_encoding_dictionary_without_base(self):
        pdf = new_pdf()
        source = make_simple_font(
            pdf, Encoding=Dictionary(Differences=Array([65, Name.B]))
        )
        encoding = SimpleFont(pdf, source).pdf_object.Encoding
        assert "/BaseEncoding" not in encoding

    def test_no_encoding(self):
        pdf = new_pdf()
        font = SimpleFont(pdf, make_simple_font(pdf, "Helvetica"))
        assert "/Encoding" not in font.pdf_object

    def test_widths_copied(self):
        pdf = new_pdf()
        source = make_simple_font(
            pdf, FirstChar=65, LastChar=66, Widths=Array([500, 600])
        )
        obj = SimpleFont(pdf, source).pdf_object
        assert obj.FirstChar == 65
        assert obj.LastChar == 66
        assert list(obj.Widths) == [500, 600]

    def test_widths_without_last_char_ignored(self):
        pdf = new_pdf()
        source = make_simple_font(pdf, FirstChar=65, Widths=Array([500]))
        obj = SimpleFont(pdf, source).pdf_object
        assert "/Widths" not in obj
        assert "/FirstChar" not in obj

    def test_tounicode_cloned(self):
        pdf = new_pdf()
        cmap = pdf.make_stream(make_cmap({0x41: "A"}))
        font = SimpleFont(pdf, make_simple_font(pdf, ToUnicode=cmap))
        clone = font.pdf_object.ToUnicode
        assert clone.objgen != cmap.objgen
        assert clone.read_bytes() == cmap.read_bytes()

    def test_descriptor_projected(self):
        pdf = new_pdf()
        descriptor = make_descriptor(pdf, Descent=-300)
        font = SimpleFont(pdf, make_simple_font(pdf, FontDescriptor=descriptor))
        projected = font.pdf_object.FontDescriptor
        assert projected.is_indirect
        assert projected.objgen != descriptor.objgen
        assert projected.Descent == -300
        assert font.metrics.summary.typo_descender == -300

    def test_foreign_font(self):
        source_pdf = new_pdf()
        target_pdf = new_pdf()
        source = make_simple_font(
            source_pdf,
            Encoding=Dictionary(Differences=Array([65, Name.B])),
            FirstChar=65,
            LastChar=65,
            Widths=Array([700]),
            ToUnicode=source_pdf.make_stream(make_cmap({0x41: "B"})),
            FontDescriptor=make_descriptor(source_pdf),
        )
        font = SimpleFont(target_pdf, source)
        target_pdf.Root.TestFont = font.pdf_object
        reopened = save_and_reopen(target_pdf)
        saved = reopened.Root.TestFont
        assert saved.Widths[0] == 700
        assert saved.Encoding.Differences[1] == Name.B
        assert saved.FontDescriptor.FontName == Name("/TestFont")


class TestMeasurement:
    """width, ascent and descent through the font object."""

    def test_width_from_widths_array(self):
        pdf = new_pdf()
        source = make_simple_font(
            pdf, FirstChar=65, LastChar=66, Widths=Array([500, 600])
        )
        font = SimpleFont(pdf, source)
        assert font.width("AB") == 1100
        assert font.width(0x41) == 500

    def test_width_uses_missing_width(self):
        pdf = new_pdf()
        source = make_simple_font(
            pdf,
            FirstChar=65,
            LastChar=65,
            Widths=Array([500]),
            FontDescriptor=make_descriptor(pdf, MissingWidth=333),
        )
        assert SimpleFont(pdf, source).width("AZ") == 833

    def test_standard_14_defaults(self):
        pdf = new_pdf()
        font = SimpleFont(pdf, make_simple_font(pdf, "Courier"))
        assert font.is_standard_14
        assert font.width("abc") == 1800
        assert font.ascent("abc") == 629
        assert font.descent("abc") == -157

    def test_widths_override_standard_14_defaults(self):
        pdf = new_pdf()
        source = make_simple_font(
            pdf, "Helvetica", FirstChar=65, LastChar=65, Widths=Array([667])
        )
        font = SimpleFont(pdf, source)
        assert font.width("A") == 667
        assert font.width("i") == 222

    def test_standard_14_glyph_widths(self):
        pdf = new_pdf()
        font = SimpleFont(pdf, make_simple_font(pdf, "Helvetica"))
        assert font.width("il") == 444
        assert font.width("W") == 944

    def test_standard_14_widths_follow_encoding(self):
        pdf = new_pdf()
        source = make_simple_font(
            pdf,
            "Times-Roman",
            Encoding=Dictionary(Differences=Array([0x41, Name.emdash])),
        )
        font = SimpleFont(pdf, source)
        assert font.convert_to_bytes("\u2014") == b"A"
        assert font.width("\u2014") == 1000

    def test_symbol_widths(self):
        pdf = new_pdf()
        font = SimpleFont(pdf, make_simple_font(pdf, "Symbol"))
        assert font.width("\u0391") == 722
        assert font.width("\u03a9") == 768

    def test_descriptor_ascent_descent(self):
        pdf = new_pdf()
        source = make_simple_font(
            pdf, FontDescriptor=make_descriptor(pdf, Ascent=905, Descent=-212)
        )
        font = SimpleFont(pdf, source)
        assert font.ascent("Hg") == 905
        assert font.descent("Hg") == -212

    def test_empty_text(self):
        pdf = new_pdf()
        font = SimpleFont(pdf, make_simple_font(pdf, "Helvetica"))
        assert font.width("") == 0
        assert font.ascent("") == 0
        assert font.descent("") == 0

    def test_differences_affect_measurement(self):
        pdf = new_pdf()
        source = make_simple_font(
            pdf,
            Encoding=Dictionary(
                BaseEncoding=Name.WinAnsiEncoding,
                Differences=Array([1, Name.Euro]),
            ),
            FirstChar=1,
            LastChar=1,
            Widths=Array([556]),
        )
        font = SimpleFont(pdf, source)
        assert font.convert_to_bytes("€") == b"\x01"
        assert font.width("€") == 556


class TestAccessors:
    """Encoding accessors and flags."""

    def test_symbolic_flag(self):
        pdf = new_pdf()
        source = make_simple_font(pdf, FontDescriptor=make_descriptor(pdf, flags=4))
        font = SimpleFont(pdf, source)
        assert font.is_symbolic
        assert font.encoding.base_encoding == "Identity"

    def test_decode(self):
        pdf = new_pdf()
        font = SimpleFont(pdf, make_simple_font(pdf, Encoding=Name.WinAnsiEncoding))
        assert font.decode(b"A\x80") == "A€"

    def test_convert_to_bytes_drops_unencodable(self):
        pdf = new_pdf()
        font = SimpleFont(pdf, make_simple_font(pdf, Encoding=Name.WinAnsiEncoding))
        assert font.convert_to_bytes("A中€") == b"A\x80"

    def test_identification(self):
        pdf = new_pdf()
        source = make_simple_font(
            pdf,
            "ABCDEF+Custom",
            FontDescriptor=make_descriptor(pdf, FontName=Name("/ABCDEF+Custom")),
        )
        font = SimpleFont(pdf, source)
        assert font.identification.font_name == "ABCDEF+Custom"
        assert not font.is_standard_14

    def test_subset_descriptor_name_keeps_base_font(self):
        pdf = new_pdf()
        source = make_simple_font(
            pdf,
            "Helvetica",
            FontDescriptor=make_descriptor(pdf, FontName=Name("/ABCDEF+Helvetica")),
        )
        font = SimpleFont(pdf, source)
        assert font.font_name == "Helvetica"
        assert font.is_standard_14
        assert font.pdf_object.FontDescriptor.FontName == Name("/ABCDEF+Helvetica")

    def test_unreadable_tounicode_parsed_once(self, caplog):
        pdf = new_pdf()
        source = make_simple_font(
            pdf, "CustomFont", ToUnicode=pdf.make_stream(b"not a cmap")
        )
        with caplog.at_level(logging.DEBUG, logger="pdfsimplefont"):
            SimpleFont(pdf, source)
        assert caplog.text.count("Ignoring unreadable ToUnicode CMap") == 1

    def test_repr(self):
        pdf = new_pdf()
        font = SimpleFont(pdf, make_simple_font(pdf, "Helvetica"))
        assert repr(font) == "<SimpleFont Helvetica encoding=StandardEncoding>"
