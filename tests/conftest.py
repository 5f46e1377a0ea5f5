# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at https://mozilla.org/MPL/2.0/.

"""Pytest fixtures for the pdfsimplefont test suite."""

from io import BytesIO

import pytest
from pikepdf import Array, Dictionary, Name, Pdf

# -- Global PDF tracker --

_tracked_pdfs: list[Pdf] = []


@pytest.fixture(autouse=True)
def _auto_close_pdfs():
    """Close all tracked PDF objects after each test."""
    yield
    for pdf in reversed(_tracked_pdfs):
        try:
            pdf.close()
        except Exception:
            pass
    _tracked_pdfs.clear()


def new_pdf(**kwargs) -> Pdf:
    """Create a tracked Pdf (auto-closed after test)."""
    pdf = Pdf.new(**kwargs)
    _tracked_pdfs.append(pdf)
    return pdf


def open_pdf(source, **kwargs) -> Pdf:
    """Open a tracked Pdf (auto-closed after test)."""
    pdf = Pdf.open(source, **kwargs)
    _tracked_pdfs.append(pdf)
    return pdf


def save_and_reopen(pdf: Pdf) -> Pdf:
    """Save a PDF to bytes and reopen it (auto-tracked)."""
    buf = BytesIO()
    pdf.save(buf)
    buf.seek(0)
    return open_pdf(buf)


# -- Shared test helpers (not fixtures) --


def make_cmap(bfchar: dict[int, str] | None = None, bfrange: str = "") -> bytes:
    """Build a one-byte ToUnicode CMap program.

    Args:
        bfchar: Character code -> Unicode text entries.
        bfrange: Raw bfrange entry lines, inserted verbatim.
    """
    lines = [
        "/CIDInit /ProcSet findresource begin",
        "12 dict begin",
        "begincmap",
        "/CMapName /Adobe-Identity-UCS def",
        "/CMapType 2 def",
        "1 begincodespacerange",
        "<00> <FF>",
        "endcodespacerange",
    ]
    if bfchar:
        lines.append(f"{len(bfchar)} beginbfchar")
        for code, text in bfchar.items():
            lines.append(f"<{code:02X}> <{text.encode('utf-16-be').hex().upper()}>")
        lines.append("endbfchar")
    if bfrange:
        entries = [line for line in bfrange.strip().splitlines() if line.strip()]
        lines.append(f"{len(entries)} beginbfrange")
        lines.extend(entries)
        lines.append("endbfrange")
    lines += [
        "endcmap",
        "CMapName currentdict /CMap defineresource pop",
        "end",
        "end",
    ]
    return "\n".join(lines).encode("ascii")


def make_simple_font(pdf: Pdf, base_font: str = "TestFont", **entries) -> Dictionary:
    """Create an indirect Type1 font dictionary in ``pdf``.

    Keyword arguments are added as font dictionary entries.
    """
    font = Dictionary(
        Type=Name.Font,
        Subtype=Name.Type1,
        BaseFont=Name("/" + base_font),
    )
    for key, value in entries.items():
        font["/" + key] = value
    return pdf.make_indirect(font)


def make_descriptor(pdf: Pdf, flags: int = 32, **entries) -> Dictionary:
    """Create an indirect font descriptor in ``pdf``."""
    descriptor = Dictionary(
        Type=Name.FontDescriptor,
        FontName=Name("/TestFont"),
        Flags=flags,
        FontBBox=Array([-100, -200, 1000, 900]),
        ItalicAngle=0,
        Ascent=800,
        Descent=-200,
        CapHeight=700,
        StemV=80,
    )
    for key, value in entries.items():
        descriptor["/" + key] = value
    return pdf.make_indirect(descriptor)


@pytest.fixture
def pdf() -> Pdf:
    """Empty tracked Pdf."""
    return new_pdf()
