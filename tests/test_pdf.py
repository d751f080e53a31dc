"""Unit tests for wordlens.ingestion.pdf.

``PdfReader`` is patched with a fake whose pages finish in reverse order, so
the tests prove the join follows page order rather than completion order.
"""

from __future__ import annotations

import io
import time
from unittest.mock import patch

import pytest
from pypdf import PdfWriter

from wordlens.errors import DocumentReadError
from wordlens.ingestion.pdf import extract_pdf_text

MOCK_TARGET = "wordlens.ingestion.pdf.PdfReader"


class _FakePage:
    def __init__(self, text: str | None, delay_s: float) -> None:
        self._text = text
        self._delay_s = delay_s

    def extract_text(self) -> str | None:
        time.sleep(self._delay_s)
        return self._text


def _fake_reader_factory(texts: list[str | None]):
    def _factory(stream):
        reader = type("FakeReader", (), {})()
        n = len(texts)
        # Later pages finish first
        reader.pages = [_FakePage(t, 0.02 * (n - i)) for i, t in enumerate(texts)]
        return reader
    return _factory


class TestExtractPdfText:
    def test_page_order_preserved(self) -> None:
        texts = [f"page{i}" for i in range(1, 7)]
        with patch(MOCK_TARGET, side_effect=_fake_reader_factory(texts)):
            result = extract_pdf_text(b"%PDF-fake", max_workers=6)
        assert result == "page1 page2 page3 page4 page5 page6"

    def test_custom_separator(self) -> None:
        with patch(MOCK_TARGET, side_effect=_fake_reader_factory(["a", "b"])):
            assert extract_pdf_text(b"%PDF-fake", page_separator="\n") == "a\nb"

    def test_empty_page_contributes_empty_string(self) -> None:
        with patch(MOCK_TARGET, side_effect=_fake_reader_factory(["a", None, "c"])):
            assert extract_pdf_text(b"%PDF-fake", max_workers=1) == "a  c"

    def test_real_blank_pdf(self) -> None:
        writer = PdfWriter()
        writer.add_blank_page(width=200, height=200)
        writer.add_blank_page(width=200, height=200)
        buf = io.BytesIO()
        writer.write(buf)
        assert extract_pdf_text(buf.getvalue()) == " "

    def test_malformed_pdf(self) -> None:
        with pytest.raises(DocumentReadError):
            extract_pdf_text(b"this is not a pdf document at all")
