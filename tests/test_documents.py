"""Unit tests for wordlens.ingestion.documents — routing by extension."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from wordlens.config import WordLensConfig
from wordlens.errors import DocumentReadError, SubtitleParseError, UnsupportedFormatError
from wordlens.ingestion.documents import decode_text, document_type, load_document

_ASS_CONTENT = """\
[Script Info]
ScriptType: v4.00+

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
Dialogue: 0,0:00:01.00,0:00:03.00,Default,,0,0,0,,Hello
Dialogue: 0,0:00:01.00,0:00:03.00,Default,,0,0,0,,Hallo
"""

_SRT_CONTENT = "1\n00:00:01,000 --> 00:00:03,000\nHello, world!\n\n"


class TestDocumentType:
    def test_lowercased_without_dot(self) -> None:
        assert document_type(Path("movie.ASS")) == "ass"
        assert document_type(Path("notes")) == ""


class TestLoadDocument:
    def test_ass_rendered(self, tmp_path: Path) -> None:
        p = tmp_path / "episode.ass"
        p.write_text(_ASS_CONTENT, encoding="utf-8")
        assert load_document(p) == "\n00:01-00:03\nHello\nHallo\n"

    def test_ssa_uses_subtitle_path(self, tmp_path: Path) -> None:
        p = tmp_path / "episode.ssa"
        p.write_text(_ASS_CONTENT, encoding="utf-8")
        assert load_document(p).startswith("\n00:01-00:03\n")

    @pytest.mark.parametrize("suffix", [".srt", ".vtt"])
    def test_srt_vtt_pass_through(self, tmp_path: Path, suffix: str) -> None:
        p = tmp_path / f"episode{suffix}"
        p.write_text(_SRT_CONTENT, encoding="utf-8")
        assert load_document(p) == _SRT_CONTENT

    def test_txt_pass_through(self, tmp_path: Path) -> None:
        p = tmp_path / "notes.txt"
        p.write_text("The quick brown fox jumps over the lazy dog.\n", encoding="utf-8")
        assert load_document(p) == "The quick brown fox jumps over the lazy dog.\n"

    def test_pdf_routed_with_config(self, tmp_path: Path) -> None:
        p = tmp_path / "book.pdf"
        p.write_bytes(b"%PDF-1.4 fake")
        cfg = WordLensConfig(pdf_max_workers=2, pdf_page_separator="|")
        with patch("wordlens.ingestion.documents.extract_pdf_text", return_value="a|b") as mock_extract:
            assert load_document(p, cfg) == "a|b"
        args, kwargs = mock_extract.call_args
        assert args[0] == b"%PDF-1.4 fake"
        assert kwargs["max_workers"] == 2
        assert kwargs["page_separator"] == "|"

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        p = tmp_path / "movie.mkv"
        p.write_bytes(b"\x00")
        with pytest.raises(UnsupportedFormatError):
            load_document(p)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentReadError):
            load_document(tmp_path / "absent.txt")

    def test_subtitle_error_propagates(self, tmp_path: Path) -> None:
        p = tmp_path / "broken.ass"
        p.write_text(_ASS_CONTENT, encoding="utf-8")
        with patch("wordlens.ingestion.subtitles.pysubs2.SSAFile.from_string", side_effect=ValueError("bad")):
            with pytest.raises(SubtitleParseError):
                load_document(p)


class TestDecodeText:
    def test_utf8(self) -> None:
        assert decode_text("naïve café — ok".encode("utf-8")) == "naïve café — ok"

    def test_legacy_encoding(self) -> None:
        text = (
            "Le café était fermé, alors nous sommes allés à la pâtisserie près de l'église. "
            "Là, nous avons goûté des éclairs et une crème brûlée délicieuse. "
        ) * 4
        assert "café" in decode_text(text.encode("cp1252"))
