"""Document loading: routes a file to the right normalizer by extension.

``ass``/``ssa`` go through the subtitle renderer, ``pdf`` through the page
extractor, and ``srt``/``vtt``/``txt`` are decoded and passed through
untouched.  Text files are decoded with the encoding charset-normalizer
considers most likely, falling back to UTF-8 when it has no opinion.
"""

from __future__ import annotations

import logging
from pathlib import Path

from charset_normalizer import from_bytes

from wordlens.config import WordLensConfig
from wordlens.errors import DocumentReadError, UnsupportedFormatError
from wordlens.ingestion.pdf import extract_pdf_text
from wordlens.ingestion.subtitles import ass_to_text

logger = logging.getLogger(__name__)

SUBTITLE_TYPES: frozenset[str] = frozenset({"ass", "ssa"})
PASS_THROUGH_TYPES: frozenset[str] = frozenset({"srt", "vtt", "txt"})
SUPPORTED_TYPES: frozenset[str] = SUBTITLE_TYPES | PASS_THROUGH_TYPES | {"pdf"}


def document_type(path: Path) -> str:
    """Return the lowercased extension of *path* without the dot."""
    return path.suffix.lower().lstrip(".")


def decode_text(data: bytes, source: Path | None = None) -> str:
    """Decode *data* using the best encoding charset-normalizer detects."""
    best = from_bytes(data).best()
    if best is None:
        logger.warning(
            "%s: encoding detection failed, decoding as UTF-8",
            source.name if source else "<bytes>",
        )
        return data.decode("utf-8", errors="replace")
    return str(best)


def normalize_document(
    data: bytes,
    doc_type: str,
    config: WordLensConfig | None = None,
    source: Path | None = None,
) -> str:
    """Turn raw document bytes of type *doc_type* into normalized text."""
    config = config or WordLensConfig()
    name = source or Path(f"<{doc_type}>")

    if doc_type == "pdf":
        return extract_pdf_text(
            data,
            max_workers=config.pdf_max_workers,
            page_separator=config.pdf_page_separator,
            source=name,
        )
    if doc_type not in SUPPORTED_TYPES:
        raise UnsupportedFormatError(name, SUPPORTED_TYPES)

    text = decode_text(data, name)
    if doc_type in SUBTITLE_TYPES:
        return ass_to_text(text, source=name.name)
    return text


def load_document(path: Path, config: WordLensConfig | None = None) -> str:
    """Read *path* and return its normalized text.

    Raises
    ------
    UnsupportedFormatError
        If the extension is not one of :data:`SUPPORTED_TYPES`.
    DocumentReadError
        If the file cannot be read.
    SubtitleParseError
        If an ASS/SSA file is malformed.
    """
    doc_type = document_type(path)
    if doc_type not in SUPPORTED_TYPES:
        raise UnsupportedFormatError(path, SUPPORTED_TYPES)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise DocumentReadError(path, str(exc)) from exc
    logger.debug("%s: loaded %d bytes as %s", path.name, len(data), doc_type)
    return normalize_document(data, doc_type, config, source=path)
