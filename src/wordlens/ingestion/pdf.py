"""PDF text extraction with an ordered concurrent page fan-out.

Every page is extracted on a thread pool; results are collected with
``Executor.map`` so the joined text follows page order (1..N) regardless of
which page finishes first.  Each worker thread opens its own ``PdfReader``
over the shared bytes because a reader's underlying stream is not safe to
seek from several threads at once.
"""

from __future__ import annotations

import io
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from pypdf import PdfReader
from pypdf.errors import PdfReadError

from wordlens.errors import DocumentReadError

logger = logging.getLogger(__name__)


def extract_pdf_text(
    data: bytes,
    max_workers: int = 4,
    page_separator: str = " ",
    source: Path | None = None,
) -> str:
    """Return the text of every page in *data*, joined in page order.

    Raises
    ------
    DocumentReadError
        If pypdf cannot open the document or a page fails to extract.
    """
    name = source or Path("<pdf>")
    try:
        page_count = len(PdfReader(io.BytesIO(data)).pages)
    except (PdfReadError, ValueError, OSError) as exc:
        raise DocumentReadError(name, str(exc)) from exc

    local = threading.local()

    def _page_text(page_index: int) -> str:
        reader = getattr(local, "reader", None)
        if reader is None:
            reader = local.reader = PdfReader(io.BytesIO(data))
        text = reader.pages[page_index].extract_text()
        if not text:
            logger.warning("%s: page %d yielded no text", name.name, page_index + 1)
            return ""
        return text

    try:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            page_texts = list(pool.map(_page_text, range(page_count)))
    except (PdfReadError, ValueError, OSError) as exc:
        raise DocumentReadError(name, str(exc)) from exc

    logger.debug("%s: extracted %d pages", name.name, page_count)
    return page_separator.join(page_texts)
