"""Presentation helpers for aggregated annotation records: sorting and export."""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
from dataclasses import asdict
from pathlib import Path
from typing import Iterable, Optional

from wordlens.models import AnnotationRecord

COLUMNS: tuple[str, ...] = ("index", "word", "lexeme", "count", "rank", "frequency")
_TEXT_COLUMNS = {"word", "lexeme"}
_NUMERIC_TEXT_COLUMNS = {"rank", "frequency"}


def _as_number(value: Optional[str]) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def sort_records(
    records: Iterable[AnnotationRecord],
    column: str = "count",
    descending: bool = True,
) -> list[AnnotationRecord]:
    """Return *records* ordered by *column*.

    ``word`` and ``lexeme`` compare case-insensitively.  ``rank`` and
    ``frequency`` compare numerically; records where the value is missing or
    not a number always go last, whichever the direction.  Ties keep their
    input order.
    """
    if column not in COLUMNS:
        raise ValueError(f"Unknown column '{column}'. Valid columns: {', '.join(COLUMNS)}")

    items = list(records)
    if column in _TEXT_COLUMNS:
        return sorted(items, key=lambda r: getattr(r, column).lower(), reverse=descending)
    if column in _NUMERIC_TEXT_COLUMNS:
        numbered = [(r, _as_number(getattr(r, column))) for r in items]
        present = sorted(
            (pair for pair in numbered if pair[1] is not None),
            key=lambda pair: pair[1],
            reverse=descending,
        )
        missing = [r for r, num in numbered if num is None]
        return [r for r, _ in present] + missing
    return sorted(items, key=lambda r: getattr(r, column), reverse=descending)


def records_to_rows(records: Iterable[AnnotationRecord]) -> list[dict]:
    """Records as dicts in column order; absent rank/frequency stay ``None``."""
    return [{col: asdict(r)[col] for col in COLUMNS} for r in records]


def export_table(records: Iterable[AnnotationRecord], path: Path) -> Path:
    """Atomically write *records* as a JSON list to *path*.

    The temp file lives next to *path* so ``os.replace`` stays on one
    filesystem.
    """
    data = json.dumps(records_to_rows(records), indent=2, ensure_ascii=False).encode("utf-8")
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".json.tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, path)
    except Exception:
        with contextlib.suppress(OSError):
            os.unlink(tmp_path)
        raise
    return path
