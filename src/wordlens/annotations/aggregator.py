"""Fold a document's highlight identifiers into one record per lexeme.

The first occurrence of a lexeme fixes its word, rank, frequency and index;
later occurrences only bump ``count``.  The result is an explicit
:class:`AnnotationTable` handed to whoever presents it, never shared state.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Iterator, Optional

from wordlens.annotations.decoder import NotAnnotated, decode_identifier
from wordlens.models import AnnotationRecord

logger = logging.getLogger(__name__)

UNHIGHLIGHTED_SUFFIX = "none_none"


class AnnotationTable:
    """Aggregated annotation records, keyed by lexeme in first-seen order."""

    def __init__(self, records: Iterable[AnnotationRecord] = ()) -> None:
        self._records: dict[str, AnnotationRecord] = {r.lexeme: r for r in records}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[AnnotationRecord]:
        return iter(self._records.values())

    def __contains__(self, lexeme: object) -> bool:
        return lexeme in self._records

    def get(self, lexeme: str) -> Optional[AnnotationRecord]:
        return self._records.get(lexeme)

    @property
    def records(self) -> list[AnnotationRecord]:
        return list(self._records.values())

    def without(self, lexeme: str) -> "AnnotationTable":
        return AnnotationTable(r for r in self._records.values() if r.lexeme != lexeme)

    def unhighlight(self, old_identifier: str, new_identifier: str) -> "AnnotationTable":
        """Return the table after an element's class changed from *old* to *new*.

        Only a change to a class ending in ``none_none`` removes anything; the
        record removed is the one whose lexeme matches the old identifier.
        """
        if not new_identifier.endswith(UNHIGHLIGHTED_SUFFIX):
            return self
        decoded = decode_identifier(old_identifier)
        if isinstance(decoded, NotAnnotated) or decoded.lexeme not in self._records:
            return self
        logger.debug("unhighlighted %r", decoded.lexeme)
        return self.without(decoded.lexeme)


def aggregate(identifiers: Iterable[str]) -> AnnotationTable:
    """Decode *identifiers* in document order and count each lexeme.

    Returns
    -------
    AnnotationTable
        One record per distinct lexeme.  ``index`` is the 1-based position of
        the lexeme among distinct lexemes; ``rank``/``frequency`` come from the
        first occurrence and stay ``None`` if it carried none.
    """
    records: dict[str, AnnotationRecord] = {}
    next_index = 1
    skipped = 0

    for identifier in identifiers:
        decoded = decode_identifier(identifier)
        if isinstance(decoded, NotAnnotated):
            skipped += 1
            continue

        existing = records.get(decoded.lexeme)
        if existing is not None:
            records[decoded.lexeme] = replace(existing, count=existing.count + 1)
            continue

        records[decoded.lexeme] = AnnotationRecord(
            lexeme=decoded.lexeme,
            word=decoded.word,
            rank=decoded.rank,
            frequency=decoded.frequency,
            count=1,
            index=next_index,
        )
        next_index += 1

    logger.debug("aggregated %d lexemes, skipped %d identifiers", len(records), skipped)
    return AnnotationTable(records.values())
