"""ASS/SSA subtitle normalization.

Parses ASS/SSA markup via pysubs2 into time-ordered dialogue events,
folds simultaneous cues (multi-language tracks sharing identical start and
end times) into one block, and renders the whole script as plain text with
an ``MM:SS-MM:SS`` header above every block.  Parse failures surface as
``SubtitleParseError`` and are fatal for the document being loaded.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

import pysubs2

from wordlens.errors import SubtitleParseError
from wordlens.models import DialogueEvent, MergedBlock

logger = logging.getLogger(__name__)

# Override blocks such as {\b1} or {\pos(10,10)}; stripped like any renderer would.
_OVERRIDE_BLOCK = re.compile(r"\{[^}]*\}")
_HARD_LINE_BREAK = "\\N"


def format_clock(ms: int) -> str:
    """Format *ms* as ``MM:SS``.

    Seconds are ``floor(ms / 1000) mod 60`` and minutes are
    ``floor(ms / 60000) mod 1000``; each part is zero-padded to two digits
    only when it is a single digit, so minutes past 99 print in full.
    There is no hour component.  *ms* must be non-negative.
    """
    seconds = (ms // 1000) % 60
    minutes = (ms // 60_000) % 1000
    return f"{minutes:02d}:{seconds:02d}"


def format_time_range(start_ms: int, end_ms: int) -> str:
    return f"{format_clock(start_ms)}-{format_clock(end_ms)}"


def parse_ass(raw: str, source: str = "<string>") -> list[DialogueEvent]:
    """Parse ASS/SSA markup into a sorted list of :class:`DialogueEvent`.

    Parameters
    ----------
    raw:
        Subtitle markup, already decoded to text.
    source:
        Name used in error messages (usually the file name).

    Returns
    -------
    list[DialogueEvent]
        Dialogue events ordered by ``(start_ms, end_ms)``.  The sort is
        stable, so exact duplicates keep their script order.  Comment lines
        and events whose text is empty after removing override blocks are
        dropped.

    Raises
    ------
    SubtitleParseError
        If pysubs2 rejects the markup.
    """
    try:
        subs = pysubs2.SSAFile.from_string(raw, format_="ass")
    except Exception as exc:
        raise SubtitleParseError(source, str(exc)) from exc

    events: list[DialogueEvent] = []
    for event in subs:
        if event.is_comment:
            continue
        combined = _OVERRIDE_BLOCK.sub("", event.text)
        if not combined:
            continue
        events.append(
            DialogueEvent(
                start_ms=int(event.start),
                end_ms=int(event.end),
                text=combined.replace(_HARD_LINE_BREAK, "\n"),
            )
        )

    events.sort(key=lambda e: (e.start_ms, e.end_ms))
    logger.debug("%s: parsed %d dialogue events", source, len(events))
    return events


def merge_events(events: Iterable[DialogueEvent]) -> list[MergedBlock]:
    """Fold consecutive events sharing ``(start_ms, end_ms)`` into blocks.

    *events* must already be sorted (see :func:`parse_ass`).  Texts inside a
    block are joined with newlines in input order.
    """
    blocks: list[MergedBlock] = []
    pending: list[str] = []
    previous: DialogueEvent | None = None

    for event in events:
        if previous is not None and event.merge_key == previous.merge_key:
            pending.append(event.text)
        else:
            if previous is not None:
                blocks.append(MergedBlock(previous.start_ms, previous.end_ms, "\n".join(pending)))
            pending = [event.text]
        previous = event

    if previous is not None:
        blocks.append(MergedBlock(previous.start_ms, previous.end_ms, "\n".join(pending)))

    logger.debug("merged into %d blocks", len(blocks))
    return blocks


def render_blocks(blocks: Iterable[MergedBlock]) -> str:
    """Render blocks as ``\\n<range>\\n<text>\\n`` segments, concatenated."""
    return "".join(
        f"\n{format_time_range(block.start_ms, block.end_ms)}\n{block.text}\n"
        for block in blocks
    )


def render_events(events: Iterable[DialogueEvent]) -> str:
    """Render sorted dialogue events as normalized text.

    Every distinct time range gets one header line; texts of events sharing
    that range follow it, each terminated by a newline.
    """
    return render_blocks(merge_events(events))


def ass_to_text(raw: str, source: str = "<string>") -> str:
    """Parse and render ASS/SSA markup in one step."""
    return render_events(parse_ass(raw, source))
