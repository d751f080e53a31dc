"""Decoder for highlight class identifiers.

An identifier looks like ``wdautohl_<lexeme>_<word>[_<rank>:<frequency>]``.
Spaces inside the lexeme and word are encoded as the digit ``9``; decoding
replaces every ``9`` with a space, so a word that genuinely contains a 9
cannot round-trip.  Identifiers that lack a lexeme or word are not errors,
they are simply not annotations and decode to :class:`NotAnnotated`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

FIELD_SEPARATOR = "_"
RANK_SEPARATOR = ":"
ENCODED_SPACE = "9"

# prefix, lexeme, word
_MIN_FIELDS = 3


@dataclass(frozen=True)
class DecodedAnnotation:
    lexeme: str
    word: str
    rank: Optional[str] = None
    frequency: Optional[str] = None


@dataclass(frozen=True)
class NotAnnotated:
    identifier: str
    reason: str


DecodeResult = Union[DecodedAnnotation, NotAnnotated]


def decode_field(raw: str) -> str:
    return raw.replace(ENCODED_SPACE, " ")


def decode_identifier(identifier: str) -> DecodeResult:
    """Decode one identifier into a :class:`DecodedAnnotation`.

    Fields past the rank/frequency field are ignored.  Rank and frequency are
    kept exactly as encoded (strings); a rank field without ``:`` yields a
    rank and no frequency.
    """
    fields = identifier.split(FIELD_SEPARATOR)
    if len(fields) < _MIN_FIELDS:
        return NotAnnotated(identifier, f"expected at least {_MIN_FIELDS} fields, got {len(fields)}")

    raw_lexeme, raw_word = fields[1], fields[2]
    if not raw_lexeme or not raw_word:
        return NotAnnotated(identifier, "empty lexeme or word")

    lexeme = decode_field(raw_lexeme)
    word = decode_field(raw_word)

    rank = frequency = None
    if len(fields) > _MIN_FIELDS and fields[_MIN_FIELDS]:
        parts = fields[_MIN_FIELDS].split(RANK_SEPARATOR)
        rank = parts[0]
        if len(parts) > 1:
            frequency = parts[1]

    return DecodedAnnotation(lexeme=lexeme, word=word, rank=rank, frequency=frequency)
