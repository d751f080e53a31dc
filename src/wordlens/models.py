from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DialogueEvent:
    """A single subtitle dialogue event, ready for rendering."""

    start_ms: int       # floor of the cue start in milliseconds
    end_ms: int
    text: str           # Override tags stripped, \N converted to newlines

    @property
    def merge_key(self) -> tuple[int, int]:
        return (self.start_ms, self.end_ms)


@dataclass(frozen=True)
class MergedBlock:
    """One rendered time range; text of simultaneous tracks joined by newlines."""

    start_ms: int
    end_ms: int
    text: str


@dataclass(frozen=True)
class AnnotationRecord:
    """One distinct highlighted lexeme found in a document."""

    lexeme: str
    word: str
    rank: Optional[str] = None       # Kept as encoded; no numeric validation
    frequency: Optional[str] = None
    count: int = 1
    index: int = 1                   # First-seen order among distinct lexemes, 1-based
