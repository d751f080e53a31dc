from pathlib import Path


class WordLensError(Exception):
    """Base class for all WordLens errors."""


class SubtitleParseError(WordLensError):
    def __init__(self, source: str, detail: str) -> None:
        super().__init__(
            f"Cannot parse subtitle markup from '{source}'.\n"
            f"  Cause: {detail}\n"
            f"  Check: Is the file valid ASS or SSA format?\n"
            f"  Tip: Open the file in Aegisub and re-save it to repair the [Events] section."
        )
        self.source = source
        self.detail = detail


class DocumentReadError(WordLensError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(
            f"Cannot read document '{path.name}'.\n"
            f"  Cause: {detail}\n"
            f"  Check: Does the file exist and is it readable? Is a PDF complete and not encrypted?"
        )
        self.path = path
        self.detail = detail


class UnsupportedFormatError(WordLensError):
    def __init__(self, path: Path, supported: frozenset[str]) -> None:
        super().__init__(
            f"Unsupported document format: '{path.suffix or path.name}'.\n"
            f"  Check: Supported extensions are {', '.join(sorted(supported))}."
        )
        self.path = path
        self.supported = supported


class ConfigError(WordLensError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(
            f"Cannot load configuration '{path.name}'.\n"
            f"  Cause: {detail}\n"
            f"  Check: Is the file valid JSON matching the WordLensConfig schema?"
        )
        self.path = path
        self.detail = detail


class DocumentWriteError(WordLensError):
    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(
            f"Cannot write '{path.name}'.\n"
            f"  Cause: {detail}\n"
            f"  Check: Does the destination directory exist and is it writable?"
        )
        self.path = path
        self.detail = detail
