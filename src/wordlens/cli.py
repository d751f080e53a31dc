"""WordLens CLI entry point.

``wordlens text`` prints the normalized text of a subtitle, PDF or plain
text document.  ``wordlens words`` scans highlighted HTML for encoded
identifiers and shows the aggregated word table.  Every ``WordLensError``
is shown as a red panel on stderr with exit code 1, never as a traceback.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from wordlens.annotations.aggregator import aggregate
from wordlens.annotations.markup import extract_identifiers
from wordlens.annotations.table import COLUMNS, export_table, sort_records
from wordlens.config import load_config
from wordlens.errors import DocumentReadError, DocumentWriteError, WordLensError
from wordlens.ingestion.documents import SUPPORTED_TYPES, document_type, load_document

app = typer.Typer(
    name="wordlens",
    help="WordLens — Normalize documents to text and tabulate highlighted words.",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

_VALID_MARKUP_EXTS = {".html", ".htm"}

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", dir_okay=False, help="JSON config file (default: $WORDLENS_CONFIG or built-ins)."),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", help="Enable debug logging.")]


def _input_error(message: str) -> None:
    err_console.print(Panel(message, title="[red]Input Error[/red]", border_style="red"))
    raise typer.Exit(1)


def _check_exists(path: Path) -> None:
    if not path.exists():
        _input_error(
            f"File not found: [bold]{path}[/bold]\n"
            f"Check that the path is correct and the file is accessible."
        )


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def text(
    document: Annotated[
        Path,
        typer.Argument(dir_okay=False, resolve_path=True, help="Document (ASS, SSA, SRT, VTT, TXT or PDF)."),
    ],
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", dir_okay=False, resolve_path=True, help="Write text here instead of stdout."),
    ] = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Print the normalized text of a document."""
    _setup_logging(verbose)
    if document_type(document) not in SUPPORTED_TYPES:
        _input_error(
            f"Unsupported document format: [bold]{document.suffix}[/bold]\n"
            f"Supported formats: {', '.join(sorted(SUPPORTED_TYPES))}"
        )
    _check_exists(document)

    try:
        settings = load_config(config)
        content = load_document(document, settings)
        if output is not None:
            try:
                output.write_text(content, encoding="utf-8")
            except OSError as e:
                raise DocumentWriteError(output, str(e)) from e
            console.print(f"[green]Wrote {len(content)} characters to [dim]{output}[/dim]")
        else:
            typer.echo(content, nl=False)
    except WordLensError as e:
        err_console.print(Panel(str(e), title="[red]Document Error[/red]", border_style="red"))
        raise typer.Exit(1)


@app.command()
def words(
    markup: Annotated[
        Path,
        typer.Argument(dir_okay=False, resolve_path=True, help="Highlighted HTML document."),
    ],
    sort: Annotated[
        Optional[str],
        typer.Option("--sort", "-s", help=f"Sort column: {', '.join(COLUMNS)}."),
    ] = None,
    ascending: Annotated[bool, typer.Option("--ascending", help="Sort ascending instead of descending.")] = False,
    export: Annotated[
        Optional[Path],
        typer.Option("--export", "-e", dir_okay=False, resolve_path=True, help="Also write the table as JSON."),
    ] = None,
    config: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Aggregate highlighted words in an HTML document into a table."""
    _setup_logging(verbose)
    if markup.suffix.lower() not in _VALID_MARKUP_EXTS:
        _input_error(
            f"Unsupported markup format: [bold]{markup.suffix}[/bold]\n"
            f"Supported formats: {', '.join(sorted(_VALID_MARKUP_EXTS))}"
        )
    _check_exists(markup)
    if sort is not None and sort not in COLUMNS:
        _input_error(f"Unknown sort column: [bold]{sort}[/bold]\nValid columns: {', '.join(COLUMNS)}")

    try:
        settings = load_config(config)
        try:
            html = markup.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise DocumentReadError(markup, str(e)) from e

        table = aggregate(extract_identifiers(html, prefix=settings.class_prefix))
        column = sort or settings.default_sort
        descending = False if ascending else settings.default_descending
        rows = sort_records(table, column=column, descending=descending)

        view = Table(title=f"Highlighted words in {escape(markup.name)}")
        for name in COLUMNS:
            view.add_column(name.capitalize(), justify="right" if name in ("index", "count") else "left")
        for r in rows:
            view.add_row(
                str(r.index),
                escape(r.word),
                escape(r.lexeme),
                str(r.count),
                escape(r.rank or ""),
                escape(r.frequency or ""),
            )
        console.print(view)
        console.print(f"[dim]{len(rows)} distinct words, {sum(r.count for r in rows)} occurrences[/dim]")

        if export is not None:
            try:
                export_table(rows, export)
            except OSError as e:
                raise DocumentWriteError(export, str(e)) from e
            console.print(f"[green]Table exported: [dim]{export.name}[/dim]")
    except WordLensError as e:
        err_console.print(Panel(str(e), title="[red]Document Error[/red]", border_style="red"))
        raise typer.Exit(1)
