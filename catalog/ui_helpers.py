import os
import json
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.markup import escape

from catalog.book import BookRecord
from catalog.loader import LoadReport

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "CATALOG_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
    # Invalid values are ignored; the current mode stays in effect

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, "plain").lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_book_result(book: Optional[BookRecord], missing_message: str) -> None:
    """Print a single record in the current output mode.
    - plain: the record's own three-line rendering, or ``missing_message``
    - json: the record as an object, or null
    - rich: a Panel
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(book.to_dict() if book else None, ensure_ascii=False))
        return

    if book is None:
        print(missing_message)
        return

    if mode == "rich":
        content = (
            f"[bold]ISBN:[/] {escape(book.isbn)}\n"
            f"[bold]Date:[/] {book.date}"
        )
        _console.print(Panel.fit(content, title=f"📖 {escape(book.name)}", border_style="blue"))
    else:
        print(book)

def print_load_result(report: LoadReport) -> None:
    """Print the outcome of loading a data file."""
    mode = get_output_mode()
    total = len(report.catalog)

    if mode == "json":
        payload = {
            "inserted": report.inserted,
            "duplicates": report.duplicates,
            "skipped": [
                {"line_number": e.line_number, "line": e.line, "error": str(e)}
                for e in report.skipped
            ],
            "total_books": total,
        }
        print(json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="📚 Load Summary", header_style="bold cyan")
        table.add_column("Metric", style="magenta")
        table.add_column("Count", justify="right")
        table.add_row("Inserted", str(report.inserted))
        table.add_row("Duplicates", str(report.duplicates))
        table.add_row("Skipped", str(len(report.skipped)))
        table.add_row("Total Books", str(total))
        _console.print(table)
        for e in report.skipped:
            _console.print(f"[yellow]⚠️  {escape(str(e))}[/]")
    else:
        print(f"Inserted: {report.inserted}")
        print(f"Duplicates: {report.duplicates}")
        print(f"Skipped: {len(report.skipped)}")
        for e in report.skipped:
            print(f"  {e}")
        print(f"Total Books: {total}")
