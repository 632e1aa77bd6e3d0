import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich.markup import escape
from rich import box

from catalog.book import BookRecord
from catalog.config import settings
from catalog.library import OrderedCatalog
from catalog.loader import LoadReport, RecordFormatError, load_catalog, parse_record_line
from catalog.ui_helpers import set_output_mode, print_book_result, print_load_result

APP_NAME = settings.app_name

logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING))

console = Console()


def _load(data_file: str) -> LoadReport:
    """Load the data file into a fresh catalog; a missing file leaves it empty."""
    try:
        return load_catalog(data_file)
    except FileNotFoundError:
        typer.echo(f"File Not Found: {data_file}", err=True)
        return LoadReport(catalog=OrderedCatalog())


def _not_found(name: str) -> str:
    return f'Book "{name}" not found.'


# --- Typer CLI Application ---
app = typer.Typer(help=f"{APP_NAME} CLI")

@app.callback()
def _global_options(
    ctx: typer.Context,
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    data_file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="Data file with name,isbn,year-month-day lines",
    ),
):
    """Global options for the CLI (output mode, data file)."""
    if output:
        set_output_mode(output)
    ctx.obj = {"data_file": data_file or settings.data_file}

@app.command("show")
def cli_show(ctx: typer.Context):
    """Look up the showcase titles, then print the first book by name."""
    catalog = _load(ctx.obj["data_file"]).catalog
    for name in settings.showcase_titles:
        print_book_result(catalog.lookup(name), _not_found(name))
    print_book_result(catalog.find_minimum(), "No books in catalog.")

@app.command("find")
def cli_find(ctx: typer.Context, name: str):
    """Find a book by its exact (case-sensitive) name."""
    catalog = _load(ctx.obj["data_file"]).catalog
    print_book_result(catalog.lookup(name), _not_found(name))

@app.command("min")
def cli_min(ctx: typer.Context):
    """Show the book whose name sorts first."""
    catalog = _load(ctx.obj["data_file"]).catalog
    print_book_result(catalog.find_minimum(), "No books in catalog.")

@app.command("load")
def cli_load(ctx: typer.Context):
    """Load the data file and report inserted, duplicate and skipped lines."""
    print_load_result(_load(ctx.obj["data_file"]))


# --- Interactive menu ---
def find(catalog: OrderedCatalog) -> None:
    name = Prompt.ask("Book name to look up")
    book = catalog.lookup(name)
    if book:
        console.print(Panel.fit(
            f"[bold]ISBN:[/] {escape(book.isbn)}\n"
            f"[bold]Date:[/] {book.date}",
            title=f"🔍 {escape(book.name)}",
            border_style="green"
        ))
    else:
        console.print(f"[yellow]⚠️ {escape(_not_found(name))}[/]")

def minimum(catalog: OrderedCatalog) -> None:
    book = catalog.find_minimum()
    if book:
        console.print(Panel.fit(
            f"[bold]ISBN:[/] {escape(book.isbn)}\n"
            f"[bold]Date:[/] {book.date}",
            title=f"🔤 {escape(book.name)}",
            border_style="blue"
        ))
    else:
        console.print("[yellow]No books in catalog.[/]")

def add(catalog: OrderedCatalog) -> None:
    """Insert a record for this session only; nothing is written back."""
    line = Prompt.ask("Record (name,isbn,year-month-day)")
    try:
        record: BookRecord = parse_record_line(line)
    except RecordFormatError as e:
        console.print(f"[red]❌ {escape(str(e))}[/]")
        return
    if catalog.insert(record):
        console.print(f"[green]✅ Added [bold]{escape(record.name)}[/][/]")
    else:
        console.print(f"[yellow]⚠️ A book named [bold]{escape(record.name)}[/] already exists.[/]")

def stats(catalog: OrderedCatalog) -> None:
    console.print(Panel.fit(
        f"[bold]Total Books:[/] {len(catalog)}\n"
        f"[bold]Tree Depth:[/] {catalog.depth()}",
        title="📊 Stats",
        border_style="blue"
    ))

def run_menu(data_file: Optional[str] = None) -> None:
    """Simple interactive menu over a catalog loaded once for the session."""
    catalog = _load(data_file or settings.data_file).catalog
    actions = {"1": find, "2": minimum, "3": add, "4": stats}

    def render_menu() -> None:
        menu_items = [
            ("1", "Find a book by name", "🔎"),
            ("2", "Show the first book by name", "🔤"),
            ("3", "Add a book (this session)", "➕"),
            ("4", "Show stats", "📊"),
            ("0", "Exit", "🚪"),
        ]

        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label, icon in menu_items:
            table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

        console.print(Panel(
            table,
            title=APP_NAME,
            border_style="cyan",
            box=box.HEAVY,
            padding=(1, 2),
        ))

    while True:
        render_menu()
        choice = Prompt.ask("Choose an option", choices=["1", "2", "3", "4", "0"], default="1").strip()
        if choice == "0":
            console.print("[green]Goodbye![/]")
            break
        actions[choice](catalog)
        print()

if __name__ == "__main__":
    if len(sys.argv) > 1:
        app()
    else:
        run_menu()
