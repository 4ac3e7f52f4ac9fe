"""Command line interface for the sunnah library."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sunnah.config import AppConfig
from sunnah.errors import SunnahError
from sunnah.index.store import CollectionStore, get_default_store
from sunnah.ingestion.json_source import JsonRecordSource
from sunnah.library import HadithLibrary
from sunnah.models import Hadith, SearchHit
from sunnah.utils.text import snippet

console = Console()
app = typer.Typer(help="Sunnah - browse and search the major hadith collections")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _build_library(data_dir: Path | None) -> HadithLibrary:
    config = AppConfig(data_dir=data_dir)
    resolved = config.resolve_data_dir(Path.cwd())
    if resolved is None:
        return HadithLibrary(get_default_store())
    return HadithLibrary(CollectionStore(JsonRecordSource(resolved)))


def _fail(exc: SunnahError) -> NoReturn:
    console.print(f"[red]{escape(str(exc))}[/red]")
    raise typer.Exit(code=1)


def _print_hadith(item: Hadith) -> None:
    console.print(f"[bold]{escape(item.reference or f'{item.collection_id} {item.number}')}[/bold]")
    console.print(f"Book {item.chapter_number}: {escape(item.chapter_name)}")
    console.print(f"Grade: {item.grade.name.replace('_', ' ').title()} ({escape(item.grade_text or 'n/a')})")
    console.print()
    console.print(item.arabic_text, markup=False)
    console.print()
    console.print(item.english_text, markup=False)


def _print_hits(hits: List[SearchHit], limit: int) -> None:
    if not hits:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Collection")
    table.add_column("Hadith")
    table.add_column("Book")
    table.add_column("Snippet")

    for hit in hits[:limit]:
        table.add_row(
            hit.collection_name, str(hit.number), escape(hit.chapter_name), escape(snippet(hit.text))
        )

    console.print(table)
    if len(hits) > limit:
        console.print(f"Showing {limit} of {len(hits)} matches.")


DataDirOption = typer.Option(None, "--data-dir", help="Directory holding <collection>.json files")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Verbose logging")


@app.command()
def collections(
    data_dir: Path = DataDirOption,
    verbose: bool = VerboseOption,
) -> None:
    """List all collections and whether their data is loaded."""
    _setup_logging(verbose)
    library = _build_library(data_dir)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Id")
    table.add_column("Name")
    table.add_column("Author")
    table.add_column("Hadith")
    table.add_column("Core six")
    table.add_column("Loaded")

    for info in library.all_collections():
        loaded = library.hadith_count(info.id)
        table.add_row(
            info.id,
            f"{info.english_name} ({info.arabic_name})",
            info.author,
            str(info.total_hadith),
            "yes" if info.is_core_six else "",
            str(loaded) if loaded else "-",
        )
    console.print(table)


@app.command()
def chapters(
    collection: str = typer.Argument(..., help="Collection id, e.g. bukhari"),
    data_dir: Path = DataDirOption,
    verbose: bool = VerboseOption,
) -> None:
    """List the books of a collection."""
    _setup_logging(verbose)
    library = _build_library(data_dir)
    try:
        library.get_collection(collection)
    except SunnahError as exc:
        _fail(exc)

    books = library.chapters(collection)
    if not books:
        console.print(f"[yellow]No data loaded for {collection}.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Book")
    table.add_column("Name")
    table.add_column("Hadith")
    table.add_column("Range")
    for book in books:
        table.add_row(
            str(book.number),
            f"{book.english_name} ({book.arabic_name})" if book.arabic_name else book.english_name,
            str(book.hadith_count),
            f"{book.first_number}-{book.last_number}",
        )
    console.print(table)


@app.command()
def show(
    reference: str = typer.Argument(..., help="Reference such as bukhari:1 or muslim:1-5"),
    data_dir: Path = DataDirOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print one hadith or a range of hadith."""
    _setup_logging(verbose)
    library = _build_library(data_dir)
    try:
        items = library.get_range_by_reference(reference)
    except SunnahError as exc:
        _fail(exc)

    if not items:
        console.print("[yellow]No hadith in that range.[/yellow]")
        return
    for index, item in enumerate(items):
        if index:
            console.rule()
        _print_hadith(item)


@app.command()
def search(
    query: str = typer.Argument(..., help="Text to look for"),
    collection: Optional[str] = typer.Option(None, "--collection", "-c", help="Limit to one collection"),
    arabic: bool = typer.Option(False, "--arabic", help="Match Arabic text, ignoring tashkeel"),
    preprocessed: bool = typer.Option(False, "--preprocessed", help="Match the lemmatized Arabic text"),
    chapter: Optional[int] = typer.Option(None, "--chapter", help="Limit an English search to one book"),
    limit: int = typer.Option(AppConfig().search_limit, help="Number of results to display"),
    data_dir: Path = DataDirOption,
    verbose: bool = VerboseOption,
) -> None:
    """Substring search over one or all collections."""
    _setup_logging(verbose)
    if arabic and preprocessed:
        raise typer.BadParameter("Use either --arabic or --preprocessed, not both")
    if chapter is not None and (collection is None or arabic or preprocessed):
        raise typer.BadParameter("--chapter needs --collection and an English search")

    library = _build_library(data_dir)
    if collection is None:
        if arabic:
            hits = library.search_all_arabic(query)
        elif preprocessed:
            hits = library.search_all_preprocessed(query)
        else:
            hits = library.search_all(query)
    else:
        try:
            library.get_collection(collection)
        except SunnahError as exc:
            _fail(exc)
        if arabic:
            hits = library.search_arabic(query, collection)
        elif preprocessed:
            hits = library.search_preprocessed(query, collection)
        else:
            hits = library.search(query, collection, chapter)

    _print_hits(hits, max(1, limit))


@app.command()
def random(
    collection: Optional[str] = typer.Option(None, "--collection", "-c", help="Collection id"),
    chapter: Optional[int] = typer.Option(None, "--chapter", help="Book number within the collection"),
    data_dir: Path = DataDirOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print a random hadith."""
    _setup_logging(verbose)
    if chapter is not None and collection is None:
        raise typer.BadParameter("--chapter needs --collection")

    library = _build_library(data_dir)
    try:
        item = library.random_hadith(collection, chapter)
    except SunnahError as exc:
        _fail(exc)
    _print_hadith(item)


@app.command()
def daily(
    collection: str = typer.Argument(..., help="Collection id"),
    day: Optional[datetime] = typer.Option(None, "--date", formats=["%Y-%m-%d"], help="Calendar day (UTC today by default)"),
    data_dir: Path = DataDirOption,
    verbose: bool = VerboseOption,
) -> None:
    """Print the hadith of the day."""
    _setup_logging(verbose)
    library = _build_library(data_dir)
    try:
        item = library.hadith_of_the_day(collection, day.date() if day is not None else None)
    except SunnahError as exc:
        _fail(exc)
    _print_hadith(item)


@app.command()
def stats(
    collection: str = typer.Argument(..., help="Collection id"),
    data_dir: Path = DataDirOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show counts and the grade distribution of a collection."""
    _setup_logging(verbose)
    library = _build_library(data_dir)
    try:
        info = library.get_collection(collection)
    except SunnahError as exc:
        _fail(exc)

    console.print(f"[bold]{info}[/bold]")
    console.print(
        f"Loaded: {library.hadith_count(collection)} hadith in "
        f"{len(library.chapters(collection))} books"
    )
    console.print(f"English words: {library.word_count(collection)}")
    console.print(f"Arabic words: {library.arabic_word_count(collection)}")

    distribution = library.grade_distribution(collection)
    if distribution:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Grade")
        table.add_column("Hadith")
        for grade, count in sorted(distribution.items(), key=lambda pair: -pair[1]):
            table.add_row(grade.name.replace("_", " ").title(), str(count))
        console.print(table)


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
) -> None:
    """Start the read-only HTTP API."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - optional extra
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    from sunnah.web.app import app as web_app

    console.print(f"Starting web API on http://{host}:{port}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
