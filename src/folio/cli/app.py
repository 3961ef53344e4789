"""Typer entry point: list, check and show the articles under a content directory."""

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from folio.core.config import FolioConfig
from folio.core.frontmatter import document_metadata
from folio.core.listing import by_category, by_tag, order_documents
from folio.core.logging import configure_logging, console
from folio.core.store import DocumentStore, load_directory
from folio.core.types import Document, ParseFailure

app = typer.Typer(name="folio", help="Folio - validate and list front-matter articles.")


@app.callback()
def main(
    log_level: str = typer.Option(None, "--log-level", help="Logging level (defaults to FOLIO_LOG_LEVEL or INFO)."),
):
    """
    Validate, order, and inspect Markdown articles with YAML front-matter.
    """
    configure_logging(log_level)


def _load_store(root: Path | None) -> DocumentStore:
    config = FolioConfig.load()
    content_dir = root if root is not None else config.paths.abs_content_dir
    try:
        result = load_directory(content_dir, pattern=config.parse.pattern, encoding=config.parse.encoding)
    except FileNotFoundError as exc:
        console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    return DocumentStore.from_batch(result)


def _print_failures(failures: list[ParseFailure]) -> None:
    for failure in failures:
        console.print(f"[bold red]✘[/bold red] {escape(failure.source)} [dim]({failure.kind})[/dim]: {escape(failure.message)}")


def _documents_table(title: str, docs: list[Document]) -> Table:
    table = Table(title=title)
    table.add_column("Order", justify="right", style="bold cyan")
    table.add_column("Title")
    table.add_column("Status")
    table.add_column("Slug", style="dim")
    for doc in docs:
        table.add_row(str(doc.menu_order), escape(doc.title), doc.post_status.value, doc.slug)
    return table


@app.command("list")
def list_documents(
    root: Path = typer.Argument(None, help="Content directory (defaults to the configured one)."),
    show_all: bool = typer.Option(False, "--all", help="Include documents that are not published."),
    category: str = typer.Option(None, "--category", help="Only documents in this category."),
    tag: str = typer.Option(None, "--tag", help="Only documents with this tag."),
):
    """
    Print the published listing, ordered by menu order.
    """
    store = _load_store(root)
    docs = order_documents(store.all()) if show_all else store.published()
    if category:
        docs = by_category(docs, category)
    if tag:
        docs = by_tag(docs, tag)

    title = "All documents" if show_all else "Published documents"
    console.print(_documents_table(title, docs))
    if store.failures:
        console.print(f"[bold yellow]{len(store.failures)} document(s) could not be parsed:[/bold yellow]")
        _print_failures(store.failures)


@app.command()
def check(
    root: Path = typer.Argument(None, help="Content directory (defaults to the configured one)."),
    strict: bool = typer.Option(False, "--strict", help="Fail when any document cannot be parsed."),
):
    """
    Parse every document and report failures.
    """
    store = _load_store(root)
    _print_failures(store.failures)
    console.print(f"{len(store)} document(s) parsed, {len(store.failures)} failure(s).")

    if len(store) == 0:
        console.print("[bold red]No documents could be parsed.[/bold red]")
        raise typer.Exit(code=1)
    if strict and store.failures:
        raise typer.Exit(code=1)
    console.print("[bold green]✔[/bold green] Content is valid." if not store.failures else "Done with failures.")


@app.command()
def show(
    slug: str = typer.Argument(..., help="Slug of the document to show."),
    root: Path = typer.Argument(None, help="Content directory (defaults to the configured one)."),
):
    """
    Print one document's front-matter and body.
    """
    store = _load_store(root)
    doc = store.get(slug)
    if doc is None:
        console.print(f"[bold red]No document with slug {slug!r}.[/bold red]")
        raise typer.Exit(code=1)

    table = Table(title=escape(doc.title), show_header=False)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    for key, value in document_metadata(doc).items():
        table.add_row(key, escape(str(value)))
    console.print(table)
    console.print(doc.body, markup=False, highlight=False)


if __name__ == "__main__":
    app()
