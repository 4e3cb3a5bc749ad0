"""CLI command implementations"""

import logging
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from docstore.config import Settings, load_config
from docstore.core.models import SearchRequest
from docstore.core.seed import load_documents, seed_store
from docstore.crud.memory_repo import DocumentStore


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level)
    return settings


def _store(settings: Settings) -> DocumentStore:
    """Build a fresh store seeded from settings.data_file."""
    if not settings.data_file:
        _fail("No data file. Pass --data or set DOCSTORE_DATA_FILE.")
    try:
        documents = load_documents(settings.data_file)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))
    store = DocumentStore()
    seed_store(store, documents)
    return store


DataOpt = Annotated[Optional[str], typer.Option("--data", help="YAML file of documents to load")]


def search_cmd(
    data: DataOpt = None,
    title_prefixes: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with any of these")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains all of these")] = None,
    author_ids: Annotated[Optional[list[str]], typer.Option("--author-id", help="Author id is one of these")] = None,
    created_from: Annotated[Optional[str], typer.Option("--from", help="Earliest created timestamp (ISO-8601, UTC if no offset)")] = None,
    created_to: Annotated[Optional[str], typer.Option("--to", help="Latest created timestamp (ISO-8601, UTC if no offset)")] = None,
    ):
    """Search loaded documents; every given filter must match."""
    settings = _settings(overrides={"data_file": data})
    store = _store(settings)
    try:
        request = SearchRequest(
            title_prefixes=title_prefixes or None,
            contains_contents=contains or None,
            author_ids=author_ids or None,
            created_from=created_from,
            created_to=created_to,
        )
    except ValidationError as e:
        _fail("Invalid search filters", e)

    results = store.search(request)
    for doc in results:
        typer.echo(doc.model_dump_json())
    typer.echo(f"Found {len(results)} document(s)")


def get_cmd(
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    data: DataOpt = None,
    ):
    """Print a single document by id."""
    settings = _settings(overrides={"data_file": data})
    doc = _store(settings).find_by_id(doc_id)
    if doc is None:
        _fail(f"document '{doc_id}' not found")
    typer.echo(doc.model_dump_json())


def list_cmd(data: DataOpt = None):
    """List id and title of every loaded document."""
    settings = _settings(overrides={"data_file": data})
    for doc in _store(settings).search(SearchRequest()):
        typer.echo(f"{doc.id}\t{doc.title or ''}")
