"""Load documents from YAML and seed a store with them"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from docstore.core.models import Document
from docstore.crud.repo import DocumentRepo


logger = logging.getLogger(__name__)


def load_documents(path: str | Path) -> list[Document]:
    """Parse a YAML file into Documents.

    The top level is either a list of document mappings or a mapping with a
    'documents' list. ISO-8601 'created' strings and nested 'author' mappings
    are parsed by the model.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e

    if data is None:
        return []
    if isinstance(data, dict):
        if "documents" not in data:
            raise ValueError(f"Invalid {path.name}: expected a 'documents' list")
        data = data["documents"] or []
    if not isinstance(data, list):
        raise ValueError(f"Invalid {path.name}: expected a list of documents")

    try:
        return [Document.model_validate(item) for item in data]
    except ValidationError as e:
        raise ValueError(f"Invalid document in {path.name}: {e}") from e


def seed_store(store: DocumentRepo, documents: list[Document]) -> list[Document]:
    """Save each document into store; return the saved copies in input order."""
    saved = [store.save(doc) for doc in documents]
    logger.info("Seeded %d document(s)", len(saved))
    return saved
