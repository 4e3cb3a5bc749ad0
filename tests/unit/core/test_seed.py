"""Unit tests for core/seed.py"""

from datetime import datetime, timezone

import pytest

from docstore.core.models import Author, SearchRequest
from docstore.core.seed import load_documents, seed_store
from docstore.crud.memory_repo import DocumentStore


DOCS_YAML = """\
- id: doc-1
  title: Java Programming
  content: Learn Java programming
  author: {id: "1", name: John Doe}
  created: "2023-01-01T00:00:00Z"
- title: Untitled draft
"""


# --- load_documents ---

def test_load_documents_list(tmp_path):
    """A top-level list is parsed into Documents with nested authors and timestamps."""
    path = tmp_path / "docs.yaml"
    path.write_text(DOCS_YAML)
    docs = load_documents(path)
    assert len(docs) == 2
    assert docs[0].id == "doc-1"
    assert docs[0].author == Author(id="1", name="John Doe")
    assert docs[0].created == datetime(2023, 1, 1, tzinfo=timezone.utc)
    assert docs[1].id is None
    assert docs[1].author is None


def test_load_documents_mapping(tmp_path):
    """A mapping with a 'documents' key is accepted."""
    path = tmp_path / "docs.yaml"
    path.write_text("documents:\n  - title: A\n  - title: B\n")
    assert [d.title for d in load_documents(path)] == ["A", "B"]


def test_load_documents_empty_file(tmp_path):
    """An empty file yields no documents."""
    path = tmp_path / "docs.yaml"
    path.write_text("")
    assert load_documents(path) == []


def test_load_documents_missing_file(tmp_path):
    """A missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_documents(tmp_path / "nope.yaml")


def test_load_documents_invalid_yaml(tmp_path):
    """Unparseable YAML raises ValueError."""
    path = tmp_path / "docs.yaml"
    path.write_text("- [unclosed\n")
    with pytest.raises(ValueError, match="Invalid docs.yaml"):
        load_documents(path)


@pytest.mark.parametrize("text", [
    "just a string\n",
    "- 42\n",
    "docs:\n  - title: A\n",
])
def test_load_documents_malformed(tmp_path, text):
    """A scalar top level, a non-mapping entry, or a mapping without 'documents' raises ValueError."""
    path = tmp_path / "docs.yaml"
    path.write_text(text)
    with pytest.raises(ValueError):
        load_documents(path)


# --- seed_store ---

def test_seed_store_saves_in_order(tmp_path):
    """seed_store returns saved copies in input order, each with an id."""
    path = tmp_path / "docs.yaml"
    path.write_text(DOCS_YAML)
    store = DocumentStore()
    saved = seed_store(store, load_documents(path))
    assert [d.title for d in saved] == ["Java Programming", "Untitled draft"]
    assert all(d.id for d in saved)
    assert len(store.search(SearchRequest())) == 2


@pytest.mark.parametrize("text", ["documents:\n", "documents: []\n"])
def test_load_documents_empty_documents_key(tmp_path, text):
    """A 'documents' key that is null or empty yields no documents."""
    path = tmp_path / "docs.yaml"
    path.write_text(text)
    assert load_documents(path) == []
