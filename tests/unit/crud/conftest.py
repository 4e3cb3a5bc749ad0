"""Shared fixtures for crud unit tests"""

import pytest

from docstore.crud.memory_repo import DocumentStore


@pytest.fixture(name="store")
def store_fixture():
    """A fresh, empty in-memory store."""
    return DocumentStore()
