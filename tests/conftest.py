"""Root test configuration: shared document fixtures"""

from datetime import datetime, timezone

import pytest

from docstore.core.models import Author, Document


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture(name="java_doc")
def java_doc_fixture():
    """An unsaved document about Java, created 2023-01-01."""
    return Document(
        title="Java Programming",
        content="Learn Java programming",
        author=Author(id="1", name="John Doe"),
        created=utc(2023, 1, 1),
    )


@pytest.fixture(name="python_doc")
def python_doc_fixture():
    """An unsaved document about Python, created 2023-02-01."""
    return Document(
        title="Python Basics",
        content="Introduction to Python",
        author=Author(id="2", name="Jane Smith"),
        created=utc(2023, 2, 1),
    )
