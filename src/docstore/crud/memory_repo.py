"""In-memory document store: upsert, id lookup, and multi-field search"""

import logging
from dataclasses import dataclass, field
from typing import Callable

from docstore.core.matching import matches
from docstore.core.models import Document, SearchRequest
from docstore.core.utils.clone import clone_document
from docstore.core.utils.ids import generate_id
from docstore.crud.repo import DocumentRepo


logger = logging.getLogger(__name__)


@dataclass
class DocumentStore(DocumentRepo):
    """Holds private copies of documents keyed by id.

    Every document passed in or handed out is cloned, so callers never share
    state with the store or with each other.
    """
    id_factory: Callable[[], str] = generate_id
    _docs: dict[str, Document] = field(default_factory=dict)

    def save(self, document: Document) -> Document:
        stored = clone_document(document)
        if stored.id is None:
            stored.id = self.id_factory()
            logger.debug("Assigned id %s to new document", stored.id)
        elif stored.id in self._docs:
            logger.debug("Replacing document %s", stored.id)
        self._docs[stored.id] = stored
        return clone_document(stored)

    def search(self, request: SearchRequest) -> list[Document]:
        results = [clone_document(d) for d in self._docs.values() if matches(d, request)]
        logger.debug("Search matched %d of %d document(s)", len(results), len(self._docs))
        return results

    def find_by_id(self, doc_id: str) -> Document | None:
        doc = self._docs.get(doc_id)
        return clone_document(doc) if doc is not None else None
