"""Search predicates: one pure function per filter group, combined with AND.

A document field that is None only satisfies its predicate when the matching
request constraint is also absent or empty. A present constraint never
matches a missing field.
"""

from datetime import datetime
from typing import Optional

from docstore.core.models import Document, SearchRequest


def matches_title_prefixes(title: Optional[str], prefixes: Optional[list[str]]) -> bool:
    """True if no prefixes are given, or the title starts with any of them."""
    if not prefixes:
        return True
    if title is None:
        return False
    return any(title.startswith(p) for p in prefixes)


def matches_contains_contents(content: Optional[str], needles: Optional[list[str]]) -> bool:
    """True if no needles are given, or the content contains every one of them."""
    if not needles:
        return True
    if content is None:
        return False
    return all(n in content for n in needles)


def matches_author_ids(author_id: Optional[str], author_ids: Optional[list[str]]) -> bool:
    """True if no author ids are given, or the list contains author_id."""
    if not author_ids:
        return True
    if author_id is None:
        return False
    return author_id in author_ids


def is_within_date_range(
    created: Optional[datetime],
    created_from: Optional[datetime],
    created_to: Optional[datetime],
    ) -> bool:
    """True if created lies in [created_from, created_to]; either bound may be None."""
    if created is None:
        return created_from is None and created_to is None
    return ((created_from is None or created >= created_from)
            and (created_to is None or created <= created_to))


def matches(doc: Document, request: SearchRequest) -> bool:
    """Return True if doc satisfies all four predicate groups of request."""
    author_id = doc.author.id if doc.author is not None else None
    return (
        matches_title_prefixes(doc.title, request.title_prefixes)
        and matches_contains_contents(doc.content, request.contains_contents)
        and matches_author_ids(author_id, request.author_ids)
        and is_within_date_range(doc.created, request.created_from, request.created_to)
    )
