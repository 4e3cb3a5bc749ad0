"""Value models for stored documents and search requests"""

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict


def _as_utc(value: datetime) -> datetime:
    """Read naive timestamps as UTC so every stored or queried instant is comparable."""
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class Author(BaseModel):
    """Author of a document; treated as an immutable value once stored."""
    id:   Optional[str] = None
    name: Optional[str] = None


class Document(BaseModel):
    """A stored document. Every field is optional; id is assigned on first save."""
    model_config = ConfigDict(validate_assignment=True)

    id:      Optional[str] = None
    title:   Optional[str] = None
    content: Optional[str] = None
    author:  Optional[Author] = None
    created: Optional[UtcDatetime] = None    # never touched by the store


class SearchRequest(BaseModel):
    """Search filters; absent or empty fields place no constraint on that dimension."""
    model_config = ConfigDict(validate_assignment=True)

    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[UtcDatetime] = None
    created_to:        Optional[UtcDatetime] = None
