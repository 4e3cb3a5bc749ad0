"""Unique identifier generation for stored documents"""

from uuid import uuid4


def generate_id() -> str:
    """Return a random UUID4 string (36 chars, no ordering guarantee)."""
    return str(uuid4())
