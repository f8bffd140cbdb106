"""Record types held by the in-memory library store."""

from dataclasses import dataclass


@dataclass
class AuthorRecord:
    """An author entry."""

    id: int
    name: str


@dataclass
class BookRecord:
    """A book entry. ``author_id`` is not checked against existing authors."""

    id: int
    name: str
    author_id: int
