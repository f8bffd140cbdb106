from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info
from .book import book_from_record

if TYPE_CHECKING:
    from ...store import AuthorRecord
    from ..types.author import Author
    from ..types.book import Book

logger = get_logger(__name__)


def author_from_record(record: AuthorRecord) -> Author:
    """Convert a store record to the GraphQL Author type."""
    from ..types.author import Author as AuthorType

    return AuthorType(id=record.id, name=record.name)


# Query resolvers
async def resolve_author_by_id(info: strawberry.Info, id: int | None) -> Author | None:
    """Resolve a single author by id. Null when ``id`` is omitted or unknown."""
    store = get_store_from_info(info)

    record = store.get_author(id)
    if record is None:
        logger.info("Author not found", author_id=id)
        return None

    return author_from_record(record)


async def resolve_authors(info: strawberry.Info) -> list[Author]:
    """Resolve every author in insertion order."""
    store = get_store_from_info(info)
    return [author_from_record(record) for record in store.list_authors()]


# Field resolvers
async def resolve_author_books(author: Author, info: strawberry.Info) -> list[Book]:
    """Resolve the books whose ``author_id`` equals ``author.id``."""
    store = get_store_from_info(info)
    return [book_from_record(record) for record in store.books_by_author(author.id)]


# Mutation resolvers
async def add_author(info: strawberry.Info, name: str) -> Author:
    """Append a new author."""
    store = get_store_from_info(info)
    return author_from_record(store.add_author(name=name))


async def delete_author(info: strawberry.Info, id: int) -> Author | None:
    """Remove an author and return it. Books by this author are left in place."""
    store = get_store_from_info(info)

    record = store.delete_author(id)
    if record is None:
        return None

    return author_from_record(record)
