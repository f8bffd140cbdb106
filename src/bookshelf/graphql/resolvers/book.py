from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..context import get_store_from_info

if TYPE_CHECKING:
    from ...store import BookRecord
    from ..types.author import Author
    from ..types.book import Book, BookNotFound

logger = get_logger(__name__)


def book_from_record(record: BookRecord) -> Book:
    """Convert a store record to the GraphQL Book type."""
    from ..types.book import Book as BookType

    return BookType(id=record.id, name=record.name, author_id=record.author_id)


# Query resolvers
async def resolve_book_by_id(info: strawberry.Info, id: int | None) -> Book | None:
    """Resolve a single book by id. Null when ``id`` is omitted or unknown."""
    store = get_store_from_info(info)

    record = store.get_book(id)
    if record is None:
        logger.info("Book not found", book_id=id)
        return None

    return book_from_record(record)


async def resolve_books(info: strawberry.Info) -> list[Book]:
    """Resolve every book in insertion order."""
    store = get_store_from_info(info)
    return [book_from_record(record) for record in store.list_books()]


# Field resolvers
async def resolve_book_author(book: Book, info: strawberry.Info) -> Author | None:
    """Resolve the author referenced by ``book.author_id``."""
    from .author import author_from_record

    store = get_store_from_info(info)

    record = store.get_author(book.author_id)
    if record is None:
        return None

    return author_from_record(record)


# Mutation resolvers
async def add_book(info: strawberry.Info, name: str, author_id: int) -> Book:
    """Append a new book. ``author_id`` is not checked against existing authors."""
    store = get_store_from_info(info)
    return book_from_record(store.add_book(name=name, author_id=author_id))


async def update_book(
    info: strawberry.Info, id: int, name: str, author_id: int
) -> Book | BookNotFound:
    """Overwrite a book's name and author, or report that it does not exist."""
    store = get_store_from_info(info)

    record = store.update_book(id, name=name, author_id=author_id)
    if record is None:
        from ..types.book import BookNotFound as BookNotFoundType

        return BookNotFoundType(id=id)

    return book_from_record(record)


async def delete_book(info: strawberry.Info, id: int | None) -> Book | None:
    """Remove a book and return it. Null when nothing matched."""
    store = get_store_from_info(info)

    record = store.delete_book(id)
    if record is None:
        return None

    return book_from_record(record)
