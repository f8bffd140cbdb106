"""
In-memory library store.

Books and authors live in two insertion-ordered maps keyed by id. Every
read and write goes through a single lock, so concurrent mutations are
serialized and id allocation never hands out the same id twice.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from ..logging import get_logger
from .models import AuthorRecord, BookRecord

logger = get_logger(__name__)


class LibraryStore:
    """Process-local store for books and authors.

    Ids come from monotonic per-collection counters and are never reused,
    including after deletions. Records are returned by reference: callers
    see later in-place updates.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._books: dict[int, BookRecord] = {}
        self._authors: dict[int, AuthorRecord] = {}
        self._next_book_id = 1
        self._next_author_id = 1

    # Books
    def get_book(self, book_id: int | None) -> BookRecord | None:
        if book_id is None:
            return None
        with self._lock:
            return self._books.get(book_id)

    def list_books(self) -> list[BookRecord]:
        with self._lock:
            return list(self._books.values())

    def books_by_author(self, author_id: int) -> list[BookRecord]:
        """Return books whose ``author_id`` matches, in collection order."""
        with self._lock:
            return [book for book in self._books.values() if book.author_id == author_id]

    def add_book(self, name: str, author_id: int) -> BookRecord:
        with self._lock:
            book = BookRecord(id=self._next_book_id, name=name, author_id=author_id)
            self._books[book.id] = book
            self._next_book_id += 1

        logger.info("Book added", book_id=book.id, author_id=author_id)
        return book

    def update_book(self, book_id: int, name: str, author_id: int) -> BookRecord | None:
        """Overwrite a book in place. Returns None when no book has ``book_id``."""
        with self._lock:
            book = self._books.get(book_id)
            if book is None:
                logger.info("Book not found for update", book_id=book_id)
                return None

            book.name = name
            book.author_id = author_id

        logger.info("Book updated", book_id=book_id, author_id=author_id)
        return book

    def delete_book(self, book_id: int | None) -> BookRecord | None:
        """Remove a book. A missing or unknown id leaves the store untouched."""
        if book_id is None:
            return None
        with self._lock:
            book = self._books.pop(book_id, None)

        if book is None:
            logger.info("Book not found for delete", book_id=book_id)
        else:
            logger.info("Book deleted", book_id=book_id)
        return book

    # Authors
    def get_author(self, author_id: int | None) -> AuthorRecord | None:
        if author_id is None:
            return None
        with self._lock:
            return self._authors.get(author_id)

    def list_authors(self) -> list[AuthorRecord]:
        with self._lock:
            return list(self._authors.values())

    def add_author(self, name: str) -> AuthorRecord:
        with self._lock:
            author = AuthorRecord(id=self._next_author_id, name=name)
            self._authors[author.id] = author
            self._next_author_id += 1

        logger.info("Author added", author_id=author.id)
        return author

    def delete_author(self, author_id: int) -> AuthorRecord | None:
        """Remove an author. Books pointing at it keep their ``author_id``."""
        with self._lock:
            author = self._authors.pop(author_id, None)

        if author is None:
            logger.info("Author not found for delete", author_id=author_id)
        else:
            logger.info("Author deleted", author_id=author_id)
        return author

    # Bulk
    def load(self, authors: Iterable[AuthorRecord], books: Iterable[BookRecord]) -> None:
        """Insert records with their own ids and move the counters past them.

        Nothing is inserted unless every record passes the id checks.

        Raises:
            ValueError: If an id is already in the store or repeats within the batch
        """
        authors = list(authors)
        books = list(books)

        with self._lock:
            _check_new_ids("author", [a.id for a in authors], self._authors)
            _check_new_ids("book", [b.id for b in books], self._books)

            for author in authors:
                self._authors[author.id] = author
                self._next_author_id = max(self._next_author_id, author.id + 1)

            for book in books:
                self._books[book.id] = book
                self._next_book_id = max(self._next_book_id, book.id + 1)

    def clear(self) -> None:
        """Drop every record. Counters are kept so ids stay unique."""
        with self._lock:
            self._books.clear()
            self._authors.clear()

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {"books": len(self._books), "authors": len(self._authors)}


def _check_new_ids(label: str, ids: list[int], existing: dict[int, object]) -> None:
    seen: set[int] = set()
    for record_id in ids:
        if record_id in existing or record_id in seen:
            raise ValueError(f"Duplicate {label} id {record_id}")
        seen.add(record_id)
