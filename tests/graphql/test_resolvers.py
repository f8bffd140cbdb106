"""
Unit tests for book and author resolver functions
"""

from unittest.mock import MagicMock

import pytest
import strawberry

from bookshelf.graphql.resolvers.author import (
    add_author,
    delete_author,
    resolve_author_books,
    resolve_author_by_id,
    resolve_authors,
)
from bookshelf.graphql.resolvers.book import (
    add_book,
    delete_book,
    resolve_book_author,
    resolve_book_by_id,
    resolve_books,
    update_book,
)
from bookshelf.graphql.types.author import Author
from bookshelf.graphql.types.book import Book, BookNotFound


class TestBookQueries:
    """Tests for book query resolvers."""

    @pytest.mark.asyncio
    async def test_book_by_id_returns_found_book(self, mock_info):
        result = await resolve_book_by_id(mock_info, 2)

        assert result == Book(id=2, name="Name2", author_id=2)

    @pytest.mark.asyncio
    async def test_book_by_id_not_found(self, mock_info):
        assert await resolve_book_by_id(mock_info, 99) is None

    @pytest.mark.asyncio
    async def test_book_by_id_without_id(self, mock_info):
        assert await resolve_book_by_id(mock_info, None) is None

    @pytest.mark.asyncio
    async def test_books_in_insertion_order(self, mock_info):
        result = await resolve_books(mock_info)

        assert [b.id for b in result] == [1, 2, 3, 4]
        assert all(isinstance(b, Book) for b in result)


class TestBookFieldResolvers:
    """Tests for Book.author."""

    @pytest.mark.asyncio
    async def test_book_author(self, mock_info):
        book = Book(id=1, name="Name1", author_id=1)

        result = await resolve_book_author(book, mock_info)

        assert result == Author(id=1, name="Author1")

    @pytest.mark.asyncio
    async def test_book_author_dangling_reference(self, mock_info):
        book = Book(id=4, name="Orphan", author_id=9)

        assert await resolve_book_author(book, mock_info) is None


class TestBookMutations:
    """Tests for book mutation resolvers."""

    @pytest.mark.asyncio
    async def test_add_book(self, mock_info, store):
        result = await add_book(mock_info, "X", 1)

        assert result == Book(id=5, name="X", author_id=1)
        assert len(store.list_books()) == 5

    @pytest.mark.asyncio
    async def test_update_book(self, mock_info, store):
        result = await update_book(mock_info, 1, "Renamed", 2)

        assert result == Book(id=1, name="Renamed", author_id=2)
        assert store.get_book(1).name == "Renamed"

    @pytest.mark.asyncio
    async def test_update_book_not_found(self, mock_info):
        result = await update_book(mock_info, 99, "Renamed", 2)

        assert isinstance(result, BookNotFound)
        assert not isinstance(result, Book)
        assert result.id == 99
        assert result.message == "Book not found"

    @pytest.mark.asyncio
    async def test_delete_book(self, mock_info, store):
        result = await delete_book(mock_info, 3)

        assert result == Book(id=3, name="Name3", author_id=1)
        assert store.get_book(3) is None

    @pytest.mark.asyncio
    async def test_delete_book_not_found_keeps_last_entry(self, mock_info, store):
        assert await delete_book(mock_info, 99) is None
        assert store.list_books()[-1].id == 4


class TestAuthorResolvers:
    """Tests for author resolvers."""

    @pytest.mark.asyncio
    async def test_author_by_id(self, mock_info):
        assert await resolve_author_by_id(mock_info, 1) == Author(id=1, name="Author1")

    @pytest.mark.asyncio
    async def test_author_by_id_not_found(self, mock_info):
        assert await resolve_author_by_id(mock_info, 99) is None

    @pytest.mark.asyncio
    async def test_authors(self, mock_info):
        result = await resolve_authors(mock_info)

        assert [a.name for a in result] == ["Author1", "Author2"]

    @pytest.mark.asyncio
    async def test_author_books(self, mock_info):
        result = await resolve_author_books(Author(id=1, name="Author1"), mock_info)

        assert [b.id for b in result] == [1, 3]
        assert all(b.author_id == 1 for b in result)

    @pytest.mark.asyncio
    async def test_author_books_empty(self, mock_info):
        assert await resolve_author_books(Author(id=77, name="Nobody"), mock_info) == []

    @pytest.mark.asyncio
    async def test_add_author(self, mock_info, store):
        result = await add_author(mock_info, "Author3")

        assert result == Author(id=3, name="Author3")
        assert store.get_author(3).name == "Author3"

    @pytest.mark.asyncio
    async def test_delete_author(self, mock_info, store):
        result = await delete_author(mock_info, 2)

        assert result == Author(id=2, name="Author2")
        # Books keep pointing at the deleted author
        assert store.get_book(2).author_id == 2

    @pytest.mark.asyncio
    async def test_delete_author_not_found(self, mock_info):
        assert await delete_author(mock_info, 99) is None


class TestContext:
    """Resolvers need a store in the context."""

    @pytest.mark.asyncio
    async def test_missing_store_raises(self):
        info = MagicMock(spec=strawberry.Info)
        info.context = {"request": None}

        with pytest.raises(RuntimeError, match="Library store not available"):
            await resolve_books(info)
