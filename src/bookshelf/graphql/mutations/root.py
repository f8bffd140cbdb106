"""
Root GraphQL mutation definitions
"""

import strawberry

from ..types.author import Author
from ..types.book import Book, UpdateBookResult


@strawberry.type(description="Root Mutation")
class Mutation:
    """Root GraphQL mutation type."""

    # Book mutations
    @strawberry.mutation(name="addBook", description="Add a book")
    async def add_book(self, info: strawberry.Info, name: str, author_id: int) -> Book:
        """Add a new book."""
        from ..resolvers.book import add_book

        return await add_book(info, name, author_id)

    @strawberry.mutation(name="updateBook", description="Update a book")
    async def update_book(
        self, info: strawberry.Info, id: int, name: str, author_id: int
    ) -> UpdateBookResult:
        """Update an existing book."""
        from ..resolvers.book import update_book

        return await update_book(info, id, name, author_id)

    @strawberry.mutation(name="deleteBook", description="Delete a book")
    async def delete_book(self, info: strawberry.Info, id: int | None = None) -> Book | None:
        """Delete a book."""
        from ..resolvers.book import delete_book

        return await delete_book(info, id)

    # Author mutations
    @strawberry.mutation(name="addAuthor", description="Add an author")
    async def add_author(self, info: strawberry.Info, name: str) -> Author:
        """Add a new author."""
        from ..resolvers.author import add_author

        return await add_author(info, name)

    @strawberry.mutation(name="deleteAuthor", description="Delete an author")
    async def delete_author(self, info: strawberry.Info, id: int) -> Author | None:
        """Delete an author."""
        from ..resolvers.author import delete_author

        return await delete_author(info, id)
