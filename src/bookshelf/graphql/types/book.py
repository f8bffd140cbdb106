"""
Book GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .author import Author


@strawberry.type(description="This represents a book written by an author")
class Book:
    """Book type for GraphQL API."""

    id: int
    name: str
    author_id: int

    @strawberry.field
    async def author(
        self, info: strawberry.Info
    ) -> Annotated["Author", strawberry.lazy(".author")] | None:
        """Get the author of this book, or null when ``authorId`` matches no author."""
        from ..resolvers.book import resolve_book_author

        return await resolve_book_author(self, info)


@strawberry.type(description="Returned by updateBook when no book has the requested id")
class BookNotFound:
    """Not-found result for book mutations."""

    id: int
    message: str = "Book not found"


UpdateBookResult = Annotated[Book | BookNotFound, strawberry.union("UpdateBookResult")]
