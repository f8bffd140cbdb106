"""
Author GraphQL type definitions
"""

from typing import TYPE_CHECKING, Annotated

import strawberry

if TYPE_CHECKING:
    from .book import Book


@strawberry.type(description="This represents an author of a book")
class Author:
    """Author type for GraphQL API."""

    id: int
    name: str

    @strawberry.field
    async def books(
        self, info: strawberry.Info
    ) -> list[Annotated["Book", strawberry.lazy(".book")] | None] | None:
        """Get books written by this author, in collection order."""
        from ..resolvers.author import resolve_author_books

        return await resolve_author_books(self, info)
