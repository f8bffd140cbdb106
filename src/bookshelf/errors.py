"""Exception hierarchy for Bookshelf."""


class BookshelfError(Exception):
    """Base class for errors raised by Bookshelf."""

    pass


class SeedDataError(BookshelfError):
    """Raised when seed data cannot be read or fails validation."""

    pass


class SchemaValidationError(BookshelfError):
    """Raised when the GraphQL schema fails startup validation."""

    pass
