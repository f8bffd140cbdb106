"""
GraphQL API for Bookshelf.

Provides the Strawberry schema over the in-memory library store and the
FastAPI router that serves it.
"""
