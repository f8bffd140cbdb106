"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import strawberry

from bookshelf.store import AuthorRecord, BookRecord, LibraryStore


@pytest.fixture
def empty_store() -> LibraryStore:
    """Provide a store with no records."""
    return LibraryStore()


@pytest.fixture
def store() -> LibraryStore:
    """Provide a small seeded store.

    Book 4 points at author 9, which does not exist.
    """
    library = LibraryStore()
    library.load(
        authors=[
            AuthorRecord(id=1, name="Author1"),
            AuthorRecord(id=2, name="Author2"),
        ],
        books=[
            BookRecord(id=1, name="Name1", author_id=1),
            BookRecord(id=2, name="Name2", author_id=2),
            BookRecord(id=3, name="Name3", author_id=1),
            BookRecord(id=4, name="Orphan", author_id=9),
        ],
    )
    return library


@pytest.fixture
def mock_info(store: LibraryStore) -> Any:
    """Create a mock GraphQL info object whose context carries ``store``."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": None, "store": store}
    return info


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: mark test as slow running")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
