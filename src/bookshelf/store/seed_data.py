"""
Seed data for the library store.

The built-in set is loaded at startup unless a seed file is configured.
Seed files are YAML (or JSON, which YAML parses) with two top-level keys:

    authors:
      - {id: 1, name: "Author1"}
    books:
      - {id: 1, name: "Name1", authorId: 1}
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..errors import SeedDataError
from ..logging import get_logger
from .memory import LibraryStore
from .models import AuthorRecord, BookRecord

logger = get_logger(__name__)


DEFAULT_AUTHORS = [
    {"id": 1, "name": "J. K. Rowling"},
    {"id": 2, "name": "J. R. R. Tolkien"},
    {"id": 3, "name": "Brent Weeks"},
]

DEFAULT_BOOKS = [
    {"id": 1, "name": "Harry Potter and the Chamber of Secrets", "authorId": 1},
    {"id": 2, "name": "Harry Potter and the Prisoner of Azkaban", "authorId": 1},
    {"id": 3, "name": "Harry Potter and the Goblet of Fire", "authorId": 1},
    {"id": 4, "name": "The Fellowship of the Ring", "authorId": 2},
    {"id": 5, "name": "The Two Towers", "authorId": 2},
    {"id": 6, "name": "The Return of the King", "authorId": 2},
    {"id": 7, "name": "The Way of Shadows", "authorId": 3},
    {"id": 8, "name": "Beyond the Shadows", "authorId": 3},
]


class SeedAuthor(BaseModel):
    id: int = Field(gt=0)
    name: str


class SeedBook(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(gt=0)
    name: str
    author_id: int = Field(alias="authorId")


class SeedFile(BaseModel):
    """Validated seed document."""

    authors: list[SeedAuthor] = []
    books: list[SeedBook] = []

    @model_validator(mode="after")
    def check_unique_ids(self) -> SeedFile:
        for label, entries in (("author", self.authors), ("book", self.books)):
            seen: set[int] = set()
            for entry in entries:
                if entry.id in seen:
                    raise ValueError(f"Duplicate {label} id {entry.id}")
                seen.add(entry.id)
        return self


def default_seed() -> SeedFile:
    """Return the built-in seed set."""
    return SeedFile.model_validate({"authors": DEFAULT_AUTHORS, "books": DEFAULT_BOOKS})


def load_seed_file(path: Path) -> SeedFile:
    """Read and validate a seed file.

    Raises:
        SeedDataError: If the file is unreadable, unparsable or invalid
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise SeedDataError(f"Failed to read seed file {path}: {e}") from e

    if not isinstance(data, dict):
        raise SeedDataError(f"Seed file {path} must contain a mapping at the top level")

    try:
        return SeedFile.model_validate(data)
    except ValidationError as e:
        raise SeedDataError(f"Invalid seed file {path}: {e}") from e


def seed_store(store: LibraryStore, seed: SeedFile | None = None) -> None:
    """Load ``seed`` (the built-in set by default) into ``store``."""
    if seed is None:
        seed = default_seed()

    store.load(
        authors=[AuthorRecord(id=a.id, name=a.name) for a in seed.authors],
        books=[BookRecord(id=b.id, name=b.name, author_id=b.author_id) for b in seed.books],
    )
    logger.info("Store seeded", authors=len(seed.authors), books=len(seed.books))


def create_seeded_store(
    seed_path: str | None = None, seed_on_startup: bool = True
) -> LibraryStore:
    """Create a store, seeded from ``seed_path`` or the built-in set."""
    store = LibraryStore()
    if not seed_on_startup:
        logger.info("Seeding disabled, starting with an empty store")
        return store

    seed = load_seed_file(Path(seed_path)) if seed_path else None
    seed_store(store, seed)
    return store
