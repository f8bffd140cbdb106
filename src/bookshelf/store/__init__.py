"""
In-memory data store for books and authors
"""

from .memory import LibraryStore
from .models import AuthorRecord, BookRecord
from .seed_data import create_seeded_store, load_seed_file, seed_store

__all__ = [
    "AuthorRecord",
    "BookRecord",
    "LibraryStore",
    "create_seeded_store",
    "load_seed_file",
    "seed_store",
]
