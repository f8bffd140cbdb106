"""
Shared context helpers for GraphQL resolvers
"""

from typing import TYPE_CHECKING, Any

import strawberry

from ..logging import get_logger

if TYPE_CHECKING:
    from ..store import LibraryStore

logger = get_logger(__name__)


def build_context(store: "LibraryStore", request: Any = None) -> dict[str, Any]:
    """Build the context dict handed to every resolver."""
    return {
        "request": request,
        "store": store,
    }


def get_store_from_info(info: strawberry.Info) -> "LibraryStore":
    """
    Extract the library store from the GraphQL info object.

    Raises:
        RuntimeError: If the context carries no store
    """
    store = info.context.get("store")
    if store is None:
        logger.error("Store not found in GraphQL context")
        raise RuntimeError("Library store not available")

    return store
