"""
📄 Helix Pagination - Curseurs et résultats paginés

Helix pagine avec un curseur opaque (`pagination.cursor`) :
- HelixPagination : paramètres after / before / limit d'une requête
- HelixPaginatedResult : une page (data + cursor)
- HelixPaginatedRequest : itérateur async qui enchaîne toutes les pages
"""
import logging
from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING, Any, AsyncIterator, Callable, Dict, Generic, List, Optional, TypeVar,
)

if TYPE_CHECKING:
    from helixapi.client import HelixClient

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class HelixPagination:
    """Pagination parameters shared by every paginated Helix endpoint."""
    after: Optional[str] = None     # Curseur page suivante
    before: Optional[str] = None    # Curseur page précédente
    limit: Optional[int] = None     # Envoyé comme `first` (max 100)


@dataclass
class HelixPaginatedResult(Generic[T]):
    """One page of results plus the cursor to fetch the next one."""
    data: List[T] = field(default_factory=list)
    cursor: Optional[str] = None


def extract_cursor(response: Dict[str, Any]) -> Optional[str]:
    """Curseur d'une réponse Helix, None si absent ou vide."""
    pagination = response.get("pagination") or {}
    return pagination.get("cursor") or None


class HelixPaginatedRequest(Generic[T]):
    """
    Async iterator over every item of a paginated Helix endpoint.

    Each page is a single GET; the cursor of a page is fed back as `after`
    for the next one. Iteration stops when Helix returns no cursor or an
    empty page.

    Usage:
        async for clip in client.clips.get_clips_paginated(filter):
            ...
    """

    def __init__(
        self,
        client: "HelixClient",
        url: str,
        query: Dict[str, Any],
        map_item: Callable[[Dict[str, Any]], T],
        limit: Optional[int] = None,
    ):
        self._client = client
        self._url = url
        self._query = query
        self._map_item = map_item
        self._limit = limit
        self.pages_fetched = 0

    async def fetch_page(self, cursor: Optional[str] = None) -> HelixPaginatedResult[T]:
        query = dict(self._query)
        query.pop("before", None)  # Helix refuse after + before
        query["after"] = cursor
        if self._limit is not None:
            query["first"] = self._limit

        response = await self._client.api_call(self._url, method="GET", query=query)
        self.pages_fetched += 1

        page = HelixPaginatedResult(
            data=[self._map_item(item) for item in response.get("data", [])],
            cursor=extract_cursor(response),
        )
        LOGGER.debug(
            f"📄 {self._url} page {self.pages_fetched}: {len(page.data)} items, cursor={page.cursor}"
        )
        return page

    async def __aiter__(self) -> AsyncIterator[T]:
        # Chaque parcours repart du curseur initial
        cursor: Optional[str] = self._query.get("after")
        self.pages_fetched = 0
        while True:
            page = await self.fetch_page(cursor)
            for item in page.data:
                yield item

            if not page.data or not page.cursor:
                break
            cursor = page.cursor

    async def get_all(self) -> List[T]:
        """Collecte toutes les pages dans une liste."""
        return [item async for item in self]
