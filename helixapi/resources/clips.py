"""
🎬 Helix Clips API - Facade pour /helix/clips

Accessible via `client.clips` sur un HelixClient :
- get_clips_for_broadcaster / get_clips_for_game / get_clips_by_ids
- get_clips (filtre générique, une page)
- get_clips_paginated (toutes les pages)
- create_clip (POST, scope clips:edit)

Exemple:
    async with HelixClient(client_id, token) as client:
        clip_id = await client.clips.create_clip(HelixClipCreateParams(channel_id="125328655"))
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

from twitchAPI.type import AuthScope

from helixapi.models.clip import HelixClip
from helixapi.pagination import (
    HelixPaginatedRequest, HelixPaginatedResult, HelixPagination, extract_cursor,
)
from helixapi.resources.base import BaseAPI

LOGGER = logging.getLogger(__name__)

HelixClipFilterType = Literal["broadcaster_id", "game_id", "id"]

CLIP_FILTER_TYPES = ("broadcaster_id", "game_id", "id")
SINGLE_ID_FILTER_TYPES = ("broadcaster_id", "game_id")


@dataclass
class HelixClipFilter:
    """
    Filtre de clips. Une seule dimension par requête : broadcaster, jeu
    ou liste d'IDs de clips.

    Les filtres broadcaster et jeu n'acceptent qu'un seul ID, passé quand
    même sous forme de liste.
    """
    filter_type: HelixClipFilterType
    ids: List[str] = field(default_factory=list)
    after: Optional[str] = None
    before: Optional[str] = None
    limit: Optional[int] = None

    def validate(self) -> None:
        if self.filter_type not in CLIP_FILTER_TYPES:
            raise ValueError(f"Unknown clip filter type: {self.filter_type!r}")
        if not self.ids:
            raise ValueError(f"Clip filter '{self.filter_type}' requires at least one ID")
        if self.filter_type in SINGLE_ID_FILTER_TYPES and len(self.ids) > 1:
            raise ValueError(f"Clip filter '{self.filter_type}' accepts a single ID, got {len(self.ids)}")

    def to_query(self) -> Dict[str, Any]:
        return {
            self.filter_type: list(self.ids),
            "after": self.after,
            "before": self.before,
            "first": self.limit,
        }


@dataclass
class HelixClipCreateParams:
    """Paramètres de création de clip."""
    channel_id: str                    # Broadcaster à clipper
    create_after_delay: bool = False   # Ajoute le délai habituel du player


class HelixClipsAPI(BaseAPI):
    """The Helix API methods that deal with clips."""

    async def get_clips_for_broadcaster(
        self, id: str, pagination: Optional[HelixPagination] = None
    ) -> HelixPaginatedResult[HelixClip]:
        """
        Retrieves the latest clips for the specified broadcaster.

        Args:
            id: The broadcaster's user ID
            pagination: Parameters for pagination
        """
        return await self.get_clips(_with_pagination("broadcaster_id", [id], pagination))

    async def get_clips_for_game(
        self, id: str, pagination: Optional[HelixPagination] = None
    ) -> HelixPaginatedResult[HelixClip]:
        """
        Retrieves the latest clips for the specified game.

        Args:
            id: The game ID
            pagination: Parameters for pagination
        """
        return await self.get_clips(_with_pagination("game_id", [id], pagination))

    async def get_clips_by_ids(self, ids: List[str]) -> HelixPaginatedResult[HelixClip]:
        """Retrieves clips by their IDs."""
        return await self.get_clips(HelixClipFilter(filter_type="id", ids=list(ids)))

    async def get_clips(self, params: HelixClipFilter) -> HelixPaginatedResult[HelixClip]:
        """
        Retrieves the latest clips based on the given filter.

        You rarely need this directly: prefer get_clips_for_broadcaster,
        get_clips_for_game or get_clips_by_ids.
        """
        params.validate()
        LOGGER.debug(f"[HELIX] get_clips({params.filter_type}={params.ids})")

        result = await self._client.api_call("clips", method="GET", query=params.to_query())

        return HelixPaginatedResult(
            data=[HelixClip(data, self._client) for data in result.get("data", [])],
            cursor=extract_cursor(result),
        )

    def get_clips_paginated(self, params: HelixClipFilter) -> HelixPaginatedRequest[HelixClip]:
        """
        Walks every page of clips matching the filter.

        Usage:
            async for clip in client.clips.get_clips_paginated(filter):
                ...
        """
        params.validate()
        query = params.to_query()
        return HelixPaginatedRequest(
            self._client,
            "clips",
            query,
            lambda data: HelixClip(data, self._client),
            limit=params.limit,
        )

    async def create_clip(self, params: HelixClipCreateParams) -> str:
        """
        Creates a clip of a running stream.

        Returns:
            The ID of the new clip
        """
        result = await self._client.api_call(
            "clips",
            method="POST",
            scope=AuthScope.CLIPS_EDIT,
            query={
                "broadcaster_id": params.channel_id,
                "has_delay": "true" if params.create_after_delay else "false",
            },
        )

        clip_id = result["data"][0]["id"]
        LOGGER.info(f"🎬 Clip créé pour {params.channel_id}: {clip_id}")
        return clip_id


def _with_pagination(
    filter_type: HelixClipFilterType, ids: List[str], pagination: Optional[HelixPagination]
) -> HelixClipFilter:
    pagination = pagination or HelixPagination()
    return HelixClipFilter(
        filter_type=filter_type,
        ids=ids,
        after=pagination.after,
        before=pagination.before,
        limit=pagination.limit,
    )
