"""
🎬 HelixClip - Clip retourné par GET /helix/clips

Garde le JSON brut tel quel + une référence au client pour les appels
de suivi (broadcaster, créateur, jeu, VOD).
"""
import re
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from helixapi.client import HelixClient

_FRACTION = re.compile(r"\.(\d+)")


def parse_timestamp(value: str) -> datetime:
    """RFC3339 Helix -> datetime aware (fraction ramenée à 6 chiffres)."""
    value = value.replace("Z", "+00:00")
    value = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), value, count=1)
    return datetime.fromisoformat(value)


class HelixClip:
    """A clip record. Accessors map the raw Helix field names."""

    def __init__(self, data: Dict[str, Any], client: "HelixClient"):
        self._data = data
        self._client = client

    @property
    def data(self) -> Dict[str, Any]:
        return self._data

    @property
    def id(self) -> str:
        return self._data["id"]

    @property
    def url(self) -> str:
        return self._data["url"]

    @property
    def embed_url(self) -> str:
        return self._data["embed_url"]

    @property
    def broadcaster_id(self) -> str:
        return self._data["broadcaster_id"]

    @property
    def broadcaster_name(self) -> Optional[str]:
        return self._data.get("broadcaster_name")

    @property
    def creator_id(self) -> str:
        return self._data["creator_id"]

    @property
    def creator_name(self) -> Optional[str]:
        return self._data.get("creator_name")

    @property
    def video_id(self) -> str:
        # Vide si la VOD n'existe plus
        return self._data.get("video_id") or ""

    @property
    def game_id(self) -> str:
        return self._data.get("game_id") or ""

    @property
    def language(self) -> str:
        return self._data["language"]

    @property
    def title(self) -> str:
        return self._data["title"]

    @property
    def views(self) -> int:
        return self._data["view_count"]

    @property
    def creation_date(self) -> datetime:
        return parse_timestamp(self._data["created_at"])

    @property
    def thumbnail_url(self) -> str:
        return self._data["thumbnail_url"]

    @property
    def duration(self) -> Optional[float]:
        return self._data.get("duration")

    @property
    def vod_offset(self) -> Optional[int]:
        return self._data.get("vod_offset")

    @property
    def is_featured(self) -> bool:
        return bool(self._data.get("is_featured", False))

    # ========================================================================
    # SUIVI
    # ========================================================================

    async def get_broadcaster(self) -> Optional[Dict[str, Any]]:
        """Utilisateur qui diffusait le stream clippé."""
        return await self._get_first("users", self.broadcaster_id)

    async def get_creator(self) -> Optional[Dict[str, Any]]:
        """Utilisateur qui a créé le clip."""
        return await self._get_first("users", self.creator_id)

    async def get_game(self) -> Optional[Dict[str, Any]]:
        return await self._get_first("games", self.game_id)

    async def get_video(self) -> Optional[Dict[str, Any]]:
        """VOD d'origine, None si supprimée."""
        return await self._get_first("videos", self.video_id)

    async def _get_first(self, url: str, id: str) -> Optional[Dict[str, Any]]:
        if not id:
            return None
        result = await self._client.api_call(url, method="GET", query={"id": id})
        data = result.get("data") or []
        return data[0] if data else None

    def __repr__(self) -> str:
        return f"<HelixClip id={self._data.get('id')!r} title={self._data.get('title')!r}>"
