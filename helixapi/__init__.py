"""
helixapi/
=========

Client async pour l'API Twitch Helix.

Organisation:
- client.py : HelixClient, dispatcher HTTP partagé (httpx)
- pagination.py : curseurs et itération multi-pages
- resources/ : facades par ressource Helix (clips)
- models/ : objets retournés (HelixClip)
- scope_validator.py : validation du token et de ses scopes
- config.py : chargement de config/config.yaml
"""

from helixapi.client import HelixClient
from helixapi.config import HelixConfig, load_config
from helixapi.models import HelixClip
from helixapi.pagination import HelixPaginatedRequest, HelixPaginatedResult, HelixPagination
from helixapi.resources import HelixClipCreateParams, HelixClipFilter, HelixClipsAPI

__all__ = [
    "HelixClient",
    "HelixClip",
    "HelixClipCreateParams",
    "HelixClipFilter",
    "HelixClipsAPI",
    "HelixConfig",
    "HelixPaginatedRequest",
    "HelixPaginatedResult",
    "HelixPagination",
    "load_config",
]
