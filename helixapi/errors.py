"""
⚠️ Helix Errors - Exceptions levées par le dispatcher Helix

Les erreurs génériques viennent de twitchAPI (même hiérarchie que le reste
du bot). Seuls les cas que twitchAPI ne couvre pas (400, 429) ont leur
propre classe.
"""
from typing import Optional

from twitchAPI.type import (
    ForbiddenError,
    MissingScopeException,
    TwitchAPIException,
    TwitchBackendException,
    TwitchResourceNotFound,
    UnauthorizedException,
)


class HelixBadRequestError(TwitchAPIException):
    """Helix rejected the request parameters (HTTP 400)."""


class HelixRateLimitError(TwitchAPIException):
    """Helix rate limit exceeded (HTTP 429)."""

    def __init__(self, message: str, reset_at: Optional[int] = None):
        super().__init__(message)
        self.reset_at = reset_at  # Epoch seconds (header Ratelimit-Reset)


__all__ = [
    "ForbiddenError",
    "HelixBadRequestError",
    "HelixRateLimitError",
    "MissingScopeException",
    "TwitchAPIException",
    "TwitchBackendException",
    "TwitchResourceNotFound",
    "UnauthorizedException",
]
