"""
🏆 Helix Client - Dispatcher HTTP partagé pour l'API Helix

Responsabilités:
- Construit les requêtes Helix (base URL, Client-Id, Bearer token)
- Vérifie les scopes requis avant l'appel (si connus)
- Traduit les statuts HTTP en exceptions (voir helixapi.errors)
- Expose les facades de ressources (client.clips)

Pas de retry, pas de cache : une opération = un appel HTTP.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import httpx
from twitchAPI.type import AuthScope

from helixapi.config import HelixConfig
from helixapi.errors import (
    ForbiddenError,
    HelixBadRequestError,
    HelixRateLimitError,
    MissingScopeException,
    TwitchAPIException,
    TwitchBackendException,
    TwitchResourceNotFound,
    UnauthorizedException,
)
from helixapi.resources.clips import HelixClipsAPI
from helixapi.scope_validator import ScopeValidator

LOGGER = logging.getLogger(__name__)

HELIX_BASE_URL = "https://api.twitch.tv/helix/"

Scope = Union[AuthScope, str]


def _scope_name(scope: Scope) -> str:
    return scope.value if isinstance(scope, AuthScope) else str(scope)


def build_query_params(query: Optional[Dict[str, Any]]) -> List[Tuple[str, str]]:
    """
    Flatten a query dict into httpx params.

    None values are dropped, lists become repeated keys (`id=1&id=2`),
    booleans are sent as "true" / "false".
    """
    params: List[Tuple[str, str]] = []
    for key, value in (query or {}).items():
        if value is None:
            continue
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if item is None:
                continue
            if isinstance(item, bool):
                item = "true" if item else "false"
            params.append((key, str(item)))
    return params


class HelixClient:
    """
    Client Helix (App ou User Token).

    Usage:
        async with HelixClient(client_id, token) as client:
            page = await client.clips.get_clips_for_broadcaster("125328655")
    """

    def __init__(
        self,
        client_id: str,
        access_token: str,
        scopes: Optional[Iterable[Scope]] = None,
        timeout: float = 8.0,
        http_client: Optional[httpx.AsyncClient] = None,
        base_url: str = HELIX_BASE_URL,
    ):
        """
        Args:
            client_id: Twitch application client ID
            access_token: OAuth token (with or without 'oauth:' prefix)
            scopes: Scopes granted to the token. None = unknown, no local check
            timeout: HTTP timeout in seconds (ignored if http_client is given)
            http_client: Shared httpx client, not closed by HelixClient
            base_url: Helix root URL
        """
        self.client_id = client_id
        self.access_token = access_token.replace("oauth:", "")
        self.scopes = {_scope_name(s) for s in scopes} if scopes is not None else None
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout

        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.AsyncClient(timeout=timeout)

        self._clips: Optional[HelixClipsAPI] = None

        LOGGER.debug(f"HelixClient init (timeout={timeout}s, scopes={self.scopes})")

    @classmethod
    def from_config(cls, config: HelixConfig, http_client: Optional[httpx.AsyncClient] = None) -> "HelixClient":
        return cls(
            client_id=config.client_id,
            access_token=config.access_token,
            scopes=config.scopes,
            timeout=config.timeout,
            http_client=http_client,
        )

    # ========================================================================
    # RESSOURCES
    # ========================================================================

    @property
    def clips(self) -> HelixClipsAPI:
        if self._clips is None:
            self._clips = HelixClipsAPI(self)
        return self._clips

    # ========================================================================
    # DISPATCH
    # ========================================================================

    async def api_call(
        self,
        url: str,
        method: str = "GET",
        query: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
        scope: Optional[Scope] = None,
    ) -> Dict[str, Any]:
        """
        Execute one Helix request and return the decoded JSON body.

        Args:
            url: Endpoint relative to the Helix root (ex: "clips")
            method: HTTP method
            query: Query parameters (see build_query_params)
            body: JSON body
            scope: Scope the endpoint requires

        Returns:
            Decoded JSON ({} for empty responses)

        Raises:
            MissingScopeException: token known to lack `scope`
            TwitchAPIException (and subclasses): non-2xx status
            httpx.HTTPError: transport failure
        """
        if scope is not None:
            self._check_scope(scope)

        full_url = self.base_url + url.lstrip("/")
        params = build_query_params(query)

        LOGGER.debug(f"[HELIX] {method} {url} {params}")

        response = await self.http_client.request(
            method,
            full_url,
            params=params,
            json=body,
            headers=self._headers(),
        )

        self._raise_for_status(response, method, url)

        if response.status_code == 204 or not response.content:
            return {}
        return response.json()

    def _headers(self) -> Dict[str, str]:
        return {
            "Client-Id": self.client_id,
            "Authorization": f"Bearer {self.access_token}",
        }

    def _check_scope(self, scope: Scope) -> None:
        if self.scopes is None:
            return
        name = _scope_name(scope)
        if name not in self.scopes:
            LOGGER.error(f"❌ Scope manquant: {name}")
            raise MissingScopeException(f"Require user authentication with scope {name}")

    @staticmethod
    def _raise_for_status(response: httpx.Response, method: str, url: str) -> None:
        status = response.status_code
        if status < 400:
            return

        message = _error_message(response)
        LOGGER.warning(f"⚠️ Helix {method} {url} -> {status}: {message}")

        if status == 400:
            raise HelixBadRequestError(message)
        if status == 401:
            raise UnauthorizedException(message)
        if status == 403:
            raise ForbiddenError(message)
        if status == 404:
            raise TwitchResourceNotFound(message)
        if status == 429:
            reset = response.headers.get("Ratelimit-Reset")
            raise HelixRateLimitError(message, reset_at=int(reset) if reset and reset.isdigit() else None)
        if status >= 500:
            raise TwitchBackendException(message)
        raise TwitchAPIException(message)

    # ========================================================================
    # LIFECYCLE
    # ========================================================================

    async def resolve_scopes(self) -> Optional[set]:
        """Récupère les scopes du token via /oauth2/validate."""
        analysis = await ScopeValidator.validate_token(self.access_token, http_client=self.http_client)
        if analysis["valid"]:
            self.scopes = set(analysis["scopes"])
            LOGGER.info(f"✅ Scopes résolus pour {analysis['login']}: {sorted(self.scopes)}")
        else:
            LOGGER.warning(f"⚠️ Token non validé, scopes inconnus: {analysis.get('error')}")
        return self.scopes

    async def close(self) -> None:
        if self._owns_http_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "HelixClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


def _error_message(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(payload, dict):
        return payload.get("message") or payload.get("error") or f"HTTP {response.status_code}"
    return f"HTTP {response.status_code}"
