"""
🔐 Scope Validator - Validate OAuth token scopes for Helix features

Tells the dispatcher which scopes the token carries and gives clear
feedback when a feature (ex: clip creation) is unavailable.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Set

import httpx

logger = logging.getLogger(__name__)

VALIDATE_URL = "https://id.twitch.tv/oauth2/validate"


@dataclass
class ScopeRequirement:
    """Required scopes for a client feature."""
    name: str
    scopes: Set[str]
    description: str


# Feature -> Required scopes mapping
FEATURE_SCOPES = {
    "clips_read": ScopeRequirement(
        name="Clip Listing",
        scopes=set(),
        description="List clips by broadcaster, game or ID"
    ),
    "clips_create": ScopeRequirement(
        name="Clip Creation",
        scopes={"clips:edit"},
        description="Create a clip of a live broadcast"
    ),
}


def _invalid_result(error: str) -> Dict[str, Any]:
    return {
        "valid": False,
        "error": error,
        "scopes": [],
        "missing_scopes": [],
        "available_features": [],
        "unavailable_features": list(FEATURE_SCOPES.keys()),
        "warnings": [f"❌ {error}"],
        "user_id": None,
        "login": None,
        "client_id": None,
        "expires_in": None,
    }


class ScopeValidator:
    """Validate OAuth token scopes and provide user feedback."""

    @staticmethod
    async def validate_token(
        token: str,
        http_client: Optional[httpx.AsyncClient] = None
    ) -> Dict[str, Any]:
        """
        Validate OAuth token and return scope analysis.

        Args:
            token: OAuth token (with or without 'oauth:' prefix)
            http_client: Shared httpx client (a temporary one is used otherwise)

        Returns:
            {
                "valid": bool,
                "scopes": List[str],
                "missing_scopes": List[str],
                "available_features": List[str],
                "unavailable_features": List[str],
                "warnings": List[str],
                "user_id": Optional[str],
                "login": Optional[str],
                "client_id": Optional[str],
                "expires_in": Optional[int]
            }
        """
        clean_token = token.replace('oauth:', '')
        headers = {"Authorization": f"OAuth {clean_token}"}

        # 1. Validate token avec Twitch API
        try:
            if http_client is not None:
                response = await http_client.get(VALIDATE_URL, headers=headers)
            else:
                async with httpx.AsyncClient() as client:
                    response = await client.get(VALIDATE_URL, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Erreur validation token: {e}")
            return _invalid_result(f"Erreur réseau: {e}")

        if response.status_code != 200:
            logger.error(f"Token validation failed: {response.status_code}")
            return _invalid_result("Token invalide ou expiré")

        data = response.json()
        user_scopes = set(data.get("scopes") or [])

        logger.info(f"✅ Token validé pour user: {data.get('login')} (ID: {data.get('user_id')})")
        logger.debug(f"Scopes présents: {user_scopes}")

        # 2. Analyze scopes
        result = {
            "valid": True,
            "scopes": sorted(user_scopes),
            "missing_scopes": [],
            "available_features": [],
            "unavailable_features": [],
            "warnings": [],
            "user_id": data.get("user_id"),
            "login": data.get("login"),
            "client_id": data.get("client_id"),
            "expires_in": data.get("expires_in"),
        }

        # 3. Check each feature
        for feature_key, requirement in FEATURE_SCOPES.items():
            missing = requirement.scopes - user_scopes

            if not missing:
                result["available_features"].append(feature_key)
                continue

            result["unavailable_features"].append(feature_key)
            result["missing_scopes"].extend(sorted(missing))
            result["warnings"].append(
                f"⚠️  '{requirement.name}' nécessite {sorted(missing)}"
            )

        # 4. Résumé
        if result["missing_scopes"]:
            result["warnings"].insert(0, "✅ Client opérationnel, certaines features désactivées.")
        else:
            result["warnings"].insert(0, "🎉 Tous les scopes sont présents !")

        return result

    @staticmethod
    def print_scope_report(analysis: Dict[str, Any]) -> None:
        """
        Print a formatted scope analysis report to console.

        Args:
            analysis: Result from validate_token()
        """
        print("\n" + "="*60)
        print("🔐 ANALYSE DES SCOPES OAUTH")
        print("="*60)

        if analysis.get("user_id"):
            print(f"👤 User: {analysis['login']} (ID: {analysis['user_id']})")
        if analysis.get("expires_in") is not None:
            print(f"⏳ Expiration: {analysis['expires_in']} secondes")

        print(f"\n📊 Scopes présents ({len(analysis['scopes'])}):")
        for scope in analysis['scopes']:
            print(f"  ✅ {scope}")

        for feature_key in analysis['available_features']:
            req = FEATURE_SCOPES[feature_key]
            print(f"  ✅ {req.name}: {req.description}")

        for feature_key in analysis['unavailable_features']:
            req = FEATURE_SCOPES[feature_key]
            missing = sorted(req.scopes - set(analysis['scopes']))
            print(f"  ⚠️  {req.name}: {req.description}")
            print(f"      Manquant: {missing}")

        print("\n📋 Résumé:")
        for warning in analysis['warnings']:
            print(f"  {warning}")

        print("="*60 + "\n")
