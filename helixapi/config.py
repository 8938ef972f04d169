"""
⚙️ Config - Chargement de config/config.yaml

Sections utilisées:
    twitch:
      client_id: ...
      access_token: ...
      scopes: [clips:edit]   # optionnel
    timeouts:
      helix: 8.0
"""
import logging
import os
import pathlib
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import yaml

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/config.yaml"
DEFAULT_HELIX_TIMEOUT = 8.0


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Charge config.yaml"""
    config_file = pathlib.Path(config_path)
    if not config_file.exists():
        LOGGER.error(f"Config file {config_path} not found")
        raise FileNotFoundError(config_path)
    with open(config_file, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


@dataclass
class HelixConfig:
    client_id: str
    access_token: str
    scopes: Optional[List[str]] = None
    timeout: float = DEFAULT_HELIX_TIMEOUT

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "HelixConfig":
        """
        Build from the parsed YAML. HELIX_CLIENT_ID / HELIX_ACCESS_TOKEN
        override the file.

        Raises:
            ValueError: client_id or access_token missing
        """
        twitch_config = config.get("twitch") or {}
        timeouts = config.get("timeouts") or {}

        client_id = os.environ.get("HELIX_CLIENT_ID") or twitch_config.get("client_id")
        access_token = os.environ.get("HELIX_ACCESS_TOKEN") or twitch_config.get("access_token")

        if not client_id:
            raise ValueError("twitch.client_id manquant dans la config")
        if not access_token:
            raise ValueError("twitch.access_token manquant dans la config")

        scopes = twitch_config.get("scopes")
        return cls(
            client_id=str(client_id),
            access_token=str(access_token),
            scopes=list(scopes) if scopes is not None else None,
            timeout=float(timeouts.get("helix", DEFAULT_HELIX_TIMEOUT)),
        )

    @classmethod
    def load(cls, config_path: str = DEFAULT_CONFIG_PATH) -> "HelixConfig":
        return cls.from_dict(load_config(config_path))
