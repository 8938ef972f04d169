from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from helixapi.client import HelixClient


class BaseAPI:
    """Base des facades Helix : garde le client pour les appels."""

    def __init__(self, client: "HelixClient"):
        self._client = client
