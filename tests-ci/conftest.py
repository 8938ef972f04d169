"""
Pytest configuration for CI tests
Provides common fixtures and test config (no real Twitch credentials needed)
"""
import httpx
import pytest

from helixapi.client import HelixClient


@pytest.fixture
def mock_config():
    """Mock configuration for tests (same shape as config/config.yaml)"""
    return {
        'twitch': {
            'client_id': 'test_client_id_mock',
            'access_token': 'oauth:test_token_mock',
            'scopes': ['clips:edit']
        },
        'timeouts': {
            'helix': 5.0
        }
    }


@pytest.fixture
def clip_payload():
    """Clip tel que renvoyé par GET /helix/clips"""
    return {
        "id": "AwkwardHelplessSalamanderSwiftRage",
        "url": "https://clips.twitch.tv/AwkwardHelplessSalamanderSwiftRage",
        "embed_url": "https://clips.twitch.tv/embed?clip=AwkwardHelplessSalamanderSwiftRage",
        "broadcaster_id": "67955580",
        "broadcaster_name": "ChewieMelodies",
        "creator_id": "53834192",
        "creator_name": "BlackNova03",
        "video_id": "205586603",
        "game_id": "488191",
        "language": "en",
        "title": "babymetal",
        "view_count": 10,
        "created_at": "2017-11-30T22:34:18Z",
        "thumbnail_url": "https://clips-media-assets.twitch.tv/157589949-preview-480x272.jpg",
        "duration": 60.0,
        "vod_offset": 480,
        "is_featured": False
    }


@pytest.fixture
def make_client():
    """
    Factory: HelixClient branché sur un httpx.MockTransport.

    Usage:
        client, requests = make_client(lambda request: httpx.Response(200, json={...}))
    """
    def _make(handler, scopes=None):
        requests = []

        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        client = HelixClient("test_client_id", "test_token", scopes=scopes, http_client=http_client)
        return client, requests

    return _make
