"""
Tests pour helixapi/resources/clips.py
Vérifie la mise en forme des paramètres et le mapping des réponses
"""
from unittest.mock import AsyncMock, MagicMock

import pytest
from twitchAPI.type import AuthScope

from helixapi.models.clip import HelixClip
from helixapi.pagination import HelixPaginatedRequest, HelixPagination
from helixapi.resources.clips import HelixClipCreateParams, HelixClipFilter, HelixClipsAPI


def make_api(response):
    client = MagicMock()
    client.api_call = AsyncMock(return_value=response)
    return HelixClipsAPI(client), client


@pytest.mark.unit
class TestClipFilterQuery:
    """Le discriminant de filtre devient l'unique clé de filtre"""

    @pytest.mark.parametrize("filter_type", ["broadcaster_id", "game_id", "id"])
    def test_filter_type_is_single_query_key(self, filter_type):
        query = HelixClipFilter(filter_type=filter_type, ids=["42"]).to_query()

        filter_keys = [k for k in query if k in ("broadcaster_id", "game_id", "id")]
        assert filter_keys == [filter_type]
        assert query[filter_type] == ["42"]

    def test_pagination_passes_through(self):
        query = HelixClipFilter(
            filter_type="game_id", ids=["1"], after="abc", before="xyz", limit=25
        ).to_query()

        assert query["after"] == "abc"
        assert query["before"] == "xyz"
        assert query["first"] == 25

    def test_unknown_filter_type_rejected(self):
        with pytest.raises(ValueError):
            HelixClipFilter(filter_type="user_id", ids=["1"]).validate()

    def test_empty_ids_rejected(self):
        with pytest.raises(ValueError):
            HelixClipFilter(filter_type="id", ids=[]).validate()

    @pytest.mark.parametrize("filter_type", ["broadcaster_id", "game_id"])
    def test_single_id_filters_reject_many(self, filter_type):
        with pytest.raises(ValueError, match="single ID"):
            HelixClipFilter(filter_type=filter_type, ids=["1", "2"]).validate()

    def test_id_filter_accepts_many(self):
        HelixClipFilter(filter_type="id", ids=["a", "b", "c"]).validate()


@pytest.mark.unit
class TestGetClips:
    """Tests des méthodes de listing"""

    @pytest.mark.asyncio
    async def test_for_broadcaster_shapes_query(self, clip_payload):
        api, client = make_api({"data": [clip_payload], "pagination": {"cursor": "next"}})

        result = await api.get_clips_for_broadcaster(
            "67955580", HelixPagination(after="c1", limit=10)
        )

        client.api_call.assert_awaited_once_with(
            "clips",
            method="GET",
            query={"broadcaster_id": ["67955580"], "after": "c1", "before": None, "first": 10},
        )
        assert result.cursor == "next"
        assert len(result.data) == 1
        assert isinstance(result.data[0], HelixClip)
        assert result.data[0].id == "AwkwardHelplessSalamanderSwiftRage"

    @pytest.mark.asyncio
    async def test_for_game_without_pagination(self):
        api, client = make_api({"data": [], "pagination": {}})

        result = await api.get_clips_for_game("488191")

        query = client.api_call.await_args.kwargs["query"]
        assert query == {"game_id": ["488191"], "after": None, "before": None, "first": None}
        assert result.data == []
        assert result.cursor is None

    @pytest.mark.asyncio
    async def test_by_ids(self, clip_payload):
        api, client = make_api({"data": [clip_payload, dict(clip_payload, id="Other")]})

        result = await api.get_clips_by_ids(["AwkwardHelplessSalamanderSwiftRage", "Other"])

        query = client.api_call.await_args.kwargs["query"]
        assert query["id"] == ["AwkwardHelplessSalamanderSwiftRage", "Other"]
        assert "broadcaster_id" not in query and "game_id" not in query
        assert [clip.id for clip in result.data] == ["AwkwardHelplessSalamanderSwiftRage", "Other"]
        assert result.cursor is None

    @pytest.mark.asyncio
    async def test_clip_keeps_client_reference(self, clip_payload):
        api, client = make_api({"data": [clip_payload]})

        result = await api.get_clips_by_ids(["AwkwardHelplessSalamanderSwiftRage"])

        assert result.data[0]._client is client
        assert result.data[0].data is clip_payload

    @pytest.mark.asyncio
    async def test_invalid_filter_makes_no_call(self):
        api, client = make_api({"data": []})

        with pytest.raises(ValueError):
            await api.get_clips(HelixClipFilter(filter_type="id", ids=[]))
        client.api_call.assert_not_awaited()

    def test_paginated_returns_request(self):
        api, _ = make_api({"data": []})

        request = api.get_clips_paginated(HelixClipFilter(filter_type="game_id", ids=["1"], limit=50))

        assert isinstance(request, HelixPaginatedRequest)


@pytest.mark.unit
class TestCreateClip:
    """Tests de create_clip"""

    @pytest.mark.asyncio
    async def test_returns_first_id(self):
        api, _ = make_api({"data": [{"id": "FiveWordsForClipSlug", "edit_url": "https://clips.twitch.tv/x/edit"}]})

        clip_id = await api.create_clip(HelixClipCreateParams(channel_id="125328655"))

        assert clip_id == "FiveWordsForClipSlug"

    @pytest.mark.asyncio
    async def test_default_no_delay(self):
        api, client = make_api({"data": [{"id": "x", "edit_url": ""}]})

        await api.create_clip(HelixClipCreateParams(channel_id="125328655"))

        client.api_call.assert_awaited_once_with(
            "clips",
            method="POST",
            scope=AuthScope.CLIPS_EDIT,
            query={"broadcaster_id": "125328655", "has_delay": "false"},
        )

    @pytest.mark.asyncio
    async def test_with_delay(self):
        api, client = make_api({"data": [{"id": "x", "edit_url": ""}]})

        await api.create_clip(HelixClipCreateParams(channel_id="125328655", create_after_delay=True))

        assert client.api_call.await_args.kwargs["query"]["has_delay"] == "true"
