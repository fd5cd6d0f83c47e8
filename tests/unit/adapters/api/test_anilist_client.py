"""
Tests for AniListClient (GraphQL).
"""

import json

import httpx
import pytest
import respx

from dynamic_library.adapters.api.anilist_client import (
    MAL_ID_QUERY,
    AniListClient,
    _pick_by_year,
)
from dynamic_library.adapters.api.models.anilist import AniListMedia
from dynamic_library.core.value_objects.lookup import LookupStatus
from tests.fixtures.anilist_responses import (
    ANILIST_EMPTY_PAGE_RESPONSE,
    ANILIST_MEDIA_RESPONSE,
    ANILIST_NOT_FOUND_RESPONSE,
    ANILIST_PAGE_RESPONSE,
)

ENDPOINT = "https://graphql.anilist.co"


@pytest.fixture
def client(make_settings, mock_cache) -> AniListClient:
    return AniListClient(make_settings(), mock_cache)


class TestAniListClient:
    def test_always_configured(self, client: AniListClient):
        assert client.is_configured

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_by_mal_id(self, client: AniListClient, mock_cache):
        route = respx.post(ENDPOINT).mock(
            return_value=httpx.Response(200, json=ANILIST_MEDIA_RESPONSE)
        )

        lookup = await client.search_by_mal_id(1)

        assert lookup.value.id == 1
        assert lookup.value.title.preferred == "Cowboy Bebop"
        body = json.loads(route.calls.last.request.content)
        assert body == {"query": MAL_ID_QUERY, "variables": {"idMal": 1}}
        mock_cache.get.assert_called_once_with("anilist:mal:1")

    @pytest.mark.asyncio
    @respx.mock
    async def test_unknown_media_is_negatively_cached(self, client: AniListClient, mock_cache):
        respx.post(ENDPOINT).mock(
            return_value=httpx.Response(404, json=ANILIST_NOT_FOUND_RESPONSE)
        )

        lookup = await client.search_by_title("zzzz")

        assert lookup.status is LookupStatus.NOT_FOUND
        mock_cache.set_negative.assert_called_once_with("anilist:search:zzzz", 3600)

    @pytest.mark.asyncio
    @respx.mock
    async def test_null_media_is_not_found(self, client: AniListClient):
        respx.post(ENDPOINT).mock(
            return_value=httpx.Response(200, json={"data": {"Media": None}})
        )

        lookup = await client.search_by_title("zzzz")

        assert lookup.status is LookupStatus.NOT_FOUND

    @pytest.mark.asyncio
    @respx.mock
    async def test_title_and_year_picks_exact_year(self, client: AniListClient):
        respx.post(ENDPOINT).mock(return_value=httpx.Response(200, json=ANILIST_PAGE_RESPONSE))

        lookup = await client.search_by_title_and_year("Naruto", 2007)

        assert lookup.value.id == 1735

    @pytest.mark.asyncio
    @respx.mock
    async def test_title_and_year_empty_page(self, client: AniListClient):
        respx.post(ENDPOINT).mock(
            return_value=httpx.Response(200, json=ANILIST_EMPTY_PAGE_RESPONSE)
        )

        lookup = await client.search_by_title_and_year("zzzz", 2000)

        assert lookup.status is LookupStatus.NOT_FOUND


class TestPickByYear:
    @pytest.fixture
    def candidates(self) -> list[AniListMedia]:
        return [
            AniListMedia(id=1, season_year=2002),
            AniListMedia(id=2, season_year=2007),
            AniListMedia(id=3, season_year=2017),
        ]

    def test_exact_year(self, candidates):
        assert _pick_by_year(candidates, 2017).id == 3

    def test_adjacent_year(self, candidates):
        assert _pick_by_year(candidates, 2008).id == 2

    def test_fallback_to_first(self, candidates):
        assert _pick_by_year(candidates, 1990).id == 1
        assert _pick_by_year(candidates, None).id == 1
