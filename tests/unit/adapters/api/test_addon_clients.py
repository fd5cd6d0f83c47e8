"""
Tests for EmbedarrClient and AIOStreamsClient.
"""

import json

import httpx
import pytest
import respx

from dynamic_library.adapters.api.aiostreams_client import AIOStreamsClient
from dynamic_library.adapters.api.embedarr_client import EmbedarrClient
from dynamic_library.core.value_objects.lookup import LookupStatus
from tests.fixtures.addon_responses import (
    AIOSTREAMS_BASE,
    AIOSTREAMS_RESPONSE,
    AIOSTREAMS_URL,
    EMBEDARR_ADD_FAILURE_RESPONSE,
    EMBEDARR_ADD_SUCCESS_RESPONSE,
    EMBEDARR_ANIME_URL_RESPONSE,
    EMBEDARR_EPISODE_URL_RESPONSE,
    EMBEDARR_MOVIE_URL_RESPONSE,
    EMBEDARR_URL,
)


@pytest.fixture
def embedarr(make_settings, mock_cache) -> EmbedarrClient:
    return EmbedarrClient(
        make_settings(embedarr_url=f"{EMBEDARR_URL}/", embedarr_api_key="embed_key"),
        mock_cache,
    )


@pytest.fixture
def aiostreams(make_settings, mock_cache) -> AIOStreamsClient:
    return AIOStreamsClient(make_settings(aiostreams_url=AIOSTREAMS_URL), mock_cache)


class TestEmbedarrLibrary:
    """Ajouts a la bibliotheque (jamais mis en cache)."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_add_movie(self, embedarr: EmbedarrClient, mock_cache):
        route = respx.post(f"{EMBEDARR_URL}/api/admin/library/movies").mock(
            return_value=httpx.Response(200, json=EMBEDARR_ADD_SUCCESS_RESPONSE)
        )

        result = await embedarr.add_movie("603")

        assert result.success
        assert len(result.files_created) == 1
        request = route.calls.last.request
        assert request.headers["X-Api-Key"] == "embed_key"
        assert json.loads(request.content) == {"id": "603"}
        mock_cache.get.assert_not_called()
        mock_cache.set.assert_not_called()

    @pytest.mark.asyncio
    @respx.mock
    async def test_add_series_failure_reported(self, embedarr: EmbedarrClient):
        respx.post(f"{EMBEDARR_URL}/api/admin/library/tv").mock(
            return_value=httpx.Response(200, json=EMBEDARR_ADD_FAILURE_RESPONSE)
        )

        result = await embedarr.add_tv_series("81189")

        assert not result.success
        assert result.error == "Movie already exists"

    @pytest.mark.asyncio
    @respx.mock
    async def test_add_anime_server_error(self, embedarr: EmbedarrClient):
        respx.post(f"{EMBEDARR_URL}/api/admin/library/anime").mock(
            return_value=httpx.Response(500)
        )

        result = await embedarr.add_anime("1")

        assert not result.success
        assert result.error

    @pytest.mark.asyncio
    async def test_not_configured_without_url(self, make_settings, mock_cache):
        client = EmbedarrClient(make_settings(embedarr_api_key="embed_key"), mock_cache)

        assert not client.is_configured
        result = await client.add_movie("603")
        assert result.error == "Embedarr is not configured"
        assert not await client.is_available()
        lookup = await client.get_movie_stream_url("tt0133093")
        assert lookup.status is LookupStatus.NOT_CONFIGURED

    @pytest.mark.asyncio
    @respx.mock
    async def test_url_without_api_key(self, make_settings, mock_cache):
        client = EmbedarrClient(make_settings(embedarr_url=EMBEDARR_URL), mock_cache)
        route = respx.post(f"{EMBEDARR_URL}/api/admin/library/movies").mock(
            return_value=httpx.Response(200, json=EMBEDARR_ADD_SUCCESS_RESPONSE)
        )

        assert client.is_configured
        result = await client.add_movie("603")

        assert result.success
        assert "X-Api-Key" not in route.calls.last.request.headers

    @pytest.mark.asyncio
    @respx.mock
    async def test_is_available(self, embedarr: EmbedarrClient):
        respx.get(f"{EMBEDARR_URL}/health").mock(return_value=httpx.Response(200, text="ok"))

        assert await embedarr.is_available()


class TestEmbedarrStreamUrls:
    @pytest.mark.asyncio
    @respx.mock
    async def test_movie_url(self, embedarr: EmbedarrClient, mock_cache):
        respx.get(f"{EMBEDARR_URL}/api/url/movie/tt0133093").mock(
            return_value=httpx.Response(200, json=EMBEDARR_MOVIE_URL_RESPONSE)
        )

        lookup = await embedarr.get_movie_stream_url("0133093")

        assert lookup.value.url == "https://embed.example/movie/tt0133093"
        mock_cache.get.assert_called_once_with("embedarr:url:movie:tt0133093")

    @pytest.mark.asyncio
    @respx.mock
    async def test_episode_url(self, embedarr: EmbedarrClient, mock_cache):
        respx.get(f"{EMBEDARR_URL}/api/url/tv/tt0903747/1/1").mock(
            return_value=httpx.Response(200, json=EMBEDARR_EPISODE_URL_RESPONSE)
        )

        lookup = await embedarr.get_tv_episode_stream_url("tt0903747", 1, 1)

        assert lookup.value.season == 1
        mock_cache.get.assert_called_once_with("embedarr:url:tv:tt0903747:s1e1")

    @pytest.mark.asyncio
    @respx.mock
    async def test_anime_url(self, embedarr: EmbedarrClient, mock_cache):
        respx.get(f"{EMBEDARR_URL}/api/url/anime/1/1/dub").mock(
            return_value=httpx.Response(200, json=EMBEDARR_ANIME_URL_RESPONSE)
        )

        lookup = await embedarr.get_anime_stream_url("1", 1, "DUB")

        assert lookup.value.audio_type == "dub"
        mock_cache.get.assert_called_once_with("embedarr:url:anime:1:e1:dub")

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_url_is_negatively_cached(self, embedarr: EmbedarrClient, mock_cache):
        respx.get(f"{EMBEDARR_URL}/api/url/movie/tt0000001").mock(
            return_value=httpx.Response(200, json={"url": ""})
        )

        lookup = await embedarr.get_movie_stream_url("tt0000001")

        assert lookup.status is LookupStatus.NOT_FOUND
        mock_cache.set_negative.assert_called_once()


class TestAIOStreams:
    @pytest.mark.asyncio
    @respx.mock
    async def test_movie_streams(self, aiostreams: AIOStreamsClient, mock_cache):
        respx.get(f"{AIOSTREAMS_BASE}/stream/movie/tt0133093.json").mock(
            return_value=httpx.Response(200, json=AIOSTREAMS_RESPONSE)
        )

        lookup = await aiostreams.get_movie_streams("tt0133093")

        streams = lookup.value
        assert len(streams) == 3
        assert streams[0].behavior_hints.not_web_ready
        assert streams[1].info_hash.startswith("0123")
        assert streams[2].display_name == "Unknown Stream"
        mock_cache.get.assert_called_once_with("aiostreams:movie:tt0133093")

    @pytest.mark.asyncio
    @respx.mock
    async def test_episode_streams(self, aiostreams: AIOStreamsClient, mock_cache):
        route = respx.get(f"{AIOSTREAMS_BASE}/stream/series/tt0903747:1:2.json").mock(
            return_value=httpx.Response(200, json={"streams": []})
        )

        lookup = await aiostreams.get_episode_streams("tt0903747", 1, 2)

        assert lookup.found
        assert lookup.value == []
        assert route.called
        mock_cache.get.assert_called_once_with("aiostreams:series:tt0903747:1:2")

    @pytest.mark.asyncio
    async def test_not_configured(self, make_settings, mock_cache):
        client = AIOStreamsClient(make_settings(), mock_cache)

        lookup = await client.get_movie_streams("tt0133093")

        assert lookup.status is LookupStatus.NOT_CONFIGURED
