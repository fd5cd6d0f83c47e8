"""
Tests du fournisseur de catalogue base sur un addon Stremio.
"""

import httpx
import pytest
import respx

from dynamic_library.adapters.api.cache import APICache
from dynamic_library.adapters.catalog.stremio_provider import StremioCatalogProvider
from dynamic_library.core.entities.catalog import CatalogContentType, CatalogSource
from tests.fixtures.stremio_responses import (
    ADDON_BASE,
    ADDON_URL,
    STREMIO_EMPTY_META_RESPONSE,
    STREMIO_MOVIE_CATALOG_RESPONSE,
    STREMIO_MOVIE_META_RESPONSE,
    STREMIO_SERIES_CATALOG_RESPONSE,
    STREMIO_SERIES_META_RESPONSE,
)


@pytest.fixture
def provider(make_settings, api_cache: APICache) -> StremioCatalogProvider:
    return StremioCatalogProvider(make_settings(stremio_catalog_url=ADDON_URL), api_cache)


class TestStremioConfiguration:
    def test_manifest_suffix_stripped(self, provider: StremioCatalogProvider):
        assert provider.base_url == ADDON_BASE
        assert provider.is_configured
        assert provider.provider_name == "Stremio addon"

    @pytest.mark.asyncio
    async def test_not_configured(self, make_settings, api_cache: APICache):
        provider = StremioCatalogProvider(make_settings(), api_cache)

        assert not provider.is_configured
        assert await provider.search_movies("Matrix") == []
        assert await provider.get_series_details("tt0903747") is None


class TestStremioSearch:
    @pytest.mark.asyncio
    @respx.mock
    async def test_search_movies(self, provider: StremioCatalogProvider):
        route = respx.get(f"{ADDON_BASE}/catalog/movie/search/search=matrix.json").mock(
            return_value=httpx.Response(200, json=STREMIO_MOVIE_CATALOG_RESPONSE)
        )

        items = await provider.search_movies("matrix")
        again = await provider.search_movies("Matrix")

        assert [item.id for item in items] == ["tt0133093", "kitsu:1234"]
        assert items[0].source is CatalogSource.STREMIO
        assert items[0].type is CatalogContentType.MOVIE
        assert again == items
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_series_encodes_query(self, provider: StremioCatalogProvider):
        route = respx.get(
            f"{ADDON_BASE}/catalog/series/search/search=breaking%20bad.json"
        ).mock(return_value=httpx.Response(200, json=STREMIO_SERIES_CATALOG_RESPONSE))

        items = await provider.search_series("breaking bad", max_results=5)

        assert route.called
        assert items[0].rating == 9.5
        assert items[0].year == 2008
        assert items[0].type is CatalogContentType.SERIES

    @pytest.mark.asyncio
    @respx.mock
    async def test_addon_timeout_returns_empty_list(self, provider: StremioCatalogProvider):
        respx.get(url__regex=rf"{ADDON_BASE}/catalog/.*").mock(
            side_effect=httpx.ReadTimeout("slow addon")
        )

        assert await provider.search_movies("matrix") == []


class TestStremioDetails:
    @pytest.mark.asyncio
    @respx.mock
    async def test_movie_details(self, provider: StremioCatalogProvider):
        respx.get(f"{ADDON_BASE}/meta/movie/tt0133093.json").mock(
            return_value=httpx.Response(200, json=STREMIO_MOVIE_META_RESPONSE)
        )

        details = await provider.get_movie_details("tt0133093")

        assert details.imdb_id == "tt0133093"
        assert details.directors == ["Lana Wachowski"]
        assert details.runtime_minutes == 136

    @pytest.mark.asyncio
    @respx.mock
    async def test_series_details(self, provider: StremioCatalogProvider):
        respx.get(f"{ADDON_BASE}/meta/series/tt0903747.json").mock(
            return_value=httpx.Response(200, json=STREMIO_SERIES_META_RESPONSE)
        )

        details = await provider.get_series_details("tt0903747")

        assert len(details.episodes) == 4
        assert [s.number for s in details.seasons] == [1, 2]
        assert details.imdb_id == "tt0903747"

    @pytest.mark.asyncio
    @respx.mock
    async def test_native_id_keeps_colon(self, provider: StremioCatalogProvider):
        route = respx.get(url__regex=rf"{ADDON_BASE}/meta/series/.*").mock(
            return_value=httpx.Response(200, json=STREMIO_EMPTY_META_RESPONSE)
        )

        await provider.get_series_details("kitsu:1234")

        assert route.calls.last.request.url.raw_path == b"/config-abc/meta/series/kitsu:1234.json"

    @pytest.mark.asyncio
    @respx.mock
    async def test_null_meta_is_negatively_cached(
        self, provider: StremioCatalogProvider, api_cache: APICache
    ):
        route = respx.get(f"{ADDON_BASE}/meta/movie/tt0000001.json").mock(
            return_value=httpx.Response(200, json=STREMIO_EMPTY_META_RESPONSE)
        )

        assert await provider.get_movie_details("tt0000001") is None
        assert await provider.get_movie_details("tt0000001") is None
        assert route.call_count == 1
        assert await api_cache.get("stremio:meta:movie:tt0000001") == (None, True)
