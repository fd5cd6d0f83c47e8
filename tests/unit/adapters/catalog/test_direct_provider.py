"""
Tests du fournisseur direct TMDB + TVDB.

Les clients reels sont utilises avec un cache sur disque et respx, pour
verifier le parcours complet : recherche, details, traductions et cache.
"""

import httpx
import pytest
import respx

from dynamic_library.adapters.api.cache import APICache
from dynamic_library.adapters.api.tmdb_client import TMDBClient
from dynamic_library.adapters.api.tvdb_client import TVDBClient
from dynamic_library.adapters.catalog.direct_provider import DirectCatalogProvider
from dynamic_library.core.entities.catalog import CatalogContentType, CatalogSource
from tests.fixtures.tmdb_responses import (
    TMDB_CONFIGURATION_RESPONSE,
    TMDB_FIND_SERIES_RESPONSE,
    TMDB_MOVIE_DETAILS_RESPONSE,
    TMDB_SEARCH_RESPONSE,
)
from tests.fixtures.tvdb_responses import (
    TVDB_EPISODE_TRANSLATION_RESPONSE,
    TVDB_LOGIN_RESPONSE,
    TVDB_NOT_FOUND_RESPONSE,
    TVDB_SEARCH_RESPONSE,
    TVDB_SERIES_EXTENDED_RESPONSE,
    TVDB_SERIES_TRANSLATION_RESPONSE,
)

TMDB = "https://api.themoviedb.org/3"
TVDB = "https://api4.thetvdb.com/v4"


def build_provider(settings, cache: APICache) -> DirectCatalogProvider:
    return DirectCatalogProvider(
        settings, TMDBClient(settings, cache), TVDBClient(settings, cache)
    )


def mock_tvdb_login() -> None:
    respx.post(f"{TVDB}/login").mock(
        return_value=httpx.Response(200, json=TVDB_LOGIN_RESPONSE)
    )


class TestDirectProviderConfiguration:
    def test_configured_with_tmdb_only(self, make_settings, mock_cache):
        provider = build_provider(make_settings(tmdb_api_key="key"), mock_cache)

        assert provider.is_configured
        assert provider.provider_name == "Direct (TMDB/TVDB)"

    def test_not_configured_without_keys(self, make_settings, mock_cache):
        assert not build_provider(make_settings(), mock_cache).is_configured

    def test_unselected_sources_are_not_configured(self, make_settings, mock_cache):
        settings = make_settings(
            tmdb_api_key="key",
            tvdb_api_key="key",
            movie_api_source="none",
            tv_show_api_source="tmdb",
        )

        assert not build_provider(settings, mock_cache).is_configured

    @pytest.mark.asyncio
    @respx.mock
    async def test_unselected_movie_source_returns_nothing(self, make_settings, mock_cache):
        route = respx.get(f"{TMDB}/search/movie")
        provider = build_provider(
            make_settings(tmdb_api_key="key", movie_api_source="none"), mock_cache
        )

        assert await provider.search_movies("Matrix") == []
        assert await provider.get_movie_details("603") is None
        assert not route.called


class TestDirectProviderMovies:
    @pytest.mark.asyncio
    @respx.mock
    async def test_matrix_search_end_to_end(self, settings, api_cache: APICache):
        """Recherche complete puis second appel servi par le cache."""
        search = respx.get(f"{TMDB}/search/movie").mock(
            return_value=httpx.Response(200, json=TMDB_SEARCH_RESPONSE)
        )
        configuration = respx.get(f"{TMDB}/configuration").mock(
            return_value=httpx.Response(200, json=TMDB_CONFIGURATION_RESPONSE)
        )
        provider = build_provider(settings, api_cache)

        items = await provider.search_movies("Matrix")
        again = await provider.search_movies("matrix")

        assert [item.name for item in items] == ["The Matrix", "The Matrix Revisited"]
        assert items[0].source is CatalogSource.TMDB
        assert items[0].type is CatalogContentType.MOVIE
        assert items[0].poster_url.startswith("https://image.tmdb.org/t/p/w500/")
        assert again == items
        assert search.call_count == 1
        assert configuration.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_respects_max_results(self, settings, api_cache: APICache):
        respx.get(f"{TMDB}/search/movie").mock(
            return_value=httpx.Response(200, json=TMDB_SEARCH_RESPONSE)
        )
        respx.get(f"{TMDB}/configuration").mock(
            return_value=httpx.Response(200, json=TMDB_CONFIGURATION_RESPONSE)
        )

        items = await build_provider(settings, api_cache).search_movies("Matrix", max_results=1)

        assert len(items) == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_failure_returns_empty_list(self, settings, api_cache: APICache):
        respx.get(f"{TMDB}/search/movie").mock(side_effect=httpx.ConnectTimeout("timeout"))

        assert await build_provider(settings, api_cache).search_movies("Matrix") == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_movie_details(self, settings, api_cache: APICache):
        respx.get(f"{TMDB}/movie/603").mock(
            return_value=httpx.Response(200, json=TMDB_MOVIE_DETAILS_RESPONSE)
        )
        respx.get(f"{TMDB}/configuration").mock(return_value=httpx.Response(500))

        details = await build_provider(settings, api_cache).get_movie_details("603")

        assert details.imdb_id == "tt0133093"
        assert details.poster_url == (
            "https://image.tmdb.org/t/p/w500/f89U3ADr1oiB1s9GkdPOEpXUk5H.jpg"
        )

    @pytest.mark.asyncio
    @respx.mock
    async def test_unknown_movie_is_none(self, settings, api_cache: APICache):
        respx.get(f"{TMDB}/movie/1").mock(return_value=httpx.Response(404))

        assert await build_provider(settings, api_cache).get_movie_details("1") is None


class TestDirectProviderSeries:
    @pytest.mark.asyncio
    @respx.mock
    async def test_search_series(self, settings, api_cache: APICache):
        mock_tvdb_login()
        respx.get(f"{TVDB}/search").mock(
            return_value=httpx.Response(200, json=TVDB_SEARCH_RESPONSE)
        )

        items = await build_provider(settings, api_cache).search_series("Breaking Bad")

        assert [item.id for item in items] == ["81189", "273181"]
        assert items[0].source is CatalogSource.TVDB

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_series_localized(self, make_settings, api_cache: APICache):
        settings = make_settings(
            tvdb_api_key="key", language_mode="override", language_override_code="fra"
        )
        mock_tvdb_login()
        respx.get(f"{TVDB}/search").mock(
            return_value=httpx.Response(200, json=TVDB_SEARCH_RESPONSE)
        )

        items = await build_provider(settings, api_cache).search_series("Breaking Bad")

        assert items[0].name == "Breaking Bad : Le Chimiste"
        assert items[1].name == "Breaking Bad: Original Minisodes"

    @pytest.mark.asyncio
    @respx.mock
    async def test_series_details_default_language(self, settings, api_cache: APICache):
        """Sans surcharge de langue, aucune traduction n'est demandee."""
        mock_tvdb_login()
        respx.get(f"{TVDB}/series/81189/extended").mock(
            return_value=httpx.Response(200, json=TVDB_SERIES_EXTENDED_RESPONSE)
        )
        translations = respx.get(url__regex=rf"{TVDB}/.*/translations/.*")

        details = await build_provider(settings, api_cache).get_series_details("81189")

        assert details.name == "Breaking Bad"
        assert details.tmdb_id == "1396"
        assert len(details.episodes) == 4
        assert not translations.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_series_details_translation_overlay(self, make_settings, api_cache: APICache):
        """
        Surcharge "fra" : traduction de la serie et de chaque episode.

        Les episodes sans traduction gardent leur nom d'origine, et les
        absences sont mises en cache : un second appel ne touche pas le reseau.
        """
        settings = make_settings(
            tmdb_api_key="key",
            tvdb_api_key="key",
            language_mode="override",
            language_override_code="fra",
        )
        mock_tvdb_login()
        extended = respx.get(f"{TVDB}/series/81189/extended").mock(
            return_value=httpx.Response(200, json=TVDB_SERIES_EXTENDED_RESPONSE)
        )
        series_translation = respx.get(f"{TVDB}/series/81189/translations/fra").mock(
            return_value=httpx.Response(200, json=TVDB_SERIES_TRANSLATION_RESPONSE)
        )
        pilot = respx.get(f"{TVDB}/episodes/349231/translations/fra").mock(
            return_value=httpx.Response(200, json=TVDB_EPISODE_TRANSLATION_RESPONSE)
        )
        missing = respx.get(url__regex=rf"{TVDB}/episodes/\d+/translations/fra").mock(
            return_value=httpx.Response(404, json=TVDB_NOT_FOUND_RESPONSE)
        )
        provider = build_provider(settings, api_cache)

        details = await provider.get_series_details("81189")
        again = await provider.get_series_details("81189")

        assert details.name == "Breaking Bad : Le Chimiste"
        assert details.original_name == "Breaking Bad"
        assert details.overview.startswith("Walter White, professeur")
        assert [e.name for e in details.episodes] == [
            "Chute libre",
            "Cat's in the Bag...",
            "Episode 3",
            "Seven Thirty-Seven",
        ]
        assert details.episodes[0].overview == "Diagnosed with terminal lung cancer..."
        assert again == details
        assert extended.call_count == 1
        assert series_translation.call_count == 1
        assert pilot.call_count == 1
        assert missing.call_count == 3
        assert await api_cache.get("tvdb:translation:episodes:349232:fra") == (None, True)

    @pytest.mark.asyncio
    @respx.mock
    async def test_unadvertised_series_translation_is_skipped(
        self, make_settings, api_cache: APICache
    ):
        settings = make_settings(
            tvdb_api_key="key", language_mode="override", language_override_code="spa"
        )
        mock_tvdb_login()
        respx.get(f"{TVDB}/series/81189/extended").mock(
            return_value=httpx.Response(200, json=TVDB_SERIES_EXTENDED_RESPONSE)
        )
        series_translation = respx.get(f"{TVDB}/series/81189/translations/spa")
        respx.get(url__regex=rf"{TVDB}/episodes/\d+/translations/spa").mock(
            return_value=httpx.Response(404)
        )

        details = await build_provider(settings, api_cache).get_series_details("81189")

        assert details.name == "Breaking Bad"
        assert not series_translation.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_tmdb_cross_reference_from_imdb(self, settings, api_cache: APICache):
        payload = {
            "status": "success",
            "data": dict(
                TVDB_SERIES_EXTENDED_RESPONSE["data"],
                remoteIds=[{"id": "tt0903747", "type": 2, "sourceName": "IMDB"}],
            ),
        }
        mock_tvdb_login()
        respx.get(f"{TVDB}/series/81189/extended").mock(
            return_value=httpx.Response(200, json=payload)
        )
        find = respx.get(f"{TMDB}/find/tt0903747").mock(
            return_value=httpx.Response(200, json=TMDB_FIND_SERIES_RESPONSE)
        )

        details = await build_provider(settings, api_cache).get_series_details("81189")

        assert details.imdb_id == "tt0903747"
        assert details.tmdb_id == "1396"
        assert find.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_unknown_series_is_none(self, settings, api_cache: APICache):
        mock_tvdb_login()
        respx.get(f"{TVDB}/series/1/extended").mock(return_value=httpx.Response(404))

        assert await build_provider(settings, api_cache).get_series_details("1") is None
