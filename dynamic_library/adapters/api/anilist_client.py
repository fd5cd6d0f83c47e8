"""
Client GraphQL AniList pour la resolution d'identifiants d'animes.

AniList ne demande aucune cle : le client est toujours configure.
Les resultats sont mis en cache, absences comprises (un 404 GraphQL
signifie que le media n'existe pas).

Usage:
    client = AniListClient(settings, cache)
    media = await client.search_by_title_and_year("Cowboy Bebop", 1998)
"""

from typing import Any, Optional

import httpx
from loguru import logger

from dynamic_library.adapters.api.cache import APICache, cached_lookup
from dynamic_library.adapters.api.http import build_timeout, fetch_json, parse_model
from dynamic_library.adapters.api.models.anilist import (
    AniListMedia,
    AniListMediaResponse,
    AniListPageResponse,
)
from dynamic_library.config import Settings
from dynamic_library.core.value_objects.lookup import Lookup

_MEDIA_FIELDS = """
    id
    idMal
    seasonYear
    episodes
    format
    title { romaji english native }
"""

SEARCH_QUERY = (
    "query ($search: String) { Media(search: $search, type: ANIME) {"
    + _MEDIA_FIELDS
    + "} }"
)

MAL_ID_QUERY = (
    "query ($idMal: Int) { Media(idMal: $idMal, type: ANIME) {"
    + _MEDIA_FIELDS
    + "} }"
)

PAGE_QUERY = (
    "query ($search: String) { Page(perPage: 10) {"
    " media(search: $search, type: ANIME, sort: SEARCH_MATCH) {"
    + _MEDIA_FIELDS
    + "} } }"
)


class AniListClient:
    """
    Client AniList (GraphQL).

    Attributes:
        ENDPOINT: URL unique de l'API GraphQL

    Example:
        client = AniListClient(settings, cache)
        lookup = await client.search_by_mal_id(1)
        if lookup.found:
            print(lookup.value.id, lookup.value.title.preferred)
    """

    ENDPOINT = "https://graphql.anilist.co"

    def __init__(
        self,
        settings: Settings,
        cache: APICache,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._ttl = settings.cache_ttl_seconds
        self._timeout = settings.http_timeout_seconds
        self._cache = cache
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def is_configured(self) -> bool:
        return True

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json", "Content-Type": "application/json"},
                timeout=build_timeout(self._timeout),
            )
            self._owns_client = True
        return self._client

    async def _query(self, query: str, variables: dict[str, Any]) -> Lookup[Any]:
        return await fetch_json(
            self._get_client(),
            "POST",
            self.ENDPOINT,
            json={"query": query, "variables": variables},
        )

    async def _media(
        self, cache_key: str, query: str, variables: dict[str, Any]
    ) -> Lookup[AniListMedia]:
        async def fetch() -> Lookup[AniListMedia]:
            lookup = parse_model(AniListMediaResponse, await self._query(query, variables))
            if lookup.found and lookup.value.data.media is None:
                return Lookup.not_found(f"anilist: no media for {variables}")
            return lookup.map(lambda r: r.data.media)

        return await cached_lookup(self._cache, cache_key, self._ttl, fetch)

    async def search_by_title(self, title: str) -> Lookup[AniListMedia]:
        """
        Recherche le meilleur anime correspondant a un titre.

        Args:
            title: Titre (romaji, anglais ou natif)

        Returns:
            Lookup du media, NOT_FOUND (mis en cache) si aucun resultat
        """
        cache_key = f"anilist:search:{title.strip().lower()}"
        return await self._media(cache_key, SEARCH_QUERY, {"search": title})

    async def search_by_mal_id(self, mal_id: int) -> Lookup[AniListMedia]:
        """Resout un anime depuis son identifiant MyAnimeList."""
        cache_key = f"anilist:mal:{mal_id}"
        return await self._media(cache_key, MAL_ID_QUERY, {"idMal": mal_id})

    async def search_by_title_and_year(
        self, title: str, year: Optional[int]
    ) -> Lookup[AniListMedia]:
        """
        Recherche un anime par titre en departageant avec l'annee.

        Priorite : annee exacte, puis annee a +/- 1, puis premier resultat.

        Args:
            title: Titre recherche
            year: Annee de diffusion (None : premier resultat)

        Returns:
            Lookup du media retenu, NOT_FOUND si la page est vide
        """
        cache_key = f"anilist:page:{title.strip().lower()}"

        async def fetch() -> Lookup[list[AniListMedia]]:
            lookup = await self._query(PAGE_QUERY, {"search": title})
            return parse_model(AniListPageResponse, lookup).map(lambda r: r.data.page.media)

        page = await cached_lookup(self._cache, cache_key, self._ttl, fetch)
        if not page.found:
            return page
        if not page.value:
            return Lookup.not_found(f"anilist: no result for {title}")

        media = _pick_by_year(page.value, year)
        logger.debug(f"AniList: '{title}' ({year}) -> {media.id}")
        return Lookup.ok(media)

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None


def _pick_by_year(candidates: list[AniListMedia], year: Optional[int]) -> AniListMedia:
    if year is not None:
        for media in candidates:
            if media.season_year == year:
                return media
        for media in candidates:
            if media.season_year is not None and abs(media.season_year - year) == 1:
                return media
    return candidates[0]
