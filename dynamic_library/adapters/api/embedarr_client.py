"""
Client du service Embedarr.

Embedarr ajoute des films, series et animes a une bibliotheque et fournit
des URLs de lecture. Header X-Api-Key envoye seulement si une cle est definie.

Les ajouts a la bibliotheque ont des effets de bord : leurs reponses ne
sont jamais mises en cache. Les URLs de lecture le sont (TTL configure).
"""

from typing import Any, Optional

import httpx
from loguru import logger

from dynamic_library.adapters.api.cache import APICache, cached_lookup
from dynamic_library.adapters.api.http import build_timeout, fetch_json, parse_model, send
from dynamic_library.adapters.api.models.embedarr import EmbedarrResponse, EmbedarrUrlResponse
from dynamic_library.config import Settings
from dynamic_library.core.ports.api_clients import IEmbedarrClient
from dynamic_library.core.value_objects.lookup import Lookup
from dynamic_library.utils.parsing import normalize_imdb_id


class EmbedarrClient(IEmbedarrClient):
    """
    Client Embedarr.

    Example:
        client = EmbedarrClient(settings, cache)
        if await client.is_available():
            result = await client.add_movie("603")
            url = await client.get_movie_stream_url("tt0133093")
    """

    def __init__(
        self,
        settings: Settings,
        cache: APICache,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._base_url = (settings.embedarr_url or "").rstrip("/")
        self._api_key = settings.embedarr_api_key
        self._ttl = settings.cache_ttl_seconds
        self._timeout = settings.http_timeout_seconds
        self._cache = cache
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def is_configured(self) -> bool:
        return bool(self._base_url)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(timeout=build_timeout(self._timeout))
            self._owns_client = True
        return self._client

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self._api_key:
            headers["X-Api-Key"] = self._api_key
        return headers

    async def _request(self, method: str, path: str, **kwargs: Any) -> Lookup[Any]:
        return await fetch_json(
            self._get_client(),
            method,
            f"{self._base_url}{path}",
            headers=self._headers(),
            **kwargs,
        )

    async def is_available(self) -> bool:
        """Verifie que le service repond sur /health."""
        if not self.is_configured:
            return False
        lookup = await send(
            self._get_client(), "GET", f"{self._base_url}/health", headers=self._headers()
        )
        return lookup.found

    async def _add(self, kind: str, item_id: str) -> EmbedarrResponse:
        if not self.is_configured:
            return EmbedarrResponse.failure("Embedarr is not configured")

        lookup = parse_model(
            EmbedarrResponse,
            await self._request("POST", f"/api/admin/library/{kind}", json={"id": item_id}),
        )
        if not lookup.found:
            return EmbedarrResponse.failure(lookup.detail or "Embedarr request failed")

        if not lookup.value.success:
            logger.warning(f"Embedarr: echec de l'ajout {kind}/{item_id}: {lookup.value.error}")
        return lookup.value

    async def add_movie(self, movie_id: str) -> EmbedarrResponse:
        """
        Ajoute un film a la bibliotheque Embedarr.

        Args:
            movie_id: Identifiant du film (TMDB ou IMDb)

        Returns:
            EmbedarrResponse (success False et message d'erreur en cas d'echec)
        """
        return await self._add("movies", movie_id)

    async def add_tv_series(self, series_id: str) -> EmbedarrResponse:
        """Ajoute une serie a la bibliotheque Embedarr."""
        return await self._add("tv", series_id)

    async def add_anime(self, anime_id: str) -> EmbedarrResponse:
        """Ajoute un anime (identifiant AniList) a la bibliotheque Embedarr."""
        return await self._add("anime", anime_id)

    async def _stream_url(self, cache_key: str, path: str) -> Lookup[EmbedarrUrlResponse]:
        if not self.is_configured:
            return Lookup.not_configured("embedarr: url missing")

        async def fetch() -> Lookup[EmbedarrUrlResponse]:
            lookup = parse_model(EmbedarrUrlResponse, await self._request("GET", path))
            if lookup.found and not lookup.value.url:
                return Lookup.not_found(f"embedarr: no url for {path}")
            return lookup

        return await cached_lookup(self._cache, cache_key, self._ttl, fetch)

    async def get_movie_stream_url(self, imdb_id: str) -> Lookup[EmbedarrUrlResponse]:
        """URL de lecture d'un film."""
        imdb_id = normalize_imdb_id(imdb_id)
        return await self._stream_url(
            f"embedarr:url:movie:{imdb_id.lower()}", f"/api/url/movie/{imdb_id}"
        )

    async def get_tv_episode_stream_url(
        self, imdb_id: str, season: int, episode: int
    ) -> Lookup[EmbedarrUrlResponse]:
        """URL de lecture d'un episode de serie."""
        imdb_id = normalize_imdb_id(imdb_id)
        return await self._stream_url(
            f"embedarr:url:tv:{imdb_id.lower()}:s{season}e{episode}",
            f"/api/url/tv/{imdb_id}/{season}/{episode}",
        )

    async def get_anime_stream_url(
        self, anime_id: str, episode: int, audio_type: str = "sub"
    ) -> Lookup[EmbedarrUrlResponse]:
        """
        URL de lecture d'un episode d'anime.

        Args:
            anime_id: Identifiant AniList
            episode: Numero d'episode (absolu)
            audio_type: "sub" ou "dub"
        """
        audio_type = audio_type.lower()
        return await self._stream_url(
            f"embedarr:url:anime:{anime_id}:e{episode}:{audio_type}",
            f"/api/url/anime/{anime_id}/{episode}/{audio_type}",
        )

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None
