"""
Client d'un addon AIOStreams (protocole Stremio, ressource /stream).

L'URL configuree peut etre celle du manifest : le suffixe manifest.json
est retire. Chaque appel est borne par un timeout fixe de 30 secondes.
"""

from typing import Optional

import httpx

from dynamic_library.adapters.api.cache import APICache, cached_lookup
from dynamic_library.adapters.api.http import build_timeout, fetch_json, parse_model
from dynamic_library.adapters.api.models.aiostreams import AIOStream, AIOStreamsResponse
from dynamic_library.config import Settings
from dynamic_library.core.ports.api_clients import IAIOStreamsClient
from dynamic_library.core.value_objects.lookup import Lookup
from dynamic_library.utils.parsing import normalize_imdb_id, strip_manifest_suffix


class AIOStreamsClient(IAIOStreamsClient):
    """
    Client AIOStreams.

    Example:
        client = AIOStreamsClient(settings, cache)
        lookup = await client.get_episode_streams("tt0903747", 1, 1)
        for stream in lookup.value or []:
            print(stream.display_name, stream.url)
    """

    ADDON_TIMEOUT = 30.0

    def __init__(
        self,
        settings: Settings,
        cache: APICache,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._base_url = strip_manifest_suffix(settings.aiostreams_url)
        self._ttl = settings.cache_ttl_seconds
        self._cache = cache
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def is_configured(self) -> bool:
        return bool(self._base_url)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(timeout=build_timeout(self.ADDON_TIMEOUT))
            self._owns_client = True
        return self._client

    async def _streams(self, cache_key: str, path: str) -> Lookup[list[AIOStream]]:
        if not self.is_configured:
            return Lookup.not_configured("aiostreams: url missing")

        async def fetch() -> Lookup[list[AIOStream]]:
            lookup = await fetch_json(self._get_client(), "GET", f"{self._base_url}{path}")
            return parse_model(AIOStreamsResponse, lookup).map(lambda r: r.streams)

        return await cached_lookup(self._cache, cache_key, self._ttl, fetch)

    async def get_movie_streams(self, imdb_id: str) -> Lookup[list[AIOStream]]:
        """Flux disponibles pour un film."""
        imdb_id = normalize_imdb_id(imdb_id)
        return await self._streams(
            f"aiostreams:movie:{imdb_id.lower()}", f"/stream/movie/{imdb_id}.json"
        )

    async def get_episode_streams(
        self, imdb_id: str, season: int, episode: int
    ) -> Lookup[list[AIOStream]]:
        """Flux disponibles pour un episode ({imdb}:{saison}:{episode})."""
        imdb_id = normalize_imdb_id(imdb_id)
        return await self._streams(
            f"aiostreams:series:{imdb_id.lower()}:{season}:{episode}",
            f"/stream/series/{imdb_id}:{season}:{episode}.json",
        )

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None
