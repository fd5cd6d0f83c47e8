"""
Fournisseur de catalogue base sur un addon compatible Stremio.

Protocole (https://github.com/Stremio/stremio-addon-sdk) :
- recherche : GET {base}/catalog/{type}/search/search={query}.json
- details : GET {base}/meta/{type}/{id}.json

L'URL configuree peut etre celle du manifest : le suffixe manifest.json
est retire. Chaque appel est borne par un timeout fixe de 30 secondes.
"""

from typing import Optional
from urllib.parse import quote

import httpx
from loguru import logger

from dynamic_library.adapters.api.cache import APICache, cached_lookup
from dynamic_library.adapters.api.http import build_timeout, fetch_json, parse_model
from dynamic_library.adapters.api.models.stremio import (
    StremioCatalogResponse,
    StremioMeta,
    StremioMetaPreview,
    StremioMetaResponse,
)
from dynamic_library.adapters.catalog.normalizers import (
    stremio_meta_to_details,
    stremio_preview_to_item,
)
from dynamic_library.config import Settings
from dynamic_library.core.entities.catalog import (
    CatalogContentType,
    CatalogItem,
    CatalogItemDetails,
)
from dynamic_library.core.ports.catalog_provider import ICatalogProvider
from dynamic_library.core.value_objects.lookup import Lookup
from dynamic_library.utils.parsing import strip_manifest_suffix

# Types Stremio correspondant aux types du catalogue
STREMIO_TYPES = {
    CatalogContentType.MOVIE: "movie",
    CatalogContentType.SERIES: "series",
}


class StremioCatalogProvider(ICatalogProvider):
    """
    Fournisseur de catalogue via un addon Stremio.

    Attributes:
        ADDON_TIMEOUT: Timeout de chaque appel a l'addon (secondes)

    Example:
        provider = StremioCatalogProvider(settings, cache)
        items = await provider.search_series("Breaking Bad")
        details = await provider.get_series_details(items[0].id)
        await provider.close()
    """

    ADDON_TIMEOUT = 30.0

    def __init__(
        self,
        settings: Settings,
        cache: APICache,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialise le fournisseur Stremio.

        Args:
            settings: Configuration (URL de l'addon, TTL)
            cache: Instance APICache pour le caching des resultats
            http_client: Client httpx fourni par l'hote (sinon cree a la demande)
        """
        self._base_url = strip_manifest_suffix(settings.stremio_catalog_url)
        self._ttl = settings.cache_ttl_seconds
        self._cache = cache
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def is_configured(self) -> bool:
        return bool(self._base_url)

    @property
    def provider_name(self) -> str:
        return "Stremio addon"

    @property
    def base_url(self) -> str:
        """URL de base de l'addon, sans suffixe manifest.json."""
        return self._base_url

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json"},
                timeout=build_timeout(self.ADDON_TIMEOUT),
            )
            self._owns_client = True
        return self._client

    async def _search_catalog(
        self, query: str, content_type: CatalogContentType
    ) -> Lookup[list[StremioMetaPreview]]:
        if not self.is_configured:
            return Lookup.not_configured("stremio: addon url missing")

        stremio_type = STREMIO_TYPES[content_type]
        cache_key = f"stremio:catalog:search:{stremio_type}:{query.strip().lower()}"
        search = quote(query.strip())
        url = f"{self._base_url}/catalog/{stremio_type}/search/search={search}.json"

        async def fetch() -> Lookup[list[StremioMetaPreview]]:
            lookup = await fetch_json(self._get_client(), "GET", url)
            return parse_model(StremioCatalogResponse, lookup).map(lambda r: r.metas)

        return await cached_lookup(self._cache, cache_key, self._ttl, fetch)

    async def _fetch_meta(
        self, item_id: str, content_type: CatalogContentType
    ) -> Lookup[StremioMeta]:
        if not self.is_configured:
            return Lookup.not_configured("stremio: addon url missing")

        stremio_type = STREMIO_TYPES[content_type]
        cache_key = f"stremio:meta:{stremio_type}:{item_id}"
        url = f"{self._base_url}/meta/{stremio_type}/{quote(item_id, safe=':')}.json"

        async def fetch() -> Lookup[StremioMeta]:
            lookup = parse_model(
                StremioMetaResponse, await fetch_json(self._get_client(), "GET", url)
            )
            if lookup.found and lookup.value.meta is None:
                return Lookup.not_found(f"stremio: no meta for {stremio_type}/{item_id}")
            return lookup.map(lambda r: r.meta)

        return await cached_lookup(self._cache, cache_key, self._ttl, fetch)

    async def _search(
        self, query: str, max_results: int, content_type: CatalogContentType
    ) -> list[CatalogItem]:
        lookup = await self._search_catalog(query, content_type)
        if not lookup.found:
            logger.debug(f"Stremio search '{query}' ({content_type.value}): {lookup.status.value}")
            return []
        return [stremio_preview_to_item(m, content_type) for m in lookup.value[:max_results]]

    async def _details(
        self, item_id: str, content_type: CatalogContentType
    ) -> Optional[CatalogItemDetails]:
        lookup = await self._fetch_meta(item_id, content_type)
        if not lookup.found:
            logger.debug(f"Stremio meta {item_id} ({content_type.value}): {lookup.status.value}")
            return None
        return stremio_meta_to_details(lookup.value, content_type)

    async def search_movies(self, query: str, max_results: int = 20) -> list[CatalogItem]:
        """Recherche des films dans le catalogue de recherche de l'addon."""
        return await self._search(query, max_results, CatalogContentType.MOVIE)

    async def search_series(self, query: str, max_results: int = 20) -> list[CatalogItem]:
        """Recherche des series dans le catalogue de recherche de l'addon."""
        return await self._search(query, max_results, CatalogContentType.SERIES)

    async def get_movie_details(self, item_id: str) -> Optional[CatalogItemDetails]:
        """
        Details d'un film via la ressource meta de l'addon.

        Args:
            item_id: Identifiant natif de l'addon (souvent un ID IMDb "tt...")

        Returns:
            CatalogItemDetails, ou None si l'addon ne connait pas l'element
        """
        return await self._details(item_id, CatalogContentType.MOVIE)

    async def get_series_details(self, item_id: str) -> Optional[CatalogItemDetails]:
        """Details d'une serie (episodes depuis "videos", saisons deduites)."""
        return await self._details(item_id, CatalogContentType.SERIES)

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None
