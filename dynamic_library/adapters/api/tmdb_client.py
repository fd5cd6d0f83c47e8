"""
Client TMDB pour la recherche et la recuperation de metadonnees films.

Implemente l'interface ITmdbClient pour TMDB (The Movie Database) v3.
La cle API est passee en parametre de requete (jamais en header bearer).
Les reponses sont mises en cache (cache negatif pour les 404), sans retry.

Usage:
    cache = APICache()
    client = TMDBClient(settings, cache)
    lookup = await client.search_movies("Matrix")
    details = await client.get_movie_details("603")
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from dynamic_library.adapters.api.cache import APICache, cached_lookup
from dynamic_library.adapters.api.http import build_timeout, fetch_json, parse_model
from dynamic_library.adapters.api.models.tmdb import (
    TmdbConfigurationResponse,
    TmdbFindResponse,
    TmdbMovieDetails,
    TmdbMovieResult,
    TmdbSearchResponse,
    TmdbSeriesResult,
)
from dynamic_library.adapters.api.token import GuardedValue
from dynamic_library.config import Settings
from dynamic_library.core.ports.api_clients import ITmdbClient
from dynamic_library.core.value_objects.lookup import Lookup
from dynamic_library.utils.parsing import normalize_imdb_id


class TMDBClient(ITmdbClient):
    """
    Client API TMDB pour les metadonnees de films.

    Implemente ITmdbClient avec:
    - Recherche de films par titre (langue optionnelle)
    - Details complets d'un film avec les credits
    - Resolution d'une serie par identifiant IMDb (/find)
    - URL de base des images resolue une fois par processus

    Attributes:
        BASE_URL: URL de base de l'API TMDB v3
        DEFAULT_IMAGE_BASE_URL: Base des images si /configuration echoue

    Example:
        client = TMDBClient(settings, cache)
        lookup = await client.search_movies("Inception")
        if lookup.found and lookup.value:
            details = await client.get_movie_details(str(lookup.value[0].id))
        await client.close()
    """

    BASE_URL = "https://api.themoviedb.org/3"
    DEFAULT_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/"

    def __init__(
        self,
        settings: Settings,
        cache: APICache,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            settings: Configuration (cle API, langue, TTL, timeout)
            cache: Instance APICache pour le caching des resultats
            http_client: Client httpx fourni par l'hote (sinon cree a la demande)
        """
        self._api_key = settings.tmdb_api_key
        self._language = settings.tmdb_language_code
        self._ttl = settings.cache_ttl_seconds
        self._timeout = settings.http_timeout_seconds
        self._cache = cache
        self._client = http_client
        self._owns_client = http_client is None
        self._image_base = GuardedValue(self._fetch_image_base_url)

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json"},
                timeout=build_timeout(self._timeout),
            )
            self._owns_client = True
        return self._client

    def _params(self, **extra: Any) -> dict[str, Any]:
        """Parametres communs : cle API et langue si surchargee."""
        params: dict[str, Any] = {"api_key": self._api_key}
        if self._language:
            params["language"] = self._language
        params.update(extra)
        return params

    @property
    def _language_key(self) -> str:
        return self._language or "default"

    async def _get(self, path: str, **params: Any) -> Lookup[Any]:
        return await fetch_json(
            self._get_client(), "GET", f"{self.BASE_URL}{path}", params=self._params(**params)
        )

    async def search_movies(self, query: str) -> Lookup[list[TmdbMovieResult]]:
        """
        Recherche des films par titre.

        Utilise le pattern cache-first : la cle inclut la langue et la
        requete en minuscules.

        Args:
            query: Titre du film a rechercher

        Returns:
            Lookup de la liste des resultats dans l'ordre de TMDB
        """
        if not self.is_configured:
            return Lookup.not_configured("tmdb: api key missing")

        cache_key = f"tmdb:search:movie:{self._language_key}:{query.strip().lower()}"

        async def fetch() -> Lookup[list[TmdbMovieResult]]:
            lookup = await self._get(
                "/search/movie", query=query, include_adult="false"
            )
            return parse_model(TmdbSearchResponse, lookup).map(lambda r: r.results)

        return await cached_lookup(self._cache, cache_key, self._ttl, fetch)

    async def get_movie_details(self, movie_id: str) -> Lookup[TmdbMovieDetails]:
        """
        Recupere les details complets d'un film, credits inclus.

        Un 404 est mis en cache comme resultat negatif.

        Args:
            movie_id: ID TMDB du film

        Returns:
            Lookup des details, NOT_FOUND si TMDB ne connait pas le film
        """
        if not self.is_configured:
            return Lookup.not_configured("tmdb: api key missing")

        cache_key = f"tmdb:movie:{self._language_key}:{movie_id}"

        async def fetch() -> Lookup[TmdbMovieDetails]:
            lookup = await self._get(f"/movie/{movie_id}", append_to_response="credits")
            return parse_model(TmdbMovieDetails, lookup)

        return await cached_lookup(self._cache, cache_key, self._ttl, fetch)

    async def get_series_by_external_id(self, imdb_id: str) -> Lookup[TmdbSeriesResult]:
        """
        Resout une serie TMDB depuis un identifiant IMDb.

        Une reponse sans serie correspondante est un resultat negatif
        definitif, mis en cache comme un 404.

        Args:
            imdb_id: Identifiant IMDb (avec ou sans prefixe "tt")

        Returns:
            Lookup du premier resultat tv_results
        """
        if not self.is_configured:
            return Lookup.not_configured("tmdb: api key missing")

        imdb_id = normalize_imdb_id(imdb_id)
        cache_key = f"tmdb:find:tv:{self._language_key}:{imdb_id.lower()}"

        async def fetch() -> Lookup[TmdbSeriesResult]:
            lookup = parse_model(
                TmdbFindResponse,
                await self._get(f"/find/{imdb_id}", external_source="imdb_id"),
            )
            if lookup.found and not lookup.value.tv_results:
                return Lookup.not_found(f"tmdb: no series for {imdb_id}")
            return lookup.map(lambda r: r.tv_results[0])

        return await cached_lookup(self._cache, cache_key, self._ttl, fetch)

    async def _fetch_image_base_url(self) -> Optional[str]:
        if not self.is_configured:
            return None
        lookup = parse_model(TmdbConfigurationResponse, await self._get("/configuration"))
        if not lookup.found or not lookup.value.images.secure_base_url:
            logger.warning("TMDB: configuration des images indisponible, base par defaut")
            return None
        return lookup.value.images.secure_base_url

    async def get_image_base_url(self) -> str:
        """
        Retourne l'URL de base des images TMDB.

        Resolue une seule fois par processus via /configuration, sous
        double controle. En cas d'echec, la base par defaut est retournee
        sans etre memorisee (nouvelle tentative au prochain appel).
        """
        return await self._image_base.get() or self.DEFAULT_IMAGE_BASE_URL

    async def close(self) -> None:
        """Ferme le client HTTP s'il a ete cree par cette instance."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None
