"""
Client TVDB API v4 pour les series TV.

Implemente ITvdbClient pour rechercher et recuperer les metadonnees
des series TV depuis TVDB. Gere l'authentification bearer (token obtenu
via POST /login, valide 30 jours, rafraichi apres 25 jours) et le caching.

Les traductions d'episodes sont mises en cache une par une, y compris
les absences : une serie peut demander plus de 100 appels par langue.

Reference API: https://thetvdb.github.io/v4-api/
"""

from datetime import timedelta
from typing import Any, Optional

import httpx
from loguru import logger

from dynamic_library.adapters.api.cache import APICache, cached_lookup
from dynamic_library.adapters.api.http import (
    build_timeout,
    decode_json,
    fetch_json,
    parse_model,
    qualify_response,
)
from dynamic_library.adapters.api.models.tvdb import (
    TvdbAuthResponse,
    TvdbSearchResponse,
    TvdbSearchResult,
    TvdbSeriesExtended,
    TvdbSeriesResponse,
    TvdbTranslation,
    TvdbTranslationResponse,
)
from dynamic_library.adapters.api.token import TokenManager
from dynamic_library.config import Settings
from dynamic_library.core.ports.api_clients import ITvdbClient
from dynamic_library.core.value_objects.lookup import Lookup


class TVDBClient(ITvdbClient):
    """
    Client TVDB pour la recherche de series TV.

    Le token est obtenu a la premiere requete authentifiee et partage par
    tous les appelants concurrents de l'instance (voir TokenManager).

    Attributes:
        BASE_URL: URL de base de l'API TVDB v4
        TOKEN_VALIDITY: Duree retenue pour un token emis pour 30 jours

    Example:
        client = TVDBClient(settings, cache)
        lookup = await client.search_series("Breaking Bad")
        series = await client.get_series_extended("81189")
        await client.close()
    """

    BASE_URL = "https://api4.thetvdb.com/v4"
    TOKEN_VALIDITY = timedelta(days=25)

    def __init__(
        self,
        settings: Settings,
        cache: APICache,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialise le client TVDB.

        Args:
            settings: Configuration (cle API, PIN, TTL, timeout)
            cache: Instance de APICache pour le caching des resultats
            http_client: Client httpx fourni par l'hote (sinon cree a la demande)
        """
        self._api_key = settings.tvdb_api_key
        self._pin = settings.tvdb_pin
        self._ttl = settings.cache_ttl_seconds
        self._timeout = settings.http_timeout_seconds
        self._cache = cache
        self._client = http_client
        self._owns_client = http_client is None
        self.tokens = TokenManager(self._login, self.TOKEN_VALIDITY, name="tvdb")

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, cree s'il n'existe pas.

        Utilise un client unique pour beneficier du connection pooling.
        """
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json"},
                timeout=build_timeout(self._timeout),
            )
            self._owns_client = True
        return self._client

    async def _login(self) -> Optional[str]:
        """
        Obtient un nouveau token via POST /login.

        Returns:
            Token bearer, ou None si la cle est absente ou le login echoue
        """
        if not self._api_key:
            return None

        body = {"apikey": self._api_key}
        if self._pin:
            body["pin"] = self._pin

        lookup = parse_model(
            TvdbAuthResponse,
            await fetch_json(self._get_client(), "POST", f"{self.BASE_URL}/login", json=body),
        )
        if not lookup.found or not lookup.value.data.token:
            logger.warning(f"TVDB: echec de l'authentification ({lookup.detail})")
            return None
        return lookup.value.data.token

    async def _get(self, path: str, **params: Any) -> Lookup[Any]:
        """
        GET authentifie.

        Un 401 invalide le token (nouveau login au prochain appel) sans
        rejouer la requete.
        """
        token = await self.tokens.get_token()
        if token is None:
            return Lookup.unavailable("tvdb: no token")

        url = f"{self.BASE_URL}{path}"
        target = f"GET {url}"
        try:
            response = await self._get_client().get(
                url, params=params or None, headers={"Authorization": f"Bearer {token}"}
            )
        except httpx.HTTPError as e:
            logger.warning(f"TVDB: erreur de transport sur {path}: {e!r}")
            return Lookup.unavailable(f"transport: {target}")

        if response.status_code == 401:
            logger.warning("TVDB: token refuse (401), invalidation")
            self.tokens.invalidate()
            return Lookup.unavailable(f"401: {target}")

        return decode_json(qualify_response(response, target), target)

    async def search_series(self, query: str) -> Lookup[list[TvdbSearchResult]]:
        """
        Recherche des series TV par titre.

        Args:
            query: Titre de la serie a rechercher

        Returns:
            Lookup de la liste des resultats dans l'ordre de TVDB
        """
        if not self.is_configured:
            return Lookup.not_configured("tvdb: api key missing")

        cache_key = f"tvdb:search:series:{query.strip().lower()}"

        async def fetch() -> Lookup[list[TvdbSearchResult]]:
            lookup = await self._get("/search", query=query, type="series")
            return parse_model(TvdbSearchResponse, lookup).map(lambda r: r.data)

        return await cached_lookup(self._cache, cache_key, self._ttl, fetch)

    async def get_series_extended(self, series_id: str) -> Lookup[TvdbSeriesExtended]:
        """
        Recupere une serie avec ses saisons et tous ses episodes.

        Args:
            series_id: ID TVDB de la serie

        Returns:
            Lookup de la serie, NOT_FOUND si TVDB ne la connait pas
        """
        if not self.is_configured:
            return Lookup.not_configured("tvdb: api key missing")

        cache_key = f"tvdb:series:{series_id}:extended"

        async def fetch() -> Lookup[TvdbSeriesExtended]:
            lookup = parse_model(
                TvdbSeriesResponse,
                await self._get(f"/series/{series_id}/extended", meta="episodes"),
            )
            if lookup.found and lookup.value.data is None:
                return Lookup.not_found(f"tvdb: empty series {series_id}")
            return lookup.map(lambda r: r.data)

        return await cached_lookup(self._cache, cache_key, self._ttl, fetch)

    async def get_series_translation(
        self, series_id: str, language: str
    ) -> Lookup[TvdbTranslation]:
        """
        Recupere la traduction d'une serie.

        Args:
            series_id: ID TVDB de la serie
            language: Code langue TVDB a 3 lettres (ex: "fra")

        Returns:
            Lookup de la traduction, NOT_FOUND (mis en cache) si absente
        """
        return await self._translation("series", series_id, language)

    async def get_episode_translation(
        self, episode_id: str, language: str
    ) -> Lookup[TvdbTranslation]:
        """
        Recupere la traduction d'un episode.

        Args:
            episode_id: ID TVDB de l'episode
            language: Code langue TVDB a 3 lettres (ex: "fra")

        Returns:
            Lookup de la traduction, NOT_FOUND (mis en cache) si absente
        """
        return await self._translation("episodes", episode_id, language)

    async def _translation(
        self, kind: str, entity_id: str, language: str
    ) -> Lookup[TvdbTranslation]:
        if not self.is_configured:
            return Lookup.not_configured("tvdb: api key missing")

        language = language.strip().lower()
        cache_key = f"tvdb:translation:{kind}:{entity_id}:{language}"

        async def fetch() -> Lookup[TvdbTranslation]:
            lookup = parse_model(
                TvdbTranslationResponse,
                await self._get(f"/{kind}/{entity_id}/translations/{language}"),
            )
            if lookup.found and lookup.value.data is None:
                return Lookup.not_found(f"tvdb: no {language} translation for {kind}/{entity_id}")
            return lookup.map(lambda r: r.data)

        return await cached_lookup(self._cache, cache_key, self._ttl, fetch)

    async def close(self) -> None:
        """Ferme le client HTTP s'il a ete cree par cette instance."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None
