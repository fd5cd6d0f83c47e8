"""
Client de l'API REST OpenSubtitles (recherche et telechargement de sous-titres).

Deux modes d'appel :
- non authentifie : header Api-Key seul (quota reduit)
- authentifie : token bearer obtenu via POST /login avec les identifiants
  du plugin OpenSubtitles de Jellyfin (token de 24h, rafraichi apres 23h)

Le telechargement se fait en deux temps : POST /download retourne un lien
temporaire pre-autorise, dont le contenu est lu par un transport separe
sans authentification. Le contenu est mis en cache 24 heures.

Reference API: https://opensubtitles.stoplight.io/docs/opensubtitles-api
"""

from datetime import timedelta
from typing import Optional

import httpx
from loguru import logger

from dynamic_library import __version__
from dynamic_library.adapters.api.cache import APICache, cached_lookup
from dynamic_library.adapters.api.credentials import read_opensubtitles_credentials
from dynamic_library.adapters.api.http import build_timeout, fetch_json, parse_model, send
from dynamic_library.adapters.api.models.opensubtitles import (
    OpenSubtitlesDownloadResponse,
    OpenSubtitlesLoginResponse,
    OpenSubtitlesResult,
    OpenSubtitlesSearchResponse,
)
from dynamic_library.adapters.api.token import TokenManager
from dynamic_library.config import Settings
from dynamic_library.core.ports.api_clients import IOpenSubtitlesClient
from dynamic_library.core.value_objects.lookup import Lookup, LookupStatus
from dynamic_library.utils.parsing import normalize_imdb_id


def _imdb_number(imdb_id: str) -> str:
    """Identifiant IMDb sans prefixe ni zeros initiaux, attendu par l'API."""
    digits = normalize_imdb_id(imdb_id)[2:]
    return digits.lstrip("0") or "0"


def _languages_param(languages: list[str]) -> str:
    """Langues en minuscules, triees et sans doublon (cle de cache stable)."""
    return ",".join(sorted({lang.strip().lower() for lang in languages if lang.strip()}))


class OpenSubtitlesClient(IOpenSubtitlesClient):
    """
    Client OpenSubtitles.

    Attributes:
        BASE_URL: URL de base de l'API REST v1
        TOKEN_VALIDITY: Duree retenue pour un token emis pour 24 heures

    Example:
        client = OpenSubtitlesClient(settings, cache)
        lookup = await client.search_movie_subtitles("tt0133093", ["en", "fr"])
        if lookup.found and lookup.value:
            file_id = lookup.value[0].attributes.files[0].file_id
            content = await client.download_subtitle(file_id)
        await client.close()
    """

    BASE_URL = "https://api.opensubtitles.com/api/v1"
    TOKEN_VALIDITY = timedelta(hours=23)
    USER_AGENT = f"DynamicLibrary v{__version__}"

    def __init__(
        self,
        settings: Settings,
        cache: APICache,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialise le client OpenSubtitles.

        Args:
            settings: Configuration (cle API, identifiants Jellyfin, TTL, timeout)
            cache: Instance APICache pour le caching des resultats
            http_client: Client httpx fourni par l'hote (sinon cree a la demande)
        """
        self._api_key = settings.opensubtitles_api_key
        self._use_credentials = settings.use_jellyfin_opensubtitles_credentials
        self._credentials_file = settings.opensubtitles_credentials_file
        self._ttl = settings.cache_ttl_seconds
        self._timeout = settings.http_timeout_seconds
        self._cache = cache
        self._client = http_client
        self._owns_client = http_client is None
        self._download_client: Optional[httpx.AsyncClient] = None
        self.tokens = TokenManager(self._login, self.TOKEN_VALIDITY, name="opensubtitles")

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP de l'API, le cree si necessaire (lazy init)."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(timeout=build_timeout(self._timeout))
            self._owns_client = True
        return self._client

    def _get_download_client(self) -> httpx.AsyncClient:
        """Transport separe, sans en-tete d'authentification, pour les liens de telechargement."""
        if self._download_client is None or self._download_client.is_closed:
            self._download_client = httpx.AsyncClient(
                timeout=build_timeout(self._timeout), follow_redirects=True
            )
        return self._download_client

    def _base_headers(self) -> dict[str, str]:
        return {
            "Api-Key": self._api_key or "",
            "User-Agent": self.USER_AGENT,
            "Accept": "application/json",
        }

    async def _headers(self) -> dict[str, str]:
        """En-tetes d'appel, avec le token bearer si des identifiants sont disponibles."""
        headers = self._base_headers()
        if self._use_credentials:
            token = await self.tokens.get_token()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _login(self) -> Optional[str]:
        """
        Obtient un token via POST /login.

        Returns:
            Token bearer, ou None sans identifiants ou si le login echoue
            (les appels continuent alors en mode non authentifie)
        """
        credentials = read_opensubtitles_credentials(self._credentials_file)
        if credentials is None:
            return None

        lookup = parse_model(
            OpenSubtitlesLoginResponse,
            await fetch_json(
                self._get_client(),
                "POST",
                f"{self.BASE_URL}/login",
                json={"username": credentials.username, "password": credentials.password},
                headers=self._base_headers(),
            ),
        )
        if not lookup.found or not lookup.value.token:
            logger.warning(f"OpenSubtitles: echec de l'authentification ({lookup.detail})")
            return None

        logger.debug(
            f"OpenSubtitles: authentifie, {lookup.value.user.allowed_downloads} "
            "telechargements autorises"
        )
        return lookup.value.token

    async def _search(
        self, cache_key: str, params: dict[str, str]
    ) -> Lookup[list[OpenSubtitlesResult]]:
        async def fetch() -> Lookup[list[OpenSubtitlesResult]]:
            lookup = await fetch_json(
                self._get_client(),
                "GET",
                f"{self.BASE_URL}/subtitles",
                params=params,
                headers=await self._headers(),
            )
            return parse_model(OpenSubtitlesSearchResponse, lookup).map(lambda r: r.data)

        return await cached_lookup(self._cache, cache_key, self._ttl, fetch)

    async def search_movie_subtitles(
        self, imdb_id: str, languages: list[str]
    ) -> Lookup[list[OpenSubtitlesResult]]:
        """
        Recherche les sous-titres d'un film.

        Args:
            imdb_id: Identifiant IMDb du film (avec ou sans "tt")
            languages: Codes ISO 639-1 demandes (ordre indifferent)

        Returns:
            Lookup des resultats (liste vide si aucun sous-titre)
        """
        if not self.is_configured:
            return Lookup.not_configured("opensubtitles: api key missing")

        imdb_id = normalize_imdb_id(imdb_id).lower()
        langs = _languages_param(languages)
        cache_key = f"opensubtitles:search:movie:{imdb_id}:{langs}"
        params = {"imdb_id": _imdb_number(imdb_id), "languages": langs}
        return await self._search(cache_key, params)

    async def search_episode_subtitles(
        self,
        parent_imdb_id: str,
        season: int,
        episode: int,
        languages: list[str],
    ) -> Lookup[list[OpenSubtitlesResult]]:
        """
        Recherche les sous-titres d'un episode.

        Args:
            parent_imdb_id: Identifiant IMDb de la serie
            season: Numero de saison
            episode: Numero d'episode
            languages: Codes ISO 639-1 demandes

        Returns:
            Lookup des resultats (liste vide si aucun sous-titre)
        """
        if not self.is_configured:
            return Lookup.not_configured("opensubtitles: api key missing")

        imdb_id = normalize_imdb_id(parent_imdb_id).lower()
        langs = _languages_param(languages)
        cache_key = f"opensubtitles:search:episode:{imdb_id}:s{season}e{episode}:{langs}"
        params = {
            "parent_imdb_id": _imdb_number(imdb_id),
            "season_number": str(season),
            "episode_number": str(episode),
            "languages": langs,
        }
        return await self._search(cache_key, params)

    async def download_subtitle(self, file_id: int) -> Lookup[str]:
        """
        Telecharge le contenu d'un fichier de sous-titres.

        Etape 1 : POST /download (authentifie si possible) -> lien temporaire.
        Etape 2 : GET du lien sur un transport separe, sans en-tete d'API.

        Args:
            file_id: Identifiant du fichier (attributes.files[].file_id)

        Returns:
            Lookup du texte du sous-titre (seul un succes est mis en cache, 24 heures)
        """
        if not self.is_configured:
            return Lookup.not_configured("opensubtitles: api key missing")

        cache_key = f"opensubtitles:content:{file_id}"

        async def fetch() -> Lookup[str]:
            link = parse_model(
                OpenSubtitlesDownloadResponse,
                await fetch_json(
                    self._get_client(),
                    "POST",
                    f"{self.BASE_URL}/download",
                    json={"file_id": file_id},
                    headers=await self._headers(),
                ),
            )
            if not link.found:
                return _never_missing(link)
            if not link.value.link:
                logger.warning(f"OpenSubtitles: pas de lien pour {file_id} ({link.value.message})")
                return Lookup.unavailable(f"opensubtitles: no link for {file_id}")

            logger.debug(f"OpenSubtitles: {link.value.remaining} telechargements restants")
            content = await send(self._get_download_client(), "GET", link.value.link)
            return _never_missing(content).map(lambda response: response.text)

        return await cached_lookup(
            self._cache, cache_key, APICache.SUBTITLE_CONTENT_TTL, fetch
        )

    async def close(self) -> None:
        """Ferme les clients HTTP crees par cette instance."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
        self._client = None
        if self._download_client is not None:
            await self._download_client.aclose()
            self._download_client = None


def _never_missing(lookup: Lookup) -> Lookup:
    """Un 404 du telechargement (lien temporaire expire) reste une indisponibilite."""
    if lookup.status is LookupStatus.NOT_FOUND:
        return Lookup.unavailable(lookup.detail)
    return lookup
