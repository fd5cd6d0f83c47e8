"""
Interfaces ports pour les clients des sources externes.

Chaque client encapsule un protocole tiers (REST, GraphQL, addon Stremio).
Toutes les opérations sont totales : elles retournent un Lookup qui porte
soit la réponse (modèle pydantic de la source), soit la raison de son absence
(NOT_CONFIGURED, UNAVAILABLE, NOT_FOUND). Aucune exception n'est levée pour
une source absente, injoignable ou qui répond de façon inattendue.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from dynamic_library.core.value_objects.lookup import Lookup

if TYPE_CHECKING:
    from dynamic_library.adapters.api.models.aiostreams import AIOStream
    from dynamic_library.adapters.api.models.embedarr import (
        EmbedarrResponse,
        EmbedarrUrlResponse,
    )
    from dynamic_library.adapters.api.models.opensubtitles import OpenSubtitlesResult
    from dynamic_library.adapters.api.models.tmdb import (
        TmdbMovieDetails,
        TmdbMovieResult,
        TmdbSeriesResult,
    )
    from dynamic_library.adapters.api.models.tvdb import (
        TvdbSearchResult,
        TvdbSeriesExtended,
        TvdbTranslation,
    )


class IApiClient(ABC):
    """Contrat commun : état de configuration et libération des ressources."""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """True si les identifiants ou l'URL minimum sont présents."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Ferme le client HTTP possédé par l'instance."""
        ...


class ITmdbClient(IApiClient):
    """
    Client de l'API TMDB (films).

    La clé API est transmise en paramètre de requête. L'URL de base des
    images est résolue une seule fois par processus.
    """

    @abstractmethod
    async def search_movies(self, query: str) -> "Lookup[list[TmdbMovieResult]]":
        """
        Recherche des films par titre.

        Args :
            query : Texte recherché (insensible à la casse pour le cache)

        Retourne :
            Lookup de la liste ordonnée des résultats (éventuellement vide)
        """
        ...

    @abstractmethod
    async def get_movie_details(self, movie_id: str) -> "Lookup[TmdbMovieDetails]":
        """Récupère les détails d'un film, crédits inclus."""
        ...

    @abstractmethod
    async def get_series_by_external_id(self, imdb_id: str) -> "Lookup[TmdbSeriesResult]":
        """Résout une série TMDB à partir de son identifiant IMDb."""
        ...

    @abstractmethod
    async def get_image_base_url(self) -> str:
        """URL de base des images (valeur par défaut si la résolution échoue)."""
        ...


class ITvdbClient(IApiClient):
    """
    Client de l'API TVDB v4 (séries).

    Les appels sont authentifiés par un token bearer obtenu via /login et
    rafraîchi sous exclusion mutuelle.
    """

    @abstractmethod
    async def search_series(self, query: str) -> "Lookup[list[TvdbSearchResult]]":
        """Recherche des séries par titre."""
        ...

    @abstractmethod
    async def get_series_extended(self, series_id: str) -> "Lookup[TvdbSeriesExtended]":
        """Récupère une série avec ses saisons et épisodes."""
        ...

    @abstractmethod
    async def get_series_translation(
        self, series_id: str, language: str
    ) -> "Lookup[TvdbTranslation]":
        """Traduction d'une série (résultat négatif mis en cache)."""
        ...

    @abstractmethod
    async def get_episode_translation(
        self, episode_id: str, language: str
    ) -> "Lookup[TvdbTranslation]":
        """Traduction d'un épisode (résultat négatif mis en cache)."""
        ...


class IOpenSubtitlesClient(IApiClient):
    """
    Client de l'API OpenSubtitles.

    Fonctionne sans identifiants utilisateur (limité) ou avec un token
    bearer quand un nom d'utilisateur et un mot de passe sont disponibles.
    """

    @abstractmethod
    async def search_movie_subtitles(
        self, imdb_id: str, languages: list[str]
    ) -> "Lookup[list[OpenSubtitlesResult]]":
        """Recherche les sous-titres d'un film."""
        ...

    @abstractmethod
    async def search_episode_subtitles(
        self,
        parent_imdb_id: str,
        season: int,
        episode: int,
        languages: list[str],
    ) -> "Lookup[list[OpenSubtitlesResult]]":
        """Recherche les sous-titres d'un épisode via l'identifiant IMDb de la série."""
        ...

    @abstractmethod
    async def download_subtitle(self, file_id: int) -> Lookup[str]:
        """Télécharge le contenu texte d'un fichier de sous-titres."""
        ...


class IEmbedarrClient(IApiClient):
    """Client du service Embedarr (ajout à la bibliothèque, URLs de lecture)."""

    @abstractmethod
    async def is_available(self) -> bool:
        """Vérifie que le service répond sur /health."""
        ...

    @abstractmethod
    async def add_movie(self, movie_id: str) -> "EmbedarrResponse":
        """Ajoute un film à la bibliothèque."""
        ...

    @abstractmethod
    async def add_tv_series(self, series_id: str) -> "EmbedarrResponse":
        """Ajoute une série à la bibliothèque."""
        ...

    @abstractmethod
    async def add_anime(self, anime_id: str) -> "EmbedarrResponse":
        """Ajoute un anime à la bibliothèque."""
        ...

    @abstractmethod
    async def get_movie_stream_url(self, imdb_id: str) -> "Lookup[EmbedarrUrlResponse]":
        ...

    @abstractmethod
    async def get_tv_episode_stream_url(
        self, imdb_id: str, season: int, episode: int
    ) -> "Lookup[EmbedarrUrlResponse]":
        ...

    @abstractmethod
    async def get_anime_stream_url(
        self, anime_id: str, episode: int, audio_type: str = "sub"
    ) -> "Lookup[EmbedarrUrlResponse]":
        ...


class IAIOStreamsClient(IApiClient):
    """Client d'un addon AIOStreams (liste des flux disponibles)."""

    @abstractmethod
    async def get_movie_streams(self, imdb_id: str) -> "Lookup[list[AIOStream]]":
        ...

    @abstractmethod
    async def get_episode_streams(
        self, imdb_id: str, season: int, episode: int
    ) -> "Lookup[list[AIOStream]]":
        ...


__all__ = [
    "IAIOStreamsClient",
    "IApiClient",
    "IEmbedarrClient",
    "IOpenSubtitlesClient",
    "ITmdbClient",
    "ITvdbClient",
]
