"""
Fournisseur de catalogue interrogeant directement TMDB (films) et TVDB (series).

La source de chaque type de contenu est choisie par la configuration
(movie_api_source, tv_show_api_source). En mode de langue surchargee, les
details d'une serie recoivent une surcouche de traductions : celle de la
serie (si TVDB l'annonce) et celle de chaque episode.
"""

import asyncio
from typing import Optional

from loguru import logger

from dynamic_library.adapters.api.models.tvdb import TvdbSeriesExtended, TvdbTranslation
from dynamic_library.adapters.catalog.normalizers import (
    tmdb_movie_details_to_details,
    tmdb_movie_to_item,
    tvdb_search_to_item,
    tvdb_series_to_details,
)
from dynamic_library.config import Settings
from dynamic_library.core.entities.catalog import CatalogItem, CatalogItemDetails
from dynamic_library.core.ports.api_clients import ITmdbClient, ITvdbClient
from dynamic_library.core.ports.catalog_provider import ICatalogProvider
from dynamic_library.core.value_objects.options import ApiSource


class DirectCatalogProvider(ICatalogProvider):
    """
    Fournisseur direct TMDB + TVDB.

    Configure si au moins une source selectionnee l'est : TMDB pour les
    films, ou TVDB pour les series.

    Attributes:
        MAX_CONCURRENT_TRANSLATIONS: Appels de traduction d'episodes simultanes

    Example:
        provider = DirectCatalogProvider(settings, tmdb_client, tvdb_client)
        items = await provider.search_movies("Matrix", max_results=10)
        details = await provider.get_series_details("81189")
    """

    MAX_CONCURRENT_TRANSLATIONS = 8

    def __init__(
        self,
        settings: Settings,
        tmdb_client: ITmdbClient,
        tvdb_client: ITvdbClient,
    ) -> None:
        """
        Initialise le fournisseur direct.

        Args:
            settings: Configuration (sources par type, langue)
            tmdb_client: Client TMDB (films)
            tvdb_client: Client TVDB (series)
        """
        self._settings = settings
        self._tmdb = tmdb_client
        self._tvdb = tvdb_client

    @property
    def provider_name(self) -> str:
        return "Direct (TMDB/TVDB)"

    @property
    def _movies_enabled(self) -> bool:
        return self._settings.movie_api_source is ApiSource.TMDB and self._tmdb.is_configured

    @property
    def _series_enabled(self) -> bool:
        return self._settings.tv_show_api_source is ApiSource.TVDB and self._tvdb.is_configured

    @property
    def is_configured(self) -> bool:
        return self._movies_enabled or self._series_enabled

    async def search_movies(self, query: str, max_results: int = 20) -> list[CatalogItem]:
        """
        Recherche des films sur TMDB.

        Args:
            query: Titre recherche
            max_results: Nombre maximum de resultats

        Returns:
            CatalogItem dans l'ordre de TMDB (vide si source absente ou en echec)
        """
        if not self._movies_enabled:
            logger.debug("Recherche de films ignoree: TMDB non selectionne ou non configure")
            return []

        lookup = await self._tmdb.search_movies(query)
        if not lookup.found:
            logger.debug(f"TMDB search '{query}': {lookup.status.value}")
            return []

        image_base = await self._tmdb.get_image_base_url()
        return [tmdb_movie_to_item(r, image_base) for r in lookup.value[:max_results]]

    async def search_series(self, query: str, max_results: int = 20) -> list[CatalogItem]:
        """
        Recherche des series sur TVDB.

        En mode de langue surchargee, le nom et le resume sont pris dans
        les traductions du resultat quand elles existent.
        """
        if not self._series_enabled:
            logger.debug("Recherche de series ignoree: TVDB non selectionne ou non configure")
            return []

        lookup = await self._tvdb.search_series(query)
        if not lookup.found:
            logger.debug(f"TVDB search '{query}': {lookup.status.value}")
            return []

        language = self._settings.tvdb_language_code
        return [tvdb_search_to_item(r, language) for r in lookup.value[:max_results]]

    async def get_movie_details(self, item_id: str) -> Optional[CatalogItemDetails]:
        """Details d'un film TMDB, ou None."""
        if not self._movies_enabled:
            return None

        lookup = await self._tmdb.get_movie_details(item_id)
        if not lookup.found:
            logger.debug(f"TMDB movie {item_id}: {lookup.status.value}")
            return None

        image_base = await self._tmdb.get_image_base_url()
        return tmdb_movie_details_to_details(lookup.value, image_base)

    async def get_series_details(self, item_id: str) -> Optional[CatalogItemDetails]:
        """
        Details d'une serie TVDB avec saisons et episodes.

        En mode de langue surchargee :
        - traduction de la serie si elle figure dans nameTranslations
        - traduction de chaque episode (absences mises en cache par le client)
        Les champs traduits vides retombent sur la langue originale.

        Args:
            item_id: ID TVDB de la serie

        Returns:
            CatalogItemDetails, ou None si la serie est introuvable
        """
        if not self._series_enabled:
            return None

        lookup = await self._tvdb.get_series_extended(item_id)
        if not lookup.found:
            logger.debug(f"TVDB series {item_id}: {lookup.status.value}")
            return None

        series = lookup.value
        translation: Optional[TvdbTranslation] = None
        episode_translations: dict[int, TvdbTranslation] = {}

        language = self._settings.tvdb_language_code
        if language:
            if series.has_translation(language):
                series_translation = await self._tvdb.get_series_translation(
                    str(series.id), language
                )
                translation = series_translation.value
            episode_translations = await self._episode_translations(series, language)

        details = tvdb_series_to_details(series, translation, episode_translations)
        if details.tmdb_id is None and details.imdb_id:
            details.tmdb_id = await self._resolve_tmdb_id(details.imdb_id)
        return details

    async def _episode_translations(
        self, series: TvdbSeriesExtended, language: str
    ) -> dict[int, TvdbTranslation]:
        semaphore = asyncio.Semaphore(self.MAX_CONCURRENT_TRANSLATIONS)

        async def translate(episode_id: int) -> tuple[int, Optional[TvdbTranslation]]:
            async with semaphore:
                lookup = await self._tvdb.get_episode_translation(str(episode_id), language)
                return episode_id, lookup.value

        results = await asyncio.gather(*(translate(e.id) for e in series.episodes))
        return {episode_id: t for episode_id, t in results if t is not None}

    async def _resolve_tmdb_id(self, imdb_id: str) -> Optional[str]:
        """Renseigne la reference croisee TMDB d'une serie via son ID IMDb."""
        if not self._tmdb.is_configured:
            return None
        lookup = await self._tmdb.get_series_by_external_id(imdb_id)
        return str(lookup.value.id) if lookup.found else None
