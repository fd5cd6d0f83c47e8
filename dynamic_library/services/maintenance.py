"""
Taches de maintenance : compactage du cache et verification des sources.

Appelees par la CLI (cache-cleanup, health-check) ou par un planificateur
de l'hote.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from dynamic_library.adapters.api.cache import APICache
from dynamic_library.config import Settings
from dynamic_library.core.ports.api_clients import ITmdbClient, ITvdbClient
from dynamic_library.core.value_objects.options import ApiSource

# Requete utilisee pour verifier qu'une source repond
HEALTH_CHECK_QUERY = "test"

# Part des entrees supprimees par un compactage
CACHE_COMPACT_FRACTION = 0.25


@dataclass(frozen=True)
class CacheCleanupReport:
    """Resultat d'un compactage du cache."""

    entries_before: int
    entries_after: int
    removed: int


@dataclass(frozen=True)
class ApiHealthReport:
    """Etat d'une source apres une recherche de test."""

    source: str
    healthy: bool
    detail: str | None = None


class MaintenanceService:
    """
    Service de maintenance du cache et de verification des API.

    Example:
        service = MaintenanceService(settings, cache, tmdb_client, tvdb_client)
        report = await service.cleanup_cache()
        print(f"{report.removed} entrees supprimees")
    """

    def __init__(
        self,
        settings: Settings,
        cache: APICache,
        tmdb_client: ITmdbClient,
        tvdb_client: ITvdbClient,
    ) -> None:
        self._settings = settings
        self._cache = cache
        self._tmdb = tmdb_client
        self._tvdb = tvdb_client

    async def cleanup_cache(self) -> CacheCleanupReport:
        """Compacte environ 25% du cache et rapporte le nombre d'entrees avant/apres."""
        before = await self._cache.count()
        logger.info(f"Compactage du cache ({before} entrees)")
        removed = await self._cache.compact(CACHE_COMPACT_FRACTION)
        after = await self._cache.count()
        logger.info(f"Cache compacte: {removed} supprimees, {after} restantes")
        return CacheCleanupReport(entries_before=before, entries_after=after, removed=removed)

    async def check_api_health(self) -> list[ApiHealthReport]:
        """
        Verifie les sources de metadonnees selectionnees et configurees.

        TVDB est teste si sa cle est definie et qu'il est la source des
        series ; TMDB si sa cle est definie et qu'il est la source des films.

        Returns:
            Un rapport par source testee (vide si aucune n'est testee)
        """
        reports: list[ApiHealthReport] = []

        if self._tvdb.is_configured and self._settings.tv_show_api_source is ApiSource.TVDB:
            lookup = await self._tvdb.search_series(HEALTH_CHECK_QUERY)
            reports.append(ApiHealthReport("tvdb", lookup.found, lookup.detail))

        if self._tmdb.is_configured and self._settings.movie_api_source is ApiSource.TMDB:
            lookup = await self._tmdb.search_movies(HEALTH_CHECK_QUERY)
            reports.append(ApiHealthReport("tmdb", lookup.found, lookup.detail))

        for report in reports:
            if report.healthy:
                logger.info(f"API {report.source}: OK")
            else:
                logger.warning(f"API {report.source}: en echec ({report.detail})")
        return reports
