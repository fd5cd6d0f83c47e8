"""
Service de recuperation des sous-titres d'un film ou d'un episode.

Pour chaque langue demandee :
1. Selectionne jusqu'a N resultats : traductions humaines d'abord (par nombre
   de telechargements decroissant), completees par les traductions automatiques
2. Telecharge le premier fichier de chaque resultat retenu
3. Convertit le contenu en WebVTT

Un service desactive ou un client non configure donne une liste vide.
"""

from __future__ import annotations

from loguru import logger

from dynamic_library.adapters.api.models.opensubtitles import OpenSubtitlesResult
from dynamic_library.config import Settings
from dynamic_library.core.entities.subtitle import FetchedSubtitle
from dynamic_library.core.ports.api_clients import IOpenSubtitlesClient
from dynamic_library.core.value_objects.lookup import Lookup
from dynamic_library.services.subtitle_converter import (
    convert,
    language_display_name,
    normalize_language_code,
)


def select_subtitles(
    results: list[OpenSubtitlesResult], language: str, limit: int
) -> list[OpenSubtitlesResult]:
    """
    Retient les meilleurs sous-titres d'une langue.

    Args:
        results: Resultats de recherche (toutes langues confondues)
        language: Code ISO 639-1 recherche
        limit: Nombre maximum de sous-titres retenus

    Returns:
        Resultats ayant au moins un fichier, humains puis automatiques,
        chaque groupe trie par nombre de telechargements decroissant
    """
    candidates = [
        result
        for result in results
        if result.attributes.files
        and normalize_language_code(result.attributes.language) == language
    ]
    by_downloads = sorted(candidates, key=lambda r: r.attributes.download_count, reverse=True)
    human = [r for r in by_downloads if not r.attributes.is_machine_made]
    machine = [r for r in by_downloads if r.attributes.is_machine_made]
    return (human + machine)[:limit]


class SubtitleService:
    """
    Recherche, telecharge et convertit les sous-titres.

    Example:
        service = SubtitleService(settings, opensubtitles_client)
        subtitles = await service.fetch_movie_subtitles("tt0133093")
        for subtitle in subtitles:
            print(subtitle.language, len(subtitle.content))
    """

    def __init__(self, settings: Settings, client: IOpenSubtitlesClient) -> None:
        self._client = client
        self._enabled = settings.enable_subtitles
        self._languages = settings.subtitle_language_list
        self._max_per_language = settings.max_subtitles_per_language

    @property
    def is_enabled(self) -> bool:
        """True si les sous-titres sont actives et OpenSubtitles configure."""
        return self._enabled and self._client.is_configured

    async def fetch_movie_subtitles(self, imdb_id: str) -> list[FetchedSubtitle]:
        """
        Sous-titres d'un film dans les langues configurees.

        Args:
            imdb_id: Identifiant IMDb du film

        Returns:
            Sous-titres convertis en WebVTT (vide si aucun ou service inactif)
        """
        if not self.is_enabled:
            return []
        lookup = await self._client.search_movie_subtitles(imdb_id, self._languages)
        return await self._download_selection(lookup, imdb_id)

    async def fetch_episode_subtitles(
        self, parent_imdb_id: str, season: int, episode: int
    ) -> list[FetchedSubtitle]:
        """Sous-titres d'un episode (identifiant IMDb de la serie, saison, episode)."""
        if not self.is_enabled:
            return []
        lookup = await self._client.search_episode_subtitles(
            parent_imdb_id, season, episode, self._languages
        )
        return await self._download_selection(lookup, f"{parent_imdb_id} S{season}E{episode}")

    async def _download_selection(
        self, lookup: Lookup[list[OpenSubtitlesResult]], label: str
    ) -> list[FetchedSubtitle]:
        if not lookup.found:
            logger.debug(f"Sous-titres {label}: {lookup.status.value}")
            return []

        fetched: list[FetchedSubtitle] = []
        for language in self._languages:
            selected = select_subtitles(lookup.value, language, self._max_per_language)
            if not selected:
                logger.debug(f"Sous-titres {label}: aucun resultat en '{language}'")
                continue
            fetched.extend(await self._download_language(selected, language))

        logger.info(f"Sous-titres {label}: {len(fetched)} recupere(s)")
        return fetched

    async def _download_language(
        self, selected: list[OpenSubtitlesResult], language: str
    ) -> list[FetchedSubtitle]:
        display_name = language_display_name(language)
        subtitles: list[FetchedSubtitle] = []
        for result in selected:
            file_id = result.attributes.files[0].file_id
            content = await self._client.download_subtitle(file_id)
            if not content.found or not content.value.strip():
                logger.warning(f"Telechargement du sous-titre {file_id} impossible: {content.detail}")
                continue

            index = len(subtitles) + 1
            subtitles.append(
                FetchedSubtitle(
                    language=display_name if index == 1 else f"{display_name} ({index})",
                    language_code=(
                        f"{language}_{index}" if self._max_per_language > 1 else language
                    ),
                    content=convert(content.value),
                    hearing_impaired=result.attributes.hearing_impaired,
                    file_id=file_id,
                )
            )
        return subtitles
