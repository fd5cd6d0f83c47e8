"""
Conversion des reponses des sources vers le modele unifie du catalogue.

Une fonction pure par couple (source, granularite). Regles communes :
- original_name n'est renseigne que s'il differe du nom affiche
- les URLs d'images sont None quand la source ne fournit pas de chemin
- une note de 0 est consideree comme inconnue
- le casting est limite a 20 entrees (ordre de generique TMDB, ordre du
  tableau pour Stremio)
- un episode sans nom recoit "Episode {n}"
- sans saisons fournies, elles sont deduites des episodes
"""

from collections import Counter
from typing import Iterable, Optional

from dynamic_library.adapters.api.models.stremio import StremioMeta, StremioMetaPreview
from dynamic_library.adapters.api.models.tmdb import TmdbMovieDetails, TmdbMovieResult
from dynamic_library.adapters.api.models.tvdb import (
    TvdbEpisode,
    TvdbSearchResult,
    TvdbSeriesExtended,
    TvdbTranslation,
)
from dynamic_library.core.entities.catalog import (
    CatalogCastMember,
    CatalogContentType,
    CatalogEpisodeInfo,
    CatalogItem,
    CatalogItemDetails,
    CatalogSeasonInfo,
    CatalogSource,
)
from dynamic_library.utils.constants import (
    MAX_CAST_MEMBERS,
    TMDB_BACKDROP_SIZE,
    TMDB_MOVIE_GENRES,
    TMDB_POSTER_SIZE,
    TMDB_PROFILE_SIZE,
)
from dynamic_library.utils.parsing import (
    build_image_url,
    parse_date,
    parse_rating,
)


def _text(value: Optional[str]) -> Optional[str]:
    """Texte non vide, sinon None."""
    if value is None or not value.strip():
        return None
    return value


def _original_name(name: str, original: Optional[str]) -> Optional[str]:
    original = _text(original)
    if original is None or original == name:
        return None
    return original


def episode_placeholder(number: int) -> str:
    return f"Episode {number}"


def group_seasons(episodes: Iterable[CatalogEpisodeInfo]) -> list[CatalogSeasonInfo]:
    """
    Deduit la liste des saisons en regroupant les episodes par numero de saison.

    Args:
        episodes: Episodes normalises

    Returns:
        Saisons triees par numero, avec leur nombre d'episodes
    """
    counts = Counter(episode.season_number for episode in episodes)
    return [
        CatalogSeasonInfo(number=number, name=f"Season {number}", episode_count=count)
        for number, count in sorted(counts.items())
    ]


# ---------------------------------------------------------------------------
# TMDB
# ---------------------------------------------------------------------------


def tmdb_movie_to_item(result: TmdbMovieResult, image_base: str) -> CatalogItem:
    """
    Convertit un resultat de recherche TMDB en CatalogItem.

    Args:
        result: Film renvoye par /search/movie
        image_base: URL de base des images resolue par le client

    Returns:
        CatalogItem de type MOVIE, source TMDB
    """
    name = result.title or result.original_title
    return CatalogItem(
        id=str(result.id),
        source=CatalogSource.TMDB,
        name=name,
        type=CatalogContentType.MOVIE,
        tmdb_id=str(result.id),
        original_name=_original_name(name, result.original_title),
        overview=_text(result.overview),
        poster_url=build_image_url(image_base, TMDB_POSTER_SIZE, result.poster_path),
        backdrop_url=build_image_url(image_base, TMDB_BACKDROP_SIZE, result.backdrop_path),
        year=result.year,
        release_date=parse_date(result.release_date),
        rating=parse_rating(result.vote_average),
        genres=[TMDB_MOVIE_GENRES[g] for g in result.genre_ids if g in TMDB_MOVIE_GENRES],
        original_language=result.original_language,
    )


def tmdb_movie_details_to_details(
    details: TmdbMovieDetails, image_base: str
) -> CatalogItemDetails:
    """
    Convertit les details TMDB (credits inclus) en CatalogItemDetails.

    Realisateurs : membres de l'equipe dont le poste est "Director".
    Casting : trie par ordre de generique, limite a 20 entrees.
    """
    name = details.title or details.original_title
    credits = details.credits
    directors: list[str] = []
    cast: list[CatalogCastMember] = []
    if credits is not None:
        directors = [
            member.name
            for member in credits.crew
            if member.job.lower() == "director" and member.name
        ]
        billed = sorted(credits.cast, key=lambda member: member.order)
        cast = [
            CatalogCastMember(
                name=member.name,
                character=_text(member.character),
                image_url=build_image_url(image_base, TMDB_PROFILE_SIZE, member.profile_path),
                order=member.order,
            )
            for member in billed[:MAX_CAST_MEMBERS]
        ]

    original_language = details.original_language
    if not original_language and details.spoken_languages:
        original_language = details.spoken_languages[0].iso_639_1 or None

    return CatalogItemDetails(
        id=str(details.id),
        source=CatalogSource.TMDB,
        name=name,
        type=CatalogContentType.MOVIE,
        imdb_id=_text(details.imdb_id),
        tmdb_id=str(details.id),
        original_name=_original_name(name, details.original_title),
        overview=_text(details.overview),
        poster_url=build_image_url(image_base, TMDB_POSTER_SIZE, details.poster_path),
        backdrop_url=build_image_url(image_base, TMDB_BACKDROP_SIZE, details.backdrop_path),
        year=details.year,
        release_date=parse_date(details.release_date),
        rating=parse_rating(details.vote_average),
        genres=[genre.name for genre in details.genres if genre.name],
        original_language=original_language,
        runtime_minutes=details.runtime or None,
        status=_text(details.status),
        tagline=_text(details.tagline),
        directors=directors,
        cast=cast,
        studios=[c.name for c in details.production_companies if c.name],
        countries=[c.name for c in details.production_countries if c.name],
    )


# ---------------------------------------------------------------------------
# TVDB
# ---------------------------------------------------------------------------


def tvdb_search_to_item(
    result: TvdbSearchResult, language: Optional[str] = None
) -> CatalogItem:
    """
    Convertit un resultat de recherche TVDB en CatalogItem.

    Args:
        result: Serie renvoyee par /search
        language: Code TVDB a 3 lettres pour le nom et le resume localises
                  (None : champs originaux)

    Returns:
        CatalogItem de type SERIES, source TVDB
    """
    name = result.get_localized_name(language) or result.name
    return CatalogItem(
        id=result.series_id,
        source=CatalogSource.TVDB,
        name=name,
        type=CatalogContentType.SERIES,
        imdb_id=result.imdb_id,
        tvdb_id=result.series_id,
        original_name=_original_name(name, result.name),
        overview=_text(result.get_localized_overview(language)),
        poster_url=_text(result.image_url),
        year=result.parsed_year,
        release_date=parse_date(result.first_air_time),
        genres=list(result.genres),
        original_language=result.primary_language,
    )


def tvdb_episode_to_info(
    episode: TvdbEpisode, translation: Optional[TvdbTranslation] = None
) -> CatalogEpisodeInfo:
    """Convertit un episode TVDB, en appliquant sa traduction si non vide."""
    name = None
    overview = None
    if translation is not None:
        name = _text(translation.name)
        overview = _text(translation.overview)

    return CatalogEpisodeInfo(
        id=str(episode.id),
        season_number=episode.season_number,
        episode_number=episode.number,
        name=name or _text(episode.name) or episode_placeholder(episode.number),
        absolute_number=episode.absolute_number,
        overview=overview or _text(episode.overview),
        air_date=parse_date(episode.aired),
        runtime_minutes=episode.runtime or None,
        image_url=_text(episode.image),
    )


def tvdb_seasons(
    series: TvdbSeriesExtended, episodes: list[CatalogEpisodeInfo]
) -> list[CatalogSeasonInfo]:
    """
    Saisons de l'ordre officiel, triees, avec le nombre d'episodes calcule.

    Sans saison officielle fournie par TVDB, les saisons sont deduites des episodes.
    """
    counts = Counter(episode.season_number for episode in episodes)
    seasons: dict[int, CatalogSeasonInfo] = {}
    for season in sorted(series.seasons, key=lambda s: s.number):
        if not season.is_official or season.number in seasons:
            continue
        seasons[season.number] = CatalogSeasonInfo(
            number=season.number,
            name=_text(season.name),
            image_url=_text(season.image),
            episode_count=counts.get(season.number, 0),
        )
    if not seasons:
        return group_seasons(episodes)
    return list(seasons.values())


def tvdb_series_to_details(
    series: TvdbSeriesExtended,
    translation: Optional[TvdbTranslation] = None,
    episode_translations: Optional[dict[int, TvdbTranslation]] = None,
) -> CatalogItemDetails:
    """
    Convertit une serie TVDB etendue en CatalogItemDetails.

    Les traductions (serie et episodes) ne remplacent que les champs
    non vides ; sinon les champs en langue originale sont conserves.

    Args:
        series: Serie renvoyee par /series/{id}/extended
        translation: Traduction de la serie (None : pas de surcharge)
        episode_translations: Traductions des episodes par ID d'episode

    Returns:
        CatalogItemDetails de type SERIES avec saisons et episodes
    """
    episode_translations = episode_translations or {}
    name = series.name
    overview = _text(series.overview)
    if translation is not None:
        name = _text(translation.name) or name
        overview = _text(translation.overview) or overview

    ordered = sorted(series.episodes, key=lambda e: (e.season_number, e.number))
    episodes = [tvdb_episode_to_info(e, episode_translations.get(e.id)) for e in ordered]

    return CatalogItemDetails(
        id=str(series.id),
        source=CatalogSource.TVDB,
        name=name,
        type=CatalogContentType.SERIES,
        imdb_id=series.imdb_id,
        tmdb_id=series.tmdb_id,
        tvdb_id=str(series.id),
        original_name=_original_name(name, series.name),
        overview=overview,
        poster_url=_text(series.image),
        year=series.parsed_year,
        release_date=parse_date(series.first_aired),
        genres=[genre.name for genre in series.genres if genre.name],
        original_language=series.original_language,
        runtime_minutes=series.average_runtime or None,
        status=series.status.name if series.status and series.status.name else None,
        seasons=tvdb_seasons(series, episodes),
        episodes=episodes,
        studios=_network_names(series),
        countries=[series.original_country] if series.original_country else [],
    )


def _network_names(series: TvdbSeriesExtended) -> list[str]:
    network = series.original_network
    return [network.name] if network is not None and network.name else []


# ---------------------------------------------------------------------------
# Stremio
# ---------------------------------------------------------------------------


def stremio_preview_to_item(
    preview: StremioMetaPreview, content_type: CatalogContentType
) -> CatalogItem:
    """
    Convertit un element de catalogue Stremio en CatalogItem.

    L'identifiant natif de l'addon est conserve tel quel ; il n'est
    reporte en imdb_id que s'il a la forme "tt...".
    """
    return CatalogItem(
        id=preview.id,
        source=CatalogSource.STREMIO,
        name=preview.name,
        type=content_type,
        imdb_id=preview.imdb_id,
        overview=_text(preview.description),
        poster_url=_text(preview.poster),
        backdrop_url=_text(preview.background),
        year=preview.parsed_year,
        rating=preview.rating,
        genres=list(preview.genres),
    )


def stremio_meta_to_details(
    meta: StremioMeta, content_type: CatalogContentType
) -> CatalogItemDetails:
    """
    Convertit une meta Stremio en CatalogItemDetails.

    Le casting suit l'ordre du tableau (sans personnage ni image). Pour une
    serie, les episodes viennent de "videos" et les saisons en sont deduites.
    """
    cast = [
        CatalogCastMember(name=name, order=index)
        for index, name in enumerate(meta.cast[:MAX_CAST_MEMBERS])
    ]

    episodes: list[CatalogEpisodeInfo] = []
    if content_type is CatalogContentType.SERIES:
        ordered = sorted(meta.videos, key=lambda v: (v.season, v.episode))
        episodes = [
            CatalogEpisodeInfo(
                id=video.id,
                season_number=video.season,
                episode_number=video.episode,
                name=video.best_title,
                overview=video.best_overview,
                air_date=video.air_date,
                image_url=_text(video.thumbnail),
            )
            for video in ordered
        ]

    return CatalogItemDetails(
        id=meta.id,
        source=CatalogSource.STREMIO,
        name=meta.name,
        type=content_type,
        imdb_id=meta.imdb_id,
        overview=_text(meta.description),
        poster_url=_text(meta.poster),
        backdrop_url=_text(meta.background),
        year=meta.parsed_year,
        release_date=meta.release_date,
        rating=meta.rating,
        genres=list(meta.genres),
        runtime_minutes=meta.runtime_minutes,
        status=_text(meta.status),
        directors=list(meta.director),
        cast=cast,
        seasons=group_seasons(episodes),
        episodes=episodes,
        countries=list(meta.country),
    )
