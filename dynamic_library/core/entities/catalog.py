"""
Unified catalog entities.

Provider-agnostic representation of movies and series, produced by the
catalog providers from TMDB, TVDB or Stremio addon payloads.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional


class CatalogSource(Enum):
    """Upstream that produced an item. Item ids are only unique per source."""

    TMDB = "tmdb"
    TVDB = "tvdb"
    STREMIO = "stremio"


class CatalogContentType(Enum):
    """Kind of catalog item."""

    MOVIE = "movie"
    SERIES = "series"


@dataclass
class CatalogItem:
    """
    Search-result-weight summary of a movie or series.

    Cross-provider identity is established only through imdb_id, tmdb_id and
    tvdb_id, never by comparing id across sources.

    Attributes:
        id: Provider-local primary key (meaning depends on source)
        source: Upstream that produced the item
        name: Localized title
        type: Movie or series
        imdb_id: IMDb id (tt...) when known
        tmdb_id: TMDB id when known
        tvdb_id: TVDB id when known
        original_name: Original title, only set when it differs from name
        overview: Plot summary
        poster_url: Absolute poster URL
        backdrop_url: Absolute backdrop URL
        year: Release (or first air) year
        release_date: Release (or first air) date
        rating: Average rating, None when unknown (a 0 rating is unknown)
        genres: Genre names in provider order
        original_language: Original language code
    """

    id: str
    source: CatalogSource
    name: str
    type: CatalogContentType
    imdb_id: Optional[str] = None
    tmdb_id: Optional[str] = None
    tvdb_id: Optional[str] = None
    original_name: Optional[str] = None
    overview: Optional[str] = None
    poster_url: Optional[str] = None
    backdrop_url: Optional[str] = None
    year: Optional[int] = None
    release_date: Optional[date] = None
    rating: Optional[float] = None
    genres: list[str] = field(default_factory=list)
    original_language: Optional[str] = None


@dataclass
class CatalogCastMember:
    """A credited cast member, ordered by billing."""

    name: str
    character: Optional[str] = None
    image_url: Optional[str] = None
    order: int = 0


@dataclass
class CatalogSeasonInfo:
    """A season of a series with its computed episode count."""

    number: int
    name: Optional[str] = None
    image_url: Optional[str] = None
    episode_count: int = 0


@dataclass
class CatalogEpisodeInfo:
    """
    A single episode of a series.

    The name is never empty: providers fall back to "Episode {n}".
    """

    id: str
    season_number: int
    episode_number: int
    name: str
    absolute_number: Optional[int] = None
    overview: Optional[str] = None
    air_date: Optional[date] = None
    runtime_minutes: Optional[int] = None
    image_url: Optional[str] = None


@dataclass
class CatalogItemDetails(CatalogItem):
    """
    Full details of a movie or series.

    Seasons and episodes are only populated for series.
    """

    runtime_minutes: Optional[int] = None
    status: Optional[str] = None
    tagline: Optional[str] = None
    directors: list[str] = field(default_factory=list)
    cast: list[CatalogCastMember] = field(default_factory=list)
    seasons: list[CatalogSeasonInfo] = field(default_factory=list)
    episodes: list[CatalogEpisodeInfo] = field(default_factory=list)
    studios: list[str] = field(default_factory=list)
    countries: list[str] = field(default_factory=list)
