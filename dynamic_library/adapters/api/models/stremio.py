"""
Modeles du protocole des addons Stremio (catalog, meta).

Reference: https://github.com/Stremio/stremio-addon-sdk/blob/master/docs/api/responses/meta.md

Plusieurs champs sont declares "texte ou liste de textes" selon l'addon
(cast, director, writer, genres, country) : ils sont normalises en liste.
"""

from datetime import date
from typing import Any, Optional, Union

from pydantic import Field, field_validator

from dynamic_library.adapters.api.models.base import WireModel
from dynamic_library.utils.parsing import (
    parse_date,
    parse_rating,
    parse_runtime_minutes,
    parse_year,
    string_or_list,
)


class StremioVideo(WireModel):
    """Episode (ou video) d'une meta Stremio."""

    id: str = ""
    title: Optional[str] = None
    name: Optional[str] = None
    season: int = 0
    episode: int = 0
    released: Optional[str] = None
    overview: Optional[str] = None
    description: Optional[str] = None
    thumbnail: Optional[str] = None

    @property
    def best_title(self) -> str:
        """Titre, sinon nom, sinon "Episode {n}"."""
        for candidate in (self.title, self.name):
            if candidate and candidate.strip():
                return candidate
        return f"Episode {self.episode}"

    @property
    def best_overview(self) -> Optional[str]:
        for candidate in (self.overview, self.description):
            if candidate and candidate.strip():
                return candidate
        return None

    @property
    def air_date(self) -> Optional[date]:
        return parse_date(self.released)


class StremioMetaPreview(WireModel):
    """Element d'un catalogue (/catalog/{type}/...)."""

    id: str = ""
    type: str = ""
    name: str = ""
    poster: Optional[str] = None
    background: Optional[str] = None
    logo: Optional[str] = None
    description: Optional[str] = None
    release_info: Optional[Union[str, int]] = Field(default=None, alias="releaseInfo")
    year: Optional[Union[str, int]] = None
    imdb_rating: Optional[Union[str, float]] = Field(default=None, alias="imdbRating")
    genres: list[str] = Field(default_factory=list)
    runtime: Optional[Union[str, int]] = None

    @field_validator("genres", mode="before")
    @classmethod
    def _genres_as_list(cls, v: Any) -> list[str]:
        return string_or_list(v)

    @property
    def imdb_id(self) -> Optional[str]:
        return self.id if self.id.startswith("tt") else None

    @property
    def parsed_year(self) -> Optional[int]:
        return parse_year(self.release_info) or parse_year(self.year)

    @property
    def rating(self) -> Optional[float]:
        return parse_rating(self.imdb_rating)

    @property
    def runtime_minutes(self) -> Optional[int]:
        if self.runtime is None:
            return None
        return parse_runtime_minutes(str(self.runtime))


class StremioMeta(StremioMetaPreview):
    """Meta complete (/meta/{type}/{id}.json)."""

    cast: list[str] = Field(default_factory=list)
    director: list[str] = Field(default_factory=list)
    writer: list[str] = Field(default_factory=list)
    country: list[str] = Field(default_factory=list)
    videos: list[StremioVideo] = Field(default_factory=list)
    imdb_id_field: Optional[str] = Field(default=None, alias="imdb_id")
    released: Optional[str] = None
    status: Optional[str] = None

    @field_validator("cast", "director", "writer", "country", mode="before")
    @classmethod
    def _people_as_list(cls, v: Any) -> list[str]:
        return string_or_list(v)

    @property
    def imdb_id(self) -> Optional[str]:
        if self.imdb_id_field:
            return self.imdb_id_field
        return super().imdb_id

    @property
    def release_date(self) -> Optional[date]:
        return parse_date(self.released)


class StremioCatalogResponse(WireModel):
    metas: list[StremioMetaPreview] = Field(default_factory=list)


class StremioMetaResponse(WireModel):
    meta: Optional[StremioMeta] = None
