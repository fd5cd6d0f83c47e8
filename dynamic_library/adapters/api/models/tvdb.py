"""
Modeles des reponses de l'API TVDB v4.

Reference API: https://thetvdb.github.io/v4-api/
"""

from typing import Optional, Union

from pydantic import Field

from dynamic_library.adapters.api.models.base import WireModel
from dynamic_library.utils.parsing import parse_year


class TvdbAuthData(WireModel):
    token: str = ""


class TvdbAuthResponse(WireModel):
    """Reponse de POST /login."""

    status: str = ""
    data: TvdbAuthData = Field(default_factory=TvdbAuthData)


class TvdbRemoteId(WireModel):
    id: str = ""
    type: int = 0
    source_name: str = Field(default="", alias="sourceName")


class TvdbSearchResult(WireModel):
    """Element renvoye par /search?type=series."""

    object_id: str = Field(default="", alias="objectID")
    id: str = ""
    name: str = ""
    slug: Optional[str] = None
    image_url: Optional[str] = None
    first_air_time: Optional[str] = None
    overview: Optional[str] = None
    primary_language: Optional[str] = None
    type: Optional[str] = None
    tvdb_id: Optional[str] = None
    year: Optional[Union[str, int]] = None
    network: Optional[str] = None
    status: Optional[str] = None
    translations: dict[str, str] = Field(default_factory=dict)
    overviews: dict[str, str] = Field(default_factory=dict)
    genres: list[str] = Field(default_factory=list)
    remote_ids: list[TvdbRemoteId] = Field(default_factory=list)

    @property
    def series_id(self) -> str:
        """Identifiant numerique (tvdb_id, sinon id sans prefixe "series-")."""
        if self.tvdb_id:
            return self.tvdb_id
        return self.id.removeprefix("series-")

    @property
    def parsed_year(self) -> Optional[int]:
        return parse_year(self.year) or parse_year(self.first_air_time)

    @property
    def imdb_id(self) -> Optional[str]:
        return _find_remote_id(self.remote_ids, "imdb")

    def get_localized_name(self, language: Optional[str]) -> str:
        """Nom traduit dans la langue demandee, sinon le nom original."""
        if language:
            localized = self.translations.get(language.lower())
            if localized and localized.strip():
                return localized
        return self.name

    def get_localized_overview(self, language: Optional[str]) -> Optional[str]:
        """Resume traduit dans la langue demandee, sinon le resume original."""
        if language:
            localized = self.overviews.get(language.lower())
            if localized and localized.strip():
                return localized
        return self.overview


class TvdbSearchResponse(WireModel):
    status: str = ""
    data: list[TvdbSearchResult] = Field(default_factory=list)


class TvdbNamed(WireModel):
    """Objet reduit a un nom (statut, chaine, genre)."""

    id: Optional[int] = None
    name: str = ""


class TvdbSeasonType(WireModel):
    id: Optional[int] = None
    name: str = ""
    type: str = ""


class TvdbSeason(WireModel):
    id: int = 0
    series_id: Optional[int] = Field(default=None, alias="seriesId")
    number: int = 0
    name: Optional[str] = None
    image: Optional[str] = None
    type: Optional[TvdbSeasonType] = None

    @property
    def is_official(self) -> bool:
        """Saison de l'ordre de diffusion officiel (ou sans type declare)."""
        return self.type is None or self.type.type.lower() == "official"


class TvdbEpisode(WireModel):
    id: int = 0
    series_id: Optional[int] = Field(default=None, alias="seriesId")
    name: Optional[str] = None
    season_number: int = Field(default=0, alias="seasonNumber")
    number: int = 0
    absolute_number: Optional[int] = Field(default=None, alias="absoluteNumber")
    overview: Optional[str] = None
    image: Optional[str] = None
    aired: Optional[str] = None
    runtime: Optional[int] = None


class TvdbSeriesExtended(WireModel):
    """Serie complete (/series/{id}/extended?meta=episodes)."""

    id: int
    name: str = ""
    slug: Optional[str] = None
    image: Optional[str] = None
    first_aired: Optional[str] = Field(default=None, alias="firstAired")
    last_aired: Optional[str] = Field(default=None, alias="lastAired")
    overview: Optional[str] = None
    year: Optional[Union[str, int]] = None
    score: Optional[float] = None
    status: Optional[TvdbNamed] = None
    original_network: Optional[TvdbNamed] = Field(default=None, alias="originalNetwork")
    original_country: Optional[str] = Field(default=None, alias="originalCountry")
    original_language: Optional[str] = Field(default=None, alias="originalLanguage")
    average_runtime: Optional[int] = Field(default=None, alias="averageRuntime")
    genres: list[TvdbNamed] = Field(default_factory=list)
    seasons: list[TvdbSeason] = Field(default_factory=list)
    episodes: list[TvdbEpisode] = Field(default_factory=list)
    remote_ids: list[TvdbRemoteId] = Field(default_factory=list, alias="remoteIds")
    name_translations: list[str] = Field(default_factory=list, alias="nameTranslations")
    overview_translations: list[str] = Field(
        default_factory=list, alias="overviewTranslations"
    )

    @property
    def parsed_year(self) -> Optional[int]:
        return parse_year(self.year) or parse_year(self.first_aired)

    @property
    def imdb_id(self) -> Optional[str]:
        return _find_remote_id(self.remote_ids, "imdb")

    @property
    def tmdb_id(self) -> Optional[str]:
        return _find_remote_id(self.remote_ids, "themoviedb")

    def has_translation(self, language: str) -> bool:
        """Indique si la serie annonce une traduction du nom dans cette langue."""
        wanted = language.lower()
        return any(code.lower() == wanted for code in self.name_translations)


class TvdbSeriesResponse(WireModel):
    status: str = ""
    data: Optional[TvdbSeriesExtended] = None


class TvdbTranslation(WireModel):
    """Traduction d'une serie ou d'un episode."""

    name: Optional[str] = None
    overview: Optional[str] = None
    language: str = ""
    aliases: list[str] = Field(default_factory=list)
    is_primary: bool = Field(default=False, alias="isPrimary")


class TvdbTranslationResponse(WireModel):
    status: str = ""
    data: Optional[TvdbTranslation] = None


def _find_remote_id(remote_ids: list[TvdbRemoteId], source: str) -> Optional[str]:
    for remote in remote_ids:
        if source in remote.source_name.lower() and remote.id:
            return remote.id
    return None
