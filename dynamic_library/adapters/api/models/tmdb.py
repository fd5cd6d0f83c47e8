"""
Modeles des reponses de l'API TMDB v3.

Reference API: https://developer.themoviedb.org/reference
"""

from typing import Optional

from pydantic import Field

from dynamic_library.adapters.api.models.base import WireModel
from dynamic_library.utils.parsing import parse_year


class TmdbMovieResult(WireModel):
    """Film renvoye par /search/movie et /find."""

    id: int
    title: str = ""
    original_title: str = ""
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    release_date: Optional[str] = None
    vote_average: float = 0.0
    vote_count: int = 0
    popularity: float = 0.0
    genre_ids: list[int] = Field(default_factory=list)
    original_language: Optional[str] = None

    @property
    def year(self) -> Optional[int]:
        return parse_year(self.release_date)


class TmdbSearchResponse(WireModel):
    page: int = 1
    results: list[TmdbMovieResult] = Field(default_factory=list)
    total_pages: int = 0
    total_results: int = 0


class TmdbGenre(WireModel):
    id: int = 0
    name: str = ""


class TmdbProductionCompany(WireModel):
    id: int = 0
    name: str = ""
    logo_path: Optional[str] = None
    origin_country: Optional[str] = None


class TmdbProductionCountry(WireModel):
    iso_3166_1: str = ""
    name: str = ""


class TmdbLanguage(WireModel):
    iso_639_1: str = ""
    name: str = ""
    english_name: str = ""


class TmdbCastMember(WireModel):
    id: int = 0
    name: str = ""
    character: Optional[str] = None
    profile_path: Optional[str] = None
    order: int = 0


class TmdbCrewMember(WireModel):
    id: int = 0
    name: str = ""
    job: str = ""
    department: str = ""
    profile_path: Optional[str] = None


class TmdbCredits(WireModel):
    cast: list[TmdbCastMember] = Field(default_factory=list)
    crew: list[TmdbCrewMember] = Field(default_factory=list)


class TmdbMovieDetails(WireModel):
    """Details d'un film (/movie/{id}?append_to_response=credits)."""

    id: int
    title: str = ""
    original_title: str = ""
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    release_date: Optional[str] = None
    vote_average: float = 0.0
    vote_count: int = 0
    runtime: Optional[int] = None
    status: Optional[str] = None
    tagline: Optional[str] = None
    imdb_id: Optional[str] = None
    original_language: Optional[str] = None
    genres: list[TmdbGenre] = Field(default_factory=list)
    production_companies: list[TmdbProductionCompany] = Field(default_factory=list)
    production_countries: list[TmdbProductionCountry] = Field(default_factory=list)
    spoken_languages: list[TmdbLanguage] = Field(default_factory=list)
    credits: Optional[TmdbCredits] = None

    @property
    def year(self) -> Optional[int]:
        return parse_year(self.release_date)


class TmdbImagesConfiguration(WireModel):
    base_url: str = ""
    secure_base_url: str = ""
    poster_sizes: list[str] = Field(default_factory=list)
    backdrop_sizes: list[str] = Field(default_factory=list)


class TmdbConfigurationResponse(WireModel):
    """Reponse de /configuration (URL de base des images)."""

    images: TmdbImagesConfiguration = Field(default_factory=TmdbImagesConfiguration)


class TmdbSeriesResult(WireModel):
    """Serie renvoyee par /find/{external_id}."""

    id: int
    name: str = ""
    original_name: str = ""
    overview: Optional[str] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    first_air_date: Optional[str] = None
    vote_average: float = 0.0
    original_language: Optional[str] = None

    @property
    def year(self) -> Optional[int]:
        return parse_year(self.first_air_date)


class TmdbFindResponse(WireModel):
    movie_results: list[TmdbMovieResult] = Field(default_factory=list)
    tv_results: list[TmdbSeriesResult] = Field(default_factory=list)
