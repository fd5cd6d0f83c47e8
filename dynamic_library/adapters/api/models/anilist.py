"""Modeles des reponses GraphQL AniList (Media, Page)."""

from typing import Optional

from pydantic import Field

from dynamic_library.adapters.api.models.base import WireModel


class AniListTitle(WireModel):
    romaji: Optional[str] = None
    english: Optional[str] = None
    native: Optional[str] = None

    @property
    def preferred(self) -> str:
        return self.english or self.romaji or self.native or ""


class AniListMedia(WireModel):
    id: int
    id_mal: Optional[int] = Field(default=None, alias="idMal")
    season_year: Optional[int] = Field(default=None, alias="seasonYear")
    episodes: Optional[int] = None
    format: Optional[str] = None
    title: AniListTitle = Field(default_factory=AniListTitle)


class AniListMediaData(WireModel):
    media: Optional[AniListMedia] = Field(default=None, alias="Media")


class AniListMediaResponse(WireModel):
    data: AniListMediaData = Field(default_factory=AniListMediaData)


class AniListPage(WireModel):
    media: list[AniListMedia] = Field(default_factory=list)


class AniListPageData(WireModel):
    page: AniListPage = Field(default_factory=AniListPage, alias="Page")


class AniListPageResponse(WireModel):
    data: AniListPageData = Field(default_factory=AniListPageData)
