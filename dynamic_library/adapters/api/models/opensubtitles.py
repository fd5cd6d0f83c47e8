"""
Modeles des reponses de l'API REST OpenSubtitles.

Reference API: https://opensubtitles.stoplight.io/docs/opensubtitles-api
"""

from typing import Optional, Union

from pydantic import Field

from dynamic_library.adapters.api.models.base import WireModel


class OpenSubtitlesFile(WireModel):
    file_id: int = 0
    cd_number: int = 1
    file_name: Optional[str] = None


class OpenSubtitlesFeatureDetails(WireModel):
    feature_id: Optional[int] = None
    feature_type: Optional[str] = None
    year: Optional[int] = None
    title: Optional[str] = None
    imdb_id: Optional[int] = None
    season_number: Optional[int] = None
    episode_number: Optional[int] = None


class OpenSubtitlesAttributes(WireModel):
    subtitle_id: Optional[Union[str, int]] = None
    language: str = ""
    download_count: int = 0
    hearing_impaired: bool = False
    machine_translated: bool = False
    ai_translated: bool = False
    from_trusted: bool = False
    fps: Optional[float] = None
    release: Optional[str] = None
    upload_date: Optional[str] = None
    feature_details: Optional[OpenSubtitlesFeatureDetails] = None
    files: list[OpenSubtitlesFile] = Field(default_factory=list)

    @property
    def is_machine_made(self) -> bool:
        """Traduction automatique ou generee par IA."""
        return self.machine_translated or self.ai_translated


class OpenSubtitlesResult(WireModel):
    id: str = ""
    type: str = "subtitle"
    attributes: OpenSubtitlesAttributes = Field(default_factory=OpenSubtitlesAttributes)


class OpenSubtitlesSearchResponse(WireModel):
    """Reponse de GET /subtitles."""

    total_pages: int = 0
    total_count: int = 0
    page: int = 1
    data: list[OpenSubtitlesResult] = Field(default_factory=list)


class OpenSubtitlesUser(WireModel):
    allowed_downloads: int = 0
    level: Optional[str] = None
    user_id: Optional[int] = None
    vip: bool = False


class OpenSubtitlesLoginResponse(WireModel):
    """Reponse de POST /login."""

    token: str = ""
    base_url: Optional[str] = None
    status: int = 0
    user: OpenSubtitlesUser = Field(default_factory=OpenSubtitlesUser)


class OpenSubtitlesDownloadResponse(WireModel):
    """Reponse de POST /download (lien temporaire pre-autorise)."""

    link: str = ""
    file_name: Optional[str] = None
    requests: int = 0
    remaining: int = 0
    message: Optional[str] = None
    reset_time: Optional[str] = None
