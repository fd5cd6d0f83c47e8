"""Modeles des reponses du service Embedarr."""

from typing import Optional, Union

from pydantic import Field

from dynamic_library.adapters.api.models.base import WireModel


class EmbedarrResponse(WireModel):
    """Resultat d'un ajout a la bibliotheque."""

    success: bool = False
    message: Optional[str] = None
    files_created: list[str] = Field(default_factory=list, alias="filesCreated")
    error: Optional[str] = None

    @classmethod
    def failure(cls, error: str) -> "EmbedarrResponse":
        return cls(success=False, error=error)


class EmbedarrUrlResponse(WireModel):
    """URL de lecture d'un film, d'un episode ou d'un anime."""

    url: str = ""
    id: Optional[Union[str, int]] = None
    type: Optional[str] = None
    season: Optional[int] = None
    episode: Optional[int] = None
    audio_type: Optional[str] = Field(default=None, alias="audioType")
