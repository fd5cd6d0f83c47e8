"""Modeles des reponses /stream d'un addon AIOStreams."""

from typing import Any, Optional

from pydantic import Field

from dynamic_library.adapters.api.models.base import WireModel


class AIOBehaviorHints(WireModel):
    binge_group: Optional[str] = Field(default=None, alias="bingeGroup")
    not_web_ready: bool = Field(default=False, alias="notWebReady")
    proxy_headers: dict[str, Any] = Field(default_factory=dict, alias="proxyHeaders")
    filename: Optional[str] = None


class AIOStream(WireModel):
    name: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    info_hash: Optional[str] = Field(default=None, alias="infoHash")
    file_idx: Optional[int] = Field(default=None, alias="fileIdx")
    behavior_hints: AIOBehaviorHints = Field(
        default_factory=AIOBehaviorHints, alias="behaviorHints"
    )

    @property
    def display_name(self) -> str:
        return self.title or self.name or "Unknown Stream"


class AIOStreamsResponse(WireModel):
    streams: list[AIOStream] = Field(default_factory=list)
