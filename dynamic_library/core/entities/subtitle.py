"""
Subtitle entities.

Timed events parsed from cue-based subtitle text, and subtitles fetched
from OpenSubtitles after conversion to WebVTT.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SubtitleEvent:
    """
    One timed cue.

    Attributes:
        start_ms: Start offset in milliseconds
        end_ms: End offset in milliseconds
        text: Cue text, lines joined with "\\n"
    """

    start_ms: int
    end_ms: int
    text: str


@dataclass
class FetchedSubtitle:
    """
    A subtitle downloaded and converted to WebVTT.

    Attributes:
        language: Display label (e.g. "English", "English (2)")
        language_code: ISO 639-1 code, suffixed with "_{index}" when several
            subtitles per language are kept
        content: WebVTT text
        hearing_impaired: True for SDH subtitles
        file_id: OpenSubtitles file id the content came from
    """

    language: str
    language_code: str
    content: str
    hearing_impaired: bool = False
    file_id: Optional[int] = None
