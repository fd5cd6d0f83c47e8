"""
Business entities representing core domain concepts.

Exports:
- CatalogItem: Search-result-weight summary of a movie or series
- CatalogItemDetails: Full details of a movie or series
- CatalogCastMember, CatalogSeasonInfo, CatalogEpisodeInfo: Detail parts
- CatalogSource, CatalogContentType: Provenance and kind of an item
- SubtitleEvent: One timed cue ready for a player UI
- FetchedSubtitle: A downloaded subtitle converted to WebVTT
"""

from dynamic_library.core.entities.catalog import (
    CatalogCastMember,
    CatalogContentType,
    CatalogEpisodeInfo,
    CatalogItem,
    CatalogItemDetails,
    CatalogSeasonInfo,
    CatalogSource,
)
from dynamic_library.core.entities.subtitle import FetchedSubtitle, SubtitleEvent

__all__ = [
    "CatalogItem",
    "CatalogItemDetails",
    "CatalogCastMember",
    "CatalogSeasonInfo",
    "CatalogEpisodeInfo",
    "CatalogSource",
    "CatalogContentType",
    "SubtitleEvent",
    "FetchedSubtitle",
]
