"""
Tests pour les entites du catalogue unifie.
"""

from dynamic_library.core.entities.catalog import (
    CatalogContentType,
    CatalogItem,
    CatalogItemDetails,
    CatalogSource,
)


class TestCatalogItem:
    def test_defaults(self):
        item = CatalogItem(
            id="603", source=CatalogSource.TMDB, name="The Matrix", type=CatalogContentType.MOVIE
        )

        assert item.genres == []
        assert item.rating is None
        assert item.imdb_id is None

    def test_details_extend_item(self):
        details = CatalogItemDetails(
            id="81189",
            source=CatalogSource.TVDB,
            name="Breaking Bad",
            type=CatalogContentType.SERIES,
        )

        assert isinstance(details, CatalogItem)
        assert details.seasons == []
        assert details.episodes == []
        assert details.cast == []

    def test_mutable_defaults_are_not_shared(self):
        first = CatalogItemDetails(
            id="1", source=CatalogSource.STREMIO, name="A", type=CatalogContentType.MOVIE
        )
        second = CatalogItemDetails(
            id="2", source=CatalogSource.STREMIO, name="B", type=CatalogContentType.MOVIE
        )

        first.directors.append("Jane Doe")

        assert second.directors == []
