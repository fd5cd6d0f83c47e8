"""
Tests de la selection du fournisseur de catalogue.
"""

from unittest.mock import MagicMock

import pytest

from dynamic_library.adapters.catalog.factory import create_catalog_provider
from dynamic_library.core.ports.catalog_provider import ICatalogProvider
from dynamic_library.core.value_objects.options import CatalogProviderKind


@pytest.fixture
def providers() -> tuple[MagicMock, MagicMock]:
    return MagicMock(spec=ICatalogProvider), MagicMock(spec=ICatalogProvider)


class TestCreateCatalogProvider:
    def test_direct(self, providers):
        direct, stremio = providers

        assert create_catalog_provider(CatalogProviderKind.DIRECT, direct, stremio) is direct

    def test_stremio(self, providers):
        direct, stremio = providers

        assert create_catalog_provider(CatalogProviderKind.STREMIO, direct, stremio) is stremio

    def test_accepts_raw_value(self, providers):
        direct, stremio = providers

        assert create_catalog_provider("stremio", direct, stremio) is stremio

    def test_unknown_kind_raises(self, providers):
        direct, stremio = providers

        with pytest.raises(ValueError, match="Unknown catalog provider"):
            create_catalog_provider("plex", direct, stremio)
