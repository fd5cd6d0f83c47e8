"""
Tests du container d'injection de dependances.
"""

import pytest

from dynamic_library.adapters.catalog.direct_provider import DirectCatalogProvider
from dynamic_library.adapters.catalog.stremio_provider import StremioCatalogProvider
from dynamic_library.container import Container
from dynamic_library.services.subtitle_service import SubtitleService


@pytest.fixture
def make_container(make_settings):
    """Container dont la configuration est remplacee par des Settings de test."""
    containers = []

    def factory(**overrides) -> Container:
        container = Container()
        container.config.override(make_settings(**overrides))
        containers.append(container)
        return container

    yield factory
    for container in containers:
        container.api_cache().close()


class TestContainer:
    def test_selects_direct_provider(self, make_container):
        container = make_container(catalog_provider="direct")

        assert isinstance(container.catalog_provider(), DirectCatalogProvider)

    def test_selects_stremio_provider(self, make_container):
        container = make_container(
            catalog_provider="stremio", stremio_catalog_url="https://addon.example/manifest.json"
        )

        provider = container.catalog_provider()

        assert isinstance(provider, StremioCatalogProvider)
        assert provider.base_url == "https://addon.example"

    def test_clients_share_one_cache(self, make_container):
        container = make_container()

        assert container.tmdb_client()._cache is container.tvdb_client()._cache

    def test_clients_are_singletons(self, make_container):
        container = make_container()

        assert container.tvdb_client() is container.tvdb_client()
        assert container.direct_catalog_provider()._tvdb is container.tvdb_client()

    def test_subtitle_service_factory(self, make_container):
        container = make_container(opensubtitles_api_key="key")

        service = container.subtitle_service()

        assert isinstance(service, SubtitleService)
        assert service.is_enabled
