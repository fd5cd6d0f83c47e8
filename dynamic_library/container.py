"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI et pour un hote
qui embarque la bibliotheque. La configuration est passee par valeur a
chaque client et fournisseur (aucun acces global).
"""

from dependency_injector import containers, providers

from .adapters.api.aiostreams_client import AIOStreamsClient
from .adapters.api.anilist_client import AniListClient
from .adapters.api.cache import APICache
from .adapters.api.embedarr_client import EmbedarrClient
from .adapters.api.opensubtitles_client import OpenSubtitlesClient
from .adapters.api.tmdb_client import TMDBClient
from .adapters.api.tvdb_client import TVDBClient
from .adapters.catalog.direct_provider import DirectCatalogProvider
from .adapters.catalog.stremio_provider import StremioCatalogProvider
from .config import Settings
from .services.maintenance import MaintenanceService
from .services.subtitle_service import SubtitleService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        provider = container.catalog_provider()  # selon settings.catalog_provider
        items = await provider.search_movies("Matrix")
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Cache API - Singleton pour partage entre clients
    api_cache = providers.Singleton(
        APICache,
        cache_dir=config.provided.cache_dir,
    )

    # Clients API - Singleton : token et URL de base des images partages
    # par tous les appelants d'une instance
    tmdb_client = providers.Singleton(TMDBClient, settings=config, cache=api_cache)
    tvdb_client = providers.Singleton(TVDBClient, settings=config, cache=api_cache)
    opensubtitles_client = providers.Singleton(
        OpenSubtitlesClient, settings=config, cache=api_cache
    )
    anilist_client = providers.Singleton(AniListClient, settings=config, cache=api_cache)
    embedarr_client = providers.Singleton(EmbedarrClient, settings=config, cache=api_cache)
    aiostreams_client = providers.Singleton(AIOStreamsClient, settings=config, cache=api_cache)

    # Fournisseurs de catalogue
    direct_catalog_provider = providers.Singleton(
        DirectCatalogProvider,
        settings=config,
        tmdb_client=tmdb_client,
        tvdb_client=tvdb_client,
    )
    stremio_catalog_provider = providers.Singleton(
        StremioCatalogProvider,
        settings=config,
        cache=api_cache,
    )

    # Fournisseur actif, choisi par la valeur de settings.catalog_provider
    catalog_provider = providers.Selector(
        config.provided.catalog_provider.value,
        direct=direct_catalog_provider,
        stremio=stremio_catalog_provider,
    )

    # Services
    subtitle_service = providers.Factory(
        SubtitleService,
        settings=config,
        client=opensubtitles_client,
    )
    maintenance_service = providers.Factory(
        MaintenanceService,
        settings=config,
        cache=api_cache,
        tmdb_client=tmdb_client,
        tvdb_client=tvdb_client,
    )
