"""
Utilitaires partages pour les commandes CLI de Dynamic Library.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- resolve_provider : fournisseur de catalogue actif ou force par --provider
"""

from contextlib import contextmanager
from functools import wraps
from typing import Optional

from loguru import logger as loguru_logger
from rich.console import Console

from dynamic_library.adapters.catalog.factory import create_catalog_provider
from dynamic_library.container import Container
from dynamic_library.core.ports.catalog_provider import ICatalogProvider
from dynamic_library.core.value_objects.options import CatalogProviderKind

console = Console()

# Clients possedant des connexions HTTP a fermer en fin de commande
_CLOSABLE_PROVIDERS = (
    "tmdb_client",
    "tvdb_client",
    "opensubtitles_client",
    "anilist_client",
    "embedarr_client",
    "aiostreams_client",
    "stremio_catalog_provider",
)


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("dynamic_library")
    try:
        yield
    finally:
        loguru_logger.enable("dynamic_library")


async def close_container(container: Container) -> None:
    """Ferme les clients HTTP et le cache du container."""
    for name in _CLOSABLE_PROVIDERS:
        await getattr(container, name)().close()
    container.api_cache().close()


def with_container():
    """
    Decorateur qui injecte un container initialise en premier argument.

    Les clients sont fermes a la fin de la commande, meme en cas d'erreur.

    Usage:
        @with_container()
        async def my_command(container, ...):
            config = container.config()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await close_container(container)
        return wrapper
    return decorator


def resolve_provider(
    container: Container, kind: Optional[CatalogProviderKind] = None
) -> ICatalogProvider:
    """
    Retourne le fournisseur de catalogue a utiliser.

    Args:
        container: Container initialise
        kind: Fournisseur force par l'option --provider (None : configuration)
    """
    if kind is None:
        return container.catalog_provider()
    return create_catalog_provider(
        kind,
        direct=container.direct_catalog_provider(),
        stremio=container.stremio_catalog_provider(),
    )
