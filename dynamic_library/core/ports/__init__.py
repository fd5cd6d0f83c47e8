"""
Ports (interfaces abstraites) du domaine.

Les adaptateurs (clients HTTP, fournisseurs de catalogue) implémentent
ces contrats ; les services et la CLI ne dépendent que d'eux.
"""

from .api_clients import (
    IAIOStreamsClient,
    IEmbedarrClient,
    IOpenSubtitlesClient,
    ITmdbClient,
    ITvdbClient,
)
from .catalog_provider import ICatalogProvider

__all__ = [
    "IAIOStreamsClient",
    "ICatalogProvider",
    "IEmbedarrClient",
    "IOpenSubtitlesClient",
    "ITmdbClient",
    "ITvdbClient",
]
