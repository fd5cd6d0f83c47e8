"""
Fournisseurs de catalogue : acces direct TMDB/TVDB ou addon Stremio.
"""

from .direct_provider import DirectCatalogProvider
from .factory import create_catalog_provider
from .stremio_provider import StremioCatalogProvider

__all__ = [
    "DirectCatalogProvider",
    "StremioCatalogProvider",
    "create_catalog_provider",
]
