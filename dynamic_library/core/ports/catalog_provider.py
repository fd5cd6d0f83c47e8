"""
Interface port pour les fournisseurs de catalogue.

Un fournisseur expose un modèle unifié (CatalogItem, CatalogItemDetails)
quelle que soit la source interrogée. Deux variantes existent : l'accès
direct aux API TMDB/TVDB et un addon compatible Stremio.
"""

from abc import ABC, abstractmethod
from typing import Optional

from dynamic_library.core.entities.catalog import CatalogItem, CatalogItemDetails


class ICatalogProvider(ABC):
    """
    Interface d'un fournisseur de catalogue films/séries.

    Toutes les opérations sont totales : une source non configurée,
    injoignable ou qui ne connaît pas l'élément donne une liste vide ou None.
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """True si au moins une source utile est configurée."""
        ...

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nom lisible du fournisseur (pour les logs et la CLI)."""
        ...

    @abstractmethod
    async def search_movies(self, query: str, max_results: int = 20) -> list[CatalogItem]:
        """
        Recherche des films.

        Args :
            query : Titre recherché
            max_results : Nombre maximum de résultats retournés

        Retourne :
            Liste ordonnée de CatalogItem de type MOVIE (vide si aucun résultat)
        """
        ...

    @abstractmethod
    async def search_series(self, query: str, max_results: int = 20) -> list[CatalogItem]:
        """Recherche des séries (CatalogItem de type SERIES)."""
        ...

    @abstractmethod
    async def get_movie_details(self, item_id: str) -> Optional[CatalogItemDetails]:
        """Détails d'un film par son identifiant natif, ou None."""
        ...

    @abstractmethod
    async def get_series_details(self, item_id: str) -> Optional[CatalogItemDetails]:
        """Détails d'une série (saisons et épisodes inclus), ou None."""
        ...
