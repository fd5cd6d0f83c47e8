"""
Selection du fournisseur de catalogue actif.

Le choix est une selection fermee sur CatalogProviderKind, resolue depuis
la configuration (jamais par inspection du type a l'execution).
"""

from dynamic_library.core.ports.catalog_provider import ICatalogProvider
from dynamic_library.core.value_objects.options import CatalogProviderKind


def create_catalog_provider(
    kind: CatalogProviderKind,
    direct: ICatalogProvider,
    stremio: ICatalogProvider,
) -> ICatalogProvider:
    """
    Retourne le fournisseur correspondant au type configure.

    Args:
        kind: Type de fournisseur (settings.catalog_provider)
        direct: Fournisseur direct TMDB/TVDB
        stremio: Fournisseur addon Stremio

    Returns:
        Le fournisseur selectionne

    Raises:
        ValueError: Si le type n'est pas un CatalogProviderKind connu
    """
    providers: dict[CatalogProviderKind, ICatalogProvider] = {
        CatalogProviderKind.DIRECT: direct,
        CatalogProviderKind.STREMIO: stremio,
    }
    try:
        return providers[CatalogProviderKind(kind)]
    except (KeyError, ValueError) as e:
        raise ValueError(f"Unknown catalog provider: {kind!r}") from e
