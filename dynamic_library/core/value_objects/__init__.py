"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- Lookup, LookupStatus : Resultat explicite (valeur ou absence qualifiee)
- CatalogProviderKind, ApiSource, LanguageMode : Options de configuration
"""

from dynamic_library.core.value_objects.lookup import Lookup, LookupStatus
from dynamic_library.core.value_objects.options import (
    ApiSource,
    CatalogProviderKind,
    LanguageMode,
)

__all__ = [
    "Lookup",
    "LookupStatus",
    "ApiSource",
    "CatalogProviderKind",
    "LanguageMode",
]
