"""
Options de configuration fermees (enums) pour la selection des sources.

Chaque valeur est lue une fois depuis la configuration et determine quelle
implementation sert une requete, sans inspection de type a l'execution.
"""

from enum import Enum


class CatalogProviderKind(Enum):
    """Fournisseur de catalogue actif.

    Valeurs:
        DIRECT: Appels directs aux API TMDB (films) et TVDB (series)
        STREMIO: Un addon Stremio unique (catalog + meta)
    """

    DIRECT = "direct"
    STREMIO = "stremio"


class ApiSource(Enum):
    """Source de metadonnees choisie pour un type de contenu."""

    TMDB = "tmdb"
    TVDB = "tvdb"
    NONE = "none"


class LanguageMode(Enum):
    """Mode de langue des metadonnees.

    Valeurs:
        DEFAULT: Langue par defaut des API, aucune traduction demandee
        OVERRIDE: Langue forcee via language_override_code
    """

    DEFAULT = "default"
    OVERRIDE = "override"
