"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe DYNLIB_,
et peut optionnellement être fournie via un fichier .env.

Les clés API et URLs sont optionnelles - chaque source est désactivée si non fournie.
L'instance Settings est passée par valeur aux clients et fournisseurs (pas d'état global).
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dynamic_library.core.value_objects.options import (
    ApiSource,
    CatalogProviderKind,
    LanguageMode,
)
from dynamic_library.utils.languages import normalize_language_code

# Trouver le fichier .env à la racine du projet (parent de dynamic_library/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

# Nom du fichier de configuration du plugin OpenSubtitles de Jellyfin
OPENSUBTITLES_PLUGIN_CONFIG = "Jellyfin.Plugin.OpenSubtitles.xml"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe DYNLIB_.
    Exemple : DYNLIB_TMDB_API_KEY=xxx, DYNLIB_CATALOG_PROVIDER=stremio

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="DYNLIB_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Clés API (OPTIONNELLES - sources désactivées si non définies)
    tmdb_api_key: Optional[str] = Field(default=None)
    tvdb_api_key: Optional[str] = Field(default=None)
    tvdb_pin: Optional[str] = Field(default=None)
    opensubtitles_api_key: Optional[str] = Field(default=None)

    # Identifiants OpenSubtitles lus depuis le plugin Jellyfin voisin
    use_jellyfin_opensubtitles_credentials: bool = Field(default=False)
    plugin_configurations_path: Path = Field(
        default=Path("~/.config/jellyfin/plugins/configurations")
    )

    # Services compatibles Stremio et Embedarr
    stremio_catalog_url: Optional[str] = Field(default=None)
    embedarr_url: Optional[str] = Field(default=None)
    embedarr_api_key: Optional[str] = Field(default=None)
    aiostreams_url: Optional[str] = Field(default=None)

    # Sélection des sources
    catalog_provider: CatalogProviderKind = Field(default=CatalogProviderKind.DIRECT)
    movie_api_source: ApiSource = Field(default=ApiSource.TMDB)
    tv_show_api_source: ApiSource = Field(default=ApiSource.TVDB)

    # Langue des métadonnées
    language_mode: LanguageMode = Field(default=LanguageMode.DEFAULT)
    language_override_code: str = Field(default="eng", min_length=2)

    # Cache et limites
    cache_ttl_minutes: int = Field(default=60, ge=1)
    cache_dir: Path = Field(default=Path(".cache/api"))
    max_search_results: int = Field(default=20, ge=1)
    http_timeout_seconds: float = Field(default=30.0, gt=0)

    # Sous-titres
    enable_subtitles: bool = Field(default=True)
    subtitle_languages: str = Field(default="en")
    max_subtitles_per_language: int = Field(default=1, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/dynamic_library.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("plugin_configurations_path", "cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator(
        "tmdb_api_key",
        "tvdb_api_key",
        "tvdb_pin",
        "opensubtitles_api_key",
        "stremio_catalog_url",
        "embedarr_url",
        "embedarr_api_key",
        "aiostreams_url",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Une chaîne vide (ex: DYNLIB_TMDB_API_KEY=) équivaut à une clé absente."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return self.tmdb_api_key is not None

    @property
    def tvdb_enabled(self) -> bool:
        """Vérifie si l'API TVDB est configurée."""
        return self.tvdb_api_key is not None

    @property
    def cache_ttl_seconds(self) -> int:
        """Durée de vie des entrées du cache en secondes."""
        return self.cache_ttl_minutes * 60

    @property
    def tmdb_language_code(self) -> Optional[str]:
        """Code langue ISO 639-1 pour TMDB, None en mode par défaut."""
        if self.language_mode is LanguageMode.DEFAULT:
            return None
        return normalize_language_code(self.language_override_code)

    @property
    def tvdb_language_code(self) -> Optional[str]:
        """Code langue à 3 lettres pour TVDB, None en mode par défaut."""
        if self.language_mode is LanguageMode.DEFAULT:
            return None
        return self.language_override_code.strip().lower()

    @property
    def subtitle_language_list(self) -> list[str]:
        """Langues de sous-titres normalisées (ISO 639-1), sans doublon, ordre conservé."""
        languages: list[str] = []
        for raw in self.subtitle_languages.split(","):
            if not raw.strip():
                continue
            code = normalize_language_code(raw)
            if code not in languages:
                languages.append(code)
        return languages or ["en"]

    @property
    def opensubtitles_credentials_file(self) -> Path:
        """Chemin du fichier XML du plugin OpenSubtitles de Jellyfin."""
        return self.plugin_configurations_path / OPENSUBTITLES_PLUGIN_CONFIG
