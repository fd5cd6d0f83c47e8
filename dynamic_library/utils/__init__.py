"""
Utilitaires partages pour Dynamic Library.

Ce module contient les fonctions de parsing des champs heterogenes des
sources externes et la table des codes de langue.
"""

from dynamic_library.utils.languages import (
    language_display_name,
    normalize_language_code,
)
from dynamic_library.utils.parsing import (
    build_image_url,
    normalize_imdb_id,
    parse_date,
    parse_rating,
    parse_runtime_minutes,
    parse_year,
    string_or_list,
    strip_manifest_suffix,
)

__all__ = [
    "build_image_url",
    "language_display_name",
    "normalize_imdb_id",
    "normalize_language_code",
    "parse_date",
    "parse_rating",
    "parse_runtime_minutes",
    "parse_year",
    "string_or_list",
    "strip_manifest_suffix",
]
