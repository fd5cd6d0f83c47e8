"""
Fonctions pures de parsing des champs heterogenes renvoyes par les sources.

Les API externes representent differemment les memes informations :
- duree en texte libre ("2h 28min", "148 min", "148")
- annee isolee ou intervalle ("2019", "2019-2023", "2019-")
- champ texte ou liste de textes ("Jane Doe" ou ["Jane Doe"])
- note a 0 signifiant "inconnue"

Ces fonctions ne levent jamais d'exception : une valeur inexploitable donne None
(ou une liste vide).
"""

import re
from datetime import date
from typing import Any, Optional

_HOURS_PATTERN = re.compile(r"(\d+)\s*h")
_MINUTES_PATTERN = re.compile(r"(\d+)\s*min")
_YEAR_SEPARATOR = re.compile(r"[-–—/]")
_MANIFEST_SUFFIX = "manifest.json"


def parse_runtime_minutes(value: Optional[str]) -> Optional[int]:
    """
    Convertit une duree en texte libre en minutes.

    Priorite : somme des composantes heures/minutes trouvees, sinon entier
    seul interprete comme des minutes, sinon None.

    Args:
        value: Duree texte (ex: "2h 28min", "148 min", "148")

    Returns:
        Nombre de minutes, ou None si non interpretable

    Example:
        >>> parse_runtime_minutes("2h 28min")
        148
    """
    if not value:
        return None

    text = value.lower()
    total = 0

    hours = _HOURS_PATTERN.search(text)
    if hours:
        total += int(hours.group(1)) * 60

    minutes = _MINUTES_PATTERN.search(text)
    if minutes:
        total += int(minutes.group(1))

    # Un nombre seul est une duree en minutes
    if total == 0 and text.strip().isdigit():
        total = int(text.strip())

    return total if total > 0 else None


def parse_year(value: Any) -> Optional[int]:
    """
    Extrait l'annee du premier element d'une annee ou d'un intervalle.

    Accepte aussi une date ISO ("2010-07-15" -> 2010) et un entier.

    Example:
        >>> parse_year("2019-2023")
        2019
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None

    text = str(value).strip()
    if not text:
        return None

    leading = _YEAR_SEPARATOR.split(text, maxsplit=1)[0].strip()
    if len(leading) >= 4 and leading[:4].isdigit():
        return int(leading[:4])
    return None


def parse_date(value: Optional[str]) -> Optional[date]:
    """
    Convertit une date ISO (avec ou sans heure) en date.

    Example:
        >>> parse_date("2008-01-20T00:00:00.000Z")
        datetime.date(2008, 1, 20)
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def parse_rating(value: Any) -> Optional[float]:
    """
    Convertit une note (texte ou nombre) en float.

    Une note egale a 0 (ou negative) est consideree comme inconnue.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        rating = float(str(value).strip().replace(",", "."))
    except ValueError:
        return None
    return rating if rating > 0 else None


def string_or_list(value: Any) -> list[str]:
    """
    Normalise un champ declare comme texte ou liste de textes.

    None ou absent donne une liste vide, un texte donne une liste a un
    element, une liste conserve son ordre (elements vides ignores).

    Example:
        >>> string_or_list("Jane Doe") == string_or_list(["Jane Doe"])
        True
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if isinstance(item, str) and item.strip()]
    return []


def strip_manifest_suffix(url: Optional[str]) -> str:
    """
    Retourne l'URL de base d'un addon Stremio.

    Supprime le slash final et le suffixe "manifest.json" souvent present
    dans les URLs copiees depuis Stremio.

    Example:
        >>> strip_manifest_suffix("https://addon.example/abc/manifest.json")
        'https://addon.example/abc'
    """
    if not url:
        return ""
    base = url.strip().rstrip("/")
    if base.lower().endswith(_MANIFEST_SUFFIX):
        base = base[: -len(_MANIFEST_SUFFIX)].rstrip("/")
    return base


def build_image_url(base_url: str, size: str, path: Optional[str]) -> Optional[str]:
    """
    Construit l'URL absolue d'une image TMDB.

    Args:
        base_url: Base resolue (ex: "https://image.tmdb.org/t/p/")
        size: Segment de taille (ex: "w500", "original", "w185")
        path: Chemin relatif fourni par l'API (ex: "/abc.jpg")

    Returns:
        URL complete, ou None si la source ne fournit pas de chemin
    """
    if not path:
        return None
    return f"{base_url}{size}{path}"


def normalize_imdb_id(imdb_id: str) -> str:
    """Ajoute le prefixe "tt" a un identifiant IMDb numerique."""
    value = imdb_id.strip()
    if value.lower().startswith("tt"):
        return value
    return f"tt{value}"
