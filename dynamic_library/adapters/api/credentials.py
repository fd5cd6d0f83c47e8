"""
Lecture des identifiants OpenSubtitles depuis la configuration du plugin Jellyfin voisin.

Le plugin officiel stocke sa configuration dans un fichier XML
(Jellyfin.Plugin.OpenSubtitles.xml) dont la racine contient les elements
<Username> et <Password>.
"""

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from loguru import logger


@dataclass(frozen=True)
class OpenSubtitlesCredentials:
    """Identifiants d'un compte OpenSubtitles."""

    username: str
    password: str


def read_opensubtitles_credentials(path: Path) -> Optional[OpenSubtitlesCredentials]:
    """
    Lit les identifiants du plugin OpenSubtitles de Jellyfin.

    Args:
        path: Chemin du fichier XML de configuration du plugin

    Returns:
        Identifiants, ou None si le fichier est absent, illisible ou incomplet
    """
    if not path.is_file():
        logger.debug(f"Configuration OpenSubtitles absente: {path}")
        return None

    try:
        root = ET.parse(path).getroot()
    except (ET.ParseError, OSError) as e:
        logger.warning(f"Configuration OpenSubtitles illisible ({path}): {e}")
        return None

    username = (root.findtext("Username") or "").strip()
    password = (root.findtext("Password") or "").strip()
    if not username or not password:
        return None
    return OpenSubtitlesCredentials(username=username, password=password)
