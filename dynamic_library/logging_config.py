"""
Configuration du logging de Dynamic Library via loguru.

Ce qui est journalisé :
- WARNING : échecs des sources externes (timeout, statut non-2xx, JSON non conforme,
  rate limit avec Retry-After), échecs de login TVDB et OpenSubtitles
- INFO : sous-titres récupérés, compactage du cache, état des API
- DEBUG : hits de cache, réponses 404, renouvellement des tokens

La console n'affiche que le niveau choisi (-v / -q) ; le fichier JSON tournant
conserve tout à partir de DEBUG pour analyser les appels API après coup.
"""

import sys
from pathlib import Path

from loguru import logger


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/dynamic_library.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver

    Les échecs des sources externes sont journalisés en WARNING, les hits de cache
    et les traces de requêtes en DEBUG (capturés uniquement dans le fichier par défaut).
    """
    # Supprime le handler par défaut
    logger.remove()

    # Handler console - lisible par l'humain
    logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    # Handler fichier - JSON pour l'analyse
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)


def verbosity_to_level(verbose: int, quiet: bool) -> str:
    """Traduit les options -v/-q de la CLI en niveau loguru.

    Args :
        verbose : Nombre de -v (0 = INFO, 1+ = DEBUG)
        quiet : Mode silencieux (erreurs uniquement)
    """
    if quiet:
        return "ERROR"
    if verbose >= 1:
        return "DEBUG"
    return "INFO"
