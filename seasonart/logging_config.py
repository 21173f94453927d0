"""
Configuration du logging de SeasonArt via loguru.

- Sortie console : colorée, niveau choisi par l'utilisateur (-v / -q)
- Sortie fichier : JSON sérialisé avec rotation, toujours en DEBUG
  (les cache hit/miss et les 404 fanart.tv y sont tracés)
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_VERBOSITY_LEVELS = {0: None, 1: "INFO", 2: "DEBUG"}


def level_for_verbosity(base_level: str, verbose: int = 0, quiet: bool = False) -> str:
    """Calcule le niveau console à partir des options -v/-q de la CLI."""
    if quiet:
        return "ERROR"
    return _VERBOSITY_LEVELS.get(min(verbose, 2)) or base_level


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/seasonart.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier de log JSON, None pour désactiver la sortie fichier
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,  # Thread-safe (accès cache via run_in_executor)
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)
