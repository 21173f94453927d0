"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe SEASONART_,
et peut optionnellement être fournie via un fichier .env.

La clé API fanart.tv est optionnelle - la résolution des visuels est désactivée si non fournie.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de seasonart/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe SEASONART_.
    Exemple : SEASONART_FANART_API_KEY=xxxx

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="SEASONART_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # fanart.tv (clé projet obligatoire pour interroger l'API, clé personnelle optionnelle)
    fanart_api_key: Optional[str] = Field(default=None)
    fanart_client_key: Optional[str] = Field(default=None)
    fanart_base_url: str = Field(default="https://webservice.fanart.tv/v3")
    request_timeout: float = Field(default=30.0, gt=0)
    max_retry_attempts: int = Field(default=5, ge=1)

    # Cache des documents séries
    cache_dir: Path = Field(default=Path("~/.cache/seasonart"))
    cache_ttl_days: int = Field(default=2, ge=1)

    # Langue utilisée quand la demande n'en précise pas
    default_language: str = Field(default="en")

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/seasonart.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def fanart_enabled(self) -> bool:
        """Vérifie si l'API fanart.tv est configurée."""
        return bool(self.fanart_api_key)
