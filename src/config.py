"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe MOVIESTORE_,
et peut optionnellement être fournie via un fichier .env.

Le backend de stockage est choisi par repository_backend : "memory" (défaut) ou "sql".
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe MOVIESTORE_.
    Exemple : MOVIESTORE_REPOSITORY_BACKEND=sql
    """

    model_config = SettingsConfigDict(
        env_prefix="MOVIESTORE_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Stockage
    repository_backend: Literal["memory", "sql"] = Field(default="memory")
    database_url: str = Field(default="sqlite:///moviestore.db")
    seed_demo_data: bool = Field(default=False)

    # Serveur HTTP
    bind_address: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=list)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/moviestore.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Vérifie que le niveau de log est connu de loguru."""
        level = v.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Niveau de log inconnu : {v}")
        return level

    @property
    def uses_database(self) -> bool:
        """Vérifie si le backend SQL est sélectionné."""
        return self.repository_backend == "sql"
