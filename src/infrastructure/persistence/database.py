"""
Configuration de la base de données pour MovieStore.

Ce module fournit :
- Engine SQLAlchemy configuré pour un usage multi-thread
- Fonction d'initialisation des tables

La base de données est configurée via MOVIESTORE_DATABASE_URL (défaut : sqlite:///moviestore.db).
Elle n'est utilisée que lorsque le backend "sql" est sélectionné.
"""

from pathlib import Path

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import SQLModel, create_engine


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Crée l'engine pour l'URL donnée.

    Pour une URL SQLite fichier, le répertoire parent est créé si nécessaire.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if database_url.startswith("sqlite:///") and not database_url.startswith("sqlite:///:memory:"):
            db_path = Path(database_url.replace("sqlite:///", ""))
            db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(database_url, echo=echo, connect_args=connect_args)


def init_db(engine: Engine) -> None:
    """
    Initialise la base de données en créant les tables manquantes.

    Importe les modèles pour enregistrer leurs métadonnées dans
    SQLModel.metadata, puis crée les tables si elles n'existent pas déjà.
    """
    # Import ici pour éviter les imports circulaires
    from src.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.debug("Tables initialisées", url=str(engine.url))
