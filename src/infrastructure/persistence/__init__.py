"""
Module de persistance pour MovieStore.

Ce module fournit l'infrastructure de stockage. Il contient :

- database.py : Création de l'engine et initialisation des tables
- models.py : Modèles SQLModel représentant les tables de la base de données
- repositories/ : Implémentations de IMovieRepository (mémoire et SQLModel)

Les modèles ici sont des adapters de persistance, distincts des entités de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from src.infrastructure.persistence import create_db_engine, init_db

    engine = create_db_engine("sqlite:///moviestore.db")
    init_db(engine)  # Crée les tables si nécessaire
"""

from src.infrastructure.persistence.database import create_db_engine, init_db
from src.infrastructure.persistence.models import MovieModel

__all__ = [
    "create_db_engine",
    "init_db",
    "MovieModel",
]
