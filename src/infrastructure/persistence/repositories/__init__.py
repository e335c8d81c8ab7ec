"""
Implémentations des repositories.

Ce module contient les implémentations concrètes de l'interface
IMovieRepository définie dans src/core/ports/repositories.py :

- InMemoryMovieRepository : liste ordonnée en mémoire (défaut)
- SQLModelMovieRepository : table SQL via SQLModel

Chaque repository :
- Hérite de l'interface ABC du domaine
- Convertit ou copie les entités pour ne jamais exposer son état interne
- Sérialise ses mutations par un verrou
"""

from src.infrastructure.persistence.repositories.memory_movie_repository import (
    InMemoryMovieRepository,
)
from src.infrastructure.persistence.repositories.movie_repository import (
    SQLModelMovieRepository,
)

__all__ = [
    "InMemoryMovieRepository",
    "SQLModelMovieRepository",
]
