"""
Entités métier représentant les concepts centraux du domaine.

Les entités sont des objets mutables dotés d'une identité persistante.

Exports :
- Movie : Un film du catalogue
"""

from src.core.entities.movie import Movie

__all__ = [
    "Movie",
]
