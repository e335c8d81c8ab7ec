"""
Utilitaires et constantes pour MovieStore.

Ce module contient les constantes partagées.
"""

from src.utils.constants import DEMO_MOVIES, MAX_MOVIE_ID

__all__ = [
    "DEMO_MOVIES",
    "MAX_MOVIE_ID",
]
