"""
Amorçage du catalogue avec les films de démonstration.

Les films sont insérés via IMovieRepository.create : ils reçoivent donc
leurs identifiants selon la politique normale (1, 2, ...).
"""

from loguru import logger

from src.core.ports.repositories import IMovieRepository
from src.utils.constants import DEMO_MOVIES


def seed_demo_movies(repository: IMovieRepository) -> int:
    """
    Insère les films de démonstration si le catalogue est vide.

    Args :
        repository : Le repository à amorcer

    Retourne :
        Le nombre de films insérés (0 si le catalogue contenait déjà des films)
    """
    if repository.count() > 0:
        logger.debug("Catalogue non vide, amorçage ignoré")
        return 0

    for movie in DEMO_MOVIES:
        repository.create(movie)
    logger.info("Catalogue amorcé", count=len(DEMO_MOVIES))
    return len(DEMO_MOVIES)
