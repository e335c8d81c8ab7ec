"""
Dépendances partagées de l'application web.

Les handlers reçoivent le repository et le film validé comme paramètres
explicites, résolus depuis le Container stocké dans app.state.
"""

from fastapi import Request

from ..core.entities.movie import Movie
from ..core.ports.repositories import IMovieRepository


def get_movie_repository(request: Request) -> IMovieRepository:
    """Retourne le repository partagé de l'application."""
    return request.app.state.container.movie_repository()


async def validated_movie(request: Request) -> Movie:
    """
    Exécute le pipeline décodage -> validation sur le corps de la requête.

    Lève DecodeError ou MovieValidationError, traduites en 400 et 422 par
    les gestionnaires d'exceptions ; le handler n'est alors jamais appelé.
    """
    body = await request.body()
    pipeline = request.app.state.container.movie_pipeline()
    return pipeline.run(body)
