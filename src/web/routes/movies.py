"""
Routes de la ressource /movies.

Handlers fins : ils lisent le film validé (ou l'ID de chemin) et délèguent
au repository, puis traduisent le résultat en code HTTP et corps JSON.

L'ID de chemin est contraint par le routeur ({movie_id:movie_id}) à 1 à 19
chiffres : un ID non numérique ou de 20 chiffres et plus n'atteint jamais
ces handlers (404). Au-delà de 2**63 - 1, le repository répond introuvable.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.convertors import Convertor, register_url_convertor

from ...core.entities.movie import Movie
from ...core.exceptions import MovieNotFoundError
from ...core.ports.repositories import IMovieRepository
from ..deps import get_movie_repository, validated_movie
from ..schemas import GenericError, MovieResponse, ValidationErrorResponse


class MovieIdConvertor(Convertor[int]):
    """Segment de chemin d'au plus 19 chiffres (plage d'un INTEGER 64 bits)."""

    regex = "[0-9]{1,19}"

    def convert(self, value: str) -> int:
        return int(value)

    def to_string(self, value: int) -> str:
        return str(value)


# Enregistré avant la déclaration des routes qui l'utilisent
register_url_convertor("movie_id", MovieIdConvertor())

router = APIRouter(tags=["movies"])

Repository = Annotated[IMovieRepository, Depends(get_movie_repository)]
ValidatedMovie = Annotated[Movie, Depends(validated_movie)]

_NOT_FOUND = {404: {"model": GenericError}}
_REJECTED = {
    400: {"model": GenericError},
    422: {"model": ValidationErrorResponse},
}


def _no_content() -> Response:
    return Response(status_code=204, media_type="application/json")


@router.get("/movies", response_model=list[MovieResponse])
def list_movies(repository: Repository) -> list[MovieResponse]:
    """Retourne tous les films du catalogue."""
    logger.debug("Lecture de tous les films")
    return [MovieResponse.from_entity(movie) for movie in repository.list_all()]


@router.get(
    "/movies/{movie_id:movie_id}",
    response_model=MovieResponse,
    responses={**_NOT_FOUND, 500: {"model": GenericError}},
)
def get_movie(movie_id: int, repository: Repository):
    """Retourne un film par son ID."""
    logger.debug("Lecture du film", id=movie_id)
    try:
        movie = repository.get_by_id(movie_id)
    except MovieNotFoundError as exc:
        logger.warning("Film introuvable", id=movie_id)
        return JSONResponse(status_code=404, content={"message": str(exc)})
    return MovieResponse.from_entity(movie)


@router.post("/movies", response_model=MovieResponse, responses=_REJECTED)
def create_movie(movie: ValidatedMovie, repository: Repository) -> MovieResponse:
    """Crée un film ; l'ID éventuellement fourni est ignoré."""
    created = repository.create(movie)
    logger.debug("Film créé", id=created.id, name=created.name)
    return MovieResponse.from_entity(created)


@router.put(
    "/movies",
    status_code=204,
    response_class=Response,
    responses={**_REJECTED, **_NOT_FOUND},
)
def update_movie(movie: ValidatedMovie, repository: Repository) -> Response:
    """Remplace le film désigné par l'ID du corps."""
    logger.debug("Mise à jour du film", id=movie.id)
    try:
        # Un corps sans id ne désigne aucun film
        if movie.id is None:
            raise MovieNotFoundError(None)
        repository.update(movie.id, movie)
    except MovieNotFoundError:
        logger.warning("Film introuvable pour mise à jour", id=movie.id)
        return JSONResponse(status_code=404, content={"message": "Movie not found in database"})
    return _no_content()


@router.delete(
    "/movies/{movie_id:movie_id}",
    status_code=204,
    response_class=Response,
    responses=_NOT_FOUND,
)
def delete_movie(movie_id: int, repository: Repository) -> Response:
    """Supprime un film par son ID."""
    logger.debug("Suppression du film", id=movie_id)
    try:
        repository.delete(movie_id)
    except MovieNotFoundError as exc:
        logger.warning("Film introuvable pour suppression", id=movie_id)
        return JSONResponse(status_code=404, content={"message": str(exc)})
    return _no_content()
