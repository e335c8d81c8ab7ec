"""
Implémentation en mémoire du repository Movie.

La collection est un tuple immuable remplacé d'un bloc à chaque mutation.
Les lectures prennent la référence courante sans verrou : elles voient
soit l'état avant, soit l'état après une mutation, jamais un état partiel.
"""

import threading
from dataclasses import replace

from loguru import logger

from src.core.entities.movie import Movie
from src.core.exceptions import MovieNotFoundError
from src.core.ports.repositories import IMovieRepository


class InMemoryMovieRepository(IMovieRepository):
    """
    Repository en mémoire pour les films.

    Conserve l'ordre d'insertion. Les films sont copiés en entrée et en
    sortie : un appelant ne peut pas modifier la collection par référence.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._movies: tuple[Movie, ...] = ()

    @staticmethod
    def _index_of(movies: tuple[Movie, ...], movie_id: int) -> int:
        """Retourne la position du film dans le snapshot ou lève MovieNotFoundError."""
        for index, movie in enumerate(movies):
            if movie.id == movie_id:
                return index
        raise MovieNotFoundError(movie_id)

    def list_all(self) -> list[Movie]:
        return [replace(movie) for movie in self._movies]

    def get_by_id(self, movie_id: int) -> Movie:
        movies = self._movies
        return replace(movies[self._index_of(movies, movie_id)])

    def create(self, movie: Movie) -> Movie:
        with self._lock:
            movies = self._movies
            next_id = max((m.id for m in movies), default=0) + 1
            stored = replace(movie, id=next_id)
            self._movies = movies + (stored,)
        logger.debug("Film ajouté en mémoire", id=next_id)
        return replace(stored)

    def update(self, movie_id: int, movie: Movie) -> Movie:
        with self._lock:
            movies = self._movies
            index = self._index_of(movies, movie_id)
            stored = replace(movie, id=movie_id)
            self._movies = movies[:index] + (stored,) + movies[index + 1:]
        return replace(stored)

    def delete(self, movie_id: int) -> None:
        with self._lock:
            movies = self._movies
            index = self._index_of(movies, movie_id)
            self._movies = movies[:index] + movies[index + 1:]
        logger.debug("Film supprimé de la mémoire", id=movie_id)

    def count(self) -> int:
        return len(self._movies)
