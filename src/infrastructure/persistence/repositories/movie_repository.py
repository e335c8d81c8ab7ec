"""
Implémentation SQLModel du repository Movie.

Implémente l'interface IMovieRepository pour la persistance des films
dans une table SQL via SQLModel.
"""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal
from typing import Optional

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, func, select

from src.core.entities.movie import Movie
from src.core.exceptions import MovieNotFoundError, StoreError
from src.core.ports.repositories import IMovieRepository
from src.infrastructure.persistence.models import MovieModel
from src.utils.constants import MAX_MOVIE_ID

# Champs recopiés tels quels entre entité et modèle
_PLAIN_FIELDS = (
    "name",
    "description",
    "sku",
    "link",
    "length",
    "size",
    "path",
)


def _price_to_text(price: Optional[Decimal]) -> str:
    return "" if price is None else str(price)


def _price_from_text(text: str) -> Optional[Decimal]:
    return Decimal(text) if text else None


def _created_at_to_text(created_at: Optional[datetime]) -> Optional[str]:
    return created_at.isoformat() if created_at else None


def _created_at_from_text(text: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(text) if text else None


class SQLModelMovieRepository(IMovieRepository):
    """
    Repository SQLModel pour les films.

    Implémente IMovieRepository avec conversion bidirectionnelle
    entre l'entité Movie (domaine) et MovieModel (persistance).

    Chaque opération ouvre sa propre session. Les mutations sont
    sérialisées par un verrou : la lecture du max(id) et l'insertion
    forment une seule section critique, de même que la vérification
    d'existence et l'écriture pour update/delete.

    Le prix et la date de création sont stockés en texte : une colonne
    NUMERIC à échelle fixe arrondirait 0.001 à 0.00, et SQLite perd le
    décalage horaire d'un DATETIME.
    """

    def __init__(self, engine: Engine) -> None:
        """
        Initialise le repository avec un engine SQLAlchemy.

        Args :
            engine : Engine connecté à la base contenant la table movies
        """
        self._engine = engine
        self._lock = threading.Lock()

    @contextmanager
    def _session(self) -> Iterator[Session]:
        """Ouvre une session et convertit les erreurs du driver en StoreError."""
        try:
            with Session(self._engine) as session:
                yield session
        except (SQLAlchemyError, OverflowError) as exc:
            logger.error("Erreur du stockage SQL: {}", exc)
            raise StoreError(str(exc)) from exc

    @staticmethod
    def _check_id(movie_id: int) -> None:
        """Un id hors de la plage INTEGER 64 bits ne peut désigner aucune ligne."""
        if not 0 <= movie_id <= MAX_MOVIE_ID:
            raise MovieNotFoundError(movie_id)

    def _to_entity(self, model: MovieModel) -> Movie:
        """Convertit un modèle DB en entité domaine."""
        return Movie(
            id=model.id,
            price=_price_from_text(model.price_text),
            created_at=_created_at_from_text(model.created_at_text),
            **{name: getattr(model, name) for name in _PLAIN_FIELDS},
        )

    def _to_model(self, entity: Movie, movie_id: int) -> MovieModel:
        """Convertit une entité domaine en modèle DB avec l'id imposé."""
        return MovieModel(
            id=movie_id,
            price_text=_price_to_text(entity.price),
            created_at_text=_created_at_to_text(entity.created_at),
            **{name: getattr(entity, name) for name in _PLAIN_FIELDS},
        )

    def list_all(self) -> list[Movie]:
        """Liste tous les films, triés par id."""
        with self._session() as session:
            models = session.exec(select(MovieModel).order_by(MovieModel.id)).all()
            return [self._to_entity(model) for model in models]

    def get_by_id(self, movie_id: int) -> Movie:
        """Récupère un film par son ID."""
        self._check_id(movie_id)
        with self._session() as session:
            model = session.get(MovieModel, movie_id)
            if model is None:
                raise MovieNotFoundError(movie_id)
            return self._to_entity(model)

    def create(self, movie: Movie) -> Movie:
        """Insère le film avec l'id max + 1 (1 si la table est vide)."""
        with self._lock, self._session() as session:
            max_id = session.exec(select(func.max(MovieModel.id))).one()
            model = self._to_model(movie, (max_id or 0) + 1)
            session.add(model)
            session.commit()
            session.refresh(model)
            logger.debug("Film inséré", id=model.id)
            return self._to_entity(model)

    def update(self, movie_id: int, movie: Movie) -> Movie:
        """Remplace les champs du film existant (lecture puis écriture)."""
        self._check_id(movie_id)
        with self._lock, self._session() as session:
            existing = session.get(MovieModel, movie_id)
            if existing is None:
                raise MovieNotFoundError(movie_id)
            existing.price_text = _price_to_text(movie.price)
            existing.created_at_text = _created_at_to_text(movie.created_at)
            for name in _PLAIN_FIELDS:
                setattr(existing, name, getattr(movie, name))
            session.add(existing)
            session.commit()
            session.refresh(existing)
            return self._to_entity(existing)

    def delete(self, movie_id: int) -> None:
        """Supprime le film portant cet ID."""
        self._check_id(movie_id)
        with self._lock, self._session() as session:
            existing = session.get(MovieModel, movie_id)
            if existing is None:
                raise MovieNotFoundError(movie_id)
            session.delete(existing)
            session.commit()

    def count(self) -> int:
        """Retourne le nombre de lignes de la table movies."""
        with self._session() as session:
            return session.exec(select(func.count()).select_from(MovieModel)).one()
