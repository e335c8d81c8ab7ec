"""
Schémas JSON des réponses de l'API /movies.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ..core.entities.movie import Movie


class MovieResponse(BaseModel):
    """Représentation JSON d'un film (price émis comme nombre)."""

    id: int
    name: str
    description: str
    price: float
    sku: str
    link: str
    length: Optional[int] = None
    created_at: Optional[datetime] = None
    size: Optional[int] = None
    path: str

    @classmethod
    def from_entity(cls, movie: Movie) -> "MovieResponse":
        return cls(
            id=movie.id,
            name=movie.name,
            description=movie.description,
            price=float(movie.price),
            sku=movie.sku,
            link=movie.link,
            length=movie.length,
            created_at=movie.created_at,
            size=movie.size,
            path=movie.path,
        )


class GenericError(BaseModel):
    """Message d'erreur générique."""

    message: str


class ValidationErrorResponse(BaseModel):
    """Liste complète des violations de validation."""

    messages: list[str]
