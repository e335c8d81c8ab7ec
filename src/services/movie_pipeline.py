"""
Pipeline des requêtes de mutation : décodage -> validation -> attachement.

États :
- Décodage : le corps JSON est lu dans un MoviePayload (types uniquement).
  Échec -> DecodeError (HTTP 400).
- Validation : le MovieValidator est appliqué au Movie décodé.
  Violations -> MovieValidationError (HTTP 422) avec la liste complète.
- Attaché : le Movie validé est retourné au handler suivant, qui le reçoit
  comme paramètre explicite, limité à la requête courante.

Seules les routes de création et de mise à jour passent par ce pipeline.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.core.entities.movie import Movie
from src.core.exceptions import DecodeError, MovieValidationError
from src.services.validator import MovieValidator
from src.utils.constants import MAX_MOVIE_ID

# Entier stockable dans une colonne INTEGER SQL (signé 64 bits)
SqlInteger = Annotated[int, Field(ge=-MAX_MOVIE_ID - 1, le=MAX_MOVIE_ID)]


class MoviePayload(BaseModel):
    """
    Corps JSON d'une requête POST/PUT /movies.

    Ne contrôle que les types : les règles métier (obligatoire, positif,
    longueurs) sont du ressort du MovieValidator, afin de produire des 422
    et non des 400 pour un corps bien formé. Les entiers hors de la plage
    64 bits sont un problème de type et donnent donc un 400.
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[SqlInteger] = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Decimal] = None
    sku: Optional[str] = None
    link: Optional[str] = None
    length: Optional[SqlInteger] = None
    created_at: Optional[datetime] = None
    size: Optional[SqlInteger] = None
    path: Optional[str] = None

    def to_entity(self) -> Movie:
        """Construit le Movie transitoire correspondant."""
        return Movie(
            id=self.id,
            name=self.name or "",
            description=self.description or "",
            price=self.price,
            sku=self.sku or "",
            link=self.link or "",
            length=self.length,
            created_at=self.created_at,
            size=self.size,
            path=self.path or "",
        )


def _describe(exc: ValidationError) -> str:
    """Résumé lisible de la première erreur de décodage."""
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error.get("loc", ()))
    if location:
        return f"Unable to decode movie: {location}: {error['msg']}"
    return f"Unable to decode movie: {error['msg']}"


class MoviePipeline:
    """
    Enchaîne décodage et validation d'un corps de requête.

    Example:
        pipeline = MoviePipeline(MovieValidator())
        movie = pipeline.run(b'{"name": "Latte", "price": 2.45}')
    """

    def __init__(self, validator: MovieValidator) -> None:
        self._validator = validator

    def decode(self, body: bytes) -> Movie:
        """Décode le corps JSON en Movie. Lève DecodeError si illisible."""
        try:
            payload = MoviePayload.model_validate_json(body)
        except ValidationError as exc:
            logger.warning("Erreur de désérialisation du film: {}", exc.errors()[0]["msg"])
            raise DecodeError(_describe(exc)) from exc
        return payload.to_entity()

    def validate(self, movie: Movie) -> Movie:
        """Applique le validateur. Lève MovieValidationError avec toutes les violations."""
        messages = self._validator.validate(movie)
        if messages:
            logger.warning("Erreur de validation du film: {}", messages)
            raise MovieValidationError(messages)
        return movie

    def run(self, body: bytes) -> Movie:
        """Décode puis valide ; retourne le Movie prêt pour le handler."""
        movie = self.validate(self.decode(body))
        logger.debug("Film validé", name=movie.name)
        return movie
