"""
Modèles SQLModel pour la base de données MovieStore.

Ces modèles représentent les tables de la base de données.
Ils sont distincts des entités de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Les champs *_text stockent sous forme textuelle les valeurs que la base
ne restitue pas à l'identique (décimal sans échelle fixe, date avec fuseau).

Tables:
- movies: Films du catalogue
"""

from __future__ import annotations

from sqlmodel import Field, SQLModel


class MovieModel(SQLModel, table=True):
    """
    Modèle représentant un film dans la base de données.

    L'id est attribué explicitement par le repository (max + 1),
    jamais par l'auto-incrément de la base.
    """

    __tablename__ = "movies"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, index=True)
    description: str = Field(default="", max_length=10000)
    price_text: str  # Decimal exact, ex: "2.45" ou "0.001"
    sku: str = ""
    link: str = ""
    length: int | None = None  # secondes
    created_at_text: str | None = None  # ISO 8601 avec décalage horaire
    size: int | None = None  # octets
    path: str = ""
