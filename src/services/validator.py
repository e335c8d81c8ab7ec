"""
Validation déclarative des films.

Chaque règle porte sur un champ et produit au plus un message. Le
MovieValidator évalue toutes les règles sans s'arrêter à la première
violation, afin que la réponse HTTP liste tous les problèmes d'un coup.

Règles par défaut :
- name : obligatoire, 255 caractères maximum
- description : 10000 caractères maximum
- price : obligatoire, strictement positif
- link : doit ressembler à une URL quand il est renseigné
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, Optional

from src.core.entities.movie import Movie

NAME_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 10000

LINK_PATTERN = re.compile(
    r"(https?://)?(www\.)?"
    r"[-a-zA-Z0-9@:%._\+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b"
    r"([-a-zA-Z0-9()@:%_\+.~#?&//=]*)"
)


def _is_missing(value: Any) -> bool:
    """Une valeur absente : None ou chaîne vide (espaces compris)."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


@dataclass(frozen=True)
class Rule(ABC):
    """
    Règle portant sur un champ de Movie.

    Les sous-classes fournissent le message et le prédicat _violated().
    Une valeur absente n'est soumise qu'aux règles dont applies_to_missing
    est vrai : seul Required s'y intéresse.
    """

    applies_to_missing: ClassVar[bool] = False

    field: str

    def check(self, movie: Movie) -> Optional[str]:
        """Retourne le message de violation, ou None si la règle est respectée."""
        value = getattr(movie, self.field)
        if _is_missing(value) and not self.applies_to_missing:
            return None
        if self._violated(value):
            return f"{self.field}: {self.message}"
        return None

    @property
    @abstractmethod
    def message(self) -> str:
        """Texte de la violation, sans le nom du champ."""
        ...

    @abstractmethod
    def _violated(self, value: Any) -> bool:
        ...


@dataclass(frozen=True)
class Required(Rule):
    """Le champ doit être renseigné."""

    applies_to_missing: ClassVar[bool] = True

    @property
    def message(self) -> str:
        return "field is required"

    def _violated(self, value: Any) -> bool:
        return _is_missing(value)


@dataclass(frozen=True)
class MaxLength(Rule):
    """La chaîne ne dépasse pas `limit` caractères."""

    limit: int = 0

    @property
    def message(self) -> str:
        return f"must be at most {self.limit} characters"

    def _violated(self, value: Any) -> bool:
        return len(value) > self.limit


@dataclass(frozen=True)
class Positive(Rule):
    """Le nombre est strictement supérieur à zéro."""

    @property
    def message(self) -> str:
        return "must be greater than 0"

    def _violated(self, value: Any) -> bool:
        return Decimal(value) <= 0


@dataclass(frozen=True)
class Pattern(Rule):
    """La chaîne entière correspond à l'expression régulière."""

    pattern: re.Pattern = LINK_PATTERN
    description: str = "must match the expected pattern"

    @property
    def message(self) -> str:
        return self.description

    def _violated(self, value: Any) -> bool:
        return self.pattern.fullmatch(value) is None


DEFAULT_RULES: tuple[Rule, ...] = (
    Required("name"),
    MaxLength("name", limit=NAME_MAX_LENGTH),
    MaxLength("description", limit=DESCRIPTION_MAX_LENGTH),
    Required("price"),
    Positive("price"),
    Pattern("link", pattern=LINK_PATTERN, description="must be a valid URL"),
)


class MovieValidator:
    """
    Applique un ensemble de règles à un Movie.

    Sans effet de bord. L'ordre des messages suit l'ordre des règles,
    indépendamment de l'ordre des champs dans le corps de la requête.

    Example:
        validator = MovieValidator()
        errors = validator.validate(Movie(name="", price=Decimal("0")))
        # ["name: field is required", "price: must be greater than 0"]
    """

    def __init__(self, rules: tuple[Rule, ...] = DEFAULT_RULES) -> None:
        self._rules = rules

    def validate(self, movie: Movie) -> list[str]:
        """Retourne toutes les violations (liste vide si le film est valide)."""
        messages = []
        for rule in self._rules:
            message = rule.check(movie)
            if message is not None:
                messages.append(message)
        return messages
