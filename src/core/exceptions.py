"""
Exceptions du domaine MovieStore.

Hiérarchie :
- MovieStoreError : racine de toutes les erreurs applicatives
  - DecodeError : corps de requête illisible
  - MovieValidationError : une ou plusieurs règles de champ violées
  - MovieNotFoundError : aucun film pour l'identifiant demandé
  - StoreError : échec inattendu du stockage
"""

from typing import Optional


class MovieStoreError(Exception):
    """Erreur de base de l'application."""


class DecodeError(MovieStoreError):
    """Levée quand le corps de la requête ne peut pas être décodé en Movie."""


class MovieValidationError(MovieStoreError):
    """
    Levée quand un Movie décodé viole une ou plusieurs règles.

    Attributes:
        messages: Liste complète des violations, dans l'ordre des règles
    """

    def __init__(self, messages: list[str]) -> None:
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class MovieNotFoundError(MovieStoreError):
    """
    Levée quand aucun film ne correspond à l'identifiant.

    Attributes:
        movie_id: L'identifiant recherché (None si la requête n'en portait pas)
    """

    def __init__(self, movie_id: Optional[int]) -> None:
        self.movie_id = movie_id
        super().__init__("Movie not found")


class StoreError(MovieStoreError):
    """Échec inattendu du backend de stockage."""
