"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(liste en mémoire, table SQL via SQLModel).
"""

from abc import ABC, abstractmethod

from src.core.entities.movie import Movie


class IMovieRepository(ABC):
    """
    Interface de stockage des films.

    Le repository est l'unique propriétaire de la collection durable.
    Il ne revalide pas les films : les candidats reçus ont déjà passé
    le pipeline de validation.

    Politique d'identifiant : un film créé reçoit l'identifiant maximal
    présent dans la collection plus un, ou 1 si la collection est vide.
    Les identifiants fournis par l'appelant sont ignorés.

    Concurrence : les mutations (create, update, delete) sont sérialisées
    entre elles ; les lectures n'observent jamais une mutation partielle.
    """

    @abstractmethod
    def list_all(self) -> list[Movie]:
        """Liste tous les films (ordre stable pour un backend donné)."""
        ...

    @abstractmethod
    def get_by_id(self, movie_id: int) -> Movie:
        """Récupère un film par son ID. Lève MovieNotFoundError si absent."""
        ...

    @abstractmethod
    def create(self, movie: Movie) -> Movie:
        """Attribue un nouvel ID au film, le stocke et retourne l'enregistrement stocké."""
        ...

    @abstractmethod
    def update(self, movie_id: int, movie: Movie) -> Movie:
        """
        Remplace les champs d'un film existant en conservant son ID.

        Args :
            movie_id : L'ID du film à remplacer
            movie : Les nouvelles valeurs (son champ id est ignoré)

        Retourne :
            Le film stocké après mise à jour

        Lève :
            MovieNotFoundError : si aucun film ne porte cet ID
        """
        ...

    @abstractmethod
    def delete(self, movie_id: int) -> None:
        """Supprime le film portant cet ID. Lève MovieNotFoundError si absent."""
        ...

    @abstractmethod
    def count(self) -> int:
        """Retourne le nombre de films stockés."""
        ...
