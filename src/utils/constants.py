"""
Constantes globales pour MovieStore.

Ce module contient :
- La borne supérieure des identifiants (INTEGER signé 64 bits des bases SQL)
- Les films de démonstration chargés au démarrage sur un catalogue vide
"""

from decimal import Decimal

from src.core.entities.movie import Movie

# Plus grand id représentable par une colonne INTEGER SQL
MAX_MOVIE_ID = 2**63 - 1

# Films de démonstration (l'id est attribué à l'insertion)
DEMO_MOVIES = (
    Movie(
        name="Latte",
        description="Frothy milky coffee",
        price=Decimal("2.45"),
        sku="abc323",
        link="http://test.link/demo1.mp4",
    ),
    Movie(
        name="Esspresso",
        description="Short and strong coffee without milk",
        price=Decimal("1.99"),
        sku="fjd34",
        link="http://test.link/demo2.mp4",
    ),
)
