"""
Entité Movie.

L'enregistrement exposé par la ressource /movies. Les règles de champ
sont dans src/services/validator.py ; l'entité ne porte aucun comportement.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Movie:
    """
    Un film du catalogue.

    Attributs :
        id : Identifiant attribué par le serveur (None avant stockage)
        name : Nom affiché, obligatoire
        description : Description libre
        price : Prix, obligatoire et strictement positif
        sku : Référence de stock, opaque
        link : URL du média
        length : Durée en secondes
        created_at : Date de création fournie par l'appelant
        size : Taille de stockage en octets
        path : Chemin de stockage du fichier média
    """

    id: Optional[int] = None
    name: str = ""
    description: str = ""
    price: Optional[Decimal] = None
    sku: str = ""
    link: str = ""
    length: Optional[int] = None
    created_at: Optional[datetime] = None
    size: Optional[int] = None
    path: str = ""
