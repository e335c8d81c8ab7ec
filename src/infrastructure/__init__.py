"""
Couche infrastructure de MovieStore.

Ce module contient les implémentations concrètes des interfaces définies
dans la couche domaine (ports). Il gère les préoccupations techniques :

- persistence/ : Stockage des films (mémoire ou SQL via SQLModel)

Architecture hexagonale : les adapters ici implémentent les ports du domaine,
permettant de changer l'implémentation (ex: PostgreSQL au lieu de SQLite)
sans modifier la logique métier.
"""
