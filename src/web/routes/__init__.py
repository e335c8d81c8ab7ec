"""
Routes HTTP de MovieStore.

- movies : ressource CRUD /movies
- health : sonde de disponibilité
"""
