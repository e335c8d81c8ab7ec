"""
MovieStore - Service HTTP de gestion d'un catalogue de films.

Ce package expose une ressource "movie" (CRUD) au-dessus d'un stockage
interchangeable (liste en mémoire ou table SQL).

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, exceptions)
- services/ : Couche application (validation, pipeline, amorçage)
- infrastructure/ : Persistance (mémoire, SQLModel)
- web/ : Adaptateur HTTP (FastAPI)
"""
