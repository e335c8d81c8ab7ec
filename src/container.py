"""
Container d'injection de dépendances via dependency-injector.

Fournit une gestion centralisée des dépendances pour les interfaces CLI et Web.
Le repository est un singleton : tous les handlers partagent la même
collection et le même verrou.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import (
    InMemoryMovieRepository,
    SQLModelMovieRepository,
)
from .services.movie_pipeline import MoviePipeline
from .services.validator import MovieValidator


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # backend "sql" uniquement
        repository = container.movie_repository()
        pipeline = container.movie_pipeline()
    """

    # Configuration - singleton chargé une seule fois
    config = providers.Singleton(Settings)

    # Engine SQL - créé à la première demande
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
    )

    # Database - Resource pour initialisation unique des tables
    database = providers.Resource(init_db, engine=engine)

    # Repository - choisi selon MOVIESTORE_REPOSITORY_BACKEND
    movie_repository = providers.Selector(
        config.provided.repository_backend,
        memory=providers.Singleton(InMemoryMovieRepository),
        sql=providers.Singleton(SQLModelMovieRepository, engine=engine),
    )

    # Validation (stateless - Singletons)
    movie_validator = providers.Singleton(MovieValidator)
    movie_pipeline = providers.Singleton(MoviePipeline, validator=movie_validator)
