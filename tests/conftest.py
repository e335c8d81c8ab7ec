"""
Fixtures pytest partagées pour les tests MovieStore.

Ce module contient les fixtures communes utilisées dans les tests:
- Repositories des deux backends (mémoire et SQLModel sur SQLite fichier)
- Settings de test avec chemins temporaires
- Client HTTP sur une application construite avec un Container de test
"""

from collections.abc import Iterator
from decimal import Decimal
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine

from src.config import Settings
from src.container import Container
from src.core.entities.movie import Movie
from src.core.ports.repositories import IMovieRepository
from src.infrastructure.persistence.database import create_db_engine, init_db
from src.infrastructure.persistence.repositories import (
    InMemoryMovieRepository,
    SQLModelMovieRepository,
)
from src.web.app import create_app


@pytest.fixture
def sql_engine(tmp_path: Path) -> Iterator[Engine]:
    """Engine SQLite sur un fichier temporaire, tables créées."""
    engine = create_db_engine(f"sqlite:///{tmp_path}/movies.db")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def memory_repository() -> InMemoryMovieRepository:
    """Repository mémoire vide."""
    return InMemoryMovieRepository()


@pytest.fixture
def sql_repository(sql_engine: Engine) -> SQLModelMovieRepository:
    """Repository SQLModel sur une table vide."""
    return SQLModelMovieRepository(sql_engine)


@pytest.fixture(params=["memory", "sql"])
def repository(request) -> IMovieRepository:
    """Repository vide, paramétré sur les deux backends."""
    if request.param == "memory":
        return request.getfixturevalue("memory_repository")
    return request.getfixturevalue("sql_repository")


@pytest.fixture
def make_movie():
    """Fabrique de films valides, surchargeable par mot-clé."""

    def _make(**overrides) -> Movie:
        values = {
            "name": "Latte",
            "description": "Frothy milky coffee",
            "price": Decimal("2.45"),
            "sku": "abc323",
            "link": "http://test.link/demo1.mp4",
        }
        values.update(overrides)
        return Movie(**values)

    return _make


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test : backend mémoire, sans amorçage.

    Utilise tmp_path de pytest pour isoler la base et les logs.
    """
    return Settings(
        repository_backend="memory",
        database_url=f"sqlite:///{tmp_path}/test.db",
        seed_demo_data=False,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def make_client():
    """Construit un TestClient (lifespan actif) pour des Settings donnés."""
    clients = []

    def _make(settings: Settings) -> TestClient:
        container = Container()
        container.config.override(settings)
        client = TestClient(create_app(container))
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, test_settings: Settings) -> TestClient:
    """Client HTTP sur une application mémoire vide."""
    return make_client(test_settings)
