"""
Application FastAPI de MovieStore.

Initialise l'application web avec le Container DI, configure CORS,
la journalisation des requêtes et les gestionnaires d'exceptions,
puis monte les routes.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from ..container import Container
from ..services.seeding import seed_demo_movies
from .errors import register_exception_handlers
from .routes.health import router as health_router
from .routes.movies import router as movies_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise la base (backend SQL) et amorce le catalogue au démarrage."""
    container: Container = app.state.container
    settings = container.config()
    if settings.uses_database:
        container.database.init()
    if settings.seed_demo_data:
        seed_demo_movies(container.movie_repository())
    logger.info("MovieStore prêt", backend=settings.repository_backend)
    yield
    if settings.uses_database:
        container.database.shutdown()
        container.engine().dispose()


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args :
        container : Container DI à utiliser (un nouveau par défaut),
                    permet aux tests d'injecter leur configuration
    """
    container = container or Container()
    settings = container.config()

    app = FastAPI(title="MovieStore", version="0.1.0", lifespan=lifespan)
    app.state.container = container

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["GET", "POST", "PUT", "DELETE"],
            allow_headers=["Content-Type"],
        )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(
            "{} {} -> {} ({:.1f} ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    register_exception_handlers(app)

    # Routes
    app.include_router(health_router)
    app.include_router(movies_router)
    return app


app = create_app()
