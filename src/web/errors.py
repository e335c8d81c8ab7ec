"""
Traduction des exceptions du domaine en réponses HTTP JSON.

- DecodeError -> 400 {"message": ...}
- MovieValidationError -> 422 {"messages": [...]}
- StoreError -> 500 {"message": ...}
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from ..core.exceptions import DecodeError, MovieValidationError, StoreError


async def _decode_error_handler(request: Request, exc: DecodeError) -> JSONResponse:
    logger.warning("Corps illisible sur {} {}: {}", request.method, request.url.path, exc)
    return JSONResponse(status_code=400, content={"message": str(exc)})


async def _validation_error_handler(request: Request, exc: MovieValidationError) -> JSONResponse:
    logger.warning("Film invalide sur {} {}: {}", request.method, request.url.path, exc.messages)
    return JSONResponse(status_code=422, content={"messages": exc.messages})


async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Erreur de stockage sur {} {}: {}", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"message": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """Enregistre les gestionnaires d'exceptions du domaine sur l'application."""
    app.add_exception_handler(DecodeError, _decode_error_handler)
    app.add_exception_handler(MovieValidationError, _validation_error_handler)
    app.add_exception_handler(StoreError, _store_error_handler)
