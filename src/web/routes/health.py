"""
Route de santé du service.
"""

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
def health(request: Request) -> dict:
    """Indique que le service répond et quel backend est actif."""
    settings = request.app.state.container.config()
    return {"status": "ok", "backend": settings.repository_backend}
