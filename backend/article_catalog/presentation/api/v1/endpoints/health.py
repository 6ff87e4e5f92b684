"""Health check endpoint — no service dependencies, always available."""

from fastapi import APIRouter, Request

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(request: Request) -> dict:
    """Returns the current application health status and catalog size."""
    settings = request.app.state.settings
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "articles": len(request.app.state.article_repository),
    }
