"""NeonStag API - mountable FastAPI application."""
from fastapi import FastAPI

from neonstag import __version__
from .neon import router as neon_router
from .samples import router as samples_router


def create_api() -> FastAPI:
    """Create the NeonStag API application.

    Mount at /neon/ in your app:
        from neonstag.api import create_api
        app.mount("/neon", create_api())
    """
    api = FastAPI(title="NeonStag API", version=__version__, docs_url="/docs")

    @api.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok", "version": __version__}

    api.include_router(neon_router)
    api.include_router(samples_router)
    return api


__all__ = ['create_api']
