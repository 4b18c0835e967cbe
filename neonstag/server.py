"""Standalone FastAPI entry point for NeonStag.

Run:
    poetry run neonstag-server

Environment variables:
    NEONSTAG_HOST: Interface to bind (default: 0.0.0.0)
    NEONSTAG_PORT: Port to run on (default: 8080)
"""
import logging

from fastapi import FastAPI

from .api import create_api
from .config import settings


def create_app() -> FastAPI:
    """Create the server application with the API mounted at /api."""
    app = FastAPI(title="NeonStag")
    app.mount("/api", create_api())
    return app


# Create the app instance for uvicorn
app = create_app()


def main():
    """Run the server."""
    import uvicorn

    logging.basicConfig(level=settings.LOG_LEVEL.upper())
    uvicorn.run(
        "neonstag.server:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
