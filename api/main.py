"""
Vehicle Sales API - Main Application.

FastAPI application with CORS enabled for frontend communication.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__
from api.dependencies import ServiceContainer, build_services
from api.errors import register_exception_handlers
from api.routers import sales, vehicles
from config.logging_setup import configure_logging
from config.settings import Settings


def create_app(services: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Build the application.

    When `services` is given (tests) it is used as-is; otherwise services are
    built from environment settings at startup and closed at shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned: Optional[ServiceContainer] = None
        if getattr(app.state, "services", None) is None:
            settings = Settings.from_env()
            configure_logging(settings.log_level)
            owned = build_services(settings)
            app.state.services = owned
        try:
            yield
        finally:
            if owned is not None:
                owned.close()

    app = FastAPI(
        title="Vehicle Sales API",
        description="REST API for selling dealership vehicles and confirming payments",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.services = services

    # TODO: Restrict origins once the frontend domain is fixed
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.get("/health", tags=["Health"])
    def health_check():
        """
        Health check endpoint.

        Returns the API status and version.
        """
        return {
            "status": "healthy",
            "version": __version__,
            "service": "vehicle-sales-api"
        }

    @app.get("/", tags=["Root"])
    def root():
        """
        Root endpoint with API information.
        """
        return {
            "message": "Vehicle Sales API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health"
        }

    app.include_router(vehicles.router, prefix="/api/v1", tags=["Vehicles"])
    app.include_router(sales.router, prefix="/api/v1", tags=["Sales"])

    return app


app = create_app()
