"""
Event Hub API - Main Application Entry Point

An event discovery and booking service demonstrating:
- Capacity-checked ticket booking with per-event serialisation
- A swappable directory store behind a repository interface
- Structured logging with request correlation
- Prometheus metrics for booking outcomes
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventhub.api.errors import register_exception_handlers
from eventhub.api.middleware import RequestLoggingMiddleware
from eventhub.api.router import api_router
from eventhub.core.config import Settings, get_settings
from eventhub.core.logging import get_logger, setup_logging
from eventhub.core.metrics import metrics_endpoint
from eventhub.services import Services
from eventhub.stores import Collection, DirectoryStore, InMemoryDirectoryStore
from eventhub.stores.seed import seed_demo_data


def create_app(settings: Optional[Settings] = None, store: Optional[DirectoryStore] = None) -> FastAPI:
    """
    Build the application around `store`.

    When no store is given, a fresh in-memory store is created and, if
    SEED_DEMO_DATA is set, filled with the demo users, categories and events.
    """
    settings = settings or get_settings()
    setup_logging(settings)
    logger = get_logger(__name__)

    if store is None:
        store = InMemoryDirectoryStore()
        if settings.SEED_DEMO_DATA:
            seed_demo_data(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "application_starting",
            app=settings.APP_NAME,
            version=settings.APP_VERSION,
            environment=settings.ENVIRONMENT,
        )
        yield
        logger.info("application_shutdown")

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Event discovery and booking API with capacity-checked reservations",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.settings = settings
    app.state.services = Services.build(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    register_exception_handlers(app)
    app.include_router(api_router)

    @app.get("/health", tags=["Health"])
    def health_check():
        """Health check endpoint for Docker and load balancers."""
        services: Services = app.state.services
        return {
            "status": "healthy",
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
            "store": {c.value: len(services.store.find_all(c)) for c in Collection},
        }

    @app.get("/metrics", tags=["Health"], include_in_schema=False)
    def metrics():
        return metrics_endpoint()

    @app.get("/", tags=["Root"])
    def root():
        return {
            "message": f"Welcome to {settings.APP_NAME}",
            "version": settings.APP_VERSION,
            "docs": "/docs",
        }

    return app


app = create_app()
