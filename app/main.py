from fastapi import FastAPI, Depends
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
import logging
import uvicorn

from .core.config import Settings, settings as default_settings
from .core.container import AppContainer, build_container
from .core.dependencies import get_app_container
from .core.logging_config import setup_logging
from .core.middleware import RequestContextMiddleware
from .domains.products.router import router as products_router
from .shared.exceptions.handlers import register_exception_handlers

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[Settings] = None, container: Optional[AppContainer] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        app_settings: Settings to use; the module settings by default
        container: Pre-built container; otherwise one is built at startup
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings.log_level, json_output=app_settings.log_json)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifecycle: build the container once, drop it on shutdown"""
        logger.info("Application starting...")

        # DuplicateRegistrationError aborts startup
        app.state.container = container or build_container(app_settings)

        logger.info("Application started")

        yield

        logger.info("Application shutting down...")
        app.state.container = None
        logger.info("Application stopped")

    app = FastAPI(
        title=app_settings.app_name,
        description="Products catalogue served through an in-process CQRS mediator.",
        version=app_settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan
    )

    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)
    app.include_router(products_router, prefix=app_settings.api_prefix)

    @app.get("/health", tags=["Health"], summary="Service health")
    async def health_check(app_container: AppContainer = Depends(get_app_container)):
        """Liveness probe reporting the number of stored products"""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            "products": len(app_container.store),
            "registered_requests": [t.__name__ for t in app_container.mediator.registered_requests()],
            "version": app_settings.api_version
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=default_settings.app_host,
        port=default_settings.app_port,
        reload=default_settings.debug,
        log_level=default_settings.log_level.lower()
    )
