"""FastAPI application exposing the SCIM identity management plugin"""

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse
from pathlib import Path
from typing import Optional
import logging
import sys
import time
from contextlib import asynccontextmanager

from .config import settings
from .routers import config_router, groups_router, users_router, health_router
from .services.plugin import IdentityManagementPlugin
from .utils.exceptions import SCIMPluginError
from .models.scim import SCIMError


# Logging setup
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format=settings.log_format,
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)


def create_app(plugin: Optional[IdentityManagementPlugin] = None) -> FastAPI:
    """Creates the application around a plugin instance"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifecycle"""
        # Startup
        logger.info("Starting SCIM identity management plugin...")
        if settings.plugin_config_path and not app.state.plugin.configured:
            logger.info(f"Loading plugin configuration from {settings.plugin_config_path}")
            await app.state.plugin.configure(Path(settings.plugin_config_path).read_text(encoding="utf-8"))

        yield

        # Shutdown
        logger.info("Shutting down SCIM identity management plugin...")
        await app.state.plugin.close()

    app = FastAPI(
        title="SCIM Identity Management Plugin",
        description="Resolves group members and user groups from a SCIM v2 directory",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan
    )
    app.state.plugin = plugin or IdentityManagementPlugin()

    @app.exception_handler(SCIMPluginError)
    async def scim_plugin_exception_handler(request: Request, exc: SCIMPluginError):
        """Renders plugin errors as SCIM error bodies"""
        logger.error(f"SCIM Plugin Error: {exc.message}")

        error_response = SCIMError(
            status=exc.status_code,
            scimType=exc.scim_type,
            detail=exc.message
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=error_response.model_dump(exclude_none=True)
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Renders HTTP errors as SCIM error bodies"""
        logger.error(f"HTTP Error: {exc.detail}")

        error_response = SCIMError(
            status=exc.status_code,
            detail=str(exc.detail)
        )

        return JSONResponse(
            status_code=exc.status_code,
            content=error_response.model_dump(exclude_none=True)
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Renders unexpected errors as a generic SCIM error body"""
        logger.error(f"Unexpected error: {str(exc)}", exc_info=True)

        error_response = SCIMError(
            status=500,
            detail="Internal server error"
        )

        return JSONResponse(
            status_code=500,
            content=error_response.model_dump(exclude_none=True)
        )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Logs incoming requests and their duration"""
        start_time = time.time()

        logger.info(f"Request: {request.method} {request.url}")

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(f"Response: {response.status_code} - {process_time:.3f}s")

        return response

    app.include_router(health_router)
    app.include_router(config_router, prefix="/v1")
    app.include_router(groups_router, prefix="/v1")
    app.include_router(users_router, prefix="/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "scim_plugin.main:app",
        host=settings.service_host,
        port=settings.service_port,
        workers=settings.service_workers,
        log_level=settings.log_level.lower()
    )
