"""
Animal facts API server.

Run ``facts-service`` and request ``http://127.0.0.1:8888/fact``.
"""
import sys
import time
from typing import Callable, Optional

import httpx
import uvicorn
from fastapi import FastAPI, Request

from facts_service.api.error_handlers import (
    handle_fact_service_exception,
    handle_unexpected_exception,
)
from facts_service.core.config import (
    ConfigData,
    get_settings,
    load_config,
    load_env_file,
    parse_bind_address,
)
from facts_service.core.exceptions import ConfigLoadError, FactServiceException
from facts_service.core.logging import configure_logging, get_logger, set_correlation_id
from facts_service.services.fact_resolver import FactResolver

logger = get_logger(__name__)


def create_application(
    config: ConfigData,
    http_client: Optional[httpx.AsyncClient] = None
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Loaded service configuration
        http_client: Optional client the resolver uses for endpoint requests

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(title=settings.PROJECT_NAME, debug=settings.DEBUG)

    logger.debug("Constructing fact resolver")
    app.state.fact_resolver = FactResolver(
        config.animals,
        http_client=http_client,
        timeout=settings.HTTP_TIMEOUT
    )

    configure_middleware(app)
    handle_exceptions(app)
    register_routers(app)

    @app.on_event("startup")
    async def startup_event():
        logger.info("Starting up Animal Facts Service")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Shutting down Animal Facts Service")

    return app


def configure_middleware(app: FastAPI) -> None:
    """
    Configure middleware components for the FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.middleware("http")
    async def add_correlation_id(request: Request, call_next: Callable):
        correlation_id = set_correlation_id(request.headers.get("X-Correlation-ID"))

        start_time = time.time()

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                f"Request failed: {str(e)}",
                extra={
                    "data": {
                        "request_path": request.url.path,
                        "method": request.method,
                        "process_time_ms": round(process_time * 1000, 2),
                    }
                }
            )
            raise

        response.headers["X-Correlation-ID"] = correlation_id

        process_time = time.time() - start_time
        logger.info(
            "Request completed",
            extra={
                "data": {
                    "request_path": request.url.path,
                    "method": request.method,
                    "status_code": response.status_code,
                    "process_time_ms": round(process_time * 1000, 2),
                }
            }
        )

        return response


def handle_exceptions(app: FastAPI) -> None:
    """
    Configure global exception handlers for the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(FactServiceException, handle_fact_service_exception)
    app.add_exception_handler(Exception, handle_unexpected_exception)


def register_routers(app: FastAPI) -> None:
    """
    Register API routers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    # Import routers here to avoid circular imports
    from facts_service.api.routes.facts import facts_router

    app.include_router(facts_router, tags=["Facts"])


def main() -> None:
    """Load the configuration and serve the application until interrupted."""
    load_env_file()
    configure_logging()
    settings = get_settings()

    logger.debug(f"Loading json config file {settings.FACTS_CONFIG_FILE}")
    try:
        config = load_config(settings.FACTS_CONFIG_FILE)
        host, port = parse_bind_address(config.server.address)
    except ConfigLoadError as e:
        logger.critical(
            f"Configuration file loading error: {e.detail}",
            extra={"data": {"error": e.to_dict()}}
        )
        sys.exit(1)

    app = create_application(config)

    logger.info(f"Server is starting to listen on {config.server.address}")
    uvicorn.run(app, host=host, port=port, log_config=None)


if __name__ == "__main__":
    main()
