from fastapi import Request, status
from fastapi.responses import PlainTextResponse

from facts_service.core.exceptions import FactServiceException
from facts_service.core.logging import get_logger

# Initialize logger
logger = get_logger(__name__)


async def handle_fact_service_exception(
    request: Request, exc: FactServiceException
) -> PlainTextResponse:
    """
    Handle FactServiceException instances.

    Args:
        request: FastAPI request object
        exc: FactServiceException instance

    Returns:
        PlainTextResponse: Error description with the exception's status code
    """
    logger.error(
        f"Fact request failed: {exc.detail}",
        extra={"data": {"error": exc.to_dict(), "request_path": request.url.path}}
    )

    return PlainTextResponse(exc.detail, status_code=exc.status_code)


async def handle_unexpected_exception(request: Request, exc: Exception) -> PlainTextResponse:
    """Handle exceptions that escaped every other handler."""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)

    return PlainTextResponse(
        "An unexpected error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
