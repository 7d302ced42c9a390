from fastapi import Request

from facts_service.services.fact_resolver import FactResolver


async def get_fact_resolver(request: Request) -> FactResolver:
    """
    Dependency for providing the fact resolver.

    The resolver is built once by the application factory and shared
    read-only by every request.

    Args:
        request: FastAPI request object

    Returns:
        FactResolver: The application's fact resolver
    """
    return request.app.state.fact_resolver
