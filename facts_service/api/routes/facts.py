from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from facts_service.api.dependencies import get_fact_resolver
from facts_service.core.logging import get_logger
from facts_service.services.fact_resolver import FactResolver

# Initialize router and logger
facts_router = APIRouter()
logger = get_logger(__name__)


class FactResponse(BaseModel):
    """Fact route JSON response format."""
    fact: str
    animal: str


@facts_router.get(
    "/fact",
    response_model=FactResponse,
    status_code=status.HTTP_200_OK,
    summary="Random animal fact",
    description="Returns a fact about the configured animal."
)
async def get_fact(
    fact_resolver: FactResolver = Depends(get_fact_resolver),
) -> FactResponse:
    """
    Resolve a fact through the fact resolver.

    Resolver failures propagate to the registered exception handlers,
    which answer with a plain-text 500.
    """
    logger.debug("Handling the fact request through facts resolver")
    animal, fact = await fact_resolver.get_fact()
    return FactResponse(fact=fact, animal=animal)
