"""
Adapter for the dog facts endpoint.

API documentation: https://kinduff.github.io/dog-api/
"""
from typing import List

from pydantic import BaseModel, ConfigDict, ValidationError

from facts_service.adapters.base import Animal, FactAdapter
from facts_service.core.exceptions import InvalidResponseError, MalformedPayloadError
from facts_service.core.logging import get_logger

logger = get_logger(__name__)


class DogFactEndpointResponse(BaseModel):
    """Dog endpoint JSON response structure."""
    model_config = ConfigDict(strict=True)

    facts: List[str]
    success: bool


class DogFactAdapter(FactAdapter):
    """Extracts the single fact from a dog endpoint response."""

    animal = Animal.DOG

    def transform(self, response_content: str) -> str:
        logger.debug("Transforming fact content from the dog response")

        try:
            data = DogFactEndpointResponse.model_validate_json(response_content)
        except ValidationError as e:
            raise MalformedPayloadError(self.animal.value, str(e))

        if not data.success:
            raise InvalidResponseError(self.animal.value, "`success`=false on the fact")
        if len(data.facts) > 1:
            raise InvalidResponseError(
                self.animal.value,
                f"more than one fact result: {len(data.facts)}"
            )
        if not data.facts:
            raise MalformedPayloadError(self.animal.value, "no fact in the `facts` list")

        return data.facts[0]
