"""
Adapter for the cat facts endpoint.

API documentation: https://alexwohlbruck.github.io/cat-facts/docs/endpoints/facts.html
"""
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from facts_service.adapters.base import Animal, FactAdapter
from facts_service.core.exceptions import InvalidResponseError, MalformedPayloadError
from facts_service.core.logging import get_logger

logger = get_logger(__name__)


class CatFactEndpointResponse(BaseModel):
    """Cat endpoint JSON response structure."""
    model_config = ConfigDict(strict=True)

    text: str
    animal_type: str = Field(alias="type")
    deleted: bool


class CatFactAdapter(FactAdapter):
    """Extracts the fact text from a cat endpoint response."""

    animal = Animal.CAT

    def transform(self, response_content: str) -> str:
        logger.debug("Transforming fact content from the cat response")

        try:
            data = CatFactEndpointResponse.model_validate_json(response_content)
        except ValidationError as e:
            raise MalformedPayloadError(self.animal.value, str(e))

        if data.deleted:
            raise InvalidResponseError(self.animal.value, "`deleted`=true on the fact")
        if data.animal_type != Animal.CAT.value:
            raise InvalidResponseError(
                self.animal.value,
                f"fact not for a cat: {data.animal_type}"
            )

        return data.text
