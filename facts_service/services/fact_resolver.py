"""
Facts resolver.

Selects the animal from the configuration, requests the configured fact
endpoint and transforms the response through the animal's adapter into the
service's ``(animal, fact)`` result.
"""
import random
from typing import Optional, Tuple

import httpx

from facts_service.adapters import ANY_ANIMAL, Animal, get_adapter
from facts_service.core.config import FactsConfig
from facts_service.core.exceptions import (
    UnknownAnimalError,
    UpstreamError,
    UpstreamUnreachableError,
)
from facts_service.core.logging import get_logger

logger = get_logger(__name__)

# Animals picked from when the default is "any", regardless of the mapping
RANDOM_ANIMALS = (Animal.DOG.value, Animal.CAT.value)


class FactResolver:
    """Resolves animal facts from the configured endpoints."""

    def __init__(
        self,
        config: FactsConfig,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the resolver with a private copy of the facts configuration.

        Args:
            config: Facts configuration
            http_client: Optional client used for endpoint requests. When omitted
                a client is opened for each request.
            timeout: Request timeout in seconds for clients opened per request
            rng: Optional random source for the "any" selection
        """
        logger.debug("Constructing new facts resolver")
        self.config = config.model_copy(deep=True)
        self.http_client = http_client
        self.timeout = timeout
        self.rng = rng or random

    def choose_animal(self) -> str:
        """Return the configured animal, or a random one for "any"."""
        if self.config.default == ANY_ANIMAL:
            return self.rng.choice(RANDOM_ANIMALS)
        return self.config.default

    async def request_api(self, endpoint: str) -> str:
        """
        Send a GET request to a fact endpoint and return the response body.

        Args:
            endpoint: Endpoint URL

        Returns:
            str: Response body

        Raises:
            UpstreamUnreachableError: If the endpoint cannot be reached
            UpstreamError: If the endpoint responds with a non-2xx status
        """
        logger.debug(f"Requesting fact endpoint: {endpoint}")

        try:
            if self.http_client is not None:
                response = await self.http_client.get(endpoint, follow_redirects=True)
            else:
                async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
                    response = await client.get(endpoint)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(endpoint, e.response.status_code, original_exception=e)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise UpstreamUnreachableError(endpoint, original_exception=e)

        return response.text

    async def get_fact(self) -> Tuple[str, str]:
        """
        Get a fact from the endpoint of the configured animal.

        Returns:
            Tuple[str, str]: The animal name and the fact text

        Raises:
            FactServiceException: If the animal cannot be resolved, the endpoint
                fails, or its response is rejected by the adapter
        """
        logger.debug("Getting the animal fact")

        animal = self.choose_animal()

        if animal not in self.config.facts:
            raise UnknownAnimalError(animal)

        content = await self.request_api(self.config.facts[animal])
        fact = get_adapter(animal).transform(content)

        return animal, fact
