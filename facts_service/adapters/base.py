from abc import ABC, abstractmethod
from enum import Enum


ANY_ANIMAL = "any"


class Animal(str, Enum):
    """Animals that have a fact adapter."""
    DOG = "dog"
    CAT = "cat"


class FactAdapter(ABC):
    """
    Abstract base interface for fact adapters.

    An adapter turns the raw response body of one provider into a single
    fact string, validating the provider's own correctness flags on the way.
    Adapters are stateless and hold no connection or configuration.
    """

    animal: Animal

    @abstractmethod
    def transform(self, response_content: str) -> str:
        """
        Extract the fact from a provider response body.

        Args:
            response_content: Raw response body returned by the provider

        Returns:
            str: The fact text

        Raises:
            MalformedPayloadError: If the body does not match the provider schema
            InvalidResponseError: If the body breaks the provider contract
        """
        pass
