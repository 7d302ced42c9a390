"""
Adapters package for the fact providers.

Each adapter reads one provider's response shape and returns a single fact
string. Dispatch over the closed set of animals lives in ``factory``.
"""

from .base import ANY_ANIMAL, Animal, FactAdapter
from .cat import CatFactAdapter, CatFactEndpointResponse
from .dog import DogFactAdapter, DogFactEndpointResponse
from .factory import get_adapter

__all__ = [
    'ANY_ANIMAL',
    'Animal',
    'FactAdapter',
    'CatFactAdapter',
    'CatFactEndpointResponse',
    'DogFactAdapter',
    'DogFactEndpointResponse',
    'get_adapter',
]
