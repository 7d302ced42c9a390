"""
Service layer for the fact service.
"""

from facts_service.services.fact_resolver import FactResolver

__all__ = [
    "FactResolver",
]
