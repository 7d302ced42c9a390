from facts_service.adapters.base import Animal, FactAdapter
from facts_service.adapters.cat import CatFactAdapter
from facts_service.adapters.dog import DogFactAdapter
from facts_service.core.exceptions import UnsupportedAnimalError
from facts_service.core.logging import get_logger

logger = get_logger(__name__)

_DOG_ADAPTER = DogFactAdapter()
_CAT_ADAPTER = CatFactAdapter()


def get_adapter(animal: str) -> FactAdapter:
    """
    Choose the adapter for an animal name.

    The set of adapters is closed; there is no runtime registration.

    Args:
        animal: Animal name selected by the resolver

    Returns:
        FactAdapter: The adapter able to read that animal's endpoint

    Raises:
        UnsupportedAnimalError: If no adapter exists for the animal
    """
    logger.debug(f"Choosing adapter based on the animal type: {animal}")

    if animal == Animal.DOG.value:
        return _DOG_ADAPTER
    elif animal == Animal.CAT.value:
        return _CAT_ADAPTER

    raise UnsupportedAnimalError(animal)
