import json
from collections import Counter
from typing import Dict, Iterable, Union

import httpx
import pytest

from facts_service.core.config import ConfigData, FactsConfig, ServerConfig, get_settings

DOG_URL = "http://dog-facts.test/somefacts"
CAT_URL = "http://cat-facts.test/somefacts"

DOG_FACT = "some funny dog fact"
CAT_FACT = "some funny cat fact"


def dog_body(facts: Iterable[str] = (DOG_FACT,), success: bool = True) -> str:
    """Serialize a dog endpoint response."""
    return json.dumps({"facts": list(facts), "success": success})


def cat_body(text: str = CAT_FACT, animal_type: str = "cat", deleted: bool = False) -> str:
    """Serialize a cat endpoint response."""
    return json.dumps({"text": text, "type": animal_type, "deleted": deleted})


class MockEndpoints:
    """
    In-process stand-in for the fact providers.

    Routes map a full URL to either a response or an exception to raise.
    Unknown URLs behave like an unreachable host.
    """

    def __init__(self) -> None:
        self.routes: Dict[str, Union[httpx.Response, Exception]] = {}
        self.calls: Counter = Counter()

    def add(self, url: str, body: str, status_code: int = 200) -> None:
        self.routes[url] = httpx.Response(status_code, text=body)

    def redirect(self, url: str, location: str, status_code: int = 301) -> None:
        self.routes[url] = httpx.Response(status_code, headers={"Location": location})

    def handle(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.calls[url] += 1
        route = self.routes.get(url)
        if route is None:
            raise httpx.ConnectError(f"cannot connect to {url}", request=request)
        if isinstance(route, Exception):
            raise route
        return route

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handle))


@pytest.fixture
def endpoints() -> MockEndpoints:
    """Mock dog and cat endpoints answering with one valid fact each."""
    mock = MockEndpoints()
    mock.add(DOG_URL, dog_body())
    mock.add(CAT_URL, cat_body())
    return mock


@pytest.fixture
def dog_config() -> FactsConfig:
    return FactsConfig(default="dog", facts={"dog": DOG_URL})


@pytest.fixture
def any_config() -> FactsConfig:
    return FactsConfig(default="any", facts={"dog": DOG_URL, "cat": CAT_URL})


@pytest.fixture
def config_data(dog_config: FactsConfig) -> ConfigData:
    return ConfigData(server=ServerConfig(address="0.0.0.0:8888"), animals=dog_config)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; reset them around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
