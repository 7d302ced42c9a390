"""Tests for the dog and cat fact adapters."""

import json

import pytest

from facts_service.adapters import (
    CatFactAdapter,
    CatFactEndpointResponse,
    DogFactAdapter,
    get_adapter,
)
from facts_service.core.exceptions import (
    InvalidResponseError,
    MalformedPayloadError,
    UnsupportedAnimalError,
)
from tests.conftest import CAT_FACT, DOG_FACT, cat_body, dog_body


class TestDogFactAdapter:
    """Dog endpoint response handling."""

    def test_single_fact_is_returned_unchanged(self) -> None:
        fact = "  Dogs have three eyelids.\n"
        assert DogFactAdapter().transform(dog_body(facts=[fact])) == fact

    @pytest.mark.parametrize("facts", [[], [DOG_FACT], [DOG_FACT, "another dog fact"]])
    def test_unsuccessful_response_fails(self, facts) -> None:
        with pytest.raises(InvalidResponseError, match="`success`=false"):
            DogFactAdapter().transform(dog_body(facts=facts, success=False))

    def test_more_than_one_fact_fails(self) -> None:
        with pytest.raises(InvalidResponseError, match="more than one fact result: 2"):
            DogFactAdapter().transform(dog_body(facts=[DOG_FACT, "another dog fact"]))

    def test_empty_facts_is_malformed(self) -> None:
        with pytest.raises(MalformedPayloadError):
            DogFactAdapter().transform(dog_body(facts=[]))

    @pytest.mark.parametrize(
        "body",
        [
            "just a plain text, not json",
            "",
            json.dumps({"success": True}),
            json.dumps({"facts": DOG_FACT, "success": True}),
            json.dumps({"facts": [DOG_FACT], "success": "true"}),
            json.dumps([DOG_FACT]),
        ],
    )
    def test_malformed_payload(self, body: str) -> None:
        with pytest.raises(MalformedPayloadError) as exc_info:
            DogFactAdapter().transform(body)

        assert exc_info.value.code == "malformed_payload"
        assert exc_info.value.context == {"provider": "dog"}

    def test_extra_fields_are_ignored(self) -> None:
        body = json.dumps({"facts": [DOG_FACT], "success": True, "source": "kinduff"})
        assert DogFactAdapter().transform(body) == DOG_FACT


class TestCatFactAdapter:
    """Cat endpoint response handling."""

    def test_valid_fact(self) -> None:
        assert CatFactAdapter().transform(cat_body()) == CAT_FACT

    @pytest.mark.parametrize("animal_type", ["cat", "dog", ""])
    def test_deleted_fact_fails(self, animal_type: str) -> None:
        with pytest.raises(InvalidResponseError):
            CatFactAdapter().transform(cat_body(animal_type=animal_type, deleted=True))

    @pytest.mark.parametrize("deleted", [True, False])
    def test_fact_for_another_animal_fails(self, deleted: bool) -> None:
        with pytest.raises(InvalidResponseError):
            CatFactAdapter().transform(cat_body(animal_type="horse", deleted=deleted))

    def test_wrong_type_message_names_the_type(self) -> None:
        with pytest.raises(InvalidResponseError, match="fact not for a cat: horse"):
            CatFactAdapter().transform(cat_body(animal_type="horse"))

    @pytest.mark.parametrize(
        "body",
        [
            "just a plain text, not json",
            json.dumps({"text": CAT_FACT, "deleted": False}),
            json.dumps({"text": CAT_FACT, "animal_type": "cat", "deleted": False}),
            json.dumps({"text": CAT_FACT, "type": "cat", "deleted": 0}),
        ],
    )
    def test_malformed_payload(self, body: str) -> None:
        with pytest.raises(MalformedPayloadError):
            CatFactAdapter().transform(body)

    def test_response_model_reads_type_alias(self) -> None:
        data = CatFactEndpointResponse.model_validate_json(cat_body(animal_type="cat"))
        assert data.animal_type == "cat"
        assert json.loads(data.model_dump_json(by_alias=True))["type"] == "cat"


class TestGetAdapter:
    """Adapter dispatch by animal name."""

    def test_dog(self) -> None:
        assert isinstance(get_adapter("dog"), DogFactAdapter)

    def test_cat(self) -> None:
        assert isinstance(get_adapter("cat"), CatFactAdapter)

    @pytest.mark.parametrize("animal", ["bird", "Dog", "any", ""])
    def test_unsupported(self, animal: str) -> None:
        with pytest.raises(UnsupportedAnimalError, match="invalid animal type"):
            get_adapter(animal)
