from __future__ import annotations

import dataclasses

import httpx
import pytest
from coola.equality import objects_are_equal

from akeneo_client import (
    AuthenticationResponse,
    InvalidAuthenticationResponseError,
    PatchRequest,
    Price,
    Product,
    ProductValue,
)
from tests.helpers import TOKEN_PAYLOAD, create_product

############################################
#     Tests for AuthenticationResponse     #
############################################


def test_authentication_response_from_payload() -> None:
    auth = AuthenticationResponse.from_payload(TOKEN_PAYLOAD)
    assert auth == AuthenticationResponse(access_token="ABCD1234", refresh_token="4321DCBA")


def test_authentication_response_from_payload_invalid() -> None:
    with pytest.raises(
        InvalidAuthenticationResponseError, match=r"Invalid response from token endpoint"
    ):
        AuthenticationResponse.from_payload({"someRandomKey": "some random data"})


def test_authentication_response_from_response() -> None:
    response = httpx.Response(200, json=TOKEN_PAYLOAD)
    auth = AuthenticationResponse.from_response(response)
    assert auth.access_token == "ABCD1234"
    assert auth.refresh_token == "4321DCBA"


def test_authentication_response_from_response_not_json() -> None:
    with pytest.raises(InvalidAuthenticationResponseError) as exc_info:
        AuthenticationResponse.from_response(httpx.Response(200, content=b"not json"))
    assert exc_info.value.payload == "not json"


def test_authentication_response_is_immutable() -> None:
    auth = AuthenticationResponse(access_token="ABCD1234", refresh_token="4321DCBA")
    with pytest.raises(dataclasses.FrozenInstanceError):
        auth.access_token = "other"


###############################
#     Tests for Product     #
###############################


def test_product_value_to_dict_defaults() -> None:
    assert ProductValue(data="Runner").to_dict() == {"locale": None, "scope": None, "data": "Runner"}


def test_product_value_to_dict_prices() -> None:
    value = ProductValue(data=[Price(amount="99.90", currency="EUR")], scope="ecommerce")
    assert value.to_dict() == {
        "locale": None,
        "scope": "ecommerce",
        "data": [{"amount": "99.90", "currency": "EUR"}],
    }


def test_product_to_dict() -> None:
    assert objects_are_equal(
        create_product().to_dict(),
        {
            "identifier": "sku-1",
            "family": "shoes",
            "groups": ["summer"],
            "categories": ["running", "men"],
            "enabled": True,
            "values": {
                "name": [{"locale": "en_US", "scope": None, "data": "Runner"}],
                "model_number": [{"locale": None, "scope": None, "data": "RN-42"}],
                "images": [{"locale": None, "scope": None, "data": ["a/b/c/image.jpg"]}],
                "brand": [{"locale": None, "scope": None, "data": "acme"}],
                "price": [
                    {
                        "locale": None,
                        "scope": "ecommerce",
                        "data": [{"amount": "99.90", "currency": "EUR"}],
                    }
                ],
                "description": [
                    {"locale": "en_US", "scope": "ecommerce", "data": "A running shoe"}
                ],
            },
            "parent": "runner-model",
        },
    )


def test_product_to_dict_without_parent() -> None:
    body = Product(identifier="sku-2", family="shoes").to_dict()
    assert "parent" not in body
    assert body == {
        "identifier": "sku-2",
        "family": "shoes",
        "groups": [],
        "categories": [],
        "enabled": True,
        "values": {},
    }


##################################
#     Tests for PatchRequest     #
##################################


def test_patch_request_repr_hides_token() -> None:
    request = PatchRequest(entity="products", id="sku-1", body={}, access_token="ABCD1234")
    assert "ABCD1234" not in repr(request)
    assert "sku-1" in repr(request)
