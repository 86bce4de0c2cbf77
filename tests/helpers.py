r"""Shared test helpers to build the PIM responses.

The responses are real ``httpx.Response`` objects bound to their
``httpx.Request``, so that ``raise_for_status`` behaves as with a live
server.
"""

from __future__ import annotations

__all__ = [
    "MEDIA_URL",
    "PATCH_PRODUCT_URL",
    "REDIRECTED_MEDIA_URL",
    "TOKEN_PAYLOAD",
    "TOKEN_URL",
    "UPLOAD_URL",
    "brand_error_payload",
    "create_media_relay_transport",
    "create_product",
    "create_response",
]

from typing import Any

import httpx

from akeneo_client import Price, Product, ProductValue

TOKEN_URL = "https://my-test-host/api/oauth/v1/token"
PATCH_PRODUCT_URL = "https://my-test-host/api/rest/v1/products/sku-1"
UPLOAD_URL = "https://my-test-host/api/rest/v1/asset-media-files"
MEDIA_URL = "https://cdn.example.com/images/shoe.jpg?width=800#main"
REDIRECTED_MEDIA_URL = "https://cdn.example.com/shoe.jpg"

TOKEN_PAYLOAD = {
    "access_token": "ABCD1234",
    "expires_in": 3600,
    "token_type": "bearer",
    "scope": None,
    "refresh_token": "4321DCBA",
}


def create_response(
    method: str,
    url: str,
    *,
    status_code: int = 200,
    json: Any = None,
    content: bytes | None = None,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Create an httpx.Response bound to its request.

    Args:
        method: The HTTP method of the request.
        url: The URL of the request.
        status_code: The response status code.
        json: Optional JSON body.
        content: Optional raw body.
        headers: Optional response headers.

    Returns:
        The response.
    """
    return httpx.Response(
        status_code,
        request=httpx.Request(method, url),
        json=json,
        content=content,
        headers=headers,
    )


def brand_error_payload() -> dict[str, Any]:
    """Create the body of the PIM rejection of an unknown brand."""
    return {
        "code": 422,
        "message": "Validation failed.",
        "errors": [
            {
                "property": "values",
                "message": 'Property "brand" expects a valid record code. The record "acme" does '
                "not exist.",
                "attribute": "brand",
                "locale": None,
                "scope": None,
            }
        ],
    }


def create_product() -> Product:
    """Create a fully populated product."""
    return Product(
        identifier="sku-1",
        family="shoes",
        groups=["summer"],
        categories=["running", "men"],
        enabled=True,
        values={
            "name": [ProductValue(data="Runner", locale="en_US")],
            "model_number": [ProductValue(data="RN-42")],
            "images": [ProductValue(data=["a/b/c/image.jpg"])],
            "brand": [ProductValue(data="acme")],
            "price": [ProductValue(data=[Price(amount="99.90", currency="EUR")], scope="ecommerce")],
            "description": [ProductValue(data="A running shoe", locale="en_US", scope="ecommerce")],
        },
        parent="runner-model",
    )


def create_media_relay_transport(paths: list[str]) -> httpx.MockTransport:
    """Create a transport serving the token, media and upload endpoints.

    ``REDIRECTED_MEDIA_URL`` answers with a 302 to a second CDN host.

    Args:
        paths: Receives the path of every request sent.

    Returns:
        The transport.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        paths.append(request.url.path)
        if request.url.path == "/api/oauth/v1/token":
            return httpx.Response(200, json=TOKEN_PAYLOAD)
        if request.url.host == "cdn.example.com":
            return httpx.Response(302, headers={"Location": "https://cdn2.example.com/shoe.jpg"})
        if request.url.host == "cdn2.example.com":
            return httpx.Response(200, content=b"\xff\xd8\xff")
        if request.url.path == "/api/rest/v1/asset-media-files":
            return httpx.Response(201, headers={"asset-media-file-code": "a/b/image.jpg"})
        return httpx.Response(404)

    return httpx.MockTransport(handler)
