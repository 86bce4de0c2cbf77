r"""akeneo_client - Client library for the Akeneo PIM REST API.

This package authenticates against the OAuth token endpoint of an Akeneo
PIM with the password grant, and updates products and assets. Built on
top of the httpx library, it ships an asynchronous client and its
synchronous counterpart.

Key Features:
    - OAuth password grant authentication, with a fresh token per operation
    - Product updates, retried once without brand when the brand record is unknown
    - Media file relay: download from a URL and upload to the asset storage
    - Asset updates attaching an uploaded media file
    - Sync and async clients sharing the same request building logic

Example:
    ```pycon
    >>> import asyncio
    >>> from akeneo_client import AkeneoConfig, AsyncAkeneoClient
    >>> config = AkeneoConfig(
    ...     host="pim.example.com",
    ...     username="john.doe",
    ...     password="secret",
    ...     oauth_client_id="client-id",
    ...     oauth_client_secret="client-secret",
    ... )
    >>> async def main():  # doctest: +SKIP
    ...     async with AsyncAkeneoClient(config) as client:
    ...         tokens = await client.authenticate()
    ...
    >>> asyncio.run(main())  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "AkeneoClient",
    "AkeneoConfig",
    "AkeneoError",
    "AsyncAkeneoClient",
    "AuthenticationResponse",
    "InvalidAuthenticationResponseError",
    "MediaExtensionError",
    "MediaUploadError",
    "PatchRequest",
    "Price",
    "Product",
    "ProductValue",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from akeneo_client.client import AkeneoClient
from akeneo_client.client_async import AsyncAkeneoClient
from akeneo_client.core.config import AkeneoConfig
from akeneo_client.exceptions import (
    AkeneoError,
    InvalidAuthenticationResponseError,
    MediaExtensionError,
    MediaUploadError,
)
from akeneo_client.models import (
    AuthenticationResponse,
    PatchRequest,
    Price,
    Product,
    ProductValue,
)

try:
    __version__ = version("akeneo-client")
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
