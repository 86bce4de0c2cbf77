r"""Asynchronous client for the Akeneo PIM REST API.

This module provides an async context manager-based client that
authenticates against the OAuth token endpoint and updates products and
assets of an Akeneo PIM. Every operation requests a fresh access token
first: tokens are never cached between operations.
"""

from __future__ import annotations

__all__ = ["AsyncAkeneoClient"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from akeneo_client.core.config import DEFAULT_TIMEOUT
from akeneo_client.core.request_logic import (
    asset_media_body,
    media_upload_headers,
    media_upload_url,
    patch_request_kwargs,
    product_payload,
    token_request_kwargs,
)
from akeneo_client.core.retry_logic import is_brand_validation_error, strip_brand
from akeneo_client.core.validation import validate_timeout
from akeneo_client.models import AuthenticationResponse, PatchRequest
from akeneo_client.utils.media import (
    encode_multipart_file,
    media_filename,
    read_media_file_code,
    resolve_media_extension,
)

if TYPE_CHECKING:
    from collections.abc import MutableMapping
    from types import TracebackType
    from typing import Self

    from akeneo_client.core.config import AkeneoConfig
    from akeneo_client.models import Product

logger: logging.Logger = logging.getLogger(__name__)


class AsyncAkeneoClient:
    r"""Asynchronous client for the Akeneo PIM REST API.

    The client can be used directly, or as an async context manager to
    close the underlying ``httpx.AsyncClient`` on exit. When an
    ``httpx.AsyncClient`` already opened by an outer ``async with``
    block is passed in, its lifecycle is left to the caller.

    Args:
        config: The connection settings of the PIM.
        client: Optional ``httpx.AsyncClient`` used to send the
            requests. If ``None``, a new client is created.
        timeout: Maximum seconds to wait for the server responses of
            the client created when ``client`` is ``None``. Must be > 0.
            Entity PATCH requests always use a 5 seconds timeout.

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
        ...         code = await client.relay_media_file("https://cdn.example.com/shoe.jpg")
        ...         await client.patch_asset("shoe", "packshots", code)
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        config: AkeneoConfig,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    ) -> None:
        validate_timeout(timeout)
        self._config = config
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(timeout=timeout)
        self._close_client = client is None

    @property
    def config(self) -> AkeneoConfig:
        r"""The connection settings of the PIM."""
        return self._config

    async def __aenter__(self) -> Self:
        """Enter the async context manager.

        If the underlying ``httpx.AsyncClient`` is not yet open, it is
        entered and closed when the context exits. If it was opened by
        an outer ``async with`` block, it is used as is and left open.

        Returns:
            The AsyncAkeneoClient instance.
        """
        try:
            await self._client.__aenter__()
        except RuntimeError:
            if self._client.is_closed:
                raise
            self._close_client = False
        else:
            self._close_client = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit the async context manager and close the underlying httpx
        client if this client manages its lifecycle.

        Args:
            exc_type: Exception type if an exception occurred.
            exc_val: Exception value if an exception occurred.
            exc_tb: Exception traceback if an exception occurred.
        """
        if self._close_client:
            await self._client.__aexit__(exc_type, exc_val, exc_tb)
            self._close_client = False

    async def aclose(self) -> None:
        r"""Close the underlying httpx client if this client manages its
        lifecycle."""
        if self._close_client:
            await self._client.aclose()
            self._close_client = False

    async def authenticate(self) -> AuthenticationResponse:
        r"""Request a new access token with the OAuth password grant.

        Returns:
            The access and refresh tokens.

        Raises:
            httpx.HTTPStatusError: If the token endpoint answers with a
                non-2xx status.
            httpx.RequestError: If the request fails.
            InvalidAuthenticationResponseError: If the response misses
                the access token or the refresh token.
        """
        kwargs = token_request_kwargs(self._config)
        logger.debug(f"Requesting an access token from {kwargs['url']}")
        response = await self._client.post(**kwargs)
        response.raise_for_status()
        return AuthenticationResponse.from_response(response)

    async def patch_request(
        self,
        *,
        entity: str,
        id: str,  # noqa: A002
        body: Any,
        access_token: str,
    ) -> httpx.Response:
        r"""Send a PATCH request for a single entity instance.

        Args:
            entity: The resource type, e.g. ``products``.
            id: The identifier of the entity instance.
            body: The JSON body.
            access_token: The bearer token.

        Returns:
            The response of the PIM.

        Raises:
            httpx.HTTPStatusError: If the PIM answers with a non-2xx
                status.
            httpx.TimeoutException: If the PIM does not answer within
                5 seconds.
        """
        request = PatchRequest(entity=entity, id=id, body=body, access_token=access_token)
        kwargs = patch_request_kwargs(self._config, request)
        logger.debug(f"PATCH {kwargs['url']}")
        response = await self._client.patch(**kwargs)
        response.raise_for_status()
        return response

    async def _patch_product_once(
        self, product: Product | MutableMapping[str, Any]
    ) -> httpx.Response:
        auth = await self.authenticate()
        body = product_payload(product)
        return await self.patch_request(
            entity="products", id=body["identifier"], body=body, access_token=auth.access_token
        )

    async def patch_product(self, product: Product | MutableMapping[str, Any]) -> httpx.Response:
        r"""Update a product.

        If the PIM rejects the product because its brand references an
        unknown record, the brand is removed from the product values
        and the update is sent once more, with a new access token.

        Args:
            product: A ``Product`` or a serialized product. Its brand is
                removed in place when the update is retried.

        Returns:
            The response of the PIM.

        Raises:
            httpx.HTTPStatusError: If the update fails for any other
                reason, or if the retry fails.

        Example:
            ```pycon
            >>> import asyncio
            >>> from akeneo_client import AsyncAkeneoClient, Product, ProductValue
            >>> product = Product(
            ...     identifier="sku-1",
            ...     family="shoes",
            ...     values={"brand": [ProductValue(data="acme")]},
            ... )
            >>> async def main(client):  # doctest: +SKIP
            ...     response = await client.patch_product(product)
            ...
            >>> asyncio.run(main(AsyncAkeneoClient(config)))  # doctest: +SKIP

            ```
        """
        try:
            return await self._patch_product_once(product)
        except httpx.HTTPStatusError as exc:
            if not is_brand_validation_error(exc):
                raise
            logger.debug(
                f"Product update was rejected because of an unknown brand ({exc.response.status_code}), "
                "retrying without brand"
            )
        return await self._patch_product_once(strip_brand(product))

    async def relay_media_file(self, source_url: str) -> str:
        r"""Download a media file and upload it to the PIM asset
        storage.

        Args:
            source_url: The URL of the media file. Its extension names
                the uploaded file. Redirects are followed.

        Returns:
            The code of the uploaded media file.

        Raises:
            MediaExtensionError: If the URL has no file extension.
                Only the token request is sent.
            MediaUploadError: If the PIM does not return the code of
                the uploaded file.
            httpx.HTTPStatusError: If the download or the upload
                answers with a non-2xx status.
        """
        auth = await self.authenticate()
        extension = resolve_media_extension(source_url)

        logger.debug(f"Downloading media file from {source_url}")
        source = await self._client.get(url=source_url, follow_redirects=True)
        source.raise_for_status()

        upload_url = media_upload_url(self._config)
        content, multipart_headers = encode_multipart_file(
            upload_url, source.content, media_filename(extension)
        )
        logger.debug(f"Uploading media file to {upload_url}")
        response = await self._client.post(
            url=upload_url,
            content=content,
            headers=media_upload_headers(auth.access_token, multipart_headers),
        )
        response.raise_for_status()
        return read_media_file_code(response)

    async def patch_asset(
        self, asset_id: str, asset_family: str, media_file_code: str
    ) -> httpx.Response:
        r"""Attach a media file to an asset.

        Args:
            asset_id: The code of the asset.
            asset_family: The asset family of the asset.
            media_file_code: The code of an uploaded media file, as
                returned by ``relay_media_file``.

        Returns:
            The response of the PIM.

        Raises:
            httpx.HTTPStatusError: If the PIM answers with a non-2xx
                status.
        """
        auth = await self.authenticate()
        return await self.patch_request(
            entity=f"asset-families/{asset_family}/assets",
            id=asset_id,
            body=asset_media_body(asset_id, media_file_code),
            access_token=auth.access_token,
        )
