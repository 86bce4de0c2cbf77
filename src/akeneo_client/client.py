r"""Synchronous client for the Akeneo PIM REST API.

This module provides the blocking counterpart of ``AsyncAkeneoClient``.
Both clients build the same requests and interpret the responses the
same way.
"""

from __future__ import annotations

__all__ = ["AkeneoClient"]

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


class AkeneoClient:
    r"""Synchronous client for the Akeneo PIM REST API.

    Args:
        config: The connection settings of the PIM.
        client: Optional ``httpx.Client`` used to send the requests.
            If ``None``, a new client is created.
        timeout: Maximum seconds to wait for the server responses of
            the client created when ``client`` is ``None``. Must be > 0.

    Example:
        ```pycon
        >>> from akeneo_client import AkeneoClient, AkeneoConfig
        >>> config = AkeneoConfig(
        ...     host="pim.example.com",
        ...     username="john.doe",
        ...     password="secret",
        ...     oauth_client_id="client-id",
        ...     oauth_client_secret="client-secret",
        ... )
        >>> with AkeneoClient(config) as client:  # doctest: +SKIP
        ...     tokens = client.authenticate()
        ...

        ```
    """

    def __init__(
        self,
        config: AkeneoConfig,
        *,
        client: httpx.Client | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    ) -> None:
        validate_timeout(timeout)
        self._config = config
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)
        self._close_client = client is None

    @property
    def config(self) -> AkeneoConfig:
        r"""The connection settings of the PIM."""
        return self._config

    def __enter__(self) -> Self:
        try:
            self._client.__enter__()
        except RuntimeError:
            if self._client.is_closed:
                raise
            self._close_client = False
        else:
            self._close_client = True
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._close_client:
            self._client.__exit__(exc_type, exc_val, exc_tb)
            self._close_client = False

    def close(self) -> None:
        r"""Close the underlying httpx client if this client manages its
        lifecycle."""
        if self._close_client:
            self._client.close()
            self._close_client = False

    def authenticate(self) -> AuthenticationResponse:
        r"""Request a new access token with the OAuth password grant.

        See ``AsyncAkeneoClient.authenticate``.
        """
        kwargs = token_request_kwargs(self._config)
        logger.debug(f"Requesting an access token from {kwargs['url']}")
        response = self._client.post(**kwargs)
        response.raise_for_status()
        return AuthenticationResponse.from_response(response)

    def patch_request(
        self,
        *,
        entity: str,
        id: str,  # noqa: A002
        body: Any,
        access_token: str,
    ) -> httpx.Response:
        r"""Send a PATCH request for a single entity instance.

        See ``AsyncAkeneoClient.patch_request``.
        """
        request = PatchRequest(entity=entity, id=id, body=body, access_token=access_token)
        kwargs = patch_request_kwargs(self._config, request)
        logger.debug(f"PATCH {kwargs['url']}")
        response = self._client.patch(**kwargs)
        response.raise_for_status()
        return response

    def _patch_product_once(self, product: Product | MutableMapping[str, Any]) -> httpx.Response:
        auth = self.authenticate()
        body = product_payload(product)
        return self.patch_request(
            entity="products", id=body["identifier"], body=body, access_token=auth.access_token
        )

    def patch_product(self, product: Product | MutableMapping[str, Any]) -> httpx.Response:
        r"""Update a product, retrying once without brand if the brand
        references an unknown record.

        See ``AsyncAkeneoClient.patch_product``.
        """
        try:
            return self._patch_product_once(product)
        except httpx.HTTPStatusError as exc:
            if not is_brand_validation_error(exc):
                raise
            logger.debug(
                f"Product update was rejected because of an unknown brand ({exc.response.status_code}), "
                "retrying without brand"
            )
        return self._patch_product_once(strip_brand(product))

    def relay_media_file(self, source_url: str) -> str:
        r"""Download a media file and upload it to the PIM asset
        storage.

        See ``AsyncAkeneoClient.relay_media_file``.
        """
        auth = self.authenticate()
        extension = resolve_media_extension(source_url)

        logger.debug(f"Downloading media file from {source_url}")
        source = self._client.get(url=source_url, follow_redirects=True)
        source.raise_for_status()

        upload_url = media_upload_url(self._config)
        content, multipart_headers = encode_multipart_file(
            upload_url, source.content, media_filename(extension)
        )
        logger.debug(f"Uploading media file to {upload_url}")
        response = self._client.post(
            url=upload_url,
            content=content,
            headers=media_upload_headers(auth.access_token, multipart_headers),
        )
        response.raise_for_status()
        return read_media_file_code(response)

    def patch_asset(self, asset_id: str, asset_family: str, media_file_code: str) -> httpx.Response:
        r"""Attach a media file to an asset.

        See ``AsyncAkeneoClient.patch_asset``.
        """
        auth = self.authenticate()
        return self.patch_request(
            entity=f"asset-families/{asset_family}/assets",
            id=asset_id,
            body=asset_media_body(asset_id, media_file_code),
            access_token=auth.access_token,
        )
