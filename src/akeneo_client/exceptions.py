r"""Exceptions raised by the Akeneo client.

Transport-level failures (non-2xx responses, timeouts, network errors)
are not wrapped: they surface as the original ``httpx.HTTPStatusError``
or ``httpx.RequestError``. The exceptions below cover the failures the
client detects itself.
"""

from __future__ import annotations

__all__ = [
    "AkeneoError",
    "InvalidAuthenticationResponseError",
    "MediaExtensionError",
    "MediaUploadError",
]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx


class AkeneoError(Exception):
    r"""Base class of all the errors raised by ``akeneo_client``."""


class InvalidAuthenticationResponseError(AkeneoError):
    r"""Raised when the token endpoint answers without the expected
    token fields.

    Args:
        message: The error message.
        payload: The decoded body returned by the token endpoint.

    Example:
        ```pycon
        >>> from akeneo_client.exceptions import InvalidAuthenticationResponseError
        >>> error = InvalidAuthenticationResponseError(payload={"foo": "bar"})
        >>> str(error)
        'Invalid response from token endpoint'
        >>> error.payload
        {'foo': 'bar'}

        ```
    """

    def __init__(
        self, message: str = "Invalid response from token endpoint", *, payload: Any = None
    ) -> None:
        super().__init__(message)
        self.payload = payload


class MediaExtensionError(AkeneoError, ValueError):
    r"""Raised when no file extension can be derived from a media URL.

    Args:
        url: The media URL.
    """

    def __init__(self, url: str) -> None:
        super().__init__(f"Could not determine media asset file extension from {url!r}")
        self.url = url


class MediaUploadError(AkeneoError):
    r"""Raised when a media upload is accepted by the server but no
    media file code is returned.

    Args:
        message: The error message.
        response: The upload response.
    """

    def __init__(
        self, message: str = "Failed to upload media", *, response: httpx.Response | None = None
    ) -> None:
        super().__init__(message)
        self.response = response
