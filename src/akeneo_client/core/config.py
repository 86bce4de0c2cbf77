r"""Configuration dataclass and defaults for the Akeneo clients.

This module provides the constants shared by the request builders and
the immutable configuration record both ``AkeneoClient`` and
``AsyncAkeneoClient`` are constructed with.
"""

from __future__ import annotations

__all__ = [
    "AkeneoConfig",
    "DEFAULT_TIMEOUT",
    "GRANT_TYPE",
    "MEDIA_FILE_CODE_HEADER",
    "PATCH_TIMEOUT",
]

from dataclasses import dataclass

from akeneo_client.core.validation import validate_config_fields

# OAuth grant used by the token endpoint
GRANT_TYPE = "password"

# Timeout in seconds of the entity PATCH requests
PATCH_TIMEOUT = 5.0

# Timeout in seconds of the httpx clients created by the library
# Every request except the entity PATCH uses it
DEFAULT_TIMEOUT = 10.0

# Response header carrying the code of an uploaded media file
MEDIA_FILE_CODE_HEADER = "asset-media-file-code"


@dataclass(frozen=True)
class AkeneoConfig:
    """Connection settings of an Akeneo PIM instance.

    All the fields are required and must be non-empty strings. The host
    is normalized on creation: a leading ``https://`` or ``http://``
    scheme and trailing slashes are removed, because every request is
    sent to ``https://{host}/...``.

    Args:
        host: The host name of the PIM, e.g. ``pim.example.com``.
        username: The API user name.
        password: The API user password.
        oauth_client_id: The id of the API connection.
        oauth_client_secret: The secret of the API connection.

    Raises:
        ValueError: If a field is missing or blank.

    Example:
        ```pycon
        >>> from akeneo_client.core.config import AkeneoConfig
        >>> config = AkeneoConfig(
        ...     host="https://pim.example.com/",
        ...     username="john.doe",
        ...     password="secret",
        ...     oauth_client_id="client-id",
        ...     oauth_client_secret="client-secret",
        ... )
        >>> config.host
        'pim.example.com'
        >>> config.base_url
        'https://pim.example.com'

        ```
    """

    host: str
    username: str
    password: str
    oauth_client_id: str
    oauth_client_secret: str

    def __post_init__(self) -> None:
        validate_config_fields(
            host=self.host,
            username=self.username,
            password=self.password,
            oauth_client_id=self.oauth_client_id,
            oauth_client_secret=self.oauth_client_secret,
        )
        host = self.host.strip()
        for scheme in ("https://", "http://"):
            if host.startswith(scheme):
                host = host[len(scheme) :]
        host = host.rstrip("/")
        if not host:
            msg = f"host must be a non-empty string, got {self.host!r}"
            raise ValueError(msg)
        # frozen dataclass
        object.__setattr__(self, "host", host)

    @property
    def base_url(self) -> str:
        r"""The root URL of the PIM."""
        return f"https://{self.host}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(host={self.host!r}, username={self.username!r}, "
            f"oauth_client_id={self.oauth_client_id!r})"
        )
