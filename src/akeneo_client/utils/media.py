r"""Media file utilities.

This module provides the helpers used to relay a media file into the
PIM: resolving the file extension from the source URL, and encoding the
file as a multipart body that is fully held in memory.
"""

from __future__ import annotations

__all__ = [
    "MEDIA_FIELD_NAME",
    "encode_multipart_file",
    "media_filename",
    "read_media_file_code",
    "resolve_media_extension",
]

import logging
from urllib.parse import urlsplit

import httpx

from akeneo_client.core.config import MEDIA_FILE_CODE_HEADER
from akeneo_client.exceptions import MediaExtensionError, MediaUploadError

logger: logging.Logger = logging.getLogger(__name__)

# Name of the multipart field holding the uploaded file
MEDIA_FIELD_NAME = "file"


def resolve_media_extension(url: str) -> str:
    """Return the file extension of a media URL.

    The query string and the fragment are ignored, and the extension is
    the part of the last path segment after its last ``.``.

    Args:
        url: The URL of the media file.

    Returns:
        The extension, without the leading dot.

    Raises:
        MediaExtensionError: If the last path segment has no extension.

    Example:
        ```pycon
        >>> from akeneo_client.utils.media import resolve_media_extension
        >>> resolve_media_extension("https://cdn.example.com/images/shoe.large.jpg?w=200#top")
        'jpg'
        >>> resolve_media_extension("https://cdn.example.com/images/noext")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        akeneo_client.exceptions.MediaExtensionError: Could not determine media asset file extension from 'https://cdn.example.com/images/noext'

        ```
    """
    name = urlsplit(url.strip()).path.rsplit("/", 1)[-1]
    if "." not in name:
        raise MediaExtensionError(url)
    extension = name.rsplit(".", 1)[-1].strip()
    if not extension:
        raise MediaExtensionError(url)
    return extension


def media_filename(extension: str) -> str:
    r"""Return the file name a media file is uploaded under."""
    return f"image.{extension}"


def encode_multipart_file(url: str, content: bytes, filename: str) -> tuple[bytes, dict[str, str]]:
    """Encode a file as a ``multipart/form-data`` body held in memory.

    The media upload endpoint rejects chunked bodies, so the whole
    multipart payload is built up front and sent with an explicit
    ``Content-Length``.

    Args:
        url: The URL the body is uploaded to.
        content: The file content.
        filename: The file name declared in the multipart part.

    Returns:
        A tuple of the encoded body and the ``Content-Type`` and
            ``Content-Length`` headers to send it with.

    Example:
        ```pycon
        >>> from akeneo_client.utils.media import encode_multipart_file
        >>> body, headers = encode_multipart_file(
        ...     "https://pim.example.com/api/rest/v1/asset-media-files", b"data", "image.png"
        ... )
        >>> headers["Content-Type"].startswith("multipart/form-data; boundary=")
        True
        >>> headers["Content-Length"] == str(len(body))
        True

        ```
    """
    request = httpx.Request("POST", url, files={MEDIA_FIELD_NAME: (filename, content)})
    body = request.read()
    logger.debug(f"Encoded {filename} ({len(content)} bytes) into a {len(body)} bytes multipart body")
    return body, {"Content-Type": request.headers["Content-Type"], "Content-Length": str(len(body))}


def read_media_file_code(response: httpx.Response) -> str:
    """Return the code of an uploaded media file.

    Args:
        response: The response of the media upload request.

    Returns:
        The value of the ``asset-media-file-code`` header.

    Raises:
        MediaUploadError: If the header is missing or empty.

    Example:
        ```pycon
        >>> import httpx
        >>> from akeneo_client.utils.media import read_media_file_code
        >>> read_media_file_code(
        ...     httpx.Response(201, headers={"asset-media-file-code": "a/b/c/image.jpg"})
        ... )
        'a/b/c/image.jpg'

        ```
    """
    code = response.headers.get(MEDIA_FILE_CODE_HEADER, "").strip()
    if not code:
        raise MediaUploadError(response=response)
    return code
