r"""Contain utility functions."""

from __future__ import annotations

__all__ = [
    "encode_multipart_file",
    "media_filename",
    "read_media_file_code",
    "resolve_media_extension",
]

from akeneo_client.utils.media import (
    encode_multipart_file,
    media_filename,
    read_media_file_code,
    resolve_media_extension,
)
