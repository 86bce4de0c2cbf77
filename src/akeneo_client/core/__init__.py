r"""Core shared logic for the sync and async clients.

This module contains the functionality used by both ``AkeneoClient``
and ``AsyncAkeneoClient``. The configuration and validation helpers
are re-exported here; the request builders and the brand retry decision
live in ``request_logic`` and ``retry_logic``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_TIMEOUT",
    "GRANT_TYPE",
    "MEDIA_FILE_CODE_HEADER",
    "PATCH_TIMEOUT",
    "AkeneoConfig",
    "validate_config_fields",
    "validate_timeout",
    "validate_token_payload",
]

from akeneo_client.core.config import (
    DEFAULT_TIMEOUT,
    GRANT_TYPE,
    MEDIA_FILE_CODE_HEADER,
    PATCH_TIMEOUT,
    AkeneoConfig,
)
from akeneo_client.core.validation import (
    validate_config_fields,
    validate_timeout,
    validate_token_payload,
)
