r"""Validation utilities for the client configuration and the API
responses.

This module provides validation functions that check values meet the
required constraints before they are used to build requests, and that
decoded response payloads have the shape the client relies on.
"""

from __future__ import annotations

__all__ = ["validate_config_fields", "validate_timeout", "validate_token_payload"]

from typing import TYPE_CHECKING, Any

from akeneo_client.exceptions import InvalidAuthenticationResponseError

if TYPE_CHECKING:
    from collections.abc import Mapping

    import httpx

TOKEN_FIELDS = ("access_token", "refresh_token")


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Check the timeout given to a client before it creates its
    ``httpx`` client.

    An ``httpx.Timeout`` carries its own per-phase settings and is
    passed through unchecked. A number is the overall budget, in
    seconds, for each PIM response, so it has to be positive.

    Args:
        timeout: A number of seconds, or an ``httpx.Timeout``.

    Raises:
        ValueError: If ``timeout`` is a number that is not positive.

    Example:
        ```pycon
        >>> from akeneo_client.core.validation import validate_timeout
        >>> validate_timeout(5)
        >>> validate_timeout(-1.5)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got -1.5

        ```
    """
    if not isinstance(timeout, (int, float)):
        return
    if timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_config_fields(**fields: Any) -> None:
    """Validate that every configuration field is a non-empty string.

    Args:
        **fields: The configuration fields, keyed by name.

    Raises:
        ValueError: If a field is not a string or is blank.

    Example:
        ```pycon
        >>> from akeneo_client.core.validation import validate_config_fields
        >>> validate_config_fields(host="pim.example.com", username="john")
        >>> validate_config_fields(host="")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: host must be a non-empty string, got ''

        ```
    """
    for name, value in fields.items():
        if not isinstance(value, str) or not value.strip():
            msg = f"{name} must be a non-empty string, got {value!r}"
            raise ValueError(msg)


def validate_token_payload(payload: Any) -> Mapping[str, Any]:
    """Validate the decoded body of a token endpoint response.

    Args:
        payload: The decoded JSON body.

    Returns:
        The payload, once checked to be a mapping holding both
            ``access_token`` and ``refresh_token``.

    Raises:
        InvalidAuthenticationResponseError: If the payload is not a
            mapping or misses one of the token fields.
    """
    if not isinstance(payload, dict) or any(field not in payload for field in TOKEN_FIELDS):
        raise InvalidAuthenticationResponseError(payload=payload)
    return payload
