r"""Unit tests for AkeneoConfig dataclass.

This file contains tests for the AkeneoConfig dataclass in
core/config.py.
"""

from __future__ import annotations

import dataclasses

import pytest

from akeneo_client.core import (
    DEFAULT_TIMEOUT,
    GRANT_TYPE,
    MEDIA_FILE_CODE_HEADER,
    PATCH_TIMEOUT,
    AkeneoConfig,
)

FIELDS = {
    "host": "my-test-host",
    "username": "john.doe",
    "password": "abcd3fgh1jk",
    "oauth_client_id": "clientId1",
    "oauth_client_secret": "clientSecret1",
}

##################################
#     Tests for AkeneoConfig     #
##################################


def test_akeneo_config_fields() -> None:
    """Test that AkeneoConfig stores the connection settings."""
    config = AkeneoConfig(**FIELDS)
    assert dataclasses.asdict(config) == FIELDS


def test_akeneo_config_base_url() -> None:
    assert AkeneoConfig(**FIELDS).base_url == "https://my-test-host"


@pytest.mark.parametrize(
    "host",
    [
        "my-test-host",
        "https://my-test-host",
        "http://my-test-host",
        "https://my-test-host/",
        " my-test-host ",
    ],
)
def test_akeneo_config_normalizes_host(host: str) -> None:
    """Test that the scheme and trailing slashes are removed from the
    host."""
    assert AkeneoConfig(**{**FIELDS, "host": host}).host == "my-test-host"


def test_akeneo_config_is_immutable() -> None:
    config = AkeneoConfig(**FIELDS)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.host = "other-host"


@pytest.mark.parametrize("name", list(FIELDS))
@pytest.mark.parametrize("value", ["", "   ", None, 42])
def test_akeneo_config_rejects_missing_field(name: str, value: object) -> None:
    """Test that every field must be a non-empty string."""
    with pytest.raises(ValueError, match=rf"{name} must be a non-empty string"):
        AkeneoConfig(**{**FIELDS, name: value})


def test_akeneo_config_rejects_scheme_only_host() -> None:
    with pytest.raises(ValueError, match=r"host must be a non-empty string"):
        AkeneoConfig(**{**FIELDS, "host": "https://"})


def test_akeneo_config_repr_hides_secrets() -> None:
    text = repr(AkeneoConfig(**FIELDS))
    assert "my-test-host" in text
    assert "abcd3fgh1jk" not in text
    assert "clientSecret1" not in text


def test_constants() -> None:
    assert GRANT_TYPE == "password"
    assert PATCH_TIMEOUT == 5.0
    assert DEFAULT_TIMEOUT > 0
    assert MEDIA_FILE_CODE_HEADER == "asset-media-file-code"
