r"""Typed records exchanged with the Akeneo REST API."""

from __future__ import annotations

__all__ = ["AuthenticationResponse", "PatchRequest", "Price", "Product", "ProductValue"]

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from akeneo_client.core.validation import validate_token_payload
from akeneo_client.exceptions import InvalidAuthenticationResponseError

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True)
class AuthenticationResponse:
    """Tokens returned by the OAuth token endpoint.

    Args:
        access_token: The bearer token to authorize API requests.
        refresh_token: The token to request a new access token.
    """

    access_token: str
    refresh_token: str

    @classmethod
    def from_payload(cls, payload: Any) -> AuthenticationResponse:
        """Build the authentication result from the decoded token
        endpoint body.

        Args:
            payload: The decoded JSON body.

        Returns:
            The tokens. Any other field of the payload is ignored.

        Raises:
            InvalidAuthenticationResponseError: If a token field is
                missing.

        Example:
            ```pycon
            >>> from akeneo_client.models import AuthenticationResponse
            >>> AuthenticationResponse.from_payload(
            ...     {"access_token": "ABCD1234", "refresh_token": "4321DCBA", "expires_in": 3600}
            ... )
            AuthenticationResponse(access_token='ABCD1234', refresh_token='4321DCBA')

            ```
        """
        payload = validate_token_payload(payload)
        return cls(access_token=payload["access_token"], refresh_token=payload["refresh_token"])

    @classmethod
    def from_response(cls, response: httpx.Response) -> AuthenticationResponse:
        """Build the authentication result from a token endpoint
        response.

        Args:
            response: A successful token endpoint response.

        Returns:
            The tokens.

        Raises:
            InvalidAuthenticationResponseError: If the body is not JSON
                or misses a token field.
        """
        try:
            payload = response.json()
        except ValueError as exc:
            raise InvalidAuthenticationResponseError(payload=response.text) from exc
        return cls.from_payload(payload)


@dataclass
class Price:
    """An amount in a given currency."""

    amount: str
    currency: str

    def to_dict(self) -> dict[str, str]:
        """Serialize the price as the PIM expects it."""
        return {"amount": self.amount, "currency": self.currency}


@dataclass
class ProductValue:
    """A product attribute value, optionally scoped to a locale and a
    channel.

    Args:
        data: The attribute payload: a string, a list of strings, or a
            list of ``Price``.
        locale: The locale code, or ``None`` for a non-localizable
            attribute.
        scope: The channel code, or ``None`` for a non-scopable
            attribute.
    """

    data: Any
    locale: str | None = None
    scope: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize the value, with its prices serialized too."""
        data = self.data
        if isinstance(data, list):
            data = [item.to_dict() if isinstance(item, Price) else item for item in data]
        return {"locale": self.locale, "scope": self.scope, "data": data}


@dataclass
class Product:
    """A product record of the PIM.

    Args:
        identifier: The unique identifier of the product.
        family: The family code.
        groups: The codes of the groups the product belongs to.
        categories: The category codes.
        enabled: Whether the product is enabled.
        values: The attribute values keyed by attribute name
            (``name``, ``model_number``, ``images``, ``brand``,
            ``price``, ``description``...).
        parent: The code of the parent product model, if any.

    Example:
        ```pycon
        >>> from akeneo_client.models import Product, ProductValue
        >>> product = Product(
        ...     identifier="sku-1",
        ...     family="shoes",
        ...     values={"name": [ProductValue(data="Runner")]},
        ... )
        >>> product.to_dict()["values"]
        {'name': [{'locale': None, 'scope': None, 'data': 'Runner'}]}

        ```
    """

    identifier: str
    family: str
    groups: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    enabled: bool = True
    values: dict[str, list[ProductValue]] = field(default_factory=dict)
    parent: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render the product as the JSON body of a PATCH request.

        Returns:
            The product payload. ``parent`` is only present when set.
        """
        body: dict[str, Any] = {
            "identifier": self.identifier,
            "family": self.family,
            "groups": list(self.groups),
            "categories": list(self.categories),
            "enabled": self.enabled,
            "values": {
                name: [value.to_dict() for value in values] for name, values in self.values.items()
            },
        }
        if self.parent is not None:
            body["parent"] = self.parent
        return body


@dataclass(frozen=True)
class PatchRequest:
    """The data of a single PATCH request against the REST API.

    Args:
        entity: The resource type, e.g. ``products`` or
            ``asset-families/{family}/assets``.
        id: The identifier of the entity instance.
        body: The JSON body.
        access_token: The bearer token.
    """

    entity: str
    id: str
    body: Any
    access_token: str

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(entity={self.entity!r}, id={self.id!r})"
