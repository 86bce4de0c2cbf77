r"""Shared retry decision logic for sync and async clients.

A product PATCH is retried at most once, and only when the PIM rejects
the product because its ``brand`` value references an unknown record.
The retry sends the same product without the ``brand`` attribute. This
module contains the classification of the failure and the transform of
the input, shared by both clients.

The classification matches the wording of the PIM error messages, so a
change of wording upstream silently disables the retry.
"""

from __future__ import annotations

__all__ = ["BRAND_ATTRIBUTE", "is_brand_validation_error", "strip_brand"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from akeneo_client.models import Product

if TYPE_CHECKING:
    from collections.abc import MutableMapping

logger: logging.Logger = logging.getLogger(__name__)

BRAND_ATTRIBUTE = "brand"

VALIDATION_STATUS_CODE = 422
VALIDATION_FAILED_MESSAGE = "Validation failed"
INVALID_BRAND_MESSAGE = 'Property "brand" expects a valid record code'


def is_brand_validation_error(exc: BaseException) -> bool:
    """Determine if an error is the rejection of an unknown brand
    record.

    The error matches when it is an ``httpx.HTTPStatusError`` whose JSON
    body has ``code`` 422, a ``message`` containing
    ``Validation failed``, and a first ``errors`` entry whose
    ``message`` contains ``Property "brand" expects a valid record
    code``. Bodies that are not JSON or have another shape never match.

    Args:
        exc: The error raised by the PATCH request.

    Returns:
        ``True`` if the PATCH should be retried without the brand,
            otherwise ``False``.

    Example:
        ```pycon
        >>> import httpx
        >>> from akeneo_client.core.retry_logic import is_brand_validation_error
        >>> request = httpx.Request("PATCH", "https://pim.example.com/api/rest/v1/products/sku-1")
        >>> response = httpx.Response(
        ...     422,
        ...     request=request,
        ...     json={
        ...         "code": 422,
        ...         "message": "Validation failed.",
        ...         "errors": [
        ...             {"property": "values", "message": 'Property "brand" expects a valid record code.'}
        ...         ],
        ...     },
        ... )
        >>> is_brand_validation_error(
        ...     httpx.HTTPStatusError("422", request=request, response=response)
        ... )
        True
        >>> is_brand_validation_error(ValueError("boom"))
        False

        ```
    """
    if not isinstance(exc, httpx.HTTPStatusError):
        return False
    try:
        payload = exc.response.json()
    except ValueError:
        return False
    if not isinstance(payload, dict):
        return False
    if str(payload.get("code")) != str(VALIDATION_STATUS_CODE):
        return False
    message = payload.get("message")
    if not isinstance(message, str) or VALIDATION_FAILED_MESSAGE not in message:
        return False
    errors = payload.get("errors")
    if not isinstance(errors, list) or not errors or not isinstance(errors[0], dict):
        return False
    first_message = errors[0].get("message")
    return isinstance(first_message, str) and INVALID_BRAND_MESSAGE in first_message


def strip_brand(
    product: Product | MutableMapping[str, Any],
) -> Product | MutableMapping[str, Any]:
    """Remove the brand attribute from the values of a product.

    The product is modified in place.

    Args:
        product: A ``Product`` or a serialized product.

    Returns:
        The same product, without brand.

    Example:
        ```pycon
        >>> from akeneo_client.core.retry_logic import strip_brand
        >>> strip_brand({"identifier": "sku-1", "values": {"brand": [], "name": []}})
        {'identifier': 'sku-1', 'values': {'name': []}}

        ```
    """
    values = product.values if isinstance(product, Product) else product.get("values")
    if isinstance(values, dict) and values.pop(BRAND_ATTRIBUTE, None) is not None:
        identifier = (
            product.identifier if isinstance(product, Product) else product.get("identifier")
        )
        logger.debug(f"Removed {BRAND_ATTRIBUTE!r} from the values of product {identifier!r}")
    return product
