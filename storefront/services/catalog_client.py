# storefront/services/catalog_client.py

"""Fetches one category's products from the catalog API."""

import json
import logging
import math
from typing import Any
from urllib.parse import quote

from curl_cffi import requests as curl_requests

from storefront.config.settings import Settings
from storefront.models.product import Product

_STRING_FIELDS = ("title", "description", "category", "image")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


class CatalogError(Exception):
    """Base class for errors raised while loading a category."""


class TransportError(CatalogError):
    """The request never produced a usable HTTP response."""


class DecodeError(CatalogError):
    """The response body is not a valid product list."""


class CatalogClient:
    """Single-endpoint client for ``/products/category/<category>``.

    One GET per call: no retries, no caching, no pagination.
    """

    def __init__(self, base_url: str | None = None) -> None:
        self.logger = logging.getLogger("storefront.catalog")
        self.settings = Settings()
        self.base_url = (base_url or self.settings.API_BASE_URL).rstrip("/")
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )

    def build_url(self, category: str) -> str:
        """Return the endpoint URL with *category* as one encoded segment."""
        segment = quote(category, safe="")
        return self.base_url + self.settings.CATEGORY_PATH.format(
            category=segment
        )

    def fetch(self, category: str) -> list[Product]:
        """Fetch and decode the products for *category*.

        Raises:
            TransportError: the request failed or returned a non-2xx status.
            DecodeError: the body is not JSON or does not match the schema.
        """
        url = self.build_url(category)
        self.logger.info("[catalog] GET %s", url)
        try:
            resp = self.session.get(
                url,
                headers=self.settings.DEFAULT_HEADERS,
                timeout=self.settings.REQUEST_TIMEOUT,
            )
        except Exception as exc:
            self.logger.warning(
                "[catalog] Request error for '%s': %s",
                category,
                exc,
                exc_info=True,
            )
            raise TransportError(f"Network error: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            self.logger.warning(
                "[catalog] HTTP %d for '%s'", resp.status_code, category
            )
            raise TransportError(
                f"Server responded with HTTP {resp.status_code}"
            )

        products = self.decode(resp.text)
        self.logger.info(
            "[catalog] Decoded %d products for '%s'",
            len(products),
            category,
        )
        return products

    @classmethod
    def decode(cls, body: str) -> list[Product]:
        """Decode a JSON array body into products, in response order."""
        try:
            data: Any = json.loads(body, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as exc:
            raise DecodeError(f"Invalid JSON in response: {exc}") from exc

        if not isinstance(data, list):
            raise DecodeError(
                f"Expected a JSON array, got {type(data).__name__}"
            )

        products: list[Product] = []
        seen_ids: set[int] = set()
        for index, item in enumerate(data):
            product = cls._parse_item(item, index)
            if product.id in seen_ids:
                raise DecodeError(
                    f"Duplicate product id {product.id} at index {index}"
                )
            seen_ids.add(product.id)
            products.append(product)
        return products

    @staticmethod
    def _parse_item(item: Any, index: int) -> Product:
        """Validate one array element and build a Product from it."""
        if not isinstance(item, dict):
            raise DecodeError(f"Item {index} is not an object")

        missing = [
            key
            for key in ("id", "price", *_STRING_FIELDS)
            if key not in item
        ]
        if missing:
            raise DecodeError(
                f"Item {index} is missing field(s): {', '.join(missing)}"
            )

        # bool is an int subclass; JSON true/false is never a valid id or price
        product_id = item["id"]
        if isinstance(product_id, bool) or not isinstance(product_id, int):
            raise DecodeError(f"Item {index} has a non-integer id")

        price = item["price"]
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise DecodeError(f"Item {index} has a non-numeric price")
        try:
            price = float(price)
        except OverflowError as exc:
            raise DecodeError(f"Item {index} has an out-of-range price") from exc
        if not math.isfinite(price):
            raise DecodeError(f"Item {index} has a non-finite price")

        for key in _STRING_FIELDS:
            if not isinstance(item[key], str):
                raise DecodeError(f"Item {index} field '{key}' is not a string")

        return Product(
            id=product_id,
            title=item["title"],
            price=price,
            description=item["description"],
            category=item["category"],
            image=item["image"],
        )
