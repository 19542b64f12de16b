# storefront/models/product.py

"""Product record decoded from the catalog API."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A single catalog product. Immutable once decoded."""

    id: int
    title: str
    price: float
    description: str
    category: str
    image: str
