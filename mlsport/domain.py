"""Product entity and the repository contract used by the service layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from bson import ObjectId


@dataclass
class Product:
    """A sports product as exposed by the API and stored in MongoDB."""

    id: str = ""
    object_id: ObjectId | None = None
    name: str = ""
    category: str = ""
    price: float = 0.0
    stock: int = 0
    brand: str = ""

    def to_json(self) -> dict[str, Any]:
        """Return the JSON representation; the database identifier is not exposed."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "price": self.price,
            "stock": self.stock,
            "brand": self.brand,
        }

    def to_document(self) -> dict[str, Any]:
        """Return the MongoDB document; ``_id`` is omitted when unset."""
        document: dict[str, Any] = {}
        if self.object_id is not None:
            document["_id"] = self.object_id
        document.update(
            name=self.name,
            category=self.category,
            price=self.price,
            stock=self.stock,
            brand=self.brand,
        )
        return document


def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"field {key!r} must be a string")
    return value


def _price(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError("field 'price' must be a number")
    return float(value)


def _stock(value: Any, *, allow_integral_float: bool) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise TypeError("field 'stock' must be an integer")
    if isinstance(value, int):
        return value
    if allow_integral_float and isinstance(value, float) and value.is_integer():
        return int(value)
    raise TypeError("field 'stock' must be an integer")


def product_from_json(data: Any) -> Product:
    """Build a product from a decoded JSON body, rejecting ill-typed fields."""
    if not isinstance(data, Mapping):
        raise TypeError("product body must be a JSON object")
    return Product(
        id=_text(data, "id"),
        name=_text(data, "name"),
        category=_text(data, "category"),
        price=_price(data.get("price")),
        stock=_stock(data.get("stock"), allow_integral_float=False),
        brand=_text(data, "brand"),
    )


def product_from_document(document: Mapping[str, Any]) -> Product:
    """Build a product from a stored MongoDB document."""
    if not isinstance(document, Mapping):
        raise TypeError("document must be a mapping")
    object_id = document.get("_id")
    if object_id is not None and not isinstance(object_id, ObjectId):
        raise TypeError("field '_id' must be an ObjectId")
    return Product(
        id=str(object_id) if object_id is not None else "",
        object_id=object_id,
        name=_text(document, "name"),
        category=_text(document, "category"),
        price=_price(document.get("price")),
        stock=_stock(document.get("stock"), allow_integral_float=True),
        brand=_text(document, "brand"),
    )


class ProductRepository(ABC):
    """Storage operations on products."""

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Store a new product and return it with its identifier set."""

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product."""

    @abstractmethod
    def find_by_id(self, product_id: str) -> Product:
        """Return the product with the given identifier."""

    @abstractmethod
    def find_by_category(self, category: str) -> list[Product]:
        """Return the products of one category."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Replace a stored product with the given one."""

    @abstractmethod
    def patch(self, product_id: str, fields: Mapping[str, Any]) -> None:
        """Set only the given fields on a stored product."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product."""

    @abstractmethod
    def get_metrics(self) -> dict[str, Any] | None:
        """Return aggregate figures over all products."""

    @abstractmethod
    def get_categories(self) -> list[str]:
        """Return the distinct categories, sorted."""