"""Product use cases on top of a repository."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from mlsport.domain import Product, ProductRepository


class ProductService:
    """Application operations on products, backed by a repository."""

    def __init__(self, repo: ProductRepository) -> None:
        self.repo = repo

    def create(self, product: Product) -> Product:
        return self.repo.create(product)

    def get_all(self) -> list[Product]:
        return self.repo.find_all()

    def get_by_id(self, product_id: str) -> Product:
        return self.repo.find_by_id(product_id)

    def get_categories(self) -> list[str]:
        return self.repo.get_categories()

    def get_by_category(self, category: str) -> list[Product]:
        return self.repo.find_by_category(category)

    def update(self, product: Product) -> None:
        self.repo.update(product)

    def patch(self, product_id: str, fields: Mapping[str, Any]) -> None:
        self.repo.patch(product_id, fields)

    def delete(self, product_id: str) -> None:
        self.repo.delete(product_id)

    def get_metrics(self) -> dict[str, Any] | None:
        return self.repo.get_metrics()