"""HTTP-facing product operations that turn service results into JSON bodies and status codes."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from http import HTTPStatus
from typing import Any

from mlsport.domain import Product, product_from_json
from mlsport.service import ProductService

logger = logging.getLogger(__name__)

Reply = tuple[Any, int]

_INVALID_FORMAT = {"error": "formato inválido"}


def _products_json(products: list[Product] | None) -> list[dict[str, Any]] | None:
    if products is None:
        return None
    return [product.to_json() for product in products]


def _error(message: str, status: HTTPStatus) -> Reply:
    return {"error": message}, status


class ProductHandler:
    """Answers product requests with a JSON-ready body and an HTTP status code."""

    def __init__(self, service: ProductService) -> None:
        self.service = service

    def get_all(self) -> Reply:
        """List every product, or a message when there are none."""
        try:
            products = self.service.get_all()
        except Exception:
            logger.exception("Listing products failed")
            return _error("error obteniendo productos", HTTPStatus.INTERNAL_SERVER_ERROR)
        if not products:
            return {"message": "no hay productos disponibles", "data": []}, HTTPStatus.OK
        return _products_json(products), HTTPStatus.OK

    def get_by_id(self, product_id: str) -> Reply:
        """Return one product, or 404 when it cannot be fetched."""
        try:
            product = self.service.get_by_id(product_id)
        except Exception:
            return _error("producto no encontrado", HTTPStatus.NOT_FOUND)
        return product.to_json(), HTTPStatus.OK

    def create(self, payload: Any) -> Reply:
        """Store a product built from a decoded JSON body."""
        try:
            product = product_from_json(payload)
        except (TypeError, ValueError):
            return _INVALID_FORMAT, HTTPStatus.BAD_REQUEST
        try:
            created = self.service.create(product)
        except Exception:
            logger.exception("Creating a product failed")
            return _error("no se pudo crear el producto", HTTPStatus.INTERNAL_SERVER_ERROR)
        return created.to_json(), HTTPStatus.CREATED

    def update(self, product_id: str, payload: Any) -> Reply:
        """Replace the product with the given identifier by the body's values."""
        try:
            product = product_from_json(payload)
        except (TypeError, ValueError):
            return _INVALID_FORMAT, HTTPStatus.BAD_REQUEST
        product.id = product_id
        try:
            self.service.update(product)
        except Exception:
            logger.exception("Updating product %s failed", product_id)
            return _error("no se pudo actualizar", HTTPStatus.INTERNAL_SERVER_ERROR)
        return product.to_json(), HTTPStatus.OK

    def patch(self, product_id: str, payload: Any) -> Reply:
        """Set only the fields present in the body."""
        if not isinstance(payload, Mapping):
            return _INVALID_FORMAT, HTTPStatus.BAD_REQUEST
        try:
            self.service.patch(product_id, payload)
        except Exception:
            logger.exception("Patching product %s failed", product_id)
            return _error("no se pudo aplicar el patch", HTTPStatus.INTERNAL_SERVER_ERROR)
        return {"message": "actualizado"}, HTTPStatus.OK

    def delete(self, product_id: str) -> Reply:
        """Remove a product."""
        try:
            self.service.delete(product_id)
        except Exception:
            logger.exception("Deleting product %s failed", product_id)
            return _error("no se pudo eliminar", HTTPStatus.INTERNAL_SERVER_ERROR)
        return {"message": "eliminado"}, HTTPStatus.OK

    def get_by_category(self, category: str) -> Reply:
        """List the products of one category."""
        try:
            products = self.service.get_by_category(category)
        except Exception:
            logger.exception("Filtering by category %r failed", category)
            return _error(
                "no se pudieron filtrar los productos", HTTPStatus.INTERNAL_SERVER_ERROR
            )
        return _products_json(products), HTTPStatus.OK

    def get_categories(self) -> Reply:
        """List the distinct categories, or a message when there are none."""
        try:
            categories = self.service.get_categories()
        except Exception:
            logger.exception("Listing categories failed")
            return _error(
                "no se pudieron obtener las categorías", HTTPStatus.INTERNAL_SERVER_ERROR
            )
        if not categories:
            return {"message": "no hay categorías", "data": []}, HTTPStatus.OK
        return list(categories), HTTPStatus.OK

    def get_metrics(self) -> Reply:
        """Return the aggregate product metrics."""
        try:
            metrics = self.service.get_metrics()
        except Exception:
            logger.exception("Computing metrics failed")
            return _error(
                "no se pudieron calcular las métricas", HTTPStatus.INTERNAL_SERVER_ERROR
            )
        return metrics, HTTPStatus.OK

    def get_dashboard(self) -> Reply:
        """Fetch products and metrics concurrently and return both together."""
        with ThreadPoolExecutor(max_workers=2) as pool:
            products_future = pool.submit(self.service.get_all)
            metrics_future = pool.submit(self.service.get_metrics)

        error: BaseException | None = None
        products: list[Product] | None = None
        metrics: dict[str, Any] | None = None
        try:
            products = products_future.result()
        except Exception as exc:
            error = exc
        try:
            metrics = metrics_future.result()
        except Exception as exc:
            error = exc

        if error is not None:
            return {"error": str(error)}, HTTPStatus.INTERNAL_SERVER_ERROR
        body = {"Products": _products_json(products), "Metrics": metrics, "Err": None}
        return body, HTTPStatus.OK