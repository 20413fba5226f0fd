import pytest

from mlsport.domain import Product, ProductRepository
from mlsport.service import ProductService


class MockRepo(ProductRepository):
    def __init__(self):
        self.created = []
        self.updated = []
        self.patched = []
        self.deleted = []

    def create(self, product):
        product.id = "new-id"
        self.created.append(product)
        return product

    def find_all(self):
        return [Product(name="Balón")]

    def find_by_id(self, product_id):
        return Product(id=product_id, name="Zapatilla")

    def find_by_category(self, category):
        return [Product(category=category)]

    def update(self, product):
        self.updated.append(product)

    def patch(self, product_id, fields):
        self.patched.append((product_id, fields))

    def delete(self, product_id):
        self.deleted.append(product_id)

    def get_metrics(self):
        return {
            "total_products": 3,
            "top_categories": ["Ropa", "Calzado"],
            "total_stock": 200,
            "average_price": 89.5,
        }

    def get_categories(self):
        return ["Ropa", "Calzado"]


class ErrorMockRepo(ProductRepository):
    def create(self, product):
        raise RuntimeError("error simulado create")

    def find_all(self):
        raise RuntimeError("error simulado findall")

    def find_by_id(self, product_id):
        raise RuntimeError("error simulado findbyid")

    def find_by_category(self, category):
        raise RuntimeError("error simulado findbycategory")

    def update(self, product):
        raise RuntimeError("error simulado update")

    def patch(self, product_id, fields):
        raise RuntimeError("error simulado patch")

    def delete(self, product_id):
        raise RuntimeError("error simulado delete")

    def get_metrics(self):
        raise RuntimeError("error simulado metrics")

    def get_categories(self):
        raise RuntimeError("error simulado categories")


def test_create_product():
    repo = MockRepo()
    service = ProductService(repo)
    product = Product(name="Nuevo Producto")
    created = service.create(product)
    assert created.name == "Nuevo Producto"
    assert repo.created == [product]


def test_create_product_error():
    with pytest.raises(RuntimeError, match="error simulado create"):
        ProductService(ErrorMockRepo()).create(Product(name="Nuevo Producto"))


def test_get_all():
    products = ProductService(MockRepo()).get_all()
    assert len(products) == 1
    assert products[0].name == "Balón"


def test_get_by_id():
    product = ProductService(MockRepo()).get_by_id("123")
    assert product.id == "123"
    assert product.name == "Zapatilla"


def test_get_by_category():
    products = ProductService(MockRepo()).get_by_category("Accesorios")
    assert products[0].category == "Accesorios"


def test_get_categories():
    assert ProductService(MockRepo()).get_categories() == ["Ropa", "Calzado"]


def test_get_metrics():
    data = ProductService(MockRepo()).get_metrics()
    assert data["total_products"] == 3
    assert "Ropa" in data["top_categories"]
    assert data["total_stock"] == 200
    assert data["average_price"] == 89.5


def test_update_product():
    repo = MockRepo()
    product = Product(id="123", name="Nuevo nombre")
    ProductService(repo).update(product)
    assert repo.updated == [product]


def test_update_product_error():
    with pytest.raises(RuntimeError) as excinfo:
        ProductService(ErrorMockRepo()).update(Product(id="123", name="Error"))
    assert str(excinfo.value) == "error simulado update"


def test_patch_product():
    repo = MockRepo()
    ProductService(repo).patch("123", {"price": 99.9})
    assert repo.patched == [("123", {"price": 99.9})]


def test_patch_product_error():
    with pytest.raises(RuntimeError) as excinfo:
        ProductService(ErrorMockRepo()).patch("123", {"price": 99.9})
    assert str(excinfo.value) == "error simulado patch"


def test_delete_product():
    repo = MockRepo()
    ProductService(repo).delete("123")
    assert repo.deleted == ["123"]


def test_delete_product_error():
    with pytest.raises(RuntimeError) as excinfo:
        ProductService(ErrorMockRepo()).delete("123")
    assert str(excinfo.value) == "error simulado delete"