from dataclasses import dataclass
# Product model representing one entry of the catalog.
@dataclass
class Product:
    name: str
    price: float


# sample catalog used when no products.json exists
DEFAULT_PRODUCTS: list[Product] = [
    Product("Laptop", 999.99),
    Product("Mouse", 29.99),
    Product("Keyboard", 79.99),
    Product("Monitor", 249.99),
    Product("Webcam", 49.99),
]
