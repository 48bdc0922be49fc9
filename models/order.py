import math
from dataclasses import dataclass, field
# Order model: the line items in the cart and their running total.
@dataclass
class OrderItem:
    name: str
    price: float

@dataclass
class Order:
    items: list[OrderItem] = field(default_factory=list, init=False)
    total: float = field(default=0.0, init=False)

    @classmethod
    def from_products(cls, products) -> "Order":
        # Build a fresh order holding every product of the catalog once.
        order = cls()
        for product in products:
            order.add_item(product.name, product.price)
        return order

    def add_item(self, name: str, price: float):
        if not math.isfinite(price) or price < 0:
            raise ValueError("The price must be a non-negative number.")
        self.items.append(OrderItem(name, price))
        self.total += price

    def calculate_total(self) -> float:
        # Recompute from the items, should always match self.total
        return sum(item.price for item in self.items)
