# services/legacy_pricing.py
"""
legacy_pricing.py

The monolithic way of computing a discount, kept next to pricing_service.py
for comparison.

Every new discount type means editing apply_discount_by_type() itself
(the "vip" branch below was added exactly that way), and each branch can
only be tested through this one function. pricing_service.py gets the
same results with one class per discount and a registry.

Not used by CheckoutService.
"""

from models.order import Order


def apply_discount_by_type(order: Order, discount_type: str) -> float:
    if discount_type == "blackfriday":
        return order.total * 0.5
    elif discount_type == "member":
        return order.total * 0.1
    elif discount_type == "student":
        return order.total * 0.2
    elif discount_type == "senior":
        return order.total * 0.15
    elif discount_type == "vip":
        return order.total * 0.25
    return 0.0
