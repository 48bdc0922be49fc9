# services/checkout_service.py

import logging
from dataclasses import dataclass, replace

from models.order import Order
from services.pricing_service import DiscountStrategy, apply_discount, get_discount_strategy

logger = logging.getLogger("checkout.service")


@dataclass(frozen=True)
class CheckoutSummary:
    subtotal: float
    discount: float
    total: float

    def as_display(self, currency: str = "$") -> dict[str, str]:
        # Formatted values for the summary labels.
        return {
            "subtotal": f"{currency}{self.subtotal:.2f}",
            "discount": f"-{currency}{self.discount:.2f}",
            "total": f"{currency}{self.total:.2f}",
        }


@dataclass(frozen=True)
class CheckoutState:
    # The active order and the selected discount. Operations return a new state.
    order: Order
    strategy: DiscountStrategy


class CheckoutService:
    def __init__(self, repo):
        self.repo = repo

    def _new_order(self) -> Order:
        products = self.repo.get_products()
        order = Order.from_products(products)
        logger.info(f"New order with {len(order.items)} items, subtotal {order.total:.2f}")
        return order

    def start(self, discount_key=None) -> CheckoutState:
        if discount_key is None:
            discount_key = self.repo.get_settings()["default_discount"]
        return CheckoutState(order=self._new_order(), strategy=get_discount_strategy(discount_key))

    def reset_order(self, state: CheckoutState) -> CheckoutState:
        # The order is replaced wholesale, the strategy is kept.
        return replace(state, order=self._new_order())

    def select_discount(self, state: CheckoutState, key) -> CheckoutState:
        strategy = get_discount_strategy(key)
        logger.info(f"Discount selected: {key!r} -> {type(strategy).__name__}")
        return replace(state, strategy=strategy)

    def summarize(self, state: CheckoutState) -> CheckoutSummary:
        subtotal = state.order.total
        discount = apply_discount(state.order, state.strategy)
        summary = CheckoutSummary(
            subtotal=subtotal,
            discount=discount,
            total=subtotal - discount,
        )
        logger.info(
            f"Summary: subtotal {summary.subtotal:.2f}, "
            f"discount {summary.discount:.2f}, total {summary.total:.2f}"
        )
        return summary
