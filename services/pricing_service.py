# services/pricing_service.py

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Tuple, Type

from models.order import Order

logger = logging.getLogger("checkout.pricing")


class StrategyNotImplementedError(NotImplementedError):
    # Raised when the abstract apply() is reached instead of a concrete one.
    pass


class DiscountStrategy(ABC):
    #Abstract base class for all discount strategies.
    #A strategy only looks at the order total and returns the amount to take off.

    key: str = ""
    label: str = ""

    @abstractmethod
    def apply(self, order: Order) -> float:
        raise StrategyNotImplementedError("apply() method must be implemented")


class PercentageDiscount(DiscountStrategy):
    # Takes a fixed percentage of the order total.
    # rate: e.g. 0.10 means 10% off

    rate: float = 0.0

    def __init__(self, rate: float | None = None):
        if rate is not None:
            self.rate = rate
        if not 0.0 <= self.rate <= 1.0:
            raise ValueError("The discount rate must be between 0 and 1.")

    def apply(self, order):
        return order.total * self.rate

    def __repr__(self):
        return f"{type(self).__name__}(rate={self.rate})"


class NoDiscount(PercentageDiscount):
    key = "none"
    label = "No Discount"
    rate = 0.0

    def apply(self, order):
        return 0.0


class BlackFridayDiscount(PercentageDiscount):
    key = "blackfriday"
    label = "Black Friday (50%)"
    rate = 0.5


class MemberDiscount(PercentageDiscount):
    key = "member"
    label = "Member (10%)"
    rate = 0.1


class StudentDiscount(PercentageDiscount):
    key = "student"
    label = "Student (20%)"
    rate = 0.2


class SeniorDiscount(PercentageDiscount):
    key = "senior"
    label = "Senior (15%)"
    rate = 0.15


class DiscountType(str, Enum):
    NONE = "none"
    BLACK_FRIDAY = "blackfriday"
    MEMBER = "member"
    STUDENT = "student"
    SENIOR = "senior"


# key -> strategy class, in the order they show up in the selector
_REGISTRY: Dict[str, Type[DiscountStrategy]] = {}


def _normalize_key(key) -> str:
    if key is None:
        return ""
    if isinstance(key, DiscountType):
        return key.value
    return str(key).strip().lower()


def register_strategy(key: str, strategy_cls: Type[DiscountStrategy]) -> None:
    """
    Make a new discount selectable by key.

    New discounts are added here instead of editing get_discount_strategy(),
    e.g.

        class VipDiscount(PercentageDiscount):
            key = "vip"
            label = "VIP (25%)"
            rate = 0.25

        register_strategy("vip", VipDiscount)

    Registration is process-wide: the key stays selectable for every later
    lookup and every CheckoutService in the process. Re-registering a key
    replaces the previous class.
    """
    if not (isinstance(strategy_cls, type) and issubclass(strategy_cls, DiscountStrategy)):
        raise TypeError(f"{strategy_cls!r} is not a DiscountStrategy subclass")
    normalized = _normalize_key(key)
    if not normalized:
        raise ValueError("The discount key must not be empty.")
    _REGISTRY[normalized] = strategy_cls
    logger.debug(f"Registered discount strategy {normalized} -> {strategy_cls.__name__}")


def get_discount_strategy(key) -> DiscountStrategy:
    # Unknown or missing keys fall back to NoDiscount, nothing is raised.
    strategy_cls = _REGISTRY.get(_normalize_key(key))
    if strategy_cls is None:
        logger.debug(f"Unknown discount key {key!r}, using no discount")
        return NoDiscount()
    return strategy_cls()


def available_strategies() -> List[Tuple[str, str]]:
    # (key, label) pairs for the selector widget.
    return [(key, cls.label or key) for key, cls in _REGISTRY.items()]


def key_for_label(label: str) -> str:
    # Selector label back to its key. Unknown labels are returned as-is,
    # get_discount_strategy() then turns them into NoDiscount.
    for key, cls in _REGISTRY.items():
        if (cls.label or key) == label:
            return key
    return label


def apply_discount(order: Order, strategy: DiscountStrategy) -> float:
    # Polymorphic dispatch, no branching on the discount type.
    return strategy.apply(order)


for _cls in (NoDiscount, BlackFridayDiscount, MemberDiscount, StudentDiscount, SeniorDiscount):
    register_strategy(_cls.key, _cls)
