"""
Shared fixtures for the checkout tests.
"""
import logging

import pytest

from data.repository import DataRepository
from models.order import Order
from services import pricing_service
from services.checkout_service import CheckoutService


@pytest.fixture
def repo(tmp_path):
    """Repository writing into a throwaway storage folder"""
    return DataRepository(tmp_path / "storage")


@pytest.fixture
def checkout_service(repo):
    return CheckoutService(repo)


@pytest.fixture
def laptop_and_mouse():
    order = Order()
    order.add_item("Laptop", 999.99)
    order.add_item("Mouse", 29.99)
    return order


@pytest.fixture
def isolated_registry(monkeypatch):
    """Strategies registered inside a test disappear afterwards"""
    monkeypatch.setattr(pricing_service, "_REGISTRY", dict(pricing_service._REGISTRY))
    return pricing_service._REGISTRY


@pytest.fixture
def clean_logger():
    """Fresh "checkout" logger handlers, restored after the test"""
    logger = logging.getLogger("checkout")
    old_handlers = list(logger.handlers)
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = old_handlers
