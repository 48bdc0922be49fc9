"""
Tests for CheckoutService: explicit checkout state and the summary numbers.
"""
import pytest
from hypothesis import given, strategies as st

from models.order import Order
from models.product import Product
from services.checkout_service import CheckoutService, CheckoutState, CheckoutSummary
from services.pricing_service import (
    BlackFridayDiscount,
    NoDiscount,
    StudentDiscount,
    get_discount_strategy,
)


class TestCheckoutFlow:

    def test_start_uses_catalog_and_default_discount(self, checkout_service):
        state = checkout_service.start()

        assert len(state.order.items) == 5
        assert type(state.strategy) is NoDiscount

    def test_start_uses_configured_default_discount(self, repo, checkout_service):
        repo.save_settings({"default_discount": "student"})
        state = checkout_service.start()
        assert type(state.strategy) is StudentDiscount

    def test_start_with_explicit_key(self, checkout_service):
        state = checkout_service.start("blackfriday")
        assert type(state.strategy) is BlackFridayDiscount

    def test_select_discount_returns_new_state(self, checkout_service):
        state = checkout_service.start()
        selected = checkout_service.select_discount(state, "student")

        assert type(selected.strategy) is StudentDiscount
        assert selected.order is state.order
        # previous state is left alone
        assert type(state.strategy) is NoDiscount

    def test_select_unknown_discount_means_no_discount(self, checkout_service):
        state = checkout_service.select_discount(checkout_service.start("member"), "bogus")
        assert type(state.strategy) is NoDiscount
        assert checkout_service.summarize(state).discount == 0

    def test_reset_order_replaces_order_and_keeps_strategy(self, repo, checkout_service):
        state = checkout_service.start("senior")
        repo.save_products([Product("Mouse", 29.99)])

        reset = checkout_service.reset_order(state)

        assert reset.order is not state.order
        assert [item.name for item in reset.order.items] == ["Mouse"]
        assert reset.strategy is state.strategy

    def test_state_is_frozen(self, checkout_service):
        state = checkout_service.start()
        with pytest.raises(AttributeError):
            state.strategy = BlackFridayDiscount()


class TestSummary:

    def test_black_friday_example(self, repo, checkout_service):
        repo.save_products([Product("Laptop", 999.99), Product("Mouse", 29.99)])
        state = checkout_service.start("blackfriday")

        summary = checkout_service.summarize(state)

        assert summary.subtotal == pytest.approx(1029.98)
        assert summary.discount == pytest.approx(514.99)
        assert summary.total == pytest.approx(514.99)
        assert summary.as_display() == {
            "subtotal": "$1029.98",
            "discount": "-$514.99",
            "total": "$514.99",
        }

    @pytest.mark.parametrize("key", ["none", "blackfriday", "member", "student", "senior"])
    def test_empty_order(self, checkout_service, key):
        state = CheckoutState(order=Order(), strategy=get_discount_strategy(key))
        summary = checkout_service.summarize(state)
        assert summary == CheckoutSummary(subtotal=0, discount=0, total=0)

    @given(
        order_prices=st.lists(
            st.floats(min_value=0, max_value=100_000, allow_nan=False, allow_infinity=False),
            max_size=20,
        ),
        key=st.sampled_from(["none", "blackfriday", "member", "student", "senior", "unknown"]),
    )
    def test_total_is_subtotal_minus_discount(self, order_prices, key):
        order = Order()
        for i, price in enumerate(order_prices):
            order.add_item(f"item-{i}", price)
        service = CheckoutService(repo=None)

        summary = service.summarize(CheckoutState(order=order, strategy=get_discount_strategy(key)))

        assert summary.subtotal == order.total
        assert summary.total == summary.subtotal - summary.discount
        assert summary.total >= 0

    def test_display_with_other_currency(self):
        summary = CheckoutSummary(subtotal=10.0, discount=1.5, total=8.5)
        assert summary.as_display("€") == {
            "subtotal": "€10.00",
            "discount": "-€1.50",
            "total": "€8.50",
        }
