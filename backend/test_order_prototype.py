from decimal import Decimal

import pytest
from pydantic import ValidationError

from patternkit.schemas.order import COPY_SUFFIX, DEFAULT_PAYMENT_METHOD, Discount, LineItem, Order
from patternkit.services.order_summary import describe_order


@pytest.fixture
def order():
    order = Order(order_id="ORD-001")
    order.add_item(LineItem(name="Laptop", price=450000, quantity=1))
    order.add_item(LineItem(name="Mouse", price=15000, quantity=2))
    order.add_item(LineItem(name="Keyboard", price=25000, quantity=1))
    order.set_delivery_cost(5000)
    order.set_discount(Discount(label="New Year", percentage=10))
    order.set_payment_method("Bank transfer")
    return order


def test_new_order_defaults():
    order = Order(order_id="ORD-002")
    assert order.items == []
    assert order.delivery_cost == 0
    assert order.discount is None
    assert order.payment_method == DEFAULT_PAYMENT_METHOD
    assert order.compute_total() == 0


def test_line_item_total():
    item = LineItem(name="Mouse", price=Decimal("15000.50"), quantity=2)
    assert item.total == Decimal("30001.00")


def test_line_item_rejects_negative_values():
    with pytest.raises(ValidationError):
        LineItem(name="Broken", price=-1, quantity=1)
    with pytest.raises(ValidationError):
        LineItem(name="Broken", price=1, quantity=-1)


def test_discount_applies_to_amount():
    assert Discount(label="Half", percentage=50).apply(Decimal("200")) == 100


def test_total_discounts_post_delivery_amount(order):
    assert order.subtotal() == 505000
    assert order.compute_total() == 459000


def test_total_without_discount(order):
    order.set_discount(None)
    assert order.compute_total() == 510000


def test_remove_items_named_removes_all_matches(order):
    order.add_item(LineItem(name="Mouse", price=9000, quantity=1))
    order.remove_items_named("Mouse")
    assert [item.name for item in order.items] == ["Laptop", "Keyboard"]


def test_remove_items_named_without_match_is_noop(order):
    order.remove_items_named("Monitor")
    assert len(order.items) == 3


def test_duplicate_copies_fields(order):
    copy = order.duplicate()

    assert copy.order_id == "ORD-001" + COPY_SUFFIX
    assert copy.order_id != order.order_id
    assert copy.delivery_cost == order.delivery_cost
    assert copy.payment_method == order.payment_method
    assert copy.discount == order.discount
    assert copy.discount is not order.discount
    assert copy.items == order.items
    assert all(a is not b for a, b in zip(copy.items, order.items))
    assert copy.compute_total() == order.compute_total()


def test_duplicate_without_discount_stays_without():
    order = Order(order_id="ORD-003")
    assert order.duplicate().discount is None


def test_duplicate_is_independent(order):
    copy = order.duplicate()

    copy.remove_items_named("Mouse")
    copy.set_discount(Discount(label="Club", percentage=5))
    copy.set_payment_method("Card")
    copy.items[0].quantity = 3

    assert copy.subtotal() == 450000 * 3 + 25000
    assert [item.name for item in order.items] == ["Laptop", "Mouse", "Keyboard"]
    assert order.items[0].quantity == 1
    assert order.discount.percentage == 10
    assert order.payment_method == "Bank transfer"
    assert order.compute_total() == 459000


def test_mutating_original_does_not_touch_duplicate(order):
    copy = order.duplicate()

    order.add_item(LineItem(name="Monitor", price=100000, quantity=1))
    order.discount.percentage = Decimal("50")

    assert len(copy.items) == 3
    assert copy.discount.percentage == 10


def test_duplicate_end_to_end(order):
    copy = order.duplicate()
    copy.remove_items_named("Mouse")
    copy.set_discount(Discount(label="Club", percentage=5))

    assert copy.compute_total() == 456000
    assert order.compute_total() == 459000


def test_describe_order(order):
    text = describe_order(order)
    assert text.splitlines()[0] == "=== ORDER: ORD-001 ==="
    assert "  - Mouse (price: 15000.00, quantity: 2, total: 30000.00)" in text
    assert "Discount: New Year (10%)" in text
    assert "TOTAL: 459000" in text
