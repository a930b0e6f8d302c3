from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


COPY_SUFFIX = "_copy"
DEFAULT_PAYMENT_METHOD = "Cash"


class LineItem(BaseModel):
    """A product line in an order."""

    model_config = ConfigDict(validate_assignment=True)

    name: str
    price: Decimal = Field(ge=0)
    quantity: int = Field(ge=0)

    @property
    def total(self) -> Decimal:
        return self.price * self.quantity

    def clone(self) -> LineItem:
        return LineItem(name=self.name, price=self.price, quantity=self.quantity)

    def __str__(self) -> str:
        return f"{self.name} (price: {self.price:.2f}, quantity: {self.quantity}, total: {self.total:.2f})"


class Discount(BaseModel):
    """A percentage discount applied to an order total."""

    model_config = ConfigDict(validate_assignment=True)

    label: str
    percentage: Decimal

    def apply(self, amount: Decimal) -> Decimal:
        return amount * (1 - self.percentage / 100)

    def clone(self) -> Discount:
        return Discount(label=self.label, percentage=self.percentage)

    def __str__(self) -> str:
        return f"{self.label} ({self.percentage}%)"


class Order(BaseModel):
    """
    Order aggregate.

    The total is the sum of line totals plus delivery, with the discount
    (if any) applied to that post-delivery amount. `duplicate` returns a
    deep copy that shares no mutable state with the original.
    """

    model_config = ConfigDict(validate_assignment=True)

    order_id: str
    items: List[LineItem] = Field(default_factory=list)
    delivery_cost: Decimal = Decimal("0")
    discount: Optional[Discount] = None
    payment_method: str = DEFAULT_PAYMENT_METHOD

    def add_item(self, item: LineItem):
        self.items.append(item)

    def remove_items_named(self, name: str):
        """Remove every item called `name`; no-op if there is none."""
        self.items[:] = [item for item in self.items if item.name != name]

    def set_delivery_cost(self, delivery_cost: Decimal):
        self.delivery_cost = delivery_cost

    def set_discount(self, discount: Optional[Discount]):
        self.discount = discount

    def set_payment_method(self, payment_method: str):
        self.payment_method = payment_method

    def subtotal(self) -> Decimal:
        return sum((item.total for item in self.items), Decimal("0"))

    def compute_total(self) -> Decimal:
        total = self.subtotal() + self.delivery_cost
        if self.discount is not None:
            total = self.discount.apply(total)
        return total

    def duplicate(self) -> Order:
        """
        Create an independent copy of this order.

        Items and the discount are cloned one by one, so changes made to
        the copy never reach the original and vice versa.
        """
        return Order(
            order_id=f"{self.order_id}{COPY_SUFFIX}",
            items=[item.clone() for item in self.items],
            delivery_cost=self.delivery_cost,
            discount=self.discount.clone() if self.discount is not None else None,
            payment_method=self.payment_method,
        )
