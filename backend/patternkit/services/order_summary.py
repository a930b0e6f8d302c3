from patternkit.schemas.order import Order


def describe_order(order: Order) -> str:
    """Human readable listing of an order and its total."""
    lines = [f"=== ORDER: {order.order_id} ===", "Items:"]
    lines.extend(f"  - {item}" for item in order.items)
    lines.append(f"Delivery cost: {order.delivery_cost}")
    lines.append(f"Discount: {order.discount if order.discount is not None else 'none'}")
    lines.append(f"Payment method: {order.payment_method}")
    lines.append(f"TOTAL: {order.compute_total()}")
    lines.append("====================")
    return "\n".join(lines)
