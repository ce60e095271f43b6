"""Tests for the Order aggregate — placement, totals and the status workflow."""

import itertools
import random

import pytest
from ordering.order.events import OrderPlaced, OrderStatusChanged
from ordering.order.order import (
    _VALID_TRANSITIONS,
    TERMINAL_STATES,
    Order,
    OrderLine,
    OrderStatus,
    parse_status,
)
from protean.exceptions import ValidationError
from shared.errors import EmptyOrder, InvalidStatus


def _line(food_id="food-a", name="Burger", quantity=1, unit_price=10.0):
    return {"food_id": food_id, "food_name": name, "quantity": quantity, "unit_price": unit_price}


def _order(lines=None):
    return Order.place(customer_id="cust-001", lines=lines or [_line(quantity=2), _line("food-b", "Salad", 1, 5.0)])


class TestOrderStatusEnum:
    def test_wire_labels(self):
        assert [status.value for status in OrderStatus] == [
            "Pending",
            "Confirmed",
            "Preparing",
            "Ready",
            "Out for Delivery",
            "Delivered",
            "Cancelled",
        ]

    def test_terminal_states(self):
        assert TERMINAL_STATES == {OrderStatus.DELIVERED, OrderStatus.CANCELLED}

    def test_parse_status(self):
        assert parse_status("Out for Delivery") == OrderStatus.OUT_FOR_DELIVERY
        assert parse_status(OrderStatus.READY) == OrderStatus.READY

    @pytest.mark.parametrize("label", ["Shipped", "pending", "", "Out For Delivery"])
    def test_parse_unknown_status(self, label):
        with pytest.raises(InvalidStatus):
            parse_status(label)


class TestOrderPlacement:
    def test_place_order(self):
        order = _order()
        assert order.customer_id == "cust-001"
        assert order.status == OrderStatus.PENDING.value
        assert order.total_price == 25.0
        assert order.item_count == 3
        assert len(order.items) == 2
        assert order.created_at is not None
        assert order.updated_at == order.created_at

    def test_lines_are_snapshots(self):
        order = _order()
        line = order.items[0]
        assert isinstance(line, OrderLine)
        assert line.food_id == "food-a"
        assert line.food_name == "Burger"
        assert line.quantity == 2
        assert line.unit_price == 10.0

    def test_place_raises_event(self):
        order = _order()
        assert len(order._events) == 1
        event = order._events[0]
        assert isinstance(event, OrderPlaced)
        assert event.total_price == 25.0
        assert event.customer_id == "cust-001"

    def test_empty_order_rejected(self):
        with pytest.raises(EmptyOrder) as exc:
            Order.place(customer_id="cust-001", lines=[])
        assert exc.value.kind == "EmptyOrder"

    def test_empty_order_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            Order.place(customer_id="cust-001", lines=[])

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_non_positive_quantity_rejected(self, quantity):
        with pytest.raises(ValidationError):
            Order.place(customer_id="cust-001", lines=[_line(quantity=quantity)])

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            Order.place(customer_id="cust-001", lines=[_line(unit_price=-1.0)])

    def test_total_is_rounded_to_cents(self):
        order = Order.place(customer_id="cust-001", lines=[_line(quantity=3, unit_price=0.1)])
        assert order.total_price == 0.3


class TestOrderTotalsProperty:
    """Totals hold for arbitrary orders built from seeded random lines."""

    @pytest.mark.parametrize("seed", range(25))
    def test_total_matches_lines(self, seed):
        rng = random.Random(seed)
        lines = [
            _line(
                food_id=f"food-{i}",
                name=f"Dish {i}",
                quantity=rng.randint(1, 9),
                unit_price=round(rng.uniform(0, 40), 2),
            )
            for i in range(rng.randint(1, 8))
        ]

        order = Order.place(customer_id="cust-001", lines=lines)

        assert order.total_price == round(sum(line["quantity"] * line["unit_price"] for line in lines), 2)
        assert order.item_count == sum(line["quantity"] for line in lines)
        assert order.status == OrderStatus.PENDING.value


class TestOrderTransitions:
    def test_every_status_may_reach_every_status(self):
        for source in OrderStatus:
            assert _VALID_TRANSITIONS[source] == set(OrderStatus)

    @pytest.mark.parametrize(
        ("source", "target"),
        list(itertools.product(OrderStatus, OrderStatus)),
        ids=lambda status: status.value,
    )
    def test_transition(self, source, target):
        order = _order()
        order.transition_to(source)
        order._events.clear()

        order.transition_to(target)

        assert order.status == target.value
        assert isinstance(order._events[0], OrderStatusChanged)
        assert order._events[0].previous_status == source.value
        assert order._events[0].new_status == target.value

    def test_transition_by_label(self):
        order = _order()
        order.transition_to("Out for Delivery")
        assert order.status == "Out for Delivery"

    def test_transition_keeps_items_and_total(self):
        order = _order()
        before = [(line.food_id, line.quantity, line.unit_price) for line in order.items]

        for status in ("Confirmed", "Preparing", "Ready", "Out for Delivery", "Delivered"):
            order.transition_to(status)

        assert order.total_price == 25.0
        assert [(line.food_id, line.quantity, line.unit_price) for line in order.items] == before

    def test_transition_touches_updated_at(self):
        order = _order()
        created_at = order.created_at
        order.transition_to("Confirmed")
        assert order.updated_at >= created_at
        assert order.created_at == created_at

    def test_same_status_is_accepted(self):
        order = _order()
        order.transition_to("Pending")
        assert order.status == "Pending"

    def test_invalid_status_leaves_order_unchanged(self):
        order = _order()
        order.transition_to("Ready")
        order._events.clear()

        with pytest.raises(InvalidStatus) as exc:
            order.transition_to("Shipped")

        assert "status" in exc.value.messages
        assert order.status == "Ready"
        assert order._events == []

    def test_terminal_states_are_not_enforced(self):
        order = _order()
        order.transition_to("Delivered")
        assert order.is_terminal

        order.transition_to("Preparing")
        assert order.status == "Preparing"
        assert not order.is_terminal
