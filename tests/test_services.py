"""Tests for the order lifecycle and employee services."""

import pytest

from payroll.exceptions import EmployeeNotFound, InvalidTransition, OrderNotFound
from payroll.models import Order, OrderStatus
from payroll.services import EmployeeService, OrderService


@pytest.fixture
def orders(session):
    return OrderService(session)


@pytest.fixture
def employees(session):
    return EmployeeService(session)


def _stored(session, status: OrderStatus) -> Order:
    order = Order(description="MacBook Pro", status=status)
    session.add(order)
    session.commit()
    return order


class TestCreateOrder:
    def test_new_order_starts_in_progress(self, orders):
        order = orders.create_order("iPhone")
        assert order.id is not None
        assert order.status == OrderStatus.IN_PROGRESS

    @pytest.mark.parametrize("submitted", ["COMPLETED", "CANCELLED", "bogus", None])
    def test_submitted_status_is_ignored(self, orders, submitted):
        order = orders.create_order("iPhone", submitted)
        assert order.status == OrderStatus.IN_PROGRESS

    def test_ids_are_distinct(self, orders):
        first = orders.create_order("iPhone")
        second = orders.create_order("iPad")
        assert first.id != second.id


class TestReadOrders:
    def test_list_empty_store(self, orders):
        assert orders.list_orders() == []

    def test_list_returns_all(self, orders):
        orders.create_order("iPhone")
        orders.create_order("iPad")
        assert [o.description for o in orders.list_orders()] == ["iPhone", "iPad"]

    def test_get_unknown_order(self, orders):
        with pytest.raises(OrderNotFound) as excinfo:
            orders.get_order(999)
        assert excinfo.value.entity_id == 999
        assert str(excinfo.value) == "Could not find order 999"


class TestTransitions:
    def test_cancel_in_progress(self, orders):
        order = orders.create_order("iPhone")
        assert orders.cancel_order(order.id).status == OrderStatus.CANCELLED
        assert orders.get_order(order.id).status == OrderStatus.CANCELLED

    def test_complete_in_progress(self, orders):
        order = orders.create_order("iPhone")
        assert orders.complete_order(order.id).status == OrderStatus.COMPLETED
        assert orders.get_order(order.id).status == OrderStatus.COMPLETED

    @pytest.mark.parametrize("status", [OrderStatus.COMPLETED, OrderStatus.CANCELLED])
    def test_terminal_orders_reject_both_actions(self, session, orders, status):
        order = _stored(session, status)

        with pytest.raises(InvalidTransition) as cancel_exc:
            orders.cancel_order(order.id)
        with pytest.raises(InvalidTransition) as complete_exc:
            orders.complete_order(order.id)

        assert cancel_exc.value.detail == (
            f"You can't cancel an order that is in the {status.value} status"
        )
        assert complete_exc.value.detail == (
            f"You can't complete an order that is in the {status.value} status"
        )
        assert orders.get_order(order.id).status == status

    def test_second_transition_fails(self, orders):
        order = orders.create_order("iPhone")
        orders.complete_order(order.id)
        with pytest.raises(InvalidTransition):
            orders.cancel_order(order.id)

    def test_transition_unknown_order(self, orders):
        with pytest.raises(OrderNotFound):
            orders.cancel_order(42)
        with pytest.raises(OrderNotFound):
            orders.complete_order(42)


class TestEmployeeService:
    def test_create_and_get(self, employees):
        created = employees.create_employee("Samwise", "Gamgee", "gardener")
        fetched = employees.get_employee(created.id)
        assert fetched.name == "Samwise Gamgee"
        assert fetched.role == "gardener"

    def test_get_unknown(self, employees):
        with pytest.raises(EmployeeNotFound):
            employees.get_employee(5)

    def test_replace_existing(self, employees):
        created = employees.create_employee("Samwise", "Gamgee", "gardener")
        replaced, was_created = employees.replace_employee(
            created.id, "Samwise", "Gamgee", "ring bearer"
        )
        assert not was_created
        assert replaced.id == created.id
        assert employees.get_employee(created.id).role == "ring bearer"

    def test_replace_missing_creates_with_id(self, employees):
        employee, was_created = employees.replace_employee(
            10, "Peregrin", "Took", "guard"
        )
        assert was_created
        assert employee.id == 10
        assert employees.get_employee(10).name == "Peregrin Took"

    def test_delete(self, employees):
        created = employees.create_employee("Meriadoc", "Brandybuck", "esquire")
        employees.delete_employee(created.id)
        assert employees.list_employees() == []

    def test_delete_unknown(self, employees):
        with pytest.raises(EmployeeNotFound):
            employees.delete_employee(3)
