import logging
from typing import Any, List, Optional, Tuple

from sqlalchemy.orm import Session

from .exceptions import EmployeeNotFound, InvalidTransition, OrderNotFound
from .models import Employee, Order, OrderStatus, can_transition
from .repository import EmployeeRepository, OrderRepository

logger = logging.getLogger(__name__)


class OrderService:
    """Order lifecycle: IN_PROGRESS -> COMPLETED | CANCELLED.

    Transitions are a plain read-check-write against the repository; two
    concurrent requests on the same order may both pass the guard and the
    last commit wins.
    """

    def __init__(self, session: Session):
        self.repository = OrderRepository(session)

    def list_orders(self) -> List[Order]:
        return self.repository.find_all()

    def get_order(self, order_id: int) -> Order:
        order = self.repository.find_by_id(order_id)
        if order is None:
            raise OrderNotFound(order_id)
        return order

    def create_order(
        self, description: str, status: Optional[Any] = None
    ) -> Order:
        """Persist a new order. The submitted status is ignored."""
        order = self.repository.save(
            Order(description=description, status=OrderStatus.IN_PROGRESS)
        )
        logger.info(f"Order created: {order}")
        return order

    def cancel_order(self, order_id: int) -> Order:
        return self._transition(order_id, "cancel", OrderStatus.CANCELLED)

    def complete_order(self, order_id: int) -> Order:
        return self._transition(order_id, "complete", OrderStatus.COMPLETED)

    def _transition(self, order_id: int, action: str, target: OrderStatus) -> Order:
        order = self.get_order(order_id)

        if not can_transition(order.status, target):
            logger.warning(
                f"Rejected {action} of order {order_id} in {order.status.value}"
            )
            raise InvalidTransition(action, order.status)

        order.status = target
        order = self.repository.save(order)
        logger.info(f"Order {order_id} moved to {target.value}")
        return order


class EmployeeService:
    def __init__(self, session: Session):
        self.repository = EmployeeRepository(session)

    def list_employees(self) -> List[Employee]:
        return self.repository.find_all()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self.repository.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFound(employee_id)
        return employee

    def create_employee(self, first_name: str, last_name: str, role: str) -> Employee:
        employee = self.repository.save(
            Employee(first_name=first_name, last_name=last_name, role=role)
        )
        logger.info(f"Employee created: {employee}")
        return employee

    def replace_employee(
        self, employee_id: int, first_name: str, last_name: str, role: str
    ) -> Tuple[Employee, bool]:
        """Overwrite the employee with ``employee_id`` or create it.

        Returns the stored employee and whether it was newly created.

        A created record keeps the caller's id. SQLite and MySQL move their
        autoincrement counter past it; a sequence-backed store such as
        PostgreSQL does not, so a later ``create_employee`` can collide.
        """
        employee = self.repository.find_by_id(employee_id)
        created = employee is None
        if created:
            employee = Employee(id=employee_id)

        employee.first_name = first_name
        employee.last_name = last_name
        employee.role = role
        employee = self.repository.save(employee)

        logger.info(f"Employee {'created' if created else 'replaced'}: {employee}")
        return employee, created

    def delete_employee(self, employee_id: int) -> None:
        employee = self.get_employee(employee_id)
        self.repository.delete(employee)
        logger.info(f"Employee deleted: {employee_id}")
