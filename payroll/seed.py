import logging

from sqlalchemy.orm import Session

from .models import Employee, Order, OrderStatus
from .repository import EmployeeRepository, OrderRepository

logger = logging.getLogger(__name__)


def load_database(session: Session) -> None:
    """Insert sample employees and orders into an empty database."""
    employees = EmployeeRepository(session)
    orders = OrderRepository(session)

    if employees.count() == 0:
        employees.save(Employee(first_name="Bilbo", last_name="Baggins", role="burglar"))
        employees.save(Employee(first_name="Frodo", last_name="Baggins", role="thief"))
        for employee in employees.find_all():
            logger.info(f"Preloaded {employee}")

    if orders.count() == 0:
        orders.save(Order(description="MacBook Pro", status=OrderStatus.COMPLETED))
        orders.save(Order(description="iPhone", status=OrderStatus.IN_PROGRESS))
        for order in orders.find_all():
            logger.info(f"Preloaded {order}")
