from .models import OrderStatus


class PayrollError(Exception):
    """Base class for errors raised by the payroll services"""


class NotFoundError(PayrollError):
    entity_name = "entity"

    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(f"Could not find {self.entity_name} {entity_id}")


class OrderNotFound(NotFoundError):
    entity_name = "order"


class EmployeeNotFound(NotFoundError):
    entity_name = "employee"


class InvalidTransition(PayrollError):
    """Raised when an order action is not allowed from its current status."""

    title = "Method not allowed"

    def __init__(self, action: str, status: OrderStatus):
        self.action = action
        self.status = status
        super().__init__(
            f"You can't {action} an order that is in the {status.value} status"
        )

    @property
    def detail(self) -> str:
        return str(self)
