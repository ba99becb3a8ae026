import enum
from typing import Any, Dict, FrozenSet

from sqlalchemy import Column, Enum, Integer, String

from .database import Base


class OrderStatus(enum.Enum):
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


# Allowed order status transitions.
# COMPLETED and CANCELLED are terminal: no entry means nothing is reachable.
ORDER_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.IN_PROGRESS: frozenset(
        {
            OrderStatus.COMPLETED,
            OrderStatus.CANCELLED,
        }
    ),
}


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    return target in ORDER_TRANSITIONS.get(current, frozenset())


def is_terminal(status: OrderStatus) -> bool:
    return not ORDER_TRANSITIONS.get(status)


class Order(Base):
    __tablename__ = "customer_order"

    id = Column(Integer, primary_key=True, autoincrement=True)
    description = Column(String(255), nullable=False)
    status = Column(
        Enum(OrderStatus, name="order_status"),
        nullable=False,
        default=OrderStatus.IN_PROGRESS,
    )

    def __repr__(self) -> str:
        return (
            f"Order(id={self.id}, description={self.description!r}, "
            f"status={self.status.value if self.status else None})"
        )


class Employee(Base):
    __tablename__ = "employee"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False, default="")
    role = Column(String(100), nullable=False)

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @name.setter
    def name(self, value: str) -> None:
        first, _, last = value.strip().partition(" ")
        self.first_name = first
        self.last_name = last.strip()

    def __repr__(self) -> str:
        return (
            f"Employee(id={self.id}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r}, role={self.role!r})"
        )


def same_entity(left: Any, right: Any) -> bool:
    """Compare two persisted records.

    Before a record has a server-assigned id it is only equal to itself.
    Afterwards two records are equal when they are the same entity type and
    carry the same id.
    """
    if left is right:
        return True
    if left is None or right is None:
        return False
    if left.id is None or right.id is None:
        return False
    return type(left) is type(right) and left.id == right.id
