"""HAL-style representations of orders and employees.

Every function here is a pure projection of a record plus the service base
URL; nothing touches the session.
"""

from typing import Any, Dict, Iterable, List

from .models import Employee, Order, OrderStatus, can_transition, is_terminal

# action name -> status the action moves an order to
ORDER_ACTIONS: Dict[str, OrderStatus] = {
    "cancel": OrderStatus.CANCELLED,
    "complete": OrderStatus.COMPLETED,
}


def link(href: str) -> Dict[str, str]:
    return {"href": href}


def permitted_actions(order: Order) -> List[str]:
    """Actions currently valid for ``order``; empty once it is terminal."""
    if is_terminal(order.status):
        return []
    return [
        action
        for action, target in ORDER_ACTIONS.items()
        if can_transition(order.status, target)
    ]


def order_url(base_url: str, order_id: int) -> str:
    return f"{base_url}/orders/{order_id}"


def order_to_model(order: Order, base_url: str) -> Dict[str, Any]:
    self_href = order_url(base_url, order.id)
    links = {
        "self": link(self_href),
        "orders": link(f"{base_url}/orders"),
    }
    for action in permitted_actions(order):
        links[action] = link(f"{self_href}/{action}")

    return {
        "id": order.id,
        "description": order.description,
        "status": order.status.value,
        "_links": links,
    }


def orders_to_collection(orders: Iterable[Order], base_url: str) -> Dict[str, Any]:
    return _collection("orders", [order_to_model(o, base_url) for o in orders], base_url)


def employee_url(base_url: str, employee_id: int) -> str:
    return f"{base_url}/employees/{employee_id}"


def employee_to_model(employee: Employee, base_url: str) -> Dict[str, Any]:
    return {
        "id": employee.id,
        "first_name": employee.first_name,
        "last_name": employee.last_name,
        "name": employee.name,
        "role": employee.role,
        "_links": {
            "self": link(employee_url(base_url, employee.id)),
            "employees": link(f"{base_url}/employees"),
        },
    }


def employees_to_collection(
    employees: Iterable[Employee], base_url: str
) -> Dict[str, Any]:
    return _collection(
        "employees", [employee_to_model(e, base_url) for e in employees], base_url
    )


def _collection(rel: str, models: List[Dict[str, Any]], base_url: str) -> Dict[str, Any]:
    body: Dict[str, Any] = {}
    if models:
        body["_embedded"] = {rel: models}
    body["_links"] = {"self": link(f"{base_url}/{rel}")}
    return body
