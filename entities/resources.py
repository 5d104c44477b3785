from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple, Type

from entities.entity_models import (
    Budget,
    Customer,
    Entity,
    Expense,
    Order,
    Task,
    Transaction,
    User,
)


@dataclass(frozen=True)
class CrudResource:
    """One record kind exposed over CRUD: its shape, collection and URL path."""

    name: str
    model: Type[Entity]
    collection: str
    path: str

    @property
    def tag(self) -> str:
        return self.collection


RESOURCES: Tuple[CrudResource, ...] = (
    CrudResource("budget", Budget, "budgets", "/budgets"),
    CrudResource("expense", Expense, "expenses", "/expenses"),
    CrudResource("transaction", Transaction, "transactions", "/transactions"),
    CrudResource("task", Task, "tasks", "/tasks"),
    CrudResource("customer", Customer, "customers", "/customers"),
    CrudResource("order", Order, "orders", "/orders"),
    CrudResource("user", User, "users", "/users"),
)

_BY_NAME: Dict[str, CrudResource] = {resource.name: resource for resource in RESOURCES}


def get_resource(name: str) -> CrudResource:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown resource: {name}") from None
