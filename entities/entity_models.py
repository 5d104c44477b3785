from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Entity(BaseModel):
    """Base shape shared by every record kind: a string id plus scalar fields.

    Attributes are snake_case in Python and camelCase on the wire and in
    the stored documents. Every field is optional; nothing beyond the
    field types is validated.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    id: Optional[str] = None

    def to_document(self) -> dict:
        # The id lives in the record key, never in the stored content
        return self.model_dump(mode="json", by_alias=True, exclude={"id"})


class Budget(Entity):
    name: Optional[str] = None
    limit: Optional[float] = None
    created_at: Optional[datetime] = None


class Expense(Entity):
    budget_id: Optional[str] = None  # not checked against budgets
    description: Optional[str] = None
    amount: Optional[float] = None
    created_at: Optional[datetime] = None


class Transaction(Entity):
    reference_id: Optional[str] = None
    type: Optional[str] = None
    amount: Optional[float] = None
    created_at: Optional[datetime] = None


class Task(Entity):
    description: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None


class Customer(Entity):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None


class Order(Entity):
    customer_id: Optional[str] = None  # not checked against customers
    amount: Optional[float] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None


class User(Entity):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    created_at: Optional[datetime] = None
