from __future__ import annotations

import argparse
import asyncio
import logging
from datetime import datetime, timezone
from typing import Dict, List

from surrealdb import AsyncSurreal

from crud.crud_repo import SurrealCrudRepo
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
from entities.resources import RESOURCES, get_resource
from settings.db import get_db, init_db, close_db
from settings.logging_config import configure_logging

logger = logging.getLogger(__name__)


def sample_records() -> Dict[str, List[Entity]]:
	now = datetime.now(timezone.utc)
	return {
		"budget": [
			Budget(name="Groceries", limit=500.0, created_at=now),
			Budget(name="Rent", limit=1200.0, created_at=now),
		],
		"expense": [
			Expense(description="Weekly shopping", amount=82.4, created_at=now),
			Expense(description="Farmers market", amount=23.0, created_at=now),
		],
		"transaction": [
			Transaction(reference_id="INV-1001", type="debit", amount=82.4, created_at=now),
			Transaction(reference_id="PAY-2001", type="credit", amount=1500.0, created_at=now),
		],
		"task": [
			Task(description="Reconcile March statement", status="pending", created_at=now),
			Task(description="Review subscriptions", status="done", created_at=now),
		],
		"customer": [
			Customer(name="Alice", email="alice@example.com", phone="555-0100"),
			Customer(name="Bob", email="bob@example.com", phone="555-0101"),
		],
		"order": [
			Order(amount=49.95, status="new", created_at=now),
		],
		"user": [
			User(username="demo", email="demo@example.com", password="demo", created_at=now),
		],
	}


async def seed(db: AsyncSurreal, reset: bool = False) -> Dict[str, int]:
	if reset:
		for resource in RESOURCES:
			repo = SurrealCrudRepo(db, resource)
			for entity in await repo.list_all():
				await repo.delete_by_id(entity.id)
			logger.info("Cleared %s", resource.collection)

	repos = {resource.name: SurrealCrudRepo(db, resource) for resource in RESOURCES}
	records = sample_records()

	# Link the sample references to real ids so the data looks consistent
	budget = await repos["budget"].save(records["budget"][0])
	for expense in records["expense"]:
		expense.budget_id = budget.id
	customer = await repos["customer"].save(records["customer"][0])
	for order in records["order"]:
		order.customer_id = customer.id

	created = {"budget": 1, "customer": 1}
	for name, entities in records.items():
		pending = entities[1:] if name in ("budget", "customer") else entities
		for entity in pending:
			await repos[name].save(entity)
		created[name] = created.get(name, 0) + len(pending)

	return {get_resource(name).collection: count for name, count in created.items()}


async def main(reset: bool) -> None:
	configure_logging()
	await init_db()
	db = await get_db()
	try:
		created = await seed(db, reset=reset)
		for collection, count in created.items():
			logger.info("Seeded %d record(s) into %s", count, collection)
	finally:
		await close_db()


if __name__ == "__main__":
	parser = argparse.ArgumentParser(description="Insert sample records into every collection")
	parser.add_argument("--reset", action="store_true", help="Delete existing records first")
	args = parser.parse_args()
	asyncio.run(main(args.reset))
