import pytest
import pytest_asyncio

from crud.crud_repo import SurrealCrudRepo
from crud.crud_service import CrudService
from entities.entity_models import Order
from entities.resources import get_resource


@pytest_asyncio.fixture
async def order_service(fake_db):
    yield CrudService(SurrealCrudRepo(fake_db, get_resource("order")))


@pytest.mark.asyncio
async def test_update_uses_path_id_over_body_id(order_service: CrudService):
    created = await order_service.create(Order(customer_id="c1", amount=10.0, status="new"))

    updated = await order_service.update(created.id, Order(id="bogus", amount=20.0, status="paid"))

    assert updated.id == created.id
    assert await order_service.find_by_id("bogus") is None
    fetched = await order_service.find_by_id(created.id)
    assert fetched.amount == 20.0
    assert fetched.status == "paid"


@pytest.mark.asyncio
async def test_update_does_not_mutate_the_argument(order_service: CrudService):
    body = Order(id="bogus", amount=1.0)
    await order_service.update("real", body)
    assert body.id == "bogus"


@pytest.mark.asyncio
async def test_find_by_id_missing_returns_none(order_service: CrudService):
    assert await order_service.find_by_id("nope") is None


@pytest.mark.asyncio
async def test_created_minus_deleted(order_service: CrudService):
    created = [await order_service.create(Order(amount=float(i))) for i in range(4)]
    await order_service.delete(created[0].id)

    assert len(await order_service.find_all()) == 3
