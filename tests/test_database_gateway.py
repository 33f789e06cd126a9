import pytest
from sqlalchemy.exc import SQLAlchemyError

from services.order_service.models import Order  # registers the orders table
from services.order_service.repository import OrderRepository
from shared.config.database import DatabaseGateway, build_engine


@pytest.fixture
async def db(anyio_backend):
    gateway = DatabaseGateway(build_engine("sqlite+aiosqlite:///:memory:"))
    await gateway.create_tables()
    yield gateway
    await gateway.dispose()


@pytest.mark.anyio
async def test_create_order_returns_stored_row(db):
    order = await OrderRepository.create_order(db, product_id=10, quantity=3, total_price=15.0, status="pending")

    assert order["id"] is not None
    assert order["product_id"] == 10
    assert order["quantity"] == 3
    assert order["total_price"] == 15.0
    assert order["status"] == "pending"


@pytest.mark.anyio
async def test_list_orders_newest_first(db):
    insert = (
        "INSERT INTO orders (product_id, quantity, total_price, status, created_at) "
        "VALUES (:product_id, 1, 1.0, 'pending', :created_at)"
    )
    # Older row goes in first and gets the lower id
    await db.query(insert, {"product_id": 1, "created_at": "2026-01-01 09:00:00"})
    await db.query(insert, {"product_id": 2, "created_at": "2026-01-02 09:00:00"})

    orders = await OrderRepository.list_orders(db)

    assert [o["product_id"] for o in orders] == [2, 1]


@pytest.mark.anyio
async def test_update_status_with_path_style_id(db):
    order = await OrderRepository.create_order(db, product_id=10, quantity=1, total_price=5.0, status="pending")

    updated = await OrderRepository.update_status(db, str(order["id"]), "shipped")

    assert updated["id"] == order["id"]
    assert updated["status"] == "shipped"
    assert updated["total_price"] == 5.0


@pytest.mark.anyio
async def test_update_status_unknown_id(db):
    assert await OrderRepository.update_status(db, "999", "shipped") is None


@pytest.mark.anyio
async def test_failed_statement_raises_storage_error(db):
    with pytest.raises(SQLAlchemyError):
        await db.query("SELECT * FROM missing_table")
