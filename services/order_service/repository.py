from shared.config.database import DatabaseGateway

LIST_ORDERS_SQL = "SELECT * FROM orders ORDER BY created_at DESC"

INSERT_ORDER_SQL = (
    "INSERT INTO orders (product_id, quantity, total_price, status) "
    "VALUES (:product_id, :quantity, :total_price, :status) RETURNING *"
)

# Path ids arrive as text and are bound unchanged; the cast happens in SQL.
UPDATE_STATUS_SQL = (
    "UPDATE orders SET status = :status "
    "WHERE id = CAST(CAST(:order_id AS TEXT) AS INTEGER) RETURNING *"
)


class OrderRepository:
    @staticmethod
    async def list_orders(db: DatabaseGateway):
        return await db.query(LIST_ORDERS_SQL)

    @staticmethod
    async def create_order(db: DatabaseGateway, product_id: int, quantity: int, total_price, status: str):
        rows = await db.query(INSERT_ORDER_SQL, {
            "product_id": product_id,
            "quantity": quantity,
            "total_price": total_price,
            "status": status,
        })
        return rows[0]

    @staticmethod
    async def update_status(db: DatabaseGateway, order_id, status: str):
        rows = await db.query(UPDATE_STATUS_SQL, {"status": status, "order_id": order_id})
        if not rows:
            return None
        return rows[0]
