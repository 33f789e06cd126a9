import structlog
from shared.config.database import DatabaseGateway
from shared.observability import (
    orders_created_total,
    order_status_updates_total,
    product_lookups_total,
)
from .exceptions import OrderNotFoundError, ProductNotFoundError, ProductServiceError
from .product_client import ProductClient
from .repository import OrderRepository
from .schemas import OrderCreate, OrderStatusUpdate

logger = structlog.get_logger(__name__)

STATUS_PENDING = "pending"

class OrderService:
    @staticmethod
    async def list_orders(db: DatabaseGateway):
        return await OrderRepository.list_orders(db)

    @staticmethod
    async def create_order(db: DatabaseGateway, products: ProductClient, data: OrderCreate):
        # 1. The product must exist before anything is written
        try:
            product = await products.get_product(data.product_id)
        except ProductNotFoundError:
            product_lookups_total.labels(result="not_found").inc()
            logger.info("order_rejected_unknown_product", product_id=data.product_id)
            raise
        except ProductServiceError:
            product_lookups_total.labels(result="error").inc()
            raise
        product_lookups_total.labels(result="found").inc()

        # 2. Price is fixed at creation and never recomputed
        total = product.price * data.quantity

        # 3. Persist
        order = await OrderRepository.create_order(
            db,
            product_id=data.product_id,
            quantity=data.quantity,
            total_price=total,
            status=STATUS_PENDING,
        )
        orders_created_total.inc()
        logger.info(
            "order_created",
            order_id=order.get("id"),
            product_id=data.product_id,
            quantity=data.quantity,
            total_price=total,
        )
        return order

    @staticmethod
    async def update_status(db: DatabaseGateway, order_id, data: OrderStatusUpdate):
        # Any label is accepted; there are no transition rules
        order = await OrderRepository.update_status(db, order_id, data.status)
        if order is None:
            order_status_updates_total.labels(result="not_found").inc()
            raise OrderNotFoundError(order_id)
        order_status_updates_total.labels(result="updated").inc()
        logger.info("order_status_updated", order_id=order_id, status=data.status)
        return order
