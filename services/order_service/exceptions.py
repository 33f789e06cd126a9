class OrderServiceError(Exception):
    """Base class for failures the order service reports to callers."""


class ProductNotFoundError(OrderServiceError):
    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__(f"Product {product_id} not found")


class ProductServiceError(OrderServiceError):
    """The product service could not answer (transport error, bad status, bad body)."""

    def __init__(self, product_id, reason: str):
        self.product_id = product_id
        self.reason = reason
        super().__init__(f"Product lookup for {product_id} failed: {reason}")


class OrderNotFoundError(OrderServiceError):
    def __init__(self, order_id):
        self.order_id = order_id
        super().__init__(f"Order {order_id} not found")
