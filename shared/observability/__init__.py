from .setup import setup_observability, configure_logging
from .metrics import (
    orders_created_total,
    order_status_updates_total,
    product_lookups_total
)
