from prometheus_client import Counter

# Business Metrics
orders_created_total = Counter(
    "orders_created_total",
    "Total orders persisted"
)

order_status_updates_total = Counter(
    "order_status_updates_total",
    "Total order status updates",
    ["result"] # Labels: 'updated', 'not_found'
)

product_lookups_total = Counter(
    "product_lookups_total",
    "Product service lookups made while creating orders",
    ["result"] # Labels: 'found', 'not_found', 'error'
)
