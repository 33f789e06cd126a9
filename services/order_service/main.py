import asyncio
import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from shared.config import settings
from shared.config.database import DatabaseGateway, build_engine
from shared.observability import setup_observability
from .exceptions import OrderNotFoundError, ProductNotFoundError, ProductServiceError
from .models import Order # Import to register with Base
from .product_client import build_product_client
from .router import router, public_router

logger = structlog.get_logger(__name__)

order_app = FastAPI(title="Order Service", version="1.0.0")

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(order_app, "order_service")

order_app.include_router(public_router)
order_app.include_router(router)


# --- ERROR TRANSLATION ---
async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Product not found"})

async def order_not_found_handler(request: Request, exc: OrderNotFoundError):
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Order not found"})

async def product_service_error_handler(request: Request, exc: ProductServiceError):
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"error": "Product service unavailable"})

async def storage_error_handler(request: Request, exc: Exception):
    logger.error("storage_error", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": "Internal server error"})

order_app.add_exception_handler(ProductNotFoundError, product_not_found_handler)
order_app.add_exception_handler(OrderNotFoundError, order_not_found_handler)
order_app.add_exception_handler(ProductServiceError, product_service_error_handler)
order_app.add_exception_handler(SQLAlchemyError, storage_error_handler)
# asyncpg connection failures reach us unwrapped by SQLAlchemy
order_app.add_exception_handler(OSError, storage_error_handler)
order_app.add_exception_handler(asyncio.TimeoutError, storage_error_handler)


@order_app.on_event("startup")
async def startup_event():
    db = DatabaseGateway(build_engine())
    order_app.state.db = db
    if settings.CREATE_TABLES:
        await db.create_tables()
    order_app.state.products = build_product_client()
    logger.info("order_service_started", product_service=settings.PRODUCT_SERVICE_URL)


@order_app.on_event("shutdown")
async def shutdown_event():
    # Startup may have failed before either collaborator existed
    products = getattr(order_app.state, "products", None)
    if products is not None:
        await products.close()
    db = getattr(order_app.state, "db", None)
    if db is not None:
        await db.dispose()
