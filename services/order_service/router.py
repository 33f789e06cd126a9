from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from shared.config.database import DatabaseGateway, get_db
from .product_client import ProductClient, get_product_client
from .schemas import ErrorResponse, OrderCreate, OrderResponse, OrderStatusUpdate
from .service import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])
public_router = APIRouter()  # Liveness only, never touches collaborators

@public_router.get("/health", response_class=PlainTextResponse)
async def health_check():
    return "OK"


@router.get("", response_model=list[OrderResponse])
async def list_orders(db: DatabaseGateway = Depends(get_db)):
    return await OrderService.list_orders(db)


@router.post(
    "",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def create_order(
    order: OrderCreate,
    db: DatabaseGateway = Depends(get_db),
    products: ProductClient = Depends(get_product_client),
):
    return await OrderService.create_order(db, products, order)


# The id stays a string, exactly as it appears in the path
@router.patch(
    "/{order_id}",
    response_model=OrderResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_order_status(
    order_id: str,
    payload: OrderStatusUpdate,
    db: DatabaseGateway = Depends(get_db),
):
    return await OrderService.update_status(db, order_id, payload)
