from pydantic import BaseModel, ConfigDict, Field

class OrderCreate(BaseModel):
    # Anything other than these two fields is dropped
    product_id: int = Field(alias="productId")
    quantity: int

class OrderStatusUpdate(BaseModel):
    status: str

class OrderResponse(BaseModel):
    id: int
    product_id: int
    quantity: int
    total_price: float
    status: str

    model_config = ConfigDict(from_attributes=True)

class Product(BaseModel):
    id: int
    price: float

class ErrorResponse(BaseModel):
    error: str
