from sqlalchemy import Column, Integer, String, Float, DateTime, func
from shared.config.database import Base

class Order(Base):
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, nullable=False)
    quantity = Column(Integer, nullable=False)
    total_price = Column(Float, nullable=False) # calculated once at creation
    status = Column(String, nullable=False, default="pending") # free text, no transition rules
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
