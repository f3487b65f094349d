"""
Product price schemas.

Prices travel as major-unit floats (dollars) and are stored as integer cents.
"""

from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from finance_tracker.schemas.common import Price, Timestamp
from finance_tracker.schemas.product import ProductResponse


class ProductPriceCreate(BaseModel):
    product_id: Optional[int] = None
    product_name: Optional[str] = None
    price: Price
    created_at: Timestamp


class ProductPriceDto(BaseModel):
    id: int
    product_id: int
    price: float
    created_at: datetime


class CreateProductPriceResponse(BaseModel):
    product_price: ProductPriceDto
    product: ProductResponse
