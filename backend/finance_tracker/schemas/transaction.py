"""
Transaction schemas.
"""

from pydantic import BaseModel
from typing import List, Optional, Union
from datetime import datetime

from finance_tracker.models.transaction import TransactionType
from finance_tracker.schemas.common import Price, Timestamp
from finance_tracker.schemas.product import ProductResponse
from finance_tracker.schemas.product_price import ProductPriceDto
from finance_tracker.schemas.tag import TagDto

# A tag is referenced either by its id or by its name.
TagReference = Union[int, str]


class TransactionCreate(BaseModel):
    product_id: Optional[int] = None
    product_name: Optional[str] = None
    product_price_id: Optional[int] = None
    price: Optional[Price] = None  # Dollars; used when product_price_id is absent
    transaction_type: TransactionType
    description: Optional[str] = None
    date: Timestamp
    tags: Optional[List[TagReference]] = None


class TransactionResponse(BaseModel):
    id: int
    user_id: int
    product_id: int
    product_price_id: int
    transaction_type: TransactionType
    description: Optional[str]
    date: datetime

    class Config:
        from_attributes = True


class TransactionDto(TransactionResponse):
    """Listed transaction with the ids of its tags."""
    tags: List[int] = []


class CreateTransactionResponse(BaseModel):
    transaction: TransactionResponse
    product: ProductResponse
    product_price: ProductPriceDto
    tags: List[TagDto]
