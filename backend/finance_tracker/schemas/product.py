"""
Product schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional

from finance_tracker.schemas.category import CategorySummary


class ProductCreate(BaseModel):
    name: str = Field(..., max_length=255)
    category_id: Optional[int] = None
    category_name: Optional[str] = Field(None, max_length=100)


class ProductResponse(BaseModel):
    id: int
    user_id: int
    category_id: Optional[int]
    name: str

    class Config:
        from_attributes = True


class ProductDto(BaseModel):
    """Product as listed to its owner, without user_id."""
    id: int
    category_id: Optional[int]
    name: str

    class Config:
        from_attributes = True


class CreateProductResponse(BaseModel):
    product: ProductResponse
    category: Optional[CategorySummary] = None
