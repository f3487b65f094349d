"""
Category Pydantic schemas for API validation.
"""

from pydantic import BaseModel, Field
from typing import Optional


class CategoryCreate(BaseModel):
    """Schema for creating a category. The parent may be given by id or by name."""
    name: str = Field(..., max_length=100)
    parent_category_id: Optional[int] = None
    parent_category_name: Optional[str] = Field(None, max_length=100)


class CategorySummary(BaseModel):
    """Category reference embedded in other responses."""
    id: int
    name: str

    class Config:
        from_attributes = True


class CategoryResponse(BaseModel):
    """Schema for category response."""
    id: int
    user_id: int
    name: str
    parent_category_id: Optional[int]

    class Config:
        from_attributes = True


class CreateCategoryResponse(CategoryResponse):
    """Created category together with its resolved parent."""
    parent: Optional[CategorySummary] = None
