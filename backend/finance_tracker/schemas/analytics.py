"""
Analytics schemas.
"""

from pydantic import BaseModel


class SpendingTimeSeriesEntry(BaseModel):
    date: str  # YYYY-MM-DD
    total_spending: float


class CategorySpending(BaseModel):
    category_name: str
    total_spending: float


class ProductPriceData(BaseModel):
    date: str  # YYYY-MM-DD
    price: float
