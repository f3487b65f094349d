"""
Analytics API endpoints.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List

from finance_tracker.dependencies import get_db, get_current_user_id
from finance_tracker.schemas.analytics import (
    CategorySpending,
    ProductPriceData,
    SpendingTimeSeriesEntry,
)
from finance_tracker.services import analytics_service

router = APIRouter(tags=["analytics"])


@router.get("/spending-time-series", response_model=List[SpendingTimeSeriesEntry])
def spending_time_series(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Get total spending per calendar day.
    Returns: [{date, total_spending}, ...]
    """
    return analytics_service.spending_time_series(db, user_id)


@router.get("/category-spending", response_model=List[CategorySpending])
def category_spending(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Get total spending per category name.
    Returns: [{category_name, total_spending}, ...]
    """
    return analytics_service.category_spending(db, user_id)


@router.get("/product-price-data", response_model=List[ProductPriceData])
def product_price_data(
    product_id: int = Query(...),
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Get the price history of one product for charting"""
    return analytics_service.product_price_data(db, user_id, product_id)
