"""
Product price API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from finance_tracker.dependencies import get_db, get_current_user_id
from finance_tracker.schemas.product_price import (
    CreateProductPriceResponse,
    ProductPriceCreate,
    ProductPriceDto,
)
from finance_tracker.services import pricing_service

router = APIRouter(prefix="/product_prices", tags=["product_prices"])


@router.get("", response_model=List[ProductPriceDto])
def list_product_prices(
    product_id: Optional[int] = None,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """List price observations for the caller's products, oldest first."""
    return pricing_service.list_product_prices(db, user_id, product_id)


@router.post("", response_model=CreateProductPriceResponse)
def create_product_price(
    price: ProductPriceCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Record a price for a product given by id or name."""
    return pricing_service.create_product_price(db, user_id, price)
