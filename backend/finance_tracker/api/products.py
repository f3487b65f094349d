"""
Product API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from finance_tracker.dependencies import get_db, get_current_user_id
from finance_tracker.models import Product
from finance_tracker.schemas.product import CreateProductResponse, ProductCreate, ProductDto
from finance_tracker.services.catalog_service import create_product as create_product_for_user

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=List[ProductDto])
def list_products(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """List the caller's products."""
    return db.query(Product).filter(
        Product.user_id == user_id
    ).order_by(Product.id).all()


@router.post("", response_model=CreateProductResponse)
def create_product(
    product: ProductCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create a product, optionally filed under a category given by id or name."""
    return create_product_for_user(db, user_id, product)
