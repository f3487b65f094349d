"""
Category API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from finance_tracker.dependencies import get_db, get_current_user_id
from finance_tracker.models import Category
from finance_tracker.schemas.category import (
    CategoryCreate,
    CategoryResponse,
    CreateCategoryResponse,
)
from finance_tracker.services.catalog_service import create_category as create_category_for_user

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=List[CategoryResponse])
def list_categories(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """List the caller's categories."""
    return db.query(Category).filter(
        Category.user_id == user_id
    ).order_by(Category.id).all()


@router.post("", response_model=CreateCategoryResponse)
def create_category(
    category: CategoryCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create a new category, optionally under a parent given by id or name."""
    return create_category_for_user(db, user_id, category)
