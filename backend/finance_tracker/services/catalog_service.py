"""Service for direct creation of categories, products and tags."""

import logging

from sqlalchemy.orm import Session

from finance_tracker.core.exceptions import ValidationError
from finance_tracker.database import unit_of_work
from finance_tracker.models import Category, Product, Tag
from finance_tracker.schemas.category import CategoryCreate, CategorySummary, CreateCategoryResponse
from finance_tracker.schemas.product import CreateProductResponse, ProductCreate, ProductResponse
from finance_tracker.schemas.tag import TagCreate, TagResponse
from finance_tracker.services.resolution_service import (
    reference_from,
    resolve_category,
)

logger = logging.getLogger(__name__)


def _require_name(name: str, label: str) -> str:
    trimmed = name.strip()
    if not trimmed:
        raise ValidationError(f"{label} name cannot be empty")
    return trimmed


def create_category(db: Session, user_id: int, payload: CategoryCreate) -> CreateCategoryResponse:
    """
    Create a category, resolving its parent by id or name first.
    A parent given by name is created top level when missing.
    """
    name = _require_name(payload.name, "Category")

    with unit_of_work(db, "create category", "Category already exists"):
        parent_id = resolve_category(
            db,
            user_id,
            reference_from(payload.parent_category_id, payload.parent_category_name),
        )

        category = Category(user_id=user_id, name=name, parent_category_id=parent_id)
        db.add(category)
        db.flush()

        response = CreateCategoryResponse(
            id=category.id,
            user_id=category.user_id,
            name=category.name,
            parent_category_id=category.parent_category_id,
            parent=CategorySummary.model_validate(category.parent) if category.parent else None,
        )

    logger.info("Created category %s for user %s", response.id, user_id)
    return response


def create_product(db: Session, user_id: int, payload: ProductCreate) -> CreateProductResponse:
    """Create a product, resolving its optional category by id or name."""
    name = _require_name(payload.name, "Product")

    with unit_of_work(db, "create product", "Product already exists"):
        category_id = resolve_category(
            db,
            user_id,
            reference_from(payload.category_id, payload.category_name),
        )

        product = Product(user_id=user_id, name=name, category_id=category_id)
        db.add(product)
        db.flush()

        response = CreateProductResponse(
            product=ProductResponse.model_validate(product),
            category=CategorySummary.model_validate(product.category) if product.category else None,
        )

    logger.info("Created product %s for user %s", response.product.id, user_id)
    return response


def create_tag(db: Session, user_id: int, payload: TagCreate) -> TagResponse:
    name = _require_name(payload.name, "Tag")

    with unit_of_work(db, "create tag", "Tag already exists"):
        tag = Tag(user_id=user_id, name=name)
        db.add(tag)
        db.flush()
        response = TagResponse.model_validate(tag)

    return response
