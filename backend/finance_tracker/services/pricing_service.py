"""
Service for product price history.

Money is kept as integer cents in storage and converted to dollars only
when it crosses the API boundary.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from sqlalchemy.orm import Session

from finance_tracker.core.exceptions import ValidationError
from finance_tracker.database import unit_of_work
from finance_tracker.models import Product, ProductPrice
from finance_tracker.schemas.product import ProductResponse
from finance_tracker.schemas.product_price import (
    CreateProductPriceResponse,
    ProductPriceCreate,
    ProductPriceDto,
)
from finance_tracker.services.resolution_service import reference_from, resolve_product

logger = logging.getLogger(__name__)

CENTS_PER_UNIT = Decimal("100")
MAX_CENTS = 2**31 - 1


def to_minor_units(amount: float) -> int:
    """Dollars to cents, rounding half away from zero (12.345 -> 1235)."""
    cents = (Decimal(str(amount)) * CENTS_PER_UNIT).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(cents)


def to_major_units(cents: int) -> float:
    """Cents to dollars, rounded to two decimals."""
    dollars = (Decimal(cents) / CENTS_PER_UNIT).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return float(dollars)


def clamp_cents(total: Optional[int]) -> int:
    """Aggregates may be NULL or out of range; keep them within [0, MAX_CENTS]."""
    return min(max(int(total or 0), 0), MAX_CENTS)


def require_non_negative(amount: Optional[float]) -> None:
    if amount is not None and amount < 0:
        raise ValidationError("Price cannot be negative")


def to_price_dto(price: ProductPrice) -> ProductPriceDto:
    return ProductPriceDto(
        id=price.id,
        product_id=price.product_id,
        price=to_major_units(price.price),
        created_at=price.created_at,
    )


def create_product_price(
    db: Session,
    user_id: int,
    payload: ProductPriceCreate
) -> CreateProductPriceResponse:
    """
    Record a price observation for a product given by id or name.
    Unknown product names are created. The timestamp comes from the caller.
    """
    product_ref = reference_from(payload.product_id, payload.product_name)
    if product_ref is None:
        raise ValidationError("Product id or name is required")
    require_non_negative(payload.price)

    with unit_of_work(db, "create product price", "Duplicate product price entry"):
        product_id = resolve_product(db, user_id, product_ref)

        price = ProductPrice(
            product_id=product_id,
            price=to_minor_units(payload.price),
            created_at=payload.created_at,
        )
        db.add(price)
        db.flush()

        response = CreateProductPriceResponse(
            product_price=to_price_dto(price),
            product=ProductResponse.model_validate(db.get(Product, product_id)),
        )

    logger.info("Recorded price %s for product %s", response.product_price.id, product_id)
    return response


def list_product_prices(
    db: Session,
    user_id: int,
    product_id: Optional[int] = None
) -> List[ProductPriceDto]:
    """Prices of the user's products, oldest first."""
    query = db.query(ProductPrice).join(
        Product, Product.id == ProductPrice.product_id
    ).filter(Product.user_id == user_id)

    if product_id is not None:
        query = query.filter(ProductPrice.product_id == product_id)

    prices = query.order_by(ProductPrice.created_at.asc(), ProductPrice.id.asc()).all()
    return [to_price_dto(p) for p in prices]
