"""Read-only spending aggregations."""

from datetime import date
from typing import List, Union

from sqlalchemy import func
from sqlalchemy.orm import Session

from finance_tracker.models import Category, Product, ProductPrice, Transaction
from finance_tracker.schemas.analytics import (
    CategorySpending,
    ProductPriceData,
    SpendingTimeSeriesEntry,
)
from finance_tracker.services.pricing_service import clamp_cents, to_major_units


def _day_string(value: Union[date, str]) -> str:
    # SQLite returns DATE() as text, PostgreSQL as a date.
    if isinstance(value, date):
        return value.strftime("%Y-%m-%d")
    return str(value)


def spending_time_series(db: Session, user_id: int) -> List[SpendingTimeSeriesEntry]:
    """Total price of the user's transactions per calendar day, oldest first."""
    day = func.date(Transaction.date)

    rows = db.query(
        day.label("day"),
        func.sum(ProductPrice.price).label("total")
    ).select_from(Transaction).join(
        ProductPrice, ProductPrice.id == Transaction.product_price_id
    ).filter(
        Transaction.user_id == user_id
    ).group_by(day).order_by(day).all()

    return [
        SpendingTimeSeriesEntry(
            date=_day_string(row.day),
            total_spending=to_major_units(clamp_cents(row.total)),
        )
        for row in rows
    ]


def category_spending(db: Session, user_id: int) -> List[CategorySpending]:
    """Total price per category name. Uncategorized products are left out."""
    rows = db.query(
        Category.name,
        func.sum(ProductPrice.price).label("total")
    ).select_from(Transaction).join(
        Product, Product.id == Transaction.product_id
    ).join(
        Category, Category.id == Product.category_id
    ).join(
        ProductPrice, ProductPrice.id == Transaction.product_price_id
    ).filter(
        Transaction.user_id == user_id
    ).group_by(Category.name).order_by(Category.name.asc()).all()

    return [
        CategorySpending(
            category_name=name,
            total_spending=to_major_units(clamp_cents(total)),
        )
        for name, total in rows
    ]


def product_price_data(db: Session, user_id: int, product_id: int) -> List[ProductPriceData]:
    """Price history of one of the user's products for charting."""
    rows = db.query(ProductPrice.created_at, ProductPrice.price).join(
        Product, Product.id == ProductPrice.product_id
    ).filter(
        ProductPrice.product_id == product_id,
        Product.user_id == user_id
    ).order_by(ProductPrice.created_at.asc(), ProductPrice.id.asc()).all()

    return [
        ProductPriceData(
            date=created_at.strftime("%Y-%m-%d"),
            price=to_major_units(price),
        )
        for created_at, price in rows
    ]
