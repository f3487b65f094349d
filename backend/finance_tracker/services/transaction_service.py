"""
Service for the transaction write path and listing.
"""

import logging
from collections import defaultdict
from typing import Dict, List

from sqlalchemy import insert
from sqlalchemy.orm import Session

from finance_tracker.core.exceptions import ValidationError
from finance_tracker.database import unit_of_work
from finance_tracker.models import Product, ProductPrice, Tag, Transaction, transaction_tags
from finance_tracker.schemas.product import ProductResponse
from finance_tracker.schemas.tag import TagDto
from finance_tracker.schemas.transaction import (
    CreateTransactionResponse,
    TransactionCreate,
    TransactionDto,
    TransactionResponse,
)
from finance_tracker.services.pricing_service import (
    require_non_negative,
    to_minor_units,
    to_price_dto,
)
from finance_tracker.services.resolution_service import (
    reference_from,
    resolve_product,
    resolve_tags,
)

logger = logging.getLogger(__name__)


def _resolve_price(db: Session, product_id: int, payload: TransactionCreate) -> ProductPrice:
    """
    Use the referenced price if given, otherwise record a new one at the
    transaction date. A referenced price must belong to the product.
    """
    if payload.product_price_id is not None:
        price = db.query(ProductPrice).filter(
            ProductPrice.id == payload.product_price_id,
            ProductPrice.product_id == product_id
        ).first()
        if price is None:
            raise ValidationError(
                f"Product price {payload.product_price_id} does not belong to product {product_id}"
            )
        return price

    # An absent price is recorded as a zero-amount observation.
    price = ProductPrice(
        product_id=product_id,
        price=to_minor_units(payload.price or 0.0),
        created_at=payload.date,
    )
    db.add(price)
    db.flush()
    return price


def _tags_of(db: Session, transaction_id: int) -> List[Tag]:
    return db.query(Tag).join(
        transaction_tags, transaction_tags.c.tag_id == Tag.id
    ).filter(
        transaction_tags.c.transaction_id == transaction_id
    ).order_by(Tag.id).all()


def create_transaction(db: Session, user_id: int, payload: TransactionCreate) -> CreateTransactionResponse:
    """
    Create a transaction in one unit of work.

    Steps: resolve the product, resolve or record the price, insert the
    transaction, resolve and link tags, then read everything back. Any
    failure rolls back every row written by the request.
    """
    product_ref = reference_from(payload.product_id, payload.product_name)
    if product_ref is None:
        raise ValidationError("Product id or name is required")
    require_non_negative(payload.price)

    with unit_of_work(db, "create transaction", "Duplicate transaction entry"):
        product_id = resolve_product(db, user_id, product_ref)
        price = _resolve_price(db, product_id, payload)

        transaction = Transaction(
            user_id=user_id,
            product_id=product_id,
            product_price_id=price.id,
            transaction_type=payload.transaction_type,
            description=payload.description,
            date=payload.date,
        )
        db.add(transaction)
        db.flush()

        tag_ids = resolve_tags(db, user_id, payload.tags or [])
        if tag_ids:
            db.execute(
                insert(transaction_tags),
                [{"transaction_id": transaction.id, "tag_id": tag_id} for tag_id in tag_ids],
            )

        response = CreateTransactionResponse(
            transaction=TransactionResponse.model_validate(transaction),
            product=ProductResponse.model_validate(db.get(Product, product_id)),
            product_price=to_price_dto(price),
            tags=[TagDto.model_validate(tag) for tag in _tags_of(db, transaction.id)],
        )

    logger.info(
        "Created transaction %s for user %s with %d tag(s)",
        response.transaction.id, user_id, len(response.tags)
    )
    return response


def list_transactions(db: Session, user_id: int) -> List[TransactionDto]:
    """All of the user's transactions with their tag ids. Not paginated."""
    transactions = db.query(Transaction).filter(
        Transaction.user_id == user_id
    ).order_by(Transaction.date.asc(), Transaction.id.asc()).all()

    if not transactions:
        return []

    pairs = db.query(
        transaction_tags.c.transaction_id,
        transaction_tags.c.tag_id
    ).filter(
        transaction_tags.c.transaction_id.in_([t.id for t in transactions])
    ).order_by(transaction_tags.c.tag_id).all()

    tag_map: Dict[int, List[int]] = defaultdict(list)
    for transaction_id, tag_id in pairs:
        tag_map[transaction_id].append(tag_id)

    return [
        TransactionDto(
            **TransactionResponse.model_validate(t).model_dump(),
            tags=tag_map.get(t.id, []),
        )
        for t in transactions
    ]
