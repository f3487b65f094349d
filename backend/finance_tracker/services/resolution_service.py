"""
Resolve-or-create for user-owned named rows (categories, products, tags).

A reference names a row either by id or by name. Ids must belong to the
caller; names are looked up among the caller's rows and inserted when
missing. All resolution runs inside the caller's unit of work, so a later
failure rolls back any rows created here.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from sqlalchemy.orm import Session

from finance_tracker.core.exceptions import NotFoundError
from finance_tracker.models import Category, Product, Tag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ById:
    id: int


@dataclass(frozen=True)
class ByName:
    name: str


Reference = Union[ById, ByName]


def reference_from(id: Optional[int] = None, name: Optional[str] = None) -> Optional[Reference]:
    """Build a reference from an optional id/name pair. The id wins; blank names count as absent."""
    if id is not None:
        return ById(id)
    if name is not None and name.strip():
        return ByName(name.strip())
    return None


def _find_by_name(db: Session, model, user_id: int, name: str):
    return db.query(model).filter(
        model.user_id == user_id,
        model.name == name
    ).first()


def _resolve(db: Session, model, label: str, user_id: int, ref: Optional[Reference]) -> Optional[int]:
    if ref is None:
        return None

    if isinstance(ref, ById):
        owned = db.query(model.id).filter(
            model.id == ref.id,
            model.user_id == user_id
        ).first()
        if owned is None:
            raise NotFoundError(f"{label} {ref.id} not found")
        return ref.id

    existing = _find_by_name(db, model, user_id, ref.name)
    if existing:
        return existing.id

    # Concurrent creators race here; the unique constraint picks the winner.
    row = model(user_id=user_id, name=ref.name)
    db.add(row)
    db.flush()
    logger.info("Created %s %s for user %s", label.lower(), row.id, user_id)
    return row.id


def resolve_category(db: Session, user_id: int, ref: Optional[Reference]) -> Optional[int]:
    """New categories are created top level."""
    return _resolve(db, Category, "Category", user_id, ref)


def resolve_product(db: Session, user_id: int, ref: Optional[Reference]) -> Optional[int]:
    """New products are created uncategorized."""
    return _resolve(db, Product, "Product", user_id, ref)


def resolve_tag(db: Session, user_id: int, ref: Optional[Reference]) -> Optional[int]:
    return _resolve(db, Tag, "Tag", user_id, ref)


def tag_reference(value: Union[int, str]) -> Optional[Reference]:
    if isinstance(value, int):
        return ById(value)
    return reference_from(name=value)


def resolve_tags(db: Session, user_id: int, values: Iterable[Union[int, str]]) -> List[int]:
    """Resolve tag references to ids, dropping blanks and repeats (first occurrence wins)."""
    tag_ids: List[int] = []
    for value in values:
        tag_id = resolve_tag(db, user_id, tag_reference(value))
        if tag_id is not None and tag_id not in tag_ids:
            tag_ids.append(tag_id)
    return tag_ids
