"""
Tag API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from finance_tracker.dependencies import get_db, get_current_user_id
from finance_tracker.models import Tag
from finance_tracker.schemas.tag import TagCreate, TagResponse
from finance_tracker.services.catalog_service import create_tag as create_tag_for_user

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=List[TagResponse])
def list_tags(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return db.query(Tag).filter(Tag.user_id == user_id).order_by(Tag.id).all()


@router.post("", response_model=TagResponse)
def create_tag(
    tag: TagCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    return create_tag_for_user(db, user_id, tag)
