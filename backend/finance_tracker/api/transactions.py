"""
Transaction API endpoints.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from finance_tracker.dependencies import get_db, get_current_user_id
from finance_tracker.schemas.transaction import (
    CreateTransactionResponse,
    TransactionCreate,
    TransactionDto,
)
from finance_tracker.services import transaction_service

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=List[TransactionDto])
def list_transactions(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """List all of the caller's transactions with their tag ids"""
    return transaction_service.list_transactions(db, user_id)


@router.post("", response_model=CreateTransactionResponse)
def create_transaction(
    transaction: TransactionCreate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """
    Create a transaction. The product, its price and any tags may be given
    by id or by name; missing ones are created in the same unit of work.
    """
    return transaction_service.create_transaction(db, user_id, transaction)
