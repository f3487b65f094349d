"""
Database models package.
"""

from finance_tracker.models.user import User
from finance_tracker.models.category import Category
from finance_tracker.models.product import Product
from finance_tracker.models.product_price import ProductPrice
from finance_tracker.models.transaction import Transaction, TransactionType, transaction_tags
from finance_tracker.models.tag import Tag

__all__ = [
    "User",
    "Category",
    "Product",
    "ProductPrice",
    "Transaction",
    "TransactionType",
    "transaction_tags",
    "Tag",
]
