"""
Transaction database model.
"""

import enum
from sqlalchemy import Column, Integer, DateTime, Enum, Text, ForeignKey, Index, Table
from sqlalchemy.orm import relationship
from finance_tracker.database import Base


class TransactionType(str, enum.Enum):
    """Transaction type enumeration."""
    Income = "Income"
    Expense = "Expense"


transaction_tags = Table(
    "transaction_tags",
    Base.metadata,
    Column("transaction_id", Integer, ForeignKey("transactions.id"), primary_key=True),
    Column("tag_id", Integer, ForeignKey("tags.id"), primary_key=True),
)


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    product_price_id = Column(Integer, ForeignKey("product_prices.id"), nullable=False)
    transaction_type = Column(
        Enum(TransactionType, native_enum=False, length=16),
        nullable=False,
    )
    description = Column(Text, nullable=True)
    date = Column(DateTime, nullable=False, index=True)

    # Relationships
    user = relationship("User", back_populates="transactions")
    product = relationship("Product", back_populates="transactions")
    product_price = relationship("ProductPrice", back_populates="transactions")
    tags = relationship("Tag", secondary=transaction_tags, back_populates="transactions", order_by="Tag.id")

    # Indexes for common queries
    __table_args__ = (
        Index("idx_transaction_user_date", "user_id", "date"),
    )
