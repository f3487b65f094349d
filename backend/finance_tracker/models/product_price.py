"""
Product price database model.
"""

from sqlalchemy import Column, Integer, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from finance_tracker.database import Base


class ProductPrice(Base):
    """Append-only price observation for a product."""

    __tablename__ = "product_prices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    price = Column(Integer, nullable=False)  # Minor units (cents)
    created_at = Column(DateTime, nullable=False)

    # Relationships
    product = relationship("Product", back_populates="prices")
    transactions = relationship("Transaction", back_populates="product_price")

    __table_args__ = (
        Index("idx_product_price_product_created", "product_id", "created_at"),
    )
