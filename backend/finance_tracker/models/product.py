"""
Product database model.
"""

from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from finance_tracker.database import Base


class Product(Base):
    """Something a user buys or sells, optionally filed under a category."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    name = Column(String(255), nullable=False)

    # Relationships
    user = relationship("User", back_populates="products")
    category = relationship("Category", back_populates="products")
    prices = relationship("ProductPrice", back_populates="product", order_by="ProductPrice.created_at")
    transactions = relationship("Transaction", back_populates="product")

    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_products_user_name"),
    )
