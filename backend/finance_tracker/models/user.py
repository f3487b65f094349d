"""
User database model.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from finance_tracker.database import Base


class User(Base):
    """Account holder. Every other row is scoped to one user."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # Relationships
    categories = relationship("Category", back_populates="user")
    products = relationship("Product", back_populates="user")
    tags = relationship("Tag", back_populates="user")
    transactions = relationship("Transaction", back_populates="user")
