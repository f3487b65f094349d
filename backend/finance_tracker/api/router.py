"""
Main API router.
"""

from fastapi import APIRouter
from finance_tracker.api import analytics, categories, product_prices, products, tags, transactions, users

api_router = APIRouter()

api_router.include_router(users.router)
api_router.include_router(categories.router)
api_router.include_router(products.router)
api_router.include_router(product_prices.router)
api_router.include_router(transactions.router)
api_router.include_router(tags.router)
api_router.include_router(analytics.router)
