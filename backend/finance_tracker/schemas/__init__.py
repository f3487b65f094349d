"""
Pydantic schemas package.
"""

from finance_tracker.schemas.user import (
    UserCreate,
    LoginRequest,
    PublicUser,
    TokenResponse,
)
from finance_tracker.schemas.category import (
    CategoryCreate,
    CategorySummary,
    CategoryResponse,
    CreateCategoryResponse,
)
from finance_tracker.schemas.product import (
    ProductCreate,
    ProductResponse,
    ProductDto,
    CreateProductResponse,
)
from finance_tracker.schemas.product_price import (
    ProductPriceCreate,
    ProductPriceDto,
    CreateProductPriceResponse,
)
from finance_tracker.schemas.tag import (
    TagCreate,
    TagResponse,
    TagDto,
)
from finance_tracker.schemas.transaction import (
    TagReference,
    TransactionCreate,
    TransactionResponse,
    TransactionDto,
    CreateTransactionResponse,
)
from finance_tracker.schemas.analytics import (
    SpendingTimeSeriesEntry,
    CategorySpending,
    ProductPriceData,
)

__all__ = [
    "UserCreate",
    "LoginRequest",
    "PublicUser",
    "TokenResponse",
    "CategoryCreate",
    "CategorySummary",
    "CategoryResponse",
    "CreateCategoryResponse",
    "ProductCreate",
    "ProductResponse",
    "ProductDto",
    "CreateProductResponse",
    "ProductPriceCreate",
    "ProductPriceDto",
    "CreateProductPriceResponse",
    "TagCreate",
    "TagResponse",
    "TagDto",
    "TagReference",
    "TransactionCreate",
    "TransactionResponse",
    "TransactionDto",
    "CreateTransactionResponse",
    "SpendingTimeSeriesEntry",
    "CategorySpending",
    "ProductPriceData",
]
