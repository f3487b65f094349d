"""
Shared schema helpers.
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, Field


def to_naive_utc(value: datetime) -> datetime:
    """Timestamps are stored without zone; aware inputs are normalised to UTC."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


Timestamp = Annotated[datetime, AfterValidator(to_naive_utc)]

# Largest amount whose cents still fit the 32-bit price column.
MAX_PRICE = 21474836.47

Price = Annotated[float, Field(allow_inf_nan=False, le=MAX_PRICE)]
