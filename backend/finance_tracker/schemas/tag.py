"""
Tag schemas.
"""

from pydantic import BaseModel, Field


class TagCreate(BaseModel):
    name: str = Field(..., max_length=100)


class TagResponse(BaseModel):
    id: int
    user_id: int
    name: str

    class Config:
        from_attributes = True


class TagDto(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
