from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from .common import NonEmptyStr, PartialUpdate


class CategoryBase(BaseModel):
    name: NonEmptyStr
    description: Optional[str] = None
    display_order: int = 0
    is_active: bool = True


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(PartialUpdate):
    nullable_fields = frozenset({"description"})

    name: Optional[NonEmptyStr] = None
    description: Optional[str] = None
    display_order: Optional[int] = None
    is_active: Optional[bool] = None


class CategoryRead(CategoryBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
