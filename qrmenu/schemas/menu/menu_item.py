from pydantic import AfterValidator, BaseModel, Field, field_serializer, field_validator
from typing import Annotated, Optional, List
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from .common import AbsoluteUrl, NonEmptyStr, PartialUpdate


class DietaryLabel(str, Enum):
    vegetarian = "vegetarian"
    vegan = "vegan"
    gluten_free = "gluten-free"
    dairy_free = "dairy-free"
    nut_free = "nut-free"
    keto = "keto"
    low_carb = "low-carb"
    halal = "halal"
    kosher = "kosher"
    spicy = "spicy"
    organic = "organic"


CENT = Decimal("0.01")
MAX_PRICE = Decimal("99999999.99")  # NUMERIC(10, 2) in the store


def _round_to_cents(value: Decimal) -> Decimal:
    """Round half up to cents, the scale the store keeps."""
    if value > MAX_PRICE + 1:
        raise ValueError(f"price must not exceed {MAX_PRICE}")
    value = value.quantize(CENT, rounding=ROUND_HALF_UP)
    if value > MAX_PRICE:
        raise ValueError(f"price must not exceed {MAX_PRICE}")
    if value <= 0:
        raise ValueError("price must be at least 0.01 after rounding to cents")
    return value


Price = Annotated[Decimal, Field(gt=0, allow_inf_nan=False), AfterValidator(_round_to_cents)]


class MenuItemBase(BaseModel):
    name: NonEmptyStr
    description: Optional[str] = None
    price: Price
    ingredients: Optional[str] = None
    image_url: Optional[AbsoluteUrl] = None
    dietary_labels: List[DietaryLabel] = []
    is_available: bool = True
    display_order: int = 0
    category_id: int


class MenuItemCreate(MenuItemBase):
    class Config:
        use_enum_values = True


class MenuItemUpdate(PartialUpdate):
    nullable_fields = frozenset({"description", "ingredients", "image_url"})

    name: Optional[NonEmptyStr] = None
    description: Optional[str] = None
    price: Optional[Price] = None
    ingredients: Optional[str] = None
    image_url: Optional[AbsoluteUrl] = None
    dietary_labels: Optional[List[DietaryLabel]] = None
    is_available: Optional[bool] = None
    display_order: Optional[int] = None
    category_id: Optional[int] = None


class MenuItemRead(MenuItemBase):
    id: int
    created_at: datetime
    updated_at: datetime

    @field_validator("dietary_labels", mode="before")
    @classmethod
    def labels_never_null(cls, value):
        return value or []

    @field_serializer("price")
    def price_as_number(self, price: Decimal) -> float:
        return float(price)

    class Config:
        from_attributes = True
