from pydantic import BaseModel, Field
from typing import Annotated, Optional
from datetime import datetime
from enum import Enum

from .common import HexColor, NonEmptyStr, PartialUpdate


class ButtonShape(str, Enum):
    rounded = "rounded"
    square = "square"
    pill = "pill"


class BackgroundType(str, Enum):
    color = "color"
    image = "image"


BorderRadius = Annotated[int, Field(ge=0, le=50)]


class MenuThemeBase(BaseModel):
    restaurant_name: NonEmptyStr
    button_color: HexColor
    button_shape: ButtonShape
    background_type: BackgroundType
    # Hex color or image URL; not checked against background_type
    background_value: NonEmptyStr
    border_radius: BorderRadius
    primary_color: HexColor
    text_color: HexColor
    is_active: bool = True


class MenuThemeCreate(MenuThemeBase):
    class Config:
        use_enum_values = True


class MenuThemeUpdate(PartialUpdate):
    restaurant_name: Optional[NonEmptyStr] = None
    button_color: Optional[HexColor] = None
    button_shape: Optional[ButtonShape] = None
    background_type: Optional[BackgroundType] = None
    background_value: Optional[NonEmptyStr] = None
    border_radius: Optional[BorderRadius] = None
    primary_color: Optional[HexColor] = None
    text_color: Optional[HexColor] = None
    is_active: Optional[bool] = None


class MenuThemeRead(MenuThemeBase):
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
