from .common import (
    AbsoluteUrl,
    HexColor,
    NonEmptyStr,
    PartialUpdate,
)

from .category import (
    CategoryBase,
    CategoryCreate,
    CategoryUpdate,
    CategoryRead,
)

from .menu_item import (
    DietaryLabel,
    MenuItemBase,
    MenuItemCreate,
    MenuItemUpdate,
    MenuItemRead,
)

from .menu_theme import (
    ButtonShape,
    BackgroundType,
    MenuThemeBase,
    MenuThemeCreate,
    MenuThemeUpdate,
    MenuThemeRead,
)

from .qr_code import (
    QRCodeCreate,
    QRCodeUpdate,
    QRCodeRead,
)

__all__ = [
    # Shared
    "AbsoluteUrl",
    "HexColor",
    "NonEmptyStr",
    "PartialUpdate",
    # Categories
    "CategoryBase",
    "CategoryCreate",
    "CategoryUpdate",
    "CategoryRead",
    # Menu Items
    "DietaryLabel",
    "MenuItemBase",
    "MenuItemCreate",
    "MenuItemUpdate",
    "MenuItemRead",
    # Menu Themes
    "ButtonShape",
    "BackgroundType",
    "MenuThemeBase",
    "MenuThemeCreate",
    "MenuThemeUpdate",
    "MenuThemeRead",
    # QR Codes
    "QRCodeCreate",
    "QRCodeUpdate",
    "QRCodeRead",
]
