from .menu_category import Category
from .menu_item import MenuItem
from .menu_theme import MenuTheme
from .qr_code import QRCode

__all__ = [
    "Category",
    "MenuItem",
    "MenuTheme",
    "QRCode",
]
