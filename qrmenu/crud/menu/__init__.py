from . import category
from . import menu_item
from . import menu_theme
from . import qr_code

__all__ = [
    "category",
    "menu_item",
    "menu_theme",
    "qr_code",
]
