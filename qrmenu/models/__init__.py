from .base import Base
from .menu import (
    Category,
    MenuItem,
    MenuTheme,
    QRCode,
)
