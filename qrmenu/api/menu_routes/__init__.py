from fastapi import APIRouter
from . import category_routes
from . import menu_item_routes
from . import menu_theme_routes
from . import qr_code_routes

# Main menu admin router
router = APIRouter()

router.include_router(category_routes.router, prefix="/categories", tags=["Categories"])
router.include_router(menu_item_routes.router, prefix="/menu-items", tags=["Menu Items"])
router.include_router(menu_theme_routes.router, prefix="/menu-themes", tags=["Menu Themes"])
router.include_router(qr_code_routes.router, prefix="/qr-codes", tags=["QR Codes"])

__all__ = ["router"]
