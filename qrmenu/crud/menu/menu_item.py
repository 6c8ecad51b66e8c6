from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
import logging

from qrmenu.core.exceptions import MissingCategoryError
from qrmenu.crud.common import commit_or_raise, next_timestamp
from qrmenu.crud.menu.category import get_category
from qrmenu.models.menu import Category, MenuItem
from qrmenu.schemas.menu import MenuItemCreate, MenuItemUpdate

log = logging.getLogger(__name__)


async def _require_category(db: AsyncSession, category_id: int) -> None:
    if not await get_category(db, category_id):
        log.warning("menu item refers to missing category: category_id=%s", category_id)
        raise MissingCategoryError(category_id)


async def create_menu_item(db: AsyncSession, menu_item: MenuItemCreate):
    """Create a new menu item inside an existing category"""
    await _require_category(db, menu_item.category_id)

    now = next_timestamp()
    new_item = MenuItem(
        name=menu_item.name,
        description=menu_item.description,
        price=menu_item.price,
        ingredients=menu_item.ingredients,
        image_url=menu_item.image_url,
        dietary_labels=list(menu_item.dietary_labels),
        is_available=menu_item.is_available,
        display_order=menu_item.display_order,
        category_id=menu_item.category_id,
        created_at=now,
        updated_at=now,
    )
    db.add(new_item)
    await commit_or_raise(db, "create_menu_item")
    await db.refresh(new_item)
    log.info("create_menu_item: id=%s category=%s", new_item.id, new_item.category_id)
    return new_item


async def get_menu_items(db: AsyncSession):
    """All menu items, grouped by category display order then item display order"""
    result = await db.execute(
        select(MenuItem)
        .join(Category, MenuItem.category_id == Category.id)
        .order_by(Category.display_order, Category.id, MenuItem.display_order, MenuItem.id)
    )
    return result.scalars().all()


async def get_menu_items_by_category(db: AsyncSession, category_id: int):
    """Items of one category; empty for an unknown category"""
    result = await db.execute(
        select(MenuItem)
        .where(MenuItem.category_id == category_id)
        .order_by(MenuItem.display_order, MenuItem.id)
    )
    return result.scalars().all()


async def get_menu_item(db: AsyncSession, item_id: int):
    """Get a specific menu item"""
    result = await db.execute(select(MenuItem).where(MenuItem.id == item_id))
    return result.scalar_one_or_none()


async def update_menu_item(db: AsyncSession, item_id: int, updates: MenuItemUpdate):
    """Update a menu item"""
    item = await get_menu_item(db, item_id)
    if not item:
        return None

    update_data = updates.changes()
    if "category_id" in update_data:
        await _require_category(db, update_data["category_id"])
    if "dietary_labels" in update_data:
        update_data["dietary_labels"] = list(update_data["dietary_labels"])

    for key, value in update_data.items():
        setattr(item, key, value)
    item.updated_at = next_timestamp(item.updated_at)

    await commit_or_raise(db, "update_menu_item")
    await db.refresh(item)
    return item


async def delete_menu_item(db: AsyncSession, item_id: int) -> bool:
    """Delete a menu item"""
    item = await get_menu_item(db, item_id)
    if not item:
        return False
    await db.delete(item)
    await commit_or_raise(db, "delete_menu_item")
    log.info("delete_menu_item: id=%s", item_id)
    return True
