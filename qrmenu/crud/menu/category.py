from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
import logging

from qrmenu.core.exceptions import CategoryInUseError
from qrmenu.crud.common import commit_or_raise, flush_or_raise, next_timestamp
from qrmenu.models.menu import Category, MenuItem
from qrmenu.schemas.menu import CategoryCreate, CategoryUpdate

log = logging.getLogger(__name__)


async def create_category(db: AsyncSession, category: CategoryCreate):
    """Create a new category"""
    now = next_timestamp()
    new_category = Category(
        name=category.name,
        description=category.description,
        display_order=category.display_order,
        is_active=category.is_active,
        created_at=now,
        updated_at=now,
    )
    db.add(new_category)
    await commit_or_raise(db, "create_category")
    await db.refresh(new_category)
    log.info("create_category: id=%s name=%s", new_category.id, new_category.name)
    return new_category


async def get_categories(db: AsyncSession):
    """Active categories by display order (insertion order on ties)"""
    result = await db.execute(
        select(Category)
        .where(Category.is_active.is_(True))
        .order_by(Category.display_order, Category.id)
    )
    return result.scalars().all()


async def get_category(db: AsyncSession, category_id: int):
    """Get a specific category"""
    result = await db.execute(select(Category).where(Category.id == category_id))
    return result.scalar_one_or_none()


async def update_category(db: AsyncSession, category_id: int, updates: CategoryUpdate):
    """Update a category; an empty payload only bumps updated_at"""
    category = await get_category(db, category_id)
    if not category:
        return None

    for key, value in updates.changes().items():
        setattr(category, key, value)
    category.updated_at = next_timestamp(category.updated_at)

    await commit_or_raise(db, "update_category")
    await db.refresh(category)
    return category


async def count_menu_items(db: AsyncSession, category_id: int) -> int:
    result = await db.execute(
        select(func.count(MenuItem.id)).where(MenuItem.category_id == category_id)
    )
    return result.scalar_one()


async def delete_category(db: AsyncSession, category_id: int) -> bool:
    """Delete a category that no menu item references"""
    category = await get_category(db, category_id)
    if not category:
        return False

    item_count = await count_menu_items(db, category_id)
    if item_count:
        log.warning("delete_category refused: id=%s items=%s", category_id, item_count)
        raise CategoryInUseError(category_id, item_count)

    await db.delete(category)
    try:
        await flush_or_raise(db, "delete_category")
    except IntegrityError:
        # An item was added after the count; the foreign key kept it from being orphaned
        await db.rollback()
        item_count = await count_menu_items(db, category_id)
        log.warning("delete_category lost race: id=%s items=%s", category_id, item_count)
        raise CategoryInUseError(category_id, item_count)

    await commit_or_raise(db, "delete_category")
    log.info("delete_category: id=%s", category_id)
    return True
