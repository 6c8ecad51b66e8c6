from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
import logging

from qrmenu.core.exceptions import ConflictError
from qrmenu.crud.common import commit_or_raise, flush_or_raise, next_timestamp
from qrmenu.models.menu import MenuTheme
from qrmenu.schemas.menu import MenuThemeCreate, MenuThemeUpdate

log = logging.getLogger(__name__)


async def _deactivate_other_themes(db: AsyncSession, keep_id: int = None) -> None:
    """Switch off every active theme except ``keep_id``, inside the caller's transaction."""
    stmt = update(MenuTheme).where(MenuTheme.is_active.is_(True))
    if keep_id is not None:
        stmt = stmt.where(MenuTheme.id != keep_id)
    stmt = stmt.values(is_active=False, updated_at=next_timestamp())
    await db.execute(stmt.execution_options(synchronize_session="fetch"))


async def _flush_activation(db: AsyncSession, action: str) -> None:
    try:
        await flush_or_raise(db, action)
    except IntegrityError:
        # The partial unique index saw a second active theme from a concurrent writer
        await db.rollback()
        log.warning("%s: concurrent theme activation", action)
        raise ConflictError("Another menu theme was activated concurrently; retry the request")


async def create_menu_theme(db: AsyncSession, theme: MenuThemeCreate):
    """Create a theme; an active one replaces the current active theme"""
    if theme.is_active:
        await _deactivate_other_themes(db)

    now = next_timestamp()
    new_theme = MenuTheme(
        restaurant_name=theme.restaurant_name,
        button_color=theme.button_color,
        button_shape=theme.button_shape,
        background_type=theme.background_type,
        background_value=theme.background_value,
        border_radius=theme.border_radius,
        primary_color=theme.primary_color,
        text_color=theme.text_color,
        is_active=theme.is_active,
        created_at=now,
        updated_at=now,
    )
    db.add(new_theme)
    await _flush_activation(db, "create_menu_theme")
    await commit_or_raise(db, "create_menu_theme")
    await db.refresh(new_theme)
    log.info("create_menu_theme: id=%s active=%s", new_theme.id, new_theme.is_active)
    return new_theme


async def get_menu_themes(db: AsyncSession):
    """All themes, newest first"""
    result = await db.execute(
        select(MenuTheme).order_by(MenuTheme.created_at.desc(), MenuTheme.id.desc())
    )
    return result.scalars().all()


async def get_active_menu_theme(db: AsyncSession):
    """The active theme, or None"""
    result = await db.execute(
        select(MenuTheme)
        .where(MenuTheme.is_active.is_(True))
        .order_by(MenuTheme.created_at.desc(), MenuTheme.id.desc())
        .limit(1)
    )
    return result.scalars().first()


async def get_menu_theme(db: AsyncSession, theme_id: int):
    """Get a specific theme"""
    result = await db.execute(select(MenuTheme).where(MenuTheme.id == theme_id))
    return result.scalar_one_or_none()


async def update_menu_theme(db: AsyncSession, theme_id: int, updates: MenuThemeUpdate):
    """Update a theme; activating it deactivates all the others"""
    theme = await get_menu_theme(db, theme_id)
    if not theme:
        return None

    update_data = updates.changes()
    if update_data.get("is_active") is True:
        await _deactivate_other_themes(db, keep_id=theme_id)

    for key, value in update_data.items():
        setattr(theme, key, value)
    theme.updated_at = next_timestamp(theme.updated_at)

    await _flush_activation(db, "update_menu_theme")
    await commit_or_raise(db, "update_menu_theme")
    await db.refresh(theme)
    if update_data.get("is_active") is True:
        log.info("update_menu_theme: id=%s is now the active theme", theme_id)
    return theme


async def delete_menu_theme(db: AsyncSession, theme_id: int) -> bool:
    """Delete a theme; removing the active one leaves none active"""
    theme = await get_menu_theme(db, theme_id)
    if not theme:
        return False
    await db.delete(theme)
    await commit_or_raise(db, "delete_menu_theme")
    log.info("delete_menu_theme: id=%s", theme_id)
    return True
