from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional

from qrmenu.schemas.menu import (
    MenuThemeCreate,
    MenuThemeUpdate,
    MenuThemeRead,
)
from qrmenu.crud.menu import menu_theme
from qrmenu.db import get_db

router = APIRouter()


@router.post("/", response_model=MenuThemeRead)
async def create_menu_theme(
    payload: MenuThemeCreate,
    db: AsyncSession = Depends(get_db)
):
    """Create a new theme"""
    return await menu_theme.create_menu_theme(db, payload)


@router.get("/", response_model=List[MenuThemeRead])
async def list_menu_themes(db: AsyncSession = Depends(get_db)):
    """Get all themes, newest first"""
    return await menu_theme.get_menu_themes(db)


@router.get("/active", response_model=Optional[MenuThemeRead])
async def get_active_menu_theme(db: AsyncSession = Depends(get_db)):
    """Get the active theme (null when none is active)"""
    return await menu_theme.get_active_menu_theme(db)


@router.get("/{theme_id}", response_model=MenuThemeRead)
async def get_menu_theme(theme_id: int, db: AsyncSession = Depends(get_db)):
    """Get a specific theme"""
    theme = await menu_theme.get_menu_theme(db, theme_id)
    if not theme:
        raise HTTPException(status_code=404, detail="Menu theme not found")
    return theme


@router.put("/{theme_id}", response_model=MenuThemeRead)
async def update_menu_theme(
    theme_id: int,
    updates: MenuThemeUpdate,
    db: AsyncSession = Depends(get_db)
):
    """Update a theme"""
    theme = await menu_theme.update_menu_theme(db, theme_id, updates)
    if not theme:
        raise HTTPException(status_code=404, detail="Menu theme not found")
    return theme


@router.delete("/{theme_id}")
async def delete_menu_theme(theme_id: int, db: AsyncSession = Depends(get_db)):
    """Delete a theme"""
    if not await menu_theme.delete_menu_theme(db, theme_id):
        raise HTTPException(status_code=404, detail="Menu theme not found")
    return {"message": "Menu theme deleted"}
